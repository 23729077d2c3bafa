import pytest
from pydantic import ValidationError

from quality.enums import IssueScope, QualityGateStatus, Severity
from quality.schemas import (
    AnalysisRunCounts,
    QualityGate,
    QualityGateBuilder,
    ThresholdSet,
    Thresholds,
)


# -------------------- Фикстуры --------------------


@pytest.fixture
def run() -> AnalysisRunCounts:
    return AnalysisRunCounts(
        total=15,
        total_high=2,
        total_normal=8,
        total_low=5,
        new=4,
        new_high=1,
        new_normal=2,
        new_low=1,
    )


@pytest.fixture
def thresholds() -> Thresholds:
    return Thresholds(
        failed_total_all=20,
        failed_total_high=3,
        unstable_total_all=10,
        unstable_total_normal=8,
        failed_new_high=1,
        unstable_new_all=4,
        unstable_new_low=2,
    )


def gate_with(**threshold_sets: ThresholdSet) -> QualityGate:
    """Создаёт QualityGate, в котором заданы только указанные категории."""
    return QualityGate(**threshold_sets)


# -------------------- Тесты для AnalysisRunCounts --------------------


def test_counts_by_scope(run: AnalysisRunCounts) -> None:
    assert run.counts(IssueScope.TOTAL) == (15, 2, 8, 5)
    assert run.counts(IssueScope.NEW) == (4, 1, 2, 1)
    assert run.count(IssueScope.TOTAL, Severity.NORMAL) == 8
    assert run.count(IssueScope.NEW, Severity.ALL) == 4


def test_negative_counts_rejected() -> None:
    with pytest.raises(ValidationError):
        AnalysisRunCounts(total=-1)


# -------------------- Тесты для построения QualityGate --------------------


def test_from_thresholds(thresholds: Thresholds) -> None:
    gate = QualityGate.from_thresholds(thresholds)

    assert gate.total_failed_threshold == ThresholdSet(total_threshold=20, high_threshold=3)
    assert gate.total_unstable_threshold == ThresholdSet(total_threshold=10, normal_threshold=8)
    assert gate.new_failed_threshold == ThresholdSet(high_threshold=1)
    assert gate.new_unstable_threshold == ThresholdSet(total_threshold=4, low_threshold=2)


def test_thresholds_reject_negative_and_unknown_values() -> None:
    with pytest.raises(ValidationError):
        Thresholds(failed_total_all=-5)
    with pytest.raises(ValidationError):
        Thresholds(failed_total_critical=5)


def test_builder_defaults_to_disabled() -> None:
    gate = QualityGateBuilder().build()

    assert gate == QualityGate()
    assert not gate.enabled


def test_builder_equals_flat_construction(thresholds: Thresholds) -> None:
    built = (
        QualityGateBuilder()
        .set_total_failed_threshold(ThresholdSet(total_threshold=20, high_threshold=3))
        .set_total_unstable_threshold(ThresholdSet(total_threshold=10, normal_threshold=8))
        .set_new_failed_threshold(ThresholdSet(high_threshold=1))
        .set_new_unstable_threshold(ThresholdSet(total_threshold=4, low_threshold=2))
        .build()
    )
    flat = QualityGate.from_thresholds(thresholds)

    assert built == flat
    assert hash(built) == hash(flat)


def test_builder_with_only_new_failed_matches_explicit_gate(run: AnalysisRunCounts) -> None:
    new_failed = ThresholdSet(total_threshold=3)
    built = QualityGateBuilder().set_new_failed_threshold(new_failed).build()
    explicit = QualityGate(
        total_failed_threshold=ThresholdSet(
            total_threshold=0, high_threshold=0, normal_threshold=0, low_threshold=0
        ),
        total_unstable_threshold=ThresholdSet(
            total_threshold=0, high_threshold=0, normal_threshold=0, low_threshold=0
        ),
        new_failed_threshold=new_failed,
        new_unstable_threshold=ThresholdSet(
            total_threshold=0, high_threshold=0, normal_threshold=0, low_threshold=0
        ),
    )

    built_result = built.evaluate(run)
    explicit_result = explicit.evaluate(run)

    assert built_result.overall_result == explicit_result.overall_result
    assert built_result.messages == explicit_result.messages
    assert built_result == explicit_result


def test_enabled() -> None:
    assert not QualityGate().enabled
    assert gate_with(total_failed_threshold=ThresholdSet(low_threshold=1)).enabled
    assert gate_with(total_unstable_threshold=ThresholdSet(total_threshold=1)).enabled
    assert gate_with(new_failed_threshold=ThresholdSet(normal_threshold=1)).enabled
    assert gate_with(new_unstable_threshold=ThresholdSet(high_threshold=1)).enabled


# -------------------- Тесты для итогового результата --------------------


def test_disabled_gate_is_success(run: AnalysisRunCounts) -> None:
    result = QualityGate().evaluate(run)

    assert result.overall_result == QualityGateStatus.SUCCESS
    assert result.messages == []


def test_all_categories_pass(run: AnalysisRunCounts) -> None:
    gate = QualityGate.from_thresholds(
        Thresholds(failed_total_all=100, unstable_total_all=50, failed_new_all=10, unstable_new_all=5)
    )

    result = gate.evaluate(run)

    assert result.total_failed.success
    assert result.total_unstable.success
    assert result.new_failed.success
    assert result.new_unstable.success
    assert result.overall_result == QualityGateStatus.SUCCESS


@pytest.mark.parametrize(
    "category",
    ["total_unstable_threshold", "new_unstable_threshold"],
)
def test_unstable_when_only_unstable_reached(run: AnalysisRunCounts, category: str) -> None:
    result = gate_with(**{category: ThresholdSet(total_threshold=1)}).evaluate(run)

    assert result.overall_result == QualityGateStatus.UNSTABLE


@pytest.mark.parametrize(
    "category",
    ["total_failed_threshold", "new_failed_threshold"],
)
def test_failure_when_failed_reached(run: AnalysisRunCounts, category: str) -> None:
    result = gate_with(**{category: ThresholdSet(total_threshold=1)}).evaluate(run)

    assert result.overall_result == QualityGateStatus.FAILURE


def test_failure_dominates_unstable(run: AnalysisRunCounts) -> None:
    gate = gate_with(
        total_failed_threshold=ThresholdSet(total_threshold=15),
        total_unstable_threshold=ThresholdSet(total_threshold=10),
    )

    result = gate.evaluate(run)

    assert not result.total_failed.success
    assert not result.total_unstable.success
    assert result.overall_result == QualityGateStatus.FAILURE


def test_new_failed_dominates_total_unstable(run: AnalysisRunCounts) -> None:
    gate = gate_with(
        total_unstable_threshold=ThresholdSet(total_threshold=1),
        new_failed_threshold=ThresholdSet(high_threshold=1),
    )

    assert gate.evaluate(run).overall_result == QualityGateStatus.FAILURE


# -------------------- Тесты для сообщений --------------------


def test_single_total_failed_message() -> None:
    gate = gate_with(total_failed_threshold=ThresholdSet(total_threshold=10))

    messages = gate.evaluate(AnalysisRunCounts(total=15)).messages

    assert messages == ["FAILURE -> Total number of issues: 15 - Quality Gate: 10"]


def test_messages_order(run: AnalysisRunCounts, thresholds: Thresholds) -> None:
    result = QualityGate.from_thresholds(thresholds).evaluate(run)

    assert result.get_evaluations() == [
        "UNSTABLE -> Total number of issues: 15 - Quality Gate: 10",
        "UNSTABLE -> Number of normal priority issues: 8 - Quality Gate: 8",
        "FAILURE -> Number of new high priority issues: 1 - Quality Gate: 1",
        "UNSTABLE -> New number of new issues: 4 - Quality Gate: 4",
    ]
    assert result.overall_result == QualityGateStatus.FAILURE


def test_all_sixteen_messages() -> None:
    every_limit = ThresholdSet(
        total_threshold=1, high_threshold=1, normal_threshold=1, low_threshold=1
    )
    gate = QualityGate(
        total_failed_threshold=every_limit,
        total_unstable_threshold=every_limit,
        new_failed_threshold=every_limit,
        new_unstable_threshold=every_limit,
    )
    run = AnalysisRunCounts(
        total=9, total_high=2, total_normal=3, total_low=4,
        new=6, new_high=1, new_normal=2, new_low=3,
    )

    messages = gate.evaluate(run).messages

    assert messages == [
        "FAILURE -> Total number of issues: 9 - Quality Gate: 1",
        "FAILURE -> Number of high priority issues: 2 - Quality Gate: 1",
        "FAILURE -> Number of normal priority issues: 3 - Quality Gate: 1",
        "FAILURE -> Number of low priority issues: 4 - Quality Gate: 1",
        "UNSTABLE -> Total number of issues: 9 - Quality Gate: 1",
        "UNSTABLE -> Number of high priority issues: 2 - Quality Gate: 1",
        "UNSTABLE -> Number of normal priority issues: 3 - Quality Gate: 1",
        "UNSTABLE -> Number of low priority issues: 4 - Quality Gate: 1",
        "FAILURE -> Number of new issues: 6 - Quality Gate: 1",
        "FAILURE -> Number of new high priority issues: 1 - Quality Gate: 1",
        "FAILURE -> Number of new normal priority issues: 2 - Quality Gate: 1",
        "FAILURE -> Number of new low priority issues: 3 - Quality Gate: 1",
        "UNSTABLE -> New number of new issues: 6 - Quality Gate: 1",
        "UNSTABLE -> Number of new high priority issues: 1 - Quality Gate: 1",
        "UNSTABLE -> Number of new normal priority issues: 2 - Quality Gate: 1",
        "UNSTABLE -> Number of new low priority issues: 3 - Quality Gate: 1",
    ]


def test_gate_is_reusable_across_runs() -> None:
    gate = gate_with(new_unstable_threshold=ThresholdSet(total_threshold=2))

    assert gate.evaluate(AnalysisRunCounts(new=1)).overall_result == QualityGateStatus.SUCCESS
    assert gate.evaluate(AnalysisRunCounts(new=2)).overall_result == QualityGateStatus.UNSTABLE
