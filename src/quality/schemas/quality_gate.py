from typing import List

from pydantic import BaseModel, ConfigDict

from quality.enums import IssueScope, QualityGateStatus, Severity
from quality.schemas.fields import StrictNonNegativeInt
from quality.schemas.analysis import AnalysisRunCounts
from quality.schemas.threshold import ThresholdResult, ThresholdSet


class Thresholds(BaseModel):
    """Плоский набор из 16 порогов: 4 категории x 4 приоритета."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    failed_total_all: StrictNonNegativeInt = 0
    failed_total_high: StrictNonNegativeInt = 0
    failed_total_normal: StrictNonNegativeInt = 0
    failed_total_low: StrictNonNegativeInt = 0

    unstable_total_all: StrictNonNegativeInt = 0
    unstable_total_high: StrictNonNegativeInt = 0
    unstable_total_normal: StrictNonNegativeInt = 0
    unstable_total_low: StrictNonNegativeInt = 0

    failed_new_all: StrictNonNegativeInt = 0
    failed_new_high: StrictNonNegativeInt = 0
    failed_new_normal: StrictNonNegativeInt = 0
    failed_new_low: StrictNonNegativeInt = 0

    unstable_new_all: StrictNonNegativeInt = 0
    unstable_new_high: StrictNonNegativeInt = 0
    unstable_new_normal: StrictNonNegativeInt = 0
    unstable_new_low: StrictNonNegativeInt = 0

    def threshold_set(self, prefix: str) -> ThresholdSet:
        return ThresholdSet(
            total_threshold=getattr(self, f"{prefix}_all"),
            high_threshold=getattr(self, f"{prefix}_high"),
            normal_threshold=getattr(self, f"{prefix}_normal"),
            low_threshold=getattr(self, f"{prefix}_low"),
        )


class QualityGate(BaseModel):
    """
    Пороги качества для запуска статического анализа.

    Четыре независимые категории: все замечания до FAILURE и до UNSTABLE,
    новые замечания до FAILURE и до UNSTABLE.
    """

    model_config = ConfigDict(frozen=True)

    total_failed_threshold: ThresholdSet = ThresholdSet()
    total_unstable_threshold: ThresholdSet = ThresholdSet()
    new_failed_threshold: ThresholdSet = ThresholdSet()
    new_unstable_threshold: ThresholdSet = ThresholdSet()

    @classmethod
    def from_thresholds(cls, thresholds: Thresholds) -> "QualityGate":
        return cls(
            total_failed_threshold=thresholds.threshold_set("failed_total"),
            total_unstable_threshold=thresholds.threshold_set("unstable_total"),
            new_failed_threshold=thresholds.threshold_set("failed_new"),
            new_unstable_threshold=thresholds.threshold_set("unstable_new"),
        )

    @property
    def enabled(self) -> bool:
        return (
            self.total_failed_threshold.enabled
            or self.total_unstable_threshold.enabled
            or self.new_failed_threshold.enabled
            or self.new_unstable_threshold.enabled
        )

    def evaluate(self, run: AnalysisRunCounts) -> "QualityGateResult":
        """
        Применяет пороги качества к запуску анализа.

        Args:
            run (AnalysisRunCounts): Количество замечаний запуска.

        Returns:
            QualityGateResult: Результаты по каждой из четырёх категорий.
        """
        total_counts = run.counts(IssueScope.TOTAL)
        new_counts = run.counts(IssueScope.NEW)
        return QualityGateResult(
            total_failed=self.total_failed_threshold.evaluate(*total_counts),
            total_unstable=self.total_unstable_threshold.evaluate(*total_counts),
            new_failed=self.new_failed_threshold.evaluate(*new_counts),
            new_unstable=self.new_unstable_threshold.evaluate(*new_counts),
            run=run,
            gate=self,
        )


class QualityGateResult(BaseModel):
    """Результат применения QualityGate к одному запуску анализа."""

    model_config = ConfigDict(frozen=True)

    total_failed: ThresholdResult
    total_unstable: ThresholdResult
    new_failed: ThresholdResult
    new_unstable: ThresholdResult
    run: AnalysisRunCounts
    gate: QualityGate

    @property
    def overall_result(self) -> QualityGateStatus:
        if not self.total_failed.success or not self.new_failed.success:
            return QualityGateStatus.FAILURE
        if not self.total_unstable.success or not self.new_unstable.success:
            return QualityGateStatus.UNSTABLE
        return QualityGateStatus.SUCCESS

    @property
    def messages(self) -> List[str]:
        return self.get_evaluations()

    def get_evaluations(self) -> List[str]:
        """Сообщения о всех достигнутых порогах в фиксированном порядке категорий и приоритетов."""
        messages: List[str] = []
        for result_field, threshold_field, status, scope in _CATEGORIES:
            result: ThresholdResult = getattr(self, result_field)
            thresholds: ThresholdSet = getattr(self.gate, threshold_field)
            for severity in Severity:
                if result.reached(severity):
                    messages.append(
                        "%s -> %s: %d - Quality Gate: %d"
                        % (
                            status.value,
                            _describe(status, scope, severity),
                            self.run.count(scope, severity),
                            thresholds.limit(severity),
                        )
                    )
        return messages


class QualityGateBuilder:
    """Собирает QualityGate; не заданные категории остаются отключёнными."""

    def __init__(self) -> None:
        self.total_failed_threshold = ThresholdSet()
        self.total_unstable_threshold = ThresholdSet()
        self.new_failed_threshold = ThresholdSet()
        self.new_unstable_threshold = ThresholdSet()

    def set_total_failed_threshold(self, threshold: ThresholdSet) -> "QualityGateBuilder":
        self.total_failed_threshold = threshold
        return self

    def set_total_unstable_threshold(self, threshold: ThresholdSet) -> "QualityGateBuilder":
        self.total_unstable_threshold = threshold
        return self

    def set_new_failed_threshold(self, threshold: ThresholdSet) -> "QualityGateBuilder":
        self.new_failed_threshold = threshold
        return self

    def set_new_unstable_threshold(self, threshold: ThresholdSet) -> "QualityGateBuilder":
        self.new_unstable_threshold = threshold
        return self

    def build(self) -> QualityGate:
        return QualityGate(
            total_failed_threshold=self.total_failed_threshold,
            total_unstable_threshold=self.total_unstable_threshold,
            new_failed_threshold=self.new_failed_threshold,
            new_unstable_threshold=self.new_unstable_threshold,
        )


_CATEGORIES = (
    ("total_failed", "total_failed_threshold", QualityGateStatus.FAILURE, IssueScope.TOTAL),
    ("total_unstable", "total_unstable_threshold", QualityGateStatus.UNSTABLE, IssueScope.TOTAL),
    ("new_failed", "new_failed_threshold", QualityGateStatus.FAILURE, IssueScope.NEW),
    ("new_unstable", "new_unstable_threshold", QualityGateStatus.UNSTABLE, IssueScope.NEW),
)

_DESCRIPTIONS = {
    (IssueScope.TOTAL, Severity.ALL): "Total number of issues",
    (IssueScope.TOTAL, Severity.HIGH): "Number of high priority issues",
    (IssueScope.TOTAL, Severity.NORMAL): "Number of normal priority issues",
    (IssueScope.TOTAL, Severity.LOW): "Number of low priority issues",
    (IssueScope.NEW, Severity.ALL): "Number of new issues",
    (IssueScope.NEW, Severity.HIGH): "Number of new high priority issues",
    (IssueScope.NEW, Severity.NORMAL): "Number of new normal priority issues",
    (IssueScope.NEW, Severity.LOW): "Number of new low priority issues",
}


def _describe(status: QualityGateStatus, scope: IssueScope, severity: Severity) -> str:
    if status == QualityGateStatus.UNSTABLE and scope == IssueScope.NEW and severity == Severity.ALL:
        return "New number of new issues"
    return _DESCRIPTIONS[(scope, severity)]
