from pydantic import BaseModel, ConfigDict

from quality.enums import Severity
from quality.schemas.fields import StrictNonNegativeInt


class ThresholdResult(BaseModel):
    """Результат проверки одного набора порогов."""

    model_config = ConfigDict(frozen=True)

    total_reached: bool = False
    high_reached: bool = False
    normal_reached: bool = False
    low_reached: bool = False

    @property
    def success(self) -> bool:
        return not (
            self.total_reached
            or self.high_reached
            or self.normal_reached
            or self.low_reached
        )

    def reached(self, severity: Severity) -> bool:
        return getattr(self, _REACHED_FIELDS[severity])


class ThresholdSet(BaseModel):
    """
    Набор из четырёх порогов: общее число замечаний и число замечаний
    высокого, среднего и низкого приоритета.

    Значение 0 отключает порог.
    """

    model_config = ConfigDict(frozen=True)

    total_threshold: StrictNonNegativeInt = 0
    high_threshold: StrictNonNegativeInt = 0
    normal_threshold: StrictNonNegativeInt = 0
    low_threshold: StrictNonNegativeInt = 0

    @property
    def enabled(self) -> bool:
        return any(self.limit(severity) > 0 for severity in Severity)

    def limit(self, severity: Severity) -> int:
        return getattr(self, _THRESHOLD_FIELDS[severity])

    def evaluate(self, total: int, high: int, normal: int, low: int) -> ThresholdResult:
        """
        Проверяет количество замечаний по каждому из четырёх порогов.

        Args:
            total (int): Общее количество замечаний.
            high (int): Количество замечаний высокого приоритета.
            normal (int): Количество замечаний среднего приоритета.
            low (int): Количество замечаний низкого приоритета.

        Returns:
            ThresholdResult: Какие из порогов достигнуты.
        """
        return ThresholdResult(
            total_reached=_is_reached(total, self.total_threshold),
            high_reached=_is_reached(high, self.high_threshold),
            normal_reached=_is_reached(normal, self.normal_threshold),
            low_reached=_is_reached(low, self.low_threshold),
        )


class ThresholdSetBuilder:
    """
    Изменяемый построитель ThresholdSet. Значения сохраняются между вызовами build(),
    поэтому экземпляр не следует разделять между потоками.
    """

    def __init__(self) -> None:
        self.total_threshold = 0
        self.high_threshold = 0
        self.normal_threshold = 0
        self.low_threshold = 0

    def set_total_threshold(self, total_threshold: int) -> "ThresholdSetBuilder":
        self.total_threshold = total_threshold
        return self

    def set_high_threshold(self, high_threshold: int) -> "ThresholdSetBuilder":
        self.high_threshold = high_threshold
        return self

    def set_normal_threshold(self, normal_threshold: int) -> "ThresholdSetBuilder":
        self.normal_threshold = normal_threshold
        return self

    def set_low_threshold(self, low_threshold: int) -> "ThresholdSetBuilder":
        self.low_threshold = low_threshold
        return self

    def build(self) -> ThresholdSet:
        return ThresholdSet(
            total_threshold=self.total_threshold,
            high_threshold=self.high_threshold,
            normal_threshold=self.normal_threshold,
            low_threshold=self.low_threshold,
        )


def _is_reached(count: int, threshold: int) -> bool:
    # отключённый порог не срабатывает даже при count == 0
    if threshold <= 0:
        return False
    return count >= threshold


_THRESHOLD_FIELDS = {
    Severity.ALL: "total_threshold",
    Severity.HIGH: "high_threshold",
    Severity.NORMAL: "normal_threshold",
    Severity.LOW: "low_threshold",
}

_REACHED_FIELDS = {
    Severity.ALL: "total_reached",
    Severity.HIGH: "high_reached",
    Severity.NORMAL: "normal_reached",
    Severity.LOW: "low_reached",
}
