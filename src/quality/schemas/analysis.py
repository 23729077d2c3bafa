from typing import Tuple

from pydantic import BaseModel, ConfigDict

from quality.enums import IssueScope, Severity
from quality.schemas.fields import StrictNonNegativeInt


class AnalysisRunCounts(BaseModel):
    """Количество замечаний одного запуска анализа: все и новые, по приоритетам."""

    model_config = ConfigDict(frozen=True)

    total: StrictNonNegativeInt = 0
    total_high: StrictNonNegativeInt = 0
    total_normal: StrictNonNegativeInt = 0
    total_low: StrictNonNegativeInt = 0
    new: StrictNonNegativeInt = 0
    new_high: StrictNonNegativeInt = 0
    new_normal: StrictNonNegativeInt = 0
    new_low: StrictNonNegativeInt = 0

    def counts(self, scope: IssueScope) -> Tuple[int, int, int, int]:
        if scope == IssueScope.TOTAL:
            return self.total, self.total_high, self.total_normal, self.total_low
        return self.new, self.new_high, self.new_normal, self.new_low

    def count(self, scope: IssueScope, severity: Severity) -> int:
        return self.counts(scope)[list(Severity).index(severity)]
