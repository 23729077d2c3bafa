from quality.enums.IssueScope import IssueScope
from quality.enums.QualityGateStatus import QualityGateStatus
from quality.enums.Severity import Severity

__all__ = [
    "IssueScope",
    "QualityGateStatus",
    "Severity",
]
