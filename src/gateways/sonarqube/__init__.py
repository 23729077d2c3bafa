from gateways.sonarqube.schemas import (
    IssueCounts,
    CheckResult,
    Vulnerabilities,
    CodeSmells,
    Bugs,
    SonarQubeResults,
)
from gateways.sonarqube.mapper import to_analysis_run_counts

__all__ = [
    "IssueCounts",
    "CheckResult",
    "Vulnerabilities",
    "CodeSmells",
    "Bugs",
    "SonarQubeResults",
    "to_analysis_run_counts",
]
