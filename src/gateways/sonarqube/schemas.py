from typing import Optional

from pydantic import BaseModel, NonNegativeInt


class IssueCounts(BaseModel):
    total: NonNegativeInt
    critical: NonNegativeInt
    major: NonNegativeInt
    minor: NonNegativeInt

    def __add__(self, other: "IssueCounts") -> "IssueCounts":
        return IssueCounts(
            total=self.total + other.total,
            critical=self.critical + other.critical,
            major=self.major + other.major,
            minor=self.minor + other.minor,
        )


class Bugs(IssueCounts):
    pass


class CodeSmells(IssueCounts):
    pass


class Vulnerabilities(IssueCounts):
    pass


class CheckResult(BaseModel):
    bugs: Bugs
    code_smells: CodeSmells
    vulnerabilities: Vulnerabilities

    def issues(self) -> IssueCounts:
        return self.bugs + self.code_smells + self.vulnerabilities


class SonarQubeResults(BaseModel):
    sonarqube: CheckResult
    new_code: Optional[CheckResult] = None
