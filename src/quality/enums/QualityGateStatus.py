from enum import Enum as PyEnum


class QualityGateStatus(PyEnum):
    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
