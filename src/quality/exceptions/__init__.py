from quality.exceptions.quality import (
    InvalidThresholdException,
    InvalidAnalysisResultException,
)

__all__ = [
    "InvalidThresholdException",
    "InvalidAnalysisResultException",
]
