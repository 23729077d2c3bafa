from quality.schemas.analysis import AnalysisRunCounts
from quality.schemas.threshold import (
    ThresholdResult,
    ThresholdSet,
    ThresholdSetBuilder,
)
from quality.schemas.quality_gate import (
    Thresholds,
    QualityGate,
    QualityGateBuilder,
    QualityGateResult,
)

__all__ = [
    "AnalysisRunCounts",
    "ThresholdResult",
    "ThresholdSet",
    "ThresholdSetBuilder",
    "Thresholds",
    "QualityGate",
    "QualityGateBuilder",
    "QualityGateResult",
]
