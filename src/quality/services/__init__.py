from quality.services.quality_gate_service import QualityGateService, configure_logging

__all__ = [
    "QualityGateService",
    "configure_logging",
]
