import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from gateways.sonarqube import SonarQubeResults, to_analysis_run_counts
from quality.enums import QualityGateStatus
from quality.exceptions import (
    InvalidAnalysisResultException,
    InvalidThresholdException,
)
from quality.schemas import (
    AnalysisRunCounts,
    QualityGate,
    QualityGateResult,
    Thresholds,
)
from settings import Settings

logger = logging.getLogger("quality")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig()
    logger.setLevel(level)


class QualityGateService:
    EXIT_CODES = {
        QualityGateStatus.SUCCESS: 0,
        QualityGateStatus.UNSTABLE: 1,
        QualityGateStatus.FAILURE: 2,
    }

    def __init__(self, quality_gate: QualityGate):
        self.quality_gate = quality_gate

    @classmethod
    def from_thresholds(cls, **thresholds: int) -> "QualityGateService":
        """
        Создаёт сервис из 16 именованных порогов.

        Raises:
            InvalidThresholdException: Если порог отрицательный или не является числом.
        """
        try:
            validated = Thresholds(**thresholds)
        except ValidationError as e:
            logger.error(f"Ошибка валидации порогов качества: {str(e)}")
            raise InvalidThresholdException(
                message=f"Недопустимое значение порога качества: {str(e)}"
            )
        return cls(QualityGate.from_thresholds(validated))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "QualityGateService":
        try:
            settings = settings or Settings()
            thresholds = settings.to_thresholds()
        except ValidationError as e:
            logger.error(f"Ошибка валидации порогов качества в настройках: {str(e)}")
            raise InvalidThresholdException(
                message=f"Недопустимое значение порога качества: {str(e)}"
            )
        return cls(QualityGate.from_thresholds(thresholds))

    @property
    def enabled(self) -> bool:
        return self.quality_gate.enabled

    def evaluate(self, run: AnalysisRunCounts) -> QualityGateResult:
        if not self.enabled:
            logger.info("Пороги качества не заданы, проверка всегда успешна")

        result = self.quality_gate.evaluate(run)

        for message in result.messages:
            if message.startswith(QualityGateStatus.FAILURE.value):
                logger.warning(message)
            else:
                logger.info(message)
        logger.info(f"Результат проверки порогов качества: {result.overall_result.value}")
        return result

    def evaluate_sonarqube(
        self, results: Union[SonarQubeResults, Dict[str, Any]]
    ) -> QualityGateResult:
        """
        Проверяет пороги качества по результатам SonarQube.

        Args:
            results: Результаты анализа: Pydantic-схема или словарь, например из JSON.

        Raises:
            InvalidAnalysisResultException: Если результаты не проходят валидацию.
        """
        try:
            run = to_analysis_run_counts(SonarQubeResults.model_validate(results))
        except ValidationError as e:
            logger.error(f"Ошибка преобразования результатов SonarQube: {str(e)}")
            raise InvalidAnalysisResultException(
                message=f"Недопустимые результаты анализа SonarQube: {str(e)}"
            )
        return self.evaluate(run)

    def exit_code(self, status: QualityGateStatus) -> int:
        return self.EXIT_CODES[status]
