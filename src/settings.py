from pydantic_settings import BaseSettings, SettingsConfigDict

from quality.schemas import Thresholds


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file="../.env", env_prefix="QUALITY_GATE_", extra="ignore"
    )

    LOG_LEVEL: str = "INFO"

    FAILED_TOTAL_ALL: int = 0
    FAILED_TOTAL_HIGH: int = 0
    FAILED_TOTAL_NORMAL: int = 0
    FAILED_TOTAL_LOW: int = 0

    UNSTABLE_TOTAL_ALL: int = 0
    UNSTABLE_TOTAL_HIGH: int = 0
    UNSTABLE_TOTAL_NORMAL: int = 0
    UNSTABLE_TOTAL_LOW: int = 0

    FAILED_NEW_ALL: int = 0
    FAILED_NEW_HIGH: int = 0
    FAILED_NEW_NORMAL: int = 0
    FAILED_NEW_LOW: int = 0

    UNSTABLE_NEW_ALL: int = 0
    UNSTABLE_NEW_HIGH: int = 0
    UNSTABLE_NEW_NORMAL: int = 0
    UNSTABLE_NEW_LOW: int = 0

    def to_thresholds(self) -> Thresholds:
        # проверка на неотрицательность выполняется моделью Thresholds
        return Thresholds(
            **{
                name.lower(): value
                for name, value in self.model_dump().items()
                if name != "LOG_LEVEL"
            }
        )
