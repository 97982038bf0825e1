# backend/app/core/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

from ...core.formgen.config import InferenceConfig


class Settings(BaseSettings):
    PROJECT_NAME: str = "FormGen"
    API_V1_STR: str = "/api/v1"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    MAX_UPLOAD_SIZE: int = 1 * 1024 * 1024  # 1MB
    MAX_ROWS: int | None = None

    # Inference thresholds
    SAMPLE_SIZE: int = 3
    MIN_MATCH_RATIO: float = 0.7
    TEXT_BASELINE_CONFIDENCE: float = 0.5
    ENUM_MAX_DISTINCT: int = 5
    ENUM_MAX_RATIO: float = 0.5
    REQUIRED_NULL_RATIO: float = 0.1
    CONSISTENCY_THRESHOLD: float = 0.7
    TEXTAREA_MIN_LENGTH: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def inference_config(self) -> InferenceConfig:
        """Thresholds handed to the inference engine."""
        return InferenceConfig(
            sample_size=self.SAMPLE_SIZE,
            min_match_ratio=self.MIN_MATCH_RATIO,
            text_baseline_confidence=self.TEXT_BASELINE_CONFIDENCE,
            enum_max_distinct=self.ENUM_MAX_DISTINCT,
            enum_max_ratio=self.ENUM_MAX_RATIO,
            required_null_ratio=self.REQUIRED_NULL_RATIO,
            consistency_threshold=self.CONSISTENCY_THRESHOLD,
            textarea_min_length=self.TEXTAREA_MIN_LENGTH
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Single Settings instance, reused across requests.
    lru_cache makes sure it is created only once.
    """
    return Settings()
