import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.esa.io"


class Settings(BaseSettings):
    ESA_ACCESS_TOKEN: str | None = None
    ESA_BASE_URL: str = DEFAULT_BASE_URL
    ESA_HTTP_TIMEOUT: float = 30.0  # 秒

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    def get_log_level(self) -> int:
        """将 LOG_LEVEL 转换为 logging 级别，无法识别时回退到 INFO"""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
