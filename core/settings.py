import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
    # === Логирование ===
    APP_NAME: str = 'org_composite'
    LOG_LEVEL: str = Field(default='INFO', description='Уровень логов (DEBUG, INFO, WARNING...)')
    LOG_FORMAT: str = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,  # В .env можно использовать как верхний, так и нижний регистр
    )

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v) -> str:
        """Неизвестный уровень заменяется на INFO: вывод отчёта не зависит от настроек."""
        v = str(v).strip().upper()
        if v not in LOG_LEVELS:
            return logging.getLevelName(logging.INFO)
        return v


# Singleton - Единственный экземпляр настроек на всё приложение
settings = Settings()
