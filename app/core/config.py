from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "quote-service"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "http://localhost:3000"

    DATABASE_URL: str

    QUOTE_TEXT_MAX_LENGTH: int = 1000
    QUOTE_AUTHOR_MAX_LENGTH: int = 100
    MODERATION_EXTRA_WORDS: str = ""
    RANDOM_PICK_ATTEMPTS: int = 3
    SEED_QUOTES_ON_STARTUP: bool = True

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def moderation_extra_words_list(self) -> List[str]:
        return [w.strip().lower() for w in self.MODERATION_EXTRA_WORDS.split(",") if w.strip()]

settings = Settings()
