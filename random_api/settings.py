from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Random Values API"
    API_VERSION: str = "v1.0.0"
    LOG_LEVEL: str = "info"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: List[str] = ["*"]
    # seeds the fast generator only; string draws always come from `secrets`
    RANDOM_SEED: Optional[int] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
