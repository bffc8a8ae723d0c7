from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from dotenv import load_dotenv
from functools import lru_cache

# Load environment variables
load_dotenv()

VALID_ENVIRONMENTS = ["development", "production", "testing"]

class Settings(BaseSettings):
    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"
    ALLOWED_ORIGINS: str = "*"
    WORKERS: int = 1

    # Multipart uploads are written here before being handed to the publisher
    UPLOAD_DIR: str = "uploads"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE: str = "tweet_service.log"

    @property
    def cors_origins(self) -> List[str]:
        """Get CORS origins as list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    def check_environment(self) -> None:
        if self.ENVIRONMENT not in VALID_ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {self.ENVIRONMENT}")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

# Create cached settings instance
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.check_environment()
    return settings
