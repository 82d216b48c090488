from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it
# so alembic, uvicorn and streamlit all see the same variables.
load_dotenv()


class Settings(BaseSettings):
    # Database (postgresql://... in production, sqlite:///... for local runs)
    DATABASE_URL: Optional[str] = None

    # API server
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Include raw exception text in system-failure envelopes.
    # Keep disabled outside local debugging.
    EXPOSE_ERROR_DETAILS: bool = False

    # Actor name recorded in logs for operations coming from the Streamlit pages
    UI_ACTOR_NAME: str = "streamlit"

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
