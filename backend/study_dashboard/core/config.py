# study_dashboard/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "StudyStatusDashboard"
    env: str = "local"
    DATABASE_URL: str = "sqlite:///./study_status.db"

    # Which live store answers status + statistics queries: "postgres" | "supabase"
    DATA_STORE_BACKEND: str = "postgres"

    # Supabase
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None

    # =========================
    # Status lookup
    # =========================
    STATUS_TABLE: str = "study_status"
    STATISTICS_FUNCTION: str = "get_study_statistics"

    # Trailing window handed to the aggregation routine
    STATISTICS_WINDOW_HOURS: int = 24

    # Fill completed stage timestamps from the status event log
    TIMELINE_USE_HISTORY: bool = False

    # CORS: comma separated, "*" allows any origin
    CORS_ALLOW_ORIGINS: str = "*"

    # Client
    STUDY_STATUS_API_URL: str = "http://localhost:8000"
    CLIENT_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in (self.CORS_ALLOW_ORIGINS or "").split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
