from functools import lru_cache
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized runtime configuration loaded from environment variables.
    The VITE_* names are accepted so the frontend's .env can be shared.
    """

    SUPABASE_URL: str = Field(validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"))
    SUPABASE_ANON_KEY: str = Field(
        validation_alias=AliasChoices("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY")
    )
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    CUSTOMER_TABLE: str = "user_register"
    AGENT_TABLE: str = "agent_register"
    # Delete the auth identity when its profile row cannot be inserted
    ROLLBACK_ORPHANED_IDENTITIES: bool = False
    API_PREFIX: str = "/api"
    APP_NAME: str = "Onboarding Gateway"
    ALLOWED_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @model_validator(mode="after")
    def check_rollback_key(self):
        if self.ROLLBACK_ORPHANED_IDENTITIES and not self.SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("ROLLBACK_ORPHANED_IDENTITIES requires SUPABASE_SERVICE_ROLE_KEY")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
