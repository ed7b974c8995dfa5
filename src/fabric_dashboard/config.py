"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Menu order persistence: "memory" | "supabase"
    menu_store_backend: str = "memory"

    # Tables
    settings_table: str = "user_settings"
    profiles_table: str = "profiles"
    user_roles_table: str = "user_roles"

    # Demo accounts
    demo_password: str = "demo123"

    # HTTP
    allowed_origins: str = ""

    # Logging
    log_level: str = "INFO"


settings = Settings()


def use_supabase_store() -> bool:
    """True when menu orders should be persisted to Supabase."""
    return settings.menu_store_backend == "supabase" and bool(settings.supabase_url)
