from pydantic_settings import BaseSettings, SettingsConfigDict


# ----------------------------
# General / App settings
# ----------------------------
class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FLOWINJECT_", extra="ignore")

    app_name: str = "flowinject"

    # Logger
    log_file: str = ""  # empty disables the JSON file log
    log_level: str = "INFO"


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = AppSettings()
