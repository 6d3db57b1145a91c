from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Reminder dates are resolved relative to "now" in this timezone
    user_timezone: str = "UTC"
    currency_symbol: str = "£"

    # Sentry error tracking
    sentry_dsn: str = ""
    sentry_environment: str = "production"

    log_level: str = "INFO"

    @property
    def has_sentry(self) -> bool:
        return bool(self.sentry_dsn)


settings = Settings()
