from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite+aiosqlite:////data/db/netremote.db"
    default_server_port: int = 5500
    log_level: str = "INFO"


settings = Settings()
