from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JSONRECIPE_", env_file=".env", extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "info"

    # Unit given to structured ingredients that omit one
    default_unit: str = "each"


settings = Settings()
