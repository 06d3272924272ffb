from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICE_NOTATION_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    server_name: str = "mcp-dice-notation"
    log_level: str = "INFO"

    # Longest notation accepted by the service layer; the parser itself has no limit.
    max_input_length: int = 256


settings = Settings()


def get_settings() -> Settings:
    return settings
