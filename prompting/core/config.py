"""
Application configuration loader and it handles:
- Environment variables
- API credential
- Model configuration
- Log level

And, the main purpose:
Central place for system configuration.
"""


from pydantic_settings import BaseSettings

from prompting.core.errors import ConfigError

class Settings(BaseSettings):
    # LLM
    OPENAI_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    LLM_MODEL: str = "gpt-3.5-turbo-0613"
    LLM_TIMEOUT_SECONDS: float = 60.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


def load_settings(**overrides) -> Settings:
    settings = Settings(**overrides)
    if not settings.OPENAI_KEY.strip():
        raise ConfigError("OPENAI_KEY env var must be set.")
    return settings
