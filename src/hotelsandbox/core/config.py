"""Configuration for the hotel sandbox server."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data"

OPENAI_MODEL_PREFIXES = ("gpt-", "o1-", "o3-", "chatgpt-")


class SandboxConfig(BaseModel):
    """Configuration for the sandbox API server."""

    fixtures_dir: Path = Field(
        default=DEFAULT_FIXTURES_DIR, description="Directory containing the JSON fixtures"
    )
    model: str = Field(default="gpt-4o-mini", description="Chat model used by the agent")
    openai_api_key: str = Field(default="", description="OpenAI API key")
    anthropic_api_key: str = Field(default="", description="Anthropic API key")
    llm_timeout: int = Field(default=30, description="Timeout for model calls in seconds")
    no_availability_rate: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Probability that a booking is refused"
    )
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def is_openai_model(self) -> bool:
        """Check if the configured model is served by OpenAI."""
        return self.model.startswith(OPENAI_MODEL_PREFIXES)


def load_config(**overrides) -> SandboxConfig:
    """Build the configuration from the environment (and a .env file).

    Args:
        **overrides: Field values that take precedence over the environment;
            ``None`` values are ignored

    Returns:
        SandboxConfig
    """
    load_dotenv()

    env_fields = {
        "fixtures_dir": "SANDBOX_FIXTURES_DIR",
        "model": "SANDBOX_MODEL",
        "openai_api_key": "OPENAI_API_KEY",
        "anthropic_api_key": "ANTHROPIC_API_KEY",
        "llm_timeout": "SANDBOX_LLM_TIMEOUT",
        "no_availability_rate": "SANDBOX_NO_AVAILABILITY_RATE",
        "host": "SANDBOX_HOST",
        "port": "SANDBOX_PORT",
        "log_level": "SANDBOX_LOG_LEVEL",
    }

    values = {
        field: os.environ[env_var]
        for field, env_var in env_fields.items()
        if os.environ.get(env_var)
    }
    values.update({key: value for key, value in overrides.items() if value is not None})

    return SandboxConfig(**values)
