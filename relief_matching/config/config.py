"""Configuration management for the matching service."""

from typing import List, Optional
from pydantic import ValidationError
from pydantic_settings import BaseSettings

REQUIRED_VARS = [
    "SUI_RPC_URL",
    "FLOODGUARD_PACKAGE",
]

class Config(BaseSettings):
    """Application configuration from environment variables."""

    # Required
    sui_rpc_url: str
    floodguard_package: str
    floodguard_module: str = "floodguard_protocol"

    # Optional
    match_actors: List[str] = []
    polling_interval_seconds: int = 30
    cost_weights_path: Optional[str] = None
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "case_sensitive": False}


def validate_config() -> Config:
    """Build Config, reporting every absent required variable at once.

    Raises:
        ValueError: naming each of REQUIRED_VARS that is unset.
        ValidationError: for present-but-invalid values.
    """
    try:
        return Config()  # type: ignore[call-arg]
    except ValidationError as exc:
        absent = {
            str(error["loc"][0]).upper()
            for error in exc.errors()
            if error["type"] == "missing" and error["loc"]
        }
        unset = [var for var in REQUIRED_VARS if var in absent]
        if not unset:
            raise
        raise ValueError(
            f"Required setting(s) not provided: {', '.join(unset)}. "
            "Export them or add them to .env."
        ) from exc

def load_config() -> Config:
    """Startup entry point for main.py."""
    return validate_config()
