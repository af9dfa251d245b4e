# blink_invoice/core/config.py

import math
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from blink_invoice.core.errors import ConfigurationError

DEFAULT_API_URL = "https://api.blink.sv/graphql"
DEFAULT_PROFILE_PATH = Path.home() / ".profile"


def load_config():
    """Load ./.env from the working directory without overriding set variables."""
    env_file = Path.cwd() / ".env"
    if env_file.is_file():
        load_dotenv(env_file, override=False)


def check_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"timeout must be a number of seconds, got {value!r}")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"timeout must be a positive number of seconds, got {value!r}")
    return timeout


class Settings(BaseModel):
    """Runtime configuration for one invocation.

    Precedence for the API key: ``api_key`` (explicit option or
    ``BLINK_API_KEY``), then an assignment line in ``profile_path``.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    profile_path: Path = DEFAULT_PROFILE_PATH
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("BLINK_API_KEY") or None,
            api_url=env.get("BLINK_API_URL") or DEFAULT_API_URL,
            profile_path=Path(env.get("BLINK_PROFILE_PATH") or DEFAULT_PROFILE_PATH).expanduser(),
            timeout=check_timeout(env.get("BLINK_TIMEOUT")),
        )

    def override(self, **values) -> "Settings":
        """Copy with the given non-None values replacing the current ones."""
        updates = {k: v for k, v in values.items() if v is not None}
        if "timeout" in updates:
            updates["timeout"] = check_timeout(updates["timeout"])
        return self.model_copy(update=updates)
