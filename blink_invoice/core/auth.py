# blink_invoice/core/auth.py

import logging
import re
from typing import Optional

from blink_invoice.core.config import Settings
from blink_invoice.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_PREFIX = "blink_"
PROFILE_KEY_PATTERN = re.compile(r"""BLINK_API_KEY=["']?([a-zA-Z0-9_]+)["']?""")
API_KEY_SHAPE = re.compile(r"^[a-zA-Z0-9_]+$")


def mask_key(key: str) -> str:
    return f"{key[:6]}..."


def read_profile_key(settings: Settings) -> Optional[str]:
    """Pull ``BLINK_API_KEY=...`` out of the profile file, if it is there."""
    try:
        profile = settings.profile_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Profile {settings.profile_path} not readable: {e}")
        return None
    match = PROFILE_KEY_PATTERN.search(profile)
    return match.group(1) if match else None


def resolve_credential(settings: Optional[Settings] = None) -> str:
    """Return the API key for this call.

    Not cached: each call looks at the explicit key first, then re-reads
    the profile file.
    """
    settings = settings or Settings.from_env()

    key = settings.api_key
    source = "BLINK_API_KEY"
    if not key:
        key = read_profile_key(settings)
        source = str(settings.profile_path)
    if not key:
        raise ConfigurationError(
            f"BLINK_API_KEY not found. Set it in environment or {settings.profile_path}"
        )

    if not API_KEY_SHAPE.match(key):
        raise ConfigurationError(f"API key from {source} is malformed")
    if not key.startswith(API_KEY_PREFIX):
        logger.warning(f"API key {mask_key(key)} does not start with '{API_KEY_PREFIX}'")

    logger.debug(f"→ API key {mask_key(key)} resolved from {source}")
    return key
