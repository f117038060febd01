"""Configuration loader for the radixword CLI.

Loads defaults from config.json at project root, with hardcoded fallbacks.
The library itself reads no configuration.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

WIDTHS = (32, 64)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "alphabet": "base62",
    "width": 64,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json at the project root or in the working directory."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/radixword -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict) and isinstance(data.get("defaults", {}), dict):
                logger.debug("Loaded config from %s", config_path)
                _config = data
                return _config
            logger.debug("Ignoring malformed config %s", config_path)
        except (json.JSONDecodeError, OSError) as e:
            logger.debug("Ignoring unreadable config %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_alphabet() -> str:
    return get_default("alphabet", FALLBACK_DEFAULTS["alphabet"])


def default_width() -> int:
    return get_default("width", FALLBACK_DEFAULTS["width"])


def default_verbose() -> bool:
    return get_default("verbose", FALLBACK_DEFAULTS["verbose"])
