"""Configuration loader for morphdict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "newline": "\n",
    "unencodable": "strict",
    "quiet": False,
    "verbose": False,
}

UNENCODABLE_POLICIES = ("strict", "replace")

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/morphdict -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load(path: Optional[Path | str] = None) -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks.

    Args:
        path: Explicit config file. Replaces any cached configuration.
    """
    global _config
    if _config is not None and path is None:
        return _config

    config_path = Path(path) if path else _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reset() -> None:
    """Drop the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_newline() -> str:
    return get_default("newline", FALLBACK_DEFAULTS["newline"])


def default_unencodable() -> str:
    return get_default("unencodable", FALLBACK_DEFAULTS["unencodable"])


@dataclass
class Settings:
    """Options applied when writing dictionaries back to disk."""

    newline: str = "\n"
    unencodable: str = "strict"  # "strict" aborts, "replace" writes "?"

    def __post_init__(self):
        if self.unencodable not in UNENCODABLE_POLICIES:
            raise ValueError(
                f"Unknown unencodable policy: {self.unencodable}. "
                f"Available: {list(UNENCODABLE_POLICIES)}"
            )
        if self.newline not in ("\n", "\r\n"):
            raise ValueError(f"Unsupported newline: {self.newline!r}")

    @classmethod
    def from_config(cls) -> "Settings":
        """Create from loaded config defaults."""
        return cls(
            newline=default_newline(),
            unencodable=default_unencodable(),
        )
