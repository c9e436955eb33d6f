"""Configuration loader for ydict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "idx_path": "",
    "dat_path": "",
    "idx_dump_path": "",
    "max_suggestions": 15,
    "mode": "cli",
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/ydict -> root
        Path(__file__).parent.parent.parent.parent / "config.json",  # extra level
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
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
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_idx_path() -> str:
    return get_default("idx_path", FALLBACK_DEFAULTS["idx_path"])


def default_dat_path() -> str:
    return get_default("dat_path", FALLBACK_DEFAULTS["dat_path"])


def default_idx_dump_path() -> str:
    return get_default("idx_dump_path", FALLBACK_DEFAULTS["idx_dump_path"])


def default_max_suggestions() -> int:
    return get_default("max_suggestions", FALLBACK_DEFAULTS["max_suggestions"])


def default_mode() -> str:
    return get_default("mode", FALLBACK_DEFAULTS["mode"])


@dataclass
class DictionaryConfig:
    """Paths needed to open a dictionary.

    idx_dump_path is optional; when set, the loaded word table is written
    there as idx<TAB>datOffset<TAB>word lines.
    """

    idx_path: str
    dat_path: str
    idx_dump_path: str = ""

    @classmethod
    def from_defaults(cls) -> "DictionaryConfig":
        """Create from config.json defaults."""
        return cls(
            idx_path=default_idx_path(),
            dat_path=default_dat_path(),
            idx_dump_path=default_idx_dump_path(),
        )
