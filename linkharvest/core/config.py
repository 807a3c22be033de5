from pathlib import Path
from typing import Dict, Any
from urllib.parse import urlparse

from linkharvest.core.logging import log
from linkharvest.core.constants import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SCROLL_DELAY_MS,
    DEFAULT_GROWTH_TIMEOUT_MS,
    DEFAULT_WAIT_UNTIL
)
from linkharvest.utils.file_io import safe_read_json, safe_write_json

class ConfigManager:
    """Manages persisted defaults for harvesting runs."""
    
    APP_NAME = "linkharvest"
    CONFIG_DIR = Path.home() / f".{APP_NAME}"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    DEFAULT_CONFIG = {
        "output_path": DEFAULT_OUTPUT_FILE,
        "scroll_delay_ms": DEFAULT_SCROLL_DELAY_MS,
        "growth_timeout_ms": DEFAULT_GROWTH_TIMEOUT_MS,
        "headless": True,
        "wait_until": DEFAULT_WAIT_UNTIL,
        "log_dir": str(CONFIG_DIR / "logs")
    }

    @classmethod
    def ensure_config_dir(cls):
        """Ensure configuration directory exists."""
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def load_config(cls) -> Dict[str, Any]:
        """Load configuration, falling back to defaults for missing keys."""
        config = cls.DEFAULT_CONFIG.copy()
        file_config = safe_read_json(cls.CONFIG_FILE, default={})
        if not isinstance(file_config, dict):
            log(f"Ignoring malformed config in {cls.CONFIG_FILE}", level="warning")
            return config

        unknown = set(file_config) - set(config)
        if unknown:
            log(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}", level="warning")
        config.update({k: v for k, v in file_config.items() if k in config})
        return config

    @classmethod
    def save_config(cls, config: Dict[str, Any]) -> bool:
        """Save configuration to disk."""
        cls.ensure_config_dir()
        return safe_write_json(cls.CONFIG_FILE, config)

    @staticmethod
    def validate_url(url: str) -> str:
        """Robust URL validation using urllib.parse."""
        url = (url or "").strip()
        try:
            parsed = urlparse(url)
            if not (parsed.scheme in ("http", "https") and parsed.netloc):
                raise ValueError(f"Invalid URL: '{url}' - Must be http/https with a valid domain.")
            return url
        except Exception as e:
            if isinstance(e, ValueError):
                raise
            raise ValueError(f"URL parsing failed: {e}")
