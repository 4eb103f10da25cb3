import os
import json
import logging
import socket
from typing import Dict, Any, List
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv(override=False)

PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULTS: Dict[str, Any] = {
    "mirror_host": "https://registry.ping.pub",
    "local_bundle_dir": str(PROJECT_ROOT / "chains"),
    "favorites": {
        "key": "favoriteMap",
        "default": {"cosmos": True, "osmosis": True},
    },
    "price_currencies": ["usd", "cny"],
    "storage_path": str(Path("data") / "preferences.json"),
}

# env var -> dotted config key
ENV_OVERRIDES = {
    "CHAINBOARD_MIRROR_HOST": "mirror_host",
    "CHAINBOARD_LOCAL_BUNDLE_DIR": "local_bundle_dir",
    "CHAINBOARD_STORAGE_PATH": "storage_path",
    "CHAINBOARD_HOSTNAME": "hostname",
}


class ConfigManager:
    """
    Centralized configuration manager.
    Singleton pattern to load and access config settings.
    """
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the cached instance so the next access reloads file and env"""
        cls._instance = None

    def _load_config(self):
        """Load configuration from JSON file and env vars"""
        self._config = json.loads(json.dumps(DEFAULTS))
        config_path = Path(os.getenv("CHAINBOARD_CONFIG", PROJECT_ROOT / "config" / "config.json"))
        try:
            if config_path.exists():
                with open(config_path, "r") as f:
                    self._merge(self._config, json.load(f))
                logger.info(f"Loaded config from {config_path}")
            else:
                logger.warning(f"Config file not found at {config_path}. Using defaults.")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading config: {e}")
            self._config = json.loads(json.dumps(DEFAULTS))

        for env_key, key in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                self._config[key] = value

    @staticmethod
    def _merge(base: Dict[str, Any], extra: Dict[str, Any]):
        # sections merge one level deep; values inside a section are replaced whole
        for k, v in extra.items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                base[k].update(v)
            else:
                base[k] = v

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by key (dot notation supported)"""
        keys = key.split(".")
        value = self._config

        try:
            for k in keys:
                value = value.get(k)
                if value is None:
                    return default
            return value
        except AttributeError:
            return default

    # Type-safe getters for specific sections

    @property
    def mirror_host(self) -> str:
        return self.get("mirror_host")

    @property
    def local_bundle_dir(self) -> Path:
        return Path(self.get("local_bundle_dir"))

    @property
    def favorites_key(self) -> str:
        return self.get("favorites.key", "favoriteMap")

    @property
    def default_favorites(self) -> Dict[str, bool]:
        return dict(self.get("favorites.default", {}))

    @property
    def price_currencies(self) -> List[str]:
        return list(self.get("price_currencies", ["usd", "cny"]))

    @property
    def storage_path(self) -> Path:
        return Path(self.get("storage_path"))

    @property
    def hostname(self) -> str:
        # The deployment hostname decides mainnet vs testnet bundles
        return self.get("hostname") or socket.gethostname()
