"""Configuration management for Hookit."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "hookit.yaml"
CONFIG_ENV_VAR = "HOOKIT_CONFIG"


class HookitConfig:
    """Manage hook point and plugin declarations from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        path = config_path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        self.config_path = Path(path).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            return {}

        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Error reading config %s: %s", self.config_path, e)
            return {}

        if not isinstance(content, dict):
            return {}
        return content

    @property
    def exists(self) -> bool:
        return self.config_path.exists()

    def create_default(self) -> None:
        """Write a starter configuration file."""
        self.data = {
            "hooks": [
                {
                    "name": "example",
                    "sync": False,
                },
            ],
            "plugins": [],
        }
        self.save()

    def _resolve_env_var(self, value: Any) -> Any:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not isinstance(value, str):
            return value
        if not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def _resolve_entry(self, entry: Any, keys: tuple[str, ...]) -> Any:
        if not isinstance(entry, dict):
            return entry
        resolved = dict(entry)
        for key in keys:
            if key in resolved:
                resolved[key] = self._resolve_env_var(resolved[key])
        return resolved

    def get_hooks_config(self) -> list:
        """Get hook point declarations (list of dicts)."""
        hooks = self.data.get("hooks") or []
        if not isinstance(hooks, list):
            return []
        return [self._resolve_entry(entry, ("resolver",)) for entry in hooks]

    def get_plugins_config(self) -> list:
        """Get plugin declarations (list of dicts)."""
        plugins = self.data.get("plugins") or []
        if not isinstance(plugins, list):
            return []
        return [self._resolve_entry(entry, ("module", "origin")) for entry in plugins]

    def save(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False, sort_keys=False)
