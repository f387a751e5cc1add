"""Configuration management for viewfs."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .options import FsOptions, as_mapping

DEFAULT_CONFIG_PATH = "~/.config/viewfs/config.yaml"


class ConfigManager:
    """Manage default view options from YAML.

    A missing file is not an error; defaults apply until ``save()`` writes
    one. String values of the form ``${VAR}`` resolve from the environment.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            return self.default_config()
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        with open(self.config_path, "r") as f:
            content = yaml.safe_load(f)
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ValueError(f"{self.config_path} must contain a mapping, got {type(content).__name__}")
        return content

    @staticmethod
    def default_config() -> Dict[str, Any]:
        return {
            "options": {
                "read": False,
                "flatten": False,
                "encoding": None,
            },
            "dest": None,
        }

    def _resolve_env_var(self, value: Any) -> Any:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not isinstance(value, str):
            return value
        if not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def get_options_config(self) -> Dict[str, Any]:
        """Get default operation options, with env vars resolved."""
        defaults = self.default_config()["options"]
        config = as_mapping(self.data.get("options") or {})
        merged = {**defaults, **config}
        return {key: self._resolve_env_var(value) for key, value in merged.items()}

    def get_dest(self) -> Optional[str]:
        """Get the default destination directory, if any."""
        dest = self._resolve_env_var(self.data.get("dest"))
        return dest or None

    def get_options(self) -> FsOptions:
        """Default options as a resolved ``FsOptions``."""
        options = self.get_options_config()
        dest = self.get_dest()
        if dest is not None:
            options["dest"] = dest
        return FsOptions.from_mapping(options)

    def get_plugin_config(self) -> Dict[str, Any]:
        """Configuration in the shape ``ViewFsPlugin.configure`` accepts."""
        return {"options": self.get_options_config(), "dest": self.get_dest()}

    def save(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)
