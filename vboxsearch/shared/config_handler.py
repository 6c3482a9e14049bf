import toml
from pathlib import Path
from typing import Any, List, Optional, Dict

from vboxsearch.shared import config_template
from vboxsearch.shared.path_handler import PathHandler

_MISSING_SETTING_SENTINEL = object()


class ConfigHandler:
    """
    Manages the provider's configuration file (config.toml).
    Missing keys are filled from the default template; a missing file is
    created with defaults, a file that fails to parse is left untouched.
    """

    def __init__(self, logger: Any, config_file: Optional[Path] = None):
        """
        Args:
            logger: The application logger.
            config_file: Explicit path to config.toml. Defaults to the XDG
                         config directory.
        """
        self.logger = logger
        self.default_config = config_template.default_config
        if config_file is None:
            config_file = PathHandler().get_config_dir() / "config.toml"
        self.config_file = Path(config_file)
        self._load_successful: bool = False
        self.config_data = self.load_config()

    def _strip_hints(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Recursively removes keys ending with '_hint' so only values remain.
        """
        stripped_data = {}
        for key, value in data.items():
            if key.endswith("_hint"):
                continue
            if isinstance(value, dict):
                stripped_data[key] = self._strip_hints(value)
            else:
                stripped_data[key] = value
        return stripped_data

    @property
    def default_config_stripped(self) -> Dict[str, Any]:
        """Returns the default config without any setting metadata hints."""
        return self._strip_hints(self.default_config)

    def _recursive_merge(
        self,
        user_config: Dict[str, Any],
        default_config: Dict[str, Any],
    ) -> bool:
        """
        Recursively merges missing keys from `default_config` into `user_config`.
        Returns:
            True if any key was added.
        """
        added = False
        for key, default_value in default_config.items():
            if key not in user_config:
                user_config[key] = default_value
                added = True
            elif isinstance(default_value, dict) and isinstance(
                user_config.get(key), dict
            ):
                if self._recursive_merge(user_config[key], default_value):
                    added = True
        return added

    def save_config(self) -> None:
        """Writes the current state of self.config_data to the TOML file."""
        if not self._load_successful:
            self.logger.warning(
                "Skipping configuration save: config.toml failed to load. Please fix it manually."
            )
            return
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                toml.dump(self.config_data, f)
            self.logger.info(f"Configuration saved to {self.config_file}.")
        except OSError as e:
            self.logger.error(f"Failed to save configuration to file: {e}")

    def load_config(self) -> Dict[str, Any]:
        """
        Loads the configuration from file, or uses defaults if missing/corrupt.
        Returns:
            The loaded configuration merged with defaults.
        """
        config_from_file: Dict[str, Any] = {}
        file_must_be_created = not self.config_file.exists()
        if file_must_be_created:
            self.logger.info("Config file is missing. Will apply defaults and create.")
            self._load_successful = True
        else:
            try:
                with open(self.config_file, "r") as f:
                    config_from_file = toml.load(f)
                self.logger.debug("Existing config.toml loaded successfully.")
                self._load_successful = True
            except (OSError, toml.TomlDecodeError) as e:
                self.logger.error(
                    f"Error loading {self.config_file}: {e}. Using default configuration."
                )
                config_from_file = {}
                self._load_successful = False
        self._recursive_merge(config_from_file, self.default_config_stripped)
        self.config_data = config_from_file
        if file_must_be_created:
            self.save_config()
        return config_from_file

    def get_root_setting(self, key_path: List[str], default: Any = None) -> Any:
        """
        Looks up a nested setting, e.g. ["search", "max_results"].
        Returns `default` when any part of the path is missing.
        """
        current: Any = self.config_data
        for key in key_path:
            if not isinstance(current, dict):
                return default
            current = current.get(key, _MISSING_SETTING_SENTINEL)
            if current is _MISSING_SETTING_SENTINEL:
                return default
        return current
