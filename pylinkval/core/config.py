"""Settings for the linkval command and the validator pipeline.

A `Config` starts from `DEFAULT_CONFIG` and layers TOML files and
`LINKVAL_*` environment variables on top. Validators read their own section
(`validators.<Name>`) through `BaseValidator.get_option`, and the pipeline
asks `is_validator_enabled` before running a validator.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

import tomli_w

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

logger = logging.getLogger(__name__)

# Written by `linkval config set`, removed by `linkval config reset`.
USER_CONFIG_PATH = Path.home() / ".config" / "linkval" / "config.toml"

# The project-level configuration file, looked up in the working directory.
PROJECT_CONFIG_NAME = "linkval.toml"

# Environment variables and the dot-paths they override.
ENV_MAPPING = {
    "LINKVAL_DISABLE_VALIDATORS": "disable_validators",
    "LINKVAL_ENABLE_VALIDATORS": "enable_validators",
    "LINKVAL_POSTAL_REGION": "postal_region",
    "LINKVAL_OUTPUT": "output",
    "LINKVAL_COLORS": "colors",
    "LINKVAL_VERBOSE": "verbose",
    "LINKVAL_PASSWORD_MINIMUM_SCORE": "validators.PasswordStrength.minimum_score",
}

_BOOL_KEYS = {"colors", "verbose"}
_INT_KEYS = {"minimum_score"}
_LIST_KEYS = {"disable_validators", "enable_validators"}


class Config:
    """Layered pylinkval settings.

    Later sources win:
    1.  `DEFAULT_CONFIG`.
    2.  `linkval.toml` in the working directory.
    3.  The user file at `USER_CONFIG_PATH`.
    4.  `LINKVAL_*` environment variables.

    Passing `config_path` replaces steps 2 and 3 with that single file, which
    is how `linkval check --config` and the test suite isolate a run.

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): Built-in settings: which validators
            run, the fallback postal region, output format and the password
            score threshold.
    """

    DEFAULT_CONFIG = {
        "disable_validators": [],
        "enable_validators": [],  # If specified, only these validators run.
        "postal_region": "GENERIC",  # Region used when no country is given.
        "output": "table",  # Can be "table", "json" or "markdown".
        "colors": True,
        "verbose": False,
        "validators": {
            "PasswordStrength": {
                "minimum_score": 3,
            },
        },
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Builds the settings from defaults, files and the environment.

        Args:
            config_path (Optional[Path]): A TOML file to read instead of the
                project and user files.
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()
        self._load_env_config()

    def _load_default_configs(self) -> None:
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Merges `new` into `base`; nested tables merge key by key."""
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Merges one TOML file; an unreadable file is logged and skipped."""
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
                self._merge_configs(self.config, file_config)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")

    def _load_env_config(self) -> None:
        for env_var, config_key in ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_nested_key(config_key, value)

    def _set_nested_key(self, key_path: str, value: str) -> None:
        """Stores an environment string under `key_path`, converted to the key's type.

        `colors` and `verbose` become booleans, `minimum_score` an int (a
        non-numeric value is logged and ignored) and the validator lists are
        split on commas.

        Args:
            key_path (str): Where to store the value, e.g. "postal_region".
            value (str): The raw environment value.
        """
        *parents, leaf_key = key_path.split('.')
        target_config = self.config
        for key in parents:
            if not isinstance(target_config.get(key), dict):
                target_config[key] = {}
            target_config = target_config[key]

        if leaf_key in _BOOL_KEYS:
            target_config[leaf_key] = value.lower() in ("true", "1", "yes", "on")
        elif leaf_key in _INT_KEYS:
            try:
                target_config[leaf_key] = int(value)
            except ValueError:
                logger.warning(f"Invalid integer value for {leaf_key}: {value}")
        elif leaf_key in _LIST_KEYS:
            target_config[leaf_key] = [v.strip() for v in value.split(",") if v.strip()]
        else:
            target_config[leaf_key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Looks up a dot-path such as "validators.PasswordStrength.minimum_score".

        Returns:
            Any: The stored value, or `default` when any part of the path is
            missing.
        """
        value = self.config
        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Stores `value` at a dot-path for this run only; see `save_user_config`."""
        *parents, leaf_key = key.split('.')
        target_config = self.config
        for k in parents:
            target_config = target_config.setdefault(k, {})
        target_config[leaf_key] = value

    def is_validator_enabled(self, validator_name: str) -> bool:
        """Tells the pipeline whether the validator named `validator_name` runs.

        `validators.<name>.enabled = false` always turns a validator off.
        Otherwise a non-empty `enable_validators` is an allow-list, and
        failing that `disable_validators` is a deny-list.
        """
        validator_config = self.get(f"validators.{validator_name}")
        if isinstance(validator_config, dict) and validator_config.get("enabled") is False:
            return False

        enabled_list = self.get("enable_validators", [])
        if enabled_list:
            return validator_name in enabled_list

        return validator_name not in self.get("disable_validators", [])

    def _get_user_config(self) -> Dict[str, Any]:
        if not USER_CONFIG_PATH.exists():
            return {}
        try:
            with open(USER_CONFIG_PATH, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Ignoring unreadable user config {USER_CONFIG_PATH}: {e}")
            return {}

    def save_user_config(self) -> None:
        """Writes the top-level keys that differ from `DEFAULT_CONFIG` to the user file.

        Keys already in the user file are kept unless overwritten, so
        `linkval config set` edits one setting at a time.

        Raises:
            IOError: If the user file cannot be written.
        """
        user_config = self._get_user_config()
        for key, value in self.config.items():
            if value != self.DEFAULT_CONFIG.get(key):
                user_config[key] = value

        try:
            USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with open(USER_CONFIG_PATH, "wb") as f:
                tomli_w.dump(user_config, f)
        except OSError as e:
            raise IOError(f"Failed to save configuration to {USER_CONFIG_PATH}: {e}")

    def reset_user_config(self) -> bool:
        """Deletes the user file and returns this object to the defaults.

        Returns:
            bool: True if a file was removed, False if there was none.
        """
        if not USER_CONFIG_PATH.exists():
            return False
        USER_CONFIG_PATH.unlink()
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        return True

    def __str__(self) -> str:
        return f"Config({self.config})"
