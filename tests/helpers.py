import os
import tempfile

from pylinkval.core.config import Config


def make_config(content=""):
    """Builds a Config from a throwaway TOML file so user files are not read."""
    with tempfile.NamedTemporaryFile("w", suffix=".toml", delete=False) as tmp_file:
        tmp_file.write(content)
    try:
        return Config(config_path=tmp_file.name)
    finally:
        os.remove(tmp_file.name)
