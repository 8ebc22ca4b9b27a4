# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "chronoloop"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)


class Configuration(TypedDict):
    data_path: Optional[str]
    default_scale: str
    show_header: bool
    use_color: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "default_scale": "week",
        "show_header": True,
        "use_color": True,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH

    DATA_PATH = data_path


def load_data_path_configuration() -> None:
    """
    Load the configuration and point DATA_PATH at the configured directory.

    This must be called before any snapshot is read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
