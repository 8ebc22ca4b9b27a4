# SPDX-License-Identifier: MIT

from chronoloop import configuration
from chronoloop.repository.configuration import CONFIGURATION_REPO
from chronoloop.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()

    config = CONFIGURATION_REPO.get_config()
    # Writes the default config on first run and any migrated fields after
    CONFIGURATION_REPO.flush()

    view_state.set_show_header(config["show_header"])
    view_state.set_use_color(config["use_color"])
