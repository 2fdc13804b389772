# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from tableview import configuration
from tableview.logging_config import configure_logging, level_from_name
from tableview.repository.configuration import (
    CONFIGURATION_REPO,
    get_default_config,
)
from tableview.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    configure_logging(level_from_name(config.get("log_level", "WARNING")))


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config: configuration.Configuration = get_default_config()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_VIEWS_PATH.is_file():
        configuration.DATA_VIEWS_PATH.touch()
        views: dict[str, Any] = {"next_id": 1, "views": []}
        configuration.DATA_VIEWS_PATH.write_text(dump(views, Dumper=Dumper))
    if not configuration.DATA_SESSION_PATH.is_file():
        configuration.DATA_SESSION_PATH.touch()
        session: dict[str, Any] = {"catalogs": {}}
        configuration.DATA_SESSION_PATH.write_text(dump(session, Dumper=Dumper))
    if not configuration.DATA_RECORDS_DIR.is_dir():
        configuration.DATA_RECORDS_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_RECORDS_DIR / ".gitkeep").touch()
