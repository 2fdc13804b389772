# SPDX-License-Identifier: MIT

import atexit

from tableview.repository.configuration import CONFIGURATION_REPO
from tableview.repository.session import SESSION_REPO
from tableview.repository.view import VIEW_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    VIEW_REPO.flush()
    SESSION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
