# SPDX-License-Identifier: MIT

from tableview.cleanup import register_cleanup
from tableview.initialize import initialize
from tableview.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
