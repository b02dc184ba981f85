# SPDX-License-Identifier: MIT

from ganttgrid.cleanup import register_cleanup
from ganttgrid.initialize import initialize
from ganttgrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
