# SPDX-License-Identifier: MIT

from hydrate.cleanup import register_cleanup
from hydrate.initialize import initialize
from hydrate.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
