# SPDX-License-Identifier: MIT

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main() -> None:
    from chronoloop.initialize import initialize
    from chronoloop.terminal.app import run

    initialize()
    run()


if __name__ == "__main__":
    main()
