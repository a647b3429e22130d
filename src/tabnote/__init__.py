# SPDX-License-Identifier: MIT

from tabnote.cleanup import register_cleanup
from tabnote.terminal.app import run


def main() -> None:
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
