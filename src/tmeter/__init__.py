# SPDX-License-Identifier: MIT

from tmeter.terminal.app import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
