#!/usr/bin/env python3

from .config import Config
from .core import RefreshShell


def main() -> int:
    Config.reload()

    shell = RefreshShell()
    shell.run()
    return 0


if __name__ == "__main__":
    main()
