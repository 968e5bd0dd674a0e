#!/usr/bin/env python3
import argparse
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="rpoc: shell that refreshes the prompt when a command is submitted",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rpoc                    # Start interactive shell
  rpoc --version          # Show version information
  rpoc --config-reload    # Reload configuration
        """,
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version information"
    )

    parser.add_argument(
        "--config-reload",
        action="store_true",
        help="Reload configuration and exit"
    )

    args = parser.parse_args(argv)

    if args.version:
        from rpoc import __version__

        print(f"rpoc version {__version__}")
        return 0

    if args.config_reload:
        from rpoc.config import Config

        if Config.reload():
            print("Configuration reloaded successfully")
        else:
            print("Failed to reload configuration")
        return 0

    try:
        from rpoc import app

        return app.main()
    except KeyboardInterrupt:
        print("\nBye!")
        return 0
    except Exception as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
