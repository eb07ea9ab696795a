"""Entry point for ``python -m agent_panel``."""

import sys


def main() -> int:
    from agent_panel.cli.commands import cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
