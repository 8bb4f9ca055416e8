# cli/main.py
from __future__ import annotations

from settings.arguments import parse_args
from settings.config import StoreConfig
from cli.ui import print_config
from cli.command import run_command


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = StoreConfig.from_args(args)

    if getattr(args, "show_config", False):
        print_config(cfg)
        return 0

    return run_command(args, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
