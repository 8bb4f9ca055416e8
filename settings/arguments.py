# settings/arguments.py
from __future__ import annotations
import argparse


def _str2bool(v: str) -> bool:
    s = v.strip().lower()
    if s in ("1", "true", "t", "yes", "y", "on"):
        return True
    if s in ("0", "false", "f", "no", "n", "off"):
        return False
    raise argparse.ArgumentTypeError("Boolean value expected (true/false).")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="persistkit", description="Inspect and maintain a persistkit data folder.")
    p.add_argument("--read-root", dest="read_root", help="reading root (defaults to config)")
    p.add_argument("--write-root", dest="write_root", help="writing root (defaults to config)")
    p.add_argument("-d", "--debug", type=_str2bool, default=False)
    p.add_argument("-l", "--logs", type=_str2bool, default=False)
    p.add_argument(
        "--show-config",
        action="store_true",
        help="print resolved config paths and exit",
    )

    sub = p.add_subparsers(dest="command")

    show = sub.add_parser("show", help="print a document")
    show.add_argument("name")

    lst = sub.add_parser("list", help="list the items of a collection")
    lst.add_argument("folder")

    seed = sub.add_parser("seed", help="copy an entry from the reading root to the writing root")
    seed.add_argument("name")
    seed.add_argument("--dir", dest="is_directory", action="store_true", default=False)

    delete = sub.add_parser("delete", help="delete an entry under the writing root")
    delete.add_argument("name")
    delete.add_argument("--dir", dest="is_directory", action="store_true", default=False)
    return p


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)
