# cli/command.py
from __future__ import annotations
import logging

from settings.config import StoreConfig
from settings.logging_setup import cli_logging, flog
from core.errors import PersistenceError, SetupError
from core.store import JsonStore, MISSING
from cli.ui import cprint, print_collection, print_document

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_ERROR = 2


def run_command(args, cfg: StoreConfig) -> int:
    """
    Run one store command against the configured roots.
    Returns process-like exit code (0=ok, 1=nothing stored, 2=error).
    """
    if args.command is None:
        cprint("No command given (show, list, seed, delete). Use --help.")
        return EXIT_ERROR

    with cli_logging(cfg.logs_dir, enable_logs=args.logs, debug=args.debug) as logfile:
        try:
            store = JsonStore(cfg.reading_root, cfg.writing_root)
        except SetupError as e:
            cprint(f"[ERROR] {e}")
            flog(str(e), level=logging.ERROR)
            return EXIT_ERROR

        try:
            code = _dispatch(store, args)
        except PersistenceError as e:
            cprint(f"[ERROR] {e}")
            flog(f"{args.command} failed: {e}", level=logging.ERROR)
            code = EXIT_ERROR

        if args.debug and logfile is not None:
            cprint(f"(log: {logfile})")
        return code


def _dispatch(store: JsonStore, args) -> int:
    if args.command == "show":
        value = store.load_document(args.name)
        if value is MISSING:
            cprint(f"[WARN] nothing stored as {args.name}")
            return EXIT_MISSING
        print_document(args.name, value)
        return EXIT_OK

    if args.command == "list":
        files = store.collection_files(args.folder)
        report = store.load_collection_report(args.folder)
        print_collection(args.folder, files, report)
        return EXIT_OK

    if args.command == "seed":
        dst = store.copy_to_write_location(args.name, is_directory=args.is_directory)
        cprint(f"✓ {args.name} -> {dst}")
        return EXIT_OK

    if args.command == "delete":
        if args.is_directory:
            removed = store.delete_collection(args.name)
        else:
            removed = store.delete_document(args.name)
        cprint(f"✓ deleted {args.name}" if removed else f"[skip] nothing deleted for {args.name}")
        return EXIT_OK

    cprint(f"Unknown command: {args.command}")
    return EXIT_ERROR
