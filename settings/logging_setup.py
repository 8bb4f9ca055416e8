# settings/logging_setup.py
from __future__ import annotations
import logging
import platform
import sys
from datetime import datetime
from pathlib import Path
from contextlib import contextmanager

FMT = "%(asctime)s [%(levelname)s] %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_dir: Path, enable_logs: bool, debug: bool = False) -> Path | None:
    if not enable_logs:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = log_dir / f"{ts}.log"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=FMT,
        datefmt=DATEFMT,
        handlers=[logging.FileHandler(logfile, encoding="utf-8")],
    )
    logging.info("=== persistkit start ===")
    logging.info("Python exe : %s", sys.executable)
    logging.info("Python ver : %s", sys.version.replace("\n", " "))
    logging.info("Platform   : %s %s (%s)", platform.system(), platform.release(), platform.machine())
    return logfile


def flog(msg: str, level: int = logging.INFO) -> None:
    if logging.getLogger().handlers:
        logging.log(level, msg)


@contextmanager
def cli_logging(log_dir: Path, enable_logs: bool, debug: bool = False):
    logfile = setup_logging(log_dir, enable_logs=enable_logs, debug=debug)
    try:
        yield logfile
    finally:
        if enable_logs and logfile is not None:
            flog(f"Log saved to: {logfile}")
