from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
import sys

DEFAULT_FOLDER = "Persistkit"


def user_data_dir() -> Path:
    """Per-user application data folder for the current platform."""
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    xdg = os.getenv("XDG_DATA_HOME")
    return Path(xdg) if xdg else home / ".local" / "share"


@dataclass
class StoreConfig:
    home: Path
    reading_root: Path
    writing_root: Path
    logs_dir: Path
    folder_name: str

    @classmethod
    def load(cls) -> "StoreConfig":
        folder_name = os.getenv("PERSISTKIT_FOLDER") or DEFAULT_FOLDER
        home_env = os.getenv("PERSISTKIT_HOME")
        home = Path(home_env).expanduser() if home_env else user_data_dir() / folder_name

        def env_path(var: str, default: Path) -> Path:
            v = os.getenv(var)
            if not v:
                return default
            p = Path(v).expanduser()
            return p if p.is_absolute() else (home / p)

        return cls(
            home=home,
            reading_root=env_path("PERSISTKIT_READ_ROOT", home),
            writing_root=env_path("PERSISTKIT_WRITE_ROOT", home),
            logs_dir=env_path("PERSISTKIT_LOG_DIR", home / "logs"),
            folder_name=folder_name,
        )

    @classmethod
    def from_args(cls, args) -> "StoreConfig":
        cfg = cls.load()
        if getattr(args, "read_root", None):
            p = Path(args.read_root).expanduser()
            cfg.reading_root = p if p.is_absolute() else cfg.home / p
        if getattr(args, "write_root", None):
            p = Path(args.write_root).expanduser()
            cfg.writing_root = p if p.is_absolute() else cfg.home / p
        return cfg

    @property
    def split_roots(self) -> bool:
        return self.reading_root != self.writing_root

    def pretty_lines(self) -> list[str]:
        return [
            "Resolved configuration:",
            f"home         : {self.home}",
            f"folder name  : {self.folder_name}",
            f"reading_root : {self.reading_root}",
            f"writing_root : {self.writing_root}",
            f"logs_dir     : {self.logs_dir}",
            f"split roots  : {'yes' if self.split_roots else 'no'}",
        ]
