# adapters/file_io.py
from __future__ import annotations
import os
import shutil
import tempfile
from pathlib import Path
from typing import List

from core.errors import NotFoundError, StoreIOError


def _fsync_dir(dir_path: Path) -> None:
    # not supported everywhere (Windows), the rename already happened
    try:
        fd = os.open(str(dir_path), os.O_RDONLY | getattr(os, "O_DIRECTORY", 0))
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError:
        pass
    finally:
        os.close(fd)


def _is_hidden(p: Path) -> bool:
    return p.name.startswith(".")


class FileAccess:
    """
    Raw filesystem access used by the store.

    Everything here deals in bytes and paths only. OSErrors are translated to
    NotFoundError (the entry does not exist) or StoreIOError (anything else),
    so callers can tell "nothing stored yet" apart from a broken disk.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"no such file: {path}", path) from e
        except OSError as e:
            raise StoreIOError(f"failed to read {path}: {e}", path) from e

    def write_bytes(self, path: Path, data: bytes) -> None:
        # hidden temp sibling: same filesystem for os.replace, and skipped by list_files
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        except OSError as e:
            raise StoreIOError(f"failed to create temp file for {path}: {e}", path) from e
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except OSError as e:
            raise StoreIOError(f"failed to write {path}: {e}", path) from e
        finally:
            if tmp.exists():
                try:
                    tmp.unlink()
                except OSError:
                    pass
        _fsync_dir(path.parent)

    def delete(self, path: Path) -> None:
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(f"nothing to delete at {path}", path) from e
        except OSError as e:
            raise StoreIOError(f"failed to delete {path}: {e}", path) from e

    def list_files(self, directory: Path) -> List[Path]:
        """Immediate, non-hidden regular files of a directory, sorted by name."""
        try:
            entries = list(directory.iterdir())
        except FileNotFoundError as e:
            raise NotFoundError(f"no such folder: {directory}", directory) from e
        except OSError as e:
            raise StoreIOError(f"couldn't read folder {directory}: {e}", directory) from e
        files = [p for p in entries if not _is_hidden(p) and not p.is_dir()]
        files.sort(key=lambda p: p.name)
        return files

    def copy(self, src: Path, dst: Path, is_directory: bool) -> None:
        if not src.exists():
            raise NotFoundError(f"nothing to copy at {src}", src)
        if dst.exists():
            raise StoreIOError(f"destination already exists: {dst}", dst)
        try:
            if is_directory:
                shutil.copytree(src, dst)
            else:
                shutil.copy2(src, dst)
        except OSError as e:
            raise StoreIOError(f"failed to copy {src} -> {dst}: {e}", dst) from e
