# core/store.py
"""
Dual-root JSON persistence.

Documents live at <root>/<name>, collections at <root>/<folder>/<item>.json.
Reads always go to the reading root and writes to the writing root, so a
store can be pointed at a template (or a previous version's data) for reading
while everything it saves lands somewhere else.

Nothing is cached: every call goes to disk.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Tuple

from adapters import json_codec
from adapters.file_io import FileAccess
from core.errors import NotFoundError, ParseError, PersistenceError, SaveError, SetupError, StoreIOError
from core.paths import Intention, PathResolver, ensure_folder
from core.results import ItemFailure, LoadReport, SaveReport

LOGGER_NAME = "persistkit"

Convert = Callable[[Any], Any]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# returned by document loads when nothing is stored (a stored JSON null is None)
MISSING: Any = _Missing()


def _jsonify(item: Any, to_json: Optional[Convert]) -> Any:
    if to_json is not None:
        return to_json(item)
    method = getattr(item, "to_json", None)
    if callable(method):
        return method()
    return item


class JsonStore:
    def __init__(
        self,
        reading_root: Path | str,
        writing_root: Path | str,
        files: Optional[FileAccess] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.paths = PathResolver(Path(reading_root), Path(writing_root))
        self.files = files or FileAccess()
        self.log = logger or logging.getLogger(LOGGER_NAME)
        ensure_folder(self.paths.reading_root)
        ensure_folder(self.paths.writing_root)

    @property
    def reading_root(self) -> Path:
        return self.paths.reading_root

    @property
    def writing_root(self) -> Path:
        return self.paths.writing_root

    # ---------------------------
    # Documents
    # ---------------------------
    def save_document(self, name: str, value: Any, to_json: Optional[Convert] = None) -> Path:
        """Encode `value` and atomically write it to <writing root>/<name>. Raises SaveError."""
        path = self.paths.resolve(name, Intention.WRITING)
        try:
            json_value = _jsonify(value, to_json)
        except Exception as e:
            raise SaveError(f"couldn't convert {name} to JSON: {e}", path) from e
        try:
            self._write_json(path, json_value)
        except PersistenceError as e:
            raise SaveError(f"failed to save {name}: {e}", path) from e
        return path

    def load_document(self, name: str, convert: Optional[Convert] = None) -> Any:
        """
        Read <reading root>/<name>.

        Returns MISSING when there is no such file. Raises ParseError for
        malformed JSON or when `convert` rejects the value, StoreIOError for
        any other read failure.
        """
        path = self.paths.resolve(name, Intention.READING)
        try:
            data = self.files.read_bytes(path)
        except NotFoundError:
            return MISSING
        try:
            value = json_codec.decode(data)
        except ParseError as e:
            raise ParseError(f"failed to parse {name}: {e}", path) from e
        if convert is None:
            return value
        try:
            return convert(value)
        except Exception as e:
            raise ParseError(f"couldn't convert {name}: {e}", path) from e

    def load_dictionary(self, name: str) -> Any:
        value = self.load_document(name)
        if value is not MISSING and not isinstance(value, dict):
            path = self.paths.resolve(name, Intention.READING)
            raise ParseError(f"{name} is not a JSON object", path)
        return value

    def save_array(self, name: str, items: Iterable[Any], to_json: Optional[Convert] = None) -> Path:
        def each(values):
            return [_jsonify(item, to_json) for item in values]

        return self.save_document(name, list(items), to_json=each)

    def load_array(self, name: str, convert: Optional[Convert] = None) -> Any:
        """
        Load a document holding a JSON array of objects.

        Every element must be a JSON object, otherwise the whole document is a
        ParseError. Elements that `convert` rejects are dropped and reported
        with a single error record; the rest are returned.
        """
        value = self.load_document(name)
        if value is MISSING:
            return MISSING
        if not isinstance(value, list):
            path = self.paths.resolve(name, Intention.READING)
            raise ParseError(f"{name} is not a JSON array", path)

        if not all(isinstance(entry, dict) for entry in value):
            path = self.paths.resolve(name, Intention.READING)
            raise ParseError(f"{name} is not a JSON array of objects", path)

        items: List[Any] = []
        for index, entry in enumerate(value):
            if convert is None:
                items.append(entry)
                continue
            try:
                items.append(convert(entry))
            except Exception as e:
                self.log.debug("%s[%d] failed to convert: %s", name, index, e)
        if len(items) != len(value):
            self.log.error("Some %s failed to parse, will be ignored.", name)
        return items

    def delete_document(self, name: str) -> bool:
        return self._delete(name, self.paths.resolve(name, Intention.WRITING))

    def delete_collection(self, name: str) -> bool:
        path = self.paths.resolve(name, Intention.WRITING_NO_CREATE_FOLDER, is_directory=True)
        return self._delete(name, path)

    # ---------------------------
    # Collections
    # ---------------------------
    def save_collection(
        self,
        folder: str,
        items: Iterable[Any],
        name_for_item: Callable[[Any], str],
        to_json: Optional[Convert] = None,
    ) -> SaveReport:
        """
        Write each item to <writing root>/<folder>/<name_for_item(item)>.json.

        Items are saved independently; a failing item is logged and recorded
        in the returned report, and the others are still written.
        """
        folder_path = self.paths.resolve(folder, Intention.WRITING, is_directory=True)
        report = SaveReport(folder=folder_path)
        for index, item in enumerate(items):
            label = f"#{index}"
            try:
                label = str(name_for_item(item))
                path = folder_path / f"{label}.json"
                self._write_json(path, _jsonify(item, to_json))
            except Exception as e:
                self.log.error("Failed to save a %s (%s), error %s", folder, label, e)
                report.failures.append(ItemFailure(label, e))
                continue
            report.saved.append(path)
        return report

    def load_collection(self, folder: str, convert: Optional[Convert] = None) -> List[Any]:
        return self.load_collection_report(folder, convert).items

    def load_collection_report(self, folder: str, convert: Optional[Convert] = None) -> LoadReport:
        """
        Load every item file of a collection.

        A missing folder is an empty collection. Files that can't be read,
        parsed or converted are logged and left out; only failing to list the
        folder itself raises (StoreIOError).
        """
        folder_path = self.paths.resolve(folder, Intention.READING, is_directory=True)
        report = LoadReport(folder=folder_path)
        try:
            files = self.files.list_files(folder_path)
        except NotFoundError:
            return report

        for path in files:
            try:
                value = json_codec.decode(self.files.read_bytes(path))
                if not isinstance(value, dict):
                    raise ParseError(f"expected a JSON object, got {type(value).__name__}", path)
                report.items.append(value if convert is None else convert(value))
            except Exception as e:
                self.log.error("Couldn't parse %s at %s, error %s", folder, path, e)
                report.failures.append(ItemFailure(path.name, e))
        return report

    def collection_files(self, folder: str) -> List[Path]:
        folder_path = self.paths.resolve(folder, Intention.READING, is_directory=True)
        try:
            return self.files.list_files(folder_path)
        except NotFoundError:
            return []

    # ---------------------------
    # Read root -> write root
    # ---------------------------
    def copy_to_write_location(self, name: str, is_directory: bool = False) -> Path:
        """Copy an entry verbatim from the reading root to the writing root. Raises SetupError."""
        src = self.paths.resolve(name, Intention.READING, is_directory)
        dst = self.paths.resolve(name, Intention.WRITING_NO_CREATE_FOLDER, is_directory)
        if not self.files.exists(src):
            raise SetupError(f"nothing to copy for {name} at {src}", src)
        if src.resolve() == dst.resolve():
            return dst
        try:
            self.files.copy(src, dst, is_directory)
        except PersistenceError as e:
            raise SetupError(f"failed to copy {name} to the write location: {e}", dst) from e
        self.log.info("Copied %s to %s", src, dst)
        return dst

    def seed(self, entries: Iterable[Tuple[str, bool]]) -> List[str]:
        """
        Copy (name, is_directory) entries that the writing root doesn't have yet.

        Entries missing from the reading root are skipped. Returns the names copied.
        """
        copied: List[str] = []
        for name, is_directory in entries:
            dst = self.paths.resolve(name, Intention.WRITING_NO_CREATE_FOLDER, is_directory)
            if self.files.exists(dst):
                continue
            src = self.paths.resolve(name, Intention.READING, is_directory)
            if not self.files.exists(src):
                self.log.info("Nothing to seed for %s", name)
                continue
            self.copy_to_write_location(name, is_directory)
            copied.append(name)
        return copied

    # ---------------------------
    # internals
    # ---------------------------
    def _write_json(self, path: Path, value: Any) -> None:
        data = json_codec.encode(value)
        ensure_folder(path.parent)
        self.files.write_bytes(path, data)

    def _delete(self, name: str, path: Path) -> bool:
        try:
            self.files.delete(path)
        except NotFoundError:
            self.log.info("Nothing to delete for %s at %s", name, path)
            return False
        except StoreIOError as e:
            self.log.error("Failed to delete %s, error %s", name, e)
            return False
        return True
