# adapters/json_codec.py
from __future__ import annotations
import json
from typing import Any

from core.errors import EncodeError, ParseError


def encode(value: Any) -> bytes:
    try:
        text = json.dumps(value, ensure_ascii=False, indent=2, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"value is not JSON-serializable: {e}") from e
    return (text + "\n").encode("utf-8")


def decode(data: bytes) -> Any:
    # utf-8-sig drops a leading BOM if someone edited the file by hand
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"not valid UTF-8: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"malformed JSON: {e}") from e
