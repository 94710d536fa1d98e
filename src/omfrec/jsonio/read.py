from __future__ import annotations
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from omfrec.errors import FileParseError
from ..models.file import RecFile


def read_json_file(src: Union[str, bytes, Path]) -> RecFile:
    """Build a RecFile from its JSON form (text, bytes, or a path to a .json file)."""
    if isinstance(src, Path):
        src = src.read_text(encoding="utf-8")
    try:
        return RecFile.model_validate_json(src)
    except ValidationError as e:
        raise FileParseError(f"invalid REC JSON: {e}") from e
