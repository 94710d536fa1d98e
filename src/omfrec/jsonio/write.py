from __future__ import annotations
from ..models.file import RecFile


def write_json_file(file: RecFile, *, pretty: bool = True) -> str:
    return file.model_dump_json(indent=2 if pretty else None)
