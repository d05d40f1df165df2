"""Atomic file writers for report artifacts."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import TextIO


def _replace_atomically(path: Path, write: Callable[[TextIO], None], *, temp_prefix: str, temp_suffix: str) -> None:
    """Write through a sibling temp file, then rename it over ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            write(handle)
        os.replace(temp_name, path)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise


def write_json_atomic(*, path: Path, payload: object, temp_prefix: str, temp_suffix: str) -> None:
    """Persist ``payload`` as indented, key-sorted JSON.

    Values json cannot encode natively (UUIDs, datetimes) are written via ``str``.
    """

    def _dump(handle: TextIO) -> None:
        json.dump(payload, handle, indent=2, sort_keys=True, default=str)
        handle.write("\n")

    _replace_atomically(path, _dump, temp_prefix=temp_prefix, temp_suffix=temp_suffix)


def write_text_atomic(*, path: Path, content: str, temp_prefix: str, temp_suffix: str) -> None:
    _replace_atomically(path, lambda handle: handle.write(content), temp_prefix=temp_prefix, temp_suffix=temp_suffix)
