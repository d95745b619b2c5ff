"""Evaluation of docstring payloads."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from docsweep.core.logging import get_logger

log = get_logger("collect.docs")


def find_external(payload: Any, source_file: str, suffixes: Sequence[str]) -> Any:
    """Replace a docstring naming a documentation file with the file's content.

    The docstring must be a single line ending in one of ``suffixes``; the
    path is resolved relative to the directory of the declaring source file.
    Anything else is returned unchanged.
    """
    if not isinstance(payload, str):
        return payload
    candidate = payload.strip()
    if not candidate or "\n" in candidate or not candidate.endswith(tuple(suffixes)):
        return payload
    path = Path(source_file).parent / candidate
    try:
        if not path.is_file():
            return payload
        text = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        # A name the filesystem rejects or an undecodable file leaves the text as is.
        log.debug("external_doc_unreadable", path=str(path), source=source_file, error=str(e))
        return payload
    log.debug("external_doc_loaded", path=str(path), source=source_file)
    return text
