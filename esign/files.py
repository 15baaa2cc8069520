# -*- coding: utf-8 -*-
"""
Document file reading.

Missing files raise FileNotFoundError unchanged; empty files are rejected as
invalid envelope input.
"""

from __future__ import annotations

import logging
from pathlib import Path

from esign.envelope import DocumentSource, EnvelopeErrorCode, InvalidInputError

logger = logging.getLogger(__name__)


def read_document_bytes(path: str | Path) -> bytes:
    """Read a document file as bytes."""
    path = Path(path)
    content = path.read_bytes()
    if not content:
        raise InvalidInputError.from_code(EnvelopeErrorCode.EMPTY_DOCUMENT, name=path.name)
    logger.debug(f"Read {len(content)} bytes from {path}")
    return content


def load_document_source(
    path: str | Path,
    name: str,
    file_extension: str | None = None,
) -> DocumentSource:
    """
    Read a file into a DocumentSource.

    Args:
        path: file to read
        name: display name in the envelope (can differ from the file name)
        file_extension: source format; taken from the path suffix when omitted
    """
    path = Path(path)
    extension = file_extension or path.suffix.lstrip(".").lower()
    return DocumentSource(name=name, file_extension=extension, content=read_document_bytes(path))
