# -*- coding: utf-8 -*-
"""
Tests for document file reading.
"""

import pytest

from esign.envelope import EnvelopeErrorCode, InvalidInputError
from esign.files import load_document_source, read_document_bytes


def test_read_bytes(document_files):
    docx, _ = document_files

    assert read_document_bytes(docx) == b"PK\x03\x04 docx /sn1/"


def test_missing_file_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_document_bytes(tmp_path / "nope.pdf")


def test_empty_file_is_invalid(tmp_path):
    empty = tmp_path / "empty.pdf"
    empty.write_bytes(b"")

    with pytest.raises(InvalidInputError) as exc_info:
        read_document_bytes(empty)

    assert exc_info.value.code == EnvelopeErrorCode.EMPTY_DOCUMENT


def test_load_document_source_extension_from_suffix(tmp_path):
    path = tmp_path / "Plan.DOCX"
    path.write_bytes(b"data")

    source = load_document_source(path, "Battle Plan")

    assert source.name == "Battle Plan"
    assert source.file_extension == "docx"
    assert source.content == b"data"


def test_load_document_source_explicit_extension(document_files):
    _, pdf = document_files

    assert load_document_source(pdf, "Lorem Ipsum", "pdf").file_extension == "pdf"
