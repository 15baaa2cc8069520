from __future__ import annotations

from pathlib import Path

import pytest

from esign.envelope import DocumentSource, EnvelopeArgs


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        group = _top_level_tests_group(Path(str(item.fspath)))
        if group == "unit":
            item.add_marker(pytest.mark.unit)
        elif group == "integration":
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def envelope_args() -> EnvelopeArgs:
    return EnvelopeArgs(
        signer_email="a@x.com",
        signer_name="A",
        cc_email="b@x.com",
        cc_name="B",
        status="sent",
        documents=(
            DocumentSource(name="Battle Plan", file_extension="docx", content=b"PK\x03\x04 docx /sn1/"),
            DocumentSource(name="Lorem Ipsum", file_extension="pdf", content=b"%PDF-1.4 /sn1/"),
        ),
    )


@pytest.fixture
def document_files(tmp_path: Path) -> tuple[Path, Path]:
    docx = tmp_path / "battle_plan.docx"
    docx.write_bytes(b"PK\x03\x04 docx /sn1/")
    pdf = tmp_path / "lorem.pdf"
    pdf.write_bytes(b"%PDF-1.4 /sn1/")
    return docx, pdf
