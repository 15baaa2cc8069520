# -*- coding: utf-8 -*-
"""
Envelope input validation.

Identity and status checks run before any document bytes are read, so a bad
request fails without touching the filesystem or the network.
"""

from __future__ import annotations

import re

from esign.envelope.errors import EnvelopeErrorCode, InvalidInputError
from esign.envelope.models import DocumentSource, EnvelopeArgs
from esign.envelope.types import EnvelopeStatus

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_PATTERN.match(value or ""))


def _require(value: str | None, code: EnvelopeErrorCode) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError.from_code(code)
    return value.strip()


def validate_recipients(
    signer_email: str | None,
    signer_name: str | None,
    cc_email: str | None,
    cc_name: str | None,
    status: str | None,
) -> EnvelopeStatus:
    """
    Validate recipient identity and status.

    Returns:
        EnvelopeStatus: the parsed status

    Raises:
        InvalidInputError: on the first missing or malformed field
    """
    signer_email = _require(signer_email, EnvelopeErrorCode.MISSING_SIGNER_EMAIL)
    if not is_valid_email(signer_email):
        raise InvalidInputError.from_code(EnvelopeErrorCode.INVALID_SIGNER_EMAIL, value=signer_email)
    _require(signer_name, EnvelopeErrorCode.MISSING_SIGNER_NAME)

    cc_email = _require(cc_email, EnvelopeErrorCode.MISSING_CC_EMAIL)
    if not is_valid_email(cc_email):
        raise InvalidInputError.from_code(EnvelopeErrorCode.INVALID_CC_EMAIL, value=cc_email)
    _require(cc_name, EnvelopeErrorCode.MISSING_CC_NAME)

    if not isinstance(status, str):
        raise InvalidInputError.from_code(EnvelopeErrorCode.INVALID_STATUS, value=status)
    try:
        return EnvelopeStatus.from_string(status)
    except ValueError:
        raise InvalidInputError.from_code(EnvelopeErrorCode.INVALID_STATUS, value=status)


def validate_documents(documents: tuple[DocumentSource, ...] | list[DocumentSource]) -> None:
    if not documents:
        raise InvalidInputError.from_code(EnvelopeErrorCode.NO_DOCUMENTS)
    for doc in documents:
        if not doc.content:
            raise InvalidInputError.from_code(EnvelopeErrorCode.EMPTY_DOCUMENT, name=doc.name)


def validate_args(args: EnvelopeArgs) -> EnvelopeStatus:
    """Validate the complete builder input and return the parsed status."""
    status = validate_recipients(
        args.signer_email,
        args.signer_name,
        args.cc_email,
        args.cc_name,
        args.status,
    )
    validate_documents(args.documents)
    return status
