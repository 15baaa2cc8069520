# -*- coding: utf-8 -*-
"""
Envelope Error Types

Error codes and message templates for envelope input validation.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class EnvelopeErrorCode(Enum):
    """Envelope input error codes"""

    MISSING_SIGNER_EMAIL = "missing_signer_email"
    MISSING_SIGNER_NAME = "missing_signer_name"
    INVALID_SIGNER_EMAIL = "invalid_signer_email"
    MISSING_CC_EMAIL = "missing_cc_email"
    MISSING_CC_NAME = "missing_cc_name"
    INVALID_CC_EMAIL = "invalid_cc_email"
    NO_DOCUMENTS = "no_documents"
    EMPTY_DOCUMENT = "empty_document"
    INVALID_STATUS = "invalid_status"


# Message templates
ERROR_MESSAGES = {
    EnvelopeErrorCode.MISSING_SIGNER_EMAIL: "Signer email is required",
    EnvelopeErrorCode.MISSING_SIGNER_NAME: "Signer name is required",
    EnvelopeErrorCode.INVALID_SIGNER_EMAIL: "Signer email is not a valid address: {value}",
    EnvelopeErrorCode.MISSING_CC_EMAIL: "CC email is required",
    EnvelopeErrorCode.MISSING_CC_NAME: "CC name is required",
    EnvelopeErrorCode.INVALID_CC_EMAIL: "CC email is not a valid address: {value}",
    EnvelopeErrorCode.NO_DOCUMENTS: "At least one document is required",
    EnvelopeErrorCode.EMPTY_DOCUMENT: "Document is empty: {name}",
    EnvelopeErrorCode.INVALID_STATUS: "Unknown envelope status: {value} (use 'sent' or 'created')",
}


@dataclass
class InvalidInputError(Exception):
    """Raised when envelope input is missing or malformed"""

    code: EnvelopeErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: EnvelopeErrorCode, **kwargs) -> "InvalidInputError":
        """Build an error from its code, filling the message template"""
        template = ERROR_MESSAGES.get(code, "Invalid envelope input")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)
