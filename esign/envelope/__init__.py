# -*- coding: utf-8 -*-
"""
Envelope module

Builds the envelope definition (documents, recipients, sign-here tabs,
status) from plain input. Nothing here touches the network.

Usage:
    from esign.envelope import EnvelopeArgs, DocumentSource, build_envelope
    envelope = build_envelope(EnvelopeArgs(
        signer_email="a@x.com", signer_name="A",
        cc_email="b@x.com", cc_name="B",
        documents=(DocumentSource("Battle Plan", "docx", docx_bytes),),
    ))
"""

from esign.envelope.types import AnchorUnits, EnvelopeStatus
from esign.envelope.errors import EnvelopeErrorCode, InvalidInputError
from esign.envelope.models import (
    CarbonCopy,
    Document,
    DocumentSource,
    Envelope,
    EnvelopeArgs,
    EnvelopeSummary,
    Recipients,
    SignHere,
    Signer,
)
from esign.envelope.validate import validate_args, validate_recipients
from esign.envelope.build_envelope import build_envelope


# Export
__all__ = [
    "build_envelope",
    "validate_args",
    "validate_recipients",
    "AnchorUnits",
    "EnvelopeStatus",
    "EnvelopeErrorCode",
    "InvalidInputError",
    "CarbonCopy",
    "Document",
    "DocumentSource",
    "Envelope",
    "EnvelopeArgs",
    "EnvelopeSummary",
    "Recipients",
    "SignHere",
    "Signer",
]
