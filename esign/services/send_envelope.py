# -*- coding: utf-8 -*-
"""
Send Envelope

Reads the documents, builds the envelope and creates it through the
Envelopes API. Recipient input is validated before any file is read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from esign.envelope import EnvelopeArgs, build_envelope, validate_recipients
from esign.envelope.models import DEFAULT_EMAIL_SUBJECT
from esign.envelope.document_template import load_title_template
from esign.envelope.sign_here import load_sign_here_tabs
from esign.files import load_document_source
from esign.services.envelopes_api import EnvelopesApi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentFile:
    """A document to read from disk"""

    path: str
    name: str
    file_extension: str | None = None


@dataclass(frozen=True)
class SendEnvelopeArgs:
    """Everything needed to build and create one envelope"""

    base_path: str
    access_token: str
    account_id: str
    signer_email: str
    signer_name: str
    cc_email: str
    cc_name: str
    status: str = "sent"
    documents: tuple[DocumentFile, ...] = field(default_factory=tuple)
    email_subject: str = DEFAULT_EMAIL_SUBJECT
    timeout: int = 30


def make_envelope_args(args: SendEnvelopeArgs) -> EnvelopeArgs:
    """
    Validate recipients, then read the document files.

    Raises:
        InvalidInputError: bad recipient/status input or an empty file
        FileNotFoundError: a document file is missing
    """
    validate_recipients(
        args.signer_email,
        args.signer_name,
        args.cc_email,
        args.cc_name,
        args.status,
    )

    sources = tuple(
        load_document_source(doc.path, doc.name, doc.file_extension)
        for doc in args.documents
    )
    return EnvelopeArgs(
        signer_email=args.signer_email,
        signer_name=args.signer_name,
        cc_email=args.cc_email,
        cc_name=args.cc_name,
        status=args.status,
        documents=sources,
        email_subject=args.email_subject,
    )


def send_envelope(args: SendEnvelopeArgs, *, api: EnvelopesApi | None = None) -> dict:
    """
    Build the envelope and create it.

    Args:
        args: API settings, recipients and documents
        api: client to use (built from args when omitted)

    Returns:
        dict: {"envelope_id": <id>}

    Raises:
        InvalidInputError, FileNotFoundError: before any network call
        EnvelopesApiError, requests.RequestException: from the API call
    """
    envelope = build_envelope(
        make_envelope_args(args),
        template=load_title_template(),
        tabs=load_sign_here_tabs(),
    )

    api = api or EnvelopesApi(args.base_path, args.access_token, timeout=args.timeout)
    summary = api.create_envelope(args.account_id, envelope)

    logger.info(f"Envelope was created. EnvelopeId {summary.envelope_id}")
    return {"envelope_id": summary.envelope_id}
