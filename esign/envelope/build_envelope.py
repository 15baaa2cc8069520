# -*- coding: utf-8 -*-
"""
Envelope Builder

Assembles the envelope definition: title document plus supplied documents,
one signer and one cc recipient, anchor-placed sign-here tabs.

document 1 (html) has tag **signature_1**
document 2 (docx) has tag /sn1/
document 3 (pdf) has tag /sn1/

The envelope is sent to the signer first. After it is signed, a copy goes to
the cc recipient.
"""

from typing import Optional, Tuple

from esign.envelope.document_template import (
    TITLE_DOCUMENT_EXTENSION,
    TITLE_DOCUMENT_NAME,
    render_title_document,
)
from esign.envelope.models import (
    CarbonCopy,
    Document,
    DocumentSource,
    Envelope,
    EnvelopeArgs,
    Recipients,
    SignHere,
    Signer,
)
from esign.envelope.errors import EnvelopeErrorCode, InvalidInputError
from esign.envelope.sign_here import DEFAULT_SIGN_HERE_TABS
from esign.envelope.validate import validate_args

SIGNER_RECIPIENT_ID = "1"
SIGNER_ROUTING_ORDER = 1
CC_RECIPIENT_ID = "2"
CC_ROUTING_ORDER = 2


def make_documents(args: EnvelopeArgs, template: Optional[str] = None) -> Tuple[Document, ...]:
    """
    Title document followed by the supplied documents.

    Ids are "1".."N" in order; the order is the attachment order only.
    """
    title_content = render_title_document(args, template).encode("utf-8")
    if not title_content:
        raise InvalidInputError.from_code(EnvelopeErrorCode.EMPTY_DOCUMENT, name=TITLE_DOCUMENT_NAME)

    title = DocumentSource(
        name=TITLE_DOCUMENT_NAME,
        file_extension=TITLE_DOCUMENT_EXTENSION,
        content=title_content,
    )
    sources = (title,) + tuple(args.documents)
    return tuple(
        Document(
            document_id=str(idx),
            name=source.name,
            file_extension=source.file_extension,
            content=source.content,
        )
        for idx, source in enumerate(sources, start=1)
    )


def make_signer(args: EnvelopeArgs, tabs: Tuple[SignHere, ...]) -> Signer:
    return Signer(
        recipient_id=SIGNER_RECIPIENT_ID,
        name=args.signer_name.strip(),
        email=args.signer_email.strip(),
        routing_order=SIGNER_ROUTING_ORDER,
        sign_here_tabs=tabs,
    )


def make_carbon_copy(args: EnvelopeArgs) -> CarbonCopy:
    return CarbonCopy(
        recipient_id=CC_RECIPIENT_ID,
        name=args.cc_name.strip(),
        email=args.cc_email.strip(),
        routing_order=CC_ROUTING_ORDER,
    )


def build_envelope(
    args: EnvelopeArgs,
    template: Optional[str] = None,
    tabs: Optional[Tuple[SignHere, ...]] = None,
) -> Envelope:
    """
    Build the envelope definition.

    With `template` given, the call reads nothing from disk.

    Args:
        args: signer/cc identity, status and supplied documents
        template: title document template text (packaged asset when omitted)
        tabs: signer sign-here tabs (the fixed **signature_1** and /sn1/
            anchors when omitted)

    Returns:
        Envelope

    Raises:
        InvalidInputError: missing or malformed input; nothing is built
    """
    status = validate_args(args)

    return Envelope(
        email_subject=args.email_subject,
        documents=make_documents(args, template),
        recipients=Recipients(
            signers=(make_signer(args, tabs if tabs is not None else DEFAULT_SIGN_HERE_TABS),),
            carbon_copies=(make_carbon_copy(args),),
        ),
        status=status,
    )
