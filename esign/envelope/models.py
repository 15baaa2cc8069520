# -*- coding: utf-8 -*-
"""
Envelope data model

Frozen dataclasses for the envelope definition and its parts. `to_dict()`
produces the REST request shape (camelCase keys, ids and numbers as strings,
base64 document content).
"""

import base64
from dataclasses import dataclass, field
from typing import Optional, Tuple

from esign.envelope.types import AnchorUnits, EnvelopeStatus


DEFAULT_EMAIL_SUBJECT = "Please sign this document set"


@dataclass(frozen=True)
class DocumentSource:
    """A caller-supplied document before it gets an envelope id"""

    name: str              # display name, can differ from the file name
    file_extension: str    # source format (html, docx, pdf ...)
    content: bytes


@dataclass(frozen=True)
class Document:
    """Document attached to the envelope"""

    document_id: str
    name: str
    file_extension: str
    content: bytes

    @property
    def document_base64(self) -> str:
        return base64.b64encode(self.content).decode("ascii")

    def to_dict(self) -> dict:
        return {
            "documentBase64": self.document_base64,
            "name": self.name,
            "fileExtension": self.file_extension,
            "documentId": self.document_id,
        }


@dataclass(frozen=True)
class SignHere:
    """Sign-here field placed by anchor string"""

    anchor_string: str
    anchor_x_offset: int = 20
    anchor_y_offset: int = 10
    anchor_units: AnchorUnits = AnchorUnits.PIXELS

    def to_dict(self) -> dict:
        return {
            "anchorString": self.anchor_string,
            "anchorYOffset": str(self.anchor_y_offset),
            "anchorUnits": self.anchor_units.value,
            "anchorXOffset": str(self.anchor_x_offset),
        }


@dataclass(frozen=True)
class Signer:
    """Recipient who signs"""

    recipient_id: str
    name: str
    email: str
    routing_order: int
    sign_here_tabs: Tuple[SignHere, ...] = ()

    def to_dict(self) -> dict:
        return {
            "email": self.email,
            "name": self.name,
            "recipientId": self.recipient_id,
            "routingOrder": str(self.routing_order),
            "tabs": {
                "signHereTabs": [tab.to_dict() for tab in self.sign_here_tabs],
            },
        }


@dataclass(frozen=True)
class CarbonCopy:
    """Recipient who receives a copy without signing"""

    recipient_id: str
    name: str
    email: str
    routing_order: int

    def to_dict(self) -> dict:
        return {
            "email": self.email,
            "name": self.name,
            "recipientId": self.recipient_id,
            "routingOrder": str(self.routing_order),
        }


@dataclass(frozen=True)
class Recipients:
    """Envelope recipients; routing_order decides delivery order, not position"""

    signers: Tuple[Signer, ...] = ()
    carbon_copies: Tuple[CarbonCopy, ...] = ()

    def to_dict(self) -> dict:
        return {
            "signers": [s.to_dict() for s in self.signers],
            "carbonCopies": [cc.to_dict() for cc in self.carbon_copies],
        }


@dataclass(frozen=True)
class Envelope:
    """Envelope definition ready for submission"""

    email_subject: str
    documents: Tuple[Document, ...]
    recipients: Recipients
    status: EnvelopeStatus

    def to_dict(self) -> dict:
        """Convert to the request body dict"""
        return {
            "emailSubject": self.email_subject,
            "documents": [doc.to_dict() for doc in self.documents],
            "recipients": self.recipients.to_dict(),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class EnvelopeArgs:
    """Input for build_envelope"""

    signer_email: str
    signer_name: str
    cc_email: str
    cc_name: str
    status: str = EnvelopeStatus.SENT.value
    documents: Tuple[DocumentSource, ...] = field(default_factory=tuple)
    email_subject: str = DEFAULT_EMAIL_SUBJECT


@dataclass(frozen=True)
class EnvelopeSummary:
    """Response of the envelope create call"""

    envelope_id: str
    status: Optional[str] = None
    status_date_time: Optional[str] = None
    uri: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "EnvelopeSummary":
        return cls(
            envelope_id=data.get("envelopeId", ""),
            status=data.get("status"),
            status_date_time=data.get("statusDateTime"),
            uri=data.get("uri"),
        )
