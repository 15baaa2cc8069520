# -*- coding: utf-8 -*-
"""
Tests for the envelope request body shape.
"""

import base64
from dataclasses import FrozenInstanceError

import pytest

from esign.envelope import EnvelopeSummary, build_envelope


def test_to_dict_shape(envelope_args):
    body = build_envelope(envelope_args).to_dict()

    assert body["emailSubject"] == "Please sign this document set"
    assert body["status"] == "sent"
    assert body["documents"][2] == {
        "documentBase64": base64.b64encode(b"%PDF-1.4 /sn1/").decode("ascii"),
        "name": "Lorem Ipsum",
        "fileExtension": "pdf",
        "documentId": "3",
    }

    signer = body["recipients"]["signers"][0]
    assert signer["recipientId"] == "1"
    assert signer["routingOrder"] == "1"
    assert signer["tabs"]["signHereTabs"][0] == {
        "anchorString": "**signature_1**",
        "anchorYOffset": "10",
        "anchorUnits": "pixels",
        "anchorXOffset": "20",
    }
    assert body["recipients"]["carbonCopies"] == [
        {"email": "b@x.com", "name": "B", "recipientId": "2", "routingOrder": "2"}
    ]


def test_envelope_is_immutable(envelope_args):
    envelope = build_envelope(envelope_args)

    with pytest.raises(FrozenInstanceError):
        envelope.status = None
    with pytest.raises(FrozenInstanceError):
        envelope.documents[0].name = "other"


def test_summary_from_dict():
    summary = EnvelopeSummary.from_dict({"envelopeId": "abc", "status": "created"})

    assert summary.envelope_id == "abc"
    assert summary.status == "created"
    assert summary.uri is None
