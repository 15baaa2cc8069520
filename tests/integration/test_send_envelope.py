# -*- coding: utf-8 -*-
"""
End-to-end send flow with the HTTP session mocked.
"""

import base64
from dataclasses import replace
from unittest.mock import Mock, patch

import pytest

from esign.envelope import EnvelopeErrorCode, InvalidInputError, SignHere
from esign.services.envelopes_api import EnvelopesApi, EnvelopesApiError
from esign.services.send_envelope import DocumentFile, SendEnvelopeArgs, send_envelope
from tests.test_utils import CREATED_PAYLOAD, make_session_with_response


@pytest.fixture
def send_args(document_files):
    docx, pdf = document_files
    return SendEnvelopeArgs(
        base_path="https://demo.example.net/restapi",
        access_token="token",
        account_id="acct-1",
        signer_email="a@x.com",
        signer_name="A",
        cc_email="b@x.com",
        cc_name="B",
        status="sent",
        documents=(
            DocumentFile(path=str(docx), name="Battle Plan"),
            DocumentFile(path=str(pdf), name="Lorem Ipsum"),
        ),
    )


def test_send_envelope_returns_id(send_args, document_files, caplog):
    session = make_session_with_response(201, CREATED_PAYLOAD)
    api = EnvelopesApi(send_args.base_path, send_args.access_token, session=session)

    with caplog.at_level("INFO"):
        result = send_envelope(send_args, api=api)

    assert result == {"envelope_id": CREATED_PAYLOAD["envelopeId"]}
    assert f"Envelope was created. EnvelopeId {CREATED_PAYLOAD['envelopeId']}" in caplog.text

    body = session.post.call_args.kwargs["json"]
    assert [d["name"] for d in body["documents"]] == ["Order acknowledgement", "Battle Plan", "Lorem Ipsum"]
    assert [d["fileExtension"] for d in body["documents"]] == ["html", "docx", "pdf"]
    assert base64.b64decode(body["documents"][2]["documentBase64"]) == document_files[1].read_bytes()
    assert body["status"] == "sent"


def test_send_envelope_builds_default_client(send_args):
    with patch("esign.services.send_envelope.EnvelopesApi") as mock_api_cls:
        mock_api_cls.return_value.create_envelope.return_value = Mock(envelope_id="env-9")
        result = send_envelope(send_args)

    assert result == {"envelope_id": "env-9"}
    mock_api_cls.assert_called_once_with(send_args.base_path, "token", timeout=30)
    assert mock_api_cls.return_value.create_envelope.call_args.args[0] == "acct-1"


def test_missing_signer_email_fails_before_reading_or_network(send_args):
    api = Mock()
    args = replace(send_args, signer_email="")

    with patch("esign.files.Path.read_bytes") as mock_read:
        with pytest.raises(InvalidInputError) as exc_info:
            send_envelope(args, api=api)

    assert exc_info.value.code == EnvelopeErrorCode.MISSING_SIGNER_EMAIL
    mock_read.assert_not_called()
    api.create_envelope.assert_not_called()


def test_missing_document_file_fails_before_network(send_args, tmp_path):
    api = Mock()
    args = replace(send_args, documents=(DocumentFile(path=str(tmp_path / "gone.docx"), name="Gone"),))

    with pytest.raises(FileNotFoundError):
        send_envelope(args, api=api)

    api.create_envelope.assert_not_called()


def test_upstream_error_is_surfaced_unchanged(send_args):
    error_body = {"errorCode": "ACCOUNT_LACKS_PERMISSIONS", "message": "This account lacks sufficient permissions."}
    session = make_session_with_response(400, error_body)
    api = EnvelopesApi(send_args.base_path, send_args.access_token, session=session)

    with pytest.raises(EnvelopesApiError) as exc_info:
        send_envelope(send_args, api=api)

    assert exc_info.value.status_code == 400
    assert exc_info.value.error_code == "ACCOUNT_LACKS_PERMISSIONS"
    assert session.post.call_count == 1


def test_send_envelope_uses_configured_tabs(send_args):
    tabs = (SignHere(anchor_string="/custom/"),)
    api = Mock()
    api.create_envelope.return_value = Mock(envelope_id="env-2")

    with patch("esign.services.send_envelope.load_sign_here_tabs", return_value=tabs):
        send_envelope(send_args, api=api)

    envelope = api.create_envelope.call_args.args[1]
    assert envelope.recipients.signers[0].sign_here_tabs == tabs
