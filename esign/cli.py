# -*- coding: utf-8 -*-
"""Envelope sender CLI.

Commands:
- `send`: build the envelope from local documents and create it via the API.
- `preview`: build the envelope and print the request body; no network.

Documents default to the configured docx and pdf (DOC_DOCX_PATH,
DOC_PDF_PATH). Pass `--doc PATH=NAME` (repeatable) to use others.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import requests

from esign import config
from esign.envelope import InvalidInputError, build_envelope
from esign.envelope.models import DEFAULT_EMAIL_SUBJECT
from esign.envelope.document_template import load_title_template
from esign.envelope.sign_here import load_sign_here_tabs
from esign.services.envelopes_api import EnvelopesApiError
from esign.services.send_envelope import (
    DocumentFile,
    SendEnvelopeArgs,
    make_envelope_args,
    send_envelope,
)


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _print_error(message: str, reason: str, **extra: Any) -> None:
    _print_json({"status": "error", "error": {"message": message, "reason": reason, **extra}})


def parse_doc_option(value: str) -> DocumentFile:
    """`path=name` or `path`; the name defaults to the file name."""
    if "=" in value:
        path, name = value.rsplit("=", 1)
    else:
        path, name = value, ""
    path = path.strip()
    if not path:
        raise argparse.ArgumentTypeError(f"invalid --doc value: {value!r}")
    return DocumentFile(path=path, name=name.strip() or path.replace("\\", "/").rsplit("/", 1)[-1])


def _default_documents() -> tuple[DocumentFile, ...]:
    return (
        DocumentFile(path=config.DOC_DOCX_PATH, name=config.DOC_DOCX_NAME),
        DocumentFile(path=config.DOC_PDF_PATH, name=config.DOC_PDF_NAME),
    )


def _send_args(args: argparse.Namespace) -> SendEnvelopeArgs:
    return SendEnvelopeArgs(
        base_path=config.DS_BASE_PATH,
        access_token=config.DS_ACCESS_TOKEN or "",
        account_id=config.DS_ACCOUNT_ID or "",
        signer_email=args.signer_email,
        signer_name=args.signer_name,
        cc_email=args.cc_email,
        cc_name=args.cc_name,
        status=args.status,
        documents=tuple(args.doc) if args.doc else _default_documents(),
        email_subject=args.subject,
        timeout=config.DS_HTTP_TIMEOUT,
    )


def _summarize_documents(body: dict[str, Any], envelope) -> dict[str, Any]:
    for doc_dict, doc in zip(body["documents"], envelope.documents):
        doc_dict["documentBase64"] = f"<{len(doc.content)} bytes>"
    return body


def cmd_send(args: argparse.Namespace) -> int:
    try:
        config.require_api_settings()
    except ValueError as e:
        _print_error(str(e), "config")
        return 1

    try:
        result = send_envelope(_send_args(args))
    except InvalidInputError as e:
        _print_error(e.message, e.code.value)
        return 1
    except FileNotFoundError as e:
        _print_error(str(e), "file_not_found")
        return 1
    except EnvelopesApiError as e:
        _print_error(str(e), "api_error", status_code=e.status_code, body=e.body)
        return 1
    except requests.RequestException as e:
        _print_error(str(e), "network")
        return 1

    _print_json({"status": "created", "result": result})
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    try:
        envelope = build_envelope(
            make_envelope_args(_send_args(args)),
            template=load_title_template(),
            tabs=load_sign_here_tabs(),
        )
    except InvalidInputError as e:
        _print_error(e.message, e.code.value)
        return 1
    except FileNotFoundError as e:
        _print_error(str(e), "file_not_found")
        return 1

    body = envelope.to_dict()
    if not args.full:
        body = _summarize_documents(body, envelope)
    _print_json({"status": "preview", "envelope": body})
    return 0


def _add_envelope_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--signer-email", default=config.SIGNER_EMAIL)
    parser.add_argument("--signer-name", default=config.SIGNER_NAME)
    parser.add_argument("--cc-email", default=config.CC_EMAIL)
    parser.add_argument("--cc-name", default=config.CC_NAME)
    parser.add_argument(
        "--status",
        default=config.ENVELOPE_STATUS,
        help="'sent' to send now, 'created' (or 'draft') to save a draft",
    )
    parser.add_argument("--subject", default=DEFAULT_EMAIL_SUBJECT)
    parser.add_argument(
        "--doc",
        action="append",
        type=parse_doc_option,
        help="Document as PATH=NAME (repeatable); defaults to the configured docx and pdf",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="esign", description="Build and send a signing envelope")
    sub = parser.add_subparsers(dest="command", required=True)

    send = sub.add_parser("send", help="Create the envelope via the API")
    _add_envelope_arguments(send)
    send.set_defaults(func=cmd_send)

    preview = sub.add_parser("preview", help="Print the envelope request body without sending")
    _add_envelope_arguments(preview)
    preview.add_argument("--full", action="store_true", help="Keep base64 document content")
    preview.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
