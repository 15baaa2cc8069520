# -*- coding: utf-8 -*-
"""
HTTP entry point for creating signing envelopes

This module handles:
1. Accept POST requests with signer / cc identity and status
2. Build the envelope from the configured documents
3. Create it through the Envelopes API
4. Return the envelope id (or relay the upstream error unchanged)
"""

import sys
from pathlib import Path

# Add project root to sys.path for local development
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
import requests
from flask import Flask, request, jsonify

from esign import config
from esign.envelope import InvalidInputError
from esign.services.envelopes_api import EnvelopesApi, EnvelopesApiError
from esign.services.send_envelope import DocumentFile, SendEnvelopeArgs, send_envelope

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)

# Lazily created API client
_envelopes_api = None


def get_envelopes_api() -> EnvelopesApi:
    """Get or initialize the Envelopes API client (lazy initialization)"""
    global _envelopes_api
    if _envelopes_api is None:
        logger.info("Initializing EnvelopesApi")
        _envelopes_api = EnvelopesApi(
            config.DS_BASE_PATH,
            config.DS_ACCESS_TOKEN or "",
            timeout=config.DS_HTTP_TIMEOUT,
        )
    return _envelopes_api


def _send_args_from_body(body: dict) -> SendEnvelopeArgs:
    return SendEnvelopeArgs(
        base_path=config.DS_BASE_PATH,
        access_token=config.DS_ACCESS_TOKEN or "",
        account_id=config.DS_ACCOUNT_ID or "",
        signer_email=body.get("signer_email", ""),
        signer_name=body.get("signer_name", ""),
        cc_email=body.get("cc_email", ""),
        cc_name=body.get("cc_name", ""),
        status=body.get("status") or config.ENVELOPE_STATUS,
        documents=(
            DocumentFile(path=config.DOC_DOCX_PATH, name=config.DOC_DOCX_NAME),
            DocumentFile(path=config.DOC_PDF_PATH, name=config.DOC_PDF_NAME),
        ),
        timeout=config.DS_HTTP_TIMEOUT,
    )


@app.route("/api/health", methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({"status": "ok"}), 200


@app.route("/api/envelopes", methods=['POST'])
def create_envelope():
    """
    Create an envelope for one signer and one cc recipient.

    Returns:
        200 {"envelope_id"} on success, 400 on invalid input, the upstream
        status on API errors, 500 on configuration problems
    """
    try:
        config.require_api_settings()
    except ValueError as e:
        logger.error(str(e))
        return jsonify({"error": {"code": "config", "message": str(e)}}), 500

    body = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        logger.warning(f"Rejected request body of type {type(body).__name__}")
        return jsonify({"error": {"code": "invalid_body", "message": "Request body must be a JSON object"}}), 400

    try:
        result = send_envelope(_send_args_from_body(body), api=get_envelopes_api())
    except InvalidInputError as e:
        logger.warning(f"Invalid envelope input: {e.message}")
        return jsonify({"error": {"code": e.code.value, "message": e.message}}), 400
    except FileNotFoundError as e:
        logger.error(f"Document file missing: {e}")
        return jsonify({"error": {"code": "file_not_found", "message": str(e)}}), 500
    except EnvelopesApiError as e:
        # Relay the upstream response as-is
        return app.response_class(e.body, status=e.status_code, mimetype="application/json")
    except requests.RequestException as e:
        logger.error(f"Envelope API unreachable: {e}")
        return jsonify({"error": {"code": "network", "message": str(e)}}), 502

    return jsonify(result), 200


# Local development entry point
if __name__ == "__main__":
    app.run(debug=True, port=5000)
