# -*- coding: utf-8 -*-
"""
Envelopes API Client

Posts envelope definitions to the eSignature REST API:
    POST {base_path}/v2.1/accounts/{account_id}/envelopes

Non-2xx responses, and 2xx responses without an envelope id, raise
EnvelopesApiError with the upstream status and body untouched. Transport
errors from requests propagate as-is. No retries.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from esign.envelope import Envelope, EnvelopeSummary

logger = logging.getLogger(__name__)

API_VERSION = "v2.1"


@dataclass
class EnvelopesApiError(Exception):
    """Upstream rejected the request"""

    status_code: int
    body: str
    error_code: Optional[str] = None
    message: Optional[str] = None

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.status_code} {self.error_code}: {self.message or ''}".rstrip()
        return f"{self.status_code}: {self.body}"

    @classmethod
    def from_response(cls, response: requests.Response) -> "EnvelopesApiError":
        error_code = None
        message = None
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            error_code = data.get("errorCode")
            message = data.get("message")
        return cls(
            status_code=response.status_code,
            body=response.text,
            error_code=error_code,
            message=message,
        )


class EnvelopesApi:
    def __init__(
        self,
        base_path: str,
        access_token: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_path = base_path.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def envelopes_url(self, account_id: str) -> str:
        return f"{self.base_path}/{API_VERSION}/accounts/{account_id}/envelopes"

    def create_envelope(self, account_id: str, envelope: Envelope) -> EnvelopeSummary:
        """
        Create (and send, if status is "sent") an envelope.

        Args:
            account_id: API account id
            envelope: built envelope definition

        Returns:
            EnvelopeSummary: envelope id and status from the response

        Raises:
            EnvelopesApiError: non-2xx response, or a 2xx without an envelope id
            requests.RequestException: transport failure
        """
        url = self.envelopes_url(account_id)
        logger.info(
            f"Creating envelope with {len(envelope.documents)} documents, status={envelope.status.value}"
        )

        response = self.session.post(
            url,
            json=envelope.to_dict(),
            headers=self.headers,
            timeout=self.timeout,
        )

        if 200 <= response.status_code < 300:
            try:
                data = response.json()
            except ValueError:
                data = None
            if isinstance(data, dict) and data.get("envelopeId"):
                summary = EnvelopeSummary.from_dict(data)
                logger.info(f"Envelope API returned {response.status_code}: {summary.envelope_id}")
                return summary
            logger.error(f"Envelope API returned {response.status_code} without an envelope id: {response.text}")
            raise EnvelopesApiError.from_response(response)

        logger.error(f"Envelope API failed with status {response.status_code}: {response.text}")
        raise EnvelopesApiError.from_response(response)
