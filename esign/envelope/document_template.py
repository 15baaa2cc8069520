# -*- coding: utf-8 -*-
"""
Title document template.

The HTML lives in esign/assets/order_acknowledgement.html and only gets the
signer and cc identity substituted in.
"""

from __future__ import annotations

import html
from functools import lru_cache
from pathlib import Path
from string import Template

from esign.envelope.models import EnvelopeArgs

TITLE_DOCUMENT_NAME = "Order acknowledgement"
TITLE_DOCUMENT_EXTENSION = "html"


def _template_path() -> Path:
    return Path(__file__).resolve().parents[1] / "assets" / "order_acknowledgement.html"


@lru_cache(maxsize=1)
def load_title_template() -> str:
    """Read the title document template (cached)."""
    return _template_path().read_text(encoding="utf-8")


def render_title_document(args: EnvelopeArgs, template: str | None = None) -> str:
    """
    Render document 1 for the envelope.

    Args:
        args: envelope input (only the identity fields are used)
        template: template text; the packaged asset is used when omitted

    Returns:
        str: HTML document
    """
    text = template if template is not None else load_title_template()
    return Template(text).safe_substitute(
        signer_name=html.escape(args.signer_name.strip()),
        signer_email=html.escape(args.signer_email.strip()),
        cc_name=html.escape(args.cc_name.strip()),
        cc_email=html.escape(args.cc_email.strip()),
    )
