# -*- coding: utf-8 -*-
"""
Sign-here anchor table.

Loads the signer's anchor tabs from esign/assets/sign_here_tabs.yaml. The
signing service scans every document for each anchor string, so one tab can
land on several documents.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml

from esign.envelope.models import SignHere
from esign.envelope.types import AnchorUnits


def _sign_here_config_path() -> Path:
    return Path(__file__).resolve().parents[1] / "assets" / "sign_here_tabs.yaml"


@lru_cache(maxsize=1)
def load_sign_here_tabs() -> tuple[SignHere, ...]:
    """Load anchor tabs from YAML, falling back to the built-in table."""
    config_path = _sign_here_config_path()
    if not config_path.exists():
        return DEFAULT_SIGN_HERE_TABS

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data and data.get("sign_here_tabs"):
        return tuple(
            SignHere(
                anchor_string=str(item["anchor_string"]),
                anchor_x_offset=int(item.get("x_offset", 20)),
                anchor_y_offset=int(item.get("y_offset", 10)),
                anchor_units=AnchorUnits(item.get("units", AnchorUnits.PIXELS.value)),
            )
            for item in data["sign_here_tabs"]
        )
    return DEFAULT_SIGN_HERE_TABS


# Fixed signer anchors; also used when the YAML asset is not shipped
DEFAULT_SIGN_HERE_TABS: tuple[SignHere, ...] = (
    SignHere(anchor_string="**signature_1**", anchor_x_offset=20, anchor_y_offset=10),
    SignHere(anchor_string="/sn1/", anchor_x_offset=20, anchor_y_offset=10),
)
