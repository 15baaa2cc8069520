# -*- coding: utf-8 -*-
"""
Envelope enums shared by the builder, the API client and the CLI.
"""

from enum import Enum


class EnvelopeStatus(Enum):
    """Requested envelope status"""

    SENT = "sent"         # send to recipients immediately
    CREATED = "created"   # save as a draft

    @classmethod
    def from_string(cls, value: str) -> "EnvelopeStatus":
        """Convert a status string, accepting 'draft' for CREATED"""
        normalized = (value or "").strip().lower()
        if normalized == "draft":
            return cls.CREATED
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown envelope status: {value}")


class AnchorUnits(Enum):
    """Units for anchor offsets"""

    PIXELS = "pixels"
