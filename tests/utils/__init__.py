"""Shared test helpers."""

from .field_builders import FieldBuilder, field
from .fixture_data import SCAM_ID, VERIFIED_ID

__all__ = ["FieldBuilder", "field", "SCAM_ID", "VERIFIED_ID"]
