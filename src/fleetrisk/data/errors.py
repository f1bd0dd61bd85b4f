"""Provider-agnostic data fetch error."""

from __future__ import annotations


class FleetDataError(Exception):
    """Provider-agnostic data fetch error. The service layer catches only this."""
