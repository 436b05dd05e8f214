"""Centralized URLs for external integrations."""

from __future__ import annotations

RENTCAST_HOST = "https://api.rentcast.io"
RENTCAST_PROPERTIES_URL = f"{RENTCAST_HOST}/v1/properties"
