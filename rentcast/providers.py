"""Property valuation, rent estimate and rental comps from RentCast."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from functools import lru_cache
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import requests

from config.assumptions import get_demo_comps, get_demo_property
from config.urls import RENTCAST_PROPERTIES_URL

logger = logging.getLogger(__name__)

RENTCAST_SECRET_NAME = "rentpax/rentcast_api_key"
RENTCAST_ENV_VAR = "RENTCAST_API_KEY"

# Rough per-square-foot heuristics used when the property record carries no valuation.
VALUE_PER_SQFT = 200.0
RENT_PER_SQFT = 1.5
DEFAULT_VALUE = 500000.0
DEFAULT_RENT = 2500.0
PROPERTY_TAX_RATE = 0.015
DEFAULT_INSURANCE_ANNUAL = 1500.0
MAX_COMPS = 5


@dataclass(frozen=True)
class RentCastComp:
    id: str
    address: str
    rent: float
    beds: float
    baths: float
    sqft: float
    distance: float  # miles
    property_type: str
    last_updated: str


@dataclass(frozen=True)
class PropertyFacts:
    avm: float
    tax_annual: float
    hoa_monthly: float
    insurance_annual: float
    beds: float | None = None
    baths: float | None = None
    sqft: float | None = None


@dataclass(frozen=True)
class RentEstimate:
    estimate: float
    range: tuple[float, float]
    comps: int


@dataclass(frozen=True)
class PropertyData:
    property: PropertyFacts
    rent: RentEstimate
    comps: list[RentCastComp] = field(default_factory=list)
    is_demo: bool = False


@lru_cache(maxsize=1)
def _get_secret(secret_name: str) -> str:
    client = boto3.client("secretsmanager")
    try:
        resp = client.get_secret_value(SecretId=secret_name)
    except ClientError as exc:
        raise RuntimeError(f"Unable to load secret '{secret_name}': {exc}")
    logger.info("Loaded secret '%s'", secret_name)
    return resp["SecretString"]


def load_rentcast_api_key() -> str | None:
    """Environment first, then Secrets Manager. None means demo mode."""
    key = os.getenv(RENTCAST_ENV_VAR)
    if key:
        return key
    try:
        return _get_secret(RENTCAST_SECRET_NAME) or None
    except (RuntimeError, BotoCoreError) as exc:
        logger.warning("RentCast key unavailable, using demo data: %s", exc)
        return None


def _comp_from_dict(entry: dict[str, Any]) -> RentCastComp:
    return RentCastComp(
        id=str(entry["id"]),
        address=entry["address"],
        rent=float(entry["rent"]),
        beds=float(entry["beds"]),
        baths=float(entry["baths"]),
        sqft=float(entry["sqft"]),
        distance=float(entry["distance"]),
        property_type=entry["property_type"],
        last_updated=entry["last_updated"],
    )


def demo_property_data() -> PropertyData:
    demo = get_demo_property()
    low, high = demo["rent_range"]
    return PropertyData(
        property=PropertyFacts(
            avm=float(demo["avm"]),
            tax_annual=float(demo["tax_annual"]),
            hoa_monthly=float(demo["hoa_monthly"]),
            insurance_annual=float(demo["insurance_annual"]),
            beds=demo.get("beds"),
            baths=demo.get("baths"),
            sqft=demo.get("sqft"),
        ),
        rent=RentEstimate(
            estimate=float(demo["rent_estimate"]),
            range=(float(low), float(high)),
            comps=int(demo["comp_count"]),
        ),
        comps=[_comp_from_dict(entry) for entry in get_demo_comps()],
        is_demo=True,
    )


def search_rentcast_properties(
    *,
    api_key: str,
    address: str,
    timeout: int = 15,
) -> list[dict[str, Any]]:
    headers = {"Accept": "application/json", "X-Api-Key": api_key}
    resp = requests.get(
        RENTCAST_PROPERTIES_URL,
        headers=headers,
        params={"address": address},
        timeout=timeout,
    )
    resp.raise_for_status()
    payload = resp.json()
    # Anything other than a list of records (an error object, {}) means no match.
    if not isinstance(payload, list):
        return []
    return [record for record in payload if isinstance(record, dict) and record]


def _record_to_comp(record: dict[str, Any], index: int) -> RentCastComp:
    sqft = record.get("squareFootage")
    return RentCastComp(
        id=str(record.get("id") or f"comp-{index}"),
        address=record.get("formattedAddress") or record.get("address") or "Unknown Address",
        rent=sqft * RENT_PER_SQFT if sqft else DEFAULT_RENT,
        beds=float(record.get("bedrooms") or 3),
        baths=float(record.get("bathrooms") or 2),
        sqft=float(sqft or 1500),
        distance=float(record.get("distance") or 0.0),
        property_type=record.get("propertyType") or "Single Family",
        last_updated=date.today().isoformat(),
    )


def property_data_from_records(records: list[dict[str, Any]]) -> PropertyData:
    """Build estimates from RentCast property records; the first record is the subject."""
    subject = records[0]
    sqft = subject.get("squareFootage")
    value = sqft * VALUE_PER_SQFT if sqft else DEFAULT_VALUE
    rent = sqft * RENT_PER_SQFT if sqft else DEFAULT_RENT

    return PropertyData(
        property=PropertyFacts(
            avm=value,
            tax_annual=float(round(value * PROPERTY_TAX_RATE)),
            hoa_monthly=0.0,
            insurance_annual=DEFAULT_INSURANCE_ANNUAL,
            beds=subject.get("bedrooms"),
            baths=subject.get("bathrooms"),
            sqft=sqft,
        ),
        rent=RentEstimate(
            estimate=rent,
            range=(rent * 0.9, rent * 1.1),
            comps=8,
        ),
        comps=[
            _record_to_comp(record, index)
            for index, record in enumerate(records[1:MAX_COMPS + 1])
        ],
    )


def fetch_property_data(
    address: str,
    *,
    api_key: str | None = None,
    timeout: int = 15,
) -> PropertyData:
    """
    Valuation, rent and comps for an address.

    Without an API key, or when RentCast fails or has no record for the
    address, the demo dataset is returned (flagged with is_demo).
    """
    if api_key is None:
        api_key = load_rentcast_api_key()
    if not api_key:
        logger.info("No RentCast API key configured; returning demo data for '%s'", address)
        return demo_property_data()

    logger.info("Fetching RentCast property records for '%s'", address)
    try:
        records = search_rentcast_properties(api_key=api_key, address=address, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("RentCast request failed for '%s': %s", address, exc)
        return demo_property_data()

    if not records:
        logger.warning("RentCast returned no property data for '%s'; using demo data", address)
        return demo_property_data()

    return property_data_from_records(records)
