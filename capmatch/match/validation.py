"""Boundary checks for incoming deal payloads."""

import logging
from typing import Any

from pydantic import ValidationError

from capmatch.errors import DealValidationError
from capmatch.models import Deal, REQUIRED_DEAL_FIELDS

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_deal(payload: dict[str, Any]) -> Deal:
    """Check required fields in order and build a normalized Deal.

    Raises:
        DealValidationError: naming the first missing or invalid field.
    """
    if not isinstance(payload, dict):
        raise DealValidationError("deal", reason="Expected a JSON object")

    for field in REQUIRED_DEAL_FIELDS:
        if _is_missing(payload.get(field)):
            logger.info(f"Rejected deal: missing {field}")
            raise DealValidationError(field)

    try:
        return Deal.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "deal"
        logger.info(f"Rejected deal: invalid {field} ({first.get('msg')})")
        raise DealValidationError(field, reason="Invalid value for field") from e
