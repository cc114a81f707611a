"""Field validation for the create and update paths.

Rules run in a fixed order and the first failing rule decides the
reported error, so a draft with several bad fields always yields the same
code. Capacity is checked by the registry before these rules run.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from product_registry.core.errors import ErrorCode
from product_registry.models.product import CURRENCIES, PRODUCT_TYPES, ProductDraft

HASH_LENGTH = 32
MAX_NAME_LENGTH = 100
MAX_ORIGIN_LENGTH = 100
MAX_BATCH_ID_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 500
MAX_CATEGORY_LENGTH = 50
MAX_LOCATION_LENGTH = 100
MAX_DIMENSIONS_LENGTH = 50
MAX_MATERIAL_LENGTH = 100
MAX_CERTIFICATION_LENGTH = 100


def _required_text(max_length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and 0 < len(value) <= max_length

    return check


def _optional_text(max_length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) <= max_length

    return check


def _positive(value: Any) -> bool:
    # bool is an int subclass; True must not pass as a quantity
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value) and value > 0


def _integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive_int(value: Any) -> bool:
    return _integer(value) and value > 0


def _valid_hash(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) and len(value) == HASH_LENGTH


@dataclass(frozen=True)
class FieldRule:
    """One validation step: the draft attribute, its predicate and its error."""

    attribute: str
    check: Callable[[Any], bool]
    error: ErrorCode

    def passes(self, draft: ProductDraft) -> bool:
        return self.check(getattr(draft, self.attribute))


CREATE_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", _required_text(MAX_NAME_LENGTH), ErrorCode.INVALID_PRODUCT_NAME),
    FieldRule("hash", _valid_hash, ErrorCode.INVALID_HASH),
    FieldRule("max_quantity", _positive_int, ErrorCode.INVALID_MAX_QUANTITY),
    FieldRule("origin", _required_text(MAX_ORIGIN_LENGTH), ErrorCode.INVALID_ORIGIN),
    FieldRule("batch_id", _required_text(MAX_BATCH_ID_LENGTH), ErrorCode.INVALID_BATCH_ID),
    FieldRule(
        "description",
        _optional_text(MAX_DESCRIPTION_LENGTH),
        ErrorCode.INVALID_DESCRIPTION,
    ),
    FieldRule("product_type", lambda v: v in PRODUCT_TYPES, ErrorCode.INVALID_PRODUCT_TYPE),
    FieldRule("category", _required_text(MAX_CATEGORY_LENGTH), ErrorCode.INVALID_CATEGORY),
    FieldRule("location", _required_text(MAX_LOCATION_LENGTH), ErrorCode.INVALID_LOCATION),
    FieldRule("currency", lambda v: v in CURRENCIES, ErrorCode.INVALID_CURRENCY),
    FieldRule("min_quantity", _positive_int, ErrorCode.INVALID_MIN_QUANTITY),
    # expiry is compared against the clock in validate_draft
    FieldRule("expiry", _integer, ErrorCode.INVALID_EXPIRY),
    FieldRule("weight", _positive, ErrorCode.INVALID_WEIGHT),
    FieldRule(
        "dimensions",
        _optional_text(MAX_DIMENSIONS_LENGTH),
        ErrorCode.INVALID_DIMENSIONS,
    ),
    FieldRule("material", _optional_text(MAX_MATERIAL_LENGTH), ErrorCode.INVALID_MATERIAL),
    FieldRule(
        "certification",
        _optional_text(MAX_CERTIFICATION_LENGTH),
        ErrorCode.INVALID_CERTIFICATION,
    ),
)


def validate_draft(draft: ProductDraft, now: int) -> ErrorCode | None:
    """Check every create-path field rule in order.

    Args:
        draft: Caller-supplied product attributes
        now: Current logical time; expiry must be strictly after it

    Returns:
        The first failing rule's error, or None if the draft is valid
    """
    for rule in CREATE_RULES:
        if not rule.passes(draft):
            return rule.error
        if rule.attribute == "expiry" and draft.expiry <= now:
            return ErrorCode.INVALID_EXPIRY
    return None


def validate_update_params(name: Any, max_quantity: Any, description: Any) -> ErrorCode | None:
    """Check the editable fields of an update.

    All three share the single ``INVALID_UPDATE_PARAM`` kind.
    """
    if not _required_text(MAX_NAME_LENGTH)(name):
        return ErrorCode.INVALID_UPDATE_PARAM
    if not _positive_int(max_quantity):
        return ErrorCode.INVALID_UPDATE_PARAM
    if not _optional_text(MAX_DESCRIPTION_LENGTH)(description):
        return ErrorCode.INVALID_UPDATE_PARAM
    return None
