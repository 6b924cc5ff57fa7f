"""
Result-returning circulation handlers.

``Catalog.checkout`` and ``Catalog.checkin`` raise on failure. The handlers in
this module wrap them for callers that want an explicit status instead:

1. INPUT: parse raw arguments with a pydantic schema
2. OPERATION: run the catalog transition
3. RESPONSE: return a ``CirculationResult`` carrying either success or the
   ``ErrorKind`` of the failure

Unexpected exceptions are not caught; only catalog errors and invalid input
become failed results.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .catalog import Catalog
from .errors import CatalogError, ErrorKind

logger = logging.getLogger(__name__)


class CirculationInput(BaseModel):
    """Arguments shared by the checkout and checkin handlers."""

    member_id: int = Field(
        ...,
        description="Identifier of the member borrowing or returning the item",
        examples=[1, 42],
    )

    item_id: str = Field(
        ...,
        description="Identifier of the item being borrowed or returned",
        min_length=1,
        examples=["B001"],
    )


class CirculationResult(BaseModel):
    """Outcome of a checkout or checkin."""

    success: bool
    error_kind: ErrorKind | None = None
    message: str

    @classmethod
    def ok(cls, message: str) -> "CirculationResult":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> "CirculationResult":
        return cls(success=False, error_kind=kind, message=message)


def _run(
    action: str,
    operation: Callable[[int, str], None],
    arguments: dict[str, Any],
) -> CirculationResult:
    try:
        params = CirculationInput.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Invalid %s parameters: %s", action, e)
        return CirculationResult.failed(ErrorKind.INVALID_INPUT, f"Invalid {action} parameters: {e}")

    try:
        operation(params.member_id, params.item_id)
    except CatalogError as e:
        logger.info("%s failed - %s: %s", action.capitalize(), e.kind.value, e)
        return CirculationResult.failed(e.kind, str(e))

    return CirculationResult.ok(
        f"Item {params.item_id} {action} by member {params.member_id} succeeded"
    )


def checkout_item(catalog: Catalog, member_id: Any, item_id: Any) -> CirculationResult:
    """Check ``item_id`` out to ``member_id`` and report the outcome."""
    return _run("checkout", catalog.checkout, {"member_id": member_id, "item_id": item_id})


def checkin_item(catalog: Catalog, member_id: Any, item_id: Any) -> CirculationResult:
    """Check ``item_id`` back in from ``member_id`` and report the outcome."""
    return _run("checkin", catalog.checkin, {"member_id": member_id, "item_id": item_id})
