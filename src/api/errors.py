"""Mapping of component validation errors onto HTTP responses."""

from collections.abc import Sequence
from typing import Any, NoReturn, Protocol

from fastapi import HTTPException, status
from pydantic import BaseModel


class ComponentError(Protocol):
    @property
    def code(self) -> str: ...

    @property
    def message(self) -> str: ...

    @property
    def field(self) -> str | None: ...


def _as_dict(error: ComponentError) -> dict[str, Any]:
    return {"code": error.code, "message": error.message, "field": error.field}


def raise_for_errors(
    errors: Sequence[ComponentError],
    conflicts: Sequence[BaseModel] = (),
) -> NoReturn:
    """
    404 when the first error is a missing record, 409 for a booking
    conflict (the conflicting jobs are listed), 400 otherwise.
    """
    first = errors[0]
    if first.code.endswith("_not_found"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=first.message)

    if first.code == "booking_conflict":
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": first.message,
                "conflicts": [c.model_dump(mode="json") for c in conflicts],
            },
        )

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"errors": [_as_dict(e) for e in errors]},
    )
