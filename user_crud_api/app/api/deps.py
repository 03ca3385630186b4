"""
FastAPI dependencies shared by the endpoints.

The user store is created once by ``create_app`` and attached to
``app.state``; handlers receive it through ``Depends(get_user_store)``
instead of reaching for a module-level handle.
"""

from fastapi import Path, Request
from fastapi.exceptions import RequestValidationError

from user_crud_api.app.schemas.user import SQLITE_INTEGER_MAX
from user_crud_api.app.services.user_service import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_user_id(
    user_id: str = Path(..., pattern=r"^[0-9]+$", description="Store-assigned user id"),
) -> int:
    """Parse the ``{user_id}`` path segment as a plain base-10 integer.

    Signs, spaces, underscores and decimal points are rejected, as are
    values no record can ever have.
    """
    digits = user_id.lstrip("0")
    if len(digits) > len(str(SQLITE_INTEGER_MAX)) or int(digits or "0") > SQLITE_INTEGER_MAX:
        raise RequestValidationError(
            [
                {
                    "type": "less_than_equal",
                    "loc": ("path", "user_id"),
                    "msg": f"Input should be less than or equal to {SQLITE_INTEGER_MAX}",
                    "input": user_id,
                }
            ]
        )
    return int(digits or "0")
