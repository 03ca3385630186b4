"""
User endpoints for API v1.

Each handler parses the path and body, calls one operation of the
injected ``UserStore`` and turns the outcome into a status code and a
JSON body.  Malformed ids and bodies are rejected by FastAPI before a
handler runs (see ``main.py`` for the 400 mapping), so a bad request
never reaches the store.

Store failures are classified here:

* ``UserNotFoundError`` -> 404 (read one only)
* ``DuplicateEmailError`` -> 409
* any other ``StoreError`` -> 500

Handlers are synchronous; FastAPI runs them in its threadpool so a
slow database call only holds up its own request.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from user_crud_api.app.api.deps import get_user_id, get_user_store
from user_crud_api.app.core.exceptions import (
    DuplicateEmailError,
    StoreError,
    UserNotFoundError,
)
from user_crud_api.app.schemas.user import UserPayload
from user_crud_api.app.services.user_service import UserStore

router = APIRouter()

def _write_failed(error: StoreError, action: str) -> HTTPException:
    if isinstance(error, DuplicateEmailError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action} user",
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserPayload,
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Create a user.

    The response echoes the submitted payload; the id assigned by the
    store is not part of it.  Read the list or the record to learn it.
    """
    try:
        store.create(user)
    except StoreError as e:
        raise _write_failed(e, "create")
    return {"message": "User created", "user": user.echo()}


@router.get("/{user_id}")
def read_user(
    user_id: int = Depends(get_user_id),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    try:
        user = store.read_one(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read user",
        )
    return {"user": user.model_dump()}


@router.put("/{user_id}")
def update_user(
    user: UserPayload,
    user_id: int = Depends(get_user_id),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Replace every field of a user with the submitted values.

    Fields left out of the body take their defaults and overwrite what
    was stored.  Answers 200 whether or not the target existed.
    """
    try:
        store.update(user_id, user)
    except StoreError as e:
        raise _write_failed(e, "update")
    return {"message": "User updated"}


@router.delete("/{user_id}")
def delete_user(
    user_id: int = Depends(get_user_id),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Delete a user.  Deleting an id that does not exist still answers 200."""
    try:
        store.delete(user_id)
    except StoreError as e:
        raise _write_failed(e, "delete")
    return {"message": "User deleted"}


@router.get("")
def list_users(store: UserStore = Depends(get_user_store)) -> Dict[str, Any]:
    try:
        users = store.list_all()
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list users",
        )
    return {"users": [user.model_dump() for user in users]}
