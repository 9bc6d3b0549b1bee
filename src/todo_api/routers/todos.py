from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ..db import SQLiteRepository
from ..errors import NotFoundError
from ..models import TodoId
from ..repositories import get_repository
from ..schemas import ErrorOut, TodoCreate, TodoOut, TodoUpdate
from ..validation import valid_todo_id

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

NOT_FOUND_MESSAGE = "Todo not found"

_INVALID_ID = {"model": ErrorOut, "description": "Invalid ID"}
_NOT_FOUND = {"model": ErrorOut, "description": NOT_FOUND_MESSAGE}
_INVALID_BODY = {"model": ErrorOut, "description": "Invalid request body"}


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="Get all todos.",
    responses={200: {"description": "All todos, possibly an empty list"}},
)
def list_todos(repo: SQLiteRepository = Depends(get_repository)) -> List[TodoOut]:
    """
    Return every todo item.
    """
    return [TodoOut(**item) for item in repo.list()]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a todo by ID.",
    responses={
        200: {"description": "Todo found"},
        400: _INVALID_ID,
        404: _NOT_FOUND,
    },
)
def get_todo(
    todo_id: TodoId = Depends(valid_todo_id),
    repo: SQLiteRepository = Depends(get_repository),
) -> TodoOut:
    item = repo.get(todo_id)
    if item is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return TodoOut(**item)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new todo. New todos always start with completed=false.",
    responses={
        201: {"description": "Todo created successfully"},
        400: _INVALID_BODY,
    },
)
def create_todo(payload: TodoCreate, repo: SQLiteRepository = Depends(get_repository)) -> TodoOut:
    created = repo.create(payload.title)
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description=(
        "Update a todo by ID. Only the supplied fields change; an empty body "
        "returns the todo unchanged."
    ),
    responses={
        200: {"description": "Todo updated"},
        400: {"model": ErrorOut, "description": "Invalid ID or request body"},
        404: _NOT_FOUND,
        500: {"model": ErrorOut, "description": "Todo disappeared while being updated"},
    },
)
def update_todo(
    payload: TodoUpdate,
    todo_id: TodoId = Depends(valid_todo_id),
    repo: SQLiteRepository = Depends(get_repository),
) -> TodoOut:
    """
    Partial update of a Todo item.
    """
    updated = repo.update(todo_id, title=payload.title, completed=payload.completed)
    if updated is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return TodoOut(**updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a todo by ID.",
    responses={
        204: {"description": "Todo deleted"},
        400: _INVALID_ID,
        404: _NOT_FOUND,
    },
)
def delete_todo(
    todo_id: TodoId = Depends(valid_todo_id),
    repo: SQLiteRepository = Depends(get_repository),
) -> None:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    if repo.delete(todo_id) == 0:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return None
