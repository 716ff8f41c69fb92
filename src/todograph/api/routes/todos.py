"""Todos router: the full snapshot plus todo creation and modification."""

from fastapi import APIRouter, Depends, Response

from todograph.api.dependencies import get_db_dep
from todograph.api.models import CreateTodoRequest, GetAllResponse, ModifyTodoRequest
from todograph.database import TodoGraphDB

router = APIRouter()


@router.get("/all", response_model=GetAllResponse)
async def get_all(db: TodoGraphDB = Depends(get_db_dep)) -> GetAllResponse:
    """Return every todo and every dependency edge.

    Returns:
        ``{"todos": [{id, name, done}], "deps": [{from, to}]}``.
    """
    return await db.get_all()


@router.post("/new-todo", status_code=204, response_class=Response)
async def create_todo(
    body: CreateTodoRequest,
    db: TodoGraphDB = Depends(get_db_dep),
) -> Response:
    """Create a todo from its name. Answers 204 with no body."""
    await db.create_todo(body.name)
    return Response(status_code=204)


@router.post("/modify-todo", status_code=204, response_class=Response)
async def modify_todo(
    body: ModifyTodoRequest,
    db: TodoGraphDB = Depends(get_db_dep),
) -> Response:
    """Set a todo's name and done flag together.

    An unknown id still answers 204.
    """
    await db.modify_todo(body.id, body.name, body.done)
    return Response(status_code=204)
