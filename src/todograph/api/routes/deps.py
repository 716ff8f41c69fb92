"""Dependency edge router."""

from fastapi import APIRouter, Depends, Response

from todograph.api.dependencies import get_db_dep
from todograph.api.models import DepRequest
from todograph.database import TodoGraphDB

router = APIRouter()


@router.post("/dep", status_code=204, response_class=Response)
async def create_dep(body: DepRequest, db: TodoGraphDB = Depends(get_db_dep)) -> Response:
    """Add a (from, to) edge. Duplicates are allowed."""
    await db.create_dep(body.from_, body.to)
    return Response(status_code=204)


@router.delete("/dep", status_code=204, response_class=Response)
async def delete_dep(body: DepRequest, db: TodoGraphDB = Depends(get_db_dep)) -> Response:
    """Remove every edge matching the (from, to) pair.

    Answers 204 even when nothing matched.
    """
    await db.delete_dep(body.from_, body.to)
    return Response(status_code=204)
