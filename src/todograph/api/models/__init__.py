"""API models package for todograph."""

from .requests import CreateTodoRequest, DepRequest, ModifyTodoRequest
from .responses import ErrorResponse, GetAllResponse, HealthResponse

__all__ = [
    "CreateTodoRequest",
    "DepRequest",
    "ErrorResponse",
    "GetAllResponse",
    "HealthResponse",
    "ModifyTodoRequest",
]
