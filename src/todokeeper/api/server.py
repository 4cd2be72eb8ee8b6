"""
FastAPI server implementation for todokeeper.
Provides CRUD endpoints over the todo collection held by a TodoStore.
"""

import logging
from typing import Any, List, Optional

from fastapi import Body, FastAPI, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from todokeeper import __version__
from todokeeper.core.config import get_settings
from todokeeper.core.errors import TodoNotFoundError, TodoValidationError
from todokeeper.core.store import TodoStore

logger = logging.getLogger(__name__)


# Pydantic models for request/response validation
class TodoCreate(BaseModel):
    title: str
    description: str
    completed: Optional[bool] = False


class TodoUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    # Any truthy value marks the todo completed, anything else clears it
    completed: Any = None


class TodoResponse(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool


class TodoCreated(BaseModel):
    id: str


def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """Build the API around ``store``.

    When no store is given one is built from the environment settings.
    """
    if store is None:
        settings = get_settings()
        store = TodoStore(settings.todo_file, load_policy=settings.load_policy)

    app = FastAPI(
        title="todokeeper API",
        description="API for managing todos stored in a JSON file",
        version=__version__,
    )
    app.state.store = store

    @app.exception_handler(StarletteHTTPException)
    async def route_not_found_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported verbs both answer 404
        if exc.status_code in (404, 405):
            return PlainTextResponse("Route Not Found", status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(TodoValidationError)
    async def todo_validation_handler(request: Request, exc: TodoValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # Todo endpoints
    @app.get("/todos", response_model=List[TodoResponse])
    def list_todos():
        """List all todo items."""
        try:
            todos = store.load_all()
        except Exception as e:
            logger.error(f"Error listing todos: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to load todos")
        return [TodoResponse(**todo.to_dict()) for todo in todos]

    @app.get("/todos/{todo_id}", response_model=TodoResponse)
    def get_todo(todo_id: str):
        """Get a single todo item."""
        try:
            todo = store.fetch_by_id(todo_id)
        except TodoNotFoundError as e:
            logger.error(f"Todo {todo_id} not found")
            return JSONResponse(status_code=404, content={"detail": str(e)})
        except Exception as e:
            logger.error(f"Error fetching todo {todo_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to load todo")
        return TodoResponse(**todo.to_dict())

    @app.post("/todos", response_model=TodoCreated, status_code=201)
    def create_todo(todo: TodoCreate):
        """Create a new todo item."""
        logger.debug(f"Creating todo with data: {todo.model_dump()}")
        try:
            created = store.create(
                title=todo.title,
                description=todo.description,
                completed=bool(todo.completed),
            )
        except TodoValidationError:
            raise
        except Exception as e:
            logger.error(f"Error creating todo: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to create todo")
        return TodoCreated(id=created.id)

    @app.put("/todos/{todo_id}", response_model=TodoResponse)
    def update_todo(todo_id: str, todo: Optional[TodoUpdate] = Body(default=None)):
        """Update an existing todo item."""
        fields = todo or TodoUpdate()
        try:
            updated = store.update(
                todo_id,
                title=fields.title,
                description=fields.description,
                completed=fields.completed,
            )
        except TodoNotFoundError:
            logger.error(f"Todo {todo_id} not found")
            return Response(status_code=404)
        except Exception as e:
            logger.error(f"Error updating todo {todo_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to update todo")
        return TodoResponse(**updated.to_dict())

    @app.delete("/todos/{todo_id}")
    def delete_todo(todo_id: str):
        """Delete a todo item."""
        try:
            store.delete(todo_id)
        except TodoNotFoundError:
            logger.error(f"Todo {todo_id} not found")
            return Response(status_code=404)
        except Exception as e:
            logger.error(f"Error deleting todo {todo_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to delete todo")
        return Response(status_code=200)

    return app
