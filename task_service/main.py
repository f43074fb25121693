"""FastAPI application entry point."""

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from task_service.config import get_settings
from task_service.errors import register_error_handlers
from task_service.models import HealthResponse, Task, TaskInput
from task_service.store import TaskStore

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"


def get_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.store


StoreDep = Annotated[TaskStore, Depends(get_store)]


async def read_task_input(request: Request) -> TaskInput:
    """Decode the request body as JSON, whatever its Content-Type."""
    try:
        return TaskInput.model_validate_json(await request.body())
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from None


TaskInputDep = Annotated[TaskInput, Depends(read_task_input)]


async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(service=get_settings().service_name)


async def list_tasks(store: StoreDep) -> list[Task]:
    """List all tasks in creation order."""
    return store.list_all()


async def create_task(data: TaskInputDep, store: StoreDep) -> Task:
    """Create a new task."""
    task = store.insert(data)
    logger.info("Created task %d", task.id)
    return task


async def get_task(task_id: int, store: StoreDep) -> Task:
    """Get a specific task by ID."""
    task = store.find_by_id(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return task


async def update_task(task_id: int, data: TaskInputDep, store: StoreDep) -> Task:
    """Replace the title, description and status of an existing task."""
    task = store.update_by_id(task_id, data)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    logger.info("Updated task %d", task_id)
    return task


async def delete_task(task_id: int, store: StoreDep) -> None:
    """Delete a task."""
    if not store.delete_by_id(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    logger.info("Deleted task %d", task_id)


def create_app(store: TaskStore | None = None) -> FastAPI:
    """Build the application around ``store``, or a fresh empty one."""
    app = FastAPI(
        title="Task Service",
        description="An in-memory CRUD service for tasks.",
        version="1.0.0",
    )
    app.state.store = store if store is not None else TaskStore()
    register_error_handlers(app)

    app.add_api_route(
        "/health", health_check, methods=["GET"], response_model=HealthResponse, tags=["System"]
    )
    app.add_api_route(
        "/tasks", list_tasks, methods=["GET"], response_model=list[Task], tags=["Tasks"]
    )
    app.add_api_route(
        "/tasks", create_task, methods=["POST"], response_model=Task, tags=["Tasks"]
    )
    app.add_api_route(
        "/tasks/{task_id}", get_task, methods=["GET"], response_model=Task, tags=["Tasks"]
    )
    app.add_api_route(
        "/tasks/{task_id}", update_task, methods=["PUT"], response_model=Task, tags=["Tasks"]
    )
    app.add_api_route(
        "/tasks/{task_id}",
        delete_task,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
        tags=["Tasks"],
    )
    return app


app = create_app()
