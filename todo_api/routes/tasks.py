# todo_api/routes/tasks.py
"""CRUD endpoints for tasks, plus the sample-data route."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from todo_api.envelope import envelope_response
from todo_api.errors import StorageError, ValidationError
from todo_api.models import TaskCreate, TaskUpdate
from todo_api.repository import TaskRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Paths served by the first version of the service; existing clients still call them.
LEGACY_PREFIX = "/jeecg-boot/grain/task"
legacy_router = APIRouter(prefix=LEGACY_PREFIX, tags=["tasks-legacy"])

sample_router = APIRouter(tags=["sample-data"])


def get_repository(request: Request) -> TaskRepository:
    """Return the repository created at startup."""
    return request.app.state.repository


@router.get("")
async def list_tasks(repository: TaskRepository = Depends(get_repository)):
    """List all tasks, highest id first."""
    logger.info("Received GET: list tasks")
    try:
        tasks = await repository.list_all()
    except StorageError:
        logger.exception("Listing tasks failed")
        return envelope_response(500, False, "Failed to fetch tasks")
    return envelope_response(200, True, "Fetched successfully", tasks)


@router.post("")
async def add_task(body: TaskCreate, repository: TaskRepository = Depends(get_repository)):
    """Create a task from a caller-supplied id and title."""
    logger.info("Received POST: add task %s", body.model_dump())
    try:
        task_id = await repository.create(body)
    except ValidationError as e:
        logger.warning("Add task rejected: %s", e)
        return envelope_response(400, False, str(e))
    except StorageError:
        logger.exception("Adding task %s failed", body.id)
        return envelope_response(500, False, "Failed to add task")
    return envelope_response(200, True, "Added successfully", task_id)


@router.put("")
async def edit_task(body: TaskUpdate, repository: TaskRepository = Depends(get_repository)):
    """Overwrite all mutable fields of a task."""
    logger.info("Received PUT: update task %s", body.model_dump())
    try:
        task_id = await repository.update(body)
    except ValidationError as e:
        logger.warning("Update task rejected: %s", e)
        return envelope_response(400, False, str(e))
    except StorageError:
        logger.exception("Updating task %s failed", body.id)
        return envelope_response(500, False, "Failed to update task")
    return envelope_response(200, True, "Updated successfully", task_id)


@router.delete("")
async def delete_task(
    task_id: Optional[str] = Query(default=None, alias="id"),
    repository: TaskRepository = Depends(get_repository),
):
    """Delete a task by the ``id`` query parameter."""
    logger.info("Received DELETE: delete task %s", task_id)
    try:
        deleted_id = await repository.delete(task_id)
    except ValidationError as e:
        logger.warning("Delete task rejected: %s", e)
        return envelope_response(400, False, str(e))
    except StorageError:
        logger.exception("Deleting task %s failed", task_id)
        return envelope_response(500, False, "Failed to delete task")
    return envelope_response(200, True, "Deleted successfully", deleted_id)


legacy_router.add_api_route("/list", list_tasks, methods=["GET"])
legacy_router.add_api_route("/add", add_task, methods=["POST"])
legacy_router.add_api_route("/edit", edit_task, methods=["PUT"])
legacy_router.add_api_route("/delete", delete_task, methods=["DELETE"])


@sample_router.post("/init-test-data")
async def init_test_data(repository: TaskRepository = Depends(get_repository)):
    """Insert the sample tasks and report how many were new."""
    logger.info("Received POST: init test data")
    inserted = await repository.seed_sample()
    return envelope_response(
        200, True, f"Test data initialized, added {inserted} tasks", inserted
    )
