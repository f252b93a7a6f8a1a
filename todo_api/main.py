# todo_api/main.py
"""FastAPI application for the todo task API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from todo_api.config import Settings
from todo_api.database import Storage
from todo_api.envelope import envelope_response
from todo_api.repository import TaskRepository
from todo_api.routes.tasks import LEGACY_PREFIX, legacy_router, router as tasks_router, sample_router

logger = logging.getLogger(__name__)

SERVICE_NAME = "Todo API Server"
VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. The database is opened in the lifespan, not here."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database, create the tasks table, and close it on shutdown."""
        storage = Storage.open(settings.database_path)
        try:
            storage.ensure_schema()
            app.state.storage = storage
            app.state.repository = TaskRepository(storage)
            yield
        finally:
            storage.close()

    app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
        return envelope_response(400, False, "Malformed request body")

    app.include_router(tasks_router)
    if settings.legacy_routes:
        app.include_router(legacy_router)
    app.include_router(sample_router)

    @app.get("/")
    def service_info():
        """Health check endpoint with the route map."""
        endpoints = {
            "getAllTasks": "GET /tasks",
            "addTask": "POST /tasks",
            "updateTask": "PUT /tasks",
            "deleteTask": "DELETE /tasks?id=xxx",
            "initTestData": "POST /init-test-data",
        }
        if settings.legacy_routes:
            endpoints.update({
                "legacyGetAllTasks": f"GET {LEGACY_PREFIX}/list",
                "legacyAddTask": f"POST {LEGACY_PREFIX}/add",
                "legacyUpdateTask": f"PUT {LEGACY_PREFIX}/edit",
                "legacyDeleteTask": f"DELETE {LEGACY_PREFIX}/delete?id=xxx",
            })
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running",
            "endpoints": endpoints,
        }

    return app


app = create_app()
