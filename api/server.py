"""
Task Service API Server

FastAPI-based server providing:
- REST API for task CRUD and title filtering
- Aggregate completion statistics
- Uniform JSON envelopes ({success, data, message}) for every response
- Static information page at the root
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_service import __version__
from task_service.config import ConfigProperties, ServerConfig
from task_service.core.task_store import TaskStore
from task_service.utils.exceptions import InvalidInputError, TaskNotFoundError, TaskServiceError
from task_service.utils.logger import get_logger
from task_service.utils.validation import INVALID_TASK_MESSAGE, extract_task_fields

ConfigProperties.load_env_file()
logger = get_logger(__name__)

static_dir = Path(__file__).parent / "static"

INTERNAL_ERROR_MESSAGE = "Internal server error"

ERROR_STATUS_CODES: Dict[type, int] = {
    InvalidInputError: 400,
    TaskNotFoundError: 404,
}


# ============================================================================
# RESPONSE HELPERS
# ============================================================================

def success_response(message: str, status_code: int = 200, **fields: Any) -> JSONResponse:
    """Build a ``{success: true, ...fields, message}`` response."""
    return JSONResponse(status_code=status_code, content={"success": True, **fields, "message": message})


def error_response(message: str, status_code: int, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Build a ``{success: false, data: null, message}`` response."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "data": None, "message": message},
        headers=headers,
    )


def get_store(request: Request) -> TaskStore:
    return request.app.state.task_store


# ============================================================================
# TASK API
# ============================================================================

router = APIRouter()


@router.post("/api/tasks", status_code=201)
async def create_task(payload: Any = Body(None), store: TaskStore = Depends(get_store)):
    title, completed = extract_task_fields(payload)
    task = store.create(title, completed)
    logger.info(f"Task created id={task.id}")
    return success_response("Task created successfully", status_code=201, data=task.to_dict())


@router.get("/api/tasks")
async def list_tasks(title: Optional[str] = Query(None), store: TaskStore = Depends(get_store)):
    tasks = store.list(title_filter=title)
    return success_response(
        "Tasks fetched successfully",
        count=len(tasks),
        data=[t.to_dict() for t in tasks],
    )


@router.get("/api/tasks/{task_id}")
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    task = store.get(task_id)
    return success_response("Task fetched successfully", data=task.to_dict())


@router.put("/api/tasks/{task_id}")
async def update_task(task_id: str, payload: Any = Body(None), store: TaskStore = Depends(get_store)):
    title, completed = extract_task_fields(payload)
    store.update(task_id, title, completed)
    logger.info(f"Task updated id={task_id}")
    return success_response("Task updated successfully")


@router.delete("/api/tasks/{task_id}")
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    store.delete(task_id)
    logger.info(f"Task deleted id={task_id}")
    return success_response("Task deleted successfully")


@router.get("/api/stats")
async def task_stats(store: TaskStore = Depends(get_store)):
    return success_response("Stats fetched successfully", data=store.stats().to_dict())


@router.get("/", include_in_schema=False)
async def index():
    return FileResponse(static_dir / "index.html")


# ============================================================================
# ERROR HANDLERS
# ============================================================================

async def handle_task_service_error(request: Request, exc: TaskServiceError) -> JSONResponse:
    status_code = next(
        (code for exc_type, code in ERROR_STATUS_CODES.items() if isinstance(exc, exc_type)),
        500,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return error_response(INTERNAL_ERROR_MESSAGE, status_code)
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return error_response(exc.message, status_code)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # only reachable for bodies that are not valid JSON
    logger.warning(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return error_response(INVALID_TASK_MESSAGE, 400)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(INTERNAL_ERROR_MESSAGE, 500)


# ============================================================================
# APP FACTORY
# ============================================================================

def create_app(store: Optional[TaskStore] = None, config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Task store to serve; a fresh empty one if omitted
        config: Server settings; read from the environment if omitted.
            API docs are only exposed outside production.
    """
    config = config or ServerConfig.from_env()
    docs_enabled = not config.is_production

    app = FastAPI(
        title="Task Service",
        description="In-memory task list: CRUD, title filtering and completion statistics",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.task_store = store if store is not None else TaskStore()
    app.state.config = config

    app.include_router(router)
    app.add_exception_handler(TaskServiceError, handle_task_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info(f"Task service app created (environment={config.environment}, docs={docs_enabled})")
    return app


app = create_app()
