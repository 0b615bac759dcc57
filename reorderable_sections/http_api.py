"""HTTP API exposing reorderable section lists."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from reorderable_sections.api.schemas import CreateListRequest, DropRequest, MoveRequest
from reorderable_sections.api.serializers import serialize_engine, serialize_rows
from reorderable_sections.config import configure_logging, get_settings
from reorderable_sections.exceptions import (
    DuplicateError,
    NotFoundError,
    ValidationError,
)
from reorderable_sections.services.list_view import ReorderableSectionedList
from reorderable_sections.storage.registry import get_registry

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Reorderable Sections Service",
    description="Sectioned, drag-reorderable lists with pinned headers",
    version="0.1.0",
)


def _to_http_error(error: ValidationError | NotFoundError | DuplicateError) -> HTTPException:
    """Translate a service exception into an HTTP error."""
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=400,
            detail={"message": f"Validation error: {error}", "field": error.field},
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail={"message": str(error)})
    # DuplicateError
    return HTTPException(status_code=409, detail={"message": str(error)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, error: Exception) -> JSONResponse:
    """Fallback error handling for unexpected errors."""
    logger.exception(f"Unexpected error handling {request.method} {request.url.path}", exc_info=error)
    return JSONResponse(status_code=500, content={"detail": {"message": f"Internal error: {str(error)}"}})


def _identity(value: Any) -> Any:
    return value


@app.post("/lists", status_code=201)
async def create_list(request: CreateListRequest) -> Dict[str, Any]:
    """Create a list from initial sections."""
    try:
        list_id, engine = get_registry().create(
            [payload.to_section() for payload in request.sections],
            list_id=request.list_id,
        )
    except (ValidationError, DuplicateError) as e:
        raise _to_http_error(e) from e
    return serialize_engine(engine, list_id)


@app.get("/lists")
async def list_lists() -> Dict[str, Any]:
    """List ids of all lists."""
    return {"lists": get_registry().list_ids()}


@app.get("/lists/{list_id}")
async def get_list(list_id: str) -> Dict[str, Any]:
    """Get the items and sections of a list."""
    try:
        engine = get_registry().get(list_id)
    except NotFoundError as e:
        raise _to_http_error(e) from e
    return serialize_engine(engine, list_id)


@app.get("/lists/{list_id}/rows")
async def get_rows(list_id: str) -> Dict[str, Any]:
    """Get the rows of a list with their drag state."""
    try:
        engine = get_registry().get(list_id)
    except NotFoundError as e:
        raise _to_http_error(e) from e
    view = ReorderableSectionedList(engine, _identity, _identity)
    return {"id": list_id, "rows": serialize_rows(view.rows())}


@app.post("/lists/{list_id}/move")
async def move_items(list_id: str, request: MoveRequest) -> Dict[str, Any]:
    """Apply a move given in rest-space coordinates."""
    try:
        engine = get_registry().get(list_id)
        engine.move(request.from_indices, request.to_offset)
    except (NotFoundError, ValidationError) as e:
        raise _to_http_error(e) from e
    return serialize_engine(engine, list_id)


@app.post("/lists/{list_id}/drop")
async def drop_rows(list_id: str, request: DropRequest) -> Dict[str, Any]:
    """Apply a drag gesture given in full row coordinates."""
    try:
        engine = get_registry().get(list_id)
        view = ReorderableSectionedList(engine, _identity, _identity)
        view.drop(request.source_rows, request.destination_row)
    except (NotFoundError, ValidationError) as e:
        raise _to_http_error(e) from e
    return serialize_engine(engine, list_id)


@app.delete("/lists/{list_id}", status_code=204)
async def delete_list(list_id: str) -> Response:
    """Delete a list."""
    try:
        get_registry().delete(list_id)
    except NotFoundError as e:
        raise _to_http_error(e) from e
    return Response(status_code=204)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "reorderable-sections"}


def main() -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting HTTP API on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
