"""
FastAPI application exposing the validator over HTTP.

Routes: GET / (health), POST /validate

Accepts the diagram as a JSON object `{"diagram": "..."}`, a JSON string,
or a plain-text body, so workflow engines can post whatever their HTTP
node produces.
"""

from __future__ import annotations

import json

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from mermaid_validator import __version__
from mermaid_validator.config import ServiceConfig, configure_logging
from mermaid_validator.core import validate
from mermaid_validator.schemas import (
    ErrorResponse,
    HealthResponse,
    InvalidResponse,
    ValidDiagram,
    ValidResponse,
)

INVALID_INPUT = "Invalid input: diagram must be a string"


class RequestBodyError(Exception):
    """Request body could not be turned into diagram text."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _extract_diagram(body: bytes, content_type: str) -> str:
    """Pull the diagram text out of a raw request body."""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RequestBodyError(400, INVALID_INPUT) from e

    if "json" not in content_type:
        if not text:
            raise RequestBodyError(400, INVALID_INPUT)
        return text

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise RequestBodyError(400, f"Invalid JSON body: {e.msg}") from e

    if isinstance(payload, dict):
        payload = payload.get("diagram")
    if not isinstance(payload, str) or not payload:
        raise RequestBodyError(400, INVALID_INPUT)
    return payload


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Create the HTTP application."""
    config = config or ServiceConfig.from_env()
    app = FastAPI(title="Mermaid Validator", version=__version__)

    # CORS for workflow engines calling from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.get("/")
    async def health() -> JSONResponse:
        body = HealthResponse(version=__version__)
        return JSONResponse(content=body.model_dump(by_alias=True))

    @app.post("/validate")
    async def validate_endpoint(request: Request) -> JSONResponse:
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > config.max_body_bytes:
            return _error(413, "Request body too large")

        body = await request.body()
        if len(body) > config.max_body_bytes:
            return _error(413, "Request body too large")

        try:
            diagram = _extract_diagram(body, request.headers.get("content-type", ""))
        except RequestBodyError as e:
            logger.warning(f"Rejected request: {e.message}")
            return _error(e.status_code, e.message)

        try:
            result = validate(diagram)
        except Exception as e:
            logger.exception("Validation error")
            return _error(500, "Internal validation error", str(e))

        if isinstance(result, ValidDiagram):
            ok = ValidResponse(diagram_type=result.diagram_type, node_count=result.node_count)
            return JSONResponse(content=ok.model_dump(mode="json", by_alias=True))

        failed = InvalidResponse(
            error=result.error_message,
            line=result.line_number,
            suggestions=result.suggestions,
        )
        return JSONResponse(status_code=400, content=failed.model_dump(mode="json", exclude_none=True))

    return app


def main() -> None:
    """CLI entry point."""
    load_dotenv()
    config = ServiceConfig.from_env()
    configure_logging(config.log_level)

    logger.info(f"Mermaid validation service running on port {config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
