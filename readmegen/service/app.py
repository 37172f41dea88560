"""FastAPI application exposing the README tools over HTTP."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Mapping, Optional

import uvicorn
from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from .. import __version__
from ..logging import get_logger
from ..operations import TOOLS, Tool, ToolResult

_logger = get_logger("service")


class HealthResponse(BaseModel):
    status: str


class ToolDescriptor(BaseModel):
    name: str
    title: str
    description: str
    inputSchema: Dict[str, Any]


class ToolListResponse(BaseModel):
    tools: List[ToolDescriptor]


def create_app(tools: Optional[Mapping[str, Tool]] = None) -> FastAPI:
    """Create the FastAPI application; ``tools`` overrides the default registry."""
    registry: Dict[str, Tool] = dict(tools if tools is not None else TOOLS)
    app = FastAPI(title="readmegen tools", version=__version__)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/tools", response_model=ToolListResponse)
    async def list_tools() -> ToolListResponse:
        return ToolListResponse(
            tools=[ToolDescriptor(**tool.describe()) for tool in registry.values()]
        )

    @app.post("/tools/{name}", response_model=ToolResult)
    async def call_tool(
        name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)
    ) -> ToolResult:
        tool = registry.get(name)
        if tool is None:
            raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")
        payload = arguments or {}
        # Tools touch the filesystem synchronously; keep the event loop free.
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, tool.invoke, payload)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(_: Any, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422, content={"detail": json.loads(exc.json(include_url=False))}
        )

    @app.exception_handler(OSError)
    async def os_error_handler(_: Any, exc: OSError) -> JSONResponse:
        _logger.error("Tool failed with filesystem error: %s", exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    app = create_app()
    _logger.info("Serving readmegen tools on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
