"""
Visualizer server.

Serves the generated graph JSON and the static visualizer bundle. The
server never scans; it only reads the artifact written by the scanner.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse
from starlette.middleware.cors import CORSMiddleware
from starlette.staticfiles import StaticFiles

from claude_viz.utils.logging import get_logger

logger = get_logger("server")


@dataclass(frozen=True)
class ServerOptions:
    """Runtime options for the visualizer server.

    Attributes:
        port: TCP port to listen on
        project_root: Scanned project, reported by the health check
        data_path: Graph JSON artifact
        dist_dir: Built visualizer bundle; optional
        host: Interface to bind
    """

    port: int
    project_root: Path
    data_path: Path
    dist_dir: Path | None = None
    host: str = "127.0.0.1"


def create_app(options: ServerOptions) -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(title="claude-viz", docs_url=None, redoc_url=None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.get("/api/graph-data")
    async def graph_data() -> JSONResponse:
        try:
            data = json.loads(options.data_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.debug(f"Graph data unavailable at {options.data_path}: {e}")
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Graph data not found",
                    "message": "Run the scanner first to generate graph data",
                    "path": str(options.data_path),
                },
            )
        return JSONResponse(content=data)

    @app.get("/api/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "dataExists": options.data_path.exists(),
            "projectRoot": str(options.project_root),
            "dataPath": str(options.data_path),
        }

    dist_dir = options.dist_dir
    if dist_dir is not None and dist_dir.is_dir():
        index_path = dist_dir / "index.html"
        assets_dir = dist_dir / "assets"
        if assets_dir.is_dir():
            app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

        # SPA fallback: real files are served as-is, anything else gets index.html
        @app.get("/{full_path:path}", include_in_schema=False)
        async def spa(full_path: str) -> FileResponse:
            candidate = (dist_dir / full_path).resolve()
            if (
                full_path
                and candidate.is_file()
                and candidate.is_relative_to(dist_dir.resolve())
            ):
                return FileResponse(candidate)
            return FileResponse(index_path)
    else:
        logger.warning("No visualizer bundle configured; serving API routes only")

    return app


def run_server(options: ServerOptions) -> None:
    """Serve the app until interrupted."""
    app = create_app(options)
    logger.info(f"Serving visualizer on http://{options.host}:{options.port}")
    uvicorn.run(app, host=options.host, port=options.port, log_level="warning")
