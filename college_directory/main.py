"""FastAPI application for the college student directory."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from college_directory.db import init_db
from college_directory.metrics import router as metrics_router
from college_directory.settings import settings
from college_directory.students.routes import router as students_router

PUBLIC_DIR = Path(__file__).resolve().parent / "public"

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create tables if they don't exist yet
init_db()

app = FastAPI(
    title="College Directory",
    description="Student registration and directory API",
    version="1.0.0",
)

# Observability
app.include_router(metrics_router)  # exposes GET /metrics

# Functional routers
app.include_router(students_router)


# --------------------
# Error envelope
# --------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400, content={"success": False, "error": "Invalid request"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500, content={"success": False, "error": "Internal Server Error"}
    )


# --------------------
# Landing page
# --------------------
@app.get("/", include_in_schema=False)
async def root():
    return FileResponse(PUBLIC_DIR / "index.html")


# Remaining static assets; registered last so the API routes win
app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")


def run():
    import uvicorn

    logger.info("College Directory server running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
