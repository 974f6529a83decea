import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import CORS_ORIGINS, LOG_LEVEL, SEED_SAMPLE_TASKS
from .logging_setup import setup_logging
from .routers import tasks
from .store import TaskStore

logger = logging.getLogger(__name__)

INVALID_CREATE_DATA = (
    "Invalid data. Please provide title, description, completed status, and a valid priority."
)
INVALID_UPDATE_DATA = "Invalid data. Please provide title, description, and completed status."


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    app.state.store = TaskStore.with_sample_tasks() if SEED_SAMPLE_TASKS else TaskStore()
    logger.info("Task store ready with %d task(s)", len(app.state.store))
    yield


# Create FastAPI app
app = FastAPI(
    title="Task Store API",
    description="In-memory task CRUD API with filtering, sorting and priorities",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
    message = INVALID_UPDATE_DATA if request.method == "PUT" else INVALID_CREATE_DATA
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


# Include routers
app.include_router(tasks.router, tags=["tasks"])


@app.get("/")
def read_root():
    return {"message": "Task Store API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
