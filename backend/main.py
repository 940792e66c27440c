# backend/main.py
import logging
import time

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

load_dotenv()

from config import settings
from database import init_db
from utils.errors import (
    StoreUnavailableError,
    http_exception_handler,
    store_unavailable_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)

# Router imports
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.events import router as events_router
from routes.news import router as news_router
from routes.attendances import router as attendances_router
from routes.resources import router as resources_router
from routes.logs import router as logs_router

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def build_log_formatter() -> logging.Formatter:
    # Timestamps carry a Z suffix, so render them in UTC
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    formatter.converter = time.gmtime
    return formatter


_handler = logging.StreamHandler()
_handler.setFormatter(build_log_formatter())
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    handlers=[_handler],
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Band Manager API", version="1.0.0")

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Router registration
app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(events_router, prefix="/api")
app.include_router(news_router, prefix="/api")
app.include_router(attendances_router, prefix="/api")
app.include_router(resources_router, prefix="/api")
app.include_router(logs_router, prefix="/api")


@app.on_event("startup")
def startup_event():
    logger.info("Application startup")
    init_db()


@app.get("/")
def read_root():
    return {"message": "Band Manager API is running", "status": "healthy"}
