# ranttrack/app.py
import json
import logging
import os
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

# Resolve paths early so env vars are available before importing the app modules
BASE_DIR = Path(__file__).resolve().parent
ENV_PATH = BASE_DIR / ".env"

load_dotenv(ENV_PATH, override=True)

from ranttrack.middleware.tracing import TracingMiddleware  # noqa: E402
from ranttrack.models import init_db  # noqa: E402
from ranttrack.routes import lemmas_routes, symptoms_routes  # noqa: E402
from ranttrack.utils.exceptions import (  # noqa: E402
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_exception,
)

DEFAULT_CORS_ORIGINS = "http://localhost:8081,http://localhost:19006"
CORS_ORIGINS = [
    o.strip() for o in (os.getenv("CORS_ORIGINS") or DEFAULT_CORS_ORIGINS).split(",") if o.strip()
]


class JsonFormatter(logging.Formatter):
    def format(self, record):  # type: ignore[override]
        payload = {
            "timestamp": datetime.utcnow().isoformat(timespec="seconds") + "Z",
            "level": record.levelname,
            "function": record.funcName,
            "message": record.getMessage(),
        }
        return json.dumps(payload, ensure_ascii=False)


def configure_logging() -> logging.Logger:
    logger = logging.getLogger("ranttrack")
    level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    return logger


logger = configure_logging()

app = FastAPI(title="RantTrack Symptom Extraction", version="0.1.0")

app.add_middleware(TracingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, handle_http_exception)
app.add_exception_handler(RequestValidationError, handle_validation_exception)
app.add_exception_handler(Exception, handle_unhandled_exception)


@app.on_event("startup")
def _init_db():
    init_db()
    logger.info({"function": "startup", "status": "db_ready"})


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(symptoms_routes.router)
app.include_router(lemmas_routes.router)
