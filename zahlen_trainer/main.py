from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zahlen_trainer.config import settings
from zahlen_trainer.db.database import init_db
from zahlen_trainer.logging_config import configure_logging
from zahlen_trainer.service.german_numbers import NumberRangeError
from zahlen_trainer.service.number_generator import SettingsError
from zahlen_trainer.service.practice_service import PracticeError
from zahlen_trainer.web.routers import health, history, practice

logger = logging.getLogger(__name__)

app = FastAPI(title="German Number Drill")

@app.on_event("startup")
def on_startup() -> None:
    configure_logging(level=settings.LOG_LEVEL, log_json=settings.LOG_JSON)
    init_db()

# The drill frontend is served from its own dev server.
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

@app.exception_handler(NumberRangeError)
@app.exception_handler(SettingsError)
@app.exception_handler(PracticeError)
def invalid_request(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)

# The rejected input is left out: NaN or Infinity cannot be rendered as JSON.
@app.exception_handler(RequestValidationError)
def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{k: v for k, v in e.items() if k not in ("input", "ctx")} for e in exc.errors()]
    return JSONResponse({"detail": jsonable_encoder(errors)}, status_code=422)

app.include_router(practice.router)
app.include_router(history.router)
app.include_router(health.router)
