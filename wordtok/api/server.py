# wordtok/api/server.py
"""
FastAPI application exposing encode / decode / reset over HTTP.

The engine is created by the caller and handed to `create_app`; every request
shares that one instance.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from configs.config import Config
from ..data.vocabs import VocabEngine, VocabSnapshot
from ..errors import TokenizerError
from ..utils.logger import setup_logger
from .schemas import (
    EncodeRequest, EncodeResponse,
    DecodeRequest, DecodeResponse,
    TrainRequest, TrainResponse,
    ResetResponse, ErrorResponse
)

# Messages for bodies that fail schema validation, keyed by route
MALFORMED_BODY_MESSAGES = {
    "/encode": "Text is required",
    "/decode": "Tokens array is required",
    "/train": "Text is required",
}


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def create_app(
    engine: VocabEngine,
    config: Optional[Config] = None,
    logger: Optional[logging.Logger] = None
) -> FastAPI:
    """
    Build the HTTP application around an engine instance.

    Args:
        engine: Vocabulary engine shared by all requests
        config: Service configuration (defaults when omitted)
        logger: Logger for request failures

    Returns:
        FastAPI application
    """
    config = config or Config()
    logger = logger or setup_logger(name=config.logging.name)

    app = FastAPI(title="Word Tokenizer")
    app.state.engine = engine
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def malformed_body(request: Request, exc: RequestValidationError):
        message = MALFORMED_BODY_MESSAGES.get(request.url.path, "Invalid request body")
        logger.warning(f"{request.method} {request.url.path}: {message}")
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def route_not_found(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return error_response(404, "Route not found", path=request.url.path, method=request.method)
        return error_response(exc.status_code, str(exc.detail))

    def run(action: str, fn):
        try:
            return fn()
        except TokenizerError as e:
            logger.warning(f"{action} rejected: {e.message}")
            return error_response(400, e.message)
        except Exception as e:
            logger.error(f"{action} failed: {e}", exc_info=True)
            return error_response(500, str(e) or "Internal server error")

    @app.post("/encode", response_model=EncodeResponse, responses={400: {"model": ErrorResponse}})
    def encode(req: EncodeRequest):
        return run("Encode", lambda: EncodeResponse(tokens=engine.encode(req.text)))

    @app.post("/decode", response_model=DecodeResponse, responses={400: {"model": ErrorResponse}})
    def decode(req: DecodeRequest):
        return run("Decode", lambda: DecodeResponse(text=engine.decode(req.tokens)))

    @app.post("/train", response_model=TrainResponse, responses={400: {"model": ErrorResponse}})
    def train(req: TrainRequest):
        def learn():
            added = engine.train_text(req.text)
            return TrainResponse(added=added, size=len(engine))
        return run("Train", learn)

    @app.post("/reset", response_model=ResetResponse)
    def reset():
        def clear():
            engine.reset()
            logger.info("Tokenizer reset")
            return ResetResponse(message="Tokenizer reset successfully")
        return run("Reset", clear)

    @app.get("/vocabulary", response_model=VocabSnapshot)
    def vocabulary():
        return run("Vocabulary", engine.snapshot)

    return app
