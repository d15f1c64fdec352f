"""FastAPI application exposing provider runtimes over HTTP."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from modelruntime import __version__
from modelruntime.config import RuntimeConfig, load_config
from modelruntime.exceptions import ChatCompletionError, ModelNotSupportedError
from modelruntime.providers.registry import DEFAULT_PROVIDER
from modelruntime.types import AgentRuntimeErrorType

from .routes import chat_router, health_router, models_router

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    AgentRuntimeErrorType.INVALID_PROVIDER_API_KEY: 401,
    AgentRuntimeErrorType.QUOTA_LIMIT_REACHED: 429,
    AgentRuntimeErrorType.MODEL_NOT_FOUND: 404,
    AgentRuntimeErrorType.PROVIDER_BIZ_ERROR: 502,
}


def create_app(
    config_path: Optional[str] = None,
    config: Optional[RuntimeConfig] = None,
) -> FastAPI:
    """Create the runtime server.

    Args:
        config_path: Path to a YAML configuration file
        config: Pre-built configuration, takes precedence over ``config_path``

    Returns:
        The FastAPI application
    """
    config = config or load_config(config_path)

    logging.basicConfig(
        level=config.general.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(f"Starting modelruntime with providers: {sorted(config.providers) or [DEFAULT_PROVIDER]}")
        yield

    app = FastAPI(
        title="modelruntime",
        description="Uniform streaming chat interface over vendor chat APIs",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.providers = {}

    @app.exception_handler(ChatCompletionError)
    async def chat_completion_error_handler(request: Request, exc: ChatCompletionError):
        """Return classified provider errors in the canonical shape."""
        return JSONResponse(
            status_code=ERROR_STATUS_CODES.get(exc.error_type, 502),
            content=exc.to_payload(),
        )

    @app.exception_handler(ModelNotSupportedError)
    async def model_not_supported_handler(request: Request, exc: ModelNotSupportedError):
        """Handle requests for models no provider serves."""
        return JSONResponse(
            status_code=404,
            content={
                "errorType": AgentRuntimeErrorType.MODEL_NOT_FOUND.value,
                "error": exc.message,
                "endpoint": None,
                "provider": exc.provider,
            },
        )

    app.include_router(chat_router, prefix="/v1")
    app.include_router(models_router, prefix="/v1")
    app.include_router(health_router, prefix="")

    return app


def cli():
    """Command line interface for the runtime server."""
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="modelruntime server")
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "--host", "-H",
        help="Host to bind to",
        default="0.0.0.0",
    )
    parser.add_argument(
        "--port", "-p",
        help="Port to bind to",
        type=int,
        default=8000,
    )

    args = parser.parse_args()

    app = create_app(args.config)

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
    )


if __name__ == "__main__":
    cli()
