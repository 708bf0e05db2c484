from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config import Settings
from ingest.errors import MetricsIngestError, PayloadParseError, PayloadReadError, PersistenceError
from logging_config import configure_logging
from routes import metrics

logger = logging.getLogger(__name__)

SERVICE_NAME = "model-metrics-webhook"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Application starting for %s:%d (data path %s, authentication %s)",
        settings.host,
        settings.port,
        settings.data_path,
        "enabled" if settings.requires_api_key else "disabled",
    )
    yield
    logger.info("Server stopped")


async def handle_ingest_error(request: Request, exc: MetricsIngestError) -> PlainTextResponse:
    if isinstance(exc, PersistenceError):
        logger.error("%s %s: %s", request.method, request.url.path, exc.detail)
    elif isinstance(exc, (PayloadReadError, PayloadParseError)):
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(f"{exc.message}\n", status_code=exc.status_code)


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="Model Metrics Webhook", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(MetricsIngestError, handle_ingest_error)
    app.include_router(metrics.router)

    @app.get("/")
    def health():
        return {"status": "ok", "service": SERVICE_NAME}

    return app


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_json)

    logger.info("Starting webhook on http://%s:%d", settings.host, settings.port)
    # uvicorn logs "Uvicorn running on ..." once the socket is bound. It owns
    # SIGINT/SIGTERM and drains in-flight requests before exiting; a failed
    # bind exits the process with a non-zero status
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    logger.info("Done.")


app = create_app(Settings.from_env())


if __name__ == "__main__":
    run()
