import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config import Settings, load_settings
from logging_setup import configure_logging
from metadata.routes import router as metadata_router

access_logger = logging.getLogger("metadata.access")


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="State/City Metadata Service")
    app.state.settings = settings

    # ---- REQUEST LOGGING ----
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if settings.is_production:
            client = request.client.host if request.client else "-"
            access_logger.info(
                '%s "%s %s HTTP/%s" %d "%s"',
                client,
                request.method,
                request.url.path,
                request.scope.get("http_version", "1.1"),
                response.status_code,
                request.headers.get("user-agent", "-"),
            )
        else:
            access_logger.info(
                "%s %s %d %.1f ms",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
        return response

    # ---- API ROUTERS ----
    app.include_router(metadata_router)

    # ---- HEALTH CHECK ----
    @app.get("/healthz", response_class=PlainTextResponse)
    def healthz():
        return "ok"

    return app


def run() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("metadata server listening on :%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None, access_log=False)


if __name__ == "__main__":
    run()
