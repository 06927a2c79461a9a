import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.logging import configure_logging
from src.config.settings import Settings, settings as default_settings
from src.modules.proxy.models import DEFAULT_MODEL
from src.modules.proxy.router import router as proxy_router
from src.modules.proxy.schemas import HealthResponse
from src.modules.proxy.service import ProxyService

logger = logging.getLogger(__name__)

PROXY_PREFIX = "/api/huggingface"


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info(
            "HuggingFace proxy server running on port %d, endpoint http://localhost:%d%s/router, model %s by %s (%s)",
            settings.app_port, settings.app_port, PROXY_PREFIX,
            DEFAULT_MODEL.name, DEFAULT_MODEL.provider, DEFAULT_MODEL.id,
        )
        if not settings.api_key:
            logger.warning("No API key configured; set HF_TOKEN or VITE_HUGGINGFACE_API_KEY")
        yield

    app = FastAPI(title="HuggingFace Router Proxy", lifespan=lifespan)
    app.state.proxy_service = ProxyService(settings, transport=transport)

    # Browser callers may come from any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(proxy_router, prefix=PROXY_PREFIX, tags=["proxy"])

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", message="Proxy server is running")

    return app


app = create_app()


def run() -> None:
    configure_logging(default_settings.log_level)
    uvicorn.run(app, host=default_settings.app_host, port=default_settings.app_port)


if __name__ == "__main__":
    run()
