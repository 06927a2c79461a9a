import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.modules.proxy.exceptions import ConfigurationError, ProxyError, UpstreamError
from src.modules.proxy.schemas import ErrorResponse, ProxyRequest
from src.modules.proxy.service import ProxyService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_proxy_service(request: Request) -> ProxyService:
    return request.app.state.proxy_service


@router.post(
    "/router",
    responses={500: {"model": ErrorResponse}},
)
async def forward_chat(
    body: ProxyRequest | None = None,
    service: ProxyService = Depends(get_proxy_service),
) -> JSONResponse:
    """Forward a conversation to the HuggingFace router and relay its answer."""
    logger.info("Received request for %s", service.model)
    messages = (body.messages if body else None) or []

    try:
        data = await service.forward(messages)
        response = JSONResponse(content=data)
    except ConfigurationError as exc:
        logger.error("No API key found in configuration")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except UpstreamError as exc:
        logger.error("HuggingFace error (%d): %s", exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except ProxyError as exc:
        logger.error("Proxy error: %s", exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except Exception as exc:
        logger.exception("Unexpected error while forwarding request")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    logger.info("Success, sending response back to frontend")
    return response
