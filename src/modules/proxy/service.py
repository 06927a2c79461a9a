import json
import logging
from typing import Any

import httpx

from src.config.settings import Settings
from src.modules.proxy.exceptions import ConfigurationError, TransportError, UpstreamError
from src.modules.proxy.models import DEFAULT_MODEL, HF_API_URL
from src.modules.proxy.schemas import ChatMessage, UpstreamRequest
from src.modules.proxy.transcript import build_transcript

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Out of range float value in upstream JSON: {name}")


class ProxyService:
    """Relays chat-completion requests to the HuggingFace router."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def model(self) -> str:
        return DEFAULT_MODEL.id

    def _resolve_api_key(self) -> str:
        api_key = self._settings.api_key
        if not api_key:
            raise ConfigurationError("API key not configured")
        return api_key

    @staticmethod
    def _build_headers(api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "x-use-cache": "false",
        }

    def _build_payload(self, messages: list[ChatMessage]) -> dict[str, Any]:
        return UpstreamRequest(model=self.model, messages=messages).model_dump()

    async def forward(self, messages: list[ChatMessage]) -> Any:
        api_key = self._resolve_api_key()

        # The structured messages go upstream; the transcript is diagnostic only
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Conversation transcript:\n%s", build_transcript(messages))

        logger.info("Forwarding %d messages to HuggingFace Router API", len(messages))
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.upstream_timeout,
                follow_redirects=True,
            ) as client:
                response = await client.post(
                    HF_API_URL,
                    headers=self._build_headers(api_key),
                    json=self._build_payload(messages),
                )
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        try:
            return json.loads(response.text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise TransportError(str(exc)) from exc
