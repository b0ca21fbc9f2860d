"""
OpenRouter API client utilities for RevRoast.

This module contains the upstream gateway: one chat-completion request per
roast, no retries. The first failure is terminal for the request.
"""

import logging
from typing import Optional

import httpx

from config import Settings
from errors import UpstreamError
from roast_prompt import MOCK_ROAST, build_messages

logger = logging.getLogger(__name__)


class RoastGateway:
    """
    Sends a landing-page URL to the chat-completion API and returns the
    completion text verbatim.

    Args:
        settings: Startup configuration (API key, model, referer/title, mock mode)
        client: Shared httpx.AsyncClient; created here when not supplied
    """

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT)

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.OPENROUTER_API_KEY}",
            "HTTP-Referer": self.settings.APP_REFERER,
            "X-Title": self.settings.APP_TITLE,
            "Content-Type": "application/json",
        }

    def build_payload(self, url: str) -> dict:
        return {
            "model": self.settings.OPENROUTER_MODEL,
            "messages": build_messages(url),
            "temperature": self.settings.ROAST_TEMPERATURE,
        }

    async def fetch_roast(self, url: str) -> str:
        """
        Fetch the roast text for a URL.

        Raises:
            UpstreamError: transport failure, non-2xx status, or a payload
                without choices[0].message.content
        """
        if self.settings.ROAST_MOCK_MODE:
            logger.info(f"🧪 Mock mode enabled, returning canned roast for {url}")
            return MOCK_ROAST

        logger.info(f"📡 Requesting roast for {url} (model={self.settings.OPENROUTER_MODEL})")

        try:
            response = await self.client.post(
                self.settings.OPENROUTER_URL,
                headers=self.headers,
                json=self.build_payload(url),
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ Upstream returned {e.response.status_code} for {url}: {e.response.text[:200]}"
            )
            raise UpstreamError() from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ Upstream request failed for {url}: {str(e)}")
            raise UpstreamError() from e

        return extract_completion_text(data)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()


def extract_completion_text(data) -> str:
    """Return choices[0].message.content, or raise UpstreamError if the shape is off."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error(f"❌ Unexpected completion payload: {str(data)[:200]}")
        raise UpstreamError() from e

    if not isinstance(content, str):
        logger.error(f"❌ Completion content is {type(content).__name__}, expected str")
        raise UpstreamError()
    return content
