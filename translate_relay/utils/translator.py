"""
Translation service backed by an upstream LibreTranslate-compatible HTTP API.

Each text is sent as its own request; a batch is fanned out concurrently and
reassembled in input order. Per-item failures degrade to an empty string.
"""
from typing import List, Optional
import asyncio
import logging

import httpx

from translate_relay.config import settings

logger = logging.getLogger(__name__)

# Built once; every per-item client reuses it instead of loading CA certs again
SSL_CONTEXT = httpx.create_ssl_context()


class TooManyTextsError(ValueError):
    """Raised when a batch exceeds the configured maximum size"""

    def __init__(self, count: int, limit: int):
        super().__init__(f"Too many texts: {count} (max {limit})")
        self.count = count
        self.limit = limit


class TranslationService:
    """Relay translations to the upstream backend"""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_batch_size: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url or settings.TRANSLATE_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.max_batch_size = max_batch_size if max_batch_size is not None else settings.MAX_BATCH_SIZE
        self._transport = transport

    async def _post(self, payload: dict) -> httpx.Response:
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.timeout,
            verify=SSL_CONTEXT,
        ) as client:
            return await client.post(url=self.url, json=payload)

    async def translate(self, text: str, source: str, target: str) -> str:
        """
        Translate a single text

        Args:
            text: Text to translate
            source: Source language code
            target: Target language code

        Returns:
            Translated text, or an empty string if the upstream call failed
        """
        if not text:
            return ""

        payload = {
            "q": text,
            "source": source,
            "target": target,
            "format": "text",
        }

        try:
            response = await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Upstream translation timed out after {self.timeout}s")
            return ""
        except httpx.HTTPError as e:
            logger.warning(f"Upstream translation request failed: {e}")
            return ""
        except Exception as e:
            # e.g. UnicodeEncodeError for lone surrogates while encoding the payload
            logger.warning(f"Upstream translation request error: {e}")
            return ""

        if not response.is_success:
            logger.warning(
                f"Upstream translation error: {response.status_code} {response.reason_phrase}"
            )
            return ""

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Upstream translation returned invalid JSON: {e}")
            return ""
        except Exception as e:
            logger.warning(f"Upstream translation response error: {e}")
            return ""

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            logger.warning("Upstream translation response has no translatedText")
            return ""
        return translated

    async def batch_translate(self, texts: List[str], source: str, target: str) -> List[str]:
        """Translate texts concurrently. Output order matches input order."""
        if len(texts) > self.max_batch_size:
            raise TooManyTextsError(len(texts), self.max_batch_size)
        if not texts:
            return []
        results = await asyncio.gather(
            *(self.translate(text, source, target) for text in texts)
        )
        return list(results)


# Global instance
translation_service = TranslationService()
