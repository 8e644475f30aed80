"""Google Cloud Translation (v2 REST) client — implements the Translator interface.

Uses httpx against ``POST {base_url}?key=...`` with a JSON body of
``{"q": [...], "target": "en", "format": "text"}``.
"""

import html
import logging

import httpx

from blog.application.interfaces import Translator
from blog.domain.exceptions import TranslationProviderError

logger = logging.getLogger(__name__)


class GoogleTranslateClient(Translator):
    """Infrastructure adapter — connects to the Google Translate v2 API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://translation.googleapis.com/language/translate/v2",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "google-translate"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def translate(self, texts: list[str], target_language: str) -> list[str]:
        if not texts:
            return []
        if not self._api_key:
            raise TranslationProviderError(self.provider_name, 503, "Translation is not configured.")

        payload = {"q": texts, "target": target_language, "format": "text"}

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                self._base_url, params={"key": self._api_key}, json=payload
            )
        except httpx.HTTPError as exc:
            logger.error("Translation request failed: %s", exc)
            raise TranslationProviderError(self.provider_name, 502, str(exc)) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            self._raise_provider_error(response)

        translations = self._parse_translations(response)
        if len(translations) != len(texts):
            raise TranslationProviderError(
                self.provider_name,
                502,
                f"Expected {len(texts)} translations, got {len(translations)}",
            )
        logger.info(
            "Translated %d text(s) to '%s' (%d chars)",
            len(texts), target_language, sum(len(t) for t in texts),
        )
        return translations

    def _parse_translations(self, response: httpx.Response) -> list[str]:
        try:
            data = response.json()
            items = data["data"]["translations"]
            # format=text should return plain text, but entities still slip through
            return [html.unescape(item["translatedText"]) for item in items]
        except (ValueError, KeyError, TypeError) as exc:
            raise TranslationProviderError(
                self.provider_name, 502, f"Unexpected response: {response.text[:200]}"
            ) from exc

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Parse an error response and raise TranslationProviderError."""
        try:
            data = response.json()
            error = data.get("error", {})
            message = error.get("message", response.text)
        except Exception:
            message = response.text

        logger.warning("Translation provider returned %d: %s", response.status_code, message)
        raise TranslationProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
