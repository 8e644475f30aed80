"""Application service for translating article text."""

from blog.application.interfaces import Translator


class TranslationService:
    """Keeps the response shape equal to the request shape (str → str, list → list)."""

    def __init__(self, translator: Translator):
        self._translator = translator

    async def translate(self, text: str | list[str], target_language: str) -> str | list[str]:
        texts = text if isinstance(text, list) else [text]
        translated = await self._translator.translate(texts, target_language)
        if isinstance(text, list):
            return translated
        return translated[0] if translated else ""
