"""Port for the external machine-translation provider."""

from abc import ABC, abstractmethod


class Translator(ABC):
    """Translates batches of plain text into a target language."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @abstractmethod
    async def translate(self, texts: list[str], target_language: str) -> list[str]:
        """Return one translation per input text, in input order.

        Raises TranslationProviderError on any provider failure.
        """
        ...
