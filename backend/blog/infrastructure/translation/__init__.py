from .google_translate_client import GoogleTranslateClient

__all__ = ["GoogleTranslateClient"]
