# -*- coding: utf-8 -*-
"""User-visible strings, looked up by key through `tr()`."""

from typing import Dict

from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton holding the string tables; English is the only one shipped."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.language = "en"
            cls._instance._tables = cls._load_tables()
        return cls._instance

    @staticmethod
    def _load_tables() -> Dict[str, Dict[str, str]]:
        from services.translations.en import EN_TRANSLATIONS
        return {"en": EN_TRANSLATIONS}

    def tr(self, key: str, **kwargs) -> str:
        """Look up `key`; unknown keys come back unchanged so gaps stay visible."""
        text = self._tables.get(self.language, {}).get(key)
        if text is None:
            logger.debug(f"Missing translation: {key}")
            return key
        if not kwargs:
            return text
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError):
            logger.warning(f"Bad placeholders for {key}: {sorted(kwargs)}")
            return text


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)
