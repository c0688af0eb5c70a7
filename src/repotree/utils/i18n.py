from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides the application-wide translation singleton. Locale files are nested
JSON documents resolved with dot-notation keys and formatted with
str.format interpolation.
"""

import json
import logging
import os
from typing import Any, Dict

from repotree.domain.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Missing keys resolve to the key itself, so a broken locale file degrades
    to readable identifiers instead of failing the caller.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        """Identifier of the active locale."""
        return self._locale

    def load_locale(self, locale: str) -> bool:
        """
        Load a translation dictionary from the locales directory.

        The previously loaded dictionary stays active when the requested
        locale is missing or unreadable.

        Args:
            locale: ISO identifier for the target language.

        Returns:
            bool: True if the locale was loaded.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'.")
            return False

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return False

        self._translations = translations
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        return True

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'errors.fetch_failed').
            **kwargs: Variables for string formatting.

        Returns:
            str: The translated string, or the key itself if unresolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                return key
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            return key

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

i18n = I18n(DEFAULT_LOCALE)
