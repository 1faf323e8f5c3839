from __future__ import annotations

import gettext
from typing import Optional

from .config import get_config
from .logging import get_logger

logger = get_logger(__name__)


def get_translations(
    language: Optional[str] = None,
    locale_dir: Optional[str] = None,
) -> gettext.NullTranslations:
    """Load the message catalog for the plugin's text domain.

    Falls back to untranslated strings when no catalog is configured or found.
    """
    config = get_config()
    language = language or config.locale_language
    locale_dir = locale_dir or config.locale_dir
    if not language or not locale_dir:
        return gettext.NullTranslations()

    translations = gettext.translation(
        config.text_domain,
        localedir=locale_dir,
        languages=[language],
        fallback=True,
    )
    if type(translations) is gettext.NullTranslations:
        logger.warning(f"No '{config.text_domain}' catalog for {language} in {locale_dir}")
    return translations
