"""
Internationalization strings for the FanDial application.

Speed labels and window texts are kept in one JSON file per language under
`locales/`. A lazily created `I18nStrings` singleton resolves keys as
attributes (`i18n.FAN_LOW`), falling back to English (en_US) for any key the
active language lacks.
"""

import json
import locale
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger("FanDial.I18n")
strings: Optional["I18nStrings"] = None

FALLBACK_LANGUAGE = "en_US"


def get_locales_path() -> Path:
    """Returns the absolute path to the 'locales' directory."""
    return Path(__file__).parent / "locales"


def get_i18n(language_code: Optional[str] = None) -> "I18nStrings":
    """
    Initializes (if needed) and returns the global i18n singleton.

    A language code passed after initialization switches the active language.
    """
    global strings
    if strings is None:
        logger.debug("First call; initializing i18n singleton.")
        strings = I18nStrings(language_code)
    elif language_code:
        strings.set_language(language_code)
    return strings


class I18nStrings:
    """
    User-facing strings, loaded per language from JSON files.
    """

    # Native language names. These are not translated.
    LANGUAGE_MAP: Dict[str, str] = {
        "en_US": "English (US)",
        "de_DE": "Deutsch (Deutschland)",
        "es_ES": "Español (España)",
        "fr_FR": "Français (France)",
        "nl_NL": "Nederlands (Nederland)",
        "pl_PL": "Polski (Polska)",
    }

    def __init__(self, language_code: Optional[str] = None) -> None:
        self._locales_path = get_locales_path()
        self._fallback_strings: Dict[str, str] = self._load_language(FALLBACK_LANGUAGE)
        if not self._fallback_strings:
            raise RuntimeError("Failed to load base English (en_US) language file. Application cannot continue.")

        self._strings: Dict[str, str] = {}
        self.language = ""
        self.set_language(self._resolve_language(language_code))

        try:
            self.validate()
        except ValueError as e:
            logger.error("I18n validation failed on initialization: %s", e)

    def _load_language(self, lang_code: str) -> Dict[str, str]:
        """Loads a language dictionary from its JSON file, or {} if unusable."""
        lang_file = self._locales_path / f"{lang_code}.json"
        if not lang_file.exists():
            logger.error("Language file not found: %s", lang_file)
            return {}
        try:
            with lang_file.open('r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Failed to load or parse language file %s: %s", lang_file, e)
            return {}

    def _resolve_language(self, language_code: Optional[str]) -> str:
        """Picks the best supported language for an explicit code or the system locale."""
        if language_code:
            requested = language_code.replace('-', '_')
        else:
            try:
                detected = locale.getlocale(locale.LC_CTYPE)[0]
            except ValueError as e:
                logger.warning("Failed to get default locale: %s, falling back to %s.", e, FALLBACK_LANGUAGE)
                detected = None
            requested = detected.replace('-', '_') if detected else FALLBACK_LANGUAGE

        if requested in self.LANGUAGE_MAP:
            return requested

        # "de" or "de_AT" still get German.
        base_language = requested.split('_')[0]
        for supported in self.LANGUAGE_MAP:
            if supported.startswith(base_language + '_'):
                return supported
        return FALLBACK_LANGUAGE

    def __getattr__(self, name: str) -> str:
        """Looks up a translation string, falling back to English."""
        if name.startswith('_'):
            raise AttributeError(name)

        value = self._strings.get(name)
        if value is None:
            if self.language != FALLBACK_LANGUAGE:
                logger.warning("String constant '%s' not found in language '%s'. Using en_US.", name, self.language)
            value = self._fallback_strings.get(name)

        if value is None:
            logger.critical("String constant '%s' not found in fallback language 'en_US'.", name)
            raise AttributeError(f"String constant '{name}' is missing from all language definitions.")

        if not isinstance(value, str):
            logger.error("Value for '%s' is not a string (type: %s).", name, type(value))
            return f"[ERR: TYPE {name}]"
        return value

    def set_language(self, language_code: str) -> None:
        """Sets the current language and loads its strings."""
        normalized = language_code.replace('-', '_')
        if self.language == normalized:
            return

        if normalized not in self.LANGUAGE_MAP:
            logger.warning("Language '%s' is not supported. Falling back to en_US.", language_code)
            normalized = FALLBACK_LANGUAGE

        self.language = normalized
        if normalized == FALLBACK_LANGUAGE:
            self._strings = self._fallback_strings
        else:
            self._strings = self._load_language(normalized) or self._fallback_strings

        logger.info("Effective language: %s", self.language)

    def validate(self) -> None:
        """
        Checks every supported language file carries exactly the en_US keys.

        Raises:
            ValueError: If a language file is unreadable or misses keys.
        """
        master_keys = set(self._fallback_strings.keys())
        errors = []
        for lang_code in self.LANGUAGE_MAP:
            if lang_code == FALLBACK_LANGUAGE:
                continue
            translations = self._load_language(lang_code)
            if not translations:
                errors.append(f"Could not load or parse '{lang_code}'.")
                continue
            missing = master_keys - set(translations.keys())
            if missing:
                errors.append(f"Language '{lang_code}' is missing keys: {sorted(missing)}")
            extra = set(translations.keys()) - master_keys
            if extra:
                logger.warning("Language '%s' has extra keys not in en_US: %s", lang_code, sorted(extra))

        if errors:
            raise ValueError("I18n string validation failed:\n- " + "\n- ".join(errors))
        logger.debug("All I18n strings validated successfully.")
