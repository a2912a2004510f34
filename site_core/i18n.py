from __future__ import annotations
from typing import Dict, Any, Optional, Iterable, Set

import streamlit as st

from .errors import MissingDefaultContent
from .models import SiteConfig, Item, LocalizedContent
from .utils import read_yaml_file, as_mapping
from .constants import I18N_DIR, DEFAULT_LANGUAGE


# --- Locale Resolution ---

def resolve_locale(requested: Optional[str], supported: Iterable[str], default: str) -> str:
    """
    Returns `requested` if it is one of the supported locales, else `default`.
    An unsupported locale is not an error: the default is the defined fallback.
    """
    if requested and requested in set(supported):
        return requested
    return default

def supported_locales(site_config: SiteConfig) -> Set[str]:
    """Locale codes configured for the site; the default is always included."""
    codes = {lang.code for lang in site_config.i18n.languages}
    codes.add(site_config.i18n.default or DEFAULT_LANGUAGE)
    return codes

def get_initial_language(site_config: SiteConfig) -> str:
    """Determines the initial language for the session."""
    return site_config.i18n.default or DEFAULT_LANGUAGE


# --- Localized Content ---

def localize(item: Item, locale: str, default_locale: str = DEFAULT_LANGUAGE) -> LocalizedContent:
    """
    Picks the item's record for `locale`, falling back to the default locale.
    Raises MissingDefaultContent when neither exists; the loader rejects such
    items, so at render time this only signals a catalog built by hand.
    """
    record = item.localized_content.get(locale)
    if record is not None:
        return record

    record = item.localized_content.get(default_locale)
    if record is not None:
        return record

    raise MissingDefaultContent(item.id, default_locale)

def has_default_content(item: Item, default_locale: str) -> bool:
    return default_locale in item.localized_content


# --- UI Strings ---

# Language consulted when a UI string is missing in the requested one.
# The app sets it from site.yaml so UI strings and content fall back alike.
_fallback_language = DEFAULT_LANGUAGE

def set_fallback_language(lang: Optional[str]) -> None:
    global _fallback_language
    _fallback_language = lang or DEFAULT_LANGUAGE

def get_fallback_language() -> str:
    return _fallback_language

@st.cache_data(show_spinner=False)
def _load_translation_file(lang: str) -> Dict[str, Any]:
    """Loads a single translation YAML file."""
    path = I18N_DIR / f"{lang}.yaml"
    if not path.exists():
        return {}
    return as_mapping(read_yaml_file(path), str(path))

def t(key: str, lang: str, default: Optional[str] = None, **params: Any) -> str:
    """
    Translates a given key using the loaded i18n data.
    It follows a fallback chain: current lang -> default lang -> provided default -> key itself.
    Keyword arguments are substituted into `{name}` placeholders.
    """
    value = _lookup(key, lang)
    if value is None:
        value = default or key
    if params:
        try:
            return value.format(**params)
        except (KeyError, IndexError, ValueError):
            return value
    return value

def _lookup(key: str, lang: str) -> Optional[str]:
    # 1. Try to get the translation for the current language
    value = _get_nested_key(_load_translation_file(lang), key)
    if value:
        return str(value)

    # 2. Fallback to the site's default language if different
    fallback = get_fallback_language()
    if lang != fallback:
        value = _get_nested_key(_load_translation_file(fallback), key)
        if value:
            return str(value)
    return None

def _get_nested_key(data: Dict[str, Any], key: str) -> Optional[Any]:
    """Helper to access a nested dictionary key like 'ui.title'."""
    keys = key.split('.')
    current_level = data
    for k in keys:
        if isinstance(current_level, dict) and k in current_level:
            current_level = current_level[k]
        else:
            return None
    return current_level
