"""Tests for the pure helpers of site_view.components."""

from __future__ import annotations

from site_core.models import I18nConfig, LanguageEntry, SiteConfig
from site_view.components import flag_image_url


def _config():
    return SiteConfig(i18n=I18nConfig(default="en", languages=[
        LanguageEntry(code="en", label="English", flag="gb"),
        LanguageEntry(code="ua", label="Українська", flag="ua"),
        LanguageEntry(code="eo", label="Esperanto"),
    ]))


class TestFlagImageUrl:
    def test_configured_flag(self):
        assert flag_image_url(_config(), "en") == "https://flagcdn.com/24x18/gb.png"
        assert flag_image_url(_config(), "ua") == "https://flagcdn.com/24x18/ua.png"

    def test_language_without_flag(self):
        assert flag_image_url(_config(), "eo") is None

    def test_unknown_language(self):
        assert flag_image_url(_config(), "fr") is None
