"""Tests for site_core.models and site_core.utils."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from conftest import make_item
from site_core.errors import MissingDefaultContent
from site_core.models import Category, Item, LocalizedContent
from site_core.utils import secure_path_resolve, slugify


class TestItem:
    def test_id_is_normalized(self):
        item = Item(id="  Nginx SSL ", localized_content={"en": LocalizedContent(title="x")})
        assert item.id == "nginx-ssl"

    def test_id_is_immutable(self, aws_item):
        with pytest.raises(ValidationError):
            aws_item.id = "other"

    def test_skills_keep_declared_spelling(self):
        item = make_item("x", ["SSL/TLS", "aws"])
        assert item.skills == ("SSL/TLS", "aws")

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Item(id="x", type="video", localized_content={})

    def test_locales(self, post_item):
        assert post_item.locales == ["en", "ua"]

    def test_asset_path(self, tmp_path):
        (tmp_path / "projects").mkdir()
        (tmp_path / "projects" / "nginx.png").write_bytes(b"png")
        item = Item(id="n", image="projects/nginx.png", localized_content={})
        assert item.get_asset_path(tmp_path) == (tmp_path / "projects" / "nginx.png").resolve()

    def test_asset_path_missing_or_unset(self, tmp_path):
        assert Item(id="n", localized_content={}).get_asset_path(tmp_path) is None
        assert Item(id="n", image="nope.png", localized_content={}).get_asset_path(tmp_path) is None


class TestLocalizedContent:
    def test_date_object_becomes_iso_string(self):
        assert LocalizedContent(title="x", date=date(2025, 6, 7)).date == "2025-06-07"

    def test_string_date_is_kept(self):
        assert LocalizedContent(title="x", date="2025-06-07").date == "2025-06-07"

    def test_other_types_still_rejected(self):
        with pytest.raises(ValidationError):
            LocalizedContent(title="x", date=20250607)


class TestCategory:
    def test_contains_is_case_sensitive(self, security_category):
        assert security_category.contains("SSL/TLS")
        assert not security_category.contains("ssl/tls")

    def test_list_input_becomes_tuple(self):
        assert Category(id="c", skills=["A", "B"]).skills == ("A", "B")


class TestErrors:
    def test_missing_default_message(self):
        error = MissingDefaultContent("ua-only", "en")
        assert "ua-only" in str(error)
        assert "'en'" in str(error)


class TestUtils:
    def test_secure_path_resolve_inside(self, tmp_path):
        (tmp_path / "a.txt").write_text("x")
        assert secure_path_resolve(tmp_path, "a.txt") == (tmp_path / "a.txt").resolve()

    def test_secure_path_resolve_traversal(self, tmp_path):
        base = tmp_path / "base"
        base.mkdir()
        (tmp_path / "secret.txt").write_text("x")
        with pytest.raises(ValueError):
            secure_path_resolve(base, "../secret.txt")

    def test_secure_path_resolve_sibling_prefix(self, tmp_path):
        base = tmp_path / "base"
        base.mkdir()
        (tmp_path / "base-other").mkdir()
        (tmp_path / "base-other" / "f.txt").write_text("x")
        with pytest.raises(ValueError):
            secure_path_resolve(base, "../base-other/f.txt")

    def test_secure_path_resolve_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            secure_path_resolve(tmp_path, "missing.txt")

    def test_slugify(self):
        assert slugify("DevOps Is My Gym") == "devops-is-my-gym"
