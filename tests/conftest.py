"""Shared test fixtures for the portfolio site."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from site_core.models import Category, ContentCatalog, Item, LocalizedContent


def make_item(item_id: str, skills=(), item_type: str = "project", locales=("en",), date: str = "2025-01-01") -> Item:
    """Builds an item with one record per locale; titles are '<id> (<locale>)'."""
    return Item(
        id=item_id,
        type=item_type,
        skills=tuple(skills),
        localized_content={
            loc: LocalizedContent(title=f"{item_id} ({loc})", date=date) for loc in locales
        },
    )


@pytest.fixture
def aws_item():
    return make_item("aws-security", ["AWS", "Security"])


@pytest.fixture
def docker_item():
    return make_item("docker-compose", ["Docker"])


@pytest.fixture
def nginx_item():
    return make_item("nginx-ssl", ["SSL/TLS", "Nginx"])


@pytest.fixture
def post_item():
    return make_item("who-am-i", ["DevOps", "Career"], item_type="post", locales=("en", "ua"))


@pytest.fixture
def security_category():
    return Category(id="category_security", skills=("Security", "SSL/TLS"))


@pytest.fixture
def containers_category():
    return Category(id="category_containers", skills=("Docker", "Kubernetes"))


@pytest.fixture
def items(aws_item, docker_item, nginx_item, post_item):
    return [aws_item, docker_item, nginx_item, post_item]


@pytest.fixture
def catalog(aws_item, docker_item, nginx_item, post_item, security_category, containers_category):
    return ContentCatalog(
        projects=(aws_item, docker_item, nginx_item),
        posts=(post_item,),
        categories=(security_category, containers_category),
    )


def _dump(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path):
    """A content tree with one defective project and one defective post."""
    root = tmp_path / "content"
    _dump(root / "projects.yaml", [
        {
            "id": "nginx-ssl",
            "skills": ["SSL/TLS", "Nginx"],
            "content": {"en": {"title": "Nginx and SSL"}, "ua": {"title": "Nginx і SSL"}},
        },
        {
            "id": "docker-compose",
            "skills": ["Docker"],
            "content": {"en": {"title": "Compose"}},
        },
        {
            # No default-locale record
            "id": "ua-only",
            "skills": ["Azure"],
            "content": {"ua": {"title": "Лише українською"}},
        },
        {
            # Same id as the first project
            "id": "Nginx SSL",
            "skills": ["Nginx"],
            "content": {"en": {"title": "Duplicate"}},
        },
    ])
    _dump(root / "categories.yaml", {
        "category_security": ["Security", "SSL/TLS"],
        "category_infrastructure": ["Docker", "Kubernetes"],
    })
    _dump(root / "showcase.yaml", {
        "techstack": ["Docker", "Security"],
        "toolstack": ["Terraform"],
        "achievements": [{"title": "AZ-104", "url": "https://example.com/az104"}],
    })
    _dump(root / "blog" / "older.yaml", {
        "skills": ["DevOps"],
        "content": {"en": {"title": "Older", "date": "2025-05-15"}},
    })
    _dump(root / "blog" / "newer.yaml", {
        "skills": ["DevOps", "AI"],
        "content": {
            "en": {"title": "Newer", "date": "2025-06-07"},
            "ua": {"title": "Новіший", "date": "2025-06-07"},
        },
    })
    _dump(root / "blog" / "draft.yaml", {
        "skills": ["Draft"],
        "content": {"ru": {"title": "Черновик", "date": "2025-07-01"}},
    })
    return root
