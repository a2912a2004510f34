from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Dict, Any, Iterable, Tuple
import logging

import streamlit as st
from pydantic import ValidationError

from .errors import CatalogError, DuplicateItemError, MissingDefaultContent
from .i18n import has_default_content, localize, resolve_locale
from .models import (
    SiteConfig, Item, Category, Showcase, ContentCatalog, ResourcesConfig,
)
from .utils import read_yaml_file, as_mapping, secure_path_resolve
from .constants import (
    CONFIG_DIR, CONTENT_DIR, ASSETS_DIR, DEFAULT_LANGUAGE,
    PROJECTS_FILE, CATEGORIES_FILE, SHOWCASE_FILE, BLOG_SUBDIR,
)

logger = logging.getLogger(__name__)


# --- Configuration Loading ---

@st.cache_data(show_spinner=False)
def load_site_config(config_dir: Path = CONFIG_DIR) -> SiteConfig:
    """Loads the main site configuration from site.yaml."""
    config_path = config_dir / "site.yaml"
    if not config_path.exists():
        logger.error("site.yaml not found, using default SiteConfig.")
        return SiteConfig()

    data = as_mapping(read_yaml_file(config_path), str(config_path))
    return SiteConfig.model_validate(data)


# --- Catalog Loading & Validation ---

@st.cache_data(ttl=3600)
def _scan_raw_content(content_dir: Path = CONTENT_DIR) -> Dict[str, Any]:
    """
    Reads every content file under `content_dir`.
    This is the slow I/O part and is heavily cached.
    It returns raw dictionaries, not validated models.
    """
    raw: Dict[str, Any] = {"projects": [], "posts": [], "categories": {}, "showcase": {}}
    if not content_dir.exists():
        logger.warning("Content directory not found: %s", content_dir)
        return raw

    projects_path = content_dir / PROJECTS_FILE
    if projects_path.exists():
        data = read_yaml_file(projects_path)
        if isinstance(data, list):
            raw["projects"] = data
        else:
            logger.warning("%s must hold a list of projects. Ignoring.", projects_path)

    categories_path = content_dir / CATEGORIES_FILE
    if categories_path.exists():
        raw["categories"] = as_mapping(read_yaml_file(categories_path), str(categories_path))

    showcase_path = content_dir / SHOWCASE_FILE
    if showcase_path.exists():
        raw["showcase"] = as_mapping(read_yaml_file(showcase_path), str(showcase_path))

    blog_dir = content_dir / BLOG_SUBDIR
    if blog_dir.is_dir():
        for post_file in sorted(blog_dir.glob("*.yaml")):
            post = as_mapping(read_yaml_file(post_file), str(post_file))
            if not post:
                continue
            post.setdefault("id", post_file.stem)
            raw["posts"].append(post)

    logger.info(
        "Scanned %d projects and %d posts from disk.",
        len(raw["projects"]), len(raw["posts"])
    )
    return raw

def build_catalog(raw: Dict[str, Any], default_locale: str = DEFAULT_LANGUAGE, strict: bool = False) -> ContentCatalog:
    """
    Validates raw content into an immutable ContentCatalog.

    Records with a schema error, a duplicate id or no default-locale content
    are dropped with a warning. With `strict=True` the first such defect is
    raised instead (CatalogError, or pydantic's ValidationError).
    """
    projects, _ = _build_items(raw.get("projects", []), "project", default_locale, strict)
    posts, _ = _build_items(raw.get("posts", []), "post", default_locale, strict)
    categories, _ = _build_categories(raw.get("categories", {}), strict)

    try:
        showcase = Showcase.model_validate(raw.get("showcase") or {})
    except ValidationError:
        if strict:
            raise
        logger.warning("Invalid showcase data, using an empty showcase.", exc_info=True)
        showcase = Showcase()

    return ContentCatalog(
        projects=tuple(projects),
        posts=tuple(posts),
        categories=tuple(categories),
        showcase=showcase,
    )

def load_catalog(content_dir: Path = CONTENT_DIR, default_locale: str = DEFAULT_LANGUAGE, strict: bool = False) -> ContentCatalog:
    """Scans `content_dir` and builds the catalog from it."""
    return build_catalog(_scan_raw_content(content_dir), default_locale, strict=strict)

def validate_catalog(content_dir: Path = CONTENT_DIR, default_locale: str = DEFAULT_LANGUAGE,
                     assets_dir: Path = ASSETS_DIR, resources: Optional[ResourcesConfig] = None) -> List[str]:
    """
    Returns a description of every defect in the content files; empty means clean.
    Besides schema and locale defects, every image and resume path must resolve
    to a file under `assets_dir`.
    """
    raw = _scan_raw_content(content_dir)
    problems: List[str] = []
    items: List[Item] = []
    for records, item_type in ((raw.get("projects", []), "project"), (raw.get("posts", []), "post")):
        valid, errors = _build_items(records, item_type, default_locale, strict=False)
        items.extend(valid)
        problems.extend(errors)
    _, errors = _build_categories(raw.get("categories", {}), strict=False)
    problems.extend(errors)
    try:
        showcase = Showcase.model_validate(raw.get("showcase") or {})
    except ValidationError as e:
        problems.append(f"showcase: {e}")
        showcase = Showcase()

    assets = [(f"{item.type} '{item.id}' image", item.image) for item in items]
    assets += [(f"achievement '{a.title}' image", a.image) for a in showcase.achievements]
    if resources is not None:
        assets += [(f"resume '{locale}'", path) for locale, path in sorted(resources.resume_pdfs.items())]
    for label, relative in assets:
        error = _missing_asset(assets_dir, relative)
        if error:
            problems.append(f"{label}: {error}")
    return problems


# --- Helper functions for catalog building ---

def _build_items(records: Iterable[Any], item_type: str, default_locale: str, strict: bool) -> Tuple[List[Item], List[str]]:
    items: List[Item] = []
    errors: List[str] = []
    seen_ids = set()

    for index, record in enumerate(records):
        label = f"{item_type} #{index}"
        try:
            if not isinstance(record, dict):
                raise CatalogError(f"Expected a mapping for {label}")
            item = Item.model_validate(_prepare_item(record, item_type))
            label = f"{item_type} '{item.id}'"
            if not has_default_content(item, default_locale):
                raise MissingDefaultContent(item.id, default_locale)
            if item.id in seen_ids:
                raise DuplicateItemError(item.id)
        except (CatalogError, ValidationError) as e:
            if strict:
                raise
            logger.warning("Skipping %s: %s", label, e)
            errors.append(f"{label}: {e}")
            continue

        seen_ids.add(item.id)
        items.append(item)

    return items, errors

def _prepare_item(record: Dict[str, Any], item_type: str) -> Dict[str, Any]:
    """Maps the content-file layout onto Item fields."""
    prepared = dict(record)
    prepared["type"] = item_type
    # Content files list locales under "content"; accept the model field name too.
    if "content" in prepared and "localized_content" not in prepared:
        prepared["localized_content"] = prepared.pop("content")
    prepared.setdefault("localized_content", {})
    return prepared

def _missing_asset(assets_dir: Path, relative: str) -> Optional[str]:
    """Why `relative` does not resolve to an asset file, or None if it does."""
    if not relative:
        return None
    try:
        secure_path_resolve(assets_dir, relative)
    except (ValueError, FileNotFoundError) as e:
        return str(e)
    return None

def _build_categories(raw: Dict[str, Any], strict: bool) -> Tuple[List[Category], List[str]]:
    categories: List[Category] = []
    errors: List[str] = []
    for category_id, skills in raw.items():
        try:
            categories.append(Category(id=str(category_id), skills=skills or ()))
        except ValidationError as e:
            if strict:
                raise
            logger.warning("Skipping category '%s': %s", category_id, e)
            errors.append(f"category '{category_id}': {e}")
    return categories, errors


# --- Locale-dependent selection ---

def sorted_posts(posts: Iterable[Item], locale: str, default_locale: str = DEFAULT_LANGUAGE) -> List[Item]:
    """Posts ordered newest first by their localized date."""
    return sorted(posts, key=lambda p: localize(p, locale, default_locale).date, reverse=True)

def resume_for_locale(resources: ResourcesConfig, lang: str, default_locale: str = DEFAULT_LANGUAGE) -> Optional[str]:
    """The configured resume path for `lang`, falling back to the default locale's."""
    if not resources.resume_pdfs:
        return None
    locale = resolve_locale(lang, resources.resume_pdfs.keys(), default_locale)
    return resources.resume_pdfs.get(locale)

def resolve_resume_file(resources: ResourcesConfig, lang: str, default_locale: str = DEFAULT_LANGUAGE,
                        base_dir: Path = ASSETS_DIR) -> Optional[Path]:
    """Absolute path of the resume PDF to show, or None if it is not on disk."""
    relative = resume_for_locale(resources, lang, default_locale)
    if not relative:
        return None
    try:
        return secure_path_resolve(base_dir, relative)
    except (ValueError, FileNotFoundError) as e:
        logger.warning("Resume for '%s' is unavailable: %s", lang, e)
        return None
