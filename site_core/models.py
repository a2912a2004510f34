# site_core/models.py

from __future__ import annotations
from typing import List, Optional, Literal, Dict, Tuple
from datetime import date, datetime
from pathlib import Path
import logging

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import secure_path_resolve
from .constants import ASSETS_DIR, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

# Kinds of content a catalog item can be.
ItemType = Literal["project", "post"]


# --- Site Configuration Models ---

class LanguageEntry(BaseModel):
    code: str
    label: str
    flag: str = ""

class I18nConfig(BaseModel):
    default: str = DEFAULT_LANGUAGE
    languages: List[LanguageEntry] = [LanguageEntry(code="en", label="English", flag="gb")]

class ResourcesConfig(BaseModel):
    # Locale code -> PDF path relative to the assets directory.
    resume_pdfs: Dict[str, str] = {}

class SiteFeatures(BaseModel):
    default_page: str = "about"
    developer_mode: bool = False
    show_post_previews: bool = True

class Branding(BaseModel):
    page_icon: str = "💼"

class SocialLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    telegram: Optional[str] = None

class SiteConfig(BaseSettings):
    site_name: str = "My Portfolio"
    tagline: str = ""
    author: str = ""
    nickname: str = ""
    social: SocialLinks = SocialLinks()
    features: SiteFeatures = SiteFeatures()
    branding: Branding = Branding()
    i18n: I18nConfig = I18nConfig()
    resources: ResourcesConfig = ResourcesConfig()

    model_config = SettingsConfigDict(env_prefix="APP_", env_nested_delimiter="__")


# --- Content Models ---

class LocalizedContent(BaseModel):
    """One language variant of an item's display strings."""
    model_config = ConfigDict(frozen=True)

    title: str
    body: str = ""
    date: str = ""
    read_time: str = ""
    preview: str = ""
    tags: Tuple[str, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def date_as_iso_string(cls, v):
        # YAML reads an unquoted 2025-06-07 as a date object.
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        return v


class Item(BaseModel):
    """
    A single project or blog post of the catalog.

    Items are frozen: the id and every other field stay as loaded. Skill
    labels keep their declared spelling for display; matching against a
    selected skill is case-insensitive (see `site_core.search`).
    """
    model_config = ConfigDict(frozen=True)

    id: str
    type: ItemType = "project"
    skills: Tuple[str, ...] = ()
    localized_content: Dict[str, LocalizedContent]
    image: str = ""
    repo_url: str = ""
    demo_url: str = ""

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        # Ensures item IDs are consistent and URL-friendly.
        normalized = v.strip().lower().replace(" ", "-")
        if not normalized:
            raise ValueError("Item id must not be empty")
        return normalized

    @property
    def locales(self) -> List[str]:
        return sorted(self.localized_content)

    def get_asset_path(self, base_dir: Path = ASSETS_DIR) -> Optional[Path]:
        """
        Returns a secure, absolute path to the item's image.
        Prevents path traversal attacks.
        """
        if not self.image:
            return None
        try:
            return secure_path_resolve(base_dir, self.image)
        except (ValueError, FileNotFoundError) as e:
            logger.warning(
                "Could not resolve image '%s' for item '%s': %s",
                self.image, self.id, e
            )
            return None


class Category(BaseModel):
    """A named group of skill labels; an item belongs if it has any of them."""
    model_config = ConfigDict(frozen=True)

    id: str
    skills: Tuple[str, ...] = ()

    def contains(self, skill: str) -> bool:
        # Case-sensitive on the declared spelling.
        return skill in self.skills


class Achievement(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str = ""
    image: str = ""


class Showcase(BaseModel):
    """Skills, tools and certificates listed on the About page."""
    model_config = ConfigDict(frozen=True)

    techstack: Tuple[str, ...] = ()
    toolstack: Tuple[str, ...] = ()
    achievements: Tuple[Achievement, ...] = ()


class ContentCatalog(BaseModel):
    """The immutable set of projects, posts and categories built at startup."""
    model_config = ConfigDict(frozen=True)

    projects: Tuple[Item, ...] = ()
    posts: Tuple[Item, ...] = ()
    categories: Tuple[Category, ...] = ()
    showcase: Showcase = Showcase()

    def get_item(self, item_id: Optional[str]) -> Optional[Item]:
        """Finds a project or post by its ID."""
        normalized_id = (item_id or "").strip().lower()
        for item in (*self.projects, *self.posts):
            if item.id == normalized_id:
                return item
        return None

    def get_category(self, category_id: Optional[str]) -> Optional[Category]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None
