from pathlib import Path

# --- Project Paths ---
# Defines the absolute root path of the project.
ROOT_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = ROOT_DIR / "config"
CONTENT_DIR = ROOT_DIR / "content"
I18N_DIR = ROOT_DIR / "i18n"
ASSETS_DIR = ROOT_DIR / "assets"
LOG_DIR = ROOT_DIR / "logs"

# --- Content Files ---
PROJECTS_FILE = "projects.yaml"
CATEGORIES_FILE = "categories.yaml"
SHOWCASE_FILE = "showcase.yaml"
BLOG_SUBDIR = "blog"

# --- Special Identifiers ---
# Used for the "All Types" option of the type filter.
ALL_TYPES_ID = "all"

# --- Session Keys ---
SELECTION_STATE_KEY = "projects_selection"
BLOG_STATE_KEY = "blog_selection"
# One-shot slot: the skill clicked on the About page, consumed by the Projects page.
SELECTED_SKILL_SLOT = "selected_skill"
LANGUAGE_KEY = "lang"
PAGE_KEY = "page"

# --- Pages ---
PAGE_ABOUT = "about"
PAGE_PROJECTS = "projects"
PAGE_BLOG = "blog"
PAGE_RESUME = "resume"
PAGES = (PAGE_ABOUT, PAGE_PROJECTS, PAGE_BLOG, PAGE_RESUME)

# --- Default Values ---
DEFAULT_LANGUAGE = "en"
