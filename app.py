import streamlit as st
import logging

from site_core.logger_config import configure_app_logging
from site_core.services import load_site_config, load_catalog
from site_core.i18n import get_initial_language, resolve_locale, supported_locales, set_fallback_language
from site_core.constants import LANGUAGE_KEY, PAGE_PROJECTS, PAGE_BLOG, PAGE_RESUME
from site_view.components import render_header, render_footer, render_language_switcher, render_sidebar_navigation
from site_view.presentation import render_about_page, render_projects_page, render_blog_page, render_resume_page

# --- Basic Configuration ---
configure_app_logging(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """
    The main execution flow of the Streamlit application.
    """
    # --- 1. Initial Setup ---
    site_config = load_site_config()
    set_fallback_language(site_config.i18n.default)

    st.set_page_config(
        page_title=site_config.site_name,
        page_icon=site_config.branding.page_icon or "💼",
        layout="wide",
    )

    # --- 2. Language ---
    # Priority: Query Param > Session State > Site default
    requested = st.query_params.get(LANGUAGE_KEY) or st.session_state.get(LANGUAGE_KEY)
    lang = resolve_locale(requested, supported_locales(site_config), get_initial_language(site_config))

    new_lang = render_language_switcher(site_config, lang)
    if new_lang != lang:
        logger.info("Language switched from '%s' to '%s'", lang, new_lang)
        lang = new_lang
    st.session_state[LANGUAGE_KEY] = lang
    st.query_params[LANGUAGE_KEY] = lang

    # --- 3. Data Loading ---
    catalog = load_catalog(default_locale=site_config.i18n.default)

    # --- 4. Navigation ---
    page = render_sidebar_navigation(site_config, lang)

    # --- 5. Main Content Rendering ---
    render_header(site_config, lang)

    if page == PAGE_PROJECTS:
        render_projects_page(catalog, site_config, lang)
    elif page == PAGE_BLOG:
        render_blog_page(catalog, site_config, lang)
    elif page == PAGE_RESUME:
        render_resume_page(site_config, lang)
    else:
        render_about_page(catalog, site_config, lang)

    # --- 6. Footer ---
    render_footer(site_config)


if __name__ == "__main__":
    main()
