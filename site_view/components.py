# site_view/components.py

from __future__ import annotations
from typing import Optional

import streamlit as st

from site_core.models import SiteConfig
from site_core.i18n import t, resolve_locale, supported_locales
from site_core.constants import PAGES, PAGE_KEY
from site_core.utils import clear_all_caches


def render_header(site_config: SiteConfig, lang: str):
    """Renders the main page header with title, tagline and social links."""
    left, right = st.columns([2, 1])
    with left:
        st.title(f"{site_config.branding.page_icon} {t('site.site_name', lang, default=site_config.site_name)}")
        if site_config.tagline:
            st.caption(t('site.tagline', lang, default=site_config.tagline))

    with right:
        links = []
        if site_config.nickname:
            links.append(f"**@{site_config.nickname}**")
        if site_config.social.github:
            links.append(f"[GitHub]({site_config.social.github})")
        if site_config.social.linkedin:
            links.append(f"[LinkedIn]({site_config.social.linkedin})")
        if site_config.social.telegram:
            links.append(f"[Telegram]({site_config.social.telegram})")

        if links:
            st.write(" &nbsp;•&nbsp; ".join(links))

        if site_config.features.developer_mode:
            st.caption("Developer mode is ON")


def render_footer(site_config: SiteConfig):
    """Renders the page footer."""
    st.write("---")
    st.caption(f"© {site_config.author or site_config.site_name}")


def flag_image_url(site_config: SiteConfig, lang: str) -> Optional[str]:
    """URL of the flag icon configured for `lang`, or None if it has no flag."""
    for entry in site_config.i18n.languages:
        if entry.code == lang and entry.flag:
            return f"https://flagcdn.com/24x18/{entry.flag}.png"
    return None


def render_language_switcher(site_config: SiteConfig, current_lang: str) -> str:
    """Renders the language selection dropdown with a vertically centered flag."""
    languages = site_config.i18n.languages
    if len(languages) <= 1:
        return current_lang

    codes = [lang.code for lang in languages]
    labels = [lang.label for lang in languages]

    try:
        current_idx = codes.index(current_lang)
    except ValueError:
        current_idx = 0

    col1, col2 = st.sidebar.columns([1, 4])

    with col1:
        flag_url = flag_image_url(site_config, current_lang)
        if flag_url:
            st.markdown(
                f'<div style="height: 38px; display: flex; align-items: center; justify-content: center;">'
                f'<img src="{flag_url}">'
                f'</div>',
                unsafe_allow_html=True
            )

    with col2:
        selected_label = st.selectbox(
            label=t("ui.language", current_lang),
            options=labels,
            index=current_idx,
            label_visibility="collapsed"
        )
    chosen = codes[labels.index(selected_label)]
    return resolve_locale(chosen, supported_locales(site_config), site_config.i18n.default)


def render_sidebar_navigation(site_config: SiteConfig, lang: str) -> str:
    """Renders the page selector and returns the chosen page id."""
    st.sidebar.header(t("ui.navigation", lang))

    current_page = st.session_state.get(PAGE_KEY, site_config.features.default_page)
    if current_page not in PAGES:
        current_page = PAGES[0]

    page = st.sidebar.radio(
        label=t("ui.page", lang),
        options=list(PAGES),
        index=PAGES.index(current_page),
        format_func=lambda page_id: t(f"pages.{page_id}", lang, default=page_id),
        label_visibility="collapsed",
    )
    st.session_state[PAGE_KEY] = page

    if site_config.features.developer_mode:
        st.sidebar.button("Clear App Caches", on_click=clear_all_caches, use_container_width=True)

    return page
