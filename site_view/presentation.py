from __future__ import annotations
from typing import List

import streamlit as st

from site_core.models import SiteConfig, ContentCatalog, Item
from site_core.i18n import t, localize
from site_core.search import filter_items, collect_all_skills, count_by_category
from site_core.services import sorted_posts, resolve_resume_file
from site_core.state import SelectionState, HandoffSlot, state_from_handoff
from site_core.utils import load_image, read_binary_file
from site_core.constants import (
    SELECTION_STATE_KEY, BLOG_STATE_KEY, SELECTED_SKILL_SLOT,
    PAGE_KEY, PAGE_PROJECTS,
)


def _commit(state: SelectionState, key: str):
    """Stores a changed state and reruns so the page reflects it."""
    state.save_to_session(st.session_state, key)
    st.rerun()


# --- About ---

def render_about_page(catalog: ContentCatalog, site_config: SiteConfig, lang: str):
    """Renders the About page: intro, clickable skills, tools and certificates."""
    st.markdown(t("about.intro", lang, default=""))

    showcase = catalog.showcase
    if showcase.techstack:
        st.subheader(t("about.techstack", lang))
        cols = st.columns(4)
        for i, skill in enumerate(showcase.techstack):
            if cols[i % 4].button(skill, key=f"tech_{i}", use_container_width=True):
                HandoffSlot(st.session_state, SELECTED_SKILL_SLOT).put(skill)
                st.session_state[PAGE_KEY] = PAGE_PROJECTS
                st.rerun()

    if showcase.toolstack:
        st.subheader(t("about.toolstack", lang))
        st.write(" · ".join(showcase.toolstack))

    if showcase.achievements:
        st.subheader(t("about.achievements", lang))
        for achievement in showcase.achievements:
            if achievement.url:
                st.markdown(f"- [{achievement.title}]({achievement.url})")
            else:
                st.markdown(f"- {achievement.title}")


# --- Projects ---

def render_projects_page(catalog: ContentCatalog, site_config: SiteConfig, lang: str):
    """Renders the project gallery with category and skill filters."""
    default_lang = site_config.i18n.default
    current = SelectionState.from_session(st.session_state, SELECTION_STATE_KEY)
    state = state_from_handoff(HandoffSlot(st.session_state, SELECTED_SKILL_SLOT), current)
    if state != current:
        state.save_to_session(st.session_state, SELECTION_STATE_KEY)

    st.header(t("projects.heading", lang))

    # Category filters
    counts = count_by_category(catalog.projects, catalog.categories)
    if catalog.categories:
        cols = st.columns(min(4, len(catalog.categories)))
        for i, category in enumerate(catalog.categories):
            label = f"{t(f'categories.{category.id}', lang, default=category.id)} ({counts[category.id]})"
            is_active = state.category == category.id
            if cols[i % len(cols)].button(label, key=f"cat_{category.id}",
                                          type="primary" if is_active else "secondary",
                                          use_container_width=True):
                _commit(state.select_category(category.id), SELECTION_STATE_KEY)

    # Skill picker
    all_skills = collect_all_skills(catalog.projects)
    picked = st.selectbox(
        t("projects.skill", lang),
        options=[""] + all_skills,
        index=_skill_index(all_skills, state.skill),
        format_func=lambda s: s or t("projects.any_skill", lang),
        key=f"skill_picker_{state.skill or ''}",
    )
    if _skill_index(all_skills, picked) != _skill_index(all_skills, state.skill):
        # Picking the empty entry re-selects the active skill, which toggles it off.
        _commit(state.select_skill(picked or state.skill), SELECTION_STATE_KEY)

    _render_active_filters(state, lang, SELECTION_STATE_KEY)

    category = catalog.get_category(state.category)
    results = filter_items(catalog.projects, state.item_type, category, state.skill)
    st.caption(t("projects.showing_results", lang, count=len(results)))

    if not results:
        st.info(f"**{t('projects.no_results', lang)}** {t('projects.try_different_filters', lang)}")
        if st.button(t("projects.reset_all_filters", lang), key="reset_empty"):
            _commit(state.reset(), SELECTION_STATE_KEY)
        return

    cols = st.columns(3)
    for i, item in enumerate(results):
        with cols[i % 3]:
            _render_project_card(item, state, lang, default_lang)


def _skill_index(all_skills: List[str], skill) -> int:
    if not skill:
        return 0
    for i, candidate in enumerate(all_skills):
        if candidate.casefold() == skill.casefold():
            return i + 1
    return 0


def _render_active_filters(state: SelectionState, lang: str, key: str):
    if not state.is_filtered:
        return
    labels = []
    for kind, value in state.active_filters():
        if kind == "category":
            labels.append(t(f"categories.{value}", lang, default=value))
        elif kind == "type":
            labels.append(t(f"types.{value}", lang, default=value))
        else:
            labels.append(value)
    left, right = st.columns([4, 1])
    left.write(f"**{t('projects.active_filters', lang)}:** " + ", ".join(labels))
    if right.button(t("projects.clear_all", lang), key=f"clear_{key}"):
        _commit(state.reset(), key)


def _render_project_card(item: Item, state: SelectionState, lang: str, default_lang: str):
    """Renders a single project card with clickable skills."""
    content = localize(item, lang, default_lang)
    with st.container(border=True):
        image_path = item.get_asset_path()
        if image_path:
            st.image(load_image(image_path), use_container_width=True)
        st.markdown(f"##### {content.title}")
        if content.body:
            st.caption(content.body)

        for skill in item.skills:
            is_active = state.skill is not None and skill.casefold() == state.skill.casefold()
            if st.button(skill, key=f"skill_{item.id}_{skill}",
                         type="primary" if is_active else "secondary"):
                _commit(state.select_skill(skill), SELECTION_STATE_KEY)

        links = []
        if item.repo_url:
            links.append(f"[{t('ui.repo', lang)}]({item.repo_url})")
        if item.demo_url:
            links.append(f"[{t('ui.demo', lang)}]({item.demo_url})")
        if links:
            st.write(" | ".join(links))


# --- Blog ---

def render_blog_page(catalog: ContentCatalog, site_config: SiteConfig, lang: str):
    """Renders the post list, or a single post when one is opened."""
    default_lang = site_config.i18n.default
    state = SelectionState.from_session(st.session_state, BLOG_STATE_KEY)

    opened = catalog.get_item(state.detail_id)
    if opened is not None and opened.type == "post":
        _render_post(opened, state, lang, default_lang)
        return

    st.header(t("blog.heading", lang))
    st.caption(t("blog.subtitle", lang))

    _render_active_filters(state, lang, BLOG_STATE_KEY)

    posts = filter_items(sorted_posts(catalog.posts, lang, default_lang), skill=state.skill)
    if not posts:
        st.info(t("blog.no_posts", lang))
        return

    for post in posts:
        content = localize(post, lang, default_lang)
        with st.container(border=True):
            st.markdown(f"#### {content.title}")
            st.caption(f"{content.date} · {content.read_time}")
            if site_config.features.show_post_previews and content.preview:
                st.write(content.preview)
            cols = st.columns(len(post.skills) + 1)
            for i, tag in enumerate(post.skills):
                if cols[i].button(tag, key=f"tag_{post.id}_{tag}"):
                    _commit(state.select_skill(tag), BLOG_STATE_KEY)
            if cols[-1].button(t("blog.read_more", lang), key=f"open_{post.id}"):
                _commit(state.open_detail(post.id), BLOG_STATE_KEY)


def _render_post(post: Item, state: SelectionState, lang: str, default_lang: str):
    content = localize(post, lang, default_lang)
    if st.button(f"← {t('blog.back', lang)}"):
        _commit(state.close_detail(), BLOG_STATE_KEY)
    st.header(content.title)
    st.caption(f"{content.date} · {content.read_time}")
    if content.tags:
        st.write(" ".join(f"`{tag}`" for tag in content.tags))
    st.markdown(content.body)


# --- Resume ---

def render_resume_page(site_config: SiteConfig, lang: str):
    """Offers the resume PDF matching the current language."""
    st.header(t("resume.heading", lang))
    resume_path = resolve_resume_file(site_config.resources, lang, site_config.i18n.default)
    if resume_path is None:
        st.warning(t("resume.unavailable", lang))
        return

    st.download_button(
        label=t("ui.download_resume", lang, default="Download Resume"),
        data=read_binary_file(resume_path),
        file_name=resume_path.name,
        mime="application/pdf",
    )
