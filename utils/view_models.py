"""
View Model Module - Derived, read-only projections of the ContentStore
Builds the home page feed, the top skills ranking and the
skills-by-category grouping.
"""

import copy
from typing import Dict, List, Optional
from flask import current_app

SUMMARY_LENGTH = 100
SUMMARY_SUFFIX = '...'
TOP_SKILLS_COUNT = 4


def summarize(content: str, limit: int = SUMMARY_LENGTH) -> str:
    """
    Truncate narrative text for the home page

    Text longer than ``limit`` characters is cut to ``limit`` characters
    and suffixed with '...'; shorter text is returned unchanged.
    """
    if len(content) > limit:
        return content[:limit] + SUMMARY_SUFFIX
    return content


def build_home_content(sections: List[dict]) -> List[dict]:
    """Sections flagged for the home page, in source order"""
    return [
        {
            'id': section['id'],
            'title': section['title'],
            'summary': summarize(section['content']),
            'full_content': section['content'],
        }
        for section in sections
        if section.get('show_in_home')
    ]


def top_skills(skills: List[dict], count: int = TOP_SKILLS_COUNT) -> List[dict]:
    # sorted() is stable, ties keep their original order
    return sorted(skills, key=lambda skill: skill['level'], reverse=True)[:count]


def group_skills_by_category(skills: List[dict]) -> Dict[str, List[dict]]:
    grouped = {}
    for skill in skills:
        grouped.setdefault(skill['category'], []).append(skill)
    return grouped


def build_home_view_model(store) -> dict:
    """
    Build the home page view model from the current store state

    Returns:
        dict: content (home sections with summaries), skills (top 4 by level)
              and basic_info (the profile unchanged)
    """
    return {
        'content': build_home_content(store.sections),
        'skills': top_skills(store.skills),
        'basic_info': store.basic_info,
    }


def build_skills_by_category(store) -> Dict[str, List[dict]]:
    return group_skills_by_category(store.skills)


class ViewModelCache:
    """Caches derived views against ContentStore.version

    Callers get their own copy, so changing a returned view never leaks
    into the cache.
    """

    def __init__(self, store):
        self.store = store
        self._version: Optional[int] = None
        self._views: Dict[str, object] = {}

    def _get(self, name, builder):
        if self._version != self.store.version:
            self._views = {}
            self._version = self.store.version
        if name not in self._views:
            self._views[name] = builder(self.store)
        return copy.deepcopy(self._views[name])

    def home(self) -> dict:
        return self._get('home', build_home_view_model)

    def skills_by_category(self) -> Dict[str, List[dict]]:
        return self._get('skills_by_category', build_skills_by_category)


EXTENSION_KEY = 'view_model_cache'


def init_view_models(app, store):
    cache = ViewModelCache(store)
    app.extensions[EXTENSION_KEY] = cache
    return cache


def get_view_models() -> ViewModelCache:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'summarize',
    'build_home_content',
    'top_skills',
    'group_skills_by_category',
    'build_home_view_model',
    'build_skills_by_category',
    'ViewModelCache',
    'init_view_models',
    'get_view_models',
]
