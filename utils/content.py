"""
Content Store Module - In-memory source of truth for the About page
Holds the profile, the narrative sections and the skills list.

The store is owned by the Flask application (``app.extensions``) and every
mutation goes through the methods below so derived views can be rebuilt
from its version counter.
"""

import copy
import itertools
import logging
from flask import current_app
from .seed import SEED_BASIC_INFO, SEED_SECTIONS, SEED_SKILLS


logger = logging.getLogger(__name__)

EXTENSION_KEY = 'content_store'


class ContentStore:
    """Mutable profile/sections/skills tree with point-mutation operations"""

    def __init__(self, basic_info=None, sections=None, skills=None):
        self._basic_info = copy.deepcopy(basic_info or {})
        self._sections = copy.deepcopy(sections or [])
        self._skills = copy.deepcopy(skills or [])
        self._version = 0

        start = max((s['id'] for s in self._skills), default=0) + 1
        self._skill_ids = itertools.count(start)

    @classmethod
    def from_seed(cls):
        """Build a store from the bundled seed content"""
        return cls(SEED_BASIC_INFO, SEED_SECTIONS, SEED_SKILLS)

    # ========== READ ACCESS ========== #

    @property
    def version(self):
        """Monotonic counter bumped by every state-changing mutation"""
        return self._version

    @property
    def basic_info(self):
        return copy.deepcopy(self._basic_info)

    @property
    def sections(self):
        return copy.deepcopy(self._sections)

    @property
    def skills(self):
        return copy.deepcopy(self._skills)

    def snapshot(self):
        return {
            'basic_info': self.basic_info,
            'sections': self.sections,
            'skills': self.skills,
        }

    def find_section(self, section_id):
        section = next((s for s in self._sections if s['id'] == section_id), None)
        return copy.deepcopy(section)

    def find_skill(self, skill_id):
        skill = next((s for s in self._skills if s['id'] == skill_id), None)
        return copy.deepcopy(skill)

    # ========== MUTATIONS ========== #

    def update_basic_info(self, partial):
        """Merge partial fields into the profile; no validation"""
        self._basic_info.update(partial)
        self._touch()

    def update_section(self, section_id, partial):
        """Merge partial fields into the section with this id; unknown id is a no-op"""
        if not _merge_by_id(self._sections, section_id, partial):
            logger.debug(f"update_section: no section with id {section_id!r}")
            return
        self._touch()

    def update_skill(self, skill_id, partial):
        """Merge partial fields into the skill with this id; unknown id is a no-op"""
        if not _merge_by_id(self._skills, skill_id, partial):
            logger.debug(f"update_skill: no skill with id {skill_id!r}")
            return
        self._touch()

    def add_skill(self, skill):
        """
        Append a new skill and return the id assigned to it

        Args:
            skill (dict): name, level, category and icon (any 'id' is replaced)

        Returns:
            int: the new skill id
        """
        new_skill = dict(skill)
        new_skill['id'] = next(self._skill_ids)
        self._skills.append(new_skill)
        self._touch()
        return new_skill['id']

    def remove_skill(self, skill_id):
        """Remove the first skill with this id; unknown id is a no-op"""
        index = next((i for i, s in enumerate(self._skills) if s['id'] == skill_id), None)
        if index is None:
            logger.debug(f"remove_skill: no skill with id {skill_id!r}")
            return
        del self._skills[index]
        self._touch()

    def _touch(self):
        self._version += 1


def _merge_by_id(items, item_id, partial):
    for item in items:
        if item['id'] == item_id:
            item.update({k: v for k, v in partial.items() if k != 'id'})
            return True
    return False


def init_content_store(app, store=None):
    """Attach a ContentStore to the app (seeded unless one is given)"""
    store = store if store is not None else ContentStore.from_seed()
    app.extensions[EXTENSION_KEY] = store
    return store


def get_content_store():
    """Return the ContentStore owned by the current app"""
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'ContentStore',
    'init_content_store',
    'get_content_store',
]
