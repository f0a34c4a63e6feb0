"""
Unit tests for the ContentStore.
"""

from utils.content import ContentStore
from utils.seed import SEED_SECTIONS, SEED_SKILLS


def make_store():
    return ContentStore(
        basic_info={'name': 'Kim', 'education': 'Uni', 'major': 'Design',
                    'experience': 'Junior', 'photo': '/me.jpg'},
        sections=[
            {'id': 'story', 'title': 'Story', 'content': 'Once', 'show_in_home': True},
            {'id': 'hobby', 'title': 'Hobby', 'content': 'Drawing', 'show_in_home': False},
        ],
        skills=[
            {'id': 1, 'name': 'Figma', 'level': 90, 'category': 'Design', 'icon': 'Figma'},
            {'id': 2, 'name': 'Git', 'level': 60, 'category': 'Frontend', 'icon': 'GitBranch'},
        ],
    )


class TestReadAccess:
    """Accessors return copies of the store contents."""

    def test_from_seed_loads_bundled_content(self):
        store = ContentStore.from_seed()

        assert [s['id'] for s in store.sections] == [s['id'] for s in SEED_SECTIONS]
        assert len(store.skills) == len(SEED_SKILLS)
        assert store.basic_info['name']
        assert store.version == 0

    def test_mutating_returned_data_does_not_change_store(self):
        store = make_store()

        sections = store.sections
        sections[0]['title'] = 'Hacked'
        store.basic_info['name'] = 'Hacked'
        store.skills.clear()

        assert store.sections[0]['title'] == 'Story'
        assert store.basic_info['name'] == 'Kim'
        assert len(store.skills) == 2
        assert store.version == 0

    def test_find_section_and_skill(self):
        store = make_store()

        assert store.find_section('hobby')['title'] == 'Hobby'
        assert store.find_section('missing') is None
        assert store.find_skill(2)['name'] == 'Git'
        assert store.find_skill(99) is None


class TestUpdates:
    """Partial updates merge fields and bump the version."""

    def test_update_basic_info_merges_fields(self):
        store = make_store()

        store.update_basic_info({'name': 'Lee', 'major': 'UX'})

        info = store.basic_info
        assert info['name'] == 'Lee'
        assert info['major'] == 'UX'
        assert info['education'] == 'Uni'
        assert store.version == 1

    def test_update_section_merges_into_matching_section(self):
        store = make_store()

        store.update_section('hobby', {'show_in_home': True})

        hobby = store.find_section('hobby')
        assert hobby['show_in_home'] is True
        assert hobby['content'] == 'Drawing'
        assert store.version == 1

    def test_update_section_with_unknown_id_is_a_no_op(self):
        store = make_store()
        before = store.sections

        store.update_section('nonexistent-id', {'title': 'Nope', 'show_in_home': True})

        assert store.sections == before
        assert store.version == 0

    def test_update_skill_with_unknown_id_is_a_no_op(self):
        store = make_store()
        before = store.skills

        store.update_skill(42, {'level': 10})

        assert store.skills == before
        assert store.version == 0

    def test_update_skill_never_changes_id(self):
        store = make_store()

        store.update_skill(1, {'id': 7, 'level': 95})

        assert store.find_skill(1)['level'] == 95
        assert store.find_skill(7) is None


class TestAddRemoveSkills:
    """Adding and removing skills."""

    def test_add_skill_appends_with_new_unique_id(self):
        store = make_store()

        new_id = store.add_skill({'name': 'React', 'level': 65, 'category': 'Frontend', 'icon': 'Code'})

        skills = store.skills
        assert skills[-1]['id'] == new_id
        assert skills[-1]['name'] == 'React'
        assert new_id not in (1, 2)

    def test_rapid_adds_never_collide(self):
        store = make_store()

        ids = [store.add_skill({'name': f's{i}', 'level': i, 'category': 'X', 'icon': 'Code'})
               for i in range(50)]

        assert len(set(ids)) == 50
        all_ids = [s['id'] for s in store.skills]
        assert len(all_ids) == len(set(all_ids))

    def test_add_skill_ignores_supplied_id(self):
        store = make_store()

        new_id = store.add_skill({'id': 1, 'name': 'Dup', 'level': 1, 'category': 'X', 'icon': 'Code'})

        assert new_id != 1
        assert [s['name'] for s in store.skills if s['id'] == 1] == ['Figma']

    def test_add_then_remove_restores_previous_skills(self):
        store = make_store()
        before = store.skills

        new_id = store.add_skill({'name': 'Sketch', 'level': 40, 'category': 'Design', 'icon': 'PenTool'})
        store.remove_skill(new_id)

        assert store.skills == before
        assert store.version == 2

    def test_remove_skill_with_unknown_id_is_a_no_op(self):
        store = make_store()
        before = store.skills

        store.remove_skill(404)

        assert store.skills == before
        assert store.version == 0

    def test_removed_id_is_not_reused(self):
        store = make_store()

        first = store.add_skill({'name': 'A', 'level': 1, 'category': 'X', 'icon': 'Code'})
        store.remove_skill(first)
        second = store.add_skill({'name': 'B', 'level': 1, 'category': 'X', 'icon': 'Code'})

        assert second != first
