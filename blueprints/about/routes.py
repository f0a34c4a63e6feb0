"""
About Routes - About Me page and edits to the content store
Handles: Profile fields, section text/visibility, adding/editing/removing skills
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from utils.content import get_content_store
from utils.view_models import get_view_models
from utils.helpers import clamp_level, form_bool
from utils.icons import icon_choices
from utils.decorators import login_required
from . import about_bp

BASIC_INFO_FIELDS = ('name', 'education', 'major', 'experience', 'photo')


@about_bp.route('')
def index():
    """About Me page"""
    store = get_content_store()
    return render_template('about.html',
                           basic_info=store.basic_info,
                           sections=store.sections,
                           skills_by_category=get_view_models().skills_by_category(),
                           icon_names=icon_choices())


@about_bp.route('/basic-info', methods=['POST'])
@login_required
def update_basic_info():
    """Update profile fields present in the form"""
    updates = {
        field: request.form.get(field, '').strip()
        for field in BASIC_INFO_FIELDS
        if field in request.form
    }
    get_content_store().update_basic_info(updates)
    current_app.logger.info(f"Basic info updated: {', '.join(sorted(updates)) or 'no fields'}")
    flash('기본 정보가 저장되었습니다.', 'success')
    return redirect(url_for('about.index'))


@about_bp.route('/sections/<section_id>', methods=['POST'])
@login_required
def update_section(section_id):
    """Update a narrative section's text and home-page visibility"""
    store = get_content_store()
    if store.find_section(section_id) is None:
        flash('해당 섹션을 찾을 수 없습니다.', 'error')
        return redirect(url_for('about.index'))

    updates = {}
    # Unchecked checkboxes are absent from the form; the marker says the field was offered
    if 'show_in_home' in request.form or 'show_in_home_present' in request.form:
        updates['show_in_home'] = form_bool(request.form, 'show_in_home')
    if 'title' in request.form:
        updates['title'] = request.form.get('title', '').strip()
    if 'content' in request.form:
        updates['content'] = request.form.get('content', '').replace('\r\n', '\n').strip()

    store.update_section(section_id, updates)
    current_app.logger.info(f"Section {section_id} updated")
    flash('섹션이 저장되었습니다.', 'success')
    return redirect(url_for('about.index', _anchor=f'section-{section_id}'))


@about_bp.route('/skills', methods=['POST'])
@login_required
def add_skill():
    """Add a new skill"""
    name = request.form.get('name', '').strip()
    if not name:
        flash('스킬 이름을 입력해 주세요.', 'error')
        return redirect(url_for('about.index', _anchor='skills'))

    skill_id = get_content_store().add_skill({
        'name': name[:100],
        'level': clamp_level(request.form.get('level', 50)),
        'category': request.form.get('category', '').strip() or 'Other',
        'icon': request.form.get('icon', '').strip() or 'Code',
    })
    current_app.logger.info(f"Skill added: {name} (id {skill_id})")
    flash('스킬이 추가되었습니다.', 'success')
    return redirect(url_for('about.index', _anchor='skills'))


@about_bp.route('/skills/<int:skill_id>', methods=['POST'])
@login_required
def update_skill(skill_id):
    """Edit an existing skill"""
    store = get_content_store()
    if store.find_skill(skill_id) is None:
        flash('해당 스킬을 찾을 수 없습니다.', 'error')
        return redirect(url_for('about.index', _anchor='skills'))

    updates = {}
    for field in ('name', 'category', 'icon'):
        value = request.form.get(field, '').strip()
        if value:
            updates[field] = value
    if 'level' in request.form:
        updates['level'] = clamp_level(request.form.get('level'))

    store.update_skill(skill_id, updates)
    current_app.logger.info(f"Skill {skill_id} updated")
    flash('스킬이 수정되었습니다.', 'success')
    return redirect(url_for('about.index', _anchor='skills'))


@about_bp.route('/skills/<int:skill_id>/delete', methods=['POST'])
@login_required
def delete_skill(skill_id):
    """Remove a skill"""
    get_content_store().remove_skill(skill_id)
    current_app.logger.info(f"Skill {skill_id} removed")
    flash('스킬이 삭제되었습니다.', 'success')
    return redirect(url_for('about.index', _anchor='skills'))
