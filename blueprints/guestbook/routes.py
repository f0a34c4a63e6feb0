"""
Guestbook Routes - Contact section guestbook submission
"""

from flask import session, redirect, url_for, request, flash, current_app
from utils.remote import get_remote
from utils.helpers import form_bool
from utils.security import check_rate_limit
from utils.notifications import notify_new_guestbook_entry
from . import guestbook_bp

FORM_FIELDS = ('author_name', 'message', 'organization', 'email')


@guestbook_bp.route('/guestbook', methods=['POST'])
def submit():
    """Store a guestbook entry; on failure the form contents are kept for resubmission"""
    back = url_for('pages.index', _anchor='contact')

    # Honeypot spam protection
    if request.form.get('website'):
        return redirect(back)

    entry = {field: request.form.get(field, '') for field in FORM_FIELDS}
    entry['message'] = entry['message'][:2000]
    entry['is_email_public'] = form_bool(request.form, 'is_email_public')

    if not check_rate_limit('guestbook'):
        session['guestbook_form'] = entry
        flash('요청이 너무 많습니다. 잠시 후 다시 시도해 주세요.', 'error')
        return redirect(back)

    result = get_remote().submit_guestbook_entry(
        entry, limit=current_app.config.get('GUESTBOOK_LIMIT', 20))

    if not result.ok:
        session['guestbook_form'] = result.form
        flash(result.error, 'error')
        return redirect(back)

    notify_new_guestbook_entry(result.entry)
    flash('방명록이 등록되었습니다. 감사합니다!', 'success')
    return redirect(back)
