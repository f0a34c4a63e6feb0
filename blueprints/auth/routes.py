"""
Auth Routes - Owner login and logout
"""

from flask import render_template, session, redirect, url_for, request, flash, current_app
from utils.security import get_admin_credentials, get_client_ip, verify_password
from . import auth_bp


def _safe_next(target):
    # Only same-site paths
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return url_for('about.index')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Owner login"""
    if request.method == 'POST':
        credentials = get_admin_credentials()
        username = request.form.get('username', '')
        password = request.form.get('password', '')

        if credentials['username'] and username == credentials['username'] \
                and verify_password(password, credentials['password_hash']):
            session['owner_logged_in'] = True
            session['username'] = username
            current_app.logger.info(f"Owner login from {get_client_ip()}")
            flash('로그인되었습니다.', 'success')
            return redirect(_safe_next(request.form.get('next')))

        current_app.logger.warning(f"Failed login for {username!r} from {get_client_ip()}")
        flash('아이디 또는 비밀번호가 올바르지 않습니다.', 'error')

    return render_template('login.html', next_url=request.values.get('next', ''))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout the owner"""
    session.pop('owner_logged_in', None)
    session.pop('username', None)
    flash('로그아웃되었습니다.', 'success')
    return redirect(url_for('pages.index'))
