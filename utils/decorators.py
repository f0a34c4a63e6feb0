"""
Decorators Module - Route guards for owner-only actions
"""

from functools import wraps
from flask import session, redirect, url_for, flash, request


def login_required(f):
    """Decorator to require the site owner's login"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'owner_logged_in' not in session:
            flash('로그인이 필요합니다.', 'error')
            return redirect(url_for('auth.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


__all__ = ['login_required']
