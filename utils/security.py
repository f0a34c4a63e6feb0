"""
Security Module - Client IP lookup, per-IP rate limiting for public forms
and the owner's login credentials
"""

import time
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def check_rate_limit(endpoint='guestbook'):
    """Check if the client IP is within the rate limit for this endpoint"""
    max_requests = current_app.config.get('GUESTBOOK_RATE_LIMIT', 5)
    window = current_app.config.get('GUESTBOOK_RATE_WINDOW', 60)
    client_ip = get_client_ip()
    current_time = time.time()

    prune_rate_limits(current_time, window)

    endpoint_requests = [
        ep for ts, ep in RATE_LIMIT_REQUESTS.get(client_ip, []) if ep == endpoint
    ]
    if len(endpoint_requests) >= max_requests:
        current_app.logger.warning(f"Rate limit hit for {client_ip} on {endpoint}")
        return False

    RATE_LIMIT_REQUESTS.setdefault(client_ip, []).append((current_time, endpoint))
    return True


def prune_rate_limits(current_time, window):
    """Drop requests outside the window and forget IPs left with none"""
    for ip in list(RATE_LIMIT_REQUESTS):
        recent = [(ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[ip] if current_time - ts < window]
        if recent:
            RATE_LIMIT_REQUESTS[ip] = recent
        else:
            del RATE_LIMIT_REQUESTS[ip]


def reset_rate_limits():
    RATE_LIMIT_REQUESTS.clear()


def get_admin_credentials():
    """Load the owner's credentials from app config safely"""
    username = current_app.config.get('ADMIN_USERNAME')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not username or not password:
        return {'username': None, 'password_hash': None}
    return {
        'username': username,
        'password_hash': generate_password_hash(password)
    }


def verify_password(password, password_hash):
    """Verify password against hash"""
    return check_password_hash(password_hash, password or '')


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'prune_rate_limits',
    'reset_rate_limits',
    'get_admin_credentials',
    'verify_password',
]
