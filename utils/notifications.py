"""
Notifications Module - Telegram alert to the site owner on new guestbook entries
"""

import threading
import requests
from markupsafe import escape
from flask import current_app


def get_telegram_credentials():
    """Owner Telegram credentials from app config (None when not configured)"""
    token = current_app.config.get('OWNER_TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('OWNER_TELEGRAM_CHAT_ID')
    if not token or not chat_id:
        return None
    return {'bot_token': token, 'chat_id': chat_id}


def send_telegram_notification(message_text):
    """
    Send a Telegram message to the site owner in a background thread

    Args:
        message_text (str): HTML-formatted message

    Returns:
        bool: True if a send was started
    """
    credentials = get_telegram_credentials()
    if not credentials:
        current_app.logger.debug("Owner Telegram credentials not configured")
        return False

    url = f"https://api.telegram.org/bot{credentials['bot_token']}/sendMessage"
    payload = {
        'chat_id': credentials['chat_id'],
        'text': message_text,
        'parse_mode': 'HTML'
    }
    logger = current_app.logger

    def _send():
        try:
            response = requests.post(url, json=payload, timeout=10)
            if not response.ok:
                logger.error(f"Telegram API error: {response.status_code} {response.text[:200]}")
        except requests.RequestException as e:
            logger.error(f"Telegram send error: {str(e)}")

    threading.Thread(target=_send, daemon=True).start()
    return True


def notify_new_guestbook_entry(entry):
    """Alert the owner about a stored guestbook entry"""
    message = entry.get('message', '')
    return send_telegram_notification(
        f"📖 <b>New Guestbook Entry</b>\n\n"
        f"👤 <b>From:</b> {escape(entry.get('author_name', ''))}\n"
        f"🏢 <b>Organization:</b> {escape(entry.get('organization') or '-')}\n"
        f"💬 <b>Message:</b>\n{escape(message[:200])}{'...' if len(message) > 200 else ''}"
    )


__all__ = [
    'get_telegram_credentials',
    'send_telegram_notification',
    'notify_new_guestbook_entry',
]
