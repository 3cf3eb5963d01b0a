"""
Password re-confirmation for changes to administrator accounts

A successful check leaves a short-lived grant in the session, keyed by the
action and the target account, which the edit/delete views consume.
"""

import logging
import time

from django.conf import settings

from club.exceptions import ReauthenticationRequired

logger = logging.getLogger(__name__)

SESSION_KEY = 'club_reauth_grants'


def verify_password(request, password):
    """Check the acting user's own password"""
    user = request.user
    if not password or not user.is_authenticated:
        return False
    if user.check_password(password):
        return True
    logger.warning("Password re-confirmation failed for %s", user.get_username())
    return False


def _key(action, target):
    return f"{action}:{target}"


def grant(request, action, target):
    grants = request.session.get(SESSION_KEY, {})
    grants[_key(action, target)] = time.time()
    request.session[SESSION_KEY] = grants
    logger.info("Re-confirmation granted to %s for %s", request.user.get_username(), _key(action, target))


def has_grant(request, action, target):
    granted_at = request.session.get(SESSION_KEY, {}).get(_key(action, target))
    if granted_at is None:
        return False
    return time.time() - granted_at <= settings.REAUTH_TTL_SECONDS


def consume(request, action, target):
    grants = request.session.get(SESSION_KEY, {})
    if grants.pop(_key(action, target), None) is not None:
        request.session[SESSION_KEY] = grants


def require(request, action, target):
    """Raise ReauthenticationRequired unless a live grant exists"""
    if not has_grant(request, action, target):
        raise ReauthenticationRequired(action, target)
