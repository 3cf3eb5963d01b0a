"""
Role lookup and the admin-only view guard
"""

from functools import wraps

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect

from club.models import UserRole


def get_role(user):
    """
    Role of an account: 'admin', 'player' or 'user'

    Superusers are always admins; accounts without a role row are 'user'.
    """
    if not user or not user.is_authenticated:
        return None
    if user.is_superuser:
        return UserRole.ADMIN
    try:
        return user.club_role.role
    except UserRole.DoesNotExist:
        return UserRole.USER


def is_admin(user):
    return get_role(user) == UserRole.ADMIN


def admin_required(view_func):
    """
    Like login_required, but non-admin members are sent back to the dashboard
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin(request.user):
            messages.error(request, 'Administrator access required.')
            return redirect('club:dashboard')
        return view_func(request, *args, **kwargs)

    return login_required(_wrapped)
