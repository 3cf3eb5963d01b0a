from club.models import UserRole
from club.permissions import get_role
from club.services import unread_announcements


def club(request):
    """Role flags and unread notification count for the navigation"""
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return {'is_admin': False, 'user_role': None, 'unread_notifications': 0}

    role = get_role(user)
    return {
        'is_admin': role == UserRole.ADMIN,
        'user_role': role,
        'unread_notifications': unread_announcements(user).count(),
    }
