"""
JSON endpoints for privileged account operations

bootstrap-admin creates the very first administrator and is closed once one
exists; create-user is for signed-in administrators.
"""

import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from club import reauth
from club.models import UserRole
from club.permissions import is_admin
from club.services import AccountError, bootstrap_admin, create_account

logger = logging.getLogger(__name__)


def _parse_body(request):
    try:
        payload = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def _error(message, status):
    return JsonResponse({'error': message}, status=status)


@csrf_exempt
@require_POST
def bootstrap_admin_view(request):
    payload = _parse_body(request)
    if payload is None:
        return _error('Invalid JSON body', 400)

    email = payload.get('email')
    password = payload.get('password')
    full_name = payload.get('full_name')

    try:
        user = bootstrap_admin(email, password, full_name)
    except PermissionError as e:
        return _error(str(e), 403)
    except AccountError as e:
        return _error(str(e), 400)
    except Exception:
        logger.exception("Error in bootstrap-admin")
        return _error('Internal server error', 500)

    return JsonResponse({
        'success': True,
        'message': 'Admin account created successfully!',
        'user': {
            'id': user.pk,
            'email': user.email,
            'full_name': user.profile.full_name,
        },
    })


@require_POST
def create_user_view(request):
    if not request.user.is_authenticated:
        return _error('Authentication required', 401)
    if not is_admin(request.user):
        return _error('Admin access required', 403)

    payload = _parse_body(request)
    if payload is None:
        return _error('Invalid JSON body', 400)

    required = ('email', 'password', 'full_name', 'role')
    if any(not payload.get(field) for field in required):
        return _error('Missing required fields: email, password, full_name, role', 400)

    current_password = payload.get('current_password')
    if current_password is not None and not isinstance(current_password, str):
        return _error('Invalid value for current_password: expected a string', 400)

    role = payload['role']
    if role == UserRole.ADMIN and not reauth.verify_password(request, current_password):
        return _error('The current password you entered is incorrect.', 403)

    try:
        user = create_account(payload['email'], payload['password'], payload['full_name'], role)
    except AccountError as e:
        return _error(str(e), 400)
    except Exception:
        logger.exception("Error in create-user")
        return _error('Internal server error', 500)

    return JsonResponse({
        'success': True,
        'user': {
            'id': user.pk,
            'email': user.email,
            'full_name': user.profile.full_name,
            'role': role,
        },
    })
