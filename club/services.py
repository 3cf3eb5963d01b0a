"""
Write operations shared by the pages, the JSON endpoints and the
management commands
"""

import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import transaction
from django.utils import timezone

from club.models import (
    Announcement, Match, MatchEvent, MatchLineup, Player, Profile, UserRole
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AccountError(ValueError):
    """Account could not be created or changed (bad input, duplicate...)"""


# ============================================================================
# Accounts
# ============================================================================

def admin_exists():
    User = get_user_model()
    return (
        UserRole.objects.filter(role=UserRole.ADMIN).exists()
        or User.objects.filter(is_superuser=True).exists()
    )


def email_taken(email, exclude_user=None):
    User = get_user_model()
    users = User.objects.filter(email__iexact=email) | User.objects.filter(username__iexact=email)
    if exclude_user is not None:
        users = users.exclude(pk=exclude_user.pk)
    return users.exists()


@transaction.atomic
def create_account(email, password, full_name, role=UserRole.USER):
    """
    Create a login (username = email) with its profile and role

    Returns:
        the new user
    """
    for field, value in (('email', email), ('password', password), ('full_name', full_name), ('role', role)):
        if value is not None and not isinstance(value, str):
            raise AccountError(f"Invalid value for {field}: expected a string")

    email = (email or '').strip().lower()
    full_name = (full_name or '').strip()

    if not email or not password or not full_name:
        raise AccountError('Missing required fields: email, password, full_name')
    try:
        validate_email(email)
    except ValidationError:
        raise AccountError(f"Invalid email address: {email}")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise AccountError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    if role not in dict(UserRole.ROLE_CHOICES):
        raise AccountError(f"Invalid role: {role}")
    if email_taken(email):
        raise AccountError('An account with this email already exists.')

    User = get_user_model()
    user = User.objects.create_user(username=email, email=email, password=password)
    Profile.objects.create(user=user, full_name=full_name)
    UserRole.objects.create(user=user, role=role)

    logger.info("Created %s account %s", role, email)
    return user


def bootstrap_admin(email, password, full_name):
    """Create the first administrator; refuses once any admin exists"""
    if admin_exists():
        raise PermissionError('An admin already exists. Use the create-user function instead.')
    return create_account(email, password, full_name, role=UserRole.ADMIN)


@transaction.atomic
def update_account(user, full_name, email, role=None):
    """Change name, email and (unless role is None) the role row"""
    email = email.strip().lower()
    if email_taken(email, exclude_user=user):
        raise AccountError('An account with this email already exists.')

    user.email = email
    user.username = email
    user.save(update_fields=['email', 'username'])

    Profile.objects.update_or_create(user=user, defaults={'full_name': full_name.strip()})
    if role is not None:
        UserRole.objects.update_or_create(user=user, defaults={'role': role})

    logger.info("Updated account %s (role=%s)", email, role)
    return user


def display_name(user):
    try:
        return user.profile.full_name
    except Profile.DoesNotExist:
        return user.get_full_name() or user.get_username()


# ============================================================================
# Deletions with fan-out to lineups and events
# ============================================================================

@transaction.atomic
def delete_player(player):
    """
    Delete a player together with every lineup entry and event naming them

    Returns:
        dict with the number of lineups and events removed
    """
    lineups_deleted, _ = MatchLineup.objects.filter(player=player).delete()
    events_deleted, _ = MatchEvent.objects.filter(player=player).delete()
    player_name = player.full_name
    player.delete()

    logger.info(
        "Deleted player %s (%d lineups, %d events)",
        player_name, lineups_deleted, events_deleted
    )
    return {'lineups': lineups_deleted, 'events': events_deleted}


@transaction.atomic
def delete_match(match):
    """Delete a match after its lineups and events"""
    lineups_deleted, _ = MatchLineup.objects.filter(match=match).delete()
    events_deleted, _ = MatchEvent.objects.filter(match=match).delete()
    opponent = match.opponent
    match.delete()

    logger.info(
        "Deleted match vs %s (%d lineups, %d events)",
        opponent, lineups_deleted, events_deleted
    )
    return {'lineups': lineups_deleted, 'events': events_deleted}


# ============================================================================
# Match result
# ============================================================================

def save_match_result(match, goals_scored, goals_conceded, status):
    match.goals_scored = goals_scored
    match.goals_conceded = goals_conceded
    match.points_earned = Match.points_for(goals_scored, goals_conceded)
    match.status = status
    match.save(update_fields=[
        'goals_scored', 'goals_conceded', 'points_earned', 'status', 'updated_at'
    ])
    logger.info(
        "Result saved for %s: %d-%d (%s, %d pts)",
        match, goals_scored, goals_conceded, status, match.points_earned
    )
    return match


# ============================================================================
# Notifications
# ============================================================================

def unread_announcements(user):
    """Published announcements the user has not marked as read"""
    announcements = Announcement.objects.filter(is_published=True)
    try:
        seen_at = user.profile.notifications_seen_at
    except Profile.DoesNotExist:
        seen_at = None
    if seen_at:
        announcements = announcements.filter(created_at__gt=seen_at)
    return announcements.order_by('-created_at')


def mark_notifications_read(user):
    profile, _ = Profile.objects.get_or_create(
        user=user,
        defaults={'full_name': user.get_full_name() or user.get_username()}
    )
    profile.notifications_seen_at = timezone.now()
    profile.save(update_fields=['notifications_seen_at', 'updated_at'])
    return profile


def active_players():
    return Player.objects.filter(is_active=True).order_by('jersey_number')
