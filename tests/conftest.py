"""
Shared fixtures: accounts, logged-in clients and club data
"""
from datetime import timedelta

import pytest
from django.test import Client
from django.utils import timezone

from club.models import Match, Player, UserRole
from club.services import create_account

ADMIN_PASSWORD = 'admin-pass-123'
MEMBER_PASSWORD = 'member-pass-123'


@pytest.fixture
def club_admin(db):
    return create_account('coach@club.org', ADMIN_PASSWORD, 'Head Coach', UserRole.ADMIN)


@pytest.fixture
def member(db):
    return create_account('fan@club.org', MEMBER_PASSWORD, 'Loyal Fan', UserRole.USER)


@pytest.fixture
def admin_client(club_admin):
    """Client logged in as a club administrator"""
    client = Client()
    client.force_login(club_admin)
    return client


@pytest.fixture
def member_client(member):
    client = Client()
    client.force_login(member)
    return client


@pytest.fixture
def make_player(db):
    def _make_player(full_name='Abebe Bikila', position='midfielder', jersey_number=8, **kwargs):
        return Player.objects.create(
            full_name=full_name,
            position=position,
            jersey_number=jersey_number,
            **kwargs
        )
    return _make_player


@pytest.fixture
def make_match(db):
    def _make_match(opponent='Saint George', days=7, **kwargs):
        kwargs.setdefault('match_date', timezone.now() + timedelta(days=days))
        return Match.objects.create(opponent=opponent, **kwargs)
    return _make_match
