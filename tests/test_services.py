"""
Tests for account creation and fan-out deletes
"""
import pytest

from club.models import MatchEvent, MatchLineup, Profile, UserRole
from club.services import (
    AccountError, admin_exists, bootstrap_admin, create_account, delete_match,
    delete_player, display_name, mark_notifications_read, save_match_result
)


@pytest.mark.django_db
class TestAccounts:

    def test_create_account_normalises_email(self):
        user = create_account('  Striker@Club.ORG ', 'striker-pass', ' Striker ', UserRole.PLAYER)

        assert user.username == 'striker@club.org'
        assert user.email == 'striker@club.org'
        assert user.profile.full_name == 'Striker'
        assert user.check_password('striker-pass')

    @pytest.mark.parametrize('email, password, full_name, role', [
        ('', 'secret1', 'Name', UserRole.USER),
        ('a@club.org', '', 'Name', UserRole.USER),
        ('a@club.org', 'secret1', '   ', UserRole.USER),
        ('a@club.org', 'secret1', 'Name', 'owner'),
        ('not-an-email', 'secret1', 'Name', UserRole.USER),
        ('a@club.org', 'short', 'Name', UserRole.USER),
        (12345, 'secret1', 'Name', UserRole.USER),
        ('a@club.org', 123456, 'Name', UserRole.USER),
        ('a@club.org', 'secret1', 'Name', ['user']),
    ])
    def test_create_account_rejects_bad_input(self, email, password, full_name, role):
        with pytest.raises(AccountError):
            create_account(email, password, full_name, role)

    def test_duplicate_email_is_case_insensitive(self, member):
        with pytest.raises(AccountError, match='already exists'):
            create_account('FAN@CLUB.ORG', 'another-pass', 'Impostor')

    def test_bootstrap_only_once(self):
        assert not admin_exists()
        bootstrap_admin('first@club.org', 'first-pass', 'First Admin')
        assert admin_exists()

        with pytest.raises(PermissionError):
            bootstrap_admin('second@club.org', 'second-pass', 'Second Admin')

    def test_display_name_without_profile(self, django_user_model):
        user = django_user_model.objects.create_user('legacy', 'legacy@club.org', 'legacy-pass')

        assert display_name(user) == 'legacy'

    def test_mark_read_creates_missing_profile(self, django_user_model):
        user = django_user_model.objects.create_user('legacy', 'legacy@club.org', 'legacy-pass')

        profile = mark_notifications_read(user)

        assert profile.notifications_seen_at is not None
        assert Profile.objects.filter(user=user).exists()


@pytest.mark.django_db
class TestDeletes:

    def test_delete_player_counts(self, make_player, make_match):
        player = make_player()
        match = make_match()
        MatchLineup.objects.create(match=match, player=player, lineup_type='first_half', position_played='forward')
        MatchEvent.objects.create(match=match, player=player, event_type='goal')
        MatchEvent.objects.create(match=match, player=player, event_type='yellow_card')

        assert delete_player(player) == {'lineups': 1, 'events': 2}

    def test_delete_match_counts(self, make_player, make_match):
        match = make_match()
        MatchLineup.objects.create(match=match, player=make_player(), lineup_type='full_time', position_played='forward')

        assert delete_match(match) == {'lineups': 1, 'events': 0}


@pytest.mark.django_db
def test_save_match_result_sets_points(make_match):
    match = make_match()

    save_match_result(match, 0, 0, 'completed')

    match.refresh_from_db()
    assert match.points_earned == 1
    assert match.result == 'D'
