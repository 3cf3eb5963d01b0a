"""
Tests for the member pages and authentication views
"""
from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from club.models import Announcement, GalleryItem, MatchEvent, MatchLineup, Profile

from .conftest import MEMBER_PASSWORD


def messages_of(response):
    return [str(m) for m in response.context['messages']]


@pytest.mark.django_db
class TestAuthentication:

    def test_root_redirects_to_login(self, client):
        response = client.get('/')

        assert response.status_code == 302
        assert response.url == '/login/'

    def test_pages_require_login(self, client):
        for name in ('club:dashboard', 'club:squad', 'club:fixtures', 'club:news', 'club:gallery', 'club:notifications'):
            response = client.get(reverse(name))
            assert response.status_code == 302
            assert response.url.startswith(reverse('club:login'))

    def test_login_page_renders(self, client):
        assert client.get(reverse('club:login')).status_code == 200

    def test_login_with_email(self, client, member):
        response = client.post(reverse('club:login'), {'email': 'FAN@club.org', 'password': MEMBER_PASSWORD})

        assert response.status_code == 302
        assert response.url == reverse('club:dashboard')
        assert client.session.get_expire_at_browser_close()

    def test_remember_me_keeps_session_two_weeks(self, client, member):
        client.post(reverse('club:login'), {
            'email': 'fan@club.org',
            'password': MEMBER_PASSWORD,
            'remember_me': 'on',
        })

        assert client.session.get_expiry_age() == 1209600

    def test_login_honours_next(self, client, member):
        response = client.post(
            reverse('club:login') + '?next=/news/',
            {'email': 'fan@club.org', 'password': MEMBER_PASSWORD},
        )

        assert response.url == '/news/'

    def test_login_ignores_foreign_next(self, client, member):
        response = client.post(reverse('club:login'), {
            'email': 'fan@club.org',
            'password': MEMBER_PASSWORD,
            'next': 'https://evil.example.com/',
        })

        assert response.url == reverse('club:dashboard')

    def test_wrong_password(self, client, member):
        response = client.post(reverse('club:login'), {'email': 'fan@club.org', 'password': 'nope-nope'})

        assert response.status_code == 200
        assert 'Invalid email or password.' in messages_of(response)
        assert '_auth_user_id' not in client.session

    def test_authenticated_user_skips_login(self, member_client):
        response = member_client.get(reverse('club:login'))

        assert response.url == reverse('club:dashboard')

    def test_logout(self, member_client):
        response = member_client.get(reverse('club:logout'))

        assert response.url == reverse('club:login')
        assert '_auth_user_id' not in member_client.session

    def test_health_check(self, client):
        response = client.get(reverse('club:health_check'))

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'


@pytest.mark.django_db
class TestDashboard:

    def test_stats(self, member_client, make_player, make_match):
        make_player(jersey_number=1)
        make_player(jersey_number=2)
        make_player(jersey_number=3, is_active=False)
        make_match(opponent='Future FC', days=3)
        make_match(opponent='Later FC', days=10)
        make_match(opponent='Won FC', days=-7, status='completed', goals_scored=2, goals_conceded=0, points_earned=3)
        make_match(opponent='Drew FC', days=-14, status='completed', goals_scored=1, goals_conceded=1, points_earned=1)
        make_match(opponent='Unscored FC', days=-21, status='completed')

        response = member_client.get(reverse('club:dashboard'))

        assert response.context['stats'] == {
            'total_players': 2,
            'upcoming_matches': 2,
            'matches_played': 3,
            'total_points': 4,
        }
        assert response.context['next_match'].opponent == 'Future FC'

    def test_recent_announcements(self, member_client):
        for i in range(5):
            Announcement.objects.create(title=f'News {i}', content='...')
        Announcement.objects.create(title='Draft', content='...', is_published=False)

        response = member_client.get(reverse('club:dashboard'))

        recent = list(response.context['recent_announcements'])
        assert len(recent) == 3
        assert all(a.is_published for a in recent)

    def test_empty_club(self, member_client):
        response = member_client.get(reverse('club:dashboard'))

        assert response.context['next_match'] is None
        assert response.context['stats']['total_points'] == 0


@pytest.mark.django_db
class TestSquad:

    def test_grouped_by_position_order(self, member_client, make_player):
        make_player(full_name='Striker', position='forward', jersey_number=9)
        make_player(full_name='Keeper', position='goalkeeper', jersey_number=1)
        make_player(full_name='Back', position='defender', jersey_number=4)
        make_player(full_name='Retired', position='midfielder', jersey_number=8, is_active=False)

        response = member_client.get(reverse('club:squad'))

        groups = response.context['groups']
        assert [g['position'] for g in groups] == ['goalkeeper', 'defender', 'forward']
        assert response.context['total_players'] == 3
        assert groups[0]['label'] == 'Goalkeepers'


@pytest.mark.django_db
class TestFixtures:

    def test_split_and_ordering(self, member_client, make_match):
        make_match(opponent='Soon', days=2)
        make_match(opponent='Live Now', days=0, status='live')
        make_match(opponent='Far', days=30)
        make_match(opponent='Secret', days=5, is_visible=False)
        make_match(opponent='Old', days=-30, status='completed', goals_scored=0, goals_conceded=1)
        make_match(opponent='Recent', days=-3, status='completed', goals_scored=3, goals_conceded=1)

        response = member_client.get(reverse('club:fixtures'))

        upcoming = [m.opponent for m in response.context['upcoming_matches']]
        completed = [m.opponent for m in response.context['completed_matches']]
        assert upcoming == ['Live Now', 'Soon', 'Far']
        assert completed == ['Recent', 'Old']
        assert response.context['total_matches'] == 5
        assert [m.result for m in response.context['completed_matches']] == ['W', 'L']


@pytest.mark.django_db
class TestMatchDetail:

    def test_hidden_match_is_404_for_members(self, member_client, make_match):
        match = make_match(is_visible=False)

        response = member_client.get(reverse('club:match_detail', args=[match.pk]))

        assert response.status_code == 404

    def test_hidden_match_visible_to_admin(self, admin_client, make_match):
        match = make_match(is_visible=False)

        response = admin_client.get(reverse('club:match_detail', args=[match.pk]))

        assert response.status_code == 200

    def test_missing_match(self, member_client):
        assert member_client.get(reverse('club:match_detail', args=[999])).status_code == 404

    def test_lineups_and_events(self, member_client, make_match, make_player):
        match = make_match(status='completed', goals_scored=2, goals_conceded=0)
        striker = make_player(full_name='Striker', position='forward', jersey_number=9)
        keeper = make_player(full_name='Keeper', position='goalkeeper', jersey_number=1)
        winger = make_player(full_name='Winger', position='forward', jersey_number=7)

        MatchLineup.objects.create(match=match, player=striker, lineup_type='first_half', position_played='forward')
        MatchLineup.objects.create(match=match, player=winger, lineup_type='first_half', position_played='forward')
        MatchLineup.objects.create(match=match, player=keeper, lineup_type='first_half', position_played='goalkeeper')
        MatchLineup.objects.create(match=match, player=keeper, lineup_type='second_half', position_played='goalkeeper')

        MatchEvent.objects.create(match=match, player=striker, event_type='goal', minute=70)
        MatchEvent.objects.create(match=match, player=winger, event_type='goal', minute=12)
        MatchEvent.objects.create(match=match, player=winger, event_type='assist', minute=70)
        MatchEvent.objects.create(match=match, player=keeper, event_type='yellow_card', minute=40)
        MatchEvent.objects.create(match=match, player=striker, event_type='substitution_out', minute=80)

        response = member_client.get(reverse('club:match_detail', args=[match.pk]))

        sections = response.context['lineup_sections']
        assert [s['type'] for s in sections] == ['first_half', 'second_half']
        assert [e.player.full_name for e in sections[0]['entries']] == ['Keeper', 'Winger', 'Striker']
        assert [e.minute for e in response.context['events']] == [12, 40, 70, 70, 80]
        assert len(response.context['goals']) == 2
        assert len(response.context['assists']) == 1
        assert len(response.context['yellow_cards']) == 1
        assert response.context['red_cards'] == []
        assert len(response.context['substitutions']) == 1


@pytest.mark.django_db
class TestNews:

    @pytest.fixture
    def announcements(self):
        for i in range(12):
            Announcement.objects.create(title=f'News {i}', content='Club news')
        Announcement.objects.create(title='Draft', content='Not yet', is_published=False)

    def test_first_page(self, member_client, announcements):
        response = member_client.get(reverse('club:news'))

        page = response.context['announcements']
        assert len(page.object_list) == 10
        assert response.context['total_announcements'] == 12
        assert all(a.is_published for a in page.object_list)

    def test_second_page(self, member_client, announcements):
        response = member_client.get(reverse('club:news'), {'page': 2})

        assert len(response.context['announcements'].object_list) == 2

    @pytest.mark.parametrize('page, expected_number', [('abc', 1), ('99', 2)])
    def test_bad_page_numbers_clamp(self, member_client, announcements, page, expected_number):
        response = member_client.get(reverse('club:news'), {'page': page})

        assert response.context['announcements'].number == expected_number


@pytest.mark.django_db
class TestGallery:

    def test_hidden_photos_excluded(self, member_client):
        GalleryItem.objects.create(title='Team photo', image_url='https://example.com/a.jpg')
        GalleryItem.objects.create(title='Blurry', image_url='https://example.com/b.jpg', is_visible=False)

        response = member_client.get(reverse('club:gallery'))

        assert [i.title for i in response.context['images']] == ['Team photo']


@pytest.mark.django_db
class TestNotifications:

    def test_unread_until_marked(self, member_client, member):
        Announcement.objects.create(title='Training moved', content='Saturday 9am')
        Announcement.objects.create(title='Draft', content='...', is_published=False)

        response = member_client.get(reverse('club:notifications'))
        assert [a.title for a in response.context['announcements']] == ['Training moved']
        assert response.context['unread_notifications'] == 1

        response = member_client.post(reverse('club:notifications_mark_read'), follow=True)
        assert 'All notifications cleared.' in messages_of(response)
        assert list(response.context['announcements']) == []
        assert response.context['unread_notifications'] == 0

    def test_only_newer_announcements_are_unread(self, member_client, member):
        now = timezone.now()
        old = Announcement.objects.create(title='Old', content='...')
        Announcement.objects.filter(pk=old.pk).update(created_at=now - timedelta(days=2))
        Announcement.objects.create(title='Fresh', content='...')
        Profile.objects.filter(user=member).update(notifications_seen_at=now - timedelta(days=1))

        response = member_client.get(reverse('club:notifications'))

        assert [a.title for a in response.context['announcements']] == ['Fresh']

    def test_mark_read_requires_post(self, member_client):
        assert member_client.get(reverse('club:notifications_mark_read')).status_code == 405
