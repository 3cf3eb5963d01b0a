"""
Views for the club portal (member pages and authentication)
"""

from django.contrib import messages
from django.contrib.auth import authenticate, login as auth_login, logout as auth_logout
from django.contrib.auth.decorators import login_required
from django.core.paginator import EmptyPage, PageNotAnInteger, Paginator
from django.db.models import Sum
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from club.models import (
    POSITION_CHOICES, POSITION_ORDER, Announcement, GalleryItem, Match, MatchEvent,
    MatchLineup, Player
)
from club.permissions import is_admin
from club.services import mark_notifications_read, unread_announcements


def paginate(queryset, page, per_page):
    """Page of results; bad page numbers fall back to the first/last page"""
    paginator = Paginator(queryset, per_page)
    try:
        return paginator.page(page)
    except PageNotAnInteger:
        return paginator.page(1)
    except EmptyPage:
        return paginator.page(paginator.num_pages)


def position_sort_key(position):
    try:
        return POSITION_ORDER.index(position)
    except ValueError:
        return len(POSITION_ORDER)


@login_required
def dashboard(request):
    """
    Club overview: squad size, match counts, points, next match and latest news
    """
    matches = Match.objects.select_related('competition')
    upcoming = matches.filter(status='upcoming')
    completed = matches.filter(status='completed')

    total_points = completed.aggregate(total=Sum('points_earned'))['total'] or 0

    context = {
        'stats': {
            'total_players': Player.objects.filter(is_active=True).count(),
            'upcoming_matches': upcoming.count(),
            'matches_played': completed.count(),
            'total_points': total_points,
        },
        'next_match': upcoming.order_by('match_date').first(),
        'recent_announcements': Announcement.objects.filter(is_published=True).order_by('-created_at')[:3],
    }
    return render(request, 'club/dashboard.html', context)


@login_required
def squad(request):
    """Active players grouped by position, goalkeepers first"""
    players = list(Player.objects.filter(is_active=True).order_by('jersey_number'))

    groups = []
    for position, label in POSITION_CHOICES:
        position_players = [p for p in players if p.position == position]
        if position_players:
            groups.append({
                'position': position,
                'label': f"{label}s",
                'players': position_players,
            })

    return render(request, 'club/squad.html', {
        'groups': groups,
        'total_players': len(players),
    })


@login_required
def fixtures(request):
    """
    Visible fixtures: upcoming soonest first, results most recent first
    """
    matches = Match.objects.filter(is_visible=True).select_related('competition')

    upcoming_matches = matches.filter(status__in=['upcoming', 'live']).order_by('match_date')
    completed_matches = matches.filter(status='completed').order_by('-match_date')

    return render(request, 'club/fixtures.html', {
        'upcoming_matches': upcoming_matches,
        'completed_matches': completed_matches,
        'total_matches': matches.count(),
    })


@login_required
def match_detail(request, match_id):
    """Score, lineups per half and events of one match"""
    match = get_object_or_404(Match.objects.select_related('competition'), pk=match_id)
    if not match.is_visible and not is_admin(request.user):
        raise Http404('Match not found')

    lineups = list(MatchLineup.objects.filter(match=match).select_related('player'))
    lineups.sort(key=lambda l: (position_sort_key(l.position_played), l.player.jersey_number))

    lineup_sections = []
    for lineup_type, label in MatchLineup.LINEUP_TYPE_CHOICES:
        entries = [l for l in lineups if l.lineup_type == lineup_type]
        if entries:
            lineup_sections.append({'type': lineup_type, 'label': label, 'entries': entries})

    events = list(MatchEvent.objects.filter(match=match).select_related('player').order_by('minute', 'created_at'))

    context = {
        'match': match,
        'lineup_sections': lineup_sections,
        'events': events,
        'goals': [e for e in events if e.event_type == 'goal'],
        'assists': [e for e in events if e.event_type == 'assist'],
        'yellow_cards': [e for e in events if e.event_type == 'yellow_card'],
        'red_cards': [e for e in events if e.event_type == 'red_card'],
        'substitutions': [e for e in events if e.event_type.startswith('substitution')],
    }
    return render(request, 'club/match_detail.html', context)


@login_required
def news(request):
    announcements = Announcement.objects.filter(is_published=True).order_by('-created_at')
    announcements_page = paginate(announcements, request.GET.get('page', 1), 10)

    return render(request, 'club/news.html', {
        'announcements': announcements_page,
        'total_announcements': announcements_page.paginator.count,
    })


@login_required
def gallery(request):
    images = GalleryItem.objects.filter(is_visible=True).select_related('match').order_by('-created_at')
    return render(request, 'club/gallery.html', {'images': images})


@login_required
def notifications(request):
    """Announcements published since the user last cleared notifications"""
    return render(request, 'club/notifications.html', {
        'announcements': unread_announcements(request.user),
    })


@login_required
@require_POST
def notifications_mark_read(request):
    mark_notifications_read(request.user)
    messages.info(request, 'All notifications cleared.')
    return redirect('club:notifications')


# ============================================================================
# Authentication Views
# ============================================================================

def login_view(request):
    """
    Handle user login (email or username + password)
    """
    # Redirect if already logged in
    if request.user.is_authenticated:
        return redirect('club:dashboard')

    if request.method == 'POST':
        username = (request.POST.get('email') or request.POST.get('username') or '').strip()
        password = request.POST.get('password')
        remember_me = request.POST.get('remember_me')

        user = authenticate(request, username=username.lower(), password=password)
        if user is None and username:
            # Accounts created through the Django admin may use mixed-case usernames
            user = authenticate(request, username=username, password=password)

        if user is not None:
            auth_login(request, user)

            if not remember_me:
                # Session expires when browser closes
                request.session.set_expiry(0)
            else:
                # Session expires in 2 weeks
                request.session.set_expiry(1209600)

            messages.success(request, f'Welcome back, {user.get_username()}!')

            next_url = request.POST.get('next') or request.GET.get('next')
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect('club:dashboard')
        else:
            messages.error(request, 'Invalid email or password.')

    # Pass 'next' parameter to template
    next_url = request.GET.get('next', '')

    return render(request, 'club/login.html', {'next': next_url})


def logout_view(request):
    """
    Handle user logout
    """
    username = request.user.get_username() if request.user.is_authenticated else None
    auth_logout(request)

    if username:
        messages.info(request, f'You have been logged out, {username}.')
    else:
        messages.info(request, 'You have been logged out.')

    return redirect('club:login')
