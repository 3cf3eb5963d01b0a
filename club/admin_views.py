"""
Administrator pages: squad, fixtures, match sheets, news, gallery and accounts
"""

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from club import reauth
from club.cloudinary import upload_image
from club.exceptions import ImageUploadError, ReauthenticationRequired
from club.forms import (
    AnnouncementForm, ConfirmPasswordForm, CreateUserForm, EditUserForm, EventForm,
    GalleryUploadForm, LineupForm, MatchForm, MatchResultForm, PlayerForm
)
from club.models import (
    POSITION_ORDER, Announcement, GalleryItem, Match, MatchEvent, MatchLineup,
    Player, UserRole
)
from club.permissions import admin_required, get_role
from club.services import (
    AccountError, create_account, delete_match, delete_player, display_name,
    save_match_result, update_account
)

logger = logging.getLogger(__name__)


def _upload(request, file):
    """Upload an image, reporting failures as a flash message"""
    try:
        return upload_image(file)
    except (ImageUploadError, ImproperlyConfigured) as e:
        logger.error("Image upload failed: %s", e)
        messages.error(request, str(e) or 'Failed to upload image.')
        return None


# ============================================================================
# Players
# ============================================================================

@admin_required
def players_manage(request):
    """
    List every player (active or not) and add new ones
    """
    if request.method == 'POST':
        form = PlayerForm(request.POST, request.FILES)
        if form.is_valid():
            player = form.save(commit=False)
            avatar = form.cleaned_data.get('avatar')
            if avatar:
                uploaded = _upload(request, avatar)
                if uploaded is None:
                    return redirect('club:players_manage')
                player.avatar_url = uploaded.secure_url
                player.image_public_id = uploaded.public_id
            player.is_active = True
            player.save()
            logger.info("Player added: %s", player)
            messages.success(request, f'{player.full_name} has been added to the squad.')
            return redirect('club:players_manage')
    else:
        form = PlayerForm()

    players = Player.objects.order_by('jersey_number')
    return render(request, 'club/admin/players.html', {'players': players, 'form': form})


@admin_required
def player_edit(request, player_id):
    player = get_object_or_404(Player, pk=player_id)

    if request.method == 'POST':
        form = PlayerForm(request.POST, request.FILES, instance=player)
        if form.is_valid():
            player = form.save(commit=False)
            avatar = form.cleaned_data.get('avatar')
            if avatar:
                uploaded = _upload(request, avatar)
                if uploaded is None:
                    return redirect('club:player_edit', player_id=player.pk)
                player.avatar_url = uploaded.secure_url
                player.image_public_id = uploaded.public_id
            player.save()
            logger.info("Player updated: %s", player)
            messages.success(request, f'{player.full_name} has been updated successfully.')
            return redirect('club:players_manage')
    else:
        form = PlayerForm(instance=player)

    return render(request, 'club/admin/player_form.html', {'form': form, 'player': player})


@admin_required
@require_POST
def player_toggle_active(request, player_id):
    player = get_object_or_404(Player, pk=player_id)
    player.is_active = not player.is_active
    player.save(update_fields=['is_active', 'updated_at'])

    state = 'activated' if player.is_active else 'deactivated'
    logger.info("Player %s %s", player, state)
    messages.success(request, f'{player.full_name} has been {state}.')
    return redirect('club:players_manage')


@admin_required
def player_delete(request, player_id):
    """GET asks for confirmation, POST deletes the player and their match data"""
    player = get_object_or_404(Player, pk=player_id)

    if request.method == 'POST':
        try:
            removed = delete_player(player)
        except DatabaseError as e:
            logger.exception("Failed to delete player %s", player_id)
            messages.error(request, f'Failed to delete player: {e}')
            return redirect('club:players_manage')

        messages.success(
            request,
            f"{player.full_name} and all associated match data have been permanently removed "
            f"({removed['lineups']} lineup entries, {removed['events']} events)."
        )
        return redirect('club:players_manage')

    return render(request, 'club/admin/confirm_delete.html', {
        'object_label': f'{player.full_name} (#{player.jersey_number}, {player.get_position_display()})',
        'warning': 'This will also remove the player from every lineup and delete their match events.',
        'cancel_url': reverse('club:players_manage'),
    })


# ============================================================================
# Matches
# ============================================================================

@admin_required
def matches_manage(request):
    """
    List all matches (newest first) and schedule new ones
    """
    if request.method == 'POST':
        form = MatchForm(request.POST)
        if form.is_valid():
            match = form.save(commit=False)
            match.status = 'upcoming'
            match.goals_scored = None
            match.goals_conceded = None
            match.points_earned = None
            match.is_visible = True
            match.save()
            logger.info("Match scheduled: %s", match)
            messages.success(request, f'Match against {match.opponent} has been scheduled.')
            return redirect('club:matches_manage')
    else:
        form = MatchForm()

    matches = Match.objects.select_related('competition').order_by('-match_date')
    return render(request, 'club/admin/matches.html', {'matches': matches, 'form': form})


@admin_required
@require_POST
def match_toggle_visibility(request, match_id):
    match = get_object_or_404(Match, pk=match_id)
    match.is_visible = not match.is_visible
    match.save(update_fields=['is_visible', 'updated_at'])

    state = 'visible' if match.is_visible else 'hidden'
    logger.info("Match %s is now %s", match, state)
    messages.success(request, f'Match vs {match.opponent} is now {state} to users.')
    return redirect('club:matches_manage')


@admin_required
def match_delete(request, match_id):
    match = get_object_or_404(Match, pk=match_id)

    if request.method == 'POST':
        try:
            delete_match(match)
        except DatabaseError as e:
            logger.exception("Failed to delete match %s", match_id)
            messages.error(request, f'Failed to delete match: {e}')
            return redirect('club:matches_manage')

        messages.success(
            request,
            f'Match against {match.opponent} and all associated data have been deleted successfully.'
        )
        return redirect('club:matches_manage')

    return render(request, 'club/admin/confirm_delete.html', {
        'object_label': f'the match against {match.opponent} ({match.match_date:%d %b %Y %H:%M})',
        'warning': 'This will also delete all associated lineups and events.',
        'cancel_url': reverse('club:matches_manage'),
    })


# ============================================================================
# Match sheet (lineups, events, result)
# ============================================================================

def _match_sheet_context(match, **forms):
    lineups = list(match.lineups.select_related('player'))
    lineups.sort(key=lambda l: (POSITION_ORDER.index(l.position_played), l.player.jersey_number))

    lineup_sections = [
        {
            'type': lineup_type,
            'label': label,
            'entries': [l for l in lineups if l.lineup_type == lineup_type],
        }
        for lineup_type, label in MatchLineup.LINEUP_TYPE_CHOICES
    ]

    context = {
        'match': match,
        'lineup_sections': lineup_sections,
        'events': match.events.select_related('player').order_by('minute', 'created_at'),
        'lineup_form': LineupForm(match=match),
        'event_form': EventForm(),
        'result_form': MatchResultForm(initial={
            'goals_scored': match.goals_scored or 0,
            'goals_conceded': match.goals_conceded or 0,
            'status': match.status,
        }),
    }
    context.update(forms)
    return context


@admin_required
def match_manage(request, match_id):
    match = get_object_or_404(Match.objects.select_related('competition'), pk=match_id)
    return render(request, 'club/admin/match_manage.html', _match_sheet_context(match))


@admin_required
def match_print(request, match_id):
    """Printable lineup sheet"""
    match = get_object_or_404(Match.objects.select_related('competition'), pk=match_id)
    return render(request, 'club/admin/match_print.html', _match_sheet_context(match))


@admin_required
@require_POST
def lineup_add(request, match_id):
    match = get_object_or_404(Match, pk=match_id)
    form = LineupForm(request.POST, match=match)

    if form.is_valid():
        lineup = form.save(commit=False)
        lineup.match = match
        lineup.save()
        logger.info("Lineup entry added: %s", lineup)
        messages.success(request, 'Player added to lineup.')
        return redirect('club:match_manage', match_id=match.pk)

    return render(
        request,
        'club/admin/match_manage.html',
        _match_sheet_context(match, lineup_form=form),
        status=400,
    )


@admin_required
@require_POST
def lineup_remove(request, match_id, lineup_id):
    lineup = get_object_or_404(MatchLineup, pk=lineup_id, match_id=match_id)
    lineup.delete()
    logger.info("Lineup entry %s removed from match %s", lineup_id, match_id)
    messages.success(request, 'Player removed from lineup.')
    return redirect('club:match_manage', match_id=match_id)


@admin_required
@require_POST
def event_add(request, match_id):
    match = get_object_or_404(Match, pk=match_id)
    form = EventForm(request.POST)

    if form.is_valid():
        event = form.save(commit=False)
        event.match = match
        event.save()
        logger.info("Event recorded: %s", event)
        messages.success(request, 'Event recorded.')
        return redirect('club:match_manage', match_id=match.pk)

    return render(
        request,
        'club/admin/match_manage.html',
        _match_sheet_context(match, event_form=form),
        status=400,
    )


@admin_required
@require_POST
def event_remove(request, match_id, event_id):
    event = get_object_or_404(MatchEvent, pk=event_id, match_id=match_id)
    event.delete()
    logger.info("Event %s removed from match %s", event_id, match_id)
    messages.success(request, 'Event removed.')
    return redirect('club:match_manage', match_id=match_id)


@admin_required
@require_POST
def match_result(request, match_id):
    match = get_object_or_404(Match, pk=match_id)
    form = MatchResultForm(request.POST)

    if form.is_valid():
        save_match_result(
            match,
            form.cleaned_data['goals_scored'],
            form.cleaned_data['goals_conceded'],
            form.cleaned_data['status'],
        )
        messages.success(request, 'Match updated successfully.')
        return redirect('club:match_manage', match_id=match.pk)

    return render(
        request,
        'club/admin/match_manage.html',
        _match_sheet_context(match, result_form=form),
        status=400,
    )


# ============================================================================
# Announcements
# ============================================================================

def _save_announcement(request, form):
    """Apply an uploaded image (which wins over a pasted URL) and save"""
    announcement = form.save(commit=False)
    image = form.cleaned_data.get('image')

    if image:
        uploaded = _upload(request, image)
        if uploaded is None:
            return None
        announcement.image_url = uploaded.secure_url
        announcement.image_public_id = uploaded.public_id
    elif not announcement.image_url:
        announcement.image_public_id = None

    announcement.save()
    return announcement


@admin_required
def announcements_manage(request):
    if request.method == 'POST':
        form = AnnouncementForm(request.POST, request.FILES)
        if form.is_valid():
            announcement = _save_announcement(request, form)
            if announcement is None:
                return redirect('club:announcements_manage')
            logger.info("Announcement posted: %s (published=%s)", announcement, announcement.is_published)
            status = 'published and visible to members' if announcement.is_published else 'saved as draft'
            messages.success(request, f'Announcement posted: {status}.')
            return redirect('club:announcements_manage')
    else:
        form = AnnouncementForm()

    announcements = Announcement.objects.order_by('-created_at')
    return render(request, 'club/admin/announcements.html', {
        'announcements': announcements,
        'form': form,
    })


@admin_required
def announcement_edit(request, announcement_id):
    announcement = get_object_or_404(Announcement, pk=announcement_id)

    if request.method == 'POST':
        form = AnnouncementForm(request.POST, request.FILES, instance=announcement)
        if form.is_valid():
            if _save_announcement(request, form) is None:
                return redirect('club:announcement_edit', announcement_id=announcement.pk)
            logger.info("Announcement updated: %s", announcement)
            messages.success(request, 'Announcement updated.')
            return redirect('club:announcements_manage')
    else:
        form = AnnouncementForm(instance=announcement)

    return render(request, 'club/admin/announcement_form.html', {
        'form': form,
        'announcement': announcement,
    })


@admin_required
@require_POST
def announcement_toggle_published(request, announcement_id):
    announcement = get_object_or_404(Announcement, pk=announcement_id)
    announcement.is_published = not announcement.is_published
    announcement.save(update_fields=['is_published', 'updated_at'])

    logger.info("Announcement %s published=%s", announcement.pk, announcement.is_published)
    if announcement.is_published:
        messages.success(request, 'Announcement published and visible to members.')
    else:
        messages.success(request, 'Announcement unpublished and hidden from members.')
    return redirect('club:announcements_manage')


@admin_required
@require_POST
def announcement_delete(request, announcement_id):
    announcement = get_object_or_404(Announcement, pk=announcement_id)
    announcement.delete()
    logger.info("Announcement %s deleted", announcement_id)
    messages.success(request, 'Announcement deleted.')
    return redirect('club:announcements_manage')


# ============================================================================
# Gallery
# ============================================================================

@admin_required
def gallery_manage(request):
    if request.method == 'POST':
        form = GalleryUploadForm(request.POST, request.FILES)
        if form.is_valid():
            uploaded = _upload(request, form.cleaned_data['image'])
            if uploaded is None:
                return redirect('club:gallery_manage')

            item = form.save(commit=False)
            item.image_url = uploaded.secure_url
            item.image_public_id = uploaded.public_id
            item.is_visible = True
            item.save()
            logger.info("Photo added to gallery: %s", item.image_public_id)
            messages.success(request, 'The photo has been added to the gallery.')
            return redirect('club:gallery_manage')
        for error in form.errors.get('image', []):
            messages.error(request, error)
    else:
        form = GalleryUploadForm()

    images = GalleryItem.objects.select_related('match').order_by('-created_at')
    return render(request, 'club/admin/gallery.html', {'images': images, 'form': form})


@admin_required
@require_POST
def gallery_toggle_visibility(request, item_id):
    item = get_object_or_404(GalleryItem, pk=item_id)
    item.is_visible = not item.is_visible
    item.save(update_fields=['is_visible'])

    state = 'visible' if item.is_visible else 'hidden'
    messages.success(request, f'Photo is now {state} to users.')
    return redirect('club:gallery_manage')


@admin_required
@require_POST
def gallery_delete(request, item_id):
    item = get_object_or_404(GalleryItem, pk=item_id)
    item.delete()
    logger.info("Gallery item %s deleted", item_id)
    messages.success(request, 'The photo has been removed from the gallery.')
    return redirect('club:gallery_manage')


# ============================================================================
# Accounts
# ============================================================================

@admin_required
def user_create(request):
    """
    Create an account; an administrator account needs the acting admin's password
    """
    created_user = None

    if request.method == 'POST':
        form = CreateUserForm(request.POST, request=request)
        if form.is_valid():
            data = form.cleaned_data
            try:
                user = create_account(data['email'], data['password'], data['full_name'], data['role'])
            except AccountError as e:
                messages.error(request, str(e))
            else:
                created_user = {
                    'email': user.email,
                    'full_name': data['full_name'],
                    'role': data['role'],
                }
                messages.success(request, f"{data['full_name']} has been added as a {data['role']}.")
                form = CreateUserForm(request=request)
    else:
        form = CreateUserForm(request=request)

    return render(request, 'club/admin/user_create.html', {
        'form': form,
        'created_user': created_user,
    })


@admin_required
def users_manage(request):
    User = get_user_model()
    accounts = []
    for user in User.objects.select_related('profile', 'club_role').order_by('-date_joined'):
        accounts.append({
            'id': user.pk,
            'email': user.email or 'N/A',
            'full_name': display_name(user),
            'role': get_role(user),
            'date_joined': user.date_joined,
            'last_login': user.last_login,
            'is_self': user.pk == request.user.pk,
        })

    return render(request, 'club/admin/users.html', {'accounts': accounts})


def _check_reauth(request, action, user):
    """Changes to administrator accounts need a recent password confirmation"""
    if get_role(user) == UserRole.ADMIN:
        reauth.require(request, action, user.pk)


@admin_required
def user_confirm_password(request, user_id, action):
    """Password re-confirmation before editing or deleting an administrator"""
    User = get_user_model()
    target = get_object_or_404(User, pk=user_id)
    if action not in ('edit', 'delete'):
        return redirect('club:users_manage')

    if request.method == 'POST':
        form = ConfirmPasswordForm(request.POST)
        if form.is_valid():
            if reauth.verify_password(request, form.cleaned_data['current_password']):
                reauth.grant(request, action, target.pk)
                messages.success(request, f'Password verified. You can now {action} the admin user.')
                return redirect(f'club:user_{action}', user_id=target.pk)
            messages.error(request, 'The current password you entered is incorrect.')
        else:
            messages.error(request, 'Please enter your current password.')
    else:
        form = ConfirmPasswordForm()

    return render(request, 'club/admin/confirm_password.html', {
        'form': form,
        'target_name': display_name(target),
        'action': action,
    })


@admin_required
def user_edit(request, user_id):
    User = get_user_model()
    target = get_object_or_404(User, pk=user_id)

    try:
        _check_reauth(request, 'edit', target)
    except ReauthenticationRequired as e:
        return redirect('club:user_confirm_password', user_id=e.target, action=e.action)

    if request.method == 'POST':
        form = EditUserForm(request.POST, user=target)
        if form.is_valid():
            try:
                update_account(
                    target,
                    form.cleaned_data['full_name'],
                    form.cleaned_data['email'],
                    form.cleaned_data.get('role'),
                )
            except AccountError as e:
                messages.error(request, str(e))
            else:
                reauth.consume(request, 'edit', target.pk)
                messages.success(request, f"{form.cleaned_data['full_name']} has been updated successfully.")
                return redirect('club:users_manage')
    else:
        form = EditUserForm(user=target, initial={
            'full_name': display_name(target),
            'email': target.email,
            'role': get_role(target),
        })

    return render(request, 'club/admin/user_form.html', {'form': form, 'target': target})


@admin_required
def user_delete(request, user_id):
    User = get_user_model()
    target = get_object_or_404(User, pk=user_id)

    if target.pk == request.user.pk:
        messages.error(request, 'You cannot delete your own account.')
        return redirect('club:users_manage')

    try:
        _check_reauth(request, 'delete', target)
    except ReauthenticationRequired as e:
        return redirect('club:user_confirm_password', user_id=e.target, action=e.action)

    name = display_name(target)
    if request.method == 'POST':
        target.delete()
        reauth.consume(request, 'delete', user_id)
        logger.info("Account %s deleted by %s", user_id, request.user.get_username())
        messages.success(request, f'{name} has been permanently removed from the system.')
        return redirect('club:users_manage')

    return render(request, 'club/admin/confirm_delete.html', {
        'object_label': f'{name} ({target.email or target.get_username()}, {get_role(target)})',
        'warning': 'This will permanently remove the user from the system.',
        'cancel_url': reverse('club:users_manage'),
    })
