"""
URL configuration for the club app
"""

from django.urls import path
from django.views.generic import RedirectView
from django.http import JsonResponse
from . import admin_views, api, views

app_name = 'club'

def health_check(request):
    """Simple health check endpoint for the container orchestrator"""
    from django.conf import settings

    return JsonResponse({
        'status': 'healthy',
        'debug': settings.DEBUG,
        'allowed_hosts': settings.ALLOWED_HOSTS,
        'host_header': request.get_host(),
    })

urlpatterns = [
    # Health check
    path('health/', health_check, name='health_check'),

    # Authentication
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),

    # Member pages
    path('', RedirectView.as_view(url='/login/', permanent=False), name='home'),
    path('dashboard/', views.dashboard, name='dashboard'),
    path('squad/', views.squad, name='squad'),
    path('fixtures/', views.fixtures, name='fixtures'),
    path('match/<int:match_id>/', views.match_detail, name='match_detail'),
    path('news/', views.news, name='news'),
    path('gallery/', views.gallery, name='gallery'),
    path('notifications/', views.notifications, name='notifications'),
    path('notifications/mark-read/', views.notifications_mark_read, name='notifications_mark_read'),

    # Admin: players
    path('admin/players/', admin_views.players_manage, name='players_manage'),
    path('admin/players/<int:player_id>/edit/', admin_views.player_edit, name='player_edit'),
    path('admin/players/<int:player_id>/toggle-active/', admin_views.player_toggle_active, name='player_toggle_active'),
    path('admin/players/<int:player_id>/delete/', admin_views.player_delete, name='player_delete'),

    # Admin: matches
    path('admin/matches/', admin_views.matches_manage, name='matches_manage'),
    path('admin/matches/<int:match_id>/toggle-visibility/', admin_views.match_toggle_visibility, name='match_toggle_visibility'),
    path('admin/matches/<int:match_id>/delete/', admin_views.match_delete, name='match_delete'),

    # Admin: match sheet
    path('admin/match/<int:match_id>/', admin_views.match_manage, name='match_manage'),
    path('admin/match/<int:match_id>/print/', admin_views.match_print, name='match_print'),
    path('admin/match/<int:match_id>/lineups/', admin_views.lineup_add, name='lineup_add'),
    path('admin/match/<int:match_id>/lineups/<int:lineup_id>/remove/', admin_views.lineup_remove, name='lineup_remove'),
    path('admin/match/<int:match_id>/events/', admin_views.event_add, name='event_add'),
    path('admin/match/<int:match_id>/events/<int:event_id>/remove/', admin_views.event_remove, name='event_remove'),
    path('admin/match/<int:match_id>/result/', admin_views.match_result, name='match_result'),

    # Admin: announcements
    path('admin/announcements/', admin_views.announcements_manage, name='announcements_manage'),
    path('admin/announcements/<int:announcement_id>/edit/', admin_views.announcement_edit, name='announcement_edit'),
    path('admin/announcements/<int:announcement_id>/toggle-published/', admin_views.announcement_toggle_published, name='announcement_toggle_published'),
    path('admin/announcements/<int:announcement_id>/delete/', admin_views.announcement_delete, name='announcement_delete'),

    # Admin: gallery
    path('admin/gallery/', admin_views.gallery_manage, name='gallery_manage'),
    path('admin/gallery/<int:item_id>/toggle-visibility/', admin_views.gallery_toggle_visibility, name='gallery_toggle_visibility'),
    path('admin/gallery/<int:item_id>/delete/', admin_views.gallery_delete, name='gallery_delete'),

    # Admin: accounts
    path('admin/create-user/', admin_views.user_create, name='user_create'),
    path('admin/manage-users/', admin_views.users_manage, name='users_manage'),
    path('admin/manage-users/<int:user_id>/edit/', admin_views.user_edit, name='user_edit'),
    path('admin/manage-users/<int:user_id>/delete/', admin_views.user_delete, name='user_delete'),
    path('admin/manage-users/<int:user_id>/confirm/<str:action>/', admin_views.user_confirm_password, name='user_confirm_password'),

    # Privileged JSON endpoints
    path('api/bootstrap-admin/', api.bootstrap_admin_view, name='api_bootstrap_admin'),
    path('api/create-user/', api.create_user_view, name='api_create_user'),
]
