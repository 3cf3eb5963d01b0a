from django.contrib import admin
from django.utils.html import format_html
from .models import (
    Profile, UserRole, Player, Competition, KitColor, Match, MatchLineup,
    MatchEvent, Announcement, GalleryItem
)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'user', 'notifications_seen_at', 'created_at')
    search_fields = ('full_name', 'user__email', 'user__username')
    list_select_related = ('user',)
    ordering = ('full_name',)


@admin.register(UserRole)
class UserRoleAdmin(admin.ModelAdmin):
    list_display = ('user', 'role', 'created_at')
    list_filter = ('role',)
    search_fields = ('user__email', 'user__username')
    list_select_related = ('user',)


@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    list_display = ('jersey_number', 'full_name', 'position', 'email', 'is_active', 'get_avatar')
    list_display_links = ('jersey_number', 'full_name')
    list_filter = ('position', 'is_active')
    search_fields = ('full_name', 'email')
    ordering = ('jersey_number',)

    fieldsets = (
        ('Player', {
            'fields': ('full_name', 'position', 'jersey_number', 'email', 'is_active')
        }),
        ('Account & Avatar', {
            'fields': ('user', 'avatar_url', 'image_public_id'),
            'classes': ('collapse',)
        }),
    )

    def get_avatar(self, obj):
        if obj.avatar_url:
            return format_html('<img src="{}" style="height: 32px; border-radius: 50%;">', obj.avatar_url)
        return '-'
    get_avatar.short_description = 'Avatar'


@admin.register(Competition)
class CompetitionAdmin(admin.ModelAdmin):
    list_display = ('name', 'season', 'created_at')
    search_fields = ('name', 'season')
    ordering = ('name',)


@admin.register(KitColor)
class KitColorAdmin(admin.ModelAdmin):
    list_display = ('name', 'get_swatch', 'primary_color', 'secondary_color', 'is_active')
    list_filter = ('is_active',)

    def get_swatch(self, obj):
        return format_html(
            '<span style="display:inline-block;width:16px;height:16px;border:1px solid #ccc;background:{};"></span>',
            obj.primary_color
        )
    get_swatch.short_description = 'Colour'


class MatchLineupInline(admin.TabularInline):
    model = MatchLineup
    extra = 0
    autocomplete_fields = ('player',)


class MatchEventInline(admin.TabularInline):
    model = MatchEvent
    extra = 0
    autocomplete_fields = ('player',)


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = (
        'opponent',
        'match_date',
        'competition',
        'status',
        'get_score',
        'get_result',
        'points_earned',
        'is_visible',
    )
    list_filter = (
        'status',
        'is_visible',
        'competition',
        ('match_date', admin.DateFieldListFilter),
    )
    search_fields = ('opponent', 'stadium')
    date_hierarchy = 'match_date'
    list_select_related = ('competition',)
    ordering = ('-match_date',)
    inlines = (MatchLineupInline, MatchEventInline)

    fieldsets = (
        ('Match Information', {
            'fields': ('opponent', 'match_date', 'stadium', 'competition', 'kit_color', 'status', 'is_visible')
        }),
        ('Score', {
            'fields': (('goals_scored', 'goals_conceded'), 'points_earned')
        }),
    )

    def get_score(self, obj):
        if obj.goals_scored is not None and obj.goals_conceded is not None:
            return f"{obj.goals_scored} - {obj.goals_conceded}"
        return '-'
    get_score.short_description = 'Score'

    def get_result(self, obj):
        result = obj.result
        if result is None:
            return '-'
        colors = {'W': 'green', 'D': 'orange', 'L': 'red'}
        return format_html('<strong style="color: {};">{}</strong>', colors[result], result)
    get_result.short_description = 'Result'


@admin.register(MatchLineup)
class MatchLineupAdmin(admin.ModelAdmin):
    list_display = ('match', 'player', 'lineup_type', 'position_played')
    list_filter = ('lineup_type', 'position_played')
    search_fields = ('player__full_name', 'match__opponent')
    list_select_related = ('match', 'player')


@admin.register(MatchEvent)
class MatchEventAdmin(admin.ModelAdmin):
    list_display = ('match', 'minute', 'event_type', 'player')
    list_filter = ('event_type',)
    search_fields = ('player__full_name', 'match__opponent')
    list_select_related = ('match', 'player')


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ('title', 'is_published', 'created_at', 'updated_at')
    list_filter = ('is_published',)
    search_fields = ('title', 'content')
    date_hierarchy = 'created_at'
    ordering = ('-created_at',)


@admin.register(GalleryItem)
class GalleryItemAdmin(admin.ModelAdmin):
    list_display = ('get_thumbnail', 'title', 'match', 'is_visible', 'created_at')
    list_filter = ('is_visible',)
    search_fields = ('title',)
    list_select_related = ('match',)
    ordering = ('-created_at',)

    def get_thumbnail(self, obj):
        return format_html('<img src="{}" style="height: 48px;">', obj.image_url)
    get_thumbnail.short_description = 'Photo'
