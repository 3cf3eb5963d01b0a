"""
Django models for the club portal
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


POSITION_CHOICES = [
    ('goalkeeper', 'Goalkeeper'),
    ('defender', 'Defender'),
    ('midfielder', 'Midfielder'),
    ('forward', 'Forward'),
]

# Display order used by the squad page and lineups
POSITION_ORDER = [value for value, _ in POSITION_CHOICES]


class Profile(models.Model):
    """Account profile (display name, avatar)"""
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile'
    )
    full_name = models.CharField(max_length=200)
    avatar_url = models.URLField(max_length=500, null=True, blank=True)
    notifications_seen_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text='Announcements published after this moment count as unread'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'profiles'
        verbose_name = 'Profile'
        verbose_name_plural = 'Profiles'

    def __str__(self):
        return self.full_name


class UserRole(models.Model):
    """Access role of an account"""
    ADMIN = 'admin'
    PLAYER = 'player'
    USER = 'user'
    ROLE_CHOICES = [
        (ADMIN, 'Administrator'),
        (PLAYER, 'Player'),
        (USER, 'User'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='club_role'
    )
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=USER, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'user_roles'
        verbose_name = 'User Role'
        verbose_name_plural = 'User Roles'

    def __str__(self):
        return f"{self.user} ({self.role})"


class Player(models.Model):
    """Squad member"""
    full_name = models.CharField(max_length=200)
    position = models.CharField(max_length=20, choices=POSITION_CHOICES)
    jersey_number = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(99)]
    )
    email = models.EmailField(null=True, blank=True)

    # Hosted avatar
    avatar_url = models.URLField(max_length=500, null=True, blank=True)
    image_public_id = models.CharField(max_length=255, null=True, blank=True)

    # Linked account (optional)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='players'
    )
    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'players'
        verbose_name = 'Player'
        verbose_name_plural = 'Players'
        ordering = ['jersey_number']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(jersey_number__gte=1) & models.Q(jersey_number__lte=99),
                name='player_jersey_number_range',
            ),
        ]

    def __str__(self):
        return f"#{self.jersey_number} {self.full_name}"

    @property
    def initials(self):
        """First letters of the first two words of the name"""
        return ''.join(part[0] for part in self.full_name.split()[:2]).upper()


class Competition(models.Model):
    """Competition a match belongs to (league, cup, friendly...)"""
    name = models.CharField(max_length=200)
    season = models.CharField(max_length=20, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'competitions'
        verbose_name = 'Competition'
        verbose_name_plural = 'Competitions'
        ordering = ['name']

    def __str__(self):
        if self.season:
            return f"{self.name} ({self.season})"
        return self.name


class KitColor(models.Model):
    """Named kit, offered as a suggestion when scheduling a match"""
    name = models.CharField(max_length=100)
    primary_color = models.CharField(max_length=20)
    secondary_color = models.CharField(max_length=20, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'kit_colors'
        verbose_name = 'Kit Color'
        verbose_name_plural = 'Kit Colors'
        ordering = ['name']

    def __str__(self):
        return self.name


class Match(models.Model):
    """Club fixture against a single opponent"""
    STATUS_CHOICES = [
        ('upcoming', 'Upcoming'),
        ('live', 'Live'),
        ('completed', 'Completed'),
    ]

    opponent = models.CharField(max_length=200)
    match_date = models.DateTimeField(db_index=True)
    stadium = models.CharField(max_length=300, null=True, blank=True)
    competition = models.ForeignKey(
        Competition,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='matches'
    )
    kit_color = models.CharField(max_length=100, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='upcoming', db_index=True)

    # Result
    goals_scored = models.PositiveSmallIntegerField(null=True, blank=True)
    goals_conceded = models.PositiveSmallIntegerField(null=True, blank=True)
    points_earned = models.PositiveSmallIntegerField(null=True, blank=True)

    is_visible = models.BooleanField(default=True, help_text='Hidden matches are only shown to admins')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'matches'
        verbose_name = 'Match'
        verbose_name_plural = 'Matches'
        ordering = ['-match_date']
        indexes = [
            models.Index(fields=['status', 'match_date'], name='match_status_date_idx'),
        ]

    def __str__(self):
        return f"vs {self.opponent} ({self.match_date.date()})"

    @staticmethod
    def points_for(goals_scored, goals_conceded):
        """3 for a win, 1 for a draw, 0 for a loss"""
        if goals_scored > goals_conceded:
            return 3
        if goals_scored == goals_conceded:
            return 1
        return 0

    @property
    def is_completed(self):
        return self.status == 'completed'

    @property
    def result(self):
        """W / D / L for completed matches, None otherwise"""
        if not self.is_completed:
            return None
        scored = self.goals_scored or 0
        conceded = self.goals_conceded or 0
        if scored > conceded:
            return 'W'
        elif scored < conceded:
            return 'L'
        return 'D'


class MatchLineup(models.Model):
    """Player selected for one part of a match"""
    LINEUP_TYPE_CHOICES = [
        ('first_half', 'First Half'),
        ('second_half', 'Second Half'),
        ('full_time', 'Full Time'),
    ]

    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name='lineups')
    player = models.ForeignKey(Player, on_delete=models.CASCADE, related_name='lineups')
    lineup_type = models.CharField(max_length=20, choices=LINEUP_TYPE_CHOICES)
    position_played = models.CharField(max_length=20, choices=POSITION_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'match_lineups'
        verbose_name = 'Match Lineup'
        verbose_name_plural = 'Match Lineups'
        constraints = [
            models.UniqueConstraint(
                fields=['match', 'player', 'lineup_type'],
                name='unique_lineup_entry',
            ),
        ]

    def __str__(self):
        return f"{self.match} - {self.lineup_type}: {self.player.full_name}"


class MatchEvent(models.Model):
    """Goal, assist, card or substitution recorded for a player"""
    EVENT_TYPE_CHOICES = [
        ('goal', 'Goal'),
        ('assist', 'Assist'),
        ('yellow_card', 'Yellow Card'),
        ('red_card', 'Red Card'),
        ('substitution_in', 'Substitution In'),
        ('substitution_out', 'Substitution Out'),
    ]

    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name='events')
    player = models.ForeignKey(Player, on_delete=models.CASCADE, related_name='events')
    event_type = models.CharField(max_length=20, choices=EVENT_TYPE_CHOICES)
    minute = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MaxValueValidator(130)],
        help_text='Minute of the event'
    )
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'match_events'
        verbose_name = 'Match Event'
        verbose_name_plural = 'Match Events'
        ordering = ['minute', 'created_at']
        indexes = [
            models.Index(fields=['match', 'event_type'], name='match_event_type_idx'),
        ]

    def __str__(self):
        minute = f"{self.minute}'" if self.minute is not None else '-'
        return f"{self.match} - {minute} {self.event_type}: {self.player.full_name}"


class Announcement(models.Model):
    """News item shown to members once published"""
    title = models.CharField(max_length=255)
    content = models.TextField()
    image_url = models.URLField(max_length=500, null=True, blank=True)
    image_public_id = models.CharField(max_length=255, null=True, blank=True)
    is_published = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'announcements'
        verbose_name = 'Announcement'
        verbose_name_plural = 'Announcements'
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class GalleryItem(models.Model):
    """Photo in the club gallery"""
    title = models.CharField(max_length=255, null=True, blank=True)
    image_url = models.URLField(max_length=500)
    image_public_id = models.CharField(max_length=255, null=True, blank=True)
    match = models.ForeignKey(
        Match,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='photos'
    )
    is_visible = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'gallery'
        verbose_name = 'Gallery Item'
        verbose_name_plural = 'Gallery Items'
        ordering = ['-created_at']

    def __str__(self):
        return self.title or self.image_url
