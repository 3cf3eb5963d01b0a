"""
Forms for the administrator pages
"""

from datetime import datetime

from django import forms
from django.utils import timezone

from club import reauth
from club.models import (
    Announcement, Competition, GalleryItem, KitColor, Match,
    MatchEvent, MatchLineup, Player, UserRole
)
from club.services import MIN_PASSWORD_LENGTH, email_taken

IMAGE_WIDGET = forms.ClearableFileInput(attrs={'accept': 'image/*', 'class': 'form-control'})


class PlayerForm(forms.ModelForm):
    avatar = forms.FileField(required=False, widget=IMAGE_WIDGET)

    class Meta:
        model = Player
        fields = ('full_name', 'position', 'jersey_number', 'email')
        widgets = {
            'jersey_number': forms.NumberInput(attrs={'min': 1, 'max': 99}),
        }

    def clean_full_name(self):
        full_name = self.cleaned_data['full_name'].strip()
        if not full_name:
            raise forms.ValidationError('Name cannot be empty.')
        return full_name


class MatchForm(forms.ModelForm):
    """Schedule a match; date and kick-off time are entered separately"""
    date = forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}))
    time = forms.TimeField(widget=forms.TimeInput(attrs={'type': 'time'}))

    class Meta:
        model = Match
        fields = ('opponent', 'stadium', 'competition', 'kit_color')
        widgets = {
            'kit_color': forms.TextInput(attrs={'list': 'kit-colors'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['competition'].queryset = Competition.objects.order_by('name')
        self.kit_suggestions = KitColor.objects.filter(is_active=True)

    def clean_opponent(self):
        opponent = self.cleaned_data['opponent'].strip()
        if not opponent:
            raise forms.ValidationError('Opponent cannot be empty.')
        return opponent

    def save(self, commit=True):
        match = super().save(commit=False)
        naive = datetime.combine(self.cleaned_data['date'], self.cleaned_data['time'])
        match.match_date = timezone.make_aware(naive)
        match.stadium = (match.stadium or '').strip() or None
        match.kit_color = (match.kit_color or '').strip() or None
        if commit:
            match.save()
        return match


class LineupForm(forms.ModelForm):
    class Meta:
        model = MatchLineup
        fields = ('player', 'lineup_type', 'position_played')

    def __init__(self, *args, match=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.match = match
        self.fields['player'].queryset = Player.objects.filter(is_active=True).order_by('jersey_number')
        self.fields['position_played'].initial = 'midfielder'

    def clean(self):
        cleaned_data = super().clean()
        player = cleaned_data.get('player')
        lineup_type = cleaned_data.get('lineup_type')
        if self.match and player and lineup_type:
            duplicate = MatchLineup.objects.filter(
                match=self.match, player=player, lineup_type=lineup_type
            ).exists()
            if duplicate:
                raise forms.ValidationError(
                    f"{player.full_name} is already in the {lineup_type.replace('_', ' ')} lineup."
                )
        return cleaned_data


class EventForm(forms.ModelForm):
    class Meta:
        model = MatchEvent
        fields = ('player', 'event_type', 'minute', 'notes')
        widgets = {
            'minute': forms.NumberInput(attrs={'min': 0, 'max': 130}),
            'notes': forms.TextInput(),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['player'].queryset = Player.objects.filter(is_active=True).order_by('jersey_number')


class MatchResultForm(forms.Form):
    goals_scored = forms.IntegerField(min_value=0, initial=0)
    goals_conceded = forms.IntegerField(min_value=0, initial=0)
    status = forms.ChoiceField(choices=Match.STATUS_CHOICES)


class AnnouncementForm(forms.ModelForm):
    image = forms.FileField(required=False, widget=IMAGE_WIDGET)

    class Meta:
        model = Announcement
        fields = ('title', 'content', 'image_url', 'is_published')
        widgets = {
            'content': forms.Textarea(attrs={'rows': 6}),
        }

    def clean_title(self):
        title = self.cleaned_data['title'].strip()
        if not title:
            raise forms.ValidationError('Title cannot be empty.')
        return title

    def clean_content(self):
        return self.cleaned_data['content'].strip()


class GalleryUploadForm(forms.ModelForm):
    image = forms.FileField(widget=IMAGE_WIDGET, error_messages={
        'required': 'Please select an image to upload.',
    })

    class Meta:
        model = GalleryItem
        fields = ('title', 'match')

    def clean_title(self):
        return (self.cleaned_data.get('title') or '').strip() or None


class CreateUserForm(forms.Form):
    """
    New account created by an administrator

    Creating another administrator needs the acting admin's own password.
    """
    full_name = forms.CharField(max_length=200)
    email = forms.EmailField()
    password = forms.CharField(min_length=MIN_PASSWORD_LENGTH, widget=forms.PasswordInput)
    role = forms.ChoiceField(choices=UserRole.ROLE_CHOICES, initial=UserRole.USER)
    current_password = forms.CharField(
        required=False,
        widget=forms.PasswordInput,
        help_text='Required when creating an administrator'
    )

    def __init__(self, *args, request=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.request = request

    def clean_full_name(self):
        full_name = self.cleaned_data['full_name'].strip()
        if not full_name:
            raise forms.ValidationError('Name cannot be empty.')
        return full_name

    def clean_email(self):
        email = self.cleaned_data['email'].strip().lower()
        if email_taken(email):
            raise forms.ValidationError('This email address is already registered.')
        return email

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('role') == UserRole.ADMIN:
            current_password = cleaned_data.get('current_password')
            if not current_password:
                self.add_error('current_password', 'Please enter your current password.')
            elif not reauth.verify_password(self.request, current_password):
                self.add_error('current_password', 'The current password you entered is incorrect.')
        return cleaned_data


class EditUserForm(forms.Form):
    full_name = forms.CharField(max_length=200)
    email = forms.EmailField()
    role = forms.ChoiceField(choices=UserRole.ROLE_CHOICES)

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user = user
        if user is not None and user.is_superuser:
            # Superusers are administrators whatever their role row says
            del self.fields['role']

    def clean_full_name(self):
        full_name = self.cleaned_data['full_name'].strip()
        if not full_name:
            raise forms.ValidationError('Name cannot be empty.')
        return full_name

    def clean_email(self):
        email = self.cleaned_data['email'].strip().lower()
        if email_taken(email, exclude_user=self.user):
            raise forms.ValidationError('This email address is already registered.')
        return email


class ConfirmPasswordForm(forms.Form):
    current_password = forms.CharField(
        widget=forms.PasswordInput,
        error_messages={'required': 'Please enter your current password.'}
    )
