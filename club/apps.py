from django.apps import AppConfig


class ClubConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'club'
    verbose_name = 'Club'

    def ready(self):
        from club import checks  # noqa: F401
