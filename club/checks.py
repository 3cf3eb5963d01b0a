from django.conf import settings
from django.core.checks import Warning, register


@register()
def cloudinary_configured(app_configs, **kwargs):
    """Image uploads fail at request time without these settings"""
    missing = [
        name for name in ('CLOUDINARY_CLOUD_NAME', 'CLOUDINARY_UPLOAD_PRESET')
        if not getattr(settings, name, '')
    ]
    if not missing:
        return []
    return [
        Warning(
            f"{', '.join(missing)} not set; avatar, news and gallery uploads will be rejected.",
            hint='Set them in the environment or the .env file.',
            id='club.W001',
        )
    ]
