from django.db import migrations

from club.defaults import DEFAULT_COMPETITIONS, DEFAULT_KIT_COLORS


def seed_defaults(apps, schema_editor):
    Competition = apps.get_model('club', 'Competition')
    KitColor = apps.get_model('club', 'KitColor')

    for name in DEFAULT_COMPETITIONS:
        Competition.objects.get_or_create(name=name)

    for name, primary, secondary in DEFAULT_KIT_COLORS:
        KitColor.objects.get_or_create(
            name=name,
            defaults={'primary_color': primary, 'secondary_color': secondary},
        )


class Migration(migrations.Migration):

    dependencies = [
        ('club', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_defaults, migrations.RunPython.noop),
    ]
