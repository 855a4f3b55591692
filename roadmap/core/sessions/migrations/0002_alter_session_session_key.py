from django.db import migrations, models


class Migration(migrations.Migration):
    """Widen the session key to 255 characters.

    Reversing shortens it back to 64; sessions with longer keys must be
    cleared first.
    """

    dependencies = [
        ("roadmap_sessions", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="session",
            name="session_key",
            field=models.CharField(max_length=255, primary_key=True, serialize=False, verbose_name="session key"),
        ),
    ]
