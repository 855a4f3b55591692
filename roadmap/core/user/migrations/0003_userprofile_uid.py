from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("user", "0002_userprofile_provider"),
    ]

    operations = [
        migrations.AddField(
            model_name="userprofile",
            name="uid",
            field=models.CharField(blank=True, max_length=255, null=True),
        ),
    ]
