from django.db import migrations

IDENTIFIER_SCHEMES = (
    ("shibboleth", "Institutional Sign In (Shibboleth)", ""),
    ("ror", "Research Organization Registry (ROR)", "https://ror.org/"),
    ("fundref", "Crossref Funder Registry (FundRef)", "https://doi.org/10.13039/"),
)


def create_identifier_schemes(apps, schema_editor):
    """Ensure that IdentifierScheme has the schemes orgs are identified by."""
    IdentifierScheme = apps.get_model("org", "IdentifierScheme")
    for name, description, prefix in IDENTIFIER_SCHEMES:
        IdentifierScheme.objects.get_or_create(
            name=name,
            defaults={"description": description, "identifier_prefix": prefix, "for_orgs": True},
        )


class Migration(migrations.Migration):
    dependencies = [
        ("org", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_identifier_schemes, migrations.RunPython.noop),
    ]
