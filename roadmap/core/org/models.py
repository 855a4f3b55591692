# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from enum import IntFlag

from django.db import models
from model_utils.models import TimeStampedModel
from simple_history.models import HistoricalRecords


def default_links():
    return {"org": []}


class OrgType(IntFlag):
    """Bit flags stored in Org.org_type. An org may be several at once."""

    INSTITUTION = 1
    FUNDER = 2
    ORGANISATION = 4
    RESEARCH_INSTITUTE = 8
    PROJECT = 16
    SCHOOL = 32

    @classmethod
    def choices(cls):
        return [(member.value, member.name.replace("_", " ").capitalize()) for member in cls]


class Language(models.Model):
    """A language an org's users are served in.

    Attributes:
        name (str): display name, e.g. English (GB)
        abbreviation (str): locale code, e.g. en-GB
        default_language (bool): used when an org has no language set
    """

    class LanguageManager(models.Manager):
        def get_by_natural_key(self, abbreviation):
            return self.get(abbreviation=abbreviation)

    name = models.CharField(max_length=64)
    abbreviation = models.CharField(max_length=16, unique=True)
    default_language = models.BooleanField(default=False)
    objects = LanguageManager()

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name

    def natural_key(self):
        return [self.abbreviation]


class Org(TimeStampedModel):
    """An institution, funder or other organisation administered in Roadmap.

    Attributes:
        name (str): unique display name
        abbreviation (str): short name
        contact_email (str): address users are told to contact
        contact_name (str): name shown next to contact_email
        logo (File): optional uploaded logo
        links (dict): {"org": [{"link": url, "text": label}, ...]}
        org_type (int): OrgType bit flags
        managed (bool): the org is centrally managed by super admins
        feedback_enabled (bool): users may request feedback on plans
        feedback_msg (str): email text sent when feedback is requested
        language (Language): language the org's users are served in
    """

    name = models.CharField(max_length=255, unique=True)
    abbreviation = models.CharField(max_length=64, blank=True)
    contact_email = models.EmailField(max_length=255, blank=True)
    contact_name = models.CharField(max_length=255, blank=True)
    logo = models.FileField(upload_to="logos/", blank=True)
    links = models.JSONField(default=default_links, blank=True)
    org_type = models.PositiveIntegerField(default=0)
    managed = models.BooleanField(default=False)
    feedback_enabled = models.BooleanField(default=False)
    feedback_msg = models.TextField(blank=True)
    language = models.ForeignKey(Language, on_delete=models.SET_NULL, null=True, blank=True)
    history = HistoricalRecords()

    class Meta:
        ordering = ("name",)
        verbose_name = "organisation"
        permissions = (("can_super_admin", "Can administer all organisations"),)

    def __str__(self):
        return self.name

    def identifier_for_scheme(self, scheme):
        """Return this org's identifier for scheme, or None.

        An org holds at most one identifier per scheme.
        """
        if self.pk is None:
            return None
        return self.identifiers.filter(identifier_scheme=scheme).first()

    def has_org_type(self, org_type):
        return bool(self.org_type & org_type)

    @property
    def is_institution(self):
        return self.has_org_type(OrgType.INSTITUTION)

    @property
    def is_funder(self):
        return self.has_org_type(OrgType.FUNDER)

    @property
    def is_organisation(self):
        return self.has_org_type(OrgType.ORGANISATION)

    @property
    def org_type_names(self):
        return [label for value, label in OrgType.choices() if self.org_type & value]


class OrgTracker(models.Model):
    """Analytics tracker code for an org's pages."""

    org = models.OneToOneField(Org, on_delete=models.CASCADE, related_name="tracker")
    code = models.CharField(max_length=64, blank=True)

    def __str__(self):
        return "{}: {}".format(self.org, self.code)


class IdentifierScheme(models.Model):
    """A namespace for externally issued identifiers, e.g. shibboleth or ror.

    Attributes:
        name (str): unique lower case name
        description (str): human readable name
        identifier_prefix (str): prepended to values when building links
        active (bool): inactive schemes are ignored by the org lookup
        for_orgs (bool): the scheme identifies orgs
    """

    class IdentifierSchemeManager(models.Manager):
        def get_by_natural_key(self, name):
            return self.get(name=name)

        def by_name(self, name):
            return self.filter(name__iexact=name)

    name = models.CharField(max_length=64, unique=True)
    description = models.CharField(max_length=255, blank=True)
    identifier_prefix = models.CharField(max_length=255, blank=True)
    active = models.BooleanField(default=True)
    for_orgs = models.BooleanField(default=True)
    objects = IdentifierSchemeManager()

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name

    def natural_key(self):
        return [self.name]

    def save(self, *args, **kwargs):
        self.name = self.name.lower()
        super().save(*args, **kwargs)


class Identifier(TimeStampedModel):
    """An org's identifier within one IdentifierScheme.

    Attributes:
        org (Org): the org identified
        identifier_scheme (IdentifierScheme): namespace of value
        value (str): the identifier itself, e.g. a Shibboleth entity id
    """

    class IdentifierManager(models.Manager):
        def by_scheme_name(self, name):
            return self.filter(identifier_scheme__name__iexact=name)

    org = models.ForeignKey(Org, on_delete=models.CASCADE, related_name="identifiers")
    identifier_scheme = models.ForeignKey(IdentifierScheme, on_delete=models.PROTECT)
    value = models.CharField(max_length=255)
    objects = IdentifierManager()
    history = HistoricalRecords()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["org", "identifier_scheme"], name="unique_identifier_per_org_scheme"),
        ]

    def __str__(self):
        return "{}:{}".format(self.identifier_scheme, self.value)

    @property
    def is_blank(self):
        return not (self.value or "").strip()
