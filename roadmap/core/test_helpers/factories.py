# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import factory
from django.contrib.auth.models import User
from factory import SubFactory
from factory.django import DjangoModelFactory
from faker import Faker
from faker.providers import BaseProvider

from roadmap.core.org.models import Identifier, IdentifierScheme, Language, Org
from roadmap.core.user.models import UserProfile

fake = Faker()


class RoadmapProvider(BaseProvider):
    def org_name(self):
        return "University of {}".format(fake.unique.city())

    def entity_id(self):
        return "https://idp.{}/idp/shibboleth".format(fake.unique.domain_name())


factory.Faker.add_provider(RoadmapProvider)


### User factories ###


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ("username",)

    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    username = factory.Sequence(lambda n: "user{}".format(n))
    email = factory.LazyAttribute(lambda o: "%s@example.com" % o.username)


class UserProfileFactory(DjangoModelFactory):
    class Meta:
        model = UserProfile
        django_get_or_create = ("user",)

    user = SubFactory(UserFactory)


### Org factories ###


class LanguageFactory(DjangoModelFactory):
    class Meta:
        model = Language
        django_get_or_create = ("abbreviation",)

    name = "English (GB)"
    abbreviation = "en-GB"
    default_language = True


class OrgFactory(DjangoModelFactory):
    class Meta:
        model = Org
        django_get_or_create = ("name",)

    name = factory.Faker("org_name")
    abbreviation = factory.LazyAttribute(lambda o: "".join(word[0] for word in o.name.split()).upper())
    contact_email = factory.Faker("email")
    contact_name = factory.Faker("name")


class IdentifierSchemeFactory(DjangoModelFactory):
    class Meta:
        model = IdentifierScheme
        django_get_or_create = ("name",)

    name = "shibboleth"
    description = factory.LazyAttribute(lambda o: o.name.capitalize())


class IdentifierFactory(DjangoModelFactory):
    class Meta:
        model = Identifier

    org = SubFactory(OrgFactory)
    identifier_scheme = SubFactory(IdentifierSchemeFactory)
    value = factory.Faker("entity_id")
