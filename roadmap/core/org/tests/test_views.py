# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
import logging
import os
import shutil
import tempfile
from unittest import mock
from urllib.parse import parse_qs, urlparse

from django.contrib.auth.models import Permission
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import IntegrityError
from django.test import TestCase, override_settings
from django.urls import reverse

from roadmap.core.org.models import Identifier, Org, OrgType
from roadmap.core.org.views import OrgAdminUpdateView
from roadmap.core.test_helpers import utils
from roadmap.core.test_helpers.factories import (
    IdentifierFactory,
    IdentifierSchemeFactory,
    LanguageFactory,
    OrgFactory,
    UserFactory,
)

logging.disable(logging.CRITICAL)

BACKEND = "django.contrib.auth.backends.ModelBackend"


class OrgViewBaseTest(TestCase):
    """Base class for org view tests."""

    @classmethod
    def setUpTestData(cls):
        cls.org = OrgFactory(name="Example University", contact_email="help@example.edu")
        cls.shibboleth = IdentifierSchemeFactory(name="shibboleth")
        cls.ror = IdentifierSchemeFactory(name="ror")

        cls.super_admin = UserFactory(is_staff=True, is_superuser=True)

        cls.org_admin = UserFactory()
        cls.org_admin.userprofile.org = cls.org
        cls.org_admin.userprofile.save()
        cls.org_admin.user_permissions.add(Permission.objects.get(codename="change_org", content_type__app_label="org"))

        cls.other_user = UserFactory()

    def edit_url(self, org=None):
        return reverse("org-admin-edit", kwargs={"pk": (org or self.org).pk})

    def update_url(self, org=None):
        return reverse("org-admin-update", kwargs={"pk": (org or self.org).pk})

    def post_update(self, user, data):
        return utils.login_and_post_page(self.client, user, self.update_url(), data)


class OrgAdminEditViewTest(OrgViewBaseTest):
    def test_logged_out_redirect(self):
        utils.test_logged_out_redirect_to_login(self, self.edit_url())

    def test_access(self):
        utils.test_user_can_access(self, self.super_admin, self.edit_url())
        utils.test_user_can_access(self, self.org_admin, self.edit_url())
        utils.test_user_cannot_access(self, self.other_user, self.edit_url())

    def test_org_admin_cannot_access_other_org(self):
        utils.test_user_cannot_access(self, self.org_admin, self.edit_url(OrgFactory()))

    def test_missing_org(self):
        response = utils.login_and_get_page(self.client, self.super_admin, "/org/admin/999999/admin_edit")
        self.assertEqual(response.status_code, 404)

    def test_context(self):
        LanguageFactory()
        Org.objects.filter(pk=self.org.pk).update(links={})

        response = utils.login_and_get_page(self.client, self.org_admin, self.edit_url())

        self.assertEqual(response.context["org"].links, {"org": []})
        self.assertFalse(response.context["super_admin"])
        self.assertNotIn("managed", response.context["form"].fields)
        self.assertEqual([lang.abbreviation for lang in response.context["languages"]], ["en-GB"])

        response = utils.login_and_get_page(self.client, self.super_admin, self.edit_url())
        self.assertTrue(response.context["super_admin"])
        self.assertIn("managed", response.context["form"].fields)


class OrgAdminUpdateViewTest(OrgViewBaseTest):
    def test_access(self):
        response = self.client.post(self.update_url(), {"name": "Renamed"})
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith("/user/login"))

        response = self.post_update(self.other_user, {"name": "Renamed"})
        self.assertEqual(response.status_code, 403)
        self.org.refresh_from_db()
        self.assertEqual(self.org.name, "Example University")

    def test_org_admin_updates_profile(self):
        links = {"org": [{"link": "https://example.edu", "text": "Home"}]}
        response = self.post_update(
            self.org_admin,
            {
                "name": "Example University Renamed",
                "contact_name": "Help Desk",
                "org_links": json.dumps(links),
                "tracker_code": "UA-1234",
            },
        )

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, self.edit_url() + "#profile")
        self.assertEqual(utils.get_message_strings(response), ["Successfully saved your organisation."])
        self.org.refresh_from_db()
        self.assertEqual(self.org.name, "Example University Renamed")
        self.assertEqual(self.org.contact_name, "Help Desk")
        self.assertEqual(self.org.contact_email, "help@example.edu")
        self.assertEqual(self.org.links, links)
        self.assertEqual(self.org.tracker.code, "UA-1234")

    def test_org_admin_cannot_change_privileged_fields(self):
        with override_settings(SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE=True):
            self.post_update(
                self.org_admin,
                {
                    "managed": "1",
                    "org_type": [str(OrgType.FUNDER)],
                    "shibboleth_entity_id": "https://idp.example.edu/shibboleth",
                    "org_id": json.dumps({"ror": "https://ror.org/0abc"}),
                },
            )

        self.org.refresh_from_db()
        self.assertFalse(self.org.managed)
        self.assertEqual(self.org.org_type, 0)
        self.assertFalse(self.org.identifiers.exists())

    def test_super_admin_changes_privileged_fields(self):
        self.post_update(
            self.super_admin,
            {"managed": "1", "org_type": [str(OrgType.INSTITUTION), str(OrgType.FUNDER)]},
        )

        self.org.refresh_from_db()
        self.assertTrue(self.org.managed)
        self.assertTrue(self.org.is_institution)
        self.assertTrue(self.org.is_funder)
        self.assertFalse(self.org.is_organisation)

    def test_feedback_tab(self):
        response = self.post_update(
            self.org_admin,
            {"feedback_enabled": ["0", "1"], "feedback_msg": "We will get back to you."},
        )

        self.assertEqual(response.url, self.edit_url() + "#feedback")
        self.org.refresh_from_db()
        self.assertTrue(self.org.feedback_enabled)
        self.assertEqual(self.org.feedback_msg, "We will get back to you.")
        self.assertEqual(self.org.name, "Example University")

        self.post_update(self.org_admin, {"feedback_enabled": "0"})
        self.org.refresh_from_db()
        self.assertFalse(self.org.feedback_enabled)

    def test_invalid_links(self):
        response = self.post_update(self.org_admin, {"name": "Renamed", "org_links": "{not json"})

        self.assertEqual(response.url, self.edit_url() + "#profile")
        messages = utils.get_message_strings(response)
        self.assertEqual(len(messages), 1)
        self.assertTrue(messages[0].startswith("Unable to save your organisation."))
        self.assertIn("Links must be valid JSON.", messages[0])
        self.org.refresh_from_db()
        self.assertEqual(self.org.name, "Example University")

    def test_duplicate_name(self):
        OrgFactory(name="Another University")
        response = self.post_update(self.org_admin, {"name": "Another University"})
        self.assertTrue(utils.get_message_strings(response)[0].startswith("Unable to save"))

    @override_settings(SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE=True)
    def test_shibboleth_entity_id_lifecycle(self):
        self.post_update(self.super_admin, {"shibboleth_entity_id": "https://idp.example.edu/a"})
        self.assertEqual(self.org.identifier_for_scheme(self.shibboleth).value, "https://idp.example.edu/a")

        self.post_update(self.super_admin, {"shibboleth_entity_id": "https://idp.example.edu/b"})
        self.assertEqual(
            list(self.org.identifiers.filter(identifier_scheme=self.shibboleth).values_list("value", flat=True)),
            ["https://idp.example.edu/b"],
        )

        # not submitted, left alone
        self.post_update(self.super_admin, {"name": "Example University"})
        self.assertIsNotNone(self.org.identifier_for_scheme(self.shibboleth))

        self.post_update(self.super_admin, {"shibboleth_entity_id": ""})
        self.assertIsNone(self.org.identifier_for_scheme(self.shibboleth))

    @override_settings(SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE=False)
    def test_shibboleth_entity_id_ignored_without_filtered_discovery(self):
        self.post_update(self.super_admin, {"shibboleth_entity_id": "https://idp.example.edu/a"})
        self.assertIsNone(self.org.identifier_for_scheme(self.shibboleth))

    def test_lookup_identifiers_replace_existing(self):
        IdentifierFactory(org=self.org, identifier_scheme=self.ror, value="https://ror.org/old")
        IdentifierFactory(org=self.org, identifier_scheme=self.shibboleth, value="https://idp.example.edu/a")
        selection = {"id": self.org.pk, "name": self.org.name, "ror": "https://ror.org/new", "fundref": ""}

        self.post_update(self.super_admin, {"org_id": json.dumps(selection), "org_name": self.org.name})

        self.assertEqual(self.org.identifier_for_scheme(self.ror).value, "https://ror.org/new")
        self.assertEqual(self.org.identifier_for_scheme(self.shibboleth).value, "https://idp.example.edu/a")
        self.assertEqual(Identifier.objects.filter(org=self.org).count(), 2)

    def test_no_lookup_leaves_identifiers(self):
        IdentifierFactory(org=self.org, identifier_scheme=self.ror, value="https://ror.org/old")
        self.post_update(self.super_admin, {"org_id": ""})
        self.assertEqual(self.org.identifier_for_scheme(self.ror).value, "https://ror.org/old")


    def test_super_admin_clears_org_types(self):
        Org.objects.filter(pk=self.org.pk).update(org_type=OrgType.INSTITUTION | OrgType.FUNDER)

        response = self.post_update(self.super_admin, {"name": self.org.name, "managed": "0"})

        self.assertEqual(utils.get_message_strings(response), ["Successfully saved your organisation."])
        self.org.refresh_from_db()
        self.assertEqual(self.org.org_type, 0)

    def test_feedback_tab_keeps_org_types(self):
        Org.objects.filter(pk=self.org.pk).update(org_type=OrgType.INSTITUTION)

        self.post_update(self.super_admin, {"feedback_enabled": "1"})

        self.org.refresh_from_db()
        self.assertEqual(self.org.org_type, OrgType.INSTITUTION)
        self.assertTrue(self.org.feedback_enabled)

    def test_lookup_with_non_string_name(self):
        response = self.post_update(self.super_admin, {"org_id": json.dumps({"name": 5, "ror": 12345})})

        self.assertEqual(response.status_code, 302)
        self.assertEqual(utils.get_message_strings(response), ["Successfully saved your organisation."])
        self.assertFalse(self.org.identifiers.exists())


class OrgLogoTest(OrgViewBaseTest):
    def setUp(self):
        self.media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)
        media_settings = override_settings(MEDIA_ROOT=self.media_root)
        media_settings.enable()
        self.addCleanup(media_settings.disable)

    def logo_path(self, name):
        return os.path.join(self.media_root, name)

    def upload_logo(self):
        logo = SimpleUploadedFile("logo.png", b"\x89PNG\r\n\x1a\n", content_type="image/png")
        self.post_update(self.org_admin, {"name": self.org.name, "logo": logo})
        self.org.refresh_from_db()
        return self.org.logo.name

    def test_upload(self):
        name = self.upload_logo()

        self.assertTrue(name.startswith("logos/logo"))
        self.assertTrue(os.path.exists(self.logo_path(name)))

    def test_remove_logo(self):
        name = self.upload_logo()

        with self.captureOnCommitCallbacks(execute=True):
            self.post_update(self.org_admin, {"name": self.org.name, "remove_logo": ["0", "1"]})

        self.org.refresh_from_db()
        self.assertFalse(self.org.logo)
        self.assertFalse(os.path.exists(self.logo_path(name)))

    def test_unchecked_remove_logo_keeps_logo(self):
        name = self.upload_logo()

        self.post_update(self.org_admin, {"name": self.org.name, "remove_logo": "0"})

        self.org.refresh_from_db()
        self.assertEqual(self.org.logo.name, name)

    def test_feedback_tab_keeps_logo(self):
        name = self.upload_logo()

        with self.captureOnCommitCallbacks(execute=True):
            self.post_update(self.org_admin, {"feedback_enabled": "1"})

        self.org.refresh_from_db()
        self.assertEqual(self.org.logo.name, name)
        self.assertTrue(os.path.exists(self.logo_path(name)))

    def test_logo_file_kept_when_update_rolls_back(self):
        name = self.upload_logo()

        with mock.patch.object(
            OrgAdminUpdateView, "update_lookup_identifiers", side_effect=IntegrityError("duplicate identifier")
        ):
            with self.assertRaises(IntegrityError), self.captureOnCommitCallbacks() as callbacks:
                self.post_update(self.super_admin, {"name": self.org.name, "remove_logo": "1"})

        self.assertEqual(callbacks, [])
        self.org.refresh_from_db()
        self.assertEqual(self.org.logo.name, name)
        self.assertTrue(os.path.exists(self.logo_path(name)))


class ShibbolethDiscoveryViewTest(OrgViewBaseTest):
    url = "/org/shibboleth"

    def test_authenticated_user_redirected_home(self):
        self.client.force_login(self.other_user, backend=BACKEND)
        response = self.client.get(self.url)
        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)

    def test_no_registered_orgs(self):
        response = self.client.get(self.url)
        self.assertRedirects(response, "https://testserver/Shibboleth.sso/Login", fetch_redirect_response=False)
        self.assertEqual(utils.get_message_strings(response), ["No organisations are currently registered."])

    def test_lists_orgs_with_entity_id_sorted_by_name(self):
        IdentifierFactory(org=self.org, identifier_scheme=self.shibboleth)
        first = OrgFactory(name="Aardvark College")
        IdentifierFactory(org=first, identifier_scheme=self.shibboleth)
        OrgFactory(name="Unlisted College")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual([i.org.name for i in response.context["identifiers"]], ["Aardvark College", "Example University"])
        self.assertNotContains(response, "Unlisted College")

    def test_passthru_requires_org(self):
        response = self.client.post(self.url, {"shib-ds-org_id": "", "shib-ds-org_name": ""})
        self.assertRedirects(response, self.url, fetch_redirect_response=False)
        self.assertEqual(utils.get_message_strings(response), ["Please choose an organisation"])

    def test_passthru_unconfigured_org(self):
        response = self.client.post(self.url, {"shib-ds-org_id": self.org.pk, "shib-ds-org_name": self.org.name})
        self.assertRedirects(response, self.url, fetch_redirect_response=False)
        self.assertEqual(
            utils.get_message_strings(response), ["Your organisation does not seem to be properly configured."]
        )

    @override_settings(SHIBBOLETH_LOGIN_URL="/Shibboleth.sso/Login")
    def test_passthru_redirects_to_idp(self):
        IdentifierFactory(org=self.org, identifier_scheme=self.shibboleth, value="https://idp.example.edu/shibboleth")

        response = self.client.post(self.url, {"shib-ds-org_id": self.org.pk, "shib-ds-org_name": self.org.name})

        self.assertEqual(response.status_code, 302)
        location = urlparse(response.url)
        self.assertEqual((location.scheme, location.netloc, location.path), ("https", "testserver", "/Shibboleth.sso/Login"))
        query = parse_qs(location.query)
        self.assertEqual(query["entityID"], ["https://idp.example.edu/shibboleth"])
        self.assertEqual(query["target"], ["https://testserver/user/auth/shibboleth/callback"])
        self.assertEqual(self.client.session["org_id"], self.org.pk)


class OrgSearchViewTest(OrgViewBaseTest):
    url = "/org/search"

    def test_short_name_returns_nothing(self):
        response = self.client.post(self.url, {"org-name": "Ex"})
        self.assertEqual(response.json(), [])

    def test_invalid_type_returns_nothing(self):
        response = self.client.post(self.url, {"org-name": "Example", "org-type": "everywhere"})
        self.assertEqual(response.json(), [])

    def test_local_search(self):
        response = self.client.post(self.url, {"org-name": "Example"})
        self.assertEqual([org["id"] for org in response.json()], [self.org.pk])

    @mock.patch("roadmap.core.org.views.search")
    def test_search_arguments(self, mock_search):
        mock_search.return_value = [{"name": "Example University"}]

        response = self.client.post(
            self.url, {"org-name": " Example ", "org-type": "combined", "org-funder_only": "true"}
        )

        self.assertEqual(response.json(), [{"name": "Example University"}])
        mock_search.assert_called_once_with("Example", search_type="combined", funder_only=True)
