# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.conf import settings
from django.test import TestCase

from roadmap.core.sessions.backends.db import SessionStore
from roadmap.core.sessions.models import SESSION_KEY_MAX_LENGTH, Session


class SessionStoreTest(TestCase):
    def test_engine(self):
        self.assertEqual(settings.SESSION_ENGINE, "roadmap.core.sessions.backends.db")
        self.assertIs(SessionStore.get_model_class(), Session)
        self.assertIs(Session.get_session_store_class(), SessionStore)
        self.assertEqual(Session._meta.db_table, "sessions")

    def test_save_and_load(self):
        store = SessionStore()
        store["org_id"] = 7
        store.save()

        self.assertTrue(Session.objects.filter(session_key=store.session_key).exists())
        self.assertEqual(SessionStore(session_key=store.session_key)["org_id"], 7)

    def test_long_session_key(self):
        key = "a" * SESSION_KEY_MAX_LENGTH
        store = SessionStore()
        Session.objects.create(
            session_key=key, session_data=store.encode({"org_id": 7}), expire_date=store.get_expiry_date()
        )

        self.assertEqual(SessionStore(session_key=key).load(), {"org_id": 7})

    def test_delete(self):
        store = SessionStore()
        store["org_id"] = 7
        store.save()
        store.delete()

        self.assertFalse(Session.objects.exists())
