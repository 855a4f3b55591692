# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.contrib.sessions.base_session import AbstractBaseSession
from django.db import models

SESSION_KEY_MAX_LENGTH = 255


class Session(AbstractBaseSession):
    """A database-backed session.

    Identical to django.contrib.sessions except that the session key may be
    up to 255 characters long.

    Attributes:
        session_key (str): primary key, the value of the session cookie
        session_data (str): encoded session dictionary
        expire_date (datetime): when the session stops being valid
    """

    session_key = models.CharField("session key", max_length=SESSION_KEY_MAX_LENGTH, primary_key=True)

    class Meta(AbstractBaseSession.Meta):
        db_table = "sessions"

    @classmethod
    def get_session_store_class(cls):
        from roadmap.core.sessions.backends.db import SessionStore

        return SessionStore
