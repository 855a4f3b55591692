# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from roadmap.config.base import AUTHENTICATION_BACKENDS
from roadmap.config.env import ENV

# ------------------------------------------------------------------------------
# Roadmap default authentication settings
# ------------------------------------------------------------------------------
AUTHENTICATION_BACKENDS += [
    "django.contrib.auth.backends.ModelBackend",
]

LOGIN_URL = "/user/login"
LOGIN_REDIRECT_URL = "/"
LOGOUT_REDIRECT_URL = ENV.str("LOGOUT_REDIRECT_URL", LOGIN_URL)

# ------------------------------------------------------------------------------
# Session store
# ------------------------------------------------------------------------------
# Sessions are kept in the database, in a table whose session key column is
# wide enough for the identifiers handed out by SSO providers.
SESSION_ENGINE = "roadmap.core.sessions.backends.db"
SESSION_COOKIE_NAME = ENV.str("SESSION_COOKIE_NAME", default="_dmp_roadmap_session")
SESSION_COOKIE_AGE = ENV.int("SESSION_INACTIVITY_TIMEOUT", default=60 * 60)
SESSION_SAVE_EVERY_REQUEST = True
# Lax, so that the cookie survives the POST back from the Shibboleth IdP
SESSION_COOKIE_SAMESITE = ENV.str("SESSION_COOKIE_SAMESITE", default="Lax")
SESSION_COOKIE_SECURE = ENV.bool("SESSION_COOKIE_SECURE", default=True)
