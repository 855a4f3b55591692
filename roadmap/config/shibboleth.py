# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from roadmap.config.base import AUTHENTICATION_BACKENDS
from roadmap.config.env import ENV

# ------------------------------------------------------------------------------
# Enable Shibboleth authentication. The Shibboleth SP in front of the
# application sets REMOTE_USER on the callback URL.
# ------------------------------------------------------------------------------
AUTHENTICATION_BACKENDS += [
    "roadmap.core.user.auth.ShibbolethRemoteUserBackend",
]

SHIBBOLETH_REMOTE_USER_HEADER = ENV.str("SHIBBOLETH_REMOTE_USER_HEADER", default="REMOTE_USER")
# Create local users for unknown remote users
SHIBBOLETH_CREATE_UNKNOWN_USER = ENV.bool("SHIBBOLETH_CREATE_UNKNOWN_USER", default=True)
