# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from roadmap.config.base import SETTINGS_EXPORT
from roadmap.config.env import ENV

# ------------------------------------------------------------------------------
# General Application Information
# ------------------------------------------------------------------------------
APPLICATION_NAME = ENV.str("APPLICATION_NAME", default="DMP Roadmap")
HELP_EMAIL = ENV.str("HELP_EMAIL", default="")

# ------------------------------------------------------------------------------
# Shibboleth discovery service. The SP/IdP wiring is in shibboleth.py, these
# are read by the org views whether or not it is enabled.
# ------------------------------------------------------------------------------
SHIBBOLETH_ENABLED = ENV.bool("SHIBBOLETH_ENABLED", default=False)
SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE = ENV.bool("SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE", default=False)
SHIBBOLETH_LOGIN_URL = ENV.str("SHIBBOLETH_LOGIN_URL", default="/Shibboleth.sso/Login")

# ------------------------------------------------------------------------------
# Org lookup
# ------------------------------------------------------------------------------
ORG_SEARCH_ROR_API_URL = ENV.str("ORG_SEARCH_ROR_API_URL", default="https://api.ror.org/organizations")
ORG_SEARCH_TIMEOUT = ENV.int("ORG_SEARCH_TIMEOUT", default=5)
# Search terms must be longer than this
ORG_SEARCH_MIN_LENGTH = ENV.int("ORG_SEARCH_MIN_LENGTH", default=2)

# ------------------------------------------------------------------------------

SETTINGS_EXPORT += [
    "APPLICATION_NAME",
    "HELP_EMAIL",
    "SHIBBOLETH_ENABLED",
    "SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE",
]
