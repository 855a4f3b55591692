# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import environ
from split_settings.tools import include, optional

from roadmap.config.env import ENV, PROJECT_ROOT

# Roadmap split settings
roadmap_configs = [
    "base.py",
    "database.py",
    "auth.py",
    "logging.py",
    "core.py",
]

# Optional feature settings, enabled via environment variables. Can
# alternatively add the relevant configs to local_settings.py
feature_configs = {
    "SHIBBOLETH_ENABLED": "shibboleth.py",
}

for key, fc in feature_configs.items():
    if ENV.bool(key, default=False):
        roadmap_configs.append(fc)

# Local settings overrides
local_configs = [
    # Local settings relative to roadmap.config package
    "local_settings.py",
    # System wide settings for production deployments
    "/etc/roadmap/local_settings.py",
    # Local settings relative to roadmap project root
    PROJECT_ROOT("local_settings.py"),
]

if ENV.str("ROADMAP_CONFIG", default="") != "":
    # Local settings from path specified via environment variable
    local_configs.append(environ.Path(ENV.str("ROADMAP_CONFIG"))())

for lc in local_configs:
    roadmap_configs.append(optional(lc))

include(*roadmap_configs)
