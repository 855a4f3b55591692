# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.apps import AppConfig


class SessionsConfig(AppConfig):
    name = "roadmap.core.sessions"
    label = "roadmap_sessions"
    verbose_name = "Sessions"
