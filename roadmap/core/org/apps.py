# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.apps import AppConfig


class OrgConfig(AppConfig):
    name = "roadmap.core.org"
    verbose_name = "Organisation"
