# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.apps import AppConfig


class UtilsConfig(AppConfig):
    name = "roadmap.core.utils"
