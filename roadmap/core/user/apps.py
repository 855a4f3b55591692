# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib

from django.apps import AppConfig


class UserConfig(AppConfig):
    name = "roadmap.core.user"

    def ready(self):
        importlib.import_module("roadmap.core.user.signals")
