# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.contrib.auth.views import LoginView, LogoutView
from django.urls import path

import roadmap.core.user.views as user_views

urlpatterns = [
    path(
        "login",
        LoginView.as_view(template_name="user/login.html", redirect_authenticated_user=True),
        name="login",
    ),
    path("logout", LogoutView.as_view(), name="logout"),
    path("auth/shibboleth/callback", user_views.shibboleth_callback, name="shibboleth-callback"),
]
