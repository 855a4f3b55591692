# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login
from django.http import HttpResponseRedirect
from django.urls import reverse

from roadmap.core.utils.common import import_from_settings

logger = logging.getLogger(__name__)


def shibboleth_callback(request):
    """Where the Shibboleth SP returns the user after signing in at the IdP."""
    header = import_from_settings("SHIBBOLETH_REMOTE_USER_HEADER", "REMOTE_USER")
    remote_user = request.META.get(header)

    user = authenticate(request, remote_user=remote_user)
    if user is None:
        messages.error(request, "We were unable to sign you in with your organisation's credentials.")
        return HttpResponseRedirect(reverse("login"))

    login(request, user)
    request.session.pop("org_id", None)
    return HttpResponseRedirect(import_from_settings("LOGIN_REDIRECT_URL", "/"))
