# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from django.contrib.auth.backends import RemoteUserBackend

from roadmap.core.org.models import Org
from roadmap.core.user.models import UserProfile
from roadmap.core.utils.common import import_from_settings

logger = logging.getLogger(__name__)

SHIBBOLETH_PROVIDER = "shibboleth"


class ShibbolethRemoteUserBackend(RemoteUserBackend):
    """Authenticate the user the Shibboleth SP vouches for.

    Users are matched on the provider/uid recorded on their profile first,
    then on username. The org picked on the discovery page, kept in the
    session as org_id, is linked to the profile.
    """

    @property
    def create_unknown_user(self):
        return import_from_settings("SHIBBOLETH_CREATE_UNKNOWN_USER", True)

    def authenticate(self, request, remote_user):
        if not remote_user:
            return None

        profile = (
            UserProfile.objects.filter(provider=SHIBBOLETH_PROVIDER, uid=remote_user).select_related("user").first()
        )
        if profile is not None:
            user = profile.user if self.user_can_authenticate(profile.user) else None
        else:
            user = super().authenticate(request, remote_user)

        if user is None:
            logger.warning("Shibboleth login refused for {}".format(remote_user))
            return None

        self.link_profile(request, user, remote_user)
        return user

    def link_profile(self, request, user, remote_user):
        profile, _ = UserProfile.objects.get_or_create(user=user)
        profile.provider = SHIBBOLETH_PROVIDER
        profile.uid = remote_user

        org_id = request.session.get("org_id") if request is not None else None
        if org_id and profile.org_id is None:
            profile.org = Org.objects.filter(pk=org_id).first()
        profile.save()
        logger.info("User {} signed in with {} as {}".format(user.username, SHIBBOLETH_PROVIDER, remote_user))
