# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.contrib.auth.models import User
from django.db import models

from roadmap.core.org.models import Org


class UserProfile(models.Model):
    """Extra details kept for each user.

    Attributes:
        user (User): represents the Django User model
        org (Org): the org the user belongs to
        provider (str): name of the SSO provider the user signed in with, e.g. shibboleth
        uid (str): the user's id at that provider
    """

    user = models.OneToOneField(User, on_delete=models.CASCADE)
    org = models.ForeignKey(Org, on_delete=models.SET_NULL, null=True, blank=True, related_name="user_profiles")
    provider = models.CharField(max_length=255, null=True, blank=True)
    uid = models.CharField(max_length=255, null=True, blank=True)

    def __str__(self):
        return self.user.username
