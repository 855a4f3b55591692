# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.contrib import admin

from roadmap.core.user.models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("username", "first_name", "last_name", "org", "provider", "uid")
    list_filter = ("provider", "org")
    search_fields = ["user__username", "user__first_name", "user__last_name", "uid"]
    raw_id_fields = ("user",)

    def username(self, obj):
        return obj.user.username

    def first_name(self, obj):
        return obj.user.first_name

    def last_name(self, obj):
        return obj.user.last_name
