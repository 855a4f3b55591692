# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from roadmap.core.org.models import Identifier, IdentifierScheme, Language, Org, OrgTracker


@admin.register(Language)
class LanguageAdmin(admin.ModelAdmin):
    list_display = ("name", "abbreviation", "default_language")


@admin.register(IdentifierScheme)
class IdentifierSchemeAdmin(admin.ModelAdmin):
    list_display = ("name", "description", "active", "for_orgs")
    list_filter = ("active", "for_orgs")


class IdentifierInline(admin.TabularInline):
    model = Identifier
    extra = 0
    fields = ("identifier_scheme", "value")


class OrgTrackerInline(admin.StackedInline):
    model = OrgTracker
    extra = 0


@admin.register(Org)
class OrgAdmin(SimpleHistoryAdmin):
    readonly_fields = ("created", "modified")
    list_display = ("name", "abbreviation", "Org_Types", "managed", "feedback_enabled")
    list_filter = ("managed", "feedback_enabled", "language")
    search_fields = ["name", "abbreviation", "contact_email", "identifiers__value"]
    inlines = [IdentifierInline, OrgTrackerInline]

    def Org_Types(self, obj):
        return ", ".join(obj.org_type_names)


@admin.register(Identifier)
class IdentifierAdmin(SimpleHistoryAdmin):
    list_display = ("org", "identifier_scheme", "value", "modified")
    list_filter = ("identifier_scheme",)
    search_fields = ["org__name", "value"]
