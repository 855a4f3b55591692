# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.urls import path

import roadmap.core.org.views as org_views

urlpatterns = [
    path("admin/<int:pk>/admin_edit", org_views.OrgAdminEditView.as_view(), name="org-admin-edit"),
    path("admin/<int:pk>/admin_update", org_views.OrgAdminUpdateView.as_view(), name="org-admin-update"),
    path("shibboleth", org_views.ShibbolethDiscoveryView.as_view(), name="org-shibboleth-ds"),
    path("search", org_views.OrgSearchView.as_view(), name="org-search"),
]
