# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from urllib.parse import urlencode

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.db import transaction
from django.http import HttpResponseRedirect, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.urls import reverse
from django.views import View
from django.views.generic import TemplateView

from roadmap.core.org.forms import OrgProfileForm, OrgSearchForm, OrgSuperAdminForm, ShibbolethDiscoveryForm
from roadmap.core.org.models import Identifier, Language, Org
from roadmap.core.org.search import search
from roadmap.core.org.selection import identifiers_from_params, org_from_params
from roadmap.core.org.utils import (
    SHIBBOLETH_SCHEME_NAME,
    can_super_admin,
    identifier_candidate,
    process_identifier_change,
    reconcile_identifiers,
    shibboleth_scheme,
)
from roadmap.core.utils.common import (
    failure_message,
    force_https,
    form_errors_as_text,
    get_domain_url,
    import_from_settings,
    success_message,
)

logger = logging.getLogger(__name__)


def get_org_form_class(user):
    """The org form a user is allowed to submit."""
    if can_super_admin(user):
        return OrgSuperAdminForm
    return OrgProfileForm


def shibboleth_login_url(request):
    login_url = import_from_settings("SHIBBOLETH_LOGIN_URL", "/Shibboleth.sso/Login")
    return "{}{}".format(force_https(get_domain_url(request)), login_url)


def shibboleth_callback_url(request):
    return force_https(request.build_absolute_uri(reverse("shibboleth-callback")))


class OrgAccessMixin(LoginRequiredMixin, UserPassesTestMixin):
    def get_org(self):
        return get_object_or_404(Org, pk=self.kwargs.get("pk"))

    def test_func(self):
        """UserPassesTestMixin Tests"""
        if can_super_admin(self.request.user):
            return True

        org_obj = self.get_org()
        profile = getattr(self.request.user, "userprofile", None)
        if profile and profile.org_id == org_obj.pk and self.request.user.has_perm("org.change_org"):
            return True

        messages.error(self.request, "You do not have permission to edit this organisation.")


class OrgAdminEditView(OrgAccessMixin, TemplateView):
    template_name = "org/admin_edit.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        org_obj = self.get_org()
        if not org_obj.links:
            org_obj.links = {"org": []}

        form_class = get_org_form_class(self.request.user)
        context["org"] = org_obj
        context["form"] = form_class(instance=org_obj)
        context["languages"] = Language.objects.all().order_by("name")
        context["super_admin"] = form_class is OrgSuperAdminForm
        context["url"] = reverse("org-admin-update", kwargs={"pk": org_obj.pk})
        return context


class OrgAdminUpdateView(OrgAccessMixin, View):
    def post(self, request, *args, **kwargs):
        org_obj = self.get_org()
        tab = "feedback" if "feedback_enabled" in request.POST else "profile"
        redirect_url = "{}#{}".format(reverse("org-admin-edit", kwargs={"pk": org_obj.pk}), tab)

        form_class = get_org_form_class(request.user)
        form = form_class(form_class.merge_data(request.POST, org_obj), request.FILES, instance=org_obj)
        if not form.is_valid():
            messages.error(request, failure_message(org_obj, "save", form_errors_as_text(form)))
            return HttpResponseRedirect(redirect_url)

        with transaction.atomic():
            org_obj = form.save()
            if isinstance(form, OrgSuperAdminForm):
                org_obj = self.update_shibboleth_identifier(org_obj, form)
                org_obj = self.update_lookup_identifiers(org_obj, form)

        logger.info("User {} updated org {}".format(request.user.username, org_obj.pk))
        messages.success(request, success_message(org_obj, "saved"))
        return HttpResponseRedirect(redirect_url)

    def update_shibboleth_identifier(self, org_obj, form):
        if not import_from_settings("SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE", False):
            return org_obj
        if "shibboleth_entity_id" not in self.request.POST:
            return org_obj

        scheme = shibboleth_scheme()
        if scheme is None:
            logger.warning("Identifier scheme {} does not exist".format(SHIBBOLETH_SCHEME_NAME))
            return org_obj

        identifier = identifier_candidate(org_obj, scheme, form.cleaned_data.get("shibboleth_entity_id"))
        return process_identifier_change(org_obj, identifier)

    def update_lookup_identifiers(self, org_obj, form):
        """Attach the identifiers of the org chosen in the org lookup."""
        lookup = org_from_params(form.cleaned_data)
        if lookup is None:
            return org_obj

        identifiers = [identifier for identifier in identifiers_from_params(form.cleaned_data) if not identifier.is_blank]
        logger.debug("Org lookup for org {} selected {}".format(org_obj.pk, lookup))
        return reconcile_identifiers(org_obj, identifiers)


class ShibbolethDiscoveryView(View):
    """A discovery service page listing only the orgs with a Shibboleth
    entity id, used when SHIBBOLETH_USE_FILTERED_DISCOVERY_SERVICE is set."""

    template_name = "org/shibboleth_ds.html"

    def get(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            return HttpResponseRedirect(reverse("home"))

        identifiers = list(
            Identifier.objects.by_scheme_name(SHIBBOLETH_SCHEME_NAME).select_related("org").order_by("org__name")
        )
        if not identifiers:
            messages.warning(request, "No organisations are currently registered.")
            return HttpResponseRedirect(shibboleth_login_url(request))

        context = {
            "form": ShibbolethDiscoveryForm(),
            "identifiers": identifiers,
        }
        return render(request, self.template_name, context)

    def post(self, request, *args, **kwargs):
        """Redirect the user to the Shibboleth IdP of the org they chose."""
        form = ShibbolethDiscoveryForm(request.POST)
        if not form.is_valid() or not form.cleaned_data.get("org_name", "").strip():
            messages.info(request, "Please choose an organisation")
            return HttpResponseRedirect(reverse("org-shibboleth-ds"))

        org_id = form.cleaned_data.get("org_id", "").strip()
        shib_entity = None
        if org_id.isdigit():
            request.session["org_id"] = int(org_id)
            shib_entity = Identifier.objects.by_scheme_name(SHIBBOLETH_SCHEME_NAME).filter(org_id=int(org_id)).first()

        if shib_entity is None:
            messages.error(request, "Your organisation does not seem to be properly configured.")
            return HttpResponseRedirect(reverse("org-shibboleth-ds"))

        # initiate shibboleth login sequence
        query = urlencode({"target": shibboleth_callback_url(request), "entityID": shib_entity.value})
        return HttpResponseRedirect("{}?{}".format(shibboleth_login_url(request), query))


class OrgSearchView(View):
    """Org lookup used by the org selector widgets."""

    def post(self, request, *args, **kwargs):
        form = OrgSearchForm(request.POST)
        if not form.is_valid():
            return JsonResponse([], safe=False)

        name = form.cleaned_data.get("name", "").strip()
        if len(name) <= import_from_settings("ORG_SEARCH_MIN_LENGTH", 2):
            return JsonResponse([], safe=False)

        orgs = search(
            name,
            search_type=form.cleaned_data.get("type") or "local",
            funder_only=form.cleaned_data.get("funder_only", False),
        )
        return JsonResponse(orgs, safe=False)
