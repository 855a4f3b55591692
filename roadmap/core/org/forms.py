# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

from django import forms
from django.db import transaction
from django.forms import ModelForm

from roadmap.core.org.models import Org, OrgTracker, OrgType
from roadmap.core.org.utils import shibboleth_scheme


class FlagInput(forms.CheckboxInput):
    """Checkbox that also understands the "0"/"1" pair posted by a hidden
    field placed in front of the checkbox."""

    def value_from_datadict(self, data, files, name):
        if data.get(name) in ("0", "false", "off"):
            return False
        return super().value_from_datadict(data, files, name)


def _flag(value):
    return "1" if value else "0"


class OrgProfileForm(ModelForm):
    """Fields any org admin may edit."""

    org_links = forms.CharField(required=False, widget=forms.HiddenInput)
    remove_logo = forms.BooleanField(required=False, widget=FlagInput)
    tracker_code = forms.CharField(max_length=64, required=False, label="Tracker code")

    class Meta:
        model = Org
        fields = [
            "name",
            "abbreviation",
            "contact_email",
            "contact_name",
            "logo",
            "language",
            "feedback_enabled",
            "feedback_msg",
        ]
        widgets = {
            "feedback_enabled": FlagInput,
        }
        labels = {
            "feedback_msg": "Feedback email message",
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["language"].queryset = self.fields["language"].queryset.order_by("name")

    @classmethod
    def instance_data(cls, instance):
        """The form data that leaves instance unchanged.

        Lets a page post only the fields on one of its tabs.
        """
        data = {
            "name": [instance.name],
            "abbreviation": [instance.abbreviation],
            "contact_email": [instance.contact_email],
            "contact_name": [instance.contact_name],
            "language": [instance.language_id or ""],
            "feedback_enabled": [_flag(instance.feedback_enabled)],
            "feedback_msg": [instance.feedback_msg],
            "org_links": [json.dumps(instance.links or {"org": []})],
            "remove_logo": ["0"],
        }
        tracker = OrgTracker.objects.filter(org=instance).first() if instance.pk else None
        data["tracker_code"] = [tracker.code if tracker else ""]
        return data

    @classmethod
    def merge_data(cls, data, instance):
        """Return a copy of the posted data with any field it lacks taken
        from instance."""
        merged = data.copy()
        for key, values in cls.instance_data(instance).items():
            if key not in merged:
                merged.setlist(key, [str(value) for value in values])
        return merged

    def clean_org_links(self):
        org_links = self.cleaned_data.get("org_links")
        if not org_links:
            return None
        try:
            links = json.loads(org_links)
        except ValueError:
            raise forms.ValidationError("Links must be valid JSON.")
        if not isinstance(links, dict):
            raise forms.ValidationError('Links must be a JSON object, e.g. {"org": []}.')
        return links

    def save(self, commit=True):
        org = super().save(commit=False)
        links = self.cleaned_data.get("org_links")
        if links is not None:
            org.links = links
        removed_logo = None
        if self.cleaned_data.get("remove_logo") and org.logo:
            removed_logo = org.logo.name
            org.logo = ""
        if commit:
            org.save()
            self.save_tracker(org)
            if removed_logo:
                self.delete_logo_on_commit(removed_logo)
        return org

    def delete_logo_on_commit(self, name):
        """Remove the old logo file once the org row no longer points at it."""
        storage = Org._meta.get_field("logo").storage
        transaction.on_commit(lambda: storage.delete(name))

    def save_tracker(self, org):
        code = (self.cleaned_data.get("tracker_code") or "").strip()
        tracker = OrgTracker.objects.filter(org=org).first()
        if tracker is None and not code:
            return
        if tracker is None:
            tracker = OrgTracker(org=org)
        tracker.code = code
        tracker.save()


class OrgSuperAdminForm(OrgProfileForm):
    """Adds the fields only super admins may change: org type, managed flag,
    Shibboleth entity id and the org lookup used to attach identifiers."""

    org_type = forms.TypedMultipleChoiceField(
        choices=OrgType.choices(),
        coerce=int,
        required=False,
        widget=forms.CheckboxSelectMultiple,
    )
    shibboleth_entity_id = forms.CharField(max_length=255, required=False, label="Shibboleth entity id")
    org_id = forms.CharField(required=False, widget=forms.HiddenInput)
    org_name = forms.CharField(required=False, widget=forms.HiddenInput)
    org_crosswalk = forms.CharField(required=False, widget=forms.HiddenInput)

    class Meta(OrgProfileForm.Meta):
        fields = OrgProfileForm.Meta.fields + ["managed"]
        widgets = {
            "feedback_enabled": FlagInput,
            "managed": FlagInput,
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.is_bound and self.instance.pk:
            self.initial["org_type"] = [value for value, label in OrgType.choices() if self.instance.org_type & value]
            scheme = shibboleth_scheme()
            identifier = self.instance.identifier_for_scheme(scheme) if scheme else None
            self.initial["shibboleth_entity_id"] = identifier.value if identifier else ""

    @classmethod
    def instance_data(cls, instance):
        data = super().instance_data(instance)
        data["managed"] = [_flag(instance.managed)]
        data["org_type"] = [value for value, label in OrgType.choices() if instance.org_type & value]
        scheme = shibboleth_scheme()
        identifier = instance.identifier_for_scheme(scheme) if scheme else None
        data["shibboleth_entity_id"] = [identifier.value if identifier else ""]
        return data

    @classmethod
    def merge_data(cls, data, instance):
        merged = super().merge_data(data, instance)
        # The org type checkboxes are on the profile tab, where none checked
        # posts no org_type at all
        if "feedback_enabled" not in data:
            merged.setlist("org_type", data.getlist("org_type"))
        return merged

    def clean_org_type(self):
        org_type = 0
        for value in self.cleaned_data.get("org_type") or []:
            org_type |= value
        return org_type

    def save(self, commit=True):
        self.instance.org_type = self.cleaned_data.get("org_type", self.instance.org_type)
        return super().save(commit=commit)


class ShibbolethDiscoveryForm(forms.Form):
    """The org picker posted to the Shibboleth discovery passthru."""

    prefix = "shib-ds"

    org_id = forms.CharField(required=False, widget=forms.HiddenInput)
    org_name = forms.CharField(required=False, label="Organisation")


class OrgSearchForm(forms.Form):
    prefix = "org"

    SEARCH_TYPE_CHOICES = (
        ("local", "Local"),
        ("external", "External"),
        ("combined", "Combined"),
    )

    name = forms.CharField(required=False)
    type = forms.ChoiceField(choices=SEARCH_TYPE_CHOICES, required=False)
    funder_only = forms.BooleanField(required=False, widget=FlagInput)
