# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from collections import namedtuple

from django.db import transaction

from roadmap.core.org.models import Identifier, IdentifierScheme

logger = logging.getLogger(__name__)

SHIBBOLETH_SCHEME_NAME = "shibboleth"

CREATE = "create"
REPLACE = "replace"
UPDATE = "update"
DELETE = "delete"
NOOP = "noop"

IdentifierChange = namedtuple("IdentifierChange", ["action", "delete", "save"])


def can_super_admin(user):
    """Super admins may edit every org and its privileged fields."""
    if not user.is_authenticated:
        return False
    return user.is_superuser or user.has_perm("org.can_super_admin")


def plan_identifier_change(current, candidate):
    """Decide what reconciling candidate against current requires.

    current is the org's stored identifier for the candidate's scheme, or
    None. Nothing is read from or written to the database here.

    Returns an IdentifierChange whose delete and save lists must be applied
    in that order:
        delete  - candidate is stored and has been blanked out
        replace - current holds a different value, swap it for candidate
        update  - candidate is the stored row with a new value
        create  - no current identifier, store candidate
        noop    - candidate is blank and new, or matches current
    """
    if candidate.pk is not None and candidate.is_blank:
        return IdentifierChange(DELETE, [candidate], [])

    if candidate.is_blank:
        return IdentifierChange(NOOP, [], [])

    if current is None:
        return IdentifierChange(CREATE, [], [candidate])
    if current.pk == candidate.pk:
        if current.value == candidate.value:
            return IdentifierChange(NOOP, [], [])
        return IdentifierChange(UPDATE, [], [candidate])
    if current.value == candidate.value:
        return IdentifierChange(NOOP, [], [])
    return IdentifierChange(REPLACE, [current], [candidate])


def process_identifier_change(org, identifier):
    """Destroy the identifier if it exists and was blanked out, replace the
    org's identifier for the scheme if it was updated, create the identifier
    if it is new, or ignore it.

    org must already be saved. Anything that is not an Identifier is ignored.
    Database errors propagate and roll back the change.
    """
    if not isinstance(identifier, Identifier):
        return org

    current = org.identifier_for_scheme(identifier.identifier_scheme_id)
    change = plan_identifier_change(current, identifier)
    if change.action == NOOP:
        return org

    with transaction.atomic():
        for obj in change.delete:
            obj.delete()
        for obj in change.save:
            obj.org = org
            obj.save()

    # The related manager may have been prefetched before the change
    getattr(org, "_prefetched_objects_cache", {}).pop("identifiers", None)

    logger.info(
        "Identifier {} for org {} ({}): {}".format(
            change.action, org.pk, identifier.identifier_scheme_id, identifier.value or "<blank>"
        )
    )
    return org


def reconcile_identifiers(org, identifiers):
    """Run process_identifier_change for each identifier in one transaction."""
    with transaction.atomic():
        for identifier in identifiers:
            org = process_identifier_change(org, identifier)
    return org


def identifier_candidate(org, scheme, value):
    """Build the candidate identifier for a value submitted for scheme.

    A non-blank value finds the org's matching stored identifier or builds a
    new one. A blank value is turned into a blanked copy of the stored
    identifier, if there is one, so that reconciling it removes the row.
    """
    value = (value or "").strip()
    if value:
        existing = None
        if org.pk is not None:
            existing = Identifier.objects.filter(org=org, identifier_scheme=scheme, value=value).first()
        return existing or Identifier(org=org, identifier_scheme=scheme, value=value)

    existing = org.identifier_for_scheme(scheme)
    if existing is not None:
        existing.value = ""
        return existing
    return Identifier(org=org, identifier_scheme=scheme, value="")


def shibboleth_scheme():
    return IdentifierScheme.objects.by_name(SHIBBOLETH_SCHEME_NAME).first()
