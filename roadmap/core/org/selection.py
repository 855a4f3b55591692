# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Helpers for the org lookup widget.

The widget posts three hidden fields: org_name (what the user typed),
org_crosswalk (the JSON results it was offered) and org_id, which holds
either the primary key of a local org or the JSON object of the result the
user picked, e.g.

    {"id": 12, "name": "Example University", "ror": "https://ror.org/0abc",
     "fundref": "https://doi.org/10.13039/5000"}
"""

import json
import logging

from roadmap.core.org.models import Identifier, IdentifierScheme, Org

logger = logging.getLogger(__name__)


def _selected_org_hash(params_in):
    """Return the selected org as a dict, or None if nothing was selected."""
    raw = params_in.get("org_id")
    if raw in (None, ""):
        return None
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, int):
        return {"id": raw}

    raw = str(raw).strip()
    if raw.isdigit():
        return {"id": int(raw)}
    try:
        selected = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring unparseable org selection {!r}".format(raw))
        return None
    return selected if isinstance(selected, dict) else None


def org_from_params(params_in):
    """Convert the org lookup selection into an Org.

    Returns the matching local org, a new unsaved Org for an external result
    that is not yet known locally, or None if nothing was selected.
    """
    selected = _selected_org_hash(params_in)
    if not selected:
        return None

    org_id = selected.get("id")
    if org_id not in (None, ""):
        try:
            return Org.objects.filter(pk=int(org_id)).first()
        except (TypeError, ValueError):
            return None

    name = selected.get("name")
    if not isinstance(name, str) or not name.strip():
        return None
    name = name.strip()
    return Org.objects.filter(name__iexact=name).first() or Org(name=name)


def identifiers_from_params(params_in):
    """Build unsaved Identifiers for each org scheme in the selected result."""
    selected = _selected_org_hash(params_in)
    if not selected:
        return []

    max_length = Identifier._meta.get_field("value").max_length
    identifiers = []
    for scheme in IdentifierScheme.objects.filter(active=True, for_orgs=True):
        value = selected.get(scheme.name)
        if not isinstance(value, str) or not value.strip():
            continue
        if len(value.strip()) > max_length:
            logger.warning("Ignoring over-long {} identifier in org selection".format(scheme.name))
            continue
        identifiers.append(Identifier(identifier_scheme=scheme, value=value.strip()))
    return identifiers
