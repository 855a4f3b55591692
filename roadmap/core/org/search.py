# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import requests
from django.db.models import Q

from roadmap.core.org.models import Org
from roadmap.core.utils.common import import_from_settings

ORG_SEARCH_ROR_API_URL = import_from_settings("ORG_SEARCH_ROR_API_URL", "https://api.ror.org/organizations")
ORG_SEARCH_TIMEOUT = import_from_settings("ORG_SEARCH_TIMEOUT", 5)

FUNDREF_DOI_PREFIX = "https://doi.org/10.13039/"

logger = logging.getLogger(__name__)


def _weight(name, search_term):
    """Lower is a better match: exact, then prefix, then anywhere."""
    name = name.lower()
    term = search_term.lower()
    if name == term:
        return 0
    if name.startswith(term):
        return 1
    return 2


def _local_result(org, search_term):
    result = {
        "id": org.pk,
        "name": org.name,
        "sort_name": org.name.lower(),
        "ror": None,
        "fundref": None,
        "weight": _weight(org.name, search_term),
    }
    for identifier in org.identifiers.all():
        scheme = identifier.identifier_scheme.name
        if scheme in ("ror", "fundref"):
            result[scheme] = identifier.value
    return result


def _external_result(item, search_term):
    fundref = None
    fundref_ids = (item.get("external_ids") or {}).get("FundRef") or {}
    preferred = fundref_ids.get("preferred") or next(iter(fundref_ids.get("all") or []), None)
    if preferred:
        fundref = FUNDREF_DOI_PREFIX + preferred

    name = item.get("name") or ""
    acronyms = item.get("acronyms") or []
    display = "{} ({})".format(name, acronyms[0]) if acronyms else name
    return {
        "id": None,
        "name": display,
        "sort_name": name.lower(),
        "ror": item.get("id"),
        "fundref": fundref,
        "weight": _weight(name, search_term),
    }


def _sorted(results):
    return sorted(results, key=lambda result: (result["weight"], result["sort_name"]))


def search_locally(search_term):
    """Search Orgs by name or abbreviation."""
    orgs = (
        Org.objects.filter(Q(name__icontains=search_term) | Q(abbreviation__icontains=search_term))
        .prefetch_related("identifiers__identifier_scheme")
        .distinct()
    )
    return _sorted([_local_result(org, search_term) for org in orgs])


def search_externally(search_term):
    """Search the ROR registry. Errors are logged and yield no results."""
    try:
        response = requests.get(
            ORG_SEARCH_ROR_API_URL,
            params={"query": search_term},
            headers={"Accept": "application/json"},
            timeout=ORG_SEARCH_TIMEOUT,
        )
        response.raise_for_status()
        items = response.json().get("items", [])
    except (requests.RequestException, ValueError) as e:
        logger.warning("ROR search for {!r} failed: {}".format(search_term, e))
        return []
    return _sorted([_external_result(item, search_term) for item in items])


def search_combined(search_term):
    """Local results first, then external results not already known locally."""
    local = search_locally(search_term)
    known = {result["sort_name"] for result in local}
    known_rors = {result["ror"] for result in local if result["ror"]}
    external = [
        result
        for result in search_externally(search_term)
        if result["sort_name"] not in known and result["ror"] not in known_rors
    ]
    return local + external


def search(search_term, search_type="local", funder_only=False):
    if search_type == "combined":
        orgs = search_combined(search_term)
    elif search_type == "external":
        orgs = search_externally(search_term)
    else:
        orgs = search_locally(search_term)

    # Restrict to funders, i.e. results with a fundref
    if funder_only:
        orgs = [org for org in orgs if (org.get("fundref") or "").strip()]
    return orgs
