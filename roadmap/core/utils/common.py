# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# import the logging library
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

# Get an instance of a logger
logger = logging.getLogger(__name__)


def import_from_settings(attr, *args):
    """
    Load an attribute from the django settings.
    :raises:
        ImproperlyConfigured
    src: https://github.com/mozilla/mozilla-django-oidc
    """
    try:
        if args:
            return getattr(settings, attr, args[0])
        return getattr(settings, attr)
    except AttributeError:
        raise ImproperlyConfigured("Setting {0} not found".format(attr))


def get_domain_url(request):
    return request.build_absolute_uri().replace(request.get_full_path(), "")


def force_https(url):
    """Rewrite a plain http url to https; other urls are returned as-is."""
    if url.startswith("http:"):
        return "https:" + url[len("http:"):]
    return url


def success_message(obj, action):
    return "Successfully {} your {}.".format(action, obj._meta.verbose_name)


def failure_message(obj, action, errors=None):
    message = "Unable to {} your {}.".format(action, obj._meta.verbose_name)
    if errors:
        message = "{} {}".format(message, errors)
    return message


def form_errors_as_text(form):
    """Flatten a bound form's errors into a single line for flash messages."""
    errors = []
    for field, field_errors in form.errors.items():
        label = form.fields[field].label if field in form.fields else None
        for error in field_errors:
            errors.append("{}: {}".format(label, error) if label else error)
    return " ".join(errors)
