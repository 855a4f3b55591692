# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Base Django settings for the Roadmap project.
"""

import os

from django.core.exceptions import ImproperlyConfigured
from django.core.management.utils import get_random_secret_key

import roadmap
from roadmap.config.env import ENV, PROJECT_ROOT

# ------------------------------------------------------------------------------
# Base Django config for Roadmap
# ------------------------------------------------------------------------------
VERSION = roadmap.VERSION
BASE_DIR = PROJECT_ROOT()
ALLOWED_HOSTS = ENV.list("ALLOWED_HOSTS", default=["*"])
DEBUG = ENV.bool("DEBUG", default=False)
WSGI_APPLICATION = "roadmap.config.wsgi.application"
ROOT_URLCONF = "roadmap.config.urls"

SECRET_KEY = ENV.str("SECRET_KEY", default="")
if len(SECRET_KEY) == 0:
    SECRET_KEY = get_random_secret_key()

# ------------------------------------------------------------------------------
# Locale settings
# ------------------------------------------------------------------------------
LANGUAGE_CODE = ENV.str("LANGUAGE_CODE", default="en-gb")
TIME_ZONE = ENV.str("TIME_ZONE", default="UTC")
USE_I18N = True
USE_TZ = True

# ------------------------------------------------------------------------------
# Django Apps
# ------------------------------------------------------------------------------
DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# django.contrib.sessions is replaced by roadmap.core.sessions, see auth.py
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

# Additional Apps
INSTALLED_APPS += [
    "crispy_forms",
    "crispy_bootstrap4",
    "simple_history",
]

# Roadmap Apps
INSTALLED_APPS += [
    "roadmap.core.utils",
    "roadmap.core.sessions",
    "roadmap.core.org",
    "roadmap.core.user",
]

# ------------------------------------------------------------------------------
# Django Middleware
# ------------------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "simple_history.middleware.HistoryRequestMiddleware",
]

# ------------------------------------------------------------------------------
# Django authentication backend. See auth.py
# ------------------------------------------------------------------------------
AUTHENTICATION_BACKENDS = []

# ------------------------------------------------------------------------------
# Django template and site settings
# ------------------------------------------------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [
            PROJECT_ROOT("site/templates"),
            "/usr/share/roadmap/site/templates",
            PROJECT_ROOT("roadmap/templates"),
        ],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "django_settings_export.settings_export",
            ],
        },
    },
]

# Add local site templates files if set
SITE_TEMPLATES = ENV.str("SITE_TEMPLATES", default="")
if len(SITE_TEMPLATES) > 0:
    if os.path.isdir(SITE_TEMPLATES):
        TEMPLATES[0]["DIRS"].insert(0, SITE_TEMPLATES)
    else:
        raise ImproperlyConfigured("SITE_TEMPLATES should be a path to a directory")

CRISPY_ALLOWED_TEMPLATE_PACKS = "bootstrap4"
CRISPY_TEMPLATE_PACK = "bootstrap4"
SETTINGS_EXPORT = []

STATIC_URL = "/static/"
STATIC_ROOT = ENV.str("STATIC_ROOT", default=PROJECT_ROOT("static_root"))

# Uploaded org logos
MEDIA_URL = "/media/"
MEDIA_ROOT = ENV.str("MEDIA_ROOT", default=PROJECT_ROOT("media_root"))
