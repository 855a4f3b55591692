# SPDX-FileCopyrightText: (C) ColdFront Authors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

from django.contrib.messages import constants as messages

from roadmap.config.env import ENV

# ------------------------------------------------------------------------------
# Roadmap logging config
# ------------------------------------------------------------------------------

MESSAGE_TAGS = {
    messages.DEBUG: "info",
    messages.INFO: "info",
    messages.SUCCESS: "success",
    messages.WARNING: "warning",
    messages.ERROR: "danger",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
        # 'file': {
        #     'class': 'logging.FileHandler',
        #     'filename': '/tmp/debug.log',
        # },
    },
    "loggers": {
        "roadmap": {
            "handlers": ["console"],
            "level": ENV.str("LOG_LEVEL", default="INFO"),
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}
