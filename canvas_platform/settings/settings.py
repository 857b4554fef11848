import os

from .common import (BASE_DIR, INSTALLED_APPS, MIDDLEWARE, DATABASES,
                     SECRET_KEY, DEBUG, ALLOWED_HOSTS, LANGUAGE_CODE,
                     TIME_ZONE, USE_I18N, USE_TZ, DEFAULT_AUTO_FIELD)

from os import environ as ENV
from dotenv import load_dotenv
# Load the environment variables from the .env file
load_dotenv()

DEBUG = DEBUG
BASE_DIR = BASE_DIR
INSTALLED_APPS = INSTALLED_APPS
MIDDLEWARE = MIDDLEWARE
DATABASES = DATABASES
SECRET_KEY = SECRET_KEY
ALLOWED_HOSTS = ALLOWED_HOSTS
LANGUAGE_CODE = LANGUAGE_CODE
TIME_ZONE = TIME_ZONE
USE_I18N = USE_I18N
USE_TZ = USE_TZ
DEFAULT_AUTO_FIELD = DEFAULT_AUTO_FIELD

INSTALLED_APPS += [
    'canvas_builder',
]


# Flutter code generation
# Everything here ends up in the generated pubspec.yaml / main.dart and is
# independent of the canvas document being exported.
CANVAS_BUILDER = {
    'APP_NAME': ENV.get('CANVAS_APP_NAME', 'flutter_app'),
    'APP_TITLE': ENV.get('CANVAS_APP_TITLE', 'Flutter Demo'),
    'APP_DESCRIPTION': 'A new Flutter project generated from whiteboard.',
    'SDK_CONSTRAINT': '>=3.0.0 <4.0.0',
    # YAML mappings, e.g. "provider: ^6.1.1\nhttp: ^1.1.2"
    'DEPENDENCIES': ENV.get('CANVAS_DEPENDENCIES') or {
        'cupertino_icons': '^1.0.6',
        'provider': '^6.1.1',
        'shared_preferences': '^2.2.2',
        'http': '^1.1.2',
    },
    'DEV_DEPENDENCIES': ENV.get('CANVAS_DEV_DEPENDENCIES') or {
        'flutter_lints': '^3.0.1',
    },
}


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'canvas_builder': {
            'handlers': ['console'],
            'level': ENV.get('CANVAS_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
