"""
Configuration settings for Flutter code generation.
"""

from typing import Dict, Optional

import yaml
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


DEFAULT_SETTINGS = {
    'APP_NAME': 'flutter_app',
    'APP_TITLE': 'Flutter Demo',
    'APP_DESCRIPTION': 'A new Flutter project generated from whiteboard.',
    'SDK_CONSTRAINT': '>=3.0.0 <4.0.0',
    'DEPENDENCIES': {
        'cupertino_icons': '^1.0.6',
        'provider': '^6.1.1',
        'shared_preferences': '^2.2.2',
        'http': '^1.1.2',
    },
    'DEV_DEPENDENCIES': {
        'flutter_lints': '^3.0.1',
    },
}


class GeneratorConfig:
    """Project-level options for the generated Flutter app.

    Values come from the ``CANVAS_BUILDER`` dict in Django settings, falling
    back to ``DEFAULT_SETTINGS`` key by key. When Django settings are not
    configured at all (the generator used as a plain library) the defaults
    are used as-is. Keyword overrides win over both.
    """

    def __init__(self, overrides: Optional[Dict] = None):
        options = dict(DEFAULT_SETTINGS)
        if settings.configured:
            options.update(getattr(settings, 'CANVAS_BUILDER', None) or {})
        if overrides:
            options.update(overrides)

        self.app_name = self._package_name(options.get('APP_NAME'))
        self.app_title = str(options.get('APP_TITLE') or DEFAULT_SETTINGS['APP_TITLE'])
        self.app_description = str(
            options.get('APP_DESCRIPTION') or DEFAULT_SETTINGS['APP_DESCRIPTION'])
        self.sdk_constraint = str(
            options.get('SDK_CONSTRAINT') or DEFAULT_SETTINGS['SDK_CONSTRAINT'])
        self.dependencies = self._dependency_map(options.get('DEPENDENCIES'), 'DEPENDENCIES')
        self.dev_dependencies = self._dependency_map(
            options.get('DEV_DEPENDENCIES'), 'DEV_DEPENDENCIES')

    @staticmethod
    def _package_name(value) -> str:
        """Clean a value into a valid Dart package name"""
        name = str(value or '').strip().lower().replace('-', '_').replace(' ', '_')
        name = ''.join(c for c in name if (c.isascii() and c.isalnum()) or c == '_')
        if not name:
            return DEFAULT_SETTINGS['APP_NAME']
        # Ensure it starts with a letter
        if not name[0].isalpha():
            name = 'app_' + name
        return name

    @staticmethod
    def _dependency_map(value, key) -> Dict:
        """Accept a pubspec dependency map as a dict or as YAML text"""
        if not value:
            return {}

        try:
            if isinstance(value, str):
                parsed = yaml.safe_load(value)
            else:
                parsed = value
        except yaml.YAMLError as e:
            raise ImproperlyConfigured(f'Invalid YAML format in CANVAS_BUILDER[{key!r}]: {str(e)}')

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ImproperlyConfigured(f'CANVAS_BUILDER[{key!r}] must map package names to versions')
        # A bare "package:" entry means any version
        return {str(package): 'any' if version is None else version
                for package, version in parsed.items()}
