# File: canvas_builder/generators/flutter_generator.py

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from canvas_builder.config import GeneratorConfig
from canvas_builder.utils import validation
from .code_builder import sanitize_identifier
from .constants import (
    LEGACY_SCREEN_NAME, LEGACY_SCREEN_FILE, LEGACY_APP_BAR_TITLE, FLUTTER_CLASS_NAMES,
)
from .document import Document, Page
from .layout_analyzer import LayoutAnalyzer
from .property_mapper import PropertyMapper
from .screen_generator import ScreenGenerator, screen_identifier, screen_route

logger = logging.getLogger(__name__)

# Classes declared by the generated main.dart, plus the framework types the
# generated code uses
RESERVED_IDENTIFIERS = ('MyApp', 'AppNavigation') + tuple(sorted(FLUTTER_CLASS_NAMES))


@dataclass
class GeneratedScreen:
    display_name: str
    identifier: str
    file_text: str
    file_name: str
    route: str

    @property
    def path(self) -> str:
        return f"lib/screens/{self.file_name}"

    def as_dict(self) -> Dict[str, str]:
        return {
            'displayName': self.display_name,
            'identifier': self.identifier,
            'fileText': self.file_text,
        }


@dataclass
class GeneratedProject:
    manifest_file: str
    entry_point_file: str
    screens: List[GeneratedScreen] = field(default_factory=list)

    def files(self) -> Dict[str, str]:
        """Relative path -> contents, in a stable order"""
        files = OrderedDict()
        files['pubspec.yaml'] = self.manifest_file
        files['lib/main.dart'] = self.entry_point_file
        for screen in self.screens:
            files[screen.path] = screen.file_text
        return files

    def as_dict(self) -> Dict[str, Any]:
        return {
            'manifestFile': self.manifest_file,
            'entryPointFile': self.entry_point_file,
            'screens': [screen.as_dict() for screen in self.screens],
        }


@dataclass
class _PlannedScreen:
    page: Page
    display_name: str
    identifier: str


class FlutterGenerator:
    """Generates complete Flutter project code from a canvas document"""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.screen_generator = ScreenGenerator()

    def generate_project(self, data: Any) -> GeneratedProject:
        """Generate all project files for a raw canvas document"""
        for problem in validation.DocumentValidator.validate_document(data):
            logger.warning("Canvas document: %s", problem)

        document = Document.from_data(data)

        if document.multi_page and document.pages:
            screens = self._generate_multi_page_screens(document)
            entry_point = self._generate_main_dart_with_navigation(screens)
        else:
            components = document.pages[0].components if document.pages else []
            screens = [self._generate_home_screen(components)]
            entry_point = self._generate_main_dart()

        project = GeneratedProject(
            manifest_file=self._generate_pubspec(),
            entry_point_file=entry_point,
            screens=screens,
        )
        logger.info("Generated Flutter project %s: %d page(s), %d screen(s)",
                    self.config.app_name, len(document.pages), len(screens))
        return project

    # Screens

    def _generate_home_screen(self, components) -> GeneratedScreen:
        rows = LayoutAnalyzer.group_rows(components)
        file_text = self.screen_generator.generate_screen(
            rows, LEGACY_SCREEN_NAME, LEGACY_APP_BAR_TITLE, drawer_links=None)
        return GeneratedScreen(
            display_name=LEGACY_SCREEN_NAME,
            identifier=LEGACY_SCREEN_NAME,
            file_text=file_text,
            file_name=f"{LEGACY_SCREEN_FILE}.dart",
            route='/',
        )

    def _plan_screens(self, pages: List[Page]) -> List[_PlannedScreen]:
        """Assign each page a unique screen identifier.

        File names and routes are lower-cased, so identifiers that differ only
        by case collide too. The first page keeps its identifier; later ones
        get the page id appended.
        """
        taken = {name.lower() for name in RESERVED_IDENTIFIERS}
        planned = []
        for page in pages:
            base = screen_identifier(page.name, page.id)
            identifier = base
            if identifier.lower() in taken:
                identifier = f"{base}_{sanitize_identifier(page.id)}"
                suffix = 2
                candidate = identifier
                while candidate.lower() in taken:
                    candidate = f"{identifier}_{suffix}"
                    suffix += 1
                logger.warning("Screen name %s of page %s is already used; renamed to %s",
                               base, page.id, candidate)
                identifier = candidate
            taken.add(identifier.lower())
            planned.append(_PlannedScreen(
                page=page,
                display_name=page.name or identifier,
                identifier=identifier,
            ))
        return planned

    def _generate_multi_page_screens(self, document: Document) -> List[GeneratedScreen]:
        planned = self._plan_screens(document.pages)
        screens = []
        for plan in planned:
            links = [(other.display_name, screen_route(other.identifier))
                     for other in planned if other is not plan]
            rows = LayoutAnalyzer.group_rows(plan.page.components)
            file_text = self.screen_generator.generate_screen(
                rows, plan.identifier, plan.display_name, drawer_links=links)
            screens.append(GeneratedScreen(
                display_name=plan.display_name,
                identifier=plan.identifier,
                file_text=file_text,
                file_name=f"{plan.identifier.lower()}.dart",
                route=screen_route(plan.identifier),
            ))
        return screens

    # Entry point

    def _material_app_header(self) -> str:
        return f"""void main() {{
  runApp(const MyApp());
}}

class MyApp extends StatelessWidget {{
  const MyApp({{super.key}});

  @override
  Widget build(BuildContext context) {{
    return MaterialApp(
      title: {self._quote(self.config.app_title)},
      theme: ThemeData(
        primarySwatch: Colors.blue,
        visualDensity: VisualDensity.adaptivePlatformDensity,
      ),"""

    def _generate_main_dart(self) -> str:
        """Entry point for a single home screen"""
        return f"""import 'package:flutter/material.dart';
import 'package:{self.config.app_name}/screens/{LEGACY_SCREEN_FILE}.dart';

{self._material_app_header()}
      home: const {LEGACY_SCREEN_NAME}(),
    );
  }}
}}
"""

    def _generate_main_dart_with_navigation(self, screens: List[GeneratedScreen]) -> str:
        """Entry point with a named route per screen"""
        imports = '\n'.join(
            f"import 'package:{self.config.app_name}/screens/{screen.file_name}';"
            for screen in screens)
        routes = '\n'.join(
            f"        '{screen.route}': (context) => const {screen.identifier}(),"
            for screen in screens)

        return f"""import 'package:flutter/material.dart';
{imports}

{self._material_app_header()}
      initialRoute: '{screens[0].route}',
      routes: {{
{routes}
      }},
    );
  }}
}}

// Navigation helper
class AppNavigation {{
  static void navigateTo(BuildContext context, String routeName) {{
    Navigator.pushNamed(context, routeName);
  }}
}}
"""

    # Manifest

    def _generate_pubspec(self) -> str:
        """Generate pubspec.yaml"""
        config = self.config
        description = self._yaml_lines({'description': config.app_description})
        sdk = self._yaml_lines({'sdk': config.sdk_constraint}, indent=2)
        dependencies = self._yaml_lines(config.dependencies, indent=2)
        dev_dependencies = self._yaml_lines(config.dev_dependencies, indent=2)

        return f"""name: {config.app_name}
{description}

# Prevents the package from being accidentally published to pub.dev
publish_to: 'none'

version: 1.0.0+1

environment:
{sdk}

dependencies:
  flutter:
    sdk: flutter
{dependencies}

dev_dependencies:
  flutter_test:
    sdk: flutter
{dev_dependencies}

flutter:
  uses-material-design: true

  # To add assets to your application, add an assets section, like this:
  # assets:
  #   - images/a_dot_burr.jpeg
"""

    @staticmethod
    def _yaml_lines(mapping: Dict[str, Any], indent: int = 0) -> str:
        """Render a mapping as block YAML, quoting values only where YAML needs it"""
        if not mapping:
            return ''
        text = yaml.safe_dump(mapping, default_flow_style=False, sort_keys=False,
                              allow_unicode=True, width=4096)
        return '\n'.join(' ' * indent + line for line in text.rstrip('\n').split('\n'))

    @staticmethod
    def _quote(value: str) -> str:
        return PropertyMapper.dart_string(value)


def generate_flutter_code(data: Any, config: Optional[GeneratorConfig] = None) -> GeneratedProject:
    """Generate a Flutter project from a canvas document"""
    return FlutterGenerator(config).generate_project(data)
