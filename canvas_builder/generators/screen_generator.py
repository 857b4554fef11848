"""Screen assembly: one Dart file per canvas page"""

import re
import logging
from typing import List, Optional, Sequence, Tuple

from .code_builder import CodeBuilder, ScreenContext, sanitize_identifier
from .constants import (
    REFERENCE_WIDTH, REFERENCE_HEIGHT, HORIZONTAL_SCALE_VAR, VERTICAL_SCALE_VAR, INDENT_STEP,
)
from .document import Component
from .layout_analyzer import LayoutAnalyzer
from .property_mapper import PropertyMapper
from .widget_generator import WidgetGenerator

logger = logging.getLogger(__name__)

NAME_UNSAFE = re.compile(r'[^A-Za-z0-9 ]')

# Column of the entries in the screen Stack's children list:
# class > build > Scaffold > SingleChildScrollView > Container > Stack > children
BODY_INDENT = 7 * INDENT_STEP

# (display name, route) of the pages a screen's drawer links to
DrawerLink = Tuple[str, str]


def screen_identifier(name, page_id) -> str:
    """Derive a Dart class name from a page name, falling back to its id"""
    identifier = NAME_UNSAFE.sub('', name if isinstance(name, str) else '').replace(' ', '_')
    if not identifier:
        identifier = f"Screen_{sanitize_identifier(page_id)}"
    elif not identifier[0].isalpha():
        identifier = f"Screen_{identifier}"
    return identifier[0].upper() + identifier[1:]


def screen_route(identifier: str) -> str:
    return f"/{identifier.lower()}"


class ScreenGenerator:
    """Renders a page's components as a StatelessWidget screen"""

    def __init__(self):
        self.property_mapper = PropertyMapper()

    def generate_screen(self, rows: Sequence[Sequence[Component]], class_name: str,
                        title: str, drawer_links: Optional[List[DrawerLink]] = None) -> str:
        """
        Generate the source of one screen file.

        Args:
            rows: Component rows as produced by ``LayoutAnalyzer.group_rows``
            class_name: Dart class name of the screen
            title: App bar title
            drawer_links: Pages to link from a navigation drawer; ``None``
                renders no drawer at all

        Returns:
            Complete Dart file contents
        """
        context = ScreenContext()
        widget_generator = WidgetGenerator(context)
        components = LayoutAnalyzer.flatten(rows)

        # Widgets are generated first so every hoisted controller is known
        body = CodeBuilder(BODY_INDENT)
        for component in components:
            self._positioned(body, widget_generator, component)

        logger.debug("Screen %s: %d component(s), %d controller(s)",
                     class_name, len(components), len(context.controllers))

        b = CodeBuilder()
        b.lines(*context.import_lines())
        b.line()
        with b.block(f'class {class_name} extends StatelessWidget {{', '}'):
            b.line(f'const {class_name}({{super.key}});')
            b.line()
            b.line('@override')
            with b.block('Widget build(BuildContext context) {', '}'):
                self._scale_declarations(b)
                if context.controllers:
                    b.line()
                    b.lines(*context.declarations())
                b.line()
                with b.block('return Scaffold(', ');'):
                    with b.block('appBar: AppBar('):
                        b.line(f'title: Text({self.property_mapper.dart_string(title)}),')
                    if drawer_links is not None:
                        self._drawer(b, drawer_links)
                    with b.block('body: SingleChildScrollView('):
                        with b.block('child: Container('):
                            b.line('width: screenSize.width,')
                            b.line('height: screenSize.height - AppBar().preferredSize.height'
                                   ' - MediaQuery.of(context).padding.top,')
                            with b.block('child: Stack('):
                                with b.block('children: [', '],'):
                                    if components:
                                        b.embed(body.render(), suffix='')
        return b.render() + '\n'

    def _scale_declarations(self, b: CodeBuilder):
        b.line('final screenSize = MediaQuery.of(context).size;')
        b.line()
        b.line(f'// Scale factors against the {REFERENCE_WIDTH}x{REFERENCE_HEIGHT} design canvas')
        b.line(f'final {HORIZONTAL_SCALE_VAR} = screenSize.width / '
               f'{self.property_mapper.format_double(REFERENCE_WIDTH)};')
        b.line(f'final {VERTICAL_SCALE_VAR} = screenSize.height / '
               f'{self.property_mapper.format_double(REFERENCE_HEIGHT)};')

    def _positioned(self, b: CodeBuilder, widget_generator: WidgetGenerator, component: Component):
        mapper = self.property_mapper
        with b.block('Positioned('):
            b.line(f'left: {mapper.scaled(component.x, HORIZONTAL_SCALE_VAR)},')
            b.line(f'top: {mapper.scaled(component.y, VERTICAL_SCALE_VAR)},')
            widget = widget_generator.generate_widget(
                component, b.indent, HORIZONTAL_SCALE_VAR, VERTICAL_SCALE_VAR)
            b.embed(widget, prefix='child: ')

    def _drawer(self, b: CodeBuilder, links: List[DrawerLink]):
        with b.block('drawer: Drawer('):
            with b.block('child: ListView('):
                b.line('padding: EdgeInsets.zero,')
                with b.block('children: <Widget>[', '],'):
                    with b.block('const DrawerHeader('):
                        with b.block('decoration: BoxDecoration('):
                            b.line('color: Colors.blue,')
                        with b.block('child: Text('):
                            b.line("'Navigation',")
                            with b.block('style: TextStyle('):
                                b.lines('color: Colors.white,', 'fontSize: 24,')
                    for name, route in links:
                        with b.block('ListTile('):
                            b.line('leading: const Icon(Icons.screen_share),')
                            b.line(f'title: Text({self.property_mapper.dart_string(name)}),')
                            with b.block('onTap: () {', '},'):
                                b.line(f"Navigator.pushNamed(context, '{route}');")
