# File: canvas_builder/generators/widget_generator.py

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Union

from .code_builder import CodeBuilder, ScreenContext
from .constants import (
    WidgetKind, WIDGET_DEFAULTS, CHECKBOX_MULTIPLE_HEIGHT, CHECKBOX_SINGLE_HEIGHT,
    HEADING_TEXT_STYLES, BOTTOM_NAV_ICONS, DRAWER_ITEM_ICONS,
)
from .document import Component
from .layout_analyzer import LayoutAnalyzer
from .property_mapper import PropertyMapper

logger = logging.getLogger(__name__)

LISTVIEW_CONTROLLER_PREFIX = '_scrollController_'
RADIO_CONTROLLER_PREFIX = '_radioScrollController_'


class Scale(NamedTuple):
    """Names of the runtime scale variables, or None for fixed sizes"""
    horizontal: Optional[str] = None
    vertical: Optional[str] = None


NO_SCALE = Scale()


class WidgetGenerator:
    """Generates Flutter widget code from canvas components"""

    def __init__(self, context: Optional[ScreenContext] = None):
        self.context = context or ScreenContext()
        self.property_mapper = PropertyMapper()
        self._generators = {
            kind: getattr(self, f'_generate_{kind.value}') for kind in WidgetKind
        }

    def generate_widget(self, component: Union[Component, Dict[str, Any]], indent: int = 0,
                        horizontal_scale: Optional[str] = None,
                        vertical_scale: Optional[str] = None) -> str:
        """Generate Flutter code for a component.

        ``indent`` is the column the widget starts at. Sizes are emitted as
        ``<value> * <scale variable>`` only when both scale variables are given.
        """
        if not isinstance(component, Component):
            component_id = component.get('id', 'widget') if isinstance(component, dict) else 'widget'
            component = Component.from_data(component, component_id)

        if horizontal_scale and vertical_scale:
            scale = Scale(horizontal_scale, vertical_scale)
        else:
            scale = NO_SCALE

        properties = self.property_mapper.resolve_properties(component.kind, component.properties)
        return self._generators[component.kind](component, properties, indent, scale)

    # Shared helpers

    def _width(self, value, scale: Scale) -> str:
        return self.property_mapper.scaled(value, scale.horizontal)

    def _height(self, value, scale: Scale) -> str:
        return self.property_mapper.scaled(value, scale.vertical)

    def _string(self, value) -> str:
        return self.property_mapper.dart_string(value)

    def _double(self, value) -> str:
        return self.property_mapper.format_double(value)

    def _size_lines(self, b: CodeBuilder, props: Dict[str, Any], scale: Scale):
        b.line(f"width: {self._width(props['width'], scale)},")
        b.line(f"height: {self._height(props['height'], scale)},")

    def _child_widget(self, child: Component, indent: int, scale: Scale) -> str:
        return self.generate_widget(child, indent, scale.horizontal, scale.vertical)

    def _positioned_children(self, b: CodeBuilder, component: Component, scale: Scale):
        """Children placed at their own offsets inside the parent"""
        for child in LayoutAnalyzer.order(component.children):
            with b.block('Positioned('):
                b.line(f"left: {self._width(child.x, scale)},")
                b.line(f"top: {self._height(child.y, scale)},")
                b.embed(self._child_widget(child, b.indent, scale), prefix='child: ')

    def _listed_children(self, b: CodeBuilder, component: Component, scale: Scale):
        for child in component.children:
            b.embed(self._child_widget(child, b.indent, scale))

    def _wrapped_child(self, b: CodeBuilder, component: Component, scale: Scale, fallback: str):
        """``child:`` holding the first child, a Column of several, or a Text"""
        if len(component.children) == 1:
            b.embed(self._child_widget(component.children[0], b.indent, scale), prefix='child: ')
        elif component.children:
            with b.block('child: Column('):
                b.line('mainAxisSize: MainAxisSize.min,')
                with b.block('children: [', '],'):
                    self._listed_children(b, component, scale)
        else:
            b.line(f"child: Text({self._string(fallback)}),")

    def _text_items(self, b: CodeBuilder, items: List[Any]):
        for item in items:
            b.line(f"Text({self._string(item)}),")

    # Layout widgets

    def _generate_container(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line('padding: const EdgeInsets.all(10.0),')
            with b.block('decoration: BoxDecoration('):
                b.line(f"color: {self.property_mapper.map_color(props['bgColor'])},")
                b.line(f"borderRadius: BorderRadius.circular({self._double(props['borderRadius'])}),")
                with b.block('border: Border.all('):
                    b.lines('color: Colors.blue,', 'width: 1.0,', 'style: BorderStyle.solid,')
            if component.children:
                with b.block('child: Stack('):
                    with b.block('children: [', '],'):
                        if props['content']:
                            with b.block('Center('):
                                b.line(f"child: Text({self._string(props['content'])}),")
                        self._positioned_children(b, component, scale)
            elif props['content']:
                with b.block('child: const Center('):
                    b.line(f"child: Text({self._string(props['content'])}),")
            else:
                b.line('child: null,')
        return b.render()

    def _generate_column(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        return self._generate_linear(component, props, indent, scale, 'Column', 'MainAxisAlignment.center')

    def _generate_row(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        return self._generate_linear(component, props, indent, scale, 'Row', 'MainAxisAlignment.spaceEvenly')

    def _generate_linear(self, component: Component, props: Dict, indent: int, scale: Scale,
                         widget: str, alignment: str) -> str:
        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line(f"color: {self.property_mapper.map_color(props['bgColor'])},")
            with b.block(f'child: {widget}('):
                b.line(f'mainAxisAlignment: {alignment},')
                with b.block('children: [', '],'):
                    if component.children:
                        self._listed_children(b, component, scale)
                    else:
                        self._text_items(b, props['items'])
        return b.render()

    def _generate_stack(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line(f"color: {self.property_mapper.map_color(props['bgColor'])},")
            with b.block('child: Stack('):
                with b.block('children: [', '],'):
                    if component.children:
                        self._positioned_children(b, component, scale)
                    else:
                        with b.block('Center('):
                            b.line(f"child: Text({self._string(props['content'])}),")
        return b.render()

    def _generate_padding(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        padding = ', '.join(self._double(props[key]) for key in (
            'paddingLeft', 'paddingTop', 'paddingRight', 'paddingBottom'))
        b = CodeBuilder(indent)
        with b.block('Padding(', ')'):
            b.line(f'padding: EdgeInsets.fromLTRB({padding}),')
            self._wrapped_child(b, component, scale, props['content'])
        return b.render()

    def _generate_center(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Center(', ')'):
            self._wrapped_child(b, component, scale, props['content'])
        return b.render()

    def _generate_expanded(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Expanded(', ')'):
            with b.block('child: Container('):
                b.line('color: Colors.blue.shade50,')
                with b.block('child: Center('):
                    self._wrapped_child(b, component, scale, props['content'])
        return b.render()

    def _generate_sizedbox(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('SizedBox(', ')'):
            self._size_lines(b, props, scale)
        return b.render()

    def _generate_card(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Card(', ')'):
            with b.block('child: Padding('):
                b.line('padding: const EdgeInsets.all(16.0),')
                with b.block('child: Column('):
                    b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                    with b.block('children: [', '],'):
                        with b.block('Text('):
                            b.line(f"{self._string(props['title'])},")
                            with b.block('style: const TextStyle('):
                                b.lines('fontSize: 18,', 'fontWeight: FontWeight.bold,')
                        b.line('const SizedBox(height: 8),')
                        b.line(f"Text({self._string(props['content'])}),")
                        self._listed_children(b, component, scale)
        return b.render()

    # Content widgets

    def _generate_text(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        font_size = mapper.map_font_size(props)
        if props['textStyle'] in HEADING_TEXT_STYLES:
            font_weight = 'FontWeight.bold'
        else:
            font_weight = mapper.map_font_weight(props['fontWeight'])

        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line(f"color: {mapper.map_color(props['bgColor'])},")
            b.line('alignment: Alignment.center,')
            with b.block('child: Text('):
                b.line(f"{self._string(props['content'])},")
                b.line(f"textAlign: {mapper.map_text_align(props['textAlign'])},")
                with b.block('style: TextStyle('):
                    b.line(f'fontSize: {self._double(font_size)},')
                    b.line(f'fontWeight: {font_weight},')
                    b.line(f"color: {mapper.map_color(props['textColor'])},")
        return b.render()

    def _generate_image(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            with b.block('decoration: BoxDecoration('):
                b.line(f"color: {self.property_mapper.map_color(props['bgColor'])},")
                b.line('border: Border.all(color: Colors.grey.shade300),')
                b.line('borderRadius: BorderRadius.circular(4.0),')
            with b.block('child: Center('):
                with b.block('child: Text('):
                    b.line(f"{self._string(props['altText'])},")
                    with b.block('style: TextStyle('):
                        b.lines('color: Colors.grey.shade600,', 'fontSize: 14.0,')
        return b.render()

    def _generate_circleavatar(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('CircleAvatar(', ')'):
            b.line(f"backgroundColor: {self.property_mapper.map_color(props['bgColor'])},")
            b.line(f"radius: {self._width(props['radius'], scale)},")
            with b.block('child: Text('):
                b.line(f"{self._string(props['initials'])},")
                with b.block('style: const TextStyle('):
                    b.lines('color: Colors.white,', 'fontWeight: FontWeight.bold,')
        return b.render()

    def _generate_icon(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Icon(', ')'):
            b.line(f"{self.property_mapper.map_icon(props['icon'])},")
            b.line(f"size: {self._double(props['size'])},")
            b.line(f"color: {self.property_mapper.map_color(props['color'])},")
        return b.render()

    def _generate_table(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        headers = props['headers']
        text_color = mapper.map_color(props['textColor'])

        b = CodeBuilder(indent)
        with b.block('LayoutBuilder(', ')'):
            with b.block('builder: (context, constraints) {', '},'):
                b.line('final availableWidth = constraints.maxWidth;')
                b.line('final availableHeight = constraints.maxHeight;')
                b.line(f"final scaledWidth = {self._grouped(self._width(props['width'], scale))};")
                b.line(f"final scaledHeight = {self._grouped(self._height(props['height'], scale))};")
                b.line('final finalWidth = scaledWidth > availableWidth ? availableWidth : scaledWidth;')
                b.line('final finalHeight = scaledHeight > availableHeight ? availableHeight : scaledHeight;')
                b.line('final verticalController = ScrollController();')
                b.line('final horizontalController = ScrollController();')
                b.line()
                with b.block('return Container(', ');'):
                    b.lines('width: finalWidth,', 'height: finalHeight,')
                    b.line(f"color: {mapper.map_color(props['bgColor'])},")
                    with b.block('child: Column('):
                        b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                        with b.block('children: [', '],'):
                            if props['showTitle']:
                                self._table_title(b, props['tableTitle'], text_color, scale)
                            with b.block('Expanded('):
                                self._table_body(b, props, headers, text_color, scale)
        return b.render()

    @staticmethod
    def _grouped(expression: str) -> str:
        return f'({expression})' if ' ' in expression else expression

    def _table_title(self, b: CodeBuilder, title, text_color: str, scale: Scale):
        with b.block('Padding('):
            b.line('padding: const EdgeInsets.all(8.0),')
            with b.block('child: Text('):
                b.line(f'{self._string(title)},')
                with b.block('style: TextStyle('):
                    b.line(f'fontSize: {self._width(18, scale)},')
                    b.line('fontWeight: FontWeight.bold,')
                    b.line(f'color: {text_color},')

    def _table_body(self, b: CodeBuilder, props: Dict, headers: List[Any], text_color: str, scale: Scale):
        header_color = self.property_mapper.map_color(props['headerBgColor'])
        with b.block('child: Scrollbar('):
            b.lines('controller: verticalController,', 'thumbVisibility: true,',
                    'thickness: 8.0,', 'radius: const Radius.circular(4.0),')
            with b.block('child: SingleChildScrollView('):
                b.lines('controller: verticalController,', 'scrollDirection: Axis.vertical,')
                with b.block('child: Scrollbar('):
                    b.lines('controller: horizontalController,', 'thumbVisibility: true,',
                            'thickness: 8.0,', 'radius: const Radius.circular(4.0),')
                    with b.block('child: SingleChildScrollView('):
                        b.lines('controller: horizontalController,', 'scrollDirection: Axis.horizontal,')
                        with b.block('child: DataTable('):
                            b.line(f'headingRowColor: MaterialStateProperty.all({header_color}),')
                            b.line(f'columnSpacing: {self._width(20, scale)},')
                            b.line(f'horizontalMargin: {self._width(10, scale)},')
                            b.line(f'dataRowMinHeight: {self._height(48, scale)},')
                            b.line(f'dataRowMaxHeight: {self._height(64, scale)},')
                            with b.block('columns: [', '],'):
                                for header in headers:
                                    self._table_column(b, header, text_color)
                            with b.block('rows: [', '],'):
                                for row in props['rows']:
                                    self._table_row(b, row, len(headers))

    def _table_column(self, b: CodeBuilder, header, text_color: str):
        with b.block('DataColumn('):
            with b.block('label: Expanded('):
                with b.block('child: Text('):
                    b.line(f'{self._string(header)},')
                    with b.block('style: TextStyle('):
                        b.lines('fontWeight: FontWeight.bold,', f'color: {text_color},')
                    b.line('overflow: TextOverflow.ellipsis,')

    def _table_row(self, b: CodeBuilder, row, column_count: int):
        # DataTable requires exactly one cell per column
        cells = list(row)[:column_count] if isinstance(row, list) else []
        with b.block('DataRow('):
            with b.block('cells: [', '],'):
                for cell in cells:
                    with b.block('DataCell('):
                        with b.block('Text('):
                            b.line(f'{self._string(cell)},')
                            b.line('overflow: TextOverflow.ellipsis,')
                for _ in range(column_count - len(cells)):
                    b.line("DataCell(Text('')),")

    # Input widgets

    def _generate_elevatedbutton(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        b = CodeBuilder(indent)
        with b.block('SizedBox(', ')'):
            self._size_lines(b, props, scale)
            with b.block('child: ElevatedButton('):
                b.line('onPressed: () {},')
                with b.block('style: ElevatedButton.styleFrom('):
                    b.line(f"backgroundColor: {mapper.map_color(props['bgColor'])},")
                    b.line(f"foregroundColor: {mapper.map_color(props['textColor'])},")
                b.line(f"child: Text({self._string(props['text'])}),")
        return b.render()

    def _generate_textfield(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        label = props['label'] or props['labelText']
        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line('padding: const EdgeInsets.all(10.0),')
            with b.block('child: Column('):
                b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                with b.block('children: [', '],'):
                    with b.block('Text('):
                        b.line(f'{self._string(label)},')
                        with b.block('style: TextStyle('):
                            b.line(f"fontSize: {self._double(props['labelSize'])},")
                            b.line(f"color: {mapper.map_color(props['labelColor'])},")
                    b.line('const SizedBox(height: 5.0),')
                    with b.block('Container('):
                        with b.block('decoration: BoxDecoration('):
                            b.line(f"color: {mapper.map_color(props['bgColor'])},")
                            b.line('border: Border.all(color: Color(0xFFCCCCCC)),')
                            b.line('borderRadius: BorderRadius.circular(4.0),')
                        with b.block('child: TextField('):
                            with b.block('style: TextStyle('):
                                b.line(f"color: {mapper.map_color(props['textColor'])},")
                            with b.block('decoration: InputDecoration('):
                                b.line(f"hintText: {self._string(props['placeholder'])},")
                                b.line('contentPadding: const EdgeInsets.all(8.0),')
                                b.line('border: InputBorder.none,')
        return b.render()

    def _generate_checkbox(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        multiple = props['mode'] == 'multiple'
        height = mapper.to_number(props['height']) or (
            CHECKBOX_MULTIPLE_HEIGHT if multiple else CHECKBOX_SINGLE_HEIGHT)
        text_color = mapper.map_color(props['textColor'])

        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            b.line(f"width: {self._width(props['width'], scale)},")
            b.line(f'height: {self._height(height, scale)},')
            b.line(f"padding: const EdgeInsets.all({'8.0' if multiple else '6.0'}),")
            with b.block('decoration: BoxDecoration('):
                b.line(f"color: {mapper.map_color(props['bgColor'])},")
                b.line('borderRadius: BorderRadius.circular(8.0),')
                b.line('border: Border.all(color: Colors.grey.shade300, width: 0.5),')
            if not multiple:
                with b.block('child: Row('):
                    with b.block('children: [', '],'):
                        self._checkbox_entry(b, props['isChecked'], props['label'], text_color)
            else:
                with b.block('child: Column('):
                    b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                    with b.block('children: [', '],'):
                        self._checkbox_items(b, props['items'], text_color)
        return b.render()

    def _checkbox_items(self, b: CodeBuilder, items: List[Any], text_color: str):
        if not items:
            with b.block('Text('):
                b.line("'No checkboxes added',")
                with b.block('style: TextStyle('):
                    b.lines('fontSize: 16.0,', 'color: Colors.grey,', 'fontStyle: FontStyle.italic,')
            return

        for index, item in enumerate(items):
            if isinstance(item, dict):
                checked = bool(item.get('checked'))
                label = item.get('label') or f'Checkbox {index + 1}'
            else:
                checked = False
                label = item if item not in (None, '') else f'Checkbox {index + 1}'
            with b.block('Row('):
                with b.block('children: [', '],'):
                    self._checkbox_entry(b, checked, label, text_color)

    def _checkbox_entry(self, b: CodeBuilder, checked, label, text_color: str):
        with b.block('SizedBox('):
            b.lines('width: 16.0,', 'height: 16.0,')
            with b.block('child: Checkbox('):
                b.line(f'value: {self.property_mapper.map_bool(checked)},')
                b.lines('onChanged: (value) {},', 'activeColor: Colors.blue,',
                        'materialTapTargetSize: MaterialTapTargetSize.shrinkWrap,')
        b.line('const SizedBox(width: 6.0),')
        with b.block('Text('):
            b.line(f'{self._string(label)},')
            with b.block('style: TextStyle('):
                b.lines('fontSize: 13.0,', f'color: {text_color},')

    def _generate_radio(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        items = props['radioItems']
        b = CodeBuilder(indent)

        if not items:
            with b.block('Row(', ')'):
                with b.block('children: [', '],'):
                    self._radio_entry(b, props, 'bool', 'true',
                                      mapper.map_bool(props['isSelected']), props['label'])
            return b.render()

        controller = self.context.controller_for(RADIO_CONTROLLER_PREFIX, component.id)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line(f"padding: EdgeInsets.all({self._double(props['padding'])}),")
            with b.block('decoration: BoxDecoration('):
                b.line(f"color: {mapper.map_color(props['backgroundColor'])},")
                b.line(f"borderRadius: BorderRadius.circular({self._double(props['borderRadius'])}),")
                if props['borderWidth']:
                    with b.block('border: Border.all('):
                        b.line(f"color: {mapper.map_color(props['borderColor'])},")
                        b.line(f"width: {self._double(props['borderWidth'])},")
                else:
                    b.line('border: null,')
            with b.block('child: Column('):
                b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                with b.block('children: [', '],'):
                    if props['showGroupLabel']:
                        with b.block('Text('):
                            b.line(f"{self._string(props['groupLabel'])},")
                            with b.block('style: TextStyle('):
                                b.line(f"color: {mapper.map_color(props['textColor'])},")
                                b.line(f"fontSize: {self._double(props['groupLabelFontSize'])},")
                                b.line('fontWeight: FontWeight.bold,')
                        b.line('SizedBox(height: 8),')
                    with b.block('Expanded('):
                        with b.block('child: Scrollbar('):
                            b.lines('thumbVisibility: true,', 'thickness: 6.0,',
                                    'radius: const Radius.circular(4.0),', f'controller: {controller},')
                            with b.block('child: SingleChildScrollView('):
                                b.lines(f'controller: {controller},', 'physics: const BouncingScrollPhysics(),')
                                with b.block('child: Column('):
                                    b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                                    with b.block('children: [', '],'):
                                        self._radio_items(b, props, items)
        return b.render()

    def _radio_items(self, b: CodeBuilder, props: Dict, items: List[Any]):
        # Each Radio carries its own groupValue, so every selected item renders as checked
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                item = {'label': item}
            value = self.property_mapper.display_text(item.get('value')) or f'option{index + 1}'
            label = item.get('label') or f'Option {index + 1}'
            group_value = self._string(value) if item.get('isSelected') else 'null'
            with b.block('Row('):
                with b.block('children: [', '],'):
                    self._radio_entry(b, props, 'String', self._string(value), group_value, label)

    def _radio_entry(self, b: CodeBuilder, props: Dict, value_type: str, value: str,
                     group_value: str, label):
        mapper = self.property_mapper
        active = mapper.map_color(props['activeColor'])
        inactive = mapper.map_color(props['inactiveColor'])
        with b.block(f'Radio<{value_type}>('):
            b.line(f'value: {value},')
            b.line(f'groupValue: {group_value},')
            b.line(f'activeColor: {active},')
            with b.block('fillColor: MaterialStateProperty.resolveWith<Color>((Set<MaterialState> states) {', '}),'):
                with b.block('if (states.contains(MaterialState.selected)) {', '}'):
                    b.line(f'return {active};')
                b.line(f'return {inactive};')
            b.line('onChanged: (value) {},')
        b.line('SizedBox(width: 8),')
        with b.block('Text('):
            b.line(f'{self._string(label)},')
            with b.block('style: TextStyle('):
                b.line(f"color: {mapper.map_color(props['textColor'])},")
                b.line(f"fontSize: {self._double(props['fontSize'])},")
                b.line(f"fontWeight: {mapper.map_font_weight(props['fontWeight'])},")

    def _generate_select(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        text_color = mapper.map_color(props['textColor'])
        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line('padding: const EdgeInsets.all(8.0),')
            with b.block('decoration: BoxDecoration('):
                b.line(f"color: {mapper.map_color(props['bgColor'])},")
                b.line('borderRadius: BorderRadius.circular(8.0),')
                b.line('border: Border.all(color: Colors.grey.shade300),')
            with b.block('child: Column('):
                b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                with b.block('children: [', '],'):
                    with b.block('Padding('):
                        b.line('padding: const EdgeInsets.only(bottom: 8.0),')
                        with b.block('child: Text('):
                            b.line(f"{self._string(props['label'])},")
                            with b.block('style: TextStyle('):
                                b.lines('fontSize: 14.0,', f'color: {text_color},')
                    with b.block('Expanded('):
                        with b.block('child: DropdownButtonFormField<String>('):
                            with b.block('decoration: InputDecoration('):
                                b.line('contentPadding: const EdgeInsets.symmetric(horizontal: 12.0, vertical: 8.0),')
                                with b.block('border: OutlineInputBorder('):
                                    b.line('borderRadius: BorderRadius.circular(4.0),')
                                b.lines('filled: true,', 'fillColor: Colors.white,')
                            b.line(f"hint: Text({self._string(props['placeholder'])}),")
                            b.lines('isExpanded: true,', 'icon: const Icon(Icons.arrow_drop_down),')
                            with b.block('style: TextStyle('):
                                b.lines(f'color: {text_color},', 'fontSize: 16.0,')
                            b.line('onChanged: (String? value) {},')
                            with b.block('items: [', '],'):
                                for option in props['options']:
                                    with b.block('DropdownMenuItem<String>('):
                                        b.line(f'value: {self._string(option)},')
                                        b.line(f'child: Text({self._string(option)}),')
        return b.render()

    def _generate_switch(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Switch(', ')'):
            b.line(f"value: {self.property_mapper.map_bool(props['isActive'])},")
            b.line('onChanged: (value) {},')
        return b.render()

    def _generate_slider(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        value = min(max(props['value'], 0), 100)
        b = CodeBuilder(indent)
        with b.block('Slider(', ')'):
            b.line(f'value: {self._double(value)},')
            b.lines('min: 0,', 'max: 100,', 'onChanged: (value) {},')
        return b.render()

    # Navigation widgets

    def _generate_appbar(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('AppBar(', ')'):
            b.line(f"title: Text({self._string(props['title'])}),")
            with b.block('actions: [', '],'):
                with b.block('IconButton('):
                    b.lines('icon: const Icon(Icons.more_vert),', 'onPressed: () {},')
        return b.render()

    def _generate_bottomnavigationbar(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('BottomNavigationBar(', ')'):
            b.lines('currentIndex: 0,', 'onTap: (index) {},')
            with b.block('items: [', '],'):
                for index, item in enumerate(props['items']):
                    icon = BOTTOM_NAV_ICONS[min(index, len(BOTTOM_NAV_ICONS) - 1)]
                    with b.block('BottomNavigationBarItem('):
                        b.line(f'icon: Icon({icon}),')
                        b.line(f'label: {self._string(item)},')
        return b.render()

    def _generate_floatingactionbutton(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        icon = self.property_mapper.map_icon(props['icon'], default='Icons.add')
        b = CodeBuilder(indent)
        with b.block('FloatingActionButton(', ')'):
            b.line('onPressed: () {},')
            b.line(f'child: const Icon({icon}),')
        return b.render()

    def _generate_listtile(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('ListTile(', ')'):
            b.line('leading: const Icon(Icons.star),')
            b.line(f"title: Text({self._string(props['title'])}),")
            b.line(f"subtitle: Text({self._string(props['subtitle'])}),")
            b.lines('trailing: const Icon(Icons.arrow_forward_ios),', 'onTap: () {},')
        return b.render()

    def _generate_drawer(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('Drawer(', ')'):
            with b.block('child: ListView('):
                b.line('padding: EdgeInsets.zero,')
                with b.block('children: [', '],'):
                    with b.block('DrawerHeader('):
                        with b.block('decoration: const BoxDecoration('):
                            b.line('color: Colors.blue,')
                        with b.block('child: Text('):
                            b.line(f"{self._string(props['title'])},")
                            with b.block('style: const TextStyle('):
                                b.lines('color: Colors.white,', 'fontSize: 24,')
                    for index, item in enumerate(props['items']):
                        icon = DRAWER_ITEM_ICONS[min(index, len(DRAWER_ITEM_ICONS) - 1)]
                        with b.block('ListTile('):
                            b.line(f'leading: Icon({icon}),')
                            b.line(f'title: Text({self._string(item)}),')
                            b.line('onTap: () {},')
        return b.render()

    def _generate_tabbar(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        tabs = props['tabs'] or list(WIDGET_DEFAULTS[WidgetKind.TABBAR]['tabs'])
        display_text = self.property_mapper.display_text
        b = CodeBuilder(indent)
        with b.block('DefaultTabController(', ')'):
            b.line(f'length: {len(tabs)},')
            with b.block('child: Column('):
                with b.block('children: [', '],'):
                    with b.block('TabBar('):
                        with b.block('tabs: [', '],'):
                            for tab in tabs:
                                b.line(f'Tab(text: {self._string(tab)}),')
                    with b.block('Expanded('):
                        with b.block('child: TabBarView('):
                            with b.block('children: [', '],'):
                                for tab in tabs:
                                    content = self._string(f'{display_text(tab)} Content')
                                    b.line(f'Center(child: Text({content})),')
        return b.render()

    def _generate_snackbar(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        b = CodeBuilder(indent)
        with b.block('ElevatedButton(', ')'):
            with b.block('onPressed: () {', '},'):
                with b.block('ScaffoldMessenger.of(context).showSnackBar(', ');'):
                    with b.block('SnackBar('):
                        b.line(f"content: Text({self._string(props['message'])}),")
                        with b.block('action: SnackBarAction('):
                            b.lines("label: 'Action',", 'onPressed: () {},')
            b.line("child: const Text('Show SnackBar'),")
        return b.render()

    def _generate_listview(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        mapper = self.property_mapper
        horizontal = props['scrollDirection'] == 'horizontal'
        show_scrollbar = props['showScrollbar']
        controller = None
        if show_scrollbar:
            controller = self.context.controller_for(LISTVIEW_CONTROLLER_PREFIX, component.id)

        margin = ', '.join(self._double(props[key]) for key in (
            'marginLeft', 'marginTop', 'marginRight', 'marginBottom'))

        b = CodeBuilder(indent)
        with b.block('Container(', ')'):
            self._size_lines(b, props, scale)
            b.line(f'margin: EdgeInsets.fromLTRB({margin}),')
            with b.block('decoration: BoxDecoration('):
                b.line(f"color: {mapper.map_color(props['bgColor'])},")
                b.line('borderRadius: BorderRadius.circular(4),')
                b.line('border: Border.all(color: Colors.grey.shade300),')
            b.line('clipBehavior: Clip.antiAlias,')
            with b.block('child: Column('):
                b.line('crossAxisAlignment: CrossAxisAlignment.start,')
                with b.block('children: [', '],'):
                    if props['title']:
                        self._listview_title(b, props)
                    with b.block('Expanded('):
                        if controller:
                            with b.block('child: Scrollbar('):
                                b.lines('thickness: 6.0,', 'radius: const Radius.circular(8.0),',
                                        'thumbVisibility: true,', f'controller: {controller},')
                                self._listview_body(b, props, horizontal, controller, scale)
                        else:
                            self._listview_body(b, props, horizontal, None, scale)
        return b.render()

    def _listview_title(self, b: CodeBuilder, props: Dict):
        padding = ', '.join(self._double(props[key]) for key in ('paddingLeft', 'paddingTop', 'paddingRight'))
        with b.block('Padding('):
            b.line(f'padding: EdgeInsets.fromLTRB({padding}, 4.0),')
            with b.block('child: Text('):
                b.line(f"{self._string(props['title'])},")
                b.line('style: const TextStyle(fontWeight: FontWeight.bold, fontSize: 16),')

    def _listview_body(self, b: CodeBuilder, props: Dict, horizontal: bool,
                       controller: Optional[str], scale: Scale):
        padding_left = self._double(props['paddingLeft'])
        padding_right = self._double(props['paddingRight'])
        padding_bottom = self._double(props['paddingBottom'])
        with b.block('child: ListView('):
            if controller:
                b.line(f'controller: {controller},')
            b.line(f"scrollDirection: {'Axis.horizontal' if horizontal else 'Axis.vertical'},")
            b.line('physics: const BouncingScrollPhysics(),')
            b.line(f'padding: EdgeInsets.fromLTRB({padding_left}, 4.0, {padding_right}, {padding_bottom}),')
            with b.block('children: [', '],'):
                for item in props['items']:
                    self._listview_card(b, props, item, horizontal, scale)

    def _listview_card(self, b: CodeBuilder, props: Dict, item, horizontal: bool, scale: Scale):
        card_height = self.property_mapper.to_number(props['cardHeight'])
        spacing = self._double(props['spacing'])
        with b.block('Card('):
            b.line('elevation: 2.0,')
            b.line(f"margin: EdgeInsets.only({'right' if horizontal else 'bottom'}: {spacing}),")
            with b.block('shape: RoundedRectangleBorder('):
                b.line('borderRadius: BorderRadius.circular(8.0),')
            with b.block('child: Container('):
                b.line(f"width: {self._width(props['cardWidth'], scale)},")
                if card_height:
                    b.line(f'height: {self._height(card_height, scale)},')
                with b.block('constraints: BoxConstraints('):
                    b.lines('minWidth: 100.0,', 'minHeight: 20.0,')
                b.lines('padding: const EdgeInsets.all(12),', 'alignment: Alignment.center,')
                if horizontal:
                    with b.block('child: Column('):
                        b.line('mainAxisAlignment: MainAxisAlignment.center,')
                        with b.block('children: [', '],'):
                            with b.block('Text('):
                                b.line(f'{self._string(item)},')
                                b.line('textAlign: TextAlign.center,')
                                b.line('style: const TextStyle(fontWeight: FontWeight.w500),')
                else:
                    with b.block('child: Text('):
                        b.line(f'{self._string(item)},')
                        b.line('style: const TextStyle(fontWeight: FontWeight.w500),')

    def _generate_unknown(self, component: Component, props: Dict, indent: int, scale: Scale) -> str:
        logger.debug("No generator for component %s of type %r", component.id, component.type)
        placeholder = self._string(f'Unsupported component: {component.type}')
        return f"{' ' * indent}const Text({placeholder})"
