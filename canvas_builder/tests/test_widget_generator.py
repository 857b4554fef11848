import logging

from django.test import SimpleTestCase

from canvas_builder.generators import generate_flutter_code
from canvas_builder.generators.code_builder import ScreenContext
from canvas_builder.generators.constants import WidgetKind, WIDGET_DEFAULTS
from canvas_builder.generators.widget_generator import WidgetGenerator

SCALE = ('horizontalScale', 'verticalScale')


class WidgetGeneratorTest(SimpleTestCase):
    """Test cases for per-kind widget generation"""

    def setUp(self):
        self.context = ScreenContext()
        self.generator = WidgetGenerator(self.context)

    def generate(self, component, indent=0, scaled=False):
        component.setdefault('id', 'w1')
        if scaled:
            return self.generator.generate_widget(component, indent, *SCALE)
        return self.generator.generate_widget(component, indent)

    def test_every_kind_renders_balanced_code(self):
        for kind in WidgetKind:
            if kind is WidgetKind.UNKNOWN:
                continue
            with self.subTest(kind=kind.value):
                code = self.generate({'type': kind.value}, scaled=True)
                self.assertTrue(code)
                self.assertEqual(code.count('('), code.count(')'))
                self.assertEqual(code.count('['), code.count(']'))
                self.assertEqual(code.count('{'), code.count('}'))

    def test_unknown_kind_placeholder(self):
        code = self.generate({'type': 'frobnicator'})
        self.assertEqual(code, "const Text('Unsupported component: frobnicator')")

    def test_missing_type_placeholder(self):
        code = self.generate({'x': 5})
        self.assertEqual(code, "const Text('Unsupported component: ')")

    def test_scaled_sizes(self):
        code = self.generate({'type': 'container', 'width': 200, 'height': 100}, scaled=True)

        self.assertIn('width: 200.0 * horizontalScale,', code)
        self.assertIn('height: 100.0 * verticalScale,', code)

    def test_unscaled_sizes(self):
        code = self.generate({'type': 'container', 'width': 200, 'height': 100})

        self.assertIn('width: 200.0,', code)
        self.assertIn('height: 100.0,', code)

    def test_scaling_needs_both_variables(self):
        code = self.generator.generate_widget({'type': 'sizedbox'}, 0, 'horizontalScale', None)
        self.assertIn('width: 100.0,', code)

    def test_indentation(self):
        code = self.generate({'type': 'text'}, indent=4)

        for line in code.split('\n'):
            self.assertTrue(line.startswith('    '), line)
        self.assertTrue(code.startswith('    Container('))
        self.assertTrue(code.endswith('    )'))

    def test_button_alias(self):
        code = self.generate({'type': 'Button', 'text': 'Go'})

        self.assertTrue(code.startswith('SizedBox('))
        self.assertIn("child: Text('Go'),", code)

    def test_text_is_escaped(self):
        code = self.generate({'type': 'text', 'content': "it's $1"})
        self.assertIn("'it\\'s \\$1',", code)

    def test_heading_is_bold(self):
        code = self.generate({'type': 'text', 'textStyle': 'h2', 'fontWeight': 'normal'})
        self.assertIn('fontWeight: FontWeight.bold,', code)

    def test_text_colors(self):
        code = self.generate({'type': 'text', 'textColor': '#abc'})

        self.assertIn('color: Color(0xFFABC000),', code)
        self.assertIn('color: Colors.transparent,', code)

    def test_icon_glyph(self):
        code = self.generate({'type': 'icon', 'icon': '♥'})
        self.assertIn('Icons.favorite,', code)

    def test_deterministic(self):
        component = {'type': 'table', 'headers': ['A', 'B']}
        first = WidgetGenerator().generate_widget(dict(component), 0, *SCALE)
        second = WidgetGenerator().generate_widget(dict(component), 0, *SCALE)
        self.assertEqual(first, second)


class ContainerChildrenTest(SimpleTestCase):
    """Test cases for container-like kinds with children"""

    def setUp(self):
        self.generator = WidgetGenerator()

    def test_container_positions_children(self):
        code = self.generator.generate_widget({
            'id': 'box', 'type': 'container',
            'children': [{'id': 'inner', 'type': 'text', 'x': 10, 'y': 20, 'content': 'Inside'}],
        }, 0, *SCALE)

        self.assertIn('Positioned(', code)
        self.assertIn('left: 10.0 * horizontalScale,', code)
        self.assertIn('top: 20.0 * verticalScale,', code)
        self.assertIn("'Inside',", code)

    def test_column_lists_children_instead_of_items(self):
        code = self.generator.generate_widget({
            'id': 'col', 'type': 'column',
            'children': [{'type': 'text', 'content': 'Inner'}],
        })

        self.assertIn("'Inner',", code)
        self.assertNotIn("Text('Item 1')", code)

    def test_center_wraps_single_child(self):
        code = self.generator.generate_widget({
            'id': 'c', 'type': 'center', 'children': [{'type': 'icon'}],
        })

        self.assertIn('child: Icon(', code)
        self.assertNotIn('Centered Content', code)

    def test_padding_wraps_several_children_in_column(self):
        code = self.generator.generate_widget({
            'id': 'p', 'type': 'padding', 'children': [{'type': 'icon'}, {'type': 'switch'}],
        })

        self.assertIn('child: Column(', code)
        self.assertIn('Switch(', code)

    def test_padding_values(self):
        code = self.generator.generate_widget({
            'id': 'p', 'type': 'padding', 'paddingLeft': 4, 'paddingTop': 8,
        })
        self.assertIn('padding: EdgeInsets.fromLTRB(4.0, 8.0, 16.0, 16.0),', code)


class ControllerHoistingTest(SimpleTestCase):
    """Test cases for ScrollController allocation"""

    def setUp(self):
        self.context = ScreenContext()
        self.generator = WidgetGenerator(self.context)

    def test_listview_controller(self):
        code = self.generator.generate_widget({'id': 'list-1', 'type': 'listview'})

        self.assertEqual(self.context.controllers, ['_scrollController_list_1'])
        self.assertIn('controller: _scrollController_list_1,', code)

    def test_listview_without_scrollbar(self):
        code = self.generator.generate_widget(
            {'id': 'list-1', 'type': 'listview', 'showScrollbar': False})

        self.assertEqual(self.context.controllers, [])
        self.assertNotIn('Scrollbar(', code)
        self.assertIn('ListView(', code)

    def test_horizontal_listview(self):
        code = self.generator.generate_widget(
            {'id': 'l', 'type': 'listview', 'scrollDirection': 'horizontal', 'cardHeight': 60})

        self.assertIn('scrollDirection: Axis.horizontal,', code)
        self.assertIn('margin: EdgeInsets.only(right: 4.0),', code)
        self.assertIn('height: 60.0,', code)

    def test_radio_controller_for_default_items(self):
        code = self.generator.generate_widget({'id': 'r1', 'type': 'radio'})

        self.assertEqual(self.context.controllers, ['_radioScrollController_r1'])
        self.assertIn('controller: _radioScrollController_r1,', code)

    def test_sanitized_ids_do_not_clash(self):
        self.generator.generate_widget({'id': 'a-b', 'type': 'listview'})
        self.generator.generate_widget({'id': 'a_b', 'type': 'listview'})

        self.assertEqual(self.context.controllers, ['_scrollController_a_b', '_scrollController_a_b_2'])
        self.assertEqual(self.context.declarations()[1], 'final _scrollController_a_b_2 = ScrollController();')


class RadioTest(SimpleTestCase):
    """Test cases for radio modes"""

    def setUp(self):
        self.context = ScreenContext()
        self.generator = WidgetGenerator(self.context)

    def test_each_item_has_its_own_group_value(self):
        code = self.generator.generate_widget({'id': 'r', 'type': 'radio', 'radioItems': [
            {'value': 'a', 'label': 'A', 'isSelected': True},
            {'value': 'b', 'label': 'B'},
            {'value': 'c', 'label': 'C', 'isSelected': True},
        ]})

        self.assertEqual(code.count('Radio<String>('), 3)
        self.assertIn("groupValue: 'a',", code)
        self.assertIn('groupValue: null,', code)
        self.assertIn("groupValue: 'c',", code)

    def test_empty_items_render_single_radio(self):
        code = self.generator.generate_widget(
            {'id': 'r', 'type': 'radio', 'radioItems': [], 'isSelected': True, 'label': 'Only'})

        self.assertTrue(code.startswith('Row('))
        self.assertIn('Radio<bool>(', code)
        self.assertIn('groupValue: true,', code)
        self.assertEqual(self.context.controllers, [])

    def test_border_and_font_weight(self):
        code = self.generator.generate_widget(
            {'id': 'r', 'type': 'radio', 'borderWidth': 2, 'fontWeight': 'bold', 'showGroupLabel': True})

        self.assertIn('border: Border.all(', code)
        self.assertIn('width: 2.0,', code)
        self.assertIn('fontWeight: FontWeight.bold,', code)
        self.assertIn("'Radio Group',", code)


class TableAndListTest(SimpleTestCase):

    def setUp(self):
        self.generator = WidgetGenerator()

    def test_table_rows_match_header_count(self):
        code = self.generator.generate_widget({'id': 't', 'type': 'table',
                                               'headers': ['A', 'B', 'C'],
                                               'rows': [['1'], ['1', '2', '3', '4'], 'oops']})

        self.assertEqual(code.count('DataColumn('), 3)
        self.assertEqual(code.count('DataRow('), 3)
        self.assertEqual(code.count("DataCell(Text('')),"), 5)
        self.assertNotIn("'4'", code)

    def test_table_scaling(self):
        code = self.generator.generate_widget({'id': 't', 'type': 'table'}, 0, *SCALE)

        self.assertIn('final scaledWidth = (500.0 * horizontalScale);', code)
        self.assertIn('columnSpacing: 20.0 * horizontalScale,', code)
        self.assertIn('dataRowMaxHeight: 64.0 * verticalScale,', code)

    def test_table_without_title(self):
        code = self.generator.generate_widget({'id': 't', 'type': 'table', 'showTitle': False})
        self.assertNotIn('Data Table', code)

    def test_tabbar_tab_count(self):
        code = self.generator.generate_widget({'id': 't', 'type': 'tabbar', 'tabs': ['A', 'B']})

        self.assertIn('length: 2,', code)
        self.assertIn("Center(child: Text('A Content')),", code)
        self.assertIn("Center(child: Text('B Content')),", code)

    def test_empty_tabbar_uses_default_tabs(self):
        code = self.generator.generate_widget({'id': 't', 'type': 'tabbar', 'tabs': []})

        self.assertIn('length: 3,', code)
        self.assertEqual(code.count('Tab(text:'), 3)

    def test_checkbox_modes(self):
        single = self.generator.generate_widget({'id': 'c', 'type': 'checkbox'})
        multiple = self.generator.generate_widget({'id': 'c', 'type': 'checkbox', 'mode': 'multiple'})

        self.assertIn('height: 50.0,', single)
        self.assertIn("'Checkbox',", single)
        self.assertIn('height: 200.0,', multiple)
        self.assertIn('No checkboxes added', multiple)

    def test_checkbox_items(self):
        code = self.generator.generate_widget({'id': 'c', 'type': 'checkbox', 'mode': 'multiple',
                                               'items': [{'label': 'Yes', 'checked': True}, {}]})

        self.assertIn('value: true,', code)
        self.assertIn("'Checkbox 2',", code)

    def test_select_options(self):
        code = self.generator.generate_widget({'id': 's', 'type': 'select', 'options': ['One', 'Two']})

        self.assertEqual(code.count('DropdownMenuItem<String>('), 2)
        self.assertIn("value: 'Two',", code)

    def test_slider_value_is_clamped(self):
        code = self.generator.generate_widget({'id': 's', 'type': 'slider', 'value': 250})
        self.assertIn('value: 100.0,', code)


class MalformedPropertyTest(SimpleTestCase):
    """Test cases for wrong-typed property values"""

    BAD_VALUES = ([], {}, ['x'], [{}], True, '9' * 5000, '1' * 400 + '.5')

    def setUp(self):
        # The validator warns about most of these documents
        logging.disable(logging.WARNING)
        self.addCleanup(logging.disable, logging.NOTSET)

    def test_every_property_of_every_kind(self):
        for kind in WidgetKind:
            keys = ['x', 'y'] + list(WIDGET_DEFAULTS.get(kind, {}))
            for key in keys:
                for value in self.BAD_VALUES:
                    with self.subTest(kind=kind.value, key=key, value=repr(value)[:20]):
                        project = generate_flutter_code({'c1': {'type': kind.value, key: value}})

                        code = project.screens[0].file_text
                        self.assertNotRegex(code, r'\binf\b')
                        self.assertEqual(code.count('('), code.count(')'))

    def test_preset_font_size_list(self):
        project = generate_flutter_code(
            {'t': {'type': 'text', 'fontSizeType': 'preset', 'fontSize': ['large']}})
        self.assertIn('fontSize: 16.0,', project.screens[0].file_text)

    def test_oversized_coordinates_fall_back_to_zero(self):
        for value in ('1' * 400 + '.5', '1' * 5000):
            with self.subTest(length=len(value)):
                project = generate_flutter_code({'t': {'type': 'text', 'x': value, 'y': 5}})
                self.assertIn('left: 0.0 * horizontalScale,', project.screens[0].file_text)
