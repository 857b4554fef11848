from django.test import SimpleTestCase

from canvas_builder.generators.document import Document
from canvas_builder.generators.layout_analyzer import LayoutAnalyzer
from canvas_builder.generators.screen_generator import ScreenGenerator, screen_identifier


class ScreenIdentifierTest(SimpleTestCase):
    """Test cases for deriving screen class names"""

    def test_identifiers(self):
        cases = [
            (('My Page!', 'p1'), 'My_Page'),
            (('home', 'p1'), 'Home'),
            (('2nd page', 'p1'), 'Screen_2nd_page'),
            (('', 'page-1'), 'Screen_page_1'),
            (('!!!', 'p 2'), 'Screen_p_2'),
            ((None, 'abc'), 'Screen_abc'),
        ]
        for args, expected in cases:
            with self.subTest(args=args):
                self.assertEqual(screen_identifier(*args), expected)


class ScreenGeneratorTest(SimpleTestCase):
    """Test cases for screen file assembly"""

    def rows(self, components):
        document = Document.from_data(components)
        page_components = document.pages[0].components if document.pages else []
        return LayoutAnalyzer.group_rows(page_components)

    def test_scale_factors_and_positions(self):
        code = ScreenGenerator().generate_screen(
            self.rows({'t1': {'type': 'text', 'x': 10, 'y': 40}}), 'HomeScreen', 'Flutter App')

        self.assertTrue(code.startswith("import 'package:flutter/material.dart';\n"))
        self.assertIn('class HomeScreen extends StatelessWidget {', code)
        self.assertIn('const HomeScreen({super.key});', code)
        self.assertIn('final horizontalScale = screenSize.width / 320.0;', code)
        self.assertIn('final verticalScale = screenSize.height / 568.0;', code)
        self.assertIn('left: 10.0 * horizontalScale,', code)
        self.assertIn('top: 40.0 * verticalScale,', code)
        self.assertIn("title: Text('Flutter App'),", code)
        self.assertNotIn('drawer:', code)
        self.assertTrue(code.endswith('}\n'))

    def test_one_positioned_per_top_level_component(self):
        code = ScreenGenerator().generate_screen(self.rows({
            'a': {'type': 'text', 'y': 0},
            'b': {'type': 'icon', 'y': 5},
            'c': {'type': 'switch', 'y': 100},
        }), 'HomeScreen', 'Flutter App')

        self.assertEqual(code.count('Positioned('), 3)

    def test_empty_screen(self):
        code = ScreenGenerator().generate_screen([], 'HomeScreen', 'Flutter App')

        self.assertNotIn('Positioned(', code)
        self.assertEqual(code.count('('), code.count(')'))
        self.assertEqual(code.count('{'), code.count('}'))

    def test_controllers_declared_before_use(self):
        code = ScreenGenerator().generate_screen(
            self.rows({'l1': {'type': 'listview'}, 'r1': {'type': 'radio', 'y': 300}}),
            'HomeScreen', 'Flutter App')

        declaration = code.index('final _scrollController_l1 = ScrollController();')
        self.assertLess(declaration, code.index('controller: _scrollController_l1,'))
        self.assertIn('final _radioScrollController_r1 = ScrollController();', code)

    def test_drawer_links(self):
        code = ScreenGenerator().generate_screen(
            [], 'Home', 'Home', drawer_links=[('About Us', '/about_us')])

        self.assertIn('drawer: Drawer(', code)
        self.assertIn("'Navigation',", code)
        self.assertIn("title: Text('About Us'),", code)
        self.assertIn("Navigator.pushNamed(context, '/about_us');", code)

    def test_title_is_escaped(self):
        code = ScreenGenerator().generate_screen([], 'Home', "Bob's")
        self.assertIn("title: Text('Bob\\'s'),", code)

    def test_positioned_block_indentation(self):
        code = ScreenGenerator().generate_screen(
            self.rows({'s1': {'type': 'switch', 'x': 10, 'y': 40}}), 'HomeScreen', 'Flutter App')

        expected = '\n'.join([
            '            children: [',
            '              Positioned(',
            '                left: 10.0 * horizontalScale,',
            '                top: 40.0 * verticalScale,',
            '                child: Switch(',
            '                  value: false,',
            '                  onChanged: (value) {},',
            '                ),',
            '              ),',
            '            ],',
        ])
        self.assertIn(expected, code)
