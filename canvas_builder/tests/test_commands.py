import json
import os
import tempfile
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase

DOCUMENT = {
    'pageOrder': ['home', 'about'],
    'pages': {
        'home': {'name': 'Home', 'components': {'t': {'type': 'text', 'x': 0, 'y': 0}}},
        'about': {'name': 'About', 'components': {}},
    },
}


class GenerateFlutterCodeCommandTest(SimpleTestCase):
    """Test cases for the generate_flutter_code management command"""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

    def write_document(self, content):
        path = os.path.join(self.tmp_dir.name, 'canvas.json')
        with open(path, 'w', encoding='utf-8') as handle:
            handle.write(content if isinstance(content, str) else json.dumps(content))
        return path

    def run_command(self, *args):
        out = StringIO()
        call_command('generate_flutter_code', *args, stdout=out)
        return out.getvalue()

    def test_prints_bundle(self):
        output = self.run_command(self.write_document(DOCUMENT))

        bundle = json.loads(output)
        self.assertTrue(bundle['manifestFile'].startswith('name: '))
        self.assertEqual([s['identifier'] for s in bundle['screens']], ['Home', 'About'])

    def test_prints_single_screen(self):
        output = self.run_command(self.write_document(DOCUMENT), '--screen', 'about')

        self.assertTrue(output.startswith("import 'package:flutter/material.dart';"))
        self.assertIn('class About extends StatelessWidget', output)

    def test_unknown_screen(self):
        with self.assertRaisesMessage(CommandError, "No screen named 'Settings'"):
            self.run_command(self.write_document(DOCUMENT), '--screen', 'Settings')

    def test_reads_stdin(self):
        with patch('sys.stdin', StringIO(json.dumps({'b': {'type': 'button'}}))):
            output = self.run_command('-')

        self.assertEqual(json.loads(output)['screens'][0]['identifier'], 'HomeScreen')

    def test_invalid_json(self):
        with self.assertRaisesMessage(CommandError, 'Invalid JSON'):
            self.run_command(self.write_document('{not json'))

    def test_missing_file(self):
        with self.assertRaisesMessage(CommandError, 'Cannot read'):
            self.run_command(os.path.join(self.tmp_dir.name, 'missing.json'))

    def test_check_valid_document(self):
        output = self.run_command(self.write_document(DOCUMENT), '--check')
        self.assertIn('Document is valid', output)

    def test_check_reports_problems(self):
        path = self.write_document({'c': {'type': 'frobnicator'}})
        out = StringIO()

        with self.assertRaisesMessage(CommandError, '1 problem(s) found'):
            call_command('generate_flutter_code', path, '--check', stdout=out)
        self.assertIn("unsupported type 'frobnicator'", out.getvalue())
