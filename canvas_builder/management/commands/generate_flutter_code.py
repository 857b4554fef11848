"""
Management command to generate Flutter source from a canvas document.
"""

import json
import sys

from django.core.management.base import BaseCommand, CommandError

from canvas_builder.generators import generate_flutter_code
from canvas_builder.utils.validation import DocumentValidator


class Command(BaseCommand):
    help = 'Generate Flutter source files from a whiteboard canvas JSON document'

    def add_arguments(self, parser):
        parser.add_argument(
            'document',
            help="Path to the canvas JSON file, or '-' to read from stdin"
        )
        parser.add_argument(
            '--screen',
            help='Print only the source of the screen with this name'
        )
        parser.add_argument(
            '--check',
            action='store_true',
            help='Only validate the document and report problems'
        )
        parser.add_argument(
            '--indent',
            type=int,
            default=2,
            help='JSON indentation of the printed bundle (default: 2)'
        )

    def handle(self, *args, **options):
        data = self.load_document(options['document'])

        if options['check']:
            self.check_document(data)
            return

        project = generate_flutter_code(data)

        if options.get('screen'):
            self.stdout.write(self.find_screen(project, options['screen']).file_text)
            return

        self.stdout.write(json.dumps(project.as_dict(), indent=options['indent'], ensure_ascii=False))

    def load_document(self, path):
        """Read and parse the canvas JSON"""
        try:
            if path == '-':
                content = sys.stdin.read()
            else:
                with open(path, 'r', encoding='utf-8') as handle:
                    content = handle.read()
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}")

        try:
            return json.loads(content)
        except ValueError as e:
            raise CommandError(f"Invalid JSON in {path}: {e}")

    def check_document(self, data):
        problems = DocumentValidator.validate_document(data)
        if not problems:
            self.stdout.write(self.style.SUCCESS('Document is valid'))
            return

        for problem in problems:
            self.stdout.write(self.style.WARNING(f'  - {problem}'))
        raise CommandError(f'{len(problems)} problem(s) found')

    def find_screen(self, project, name):
        wanted = name.lower()
        for screen in project.screens:
            if wanted in (screen.identifier.lower(), screen.display_name.lower()):
                return screen

        available = ', '.join(screen.identifier for screen in project.screens)
        raise CommandError(f"No screen named '{name}'. Available screens: {available}")
