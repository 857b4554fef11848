"""Helpers for emitting indented Dart source"""

import re
from contextlib import contextmanager
from typing import Dict, List, Tuple

from .constants import INDENT_STEP

IDENTIFIER_UNSAFE = re.compile(r'[^A-Za-z0-9]')


class CodeBuilder:
    """
    Accumulates lines of Dart code at a tracked indentation.

    ``indent`` is a number of spaces. Fragments produced by another builder
    at the same indentation can be spliced in with :meth:`embed`.
    """

    def __init__(self, indent: int = 0):
        self.indent = indent
        self._lines: List[str] = []

    def line(self, text: str = ''):
        self._lines.append(f"{' ' * self.indent}{text}" if text else '')
        return self

    def lines(self, *texts: str):
        for text in texts:
            self.line(text)
        return self

    @contextmanager
    def block(self, opener: str, closer: str = '),'):
        """Write ``opener``, indent the body one step, then write ``closer``"""
        self.line(opener)
        self.indent += INDENT_STEP
        try:
            yield self
        finally:
            self.indent -= INDENT_STEP
        self.line(closer)

    def embed(self, fragment: str, prefix: str = '', suffix: str = ','):
        """
        Splice a multi-line fragment rendered at the current indentation.

        The first line is joined to ``prefix`` (e.g. ``child: ``) and
        ``suffix`` is appended to the last line.
        """
        fragment_lines = fragment.split('\n')
        fragment_lines[0] = f"{' ' * self.indent}{prefix}{fragment_lines[0].lstrip()}"
        fragment_lines[-1] = f"{fragment_lines[-1]}{suffix}"
        self._lines.extend(fragment_lines)
        return self

    def render(self) -> str:
        return '\n'.join(self._lines)


def sanitize_identifier(value) -> str:
    """Replace every character outside ``[A-Za-z0-9]`` with ``_``"""
    return IDENTIFIER_UNSAFE.sub('_', str(value))


class ScreenContext:
    """
    Per-screen state collected while generating widgets.

    Holds the imports a screen file needs and the ScrollController fields
    that must be declared in its ``build`` method before use.
    """

    def __init__(self):
        self.imports: List[str] = ['package:flutter/material.dart']
        self._controllers: Dict[Tuple[str, str], str] = {}

    def controller_for(self, prefix: str, component_id: str) -> str:
        """Name of the hoisted controller for a component, allocating it once"""
        key = (prefix, component_id)
        if key in self._controllers:
            return self._controllers[key]

        base = f"{prefix}{sanitize_identifier(component_id)}"
        taken = set(self._controllers.values())
        name = base
        suffix = 2
        while name in taken:
            name = f"{base}_{suffix}"
            suffix += 1

        self._controllers[key] = name
        return name

    @property
    def controllers(self) -> List[str]:
        return list(self._controllers.values())

    def declarations(self) -> List[str]:
        return [f"final {name} = ScrollController();" for name in self.controllers]

    def import_lines(self) -> List[str]:
        return [f"import '{package}';" for package in self.imports]
