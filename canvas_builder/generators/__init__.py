"""
Flutter code generation package for the canvas builder

This package turns whiteboard canvas documents into Flutter/Dart source.

Main Components:
- FlutterGenerator: Orchestrates generation of a complete project
- ScreenGenerator: Renders one page as a screen file
- WidgetGenerator: Generates individual Flutter widgets from canvas components
- LayoutAnalyzer: Orders positioned components into rows
- PropertyMapper: Maps canvas properties to Dart literals
"""

from .document import Document, Page, Component
from .flutter_generator import (
    FlutterGenerator, GeneratedProject, GeneratedScreen, generate_flutter_code,
)
from .layout_analyzer import LayoutAnalyzer
from .property_mapper import PropertyMapper
from .screen_generator import ScreenGenerator, screen_identifier
from .widget_generator import WidgetGenerator

__version__ = '1.0.0'

__all__ = [
    'Document',
    'Page',
    'Component',
    'FlutterGenerator',
    'GeneratedProject',
    'GeneratedScreen',
    'generate_flutter_code',
    'LayoutAnalyzer',
    'PropertyMapper',
    'ScreenGenerator',
    'screen_identifier',
    'WidgetGenerator',
]
