"""Property mapping utilities for converting canvas properties to Dart literals"""

import copy
import math
import re
import logging
from typing import Any, Dict, Optional, Union

from .constants import (
    WidgetKind, WIDGET_DEFAULTS, TRANSPARENT, FONT_SIZE_PRESETS,
    DEFAULT_FONT_SIZE, TEXT_ALIGNMENTS, FONT_WEIGHTS, ICON_GLYPHS,
    ICON_NAMES, DEFAULT_ICON,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]

HEX_DIGITS = re.compile(r'^[0-9a-fA-F]+$')
NUMERIC_STRING = re.compile(r'^-?\d+(\.\d+)?$')


class PropertyMapper:
    """Maps canvas component properties to Flutter/Dart literals"""

    @staticmethod
    def to_number(value: Any, default: Optional[Number] = None) -> Optional[Number]:
        """Coerce a JSON value to an int/float, or return ``default``.

        Booleans, NaN and infinities are not numbers here. Numeric strings
        (``"12"``, ``"12.5"``) are accepted since canvas inputs store them.
        """
        if isinstance(value, bool):
            return default
        if isinstance(value, str):
            text = value.strip()
            if not NUMERIC_STRING.match(text):
                return default
            try:
                value = float(text) if '.' in text else int(text)
            except ValueError:
                # Longer than int() accepts
                return default
        if isinstance(value, (int, float)):
            try:
                finite = math.isfinite(value)
            except OverflowError:
                # An int too large for a double
                return default
            return value if finite else default
        return default

    @staticmethod
    def map_color(color: Any) -> str:
        """Convert a canvas color value to a Flutter color expression"""
        if not color or not isinstance(color, str):
            return TRANSPARENT

        color_str = color.strip()

        if color_str == 'transparent':
            return TRANSPARENT

        # Already a Flutter color reference
        if color_str.startswith('Colors.') or color_str.startswith('Color('):
            return color_str

        if color_str.startswith('#'):
            hex_color = color_str[1:]
            if not HEX_DIGITS.match(hex_color):
                logger.debug("Invalid hex color: %s, using transparent", color_str)
                return TRANSPARENT
            if len(hex_color) == 8:
                # Move alpha to front for Flutter
                return f"Color(0x{(hex_color[6:8] + hex_color[0:6]).upper()})"
            if len(hex_color) <= 6:
                return f"Color(0xFF{hex_color.ljust(6, '0').upper()})"
            logger.debug("Unsupported hex color length: %s, using transparent", color_str)

        return TRANSPARENT

    @staticmethod
    def format_double(value: Any) -> str:
        """Render a number as a Dart double literal.

        A value whose text already contains a decimal point is passed
        through verbatim.
        """
        if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
            return f"{int(value)}.0"
        text = str(value)
        if '.' in text or 'e' in text:
            return text
        return f"{text}.0"

    @classmethod
    def scaled(cls, value: Any, scale_var: Optional[str] = None) -> str:
        """Dimension literal, multiplied by ``scale_var`` at runtime when given"""
        literal = cls.format_double(value)
        if scale_var:
            return f"{literal} * {scale_var}"
        return literal

    @staticmethod
    def display_text(value: Any) -> str:
        """Plain text for a JSON value shown as a label"""
        if value is None:
            return ''
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return PropertyMapper._number_text(value)
        return str(value)

    @classmethod
    def dart_string(cls, value: Any) -> str:
        """Quote free text as a single-quoted Dart string literal"""
        text = (cls.display_text(value).replace('\\', '\\\\')
                .replace("'", "\\'")
                .replace('$', '\\$')
                .replace('\r', '\\r')
                .replace('\n', '\\n'))
        return f"'{text}'"

    @staticmethod
    def _number_text(value: Number) -> str:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def map_bool(value: Any) -> str:
        return 'true' if value is True else 'false'

    @staticmethod
    def map_text_align(align: Any) -> str:
        if not isinstance(align, str):
            return 'TextAlign.left'
        return TEXT_ALIGNMENTS.get(align, 'TextAlign.left')

    @staticmethod
    def map_font_weight(weight: Any) -> str:
        """Convert a weight name (or an existing ``FontWeight.`` expression)"""
        if isinstance(weight, str):
            if weight in FONT_WEIGHTS.values():
                return weight
            return FONT_WEIGHTS.get(weight, 'FontWeight.normal')
        return 'FontWeight.normal'

    @classmethod
    def map_font_size(cls, properties: Dict[str, Any]) -> float:
        """Resolve the text size from the canvas font-size picker fields"""
        size_type = properties.get('fontSizeType')
        if size_type == 'custom':
            custom = cls.to_number(properties.get('fontSizePx'))
            if custom:
                return custom
        elif size_type == 'preset' and isinstance(properties.get('fontSize'), str):
            return FONT_SIZE_PRESETS.get(properties['fontSize'], DEFAULT_FONT_SIZE)
        return DEFAULT_FONT_SIZE

    @staticmethod
    def map_icon(icon: Any, default: str = DEFAULT_ICON) -> str:
        """Convert a glyph or Material icon name to an ``Icons.*`` constant"""
        if not isinstance(icon, str):
            return default
        icon = icon.strip()
        if icon in ICON_GLYPHS:
            return ICON_GLYPHS[icon]
        if icon.startswith('Icons.') and icon[6:] in ICON_NAMES:
            return icon
        if icon in ICON_NAMES:
            return f"Icons.{icon}"
        return default

    @classmethod
    def resolve_properties(cls, kind: WidgetKind, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Fill a component's properties from the per-kind default table.

        Follows the canvas editor's convention that an empty value means
        "use the default":

        * numbers: missing, zero or non-numeric -> default
        * strings: missing or empty -> default
        * booleans: only an actual bool overrides the default
        * lists: any list overrides, including an empty one
        * keys whose default is None keep any truthy value

        Keys without a default are copied through untouched.
        """
        defaults = WIDGET_DEFAULTS.get(kind, {})
        resolved = dict(properties)

        for key, default in defaults.items():
            value = properties.get(key)
            if isinstance(default, bool):
                resolved[key] = value if isinstance(value, bool) else default
            elif isinstance(default, (int, float)):
                resolved[key] = cls.to_number(value) or default
            elif isinstance(default, str):
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    resolved[key] = cls._number_text(value) if value else default
                else:
                    resolved[key] = value if isinstance(value, str) and value else default
            elif isinstance(default, list):
                resolved[key] = value if isinstance(value, list) else copy.deepcopy(default)
            else:
                resolved[key] = value if value else None

        return resolved
