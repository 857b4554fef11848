"""
Validation Utilities for canvas documents
Reports problems the generator will silently work around
"""

from typing import Any, Dict, List

from canvas_builder.generators.constants import WidgetKind, MAX_CHILD_DEPTH
from canvas_builder.generators.document import Document
from canvas_builder.generators.property_mapper import PropertyMapper
from canvas_builder.generators.screen_generator import screen_identifier


class DocumentValidator:
    """Produces human-readable diagnostics for a raw canvas document.

    Validation never blocks generation: every problem listed here has a
    defined fallback in the generator.
    """

    # Properties the canvas stores as numbers
    NUMERIC_PROPERTIES = ('width', 'height', 'radius', 'borderRadius', 'size', 'value')

    @classmethod
    def validate_document(cls, data: Any) -> List[str]:
        """
        Validate a canvas document

        Args:
            data: Parsed document JSON

        Returns:
            List of diagnostics (empty if the document is clean)
        """
        if Document.is_multi_page(data):
            return cls._validate_multi_page(data)

        if isinstance(data, (dict, list)):
            return cls._validate_components(data, 'canvas')

        if data is not None:
            return [f"Document must be an object or an array, got {type(data).__name__}"]
        return []

    @classmethod
    def _validate_multi_page(cls, data: Dict) -> List[str]:
        errors = []
        pages = data.get('pages')
        page_order = data.get('pageOrder')

        if not isinstance(pages, dict):
            errors.append("'pages' must be an object")
            pages = {}
        if not isinstance(page_order, list):
            errors.append("'pageOrder' must be an array")
            return errors

        seen_ids = set()
        screen_names = {}
        for page_id in page_order:
            key = str(page_id)
            if key in seen_ids:
                errors.append(f"Page '{key}' is listed more than once in pageOrder")
                continue
            seen_ids.add(key)

            if key not in pages:
                errors.append(f"Page '{key}' in pageOrder has no entry in pages")
                continue

            page = pages[key]
            if not isinstance(page, dict):
                errors.append(f"Page '{key}' must be an object")
                continue

            name = page.get('name')
            if name is not None and not isinstance(name, str):
                errors.append(f"Page '{key}': 'name' must be a string")

            identifier = screen_identifier(page.get('name'), key).lower()
            if identifier in screen_names:
                errors.append(
                    f"Page '{key}' has the same screen name as page '{screen_names[identifier]}'")
            else:
                screen_names[identifier] = key

            components = page.get('components')
            if components is None:
                continue
            if not isinstance(components, (dict, list)):
                errors.append(f"Page '{key}': 'components' must be an object")
                continue
            errors.extend(cls._validate_components(components, f"Page '{key}'"))

        for key in pages:
            if key not in seen_ids:
                errors.append(f"Page '{key}' is not listed in pageOrder and will be skipped")

        return errors

    @classmethod
    def _validate_components(cls, components, where: str, depth: int = 0) -> List[str]:
        errors = []
        if isinstance(components, dict):
            items = list(components.items())
        else:
            items = [(index, component) for index, component in enumerate(components)]

        for component_id, component in items:
            label = f"{where}, component '{component_id}'"
            if not isinstance(component, dict):
                errors.append(f"{label} must be an object")
                continue
            errors.extend(cls._validate_component(component, label, depth))
        return errors

    @classmethod
    def _validate_component(cls, component: Dict, label: str, depth: int) -> List[str]:
        errors = []

        component_type = component.get('type')
        if not isinstance(component_type, str) or not component_type.strip():
            errors.append(f"{label} has no 'type'")
        elif WidgetKind.from_tag(component_type) is WidgetKind.UNKNOWN:
            errors.append(f"{label}: unsupported type '{component_type}'")

        for axis in ('x', 'y'):
            if axis in component and not cls._is_number(component[axis]):
                errors.append(f"{label}: '{axis}' must be a number, got {type(component[axis]).__name__}")

        properties = dict(component)
        if isinstance(component.get('properties'), dict):
            properties.update(component['properties'])
        for prop in cls.NUMERIC_PROPERTIES:
            value = properties.get(prop)
            if value is not None and value != '' and not cls._is_number(value):
                errors.append(f"{label}: property '{prop}' must be a number")

        children = component.get('children')
        if children is None:
            return errors
        if not isinstance(children, (dict, list)):
            errors.append(f"{label}: 'children' must be an array")
        elif children and depth + 1 > MAX_CHILD_DEPTH:
            errors.append(f"{label}: children nested deeper than {MAX_CHILD_DEPTH} levels are dropped")
        else:
            errors.extend(cls._validate_components(children, label, depth + 1))

        return errors

    @staticmethod
    def _is_number(value: Any) -> bool:
        return PropertyMapper.to_number(value) is not None
