"""
Document model for whiteboard canvas payloads.

A canvas document comes in one of two shapes:

* legacy single page: ``{component_id: component, ...}``
* multi page: ``{"pageOrder": [...], "pages": {page_id: page}, "currentPage": ...}``

Parsing never mutates the payload and never raises on bad values; anything
it cannot make sense of is replaced by a neutral default.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .constants import WidgetKind, MAX_CHILD_DEPTH
from .property_mapper import PropertyMapper

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Keys on a component object that describe structure rather than appearance
STRUCTURAL_KEYS = frozenset({
    'id', 'type', 'x', 'y', 'children', 'parent', 'properties', 'scrollControllerId',
})


@dataclass
class Component:
    id: str
    type: str
    kind: WidgetKind
    x: Number = 0
    y: Number = 0
    properties: Dict[str, Any] = field(default_factory=dict)
    children: List['Component'] = field(default_factory=list)
    parent: Optional[str] = None

    @classmethod
    def from_data(cls, data: Any, component_id: Any, depth: int = 0) -> 'Component':
        """Build a component from its JSON object, ``component_id`` being its map key"""
        if not isinstance(data, dict):
            data = {}

        raw_type = data.get('type')
        type_tag = raw_type if isinstance(raw_type, str) else ''

        properties = {k: v for k, v in data.items() if k not in STRUCTURAL_KEYS}
        nested = data.get('properties')
        if isinstance(nested, dict):
            properties.update(nested)

        component = cls(
            id=str(component_id),
            type=type_tag,
            kind=WidgetKind.from_tag(type_tag),
            x=PropertyMapper.to_number(data.get('x'), 0),
            y=PropertyMapper.to_number(data.get('y'), 0),
            properties=properties,
            parent=str(data['parent']) if data.get('parent') is not None else None,
        )
        component.children = cls._children_from_data(
            data.get('children'), component.id, depth)
        return component

    @classmethod
    def _children_from_data(cls, children: Any, parent_id: str, depth: int) -> List['Component']:
        if isinstance(children, dict):
            items = list(children.items())
        elif isinstance(children, list):
            items = []
            for index, child in enumerate(children):
                child_id = child.get('id') if isinstance(child, dict) else None
                if child_id is None or isinstance(child_id, (bool, dict, list)):
                    child_id = f"{parent_id}_{index}"
                items.append((child_id, child))
        else:
            return []

        if not items:
            return []

        if depth + 1 > MAX_CHILD_DEPTH:
            logger.warning(
                "Component %s nests deeper than %d levels; dropping %d child component(s)",
                parent_id, MAX_CHILD_DEPTH, len(items))
            return []

        return [cls.from_data(child, child_id, depth + 1) for child_id, child in items]


@dataclass
class Page:
    id: str
    name: str
    components: List[Component] = field(default_factory=list)

    @classmethod
    def from_data(cls, page_id: Any, data: Any) -> 'Page':
        if not isinstance(data, dict):
            data = {}
        name = data.get('name')
        return cls(
            id=str(page_id),
            name=name if isinstance(name, str) else '',
            components=components_from_data(data.get('components')),
        )


@dataclass
class Document:
    pages: List[Page] = field(default_factory=list)
    multi_page: bool = False
    current_page: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.pages

    @staticmethod
    def is_multi_page(data: Any) -> bool:
        return isinstance(data, dict) and ('pages' in data or 'pageOrder' in data)

    @classmethod
    def from_data(cls, data: Any) -> 'Document':
        """Parse any JSON value into a document"""
        if cls.is_multi_page(data):
            return cls._multi_page_from_data(data)

        # Legacy single page canvas. Its page carries no name of its own.
        components = components_from_data(data)
        pages = [Page(id='home', name='', components=components)] if components else []
        return cls(pages=pages, multi_page=False)

    @classmethod
    def _multi_page_from_data(cls, data: Dict[str, Any]) -> 'Document':
        raw_pages = data.get('pages')
        page_order = data.get('pageOrder')
        current = data.get('currentPage')
        document = cls(
            multi_page=True,
            current_page=str(current) if isinstance(current, (str, int)) and not isinstance(current, bool) else None,
        )

        if not isinstance(raw_pages, dict) or not isinstance(page_order, list):
            return document

        seen = set()
        for page_id in page_order:
            if isinstance(page_id, (dict, list)) or page_id is None:
                continue
            key = str(page_id)
            if key in seen or key not in raw_pages:
                continue
            seen.add(key)
            document.pages.append(Page.from_data(key, raw_pages[key]))

        return document


def components_from_data(data: Any) -> List[Component]:
    """Parse a component collection: an id-keyed mapping or a list"""
    if isinstance(data, dict):
        return [Component.from_data(component, component_id)
                for component_id, component in data.items()]

    if isinstance(data, list):
        components = []
        for index, component in enumerate(data):
            component_id = component.get('id') if isinstance(component, dict) else None
            if component_id is None or isinstance(component_id, (bool, dict, list)):
                component_id = index
            components.append(Component.from_data(component, component_id))
        return components

    return []
