"""Row/column ordering of absolutely positioned canvas components"""

import logging
from typing import List, Sequence

from .constants import ROW_TOLERANCE
from .document import Component

logger = logging.getLogger(__name__)


class LayoutAnalyzer:
    """Groups components into visual rows, top to bottom and left to right"""

    @staticmethod
    def group_rows(components: Sequence[Component]) -> List[List[Component]]:
        """
        Bucket components into rows.

        Components are taken in ascending ``y`` (ties keep input order). A
        component joins the current row when its ``y`` is strictly closer than
        ``ROW_TOLERANCE`` to the row anchor, the smallest ``y`` seen in that
        row; otherwise it starts a new row. Each row is then ordered by ``x``.
        """
        rows: List[List[Component]] = []
        current_row: List[Component] = []
        anchor = None

        for component in sorted(components, key=lambda c: c.y):
            if anchor is None or abs(component.y - anchor) < ROW_TOLERANCE:
                current_row.append(component)
                anchor = component.y if anchor is None else min(anchor, component.y)
            else:
                rows.append(current_row)
                current_row = [component]
                anchor = component.y

        if current_row:
            rows.append(current_row)

        return [sorted(row, key=lambda c: c.x) for row in rows]

    @staticmethod
    def flatten(rows: Sequence[Sequence[Component]]) -> List[Component]:
        """Emission order for a row sequence"""
        return [component for row in rows for component in row]

    @classmethod
    def order(cls, components: Sequence[Component]) -> List[Component]:
        rows = cls.group_rows(components)
        logger.debug("Grouped %d component(s) into %d row(s)", len(components), len(rows))
        return cls.flatten(rows)
