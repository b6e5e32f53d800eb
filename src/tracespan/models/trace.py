"""
Graph view over a set of spans linked by their parent ids.
"""

from typing import Dict, Iterable, List, Optional
import logging

from .span import Span
from .span_id import SpanId

logger = logging.getLogger(__name__)


class SpanGraph:
    """
    Indexes spans by id so the parent relation can be walked.

    Parents that are not part of the graph are treated as external roots.
    """

    def __init__(self, spans: Iterable[Span] = ()):
        self._spans: Dict[SpanId, Span] = {}
        for span in spans:
            self.add(span)

    def add(self, span: Span) -> None:
        if span.span_id in self._spans:
            logger.warning(f"Replacing span with duplicate id {span.span_id}")
        self._spans[span.span_id] = span

    def __len__(self) -> int:
        return len(self._spans)

    def __contains__(self, span_id: SpanId) -> bool:
        return span_id in self._spans

    def get(self, span_id: SpanId) -> Optional[Span]:
        return self._spans.get(span_id)

    def roots(self) -> List[Span]:
        """Spans with an empty parent list, in insertion order."""
        return [span for span in self._spans.values() if not span.parents]

    def children_of(self, span_id: SpanId) -> List[Span]:
        """Spans naming ``span_id`` as a parent, in insertion order."""
        return [span for span in self._spans.values() if span_id in span.parents]

    def find_cycle(self) -> Optional[List[SpanId]]:
        """
        Look for a cycle in the parent relation.

        Returns:
            The ids along the cycle, starting and ending with the same id,
            or None if the graph is acyclic
        """
        # 0 = unvisited, 1 = on the current path, 2 = done
        state: Dict[SpanId, int] = {}
        for start in self._spans:
            if state.get(start):
                continue
            path: List[SpanId] = []
            stack = [(start, iter(self._spans[start].parents))]
            state[start] = 1
            path.append(start)
            while stack:
                node, parents = stack[-1]
                advanced = False
                for parent in parents:
                    if parent not in self._spans:
                        continue
                    parent_state = state.get(parent, 0)
                    if parent_state == 1:
                        return path[path.index(parent):] + [parent]
                    if parent_state == 0:
                        state[parent] = 1
                        path.append(parent)
                        stack.append((parent, iter(self._spans[parent].parents)))
                        advanced = True
                        break
                if not advanced:
                    state[node] = 2
                    path.pop()
                    stack.pop()
        return None

    def is_acyclic(self) -> bool:
        return self.find_cycle() is None
