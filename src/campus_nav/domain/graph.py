# campus_nav/domain/graph.py
import logging
import math
from collections.abc import Iterable, Mapping

from campus_nav.config.models import MapDocumentModel, NodeRecordModel
from campus_nav.domain.entities.geography import Node, Point

log = logging.getLogger(__name__)


class MapGraph:
    """
    Immutable node store for one loaded map.

    Neighbor ids that do not resolve to a node are kept on the node but never
    returned by ``neighbors``; the search simply never reaches them.
    """

    def __init__(self, nodes: Mapping[str, Node]):
        self._nodes: dict[str, Node] = dict(nodes)

    @classmethod
    def build(
        cls, records: Iterable[NodeRecordModel | Mapping], *, symmetric: bool = True
    ) -> "MapGraph":
        points: dict[str, Point] = {}
        adj: dict[str, list[str]] = {}
        for rec in records:
            r = rec if isinstance(rec, NodeRecordModel) else NodeRecordModel.model_validate(rec)
            # later duplicates replace earlier ones
            points[r.id] = Point(r.position.x, r.position.y)
            adj[r.id] = list(dict.fromkeys(r.connections))

        if symmetric:
            for u in list(adj):
                for v in adj[u]:
                    if v in adj and u not in adj[v]:
                        adj[v].append(u)

        dangling = sum(1 for u in adj for v in adj[u] if v not in points)
        if dangling:
            log.debug("map has %d dangling neighbor references", dangling)

        return cls({nid: Node(nid, points[nid], tuple(adj[nid])) for nid in points})

    @classmethod
    def from_document(cls, doc: MapDocumentModel | Mapping, *, symmetric: bool = True):
        d = doc if isinstance(doc, MapDocumentModel) else MapDocumentModel.model_validate(doc)
        return cls.build(d.nodes, symmetric=symmetric)

    # ------------------------------------------------------------------

    def lookup(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def neighbors(self, node_id: str) -> list[str]:
        node = self._nodes.get(node_id)
        if node is None:
            return []
        return [n for n in node.neighbors if n in self._nodes]

    def node_point(self, node_id: str) -> Point:
        return self._nodes[node_id].point

    def distance_m(self, a: str, b: str) -> float:
        pa, pb = self.node_point(a), self.node_point(b)
        return math.hypot(pb.x - pa.x, pb.y - pa.y)
