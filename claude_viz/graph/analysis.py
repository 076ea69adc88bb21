"""
Graph Analyzer.

NetworkX view of a scanned graph, used by the ``stats`` command.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import networkx as nx

from claude_viz.core.models.graph import GraphData
from claude_viz.utils.logging import get_logger

logger = get_logger("graph.analysis")


class GraphAnalyzer:
    """Degree and connectivity queries over a GraphData.

    Usage:
        analyzer = GraphAnalyzer(GraphData.load(path))
        for row in analyzer.degree_table()[:10]:
            print(row["id"], row["out_degree"])
    """

    def __init__(self, graph: GraphData):
        self.data = graph
        self._graph = nx.DiGraph()
        self._build()

    @property
    def graph(self) -> nx.DiGraph:
        return self._graph

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def _build(self) -> None:
        for node in self.data.nodes:
            self._graph.add_node(
                node.id,
                name=node.name,
                kind="command" if getattr(node, "is_command", False) else node.kind,
            )

        for edge in self.data.edges:
            if edge.source not in self._graph or edge.target not in self._graph:
                logger.warning(f"Edge references unknown node: {edge.key}")
                continue
            self._graph.add_edge(edge.source, edge.target, type=edge.type.value)

    def degree_table(self) -> list[dict[str, Any]]:
        """Per-node degrees, most connected first (ties broken by id)."""
        rows = [
            {
                "id": node_id,
                "name": data["name"],
                "kind": data["kind"],
                "in_degree": self._graph.in_degree(node_id),
                "out_degree": self._graph.out_degree(node_id),
            }
            for node_id, data in self._graph.nodes(data=True)
        ]
        rows.sort(key=lambda r: (-(r["in_degree"] + r["out_degree"]), r["id"]))
        return rows

    def isolated_nodes(self) -> list[str]:
        """Nodes with no edges in either direction, sorted."""
        return sorted(nx.isolates(self._graph))

    def neighbors(self, entity_id: str, direction: str = "both") -> list[str]:
        """Neighbor ids in the given direction ("in", "out" or "both")."""
        if entity_id not in self._graph:
            return []

        if direction == "in":
            return sorted(self._graph.predecessors(entity_id))
        elif direction == "out":
            return sorted(self._graph.successors(entity_id))
        else:
            preds = set(self._graph.predecessors(entity_id))
            succs = set(self._graph.successors(entity_id))
            return sorted(preds | succs)

    def density(self) -> float:
        if self.node_count < 2:
            return 0.0
        return nx.density(self._graph)

    def summary(self) -> dict[str, Any]:
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "isolated_count": len(self.isolated_nodes()),
            "density": round(self.density(), 4),
        }


def load_graph(path: str | Path) -> GraphData:
    """Read a graph artifact from disk."""
    return GraphData.load(path)
