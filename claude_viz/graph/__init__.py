"""
Graph - relationship resolution, assembly and analysis.
"""

from claude_viz.graph.analysis import GraphAnalyzer, load_graph
from claude_viz.graph.assembler import (
    ProjectScan,
    scan_project,
    scan_project_sync,
    scan_project_to_file,
    write_graph,
)
from claude_viz.graph.resolver import RelationshipResolver, resolve_relationships

__all__ = [
    "GraphAnalyzer",
    "load_graph",
    "ProjectScan",
    "scan_project",
    "scan_project_sync",
    "scan_project_to_file",
    "write_graph",
    "RelationshipResolver",
    "resolve_relationships",
]
