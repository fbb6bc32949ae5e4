"""Feature graph – declared dependencies, cycle validation, ordering."""
from feature_manifest.graph.graph import FeatureGraph
from feature_manifest.graph.snapshot import GraphSnapshot

__all__ = ["FeatureGraph", "GraphSnapshot"]
