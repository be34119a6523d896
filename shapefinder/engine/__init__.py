"""shapefinder connected-component engine."""

from shapefinder.engine.disjoint_set import DisjointSet
from shapefinder.engine.extractor import Grouping, extract
from shapefinder.engine.grid import BinaryGrid
from shapefinder.engine.scanner import scan
from shapefinder.engine.config import AnalyzerConfig
from shapefinder.engine.pipeline import AnalysisResult, ImageAnalyzer, find_groupings

__all__ = [
    "DisjointSet",
    "BinaryGrid",
    "Grouping",
    "scan",
    "extract",
    "AnalyzerConfig",
    "AnalysisResult",
    "ImageAnalyzer",
    "find_groupings",
]
