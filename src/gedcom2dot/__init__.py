"""
gedcom2dot: GEDCOM to Graphviz DOT with root-based pruning.
"""

__version__ = "0.1.0"
