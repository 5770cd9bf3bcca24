"""
Orphanscan: find the nodes of a directed graph that lose their path to a root.

A graph description (nodes, edges, root, edges to delete) is built into a
reversed adjacency structure and searched from the root; every node the
search never reaches is an orphan.
"""

__version__ = "0.1.0"
