"""
Graph Pathfinding Visualizer.

Builds small directed graphs on a grid, runs six classical path-search
strategies over them and replays each search step by step through an
animation-trace protocol.
"""

__version__ = "0.1.0"
