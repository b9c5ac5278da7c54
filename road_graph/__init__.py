"""Top-level package for the road graph project.

The package models a road network as an undirected weighted graph of
named towns and answers shortest-path queries on it:

- ``road_graph.graph``: the graph store and Dijkstra's algorithm
- ``road_graph.adapters``: road file loading and route solving
- ``road_graph.services``: a name-based facade for front-ends
"""
