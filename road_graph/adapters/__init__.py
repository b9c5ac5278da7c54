"""Adapters layer - Concrete implementations of the ports.

Adapters connect the graph core to files and to the route-solving
front-end:
- graph: Road file loading and route solving
"""
