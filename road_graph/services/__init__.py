"""Services layer - Application orchestration.

Available services:
- RoadMapService: Name-based management of towns, roads and paths
"""

from .road_map_service import RoadMapService

__all__ = ["RoadMapService"]
