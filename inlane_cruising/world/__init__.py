"""World model interfaces consumed by the path core."""

from .lane_model import Lanelet, LaneModel, RouteLaneModel

__all__ = ['Lanelet', 'LaneModel', 'RouteLaneModel']
