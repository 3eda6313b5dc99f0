#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tile_nav：基于瓦片障碍地图的栅格 A* 寻路

提供：
- TileObstacleMap / IObstacleSource：障碍来源
- NavGrid：只读导航栅格
- AStarPlanner：四方向 A* 搜索
- PathPlanningService：build_grid + find_path 查询入口
"""

from .core import CellBounds, IObstacleSource, TileObstacleMap
from .path_planner import AStarPlanner, NavGrid, PlanResult
from .service import PathPlanningService

__version__ = "0.1.0"

__all__ = [
    'CellBounds',
    'IObstacleSource',
    'TileObstacleMap',
    'AStarPlanner',
    'NavGrid',
    'PlanResult',
    'PathPlanningService',
]
