#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：栅格模型、A* 搜索与路径回溯
"""

from .map_model import Cell, GridCoord, NavGrid, PlanRequest, PlanResult
from .astar_planner import AStarPlanner
from .heuristics import manhattan, step_cost
from .open_set import IndexedOpenSet
from .path_reconstruction import reconstruct_path, to_world_path

__all__ = [
    'Cell',
    'GridCoord',
    'NavGrid',
    'PlanRequest',
    'PlanResult',
    'AStarPlanner',
    'manhattan',
    'step_cost',
    'IndexedOpenSet',
    'reconstruct_path',
    'to_world_path',
]
