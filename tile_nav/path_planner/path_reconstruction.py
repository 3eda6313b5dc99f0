#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径回溯：从终点沿父指针走回起点，输出 起点之后 → 终点 的顺序
"""

from typing import Dict, List, Tuple

from tile_nav.path_planner.map_model import GridCoord, NavGrid


def reconstruct_path(
    came_from: Dict[GridCoord, GridCoord],
    start: GridCoord,
    goal: GridCoord,
) -> List[GridCoord]:
    """
    回溯栅格路径

    起点本身不放进结果（调用方把“当前位置”视为隐含的第一个点），
    start == goal 时返回空列表。

    Args:
        came_from: 父指针表
        start: 起点
        goal: 终点

    Returns:
        [第一步, ..., goal]

    Raises:
        KeyError: 父指针链在到达起点前断开
    """
    path: List[GridCoord] = []
    current = goal
    while current != start:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path


def to_world_path(grid: NavGrid, path: List[GridCoord]) -> List[Tuple[float, float]]:
    """栅格路径 → 格子中心世界坐标"""
    return [grid.world_pos(p) for p in path]
