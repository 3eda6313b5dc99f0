#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
单次搜索的临时状态

g / h / 父指针 / 关闭集都按格子坐标存放在这里，每次查询新建一份，
查询结束即丢弃，不写回栅格。
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from tile_nav.path_planner.map_model import GridCoord


@dataclass
class SearchState:
    start: GridCoord
    goal: GridCoord
    g_score: Dict[GridCoord, float] = field(default_factory=dict)
    h_score: Dict[GridCoord, float] = field(default_factory=dict)
    came_from: Dict[GridCoord, GridCoord] = field(default_factory=dict)
    closed: Set[GridCoord] = field(default_factory=set)
    nodes_explored: int = 0

    def g(self, coord: GridCoord) -> float:
        """未访问过的格子 g 为无穷大"""
        return self.g_score.get(coord, math.inf)

    def record(self, coord: GridCoord, g: float, h: float, parent: Optional[GridCoord]) -> None:
        self.g_score[coord] = g
        self.h_score[coord] = h
        if parent is not None:
            self.came_from[coord] = parent

    def close(self, coord: GridCoord) -> None:
        self.closed.add(coord)
        self.nodes_explored += 1

    def is_closed(self, coord: GridCoord) -> bool:
        return coord in self.closed
