#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试公共工具：项目路径、示例地图、BFS 参考解
"""

import sys
from collections import deque
from pathlib import Path
from typing import Dict, Optional, Tuple

import pytest

# 未安装时也能直接 import tile_nav
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tile_nav.core.tilemap import TileObstacleMap  # noqa: E402
from tile_nav.path_planner.map_model import NavGrid  # noqa: E402
from tile_nav.service.path_planning_service import PathPlanningService  # noqa: E402


OPEN_5X5 = [
    ".....",
    ".....",
    ".....",
    ".....",
    ".....",
]

# 第一行是 y=4；(2,0)~(2,3) 为障碍
WALL_5X5 = [
    ".....",
    "..#..",
    "..#..",
    "..#..",
    "..#..",
]

# (2,2) 四周被堵死
ENCLOSED_5X5 = [
    ".....",
    "..#..",
    ".#.#.",
    "..#..",
    ".....",
]


def bfs_distance(grid: NavGrid, start: Tuple[int, int], goal: Tuple[int, int]) -> Optional[int]:
    """四邻接 BFS 最短步数；起点不检查可通行性，与 A* 保持一致"""
    if start == goal:
        return 0
    dist: Dict[Tuple[int, int], int] = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nb in grid.neighbors(cur):
            if nb in dist or not grid.is_walkable(nb):
                continue
            dist[nb] = dist[cur] + 1
            if nb == goal:
                return dist[nb]
            queue.append(nb)
    return None


def make_service(rows, **kwargs) -> PathPlanningService:
    service = PathPlanningService()
    service.build_grid(TileObstacleMap.from_ascii(rows, **kwargs))
    return service


@pytest.fixture
def open_service() -> PathPlanningService:
    return make_service(OPEN_5X5)


@pytest.fixture
def wall_service() -> PathPlanningService:
    return make_service(WALL_5X5)
