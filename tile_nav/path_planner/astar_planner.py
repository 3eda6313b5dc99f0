#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：在只读 NavGrid 上实现四方向 A* 搜索
"""

from typing import Optional

from loguru import logger

from tile_nav.common.exceptions import PathPlanningError
from tile_nav.path_planner.heuristics import manhattan, step_cost
from tile_nav.path_planner.map_model import GridCoord, NavGrid, PlanRequest, PlanResult
from tile_nav.path_planner.open_set import IndexedOpenSet
from tile_nav.path_planner.path_reconstruction import reconstruct_path
from tile_nav.path_planner.search_state import SearchState


class AStarPlanner:
    """
    A* 算法路径规划器

    - 开放集按 (f, h) 取最小，f 相同则 h 小者优先
    - 每次搜索使用独立的 SearchState，栅格本身不被修改
    - 可选的 max_expansions 上限，防止超大地图上搜索失控

    示例:
        ```python
        planner = AStarPlanner()
        result = planner.plan(grid, start=(0, 0), goal=(4, 4))
        ```
    """

    def __init__(self, max_expansions: Optional[int] = None):
        """
        初始化 A* 规划器

        Args:
            max_expansions: 最多展开的节点数，None 表示不限制

        Raises:
            ValueError: 输入参数无效
        """
        if max_expansions is not None and (not isinstance(max_expansions, int) or max_expansions <= 0):
            raise ValueError(f"max_expansions必须是正整数: {max_expansions}")

        self.max_expansions_ = max_expansions

    def plan_request(self, grid: NavGrid, req: PlanRequest) -> PlanResult:
        return self.plan(grid, req.start, req.goal)

    def plan(self, grid: NavGrid, start: GridCoord, goal: GridCoord) -> PlanResult:
        """
        规划路径

        Args:
            grid: 导航栅格
            start: 起点（栅格坐标）
            goal: 终点（栅格坐标）

        Returns:
            PlanResult，path 不含起点、含终点；找不到路径时 ok=False

        Raises:
            PathPlanningError: 起点或终点超出栅格范围
        """
        if grid.is_empty:
            logger.warning("[A*] 栅格为空，无法规划路径")
            return PlanResult(ok=False, path=[], reason="empty_grid")

        if not grid.in_bounds(start) or not grid.in_bounds(goal):
            raise PathPlanningError(
                f"起点或终点超出栅格范围: start={start}, goal={goal}, grid_size={grid.size}"
            )

        logger.debug(f"[A*] 开始路径规划: grid_size={grid.size}, start={start}, goal={goal}")

        state = SearchState(start=start, goal=goal)
        open_set: IndexedOpenSet[GridCoord] = IndexedOpenSet()

        h0 = manhattan(start, goal)
        state.record(start, 0, h0, None)
        open_set.push(start, h0, h0)

        while open_set:
            if self.max_expansions_ is not None and state.nodes_explored >= self.max_expansions_:
                logger.warning(
                    f"[A*] 达到展开上限，放弃搜索: start={start}, goal={goal}, "
                    f"探索节点数={state.nodes_explored}"
                )
                return PlanResult(
                    ok=False,
                    path=[],
                    reason="max_expansions_exhausted",
                    nodes_explored=state.nodes_explored,
                )

            current = open_set.pop()
            state.close(current)

            # 到达终点
            if current == goal:
                path = reconstruct_path(state.came_from, start, goal)
                logger.debug(f"[A*] 路径规划成功: 路径长度={len(path)}, 探索节点数={state.nodes_explored}")
                return PlanResult(ok=True, path=path, reason="ok", nodes_explored=state.nodes_explored)

            current_g = state.g(current)
            for neighbor in grid.neighbors(current):
                if not grid.is_walkable(neighbor) or state.is_closed(neighbor):
                    continue

                tentative_g = current_g + step_cost(current, neighbor)

                # 更短的路径，或者第一次发现
                if tentative_g < state.g(neighbor) or neighbor not in open_set:
                    h = manhattan(neighbor, goal)
                    state.record(neighbor, tentative_g, h, current)
                    open_set.push(neighbor, tentative_g + h, h)

        # 无法到达终点
        logger.warning(
            f"[A*] 无法找到从起点到终点的路径: start={start}, goal={goal}, "
            f"探索节点数={state.nodes_explored}"
        )
        return PlanResult(ok=False, path=[], reason="no_path_found", nodes_explored=state.nodes_explored)
