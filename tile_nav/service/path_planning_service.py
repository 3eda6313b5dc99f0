#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PathPlanningService

对外查询入口：
- build_grid / load_map：由障碍来源（或掩码图片）一次性构建 NavGrid
- find_path：world 起点/终点 → world 路径点列表（不含起点，含终点）
- plan：同一查询，返回带原因和统计的 PlanResult
"""

from typing import List, Optional, Tuple, Union
from pathlib import Path
from loguru import logger

from tile_nav.common.exceptions import InitializationError, MaskLoadError
from tile_nav.config.models import NavigationConfig
from tile_nav.core.interfaces import IObstacleSource
from tile_nav.path_planner.astar_planner import AStarPlanner
from tile_nav.path_planner.map_model import NavGrid, PlanRequest, PlanResult
from tile_nav.path_planner.path_reconstruction import to_world_path
from tile_nav.utils.mask_loader import load_mask

WorldPoint = Tuple[float, float]


class PathPlanningService:
    """
    路径规划服务

    生命周期大致是：

    1. 创建实例：pps = PathPlanningService(cfg)
    2. 地图就绪后调用一次：pps.build_grid(obstacle_source) 或 pps.load_map(mask_path)
    3. 之后任意次调用：pps.find_path(start_world, end_world)

    栅格构建后只读，每次查询的搜索状态各自独立，查询之间互不影响。
    """

    def __init__(self, cfg: Optional[NavigationConfig] = None) -> None:
        self.cfg = cfg if cfg is not None else NavigationConfig()

        self._grid: Optional[NavGrid] = None
        self._planner = AStarPlanner(max_expansions=self.cfg.path_planning.max_expansions)

        # 查询统计
        self._query_count: int = 0
        self._not_found_count: int = 0
        self._total_nodes: int = 0

    # ------------------------------------------------------------------
    # 地图 / 栅格构建
    # ------------------------------------------------------------------
    def build_grid(self, source: IObstacleSource) -> None:
        """
        由障碍来源构建栅格，必须在任何查询之前调用

        Args:
            source: 障碍来源
        """
        logger.info(f"[PathPlanningService] 构建栅格: source={source!r}")
        self._grid = NavGrid.build(source)

    def load_map(self, mask_path: Optional[Union[str, Path]] = None) -> bool:
        """
        加载掩码图片并构建栅格

        Args:
            mask_path: 掩码路径，None 时使用配置中的 mask.path

        Returns:
            bool: 是否加载成功
        """
        mask_path = mask_path if mask_path is not None else self.cfg.mask.path
        if not mask_path:
            logger.error("[PathPlanningService] 未提供掩码路径")
            return False

        try:
            tiles = load_mask(
                mask_path,
                origin_cell=self.cfg.mask.origin_cell,
                anchor=self.cfg.grid.anchor,
                cell_size=self.cfg.grid.cell_size,
                free_threshold=self.cfg.mask.free_threshold,
            )
        except MaskLoadError as e:
            logger.error(f"[PathPlanningService] 加载掩码失败: {e}")
            return False

        self.build_grid(tiles)
        logger.info(f"[PathPlanningService] 地图加载成功: mask_path={mask_path}, grid={self._grid}")
        return True

    @property
    def grid(self) -> Optional[NavGrid]:
        return self._grid

    # ------------------------------------------------------------------
    # 路径规划主接口
    # ------------------------------------------------------------------
    def find_path(self, start_world: WorldPoint, end_world: WorldPoint) -> Optional[List[WorldPoint]]:
        """
        规划 world 路径

        Args:
            start_world: 起点世界坐标
            end_world: 终点世界坐标

        Returns:
            路径点列表（不含起点，含终点）；找不到路径返回 None。
            起点终点落在同一格子时返回空列表。

        Raises:
            InitializationError: 尚未构建栅格
        """
        result = self.plan(start_world, end_world)
        if not result.ok:
            return None
        return result.world_path

    def plan(self, start_world: WorldPoint, end_world: WorldPoint) -> PlanResult:
        """
        规划路径并返回完整结果

        Raises:
            InitializationError: 尚未构建栅格
        """
        grid = self._grid
        if grid is None:
            raise InitializationError("栅格未初始化，请先调用 build_grid() 或 load_map()")

        self._query_count += 1

        # ----------------------------------------------------------
        # 1) world → grid（超出范围时裁剪到边界格子）
        # ----------------------------------------------------------
        start = grid.world_to_coord(start_world)
        goal = grid.world_to_coord(end_world)
        if start is None or goal is None:
            logger.warning("[PathPlanningService] 栅格为空，无法规划路径")
            self._not_found_count += 1
            return PlanResult(ok=False, path=[], reason="empty_grid")

        logger.debug(
            f"[PathPlanningService] 规划请求: start_world={start_world}, goal_world={end_world}, "
            f"start_grid={start}, goal_grid={goal}"
        )

        # ----------------------------------------------------------
        # 2) 栅格 A*
        # ----------------------------------------------------------
        result = self._planner.plan_request(grid, PlanRequest(start=start, goal=goal))
        self._total_nodes += result.nodes_explored

        if not result.ok:
            self._not_found_count += 1
            logger.warning(f"[PathPlanningService] 路径规划失败: {result.reason}")
        else:
            # ------------------------------------------------------
            # 3) grid → world 路径
            # ------------------------------------------------------
            result.world_path = to_world_path(grid, result.path)
            logger.info(
                f"[PathPlanningService] 路径规划成功，路径点数: {len(result.path)}, "
                f"探索节点数: {result.nodes_explored}"
            )

        self._log_stats()
        return result

    # ------------------------------------------------------------------
    # 统计
    # ------------------------------------------------------------------
    @property
    def query_count(self) -> int:
        return self._query_count

    @property
    def not_found_count(self) -> int:
        return self._not_found_count

    def _log_stats(self) -> None:
        if self._query_count % self.cfg.path_planning.stats_interval != 0:
            return
        avg_nodes = self._total_nodes / self._query_count
        logger.info(
            f"[PathPlanningService] 查询统计: 总次数={self._query_count}, "
            f"无路径={self._not_found_count}, 平均探索节点数={avg_nodes:.1f}"
        )
