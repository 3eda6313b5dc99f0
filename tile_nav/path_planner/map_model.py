#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格模型：由障碍来源一次性构建的只读导航栅格

- walkable[y, x]: 是否可通行
- centers[y, x]: 格子中心的世界坐标
栅格下标从 0 开始，origin 为障碍来源的 bounds.min，用于在两套格子坐标间换算。
构建完成后数组只读，搜索过程中的可变状态不放在这里。
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from loguru import logger

from tile_nav.core.coordinate_utils import clamp_to_grid
from tile_nav.core.interfaces import IObstacleSource

GridCoord = Tuple[int, int]  # (x, y)，栅格内从 0 开始

# 四方向邻居（西、南、北、东），不含对角
NEIGHBOR_OFFSETS: Tuple[GridCoord, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))


@dataclass(frozen=True)
class Cell:
    """栅格中的一个格子"""
    x: int
    y: int
    walkable: bool
    world_pos: Tuple[float, float]

    @property
    def coord(self) -> GridCoord:
        return (self.x, self.y)


@dataclass
class PlanRequest:
    start: GridCoord
    goal: GridCoord


@dataclass
class PlanResult:
    ok: bool
    path: List[GridCoord]            # 不含起点，含终点
    reason: str = ""
    nodes_explored: int = 0
    world_path: List[Tuple[float, float]] = field(default_factory=list)


class NavGrid:
    """
    只读导航栅格

    示例:
        ```python
        grid = NavGrid.build(TileObstacleMap.from_ascii(["...", ".#.", "..."]))
        grid.neighbors((1, 1))  # [(0, 1), (1, 0), (1, 2), (2, 1)]
        ```
    """

    def __init__(
        self,
        walkable: np.ndarray,
        centers: np.ndarray,
        origin: Tuple[int, int],
        source: Optional[IObstacleSource],
    ) -> None:
        self._walkable = walkable
        self._centers = centers
        self._walkable.flags.writeable = False
        self._centers.flags.writeable = False
        self._origin = origin
        self._source = source

    # ------------------------------------------------------------------
    # 构建
    # ------------------------------------------------------------------
    @classmethod
    def build(cls, source: IObstacleSource) -> "NavGrid":
        """
        根据障碍来源的包围矩形构建栅格

        Args:
            source: 障碍来源

        Returns:
            NavGrid；边界退化时返回空栅格（之后所有查询都是“无路径”）
        """
        bounds = source.cell_bounds
        origin = (bounds.x_min, bounds.y_min)

        if bounds.is_degenerate:
            logger.warning(f"[NavGrid] 障碍来源边界退化，构建空栅格: bounds={bounds}")
            return cls(
                np.zeros((0, 0), dtype=bool),
                np.zeros((0, 0, 2), dtype=np.float64),
                origin,
                source,
            )

        width, height = bounds.width, bounds.height
        half_x = source.cell_size[0] * 0.5
        half_y = source.cell_size[1] * 0.5

        walkable = np.zeros((height, width), dtype=bool)
        centers = np.zeros((height, width, 2), dtype=np.float64)

        for y in range(height):
            for x in range(width):
                cx, cy = origin[0] + x, origin[1] + y
                walkable[y, x] = not source.has_obstacle(cx, cy)
                wx, wy = source.cell_to_world(cx, cy)
                centers[y, x] = (wx + half_x, wy + half_y)

        logger.info(
            f"[NavGrid] 栅格构建完成: size=({width}, {height}), origin={origin}, "
            f"blocked={int(height * width - walkable.sum())}"
        )
        return cls(walkable, centers, origin, source)

    # ------------------------------------------------------------------
    # 基本属性
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._walkable.shape[1]

    @property
    def height(self) -> int:
        return self._walkable.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def origin(self) -> Tuple[int, int]:
        return self._origin

    @property
    def is_empty(self) -> bool:
        return self._walkable.size == 0

    @property
    def walkable(self) -> np.ndarray:
        """只读的 walkable[y, x] 数组"""
        return self._walkable

    # ------------------------------------------------------------------
    # 格子查询
    # ------------------------------------------------------------------
    def in_bounds(self, coord: GridCoord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, coord: GridCoord) -> bool:
        x, y = coord
        return bool(self._walkable[y, x])

    def world_pos(self, coord: GridCoord) -> Tuple[float, float]:
        x, y = coord
        wx, wy = self._centers[y, x]
        return (float(wx), float(wy))

    def cell(self, coord: GridCoord) -> Cell:
        x, y = coord
        return Cell(x=x, y=y, walkable=self.is_walkable(coord), world_pos=self.world_pos(coord))

    def world_to_coord(self, world_pos: Tuple[float, float]) -> Optional[GridCoord]:
        """
        世界坐标 → 栅格坐标，超出范围时裁剪到最近的边界格子（而不是拒绝）

        Args:
            world_pos: 世界坐标 (x, y)

        Returns:
            栅格坐标；空栅格返回 None
        """
        if self.is_empty or self._source is None:
            return None

        cx, cy = self._source.world_to_cell(world_pos[0], world_pos[1])
        raw = (cx - self._origin[0], cy - self._origin[1])
        clamped = clamp_to_grid(raw, self.size)
        if clamped != raw:
            logger.debug(f"[NavGrid] 坐标超出栅格范围，已裁剪: world={world_pos}, {raw} -> {clamped}")
        return clamped

    def world_to_cell(self, world_pos: Tuple[float, float]) -> Optional[Cell]:
        coord = self.world_to_coord(world_pos)
        if coord is None:
            return None
        return self.cell(coord)

    def neighbors(self, coord: GridCoord) -> List[GridCoord]:
        """
        四方向邻居（只做边界检查，不过滤障碍）

        Args:
            coord: 栅格坐标

        Returns:
            邻居坐标列表，最多 4 个
        """
        x, y = coord
        result: List[GridCoord] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                result.append((nx, ny))
        return result

    def __repr__(self) -> str:
        return f"NavGrid(size={self.size}, origin={self._origin})"
