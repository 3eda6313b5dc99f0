#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
瓦片障碍地图：基于 numpy 数组的 IObstacleSource 实现

blocked[row, col] 中 row 对应 y - y_min（row 0 为最低的一行），
col 对应 x - x_min。数组之外的格子没有瓦片，视为可通行。
"""

from typing import Iterable, Optional, Tuple

import numpy as np

from tile_nav.core.coordinate_utils import cell_to_world, world_to_cell
from tile_nav.core.interfaces import CellBounds, CellCoord, IObstacleSource, WorldPoint


class TileObstacleMap(IObstacleSource):
    """
    瓦片障碍地图

    示例:
        ```python
        tiles = TileObstacleMap.from_ascii([
            "..#..",
            "..#..",
            ".....",
        ])
        tiles.has_obstacle(2, 2)  # True
        ```
    """

    def __init__(
        self,
        blocked: np.ndarray,
        origin_cell: Tuple[int, int] = (0, 0),
        anchor: Tuple[float, float] = (0.0, 0.0),
        cell_size: Tuple[float, float] = (1.0, 1.0),
    ):
        """
        初始化瓦片障碍地图

        Args:
            blocked: HxW 数组，非零表示障碍，row 0 为最低的一行
            origin_cell: 数组 [0, 0] 对应的格子坐标（即 bounds.min）
            anchor: 格子 (0, 0) 左下角的世界坐标
            cell_size: 格子尺寸 (sx, sy)

        Raises:
            ValueError: 输入参数无效
        """
        blocked = np.asarray(blocked)
        if blocked.ndim != 2:
            raise ValueError(f"blocked 必须是二维数组: ndim={blocked.ndim}")
        sx, sy = cell_size
        if sx <= 0 or sy <= 0:
            raise ValueError(f"格子尺寸必须大于0: {cell_size}")

        self.blocked_ = blocked.astype(bool)
        self.blocked_.flags.writeable = False
        self.origin_cell_ = (int(origin_cell[0]), int(origin_cell[1]))
        self.anchor_ = (float(anchor[0]), float(anchor[1]))
        self.cell_size_ = (float(sx), float(sy))

    @classmethod
    def from_ascii(
        cls,
        rows: Iterable[str],
        origin_cell: Tuple[int, int] = (0, 0),
        anchor: Tuple[float, float] = (0.0, 0.0),
        cell_size: Tuple[float, float] = (1.0, 1.0),
        obstacle_char: str = "#",
    ) -> "TileObstacleMap":
        """
        从字符画构建地图，第一行是最高的一行（与肉眼看到的方向一致）

        Args:
            rows: 等宽字符串列表，obstacle_char 表示障碍
            origin_cell: 左下角格子坐标
            anchor: 格子 (0, 0) 左下角的世界坐标
            cell_size: 格子尺寸
            obstacle_char: 障碍字符

        Returns:
            TileObstacleMap
        """
        rows = list(rows)
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise ValueError(f"字符画每行长度必须一致: {sorted(widths)}")

        width = widths.pop() if widths else 0
        blocked = np.zeros((len(rows), width), dtype=bool)
        for i, row in enumerate(reversed(rows)):
            for j, ch in enumerate(row):
                blocked[i, j] = ch == obstacle_char

        return cls(blocked, origin_cell=origin_cell, anchor=anchor, cell_size=cell_size)

    # ------------------------------------------------------------------
    # IObstacleSource
    # ------------------------------------------------------------------
    @property
    def cell_bounds(self) -> CellBounds:
        h, w = self.blocked_.shape
        return CellBounds(self.origin_cell_[0], self.origin_cell_[1], w, h)

    @property
    def cell_size(self) -> Tuple[float, float]:
        return self.cell_size_

    def has_obstacle(self, cx: int, cy: int) -> bool:
        idx = self._index(cx, cy)
        if idx is None:
            return False
        return bool(self.blocked_[idx])

    def cell_to_world(self, cx: int, cy: int) -> WorldPoint:
        return cell_to_world((cx, cy), self.anchor_, self.cell_size_)

    def world_to_cell(self, wx: float, wy: float) -> CellCoord:
        return world_to_cell((wx, wy), self.anchor_, self.cell_size_)

    # ------------------------------------------------------------------
    # 内部工具
    # ------------------------------------------------------------------
    def _index(self, cx: int, cy: int) -> Optional[Tuple[int, int]]:
        """格子坐标 → 数组下标 (row, col)，超出数组返回 None"""
        h, w = self.blocked_.shape
        col = cx - self.origin_cell_[0]
        row = cy - self.origin_cell_[1]
        if 0 <= row < h and 0 <= col < w:
            return (row, col)
        return None

    def __repr__(self) -> str:
        h, w = self.blocked_.shape
        return (
            f"TileObstacleMap(size=({w}, {h}), origin_cell={self.origin_cell_}, "
            f"anchor={self.anchor_}, cell_size={self.cell_size_}, "
            f"obstacles={int(self.blocked_.sum())})"
        )
