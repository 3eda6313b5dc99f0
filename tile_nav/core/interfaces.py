#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心接口定义：障碍来源（obstacle source）的抽象接口

路径规划只依赖这一组窄接口：边界、障碍判定、格子与世界坐标互转、格子尺寸。
具体的地图表示（瓦片地图、掩码图片等）由实现类负责。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

CellCoord = Tuple[int, int]      # 障碍来源的格子坐标 (cx, cy)
WorldPoint = Tuple[float, float]  # 世界坐标 (wx, wy)


@dataclass(frozen=True)
class CellBounds:
    """格子单位的包围矩形，(x_min, y_min) 为左下角格子"""
    x_min: int
    y_min: int
    width: int
    height: int

    @property
    def is_degenerate(self) -> bool:
        """宽或高不为正时视为退化边界"""
        return self.width <= 0 or self.height <= 0


class IObstacleSource(ABC):
    """障碍来源接口：回答“格子 (x, y) 是否被阻挡”并提供坐标转换"""

    @property
    @abstractmethod
    def cell_bounds(self) -> CellBounds:
        """
        可导航区域的包围矩形（格子单位）

        Returns:
            CellBounds
        """
        pass

    @property
    @abstractmethod
    def cell_size(self) -> Tuple[float, float]:
        """单个格子的世界尺寸 (sx, sy)"""
        pass

    @abstractmethod
    def has_obstacle(self, cx: int, cy: int) -> bool:
        """
        判断格子是否被阻挡

        Args:
            cx: 格子 x 坐标
            cy: 格子 y 坐标

        Returns:
            True 表示不可通行
        """
        pass

    @abstractmethod
    def cell_to_world(self, cx: int, cy: int) -> WorldPoint:
        """
        格子坐标 → 世界坐标（格子左下角）

        Args:
            cx: 格子 x 坐标
            cy: 格子 y 坐标

        Returns:
            世界坐标 (wx, wy)
        """
        pass

    @abstractmethod
    def world_to_cell(self, wx: float, wy: float) -> CellCoord:
        """
        世界坐标 → 格子坐标（不做边界裁剪）

        Args:
            wx: 世界 x 坐标
            wy: 世界 y 坐标

        Returns:
            格子坐标 (cx, cy)
        """
        pass
