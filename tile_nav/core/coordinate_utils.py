#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标转换工具模块

提供世界坐标和格子坐标之间的转换功能，以及栅格边界裁剪。
"""

import math
from typing import Tuple


def world_to_cell(
    world_pos: Tuple[float, float],
    anchor: Tuple[float, float],
    cell_size: Tuple[float, float]
) -> Tuple[int, int]:
    """
    将世界坐标转换为格子坐标（向下取整，不裁剪）

    Args:
        world_pos: 世界坐标 (x, y)
        anchor: 格子 (0, 0) 左下角的世界坐标
        cell_size: 格子尺寸 (sx, sy)

    Returns:
        格子坐标 (cx, cy)
    """
    wx, wy = world_pos
    ax, ay = anchor
    sx, sy = cell_size

    # 负坐标也要向下取整，int() 会向零截断
    cx = math.floor((wx - ax) / sx)
    cy = math.floor((wy - ay) / sy)

    return (cx, cy)


def cell_to_world(
    cell: Tuple[int, int],
    anchor: Tuple[float, float],
    cell_size: Tuple[float, float]
) -> Tuple[float, float]:
    """
    将格子坐标转换为世界坐标（格子左下角）

    Args:
        cell: 格子坐标 (cx, cy)
        anchor: 格子 (0, 0) 左下角的世界坐标
        cell_size: 格子尺寸 (sx, sy)

    Returns:
        世界坐标 (x, y)
    """
    cx, cy = cell
    ax, ay = anchor
    sx, sy = cell_size

    return (ax + cx * sx, ay + cy * sy)


def clamp_to_grid(
    grid_pos: Tuple[int, int],
    grid_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    将栅格坐标裁剪到 [0, w-1] x [0, h-1]

    Args:
        grid_pos: 栅格坐标 (x, y)
        grid_size: 栅格尺寸 (width, height)，必须为正

    Returns:
        裁剪后的栅格坐标
    """
    gx, gy = grid_pos
    grid_w, grid_h = grid_size

    gx = max(0, min(gx, grid_w - 1))
    gy = max(0, min(gy, grid_h - 1))

    return (gx, gy)
