#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
掩码处理模块

把障碍掩码图片（白色=可通行，黑色=障碍）转换为 TileObstacleMap。
图片第 0 行是地图最上方（y 最大）的一行。
"""

import numpy as np
import cv2

from pathlib import Path
from typing import Tuple, Union
from loguru import logger

from tile_nav.common.exceptions import MaskLoadError
from tile_nav.core.tilemap import TileObstacleMap


def _imread_gray(path: Path) -> np.ndarray:
    """兼容中文路径的灰度图读取"""
    path = Path(path)
    if not path.exists():
        raise MaskLoadError(f"文件不存在: {path}")

    data = np.fromfile(str(path), dtype=np.uint8)
    img = cv2.imdecode(data, cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise MaskLoadError(f"无法读取掩码文件: {path}")
    return img


def mask_to_blocked(mask_gray: np.ndarray, free_threshold: int = 127) -> np.ndarray:
    """
    灰度掩码 → 障碍数组

    Args:
        mask_gray: HxW 灰度图，第 0 行为最上方
        free_threshold: 灰度 >= 该值视为可通行

    Returns:
        HxW 布尔数组（True=障碍），第 0 行为最下方
    """
    blocked = mask_gray < free_threshold
    # 图片行号自上而下，格子 y 自下而上
    return np.flipud(blocked)


def load_mask(
    mask_path: Union[str, Path],
    origin_cell: Tuple[int, int] = (0, 0),
    anchor: Tuple[float, float] = (0.0, 0.0),
    cell_size: Tuple[float, float] = (1.0, 1.0),
    free_threshold: int = 127,
) -> TileObstacleMap:
    """
    加载掩码图片，每个像素对应一个格子

    Args:
        mask_path: 掩码文件路径
        origin_cell: 左下角像素对应的格子坐标
        anchor: 格子 (0, 0) 左下角的世界坐标
        cell_size: 格子尺寸
        free_threshold: 灰度 >= 该值视为可通行

    Returns:
        TileObstacleMap

    Raises:
        MaskLoadError: 文件不存在或无法解码
    """
    logger.info(f"加载掩码: {mask_path}")
    img = _imread_gray(Path(mask_path))

    blocked = mask_to_blocked(img, free_threshold)
    tiles = TileObstacleMap(blocked, origin_cell=origin_cell, anchor=anchor, cell_size=cell_size)

    h, w = img.shape[:2]
    logger.info(f"从掩码构建瓦片地图: size=({w}, {h}), 障碍格子数={int(blocked.sum())}")
    return tiles

