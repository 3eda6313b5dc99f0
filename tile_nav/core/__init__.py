#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心模块：障碍来源接口、瓦片地图与坐标转换
"""

from .interfaces import CellBounds, CellCoord, IObstacleSource, WorldPoint
from .tilemap import TileObstacleMap

__all__ = [
    'CellBounds',
    'CellCoord',
    'IObstacleSource',
    'WorldPoint',
    'TileObstacleMap',
]
