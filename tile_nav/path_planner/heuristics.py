#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
代价与启发函数

四邻接、单位步长栅格上，曼哈顿距离可采纳且一致。
"""

from typing import Tuple

Coord = Tuple[int, int]

STEP_COST = 1


def step_cost(a: Coord, b: Coord) -> int:
    """相邻（四邻接）格子之间的移动代价"""
    return STEP_COST


def manhattan(a: Coord, b: Coord) -> int:
    """曼哈顿距离 |dx| + |dy|"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
