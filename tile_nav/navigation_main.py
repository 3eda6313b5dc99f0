#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路演示入口

用法:
    python -m tile_nav.navigation_main config/config.yaml --start 1.5 1.5 --goal 30.5 20.5 --out path.png
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import cv2
import numpy as np
from loguru import logger

from tile_nav.common.exceptions import NavigationError
from tile_nav.config.loader import load_config
from tile_nav.path_planner.map_model import NavGrid
from tile_nav.service.path_planning_service import PathPlanningService
from tile_nav.utils.logger import setup_logger


def render_path(grid: NavGrid, path: List[Tuple[int, int]], start: Tuple[int, int], scale: int = 8) -> np.ndarray:
    """
    把栅格和路径画成图片：白=可通行，黑=障碍，蓝=路径，绿=起点，红=终点

    Args:
        grid: 导航栅格
        path: 栅格路径（不含起点）
        start: 起点栅格坐标
        scale: 每个格子的像素数

    Returns:
        BGR 图片，第 0 行为栅格最上方
    """
    # walkable 第 0 行是最下方，图片第 0 行是最上方
    img = np.ascontiguousarray(np.flipud(np.where(grid.walkable, 255, 0).astype(np.uint8)))
    vis = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    vis = cv2.resize(vis, (grid.width * scale, grid.height * scale), interpolation=cv2.INTER_NEAREST)

    def to_px(coord: Tuple[int, int]) -> Tuple[int, int]:
        x, y = coord
        # 图片 y 轴向下
        return (x * scale + scale // 2, (grid.height - 1 - y) * scale + scale // 2)

    points = [start] + list(path)
    for i in range(1, len(points)):
        cv2.line(vis, to_px(points[i - 1]), to_px(points[i]), (255, 0, 0), max(1, scale // 4))

    cv2.circle(vis, to_px(start), max(2, scale // 2), (0, 255, 0), -1)
    if path:
        cv2.circle(vis, to_px(path[-1]), max(2, scale // 2), (0, 0, 255), -1)

    return vis


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="栅格 A* 寻路演示")
    parser.add_argument("config", type=str, help="配置文件路径")
    parser.add_argument("--start", type=float, nargs=2, required=True, metavar=("X", "Y"), help="起点世界坐标")
    parser.add_argument("--goal", type=float, nargs=2, required=True, metavar=("X", "Y"), help="终点世界坐标")
    parser.add_argument("--mask", type=str, default=None, help="掩码路径（覆盖配置）")
    parser.add_argument("--out", type=str, default=None, help="可视化输出图片路径")
    args = parser.parse_args(argv)

    try:
        cfg = load_config(Path(args.config))
    except (FileNotFoundError, NavigationError) as e:
        logger.error(f"配置加载失败: {e}")
        return 2

    setup_logger(cfg.log.log_dir, cfg.log.level)

    service = PathPlanningService(cfg)
    if not service.load_map(args.mask):
        logger.error("load_map 失败")
        return 2

    start_world = (args.start[0], args.start[1])
    goal_world = (args.goal[0], args.goal[1])
    logger.info(f"demo 起点(世界): {start_world}, 终点(世界): {goal_world}")

    result = service.plan(start_world, goal_world)
    if not result.ok:
        logger.error(f"规划失败: {result.reason}")
        return 1

    for i, p in enumerate(result.world_path):
        logger.info(f"  waypoint[{i}] = ({p[0]:.3f}, {p[1]:.3f})")

    if args.out:
        grid = service.grid
        start_grid = grid.world_to_coord(start_world)
        vis = render_path(grid, result.path, start_grid)
        cv2.imwrite(args.out, vis)
        logger.info(f"demo 可视化已保存到: {args.out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
