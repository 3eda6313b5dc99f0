"""
PathPlanningService 测试：world 坐标查询、裁剪、无路径、初始化约束、查询隔离
"""

import random
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from tile_nav.common.exceptions import InitializationError
from tile_nav.config.models import NavigationConfig, PathPlanningConfig
from tile_nav.core.tilemap import TileObstacleMap
from tile_nav.service.path_planning_service import PathPlanningService

from conftest import ENCLOSED_5X5, make_service


def test_open_grid_waypoints(open_service: PathPlanningService) -> None:
    path = open_service.find_path((0.5, 0.5), (4.5, 4.5))

    assert path is not None
    assert len(path) == 8
    assert path[-1] == (4.5, 4.5)
    # 起点不在结果中
    assert (0.5, 0.5) not in path


def test_waypoints_are_cell_centers(open_service: PathPlanningService) -> None:
    path = open_service.find_path((0.1, 0.9), (2.99, 0.01))

    assert path == [(1.5, 0.5), (2.5, 0.5)]


def test_wall_detour_routes_through_gap(wall_service: PathPlanningService) -> None:
    path = wall_service.find_path((0.5, 0.5), (4.5, 4.5))

    assert path is not None
    assert len(path) == 8
    assert (2.5, 4.5) in path
    for x, y in path:
        assert not (x == 2.5 and y < 4.0)


def test_enclosed_goal_returns_none() -> None:
    service = make_service(ENCLOSED_5X5)

    assert service.find_path((0.5, 0.5), (2.5, 2.5)) is None
    assert service.not_found_count == 1


def test_outside_points_are_clamped(open_service: PathPlanningService) -> None:
    clamped = open_service.find_path((-10.0, -10.0), (100.0, 100.0))
    inside = open_service.find_path((0.5, 0.5), (4.5, 4.5))

    assert clamped == inside


def test_same_cell_returns_empty_list(open_service: PathPlanningService) -> None:
    path = open_service.find_path((1.2, 1.2), (1.8, 1.7))

    assert path == []


def test_plan_returns_structured_result(wall_service: PathPlanningService) -> None:
    result = wall_service.plan((0.5, 0.5), (4.5, 0.5))

    assert result.ok
    assert result.reason == "ok"
    assert len(result.path) == 12
    assert len(result.world_path) == 12
    assert result.world_path[-1] == (4.5, 0.5)
    assert result.nodes_explored > 0


def test_query_before_build_raises() -> None:
    service = PathPlanningService()

    with pytest.raises(InitializationError):
        service.find_path((0.0, 0.0), (1.0, 1.0))


def test_empty_grid_reports_not_found() -> None:
    service = PathPlanningService()
    service.build_grid(TileObstacleMap(np.zeros((0, 0))))

    assert service.find_path((0.0, 0.0), (1.0, 1.0)) is None
    assert service.plan((0.0, 0.0), (1.0, 1.0)).reason == "empty_grid"


def test_world_offset_and_cell_size() -> None:
    tiles = TileObstacleMap.from_ascii(
        ["....", "....", "...."],
        origin_cell=(-2, -1),
        anchor=(10.0, 20.0),
        cell_size=(2.0, 0.5),
    )
    service = PathPlanningService()
    service.build_grid(tiles)

    # 格子 (-2, -1) 左下角 = (6.0, 19.5)
    path = service.find_path((6.1, 19.6), (13.9, 19.6))
    assert path == [(9.0, 19.75), (11.0, 19.75), (13.0, 19.75)]


def test_max_expansions_from_config() -> None:
    cfg = NavigationConfig(path_planning=PathPlanningConfig(max_expansions=2))
    service = PathPlanningService(cfg)
    service.build_grid(TileObstacleMap.from_ascii(["....."] * 5))

    result = service.plan((0.5, 0.5), (4.5, 4.5))
    assert result.reason == "max_expansions_exhausted"
    assert service.find_path((0.5, 0.5), (4.5, 4.5)) is None


def test_rebuild_replaces_grid(open_service: PathPlanningService) -> None:
    assert open_service.find_path((0.5, 0.5), (2.5, 2.5)) is not None

    open_service.build_grid(TileObstacleMap.from_ascii(ENCLOSED_5X5))
    assert open_service.find_path((0.5, 0.5), (2.5, 2.5)) is None


def test_query_count_and_stats_logging() -> None:
    cfg = NavigationConfig(path_planning=PathPlanningConfig(stats_interval=2))
    service = PathPlanningService(cfg)
    service.build_grid(TileObstacleMap.from_ascii(ENCLOSED_5X5))

    for _ in range(4):
        service.find_path((0.5, 0.5), (4.5, 4.5))
    service.find_path((0.5, 0.5), (2.5, 2.5))

    assert service.query_count == 5
    assert service.not_found_count == 1


def test_interleaved_queries_do_not_interfere() -> None:
    rng = random.Random(3)
    rows = ["".join("#" if rng.random() < 0.25 else "." for _ in range(20)) for _ in range(20)]
    service = make_service(rows)

    queries = [
        ((rng.uniform(0, 20), rng.uniform(0, 20)), (rng.uniform(0, 20), rng.uniform(0, 20)))
        for _ in range(40)
    ]
    sequential = [service.find_path(a, b) for a, b in queries]

    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(lambda q: service.find_path(*q), queries))

    assert concurrent == sequential
