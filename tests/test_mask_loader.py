"""
掩码加载测试：用 OpenCV 生成临时 PNG
"""

from pathlib import Path

import cv2
import numpy as np
import pytest

from tile_nav.common.exceptions import MaskLoadError
from tile_nav.config.models import GridConfig, MaskConfig, NavigationConfig
from tile_nav.service.path_planning_service import PathPlanningService
from tile_nav.utils.mask_loader import load_mask, mask_to_blocked


def _write_mask(path: Path, img: np.ndarray) -> Path:
    assert cv2.imwrite(str(path), img)
    return path


@pytest.fixture
def wall_mask(tmp_path: Path) -> Path:
    # 5x5，白=可通行；图片第 0 行是 y=4，墙在 x=2、y=0..3
    img = np.full((5, 5), 255, dtype=np.uint8)
    img[1:5, 2] = 0
    return _write_mask(tmp_path / "wall_mask.png", img)


def test_mask_to_blocked_flips_rows() -> None:
    img = np.array([[0, 255], [255, 255]], dtype=np.uint8)
    blocked = mask_to_blocked(img)

    # 图片左上角 → 格子 (0, 1)
    assert blocked[1, 0]
    assert not blocked[0, 0]


def test_mask_to_blocked_threshold() -> None:
    img = np.array([[100, 200]], dtype=np.uint8)

    assert mask_to_blocked(img, free_threshold=150).tolist() == [[True, False]]
    assert mask_to_blocked(img, free_threshold=50).tolist() == [[False, False]]


def test_load_mask_builds_tilemap(wall_mask: Path) -> None:
    tiles = load_mask(wall_mask, origin_cell=(10, 20))

    bounds = tiles.cell_bounds
    assert (bounds.x_min, bounds.y_min, bounds.width, bounds.height) == (10, 20, 5, 5)
    assert tiles.has_obstacle(12, 20)
    assert tiles.has_obstacle(12, 23)
    assert not tiles.has_obstacle(12, 24)


def test_load_mask_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MaskLoadError):
        load_mask(tmp_path / "nope.png")


def test_load_mask_undecodable_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not a png")

    with pytest.raises(MaskLoadError):
        load_mask(bad)


def test_service_load_map_and_find_path(wall_mask: Path) -> None:
    service = PathPlanningService()

    assert service.load_map(wall_mask)
    path = service.find_path((0.5, 0.5), (4.5, 0.5))
    assert path is not None
    assert len(path) == 12
    assert (2.5, 4.5) in path


def test_service_load_map_failures(tmp_path: Path) -> None:
    service = PathPlanningService()

    assert not service.load_map()
    assert not service.load_map(tmp_path / "missing.png")
    assert service.grid is None


def test_service_load_map_uses_config(wall_mask: Path) -> None:
    cfg = NavigationConfig(
        grid=GridConfig(cell_size=(2.0, 2.0), anchor=(1.0, 1.0)),
        mask=MaskConfig(path=str(wall_mask)),
    )
    service = PathPlanningService(cfg)

    assert service.load_map()
    # 格子 (4, 4) 中心 = 1 + 4 * 2 + 1
    path = service.find_path((1.5, 1.5), (9.9, 9.9))
    assert path is not None
    assert len(path) == 8
    assert path[-1] == (10.0, 10.0)
