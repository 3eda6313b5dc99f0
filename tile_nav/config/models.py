#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航配置模型

使用Pydantic定义类型安全的配置模型。
"""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class GridConfig(BaseModel):
    """栅格/世界坐标配置"""
    cell_size: Tuple[float, float] = Field((1.0, 1.0), description="格子的世界尺寸 (sx, sy)")
    anchor: Tuple[float, float] = Field((0.0, 0.0), description="格子 (0, 0) 左下角的世界坐标")

    @field_validator('cell_size')
    @classmethod
    def validate_cell_size(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """验证格子尺寸"""
        sx, sy = v
        if sx <= 0 or sy <= 0:
            raise ValueError(f"格子尺寸必须大于0: {v}")
        return v


class MaskConfig(BaseModel):
    """障碍掩码配置"""
    path: Optional[str] = Field(None, description="掩码图片路径（白色=可通行，黑色=障碍）")
    origin_cell: Tuple[int, int] = Field((0, 0), description="掩码左下角像素对应的格子坐标")
    free_threshold: int = Field(127, description="灰度 >= 该值视为可通行")

    @field_validator('free_threshold')
    @classmethod
    def validate_free_threshold(cls, v: int) -> int:
        """验证灰度阈值范围"""
        if not 0 <= v <= 255:
            raise ValueError(f"灰度阈值必须在0-255之间: {v}")
        return v


class PathPlanningConfig(BaseModel):
    """路径规划配置"""
    max_expansions: Optional[int] = Field(None, description="单次搜索最多展开的节点数，None 表示不限制")
    stats_interval: int = Field(10, description="每隔多少次查询输出一次统计")

    @field_validator('max_expansions')
    @classmethod
    def validate_max_expansions(cls, v: Optional[int]) -> Optional[int]:
        """验证展开上限"""
        if v is not None and v <= 0:
            raise ValueError(f"展开上限必须大于0: {v}")
        return v

    @field_validator('stats_interval')
    @classmethod
    def validate_stats_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"stats_interval 必须大于0: {v}")
        return v


class LogConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，None 表示只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        v = v.upper()
        if v not in ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"未知的日志级别: {v}")
        return v


class NavigationConfig(BaseModel):
    """导航主配置"""
    grid: GridConfig = Field(default_factory=GridConfig, description="栅格配置")
    mask: MaskConfig = Field(default_factory=MaskConfig, description="掩码配置")
    path_planning: PathPlanningConfig = Field(default_factory=PathPlanningConfig, description="路径规划配置")
    log: LogConfig = Field(default_factory=LogConfig, description="日志配置")
