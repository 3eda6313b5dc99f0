#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
服务层：对外的路径查询入口
"""

from .path_planning_service import PathPlanningService

__all__ = ['PathPlanningService']
