#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具模块：掩码加载与日志初始化
"""
