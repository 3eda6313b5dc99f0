#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共模块：异常定义
"""
