#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
boulder_ai

钻石收集游戏的自动 AI：画面解析、跳点搜索寻路和逐帧决策。
"""

__version__ = "0.1.0"
