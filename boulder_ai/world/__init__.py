#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
画面模块

把游戏的 ASCII 画面解析为栅格和实体。
"""

from .entities import Entity, EntityKind, WorldSnapshot
from .screen_parser import parse_screen, split_screen

__all__ = ['Entity', 'EntityKind', 'WorldSnapshot', 'parse_screen', 'split_screen']
