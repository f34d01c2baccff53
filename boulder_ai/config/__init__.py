#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    AgentConfig,
    PathfindingConfig,
    ParserConfig,
    PolicyConfig,
    LoggingConfig,
)
from .loader import load_config, DEFAULT_CONFIG_PATH

__all__ = [
    'AgentConfig',
    'PathfindingConfig',
    'ParserConfig',
    'PolicyConfig',
    'LoggingConfig',
    'load_config',
    'DEFAULT_CONFIG_PATH',
]
