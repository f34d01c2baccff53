#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
决策模块
"""

from .direction import Direction, GIVE_UP_COMMAND, encode_command
from .gem_agent import GemAgent

__all__ = ['Direction', 'GIVE_UP_COMMAND', 'encode_command', 'GemAgent']
