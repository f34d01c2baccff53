#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模型

使用Pydantic定义类型安全的配置模型，所有字段都有默认值，
YAML 中只需写出需要覆盖的部分。
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from boulder_ai.pathfinding.heuristic import HEURISTICS

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _validate_heuristic_name(v: str) -> str:
    if v not in HEURISTICS:
        raise ValueError(f"启发式函数必须是 {sorted(HEURISTICS)} 之一: {v}")
    return v


class PathfindingConfig(BaseModel):
    """寻路配置"""
    heuristic: str = Field("chebyshev", description="目标距离启发式函数名称")
    track_jump_recursion: bool = Field(False, description="是否记录跳点扫描访问过的格子（仅诊断用）")

    @field_validator('heuristic')
    @classmethod
    def validate_heuristic(cls, v: str) -> str:
        """验证启发式函数名称"""
        return _validate_heuristic_name(v)


class ParserConfig(BaseModel):
    """画面解析配置"""
    status_lines: int = Field(1, description="画面末尾状态栏行数")
    hazard_buffer_radius: int = Field(1, description="危险物周围不可通行的缓冲半径（格）")
    guard_falling_objects: bool = Field(True, description="石头/钻石下方为空时是否把该格视为障碍")
    hunt_hazards: bool = Field(False, description="是否把蝴蝶也当作目标（不加缓冲区）")

    @field_validator('status_lines', 'hazard_buffer_radius')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """验证非负整数"""
        if v < 0:
            raise ValueError(f"值不能为负数: {v}")
        return v


class PolicyConfig(BaseModel):
    """决策配置"""
    goal_distance: str = Field("chebyshev", description="目标排序使用的距离函数名称")
    danger_radius: int = Field(2, description="危险物检测半径（格）")
    warmup_ticks: int = Field(5, description="开局原地等待的帧数：第 1..warmup_ticks 帧都输出 s，第 warmup_ticks+1 帧开始行动")
    max_idle_ticks: int = Field(10, description="连续多少帧找不到路径后放弃")
    reuse_path: bool = Field(False, description="是否沿用上一帧的路径（默认每帧重新规划）")

    @field_validator('goal_distance')
    @classmethod
    def validate_goal_distance(cls, v: str) -> str:
        """验证距离函数名称"""
        return _validate_heuristic_name(v)

    @field_validator('danger_radius', 'warmup_ticks')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """验证非负整数"""
        if v < 0:
            raise ValueError(f"值不能为负数: {v}")
        return v

    @field_validator('max_idle_ticks')
    @classmethod
    def validate_max_idle_ticks(cls, v: int) -> int:
        """验证放弃阈值"""
        if v <= 0:
            raise ValueError(f"max_idle_ticks 必须大于0: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，为空时只输出到控制台")
    debug_dump: bool = Field(False, description="是否在日志中输出栅格和路径的ASCII图")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"日志级别必须是 {_LOG_LEVELS} 之一: {v}")
        return level


class AgentConfig(BaseModel):
    """主配置"""
    pathfinding: PathfindingConfig = Field(default_factory=PathfindingConfig, description="寻路配置")
    parser: ParserConfig = Field(default_factory=ParserConfig, description="画面解析配置")
    policy: PolicyConfig = Field(default_factory=PolicyConfig, description="决策配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
