#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口

从文件或标准输入读取画面（画面之间用空行分隔），每帧输出一条指令到标准输出。
日志只写到标准错误，标准输出只包含指令。

    python -m boulder_ai.main --config config/config.yaml screens.txt
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO

from loguru import logger
from pydantic import ValidationError
import yaml

from boulder_ai.agent.gem_agent import GemAgent
from boulder_ai.config.loader import DEFAULT_CONFIG_PATH, load_config
from boulder_ai.config.models import AgentConfig
from boulder_ai.utils.logger import setup_logger


def read_screens(lines: Iterable[str]) -> Iterator[List[str]]:
    """按空行切分画面，行尾换行符会被去掉（行内空格保留）"""
    screen: List[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line == "":
            if screen:
                yield screen
                screen = []
            continue
        screen.append(line)
    if screen:
        yield screen


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boulder-ai",
        description="钻石收集 AI：读取 ASCII 画面，每帧输出一条移动指令",
    )
    parser.add_argument("screen_file", nargs="?", type=str, default=None,
                        help="画面文件，缺省时从标准输入读取")
    parser.add_argument("--config", type=str, default=None,
                        help=f"配置文件路径（默认: {DEFAULT_CONFIG_PATH}，不存在时使用内置默认值）")
    parser.add_argument("--log-level", type=str, default=None, help="覆盖配置中的日志级别")
    parser.add_argument("--log-dir", type=str, default=None, help="覆盖配置中的日志目录")
    parser.add_argument("--dump", action="store_true", help="在日志中输出栅格和路径的ASCII图")
    return parser


def resolve_config(args: argparse.Namespace) -> AgentConfig:
    """加载配置并应用命令行覆盖项"""
    if args.config is not None:
        config = load_config(args.config)
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_config(DEFAULT_CONFIG_PATH)
    else:
        config = AgentConfig()

    overrides = {}
    if args.log_level is not None:
        overrides["level"] = args.log_level
    if args.log_dir is not None:
        overrides["log_dir"] = str(Path(args.log_dir).resolve())
    if args.dump:
        overrides["debug_dump"] = True
        overrides.setdefault("level", "DEBUG")

    if overrides:
        logging_cfg = config.logging.model_dump()
        logging_cfg.update(overrides)
        config = config.model_copy(update={"logging": type(config.logging)(**logging_cfg)})
    return config


def run(screens: Iterable[List[str]], config: AgentConfig, out: TextIO) -> int:
    """逐帧运行 AI，返回输出的指令数"""
    agent = GemAgent(config)
    count = 0
    for command in agent.play(screens):
        out.write(command + "\n")
        out.flush()
        count += 1
        if command == "q":
            logger.info(f"AI 放弃，共处理 {count} 帧")
            break
    return count


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        setup_logger("ERROR")
        logger.error(f"配置加载失败: {e}")
        return 1

    setup_logger(config.logging.level, config.logging.log_dir)

    if args.screen_file is None:
        count = run(read_screens(sys.stdin), config, sys.stdout)
    else:
        with open(args.screen_file, "r", encoding="utf-8") as f:
            count = run(read_screens(f), config, sys.stdout)

    logger.debug(f"处理完成，共 {count} 帧")
    return 0


if __name__ == "__main__":
    sys.exit(main())
