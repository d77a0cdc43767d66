"""
彩色日志配置模块
为命令行工具提供统一的日志配置
"""
import copy
import logging
import sys
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


class ColorfulFormatter(logging.Formatter):
    """彩色日志格式化器（--plain 模式使用）"""

    # ANSI颜色代码
    COLORS = {
        'DEBUG': '\033[36m',      # 青色
        'INFO': '\033[32m',       # 绿色
        'WARNING': '\033[33m',    # 黄色
        'ERROR': '\033[31m',      # 红色
        'CRITICAL': '\033[35m',   # 紫色
    }
    RESET = '\033[0m'

    def format(self, record):
        # 只为级别字段着色，复制 record 以免影响其他处理器
        level_name = record.levelname
        if level_name in self.COLORS:
            record = copy.copy(record)
            record.levelname = f"{self.COLORS[level_name]}{level_name}{self.RESET}"
        return super().format(record)


def setup_colorful_logging(
    level: Union[int, str] = logging.INFO,
    name: Optional[str] = None,
    rich_output: bool = True,
) -> logging.Logger:
    """
    设置彩色日志配置

    Args:
        level: 日志级别
        name: 日志器名称
        rich_output: True 使用 RichHandler（输出到 stderr），False 使用 ANSI 格式化器

    Returns:
        配置好的日志器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 避免重复添加处理器
    if logger.handlers:
        return logger

    if rich_output:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=False,
            enable_link_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
        )
        # RichHandler 已经处理时间和级别
        formatter = logging.Formatter('%(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    else:
        handler = logging.StreamHandler(sys.stderr)
        formatter = ColorfulFormatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def get_colorful_logger(name: Optional[str] = None, rich_output: bool = True) -> logging.Logger:
    """获取彩色日志器"""
    return setup_colorful_logging(name=name, rich_output=rich_output)
