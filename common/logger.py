"""
统一日志模块
提供格式化的日志输出，同时支持终端显示、文件持久化和状态回调
"""

import os
import sys
import logging
from datetime import datetime
from typing import Optional, Callable, List

ROOT_LOGGER_NAME = "SmartTranslator"


class LogCallback:
    """日志回调处理器，用于将状态消息同步到界面"""

    def __init__(self):
        self._callbacks: List[Callable[[str], None]] = []

    def register(self, callback: Callable[[str], None]) -> None:
        """注册日志回调函数"""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[str], None]) -> None:
        """注销日志回调函数"""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, message: str) -> None:
        """触发所有注册的回调"""
        for callback in list(self._callbacks):
            try:
                callback(message)
            except Exception as e:
                # 回调失败不中断日志
                logging.getLogger(ROOT_LOGGER_NAME).debug(f"日志回调失败: {e!r}")


# 全局日志回调实例
log_callback = LogCallback()

# 日志级别映射
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# 默认日志格式
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_str: Optional[str] = None,
    enable_console: bool = True,
) -> logging.Logger:
    """
    设置日志系统

    Args:
        name: 日志名称，组件日志使用 "SmartTranslator.<组件>" 作为子logger
        level: 日志级别 (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: 日志文件路径，None表示不写入文件
        format_str: 日志格式字符串
        enable_console: 是否输出到控制台（stderr，不干扰译文输出）

    Returns:
        配置好的Logger实例
    """
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # 清除已有的处理器（避免重复）
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_str or DEFAULT_FORMAT)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        try:
            # 确保目录存在
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            # 文件写入失败不影响日志输出
            logger.warning(f"无法写入日志文件 {log_file}: {e}")

    return logger


def log_message(
    tag: str,
    content: str,
    level: str = "INFO",
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    统一的日志消息输出

    Args:
        tag: 标签，如 词典, 翻译, 初始化 等
        content: 消息内容
        level: 日志级别
        logger: 使用的logger实例，None则使用默认logger

    Returns:
        格式化后的完整消息字符串
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    full_message = f"[{timestamp}] [{tag}] {content}"

    if logger is None:
        logger = logging.getLogger(ROOT_LOGGER_NAME)

    logger.log(LOG_LEVELS.get(level.upper(), logging.INFO), f"[{tag}] {content}")

    # 同步到界面回调
    log_callback.emit(full_message)

    return full_message


def log_step(
    step: int,
    total: int,
    name: str,
    status: str = "进行中",
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    记录步骤进度日志

    Args:
        step: 当前步骤
        total: 总步骤数
        name: 步骤名称
        status: 状态
        logger: 使用的logger实例
    """
    content = f"[{step}/{total}] {name} - {status}"
    log_message("步骤进度", content, level="INFO", logger=logger)


# 便捷函数
def info(tag: str, content: str) -> str:
    """输出INFO级别日志"""
    return log_message(tag, content, level="INFO")


def warning(tag: str, content: str) -> str:
    """输出WARNING级别日志"""
    return log_message(tag, content, level="WARNING")


def error(tag: str, content: str) -> str:
    """输出ERROR级别日志"""
    return log_message(tag, content, level="ERROR")


def debug(tag: str, content: str) -> str:
    """输出DEBUG级别日志"""
    return log_message(tag, content, level="DEBUG")
