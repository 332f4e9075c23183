"""
智能翻译工具主程序
对输入的文本或HTML页面内容做英译中替换翻译:
1. 提取可翻译文本
2. 获取词典（本地缓存 -> 多个词典源竞速 -> 内置基础词典）
3. 分句、分词、短语优先替换
4. 输出原文和译文
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

import config
from config import validate_config
from common.dictionary import AcquisitionResult, DictionaryAcquirer
from common.logger import debug, error, log_step, setup_logger, warning
from text_extractor import NO_TEXT_MESSAGE, extract_text
from translate_text import SubstitutionEngine
from translator_factory import TranslatorFactory


class NoTranslatableTextError(Exception):
    """没有可翻译的文本"""

    pass


class SmartTranslator:
    """智能翻译工具主类"""

    TOTAL_STEPS = 3

    def __init__(
        self,
        use_cache: bool = True,
        offline: bool = False,
        timeout_ms: Optional[int] = None,
        acquirer: Optional[DictionaryAcquirer] = None,
    ):
        """初始化翻译工具

        Args:
            use_cache: 是否使用本地词典缓存
            offline: 离线模式，不请求词典源，只用缓存或内置词典
            timeout_ms: 单个词典源超时（毫秒）
            acquirer: 自定义词典获取器（测试时注入）
        """
        validate_config()

        self.is_online = not offline
        self.acquirer = acquirer or TranslatorFactory.create_acquirer(
            use_cache=use_cache, timeout_ms=timeout_ms, offline=offline
        )
        self.dictionary_result: Optional[AcquisitionResult] = None
        self.engine: Optional[SubstitutionEngine] = None

    def load_dictionary(self) -> AcquisitionResult:
        """获取词典并创建翻译引擎（每个会话只执行一次）"""
        if self.dictionary_result is not None:
            return self.dictionary_result

        log_step(2, self.TOTAL_STEPS, "加载词典", "检查本地缓存，尝试连接词典源")
        self.dictionary_result = self.acquirer.acquire()
        TranslatorFactory.print_initialization_status(self.dictionary_result)

        self.engine = TranslatorFactory.create_engine(
            self.dictionary_result, is_online=self.is_online
        )
        return self.dictionary_result

    def translate(self, raw: Optional[str]) -> Tuple[str, str]:
        """
        翻译的完整流程

        Args:
            raw: 原始输入（纯文本或HTML）

        Returns:
            (原文, 译文)

        Raises:
            NoTranslatableTextError: 没有找到可翻译的文本
        """
        log_step(1, self.TOTAL_STEPS, "提取文本", "分析输入内容")
        text = extract_text(raw)
        if text is None:
            raise NoTranslatableTextError(NO_TEXT_MESSAGE)

        self.load_dictionary()

        log_step(3, self.TOTAL_STEPS, "翻译", "智能分析中")
        translation = self.engine.translate(text)
        return text, translation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="智能翻译工具 - 基于词典的英译中替换翻译",
    )
    parser.add_argument("text", nargs="*", help="待翻译文本（不提供时读取 --file 或标准输入）")
    parser.add_argument("-f", "--file", type=str, help="从文件读取待翻译文本（支持HTML）")
    parser.add_argument("--no-cache", action="store_true", help="不读写本地词典缓存")
    parser.add_argument("--offline", action="store_true", help="离线模式，只使用缓存或内置词典")
    parser.add_argument("--timeout-ms", type=int, default=None, help="单个词典源超时时间（毫秒）")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别 (DEBUG/INFO/WARNING/ERROR)")
    return parser


def read_input(args: argparse.Namespace) -> str:
    """按 参数 -> 文件 -> 标准输入 的顺序读取输入"""
    if args.text:
        return " ".join(args.text)
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def main(argv: Optional[List[str]] = None) -> int:
    """主函数 - 命令行接口"""
    args = build_parser().parse_args(argv)
    setup_logger(level=args.log_level or config.LOG_LEVEL, log_file=config.LOG_FILE)

    if args.timeout_ms is not None and args.timeout_ms <= 0:
        error("参数", "--timeout-ms 必须大于0")
        return 2

    try:
        raw = read_input(args)
    except OSError as e:
        error("输入", f"读取输入失败: {e}")
        return 1
    debug("输入", f"读取 {len(raw)} 个字符")

    try:
        translator = SmartTranslator(
            use_cache=not args.no_cache,
            offline=args.offline,
            timeout_ms=args.timeout_ms,
        )
    except ValueError as e:
        error("配置", str(e))
        return 2

    try:
        original, translation = translator.translate(raw)
    except NoTranslatableTextError as e:
        warning("翻译", str(e))
        print(f"✗ 翻译失败: {e}", file=sys.stderr)
        return 1

    print(f"原文: {original}")
    print(f"译文: {translation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
