#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
键值存储实现
FileStorage 把每个键保存为缓存目录下的一个文件，MemoryStorage 只在进程内有效
"""

import os
import re
import threading
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .interfaces import IDictionaryStorage

logger = logging.getLogger("SmartTranslator.Storage")


class MemoryStorage(IDictionaryStorage):
    """内存存储，进程退出即丢失"""

    def __init__(self):
        self._data: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._data.get(key)

    def write(self, key: str, data: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(data)


class FileStorage(IDictionaryStorage):
    """文件存储

    每个键对应 <directory>/<key>.json，写入时先写临时文件再替换，
    避免进程中断留下半个文件
    """

    def __init__(self, directory: Union[str, Path]):
        """初始化文件存储

        Args:
            directory: 缓存目录，首次写入时自动创建
        """
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        # 键只允许安全字符，防止路径遍历
        safe_key = re.sub(r"[^A-Za-z0-9_.-]", "_", key).lstrip(".")
        if not safe_key:
            raise ValueError(f"无效的存储键: {key!r}")
        return self.directory / f"{safe_key}.json"

    def read(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def write(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(f".{os.getpid()}.tmp")
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        logger.debug(f"已写入缓存文件: {path}")
