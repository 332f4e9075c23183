#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词典配置文件
存放词典源、内置词典等静态数据，不包含任何业务逻辑
"""

from typing import Dict, List


class DictionaryConfig:
    """词典配置类

    包含所有词典的配置数据：
    - 默认词典源（按偏好顺序）
    - 内置基础词典（所有源失败时的兜底）
    - 介词列表（介词不作为短语起点）

    注意：此类只包含数据，不包含任何业务逻辑
    内置词典随版本发布，修改后需要同步提升 builtin_dictionary_version
    """

    # 默认词典源 - 多CDN镜像，顺序仅用于同时完成时的优先级
    default_sources: List[str] = [
        "https://cdn.jsdelivr.net/gh/fighting41love/funNLP@master/data/%E4%B8%AD%E8%8B%B1%E6%96%87%E8%AF%8D%E5%85%B8/english_dictionary.json",
        "https://gitee.com/fighting41love/funNLP/raw/master/data/%E4%B8%AD%E8%8B%B1%E6%96%87%E8%AF%8D%E5%85%B8/english_dictionary.json",
        "https://ghproxy.com/https://raw.githubusercontent.com/fighting41love/funNLP/master/data/%E4%B8%AD%E8%8B%B1%E6%96%87%E8%AF%8D%E5%85%B8/english_dictionary.json",
        "https://raw.githubusercontent.com/fighting41love/funNLP/master/data/%E4%B8%AD%E8%8B%B1%E6%96%87%E8%AF%8D%E5%85%B8/english_dictionary.json",
    ]

    # 单个词典源的超时时间（毫秒），每个源独立计时
    source_timeout_ms: int = 10000

    # 词典缓存键和有效期（毫秒）
    cache_key: str = "translator-dict-cache"
    cache_ttl_ms: int = 24 * 60 * 60 * 1000

    builtin_dictionary_version: str = "1.0.0"

    # 内置基础词典 - 英文到中文
    builtin_dictionary: Dict[str, str] = {
        # 动词
        "Identify": "识别",
        "Locate": "定位",
        "Find": "找到",
        "Determine": "确定",
        "work": "工作",
        # 位置
        "space": "空间",
        "area": "区域",
        "spot": "位置",
        "point": "点",
        "left": "左",
        "right": "右",
        "top": "顶部",
        "bottom": "底部",
        "center": "中心",
        "corner": "角落",
        # 形容词
        "unoccupied": "未被占用的",
        "vacant": "空置的",
        "clear": "清晰的",
        "white": "白色",
        "beige": "米色",
        # 室内物品
        "sink": "水槽",
        "wall": "墙",
        "floor": "地板",
        "mirror": "镜子",
        "door": "门",
        "window": "窗户",
        "table": "桌子",
        "chair": "椅子",
        "bed": "床",
        "room": "房间",
        "house": "房子",
        # 常见名词
        "object": "物体",
        "person": "人",
        "car": "汽车",
        "building": "建筑",
        "road": "道路",
        "tree": "树",
        "sky": "天空",
        "water": "水",
        "food": "食物",
        "computer": "电脑",
        "phone": "手机",
        "book": "书",
        "paper": "纸",
        # 时间
        "time": "时间",
        "day": "天",
        "night": "夜晚",
        "year": "年",
        # 场所
        "school": "学校",
        "home": "家",
        "city": "城市",
    }

    # 介词 - 只做单词替换，不作为短语的起点
    prepositions: List[str] = [
        "on",
        "at",
        "in",
        "of",
        "to",
        "for",
        "with",
        "by",
        "from",
    ]

    # 句末标点 - 句子切分依据
    sentence_terminators: str = ".!?"

    # 重组时前面不保留空格的标点
    no_space_before: str = ".,!?"


# 提供全局配置实例
config = DictionaryConfig()
