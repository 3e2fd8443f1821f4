"""文件类型匹配"""

from __future__ import annotations

import os
import re
from typing import Iterable, Optional, Union

Pattern = Union[str, re.Pattern]

# 语言 ID 映射
LANGUAGE_ID_MAP = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "typescriptreact",
    ".md": "markdown",
    ".mdx": "mdx",
}


def matches(filename: str, patterns: Iterable[Pattern]) -> bool:
    """文件名是否匹配任一模式（区分大小写）"""
    for pattern in patterns:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        if pattern.search(filename):
            return True
    return False


def language_id_for(filename: str) -> Optional[str]:
    """根据文件扩展名获取 LSP 语言 ID"""
    ext = os.path.splitext(filename)[1]
    return LANGUAGE_ID_MAP.get(ext)
