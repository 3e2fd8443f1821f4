"""向上目录查找

从起始目录逐级向上，查找包含指定标记（配置文件或 node_modules 下的二进制）
的最近祖先目录。
"""

from __future__ import annotations

import os
from typing import Optional

BIN_DIR = os.path.join("node_modules", ".bin")


def binary_marker(binary_name: str) -> str:
    """二进制文件相对于项目根的路径"""
    return os.path.join(BIN_DIR, binary_name)


def find_ancestor_containing(start_dir: str, relative_marker: str) -> Optional[str]:
    """查找包含标记的最近祖先目录

    Args:
        start_dir: 起始目录（包含在查找范围内）
        relative_marker: 相对路径标记，如 ".oxlintrc.json"

    Returns:
        包含标记的目录（不是拼接后的路径），到达根目录仍未找到则返回 None
    """
    current = os.path.abspath(start_dir)

    while True:
        if os.path.exists(os.path.join(current, relative_marker)):
            return current

        parent = os.path.dirname(current)
        # 根目录的父目录是它自己
        if parent == current:
            return None
        current = parent


def find_config_file(start_dir: str, config_file_name: str) -> Optional[str]:
    """查找配置文件，返回完整路径"""
    root = find_ancestor_containing(start_dir, config_file_name)
    if root is None:
        return None
    return os.path.join(root, config_file_name)


def find_binary(start_dir: str, binary_name: str) -> Optional[str]:
    """查找 node_modules/.bin 下的二进制，返回完整路径"""
    marker = binary_marker(binary_name)
    root = find_ancestor_containing(start_dir, marker)
    if root is None:
        return None
    return os.path.join(root, marker)


def is_executable(path: str) -> bool:
    """文件存在且可执行"""
    return os.path.isfile(path) and os.access(path, os.X_OK)
