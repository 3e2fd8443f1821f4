"""安装检查报告

逐项重新计算激活判断用到的条件，生成只读的检查清单和修复建议。
不读写任何会话状态，没有打开文件时也可以调用。
"""

from __future__ import annotations

import os
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from .config import DEFAULT_EXTENSIONS, DEFAULT_FILE_PATTERNS, OxlintSettings
from .discovery import find_binary, find_config_file, is_executable
from .matcher import matches


class CheckStatus(str, Enum):
    """检查状态"""

    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


_STATUS_ICONS = {
    CheckStatus.PASS: "✅",
    CheckStatus.FAIL: "❌",
    CheckStatus.SKIP: "➖",
}


class CheckResult(BaseModel):
    """单项检查结果"""

    name: str
    status: CheckStatus
    detail: str = ""
    hint: Optional[str] = None


class Report(BaseModel):
    """检查报告"""

    file_name: Optional[str] = None
    search_dir: str
    checks: List[CheckResult]

    @property
    def ok(self) -> bool:
        return all(c.status != CheckStatus.FAIL for c in self.checks)

    def get(self, name: str) -> Optional[CheckResult]:
        for check in self.checks:
            if check.name == name:
                return check
        return None

    def render(self) -> str:
        """渲染为纯文本清单"""
        lines = [
            "oxlint 安装检查",
            f"文件: {self.file_name or '(无)'}",
            f"查找目录: {self.search_dir}",
            "",
        ]
        for check in self.checks:
            icon = _STATUS_ICONS[check.status]
            line = f"{icon} {check.name}"
            if check.detail:
                line += f": {check.detail}"
            lines.append(line)
            if check.status == CheckStatus.FAIL and check.hint:
                lines.append(f"   → {check.hint}")

        lines.append("")
        lines.append("全部通过" if self.ok else "存在未通过的检查")
        return "\n".join(lines)


CHECK_FILE_TYPE = "file type"
CHECK_CONFIG = "config file"
CHECK_BINARY = "binary"
CHECK_EXECUTABLE = "binary executable"


def verify(filename: Optional[str], settings: OxlintSettings) -> Report:
    """生成检查报告"""
    if filename:
        search_dir = os.path.dirname(os.path.abspath(filename))
    else:
        search_dir = os.getcwd()

    checks: List[CheckResult] = []

    # 文件类型
    supported = _supported_description(settings)
    if not filename:
        checks.append(CheckResult(
            name=CHECK_FILE_TYPE,
            status=CheckStatus.FAIL,
            detail="没有打开的文件",
            hint=f"打开一个支持的文件类型 ({supported})",
        ))
    elif not os.path.dirname(filename):
        checks.append(CheckResult(
            name=CHECK_FILE_TYPE,
            status=CheckStatus.FAIL,
            detail=f"文件没有所在目录: {filename}",
            hint="先把缓冲区保存到磁盘上的文件",
        ))
    elif matches(filename, settings.compiled_patterns()):
        checks.append(CheckResult(
            name=CHECK_FILE_TYPE,
            status=CheckStatus.PASS,
            detail=os.path.basename(filename),
        ))
    else:
        checks.append(CheckResult(
            name=CHECK_FILE_TYPE,
            status=CheckStatus.FAIL,
            detail=f"不支持的文件类型: {os.path.basename(filename)}",
            hint=f"打开一个支持的文件类型 ({supported})",
        ))

    # 配置文件
    config_path = find_config_file(search_dir, settings.config_file_name)
    if config_path:
        checks.append(CheckResult(
            name=CHECK_CONFIG,
            status=CheckStatus.PASS,
            detail=config_path,
        ))
    else:
        checks.append(CheckResult(
            name=CHECK_CONFIG,
            status=CheckStatus.FAIL,
            detail=f"未找到 {settings.config_file_name}",
            hint=f"在项目根目录创建 {settings.config_file_name} (npx {settings.binary_name} --init)",
        ))

    # 二进制
    binary_path = find_binary(search_dir, settings.binary_name)
    if binary_path:
        checks.append(CheckResult(
            name=CHECK_BINARY,
            status=CheckStatus.PASS,
            detail=binary_path,
        ))
    else:
        checks.append(CheckResult(
            name=CHECK_BINARY,
            status=CheckStatus.FAIL,
            detail=f"未找到 node_modules/.bin/{settings.binary_name}",
            hint=f"安装 {settings.binary_name}: npm install --save-dev {settings.binary_name}",
        ))

    # 可执行权限
    if binary_path is None:
        checks.append(CheckResult(
            name=CHECK_EXECUTABLE,
            status=CheckStatus.SKIP,
            detail="未找到二进制",
        ))
    elif is_executable(binary_path):
        checks.append(CheckResult(
            name=CHECK_EXECUTABLE,
            status=CheckStatus.PASS,
            detail=binary_path,
        ))
    else:
        checks.append(CheckResult(
            name=CHECK_EXECUTABLE,
            status=CheckStatus.FAIL,
            detail=f"没有执行权限: {binary_path}",
            hint=f"chmod +x {binary_path}，或重新安装 {settings.binary_name}",
        ))

    return Report(
        file_name=filename,
        search_dir=search_dir,
        checks=checks,
    )


def _supported_description(settings: OxlintSettings) -> str:
    """支持的文件类型说明，自定义模式时直接列出模式"""
    if settings.active_file_patterns == DEFAULT_FILE_PATTERNS:
        return ", ".join(DEFAULT_EXTENSIONS)
    return "匹配 " + ", ".join(settings.active_file_patterns)
