"""终端显示"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .report import CheckStatus, Report

_STATUS_STYLES = {
    CheckStatus.PASS: ("✅", "green"),
    CheckStatus.FAIL: ("❌", "red"),
    CheckStatus.SKIP: ("➖", "dim"),
}


class Display:
    """终端显示"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print(self, text: str, style: Optional[str] = None):
        """原样输出，不解析 rich 标记"""
        self.console.print(text, style=style, markup=False, soft_wrap=True)

    def report(self, report: Report):
        """显示检查报告"""
        body = Text()
        body.append(f"文件: {report.file_name or '(无)'}\n", style="dim")
        body.append(f"查找目录: {report.search_dir}\n\n", style="dim")

        for check in report.checks:
            icon, style = _STATUS_STYLES[check.status]
            body.append(f"{icon} ")
            body.append(check.name, style=f"bold {style}")
            if check.detail:
                body.append(f": {check.detail}")
            body.append("\n")
            if check.status == CheckStatus.FAIL and check.hint:
                body.append(f"   → {check.hint}\n", style="yellow")

        self.console.print(Panel(
            body,
            title="oxlint 安装检查",
            border_style="green" if report.ok else "red",
        ))

    def success(self, message: str):
        self.console.print(f"✅ {message}", style="green", soft_wrap=True)

    def error(self, message: str):
        self.console.print(f"❌ {message}", style="red")

    def warning(self, message: str):
        self.console.print(f"⚠️ {message}", style="yellow")
