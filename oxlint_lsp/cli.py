"""
oxlint-lsp CLI 入口

脱离编辑器运行激活判断和安装检查：
- verify: 显示安装检查报告
- command: 输出某个文件对应的语言服务器启动命令
- settings: 输出当前生效的设置
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler

from . import __version__
from .activation import Activated, Session, decide, initialization_options, launch_command
from .config import OxlintSettings, load_settings
from .display import Display
from .errors import ConfigError
from .report import verify


def setup_logging(verbose: bool = False):
    """配置日志"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_settings(args: argparse.Namespace) -> OxlintSettings:
    """加载设置并应用命令行覆盖"""
    settings = load_settings(args.config)

    changes = {}
    if args.autofix_on_save:
        changes["autofix_on_save"] = True
    if args.config_file_name:
        changes["config_file_name"] = args.config_file_name
    if changes:
        settings = settings.with_changes(**changes)
    return settings


def cmd_verify(args: argparse.Namespace, settings: OxlintSettings, display: Display) -> int:
    report = verify(args.file, settings)
    if args.format == "json":
        print(report.model_dump_json(indent=2))
    else:
        display.report(report)
    return 0 if report.ok else 1


def cmd_command(args: argparse.Namespace, settings: OxlintSettings, display: Display) -> int:
    session = Session(file_name=args.file)
    decision = decide(args.file, settings, session)

    if not isinstance(decision, Activated):
        if args.format == "json":
            print(json.dumps({"activated": False, "reason": decision.reason.value}))
        else:
            display.warning(f"未激活: {decision.reason.value}")
        return 1

    command = launch_command(session)
    if args.format == "json":
        output = {
            "activated": True,
            "command": command,
            "workspace_root": decision.workspace_root,
            "initialization_options": initialization_options(settings, decision),
        }
        print(json.dumps(output, ensure_ascii=False, indent=2))
    else:
        display.success(f"已激活: {args.file}")
        display.print(f"启动命令: {' '.join(command)}")
        display.print(f"配置文件: {decision.config_path}")
    return 0


def cmd_settings(args: argparse.Namespace, settings: OxlintSettings, display: Display) -> int:
    data = settings.to_dict()
    data["active_file_patterns"] = list(data["active_file_patterns"])
    if args.format == "json":
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        for key, value in data.items():
            display.print(f"{key}: {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oxlint-lsp",
        description="oxlint 语言服务器集成工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  oxlint-lsp verify src/app.ts      # 检查安装情况
  oxlint-lsp command src/app.ts     # 输出启动命令
  oxlint-lsp settings               # 输出当前设置
        """,
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="设置文件路径 (YAML)",
    )
    parser.add_argument(
        "--autofix-on-save",
        action="store_true",
        help="启用保存前自动修复",
    )
    parser.add_argument(
        "--config-file-name",
        type=str,
        help="oxlint 配置文件名 (默认: .oxlintrc.json)",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="输出格式 (默认: text)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="输出调试日志",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"oxlint-lsp v{__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    verify_parser = subparsers.add_parser("verify", help="检查安装情况")
    verify_parser.add_argument("file", nargs="?", help="当前文件")
    verify_parser.set_defaults(func=cmd_verify)

    command_parser = subparsers.add_parser("command", help="输出语言服务器启动命令")
    command_parser.add_argument("file", help="要激活的文件")
    command_parser.set_defaults(func=cmd_command)

    settings_parser = subparsers.add_parser("settings", help="输出当前设置")
    settings_parser.set_defaults(func=cmd_settings)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    display = Display()

    try:
        settings = build_settings(args)
    except ConfigError as e:
        display.error(f"设置错误: {e}")
        return 2

    return args.func(args, settings, display)


if __name__ == "__main__":
    sys.exit(main())
