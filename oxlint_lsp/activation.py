"""激活判断

决定某个文件是否挂载 oxlint 语言服务器，并解析出要启动的二进制路径。
四项检查全部通过才激活，任一失败立即返回 NotActivated。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .config import OxlintSettings
from .discovery import binary_marker, find_ancestor_containing
from .errors import ActivationError
from .matcher import matches


LSP_FLAG = "--lsp"


@dataclass
class Session:
    """单个文件缓冲区的会话状态，由调用方持有"""

    file_name: Optional[str] = None
    resolved_binary_path: Optional[str] = None
    is_activated: bool = False
    fix_on_save_registered: bool = False
    # 启动会话时的服务器 id，设置修改后仍按它匹配结束事件
    server_id: Optional[str] = None


class ActivationFailure(Enum):
    """未激活原因"""

    NO_DIRECTORY = "no_directory"
    UNSUPPORTED_FILE = "unsupported_file"
    NO_CONFIG = "no_config"
    NO_BINARY = "no_binary"


@dataclass(frozen=True)
class Activated:
    """激活成功"""

    binary_path: str
    config_path: str
    workspace_root: str


@dataclass(frozen=True)
class NotActivated:
    """未激活"""

    reason: ActivationFailure


Decision = Union[Activated, NotActivated]


def decide(
    filename: str,
    settings: OxlintSettings,
    session: Optional[Session] = None,
) -> Decision:
    """判断文件是否激活

    传入 session 时同步缓存的二进制路径：激活成功时记录路径，失败时清空，
    保证缓存的路径总是来自最近一次成功的判断。
    """
    decision = _evaluate(filename, settings)

    if session is not None:
        if isinstance(decision, Activated):
            session.resolved_binary_path = decision.binary_path
        else:
            session.resolved_binary_path = None

    return decision


def _evaluate(filename: str, settings: OxlintSettings) -> Decision:
    directory = os.path.dirname(filename) if filename else ""
    if not directory:
        return NotActivated(ActivationFailure.NO_DIRECTORY)

    if not matches(filename, settings.compiled_patterns()):
        return NotActivated(ActivationFailure.UNSUPPORTED_FILE)

    config_root = find_ancestor_containing(directory, settings.config_file_name)
    if config_root is None:
        return NotActivated(ActivationFailure.NO_CONFIG)

    marker = binary_marker(settings.binary_name)
    binary_root = find_ancestor_containing(directory, marker)
    if binary_root is None:
        return NotActivated(ActivationFailure.NO_BINARY)

    return Activated(
        binary_path=os.path.join(binary_root, marker),
        config_path=os.path.join(config_root, settings.config_file_name),
        workspace_root=config_root,
    )


def launch_command(session: Session) -> List[str]:
    """语言服务器启动命令"""
    if session.resolved_binary_path is None:
        raise ActivationError(
            f"会话尚未激活，无法获取启动命令: {session.file_name or '<无文件>'}"
        )
    return [session.resolved_binary_path, LSP_FLAG]


def initialization_options(
    settings: OxlintSettings,
    decision: Optional[Activated] = None,
) -> Dict[str, Any]:
    """语言服务器初始化选项"""
    options: Dict[str, Any] = {
        "run": settings.run,
        "unusedDisableDirectives": settings.unused_disable_directives,
        "typeAware": settings.type_aware,
        "fixKind": settings.fix_kind,
    }
    if decision is not None:
        options["configPath"] = decision.config_path
    return options
