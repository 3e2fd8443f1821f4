"""宿主能力接口

编辑器侧的 LSP 客户端宿主负责进程启动、协议通信、代码动作执行和界面展示，
本包只通过这里定义的接口与它交互。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .activation import Decision, Session


class HostError(Exception):
    """宿主调用失败"""

    pass


class NoActionsAvailable(HostError):
    """没有可执行的代码动作"""

    pass


BeforeSaveHook = Callable[["Session"], None]


@dataclass
class ClientRegistration:
    """向宿主注册的语言服务器客户端"""

    server_id: str
    command_fn: Callable[["Session"], List[str]]
    activation_fn: Callable[[str, "Session"], "Decision"]
    language_id_fn: Callable[[str], Optional[str]]
    initialization_options_fn: Callable[["Session"], Dict[str, Any]]
    priority: int = -1
    add_on: bool = True


class Host(ABC):
    """LSP 客户端宿主抽象基类"""

    @abstractmethod
    def register_client(self, registration: ClientRegistration) -> None:
        """注册语言服务器客户端"""
        pass

    @abstractmethod
    def add_before_save_hook(self, session: "Session", hook: BeforeSaveHook) -> None:
        """注册保存前回调（缓冲区局部）"""
        pass

    @abstractmethod
    def remove_before_save_hook(self, session: "Session", hook: BeforeSaveHook) -> None:
        """移除保存前回调，不存在时不报错"""
        pass

    @abstractmethod
    def execute_code_action(self, session: "Session", kind: str) -> None:
        """按 kind 执行代码动作

        Raises:
            NoActionsAvailable: 没有匹配的代码动作
            HostError: 其他失败
        """
        pass

    @abstractmethod
    def show_message(self, text: str) -> None:
        """显示提示消息"""
        pass

    @abstractmethod
    def show_report(self, title: str, text: str) -> None:
        """在只读视图中显示报告"""
        pass
