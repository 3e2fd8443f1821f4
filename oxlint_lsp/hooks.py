"""会话钩子管理

会话启动时按设置注册保存前自动修复，会话结束时移除。
"""

from __future__ import annotations

import logging

from .activation import Session
from .config import OxlintSettings
from .host import Host, HostError, NoActionsAvailable

logger = logging.getLogger(__name__)

# oxc 语言服务器声明的修复全部代码动作
FIX_ALL_KIND = "source.fixAll.oxc"


class SessionHookManager:
    """保存前自动修复钩子的注册与注销"""

    def __init__(self, host: Host, settings: OxlintSettings):
        self.host = host
        self.settings = settings

    def on_session_started(self, session: Session, server_id: str) -> bool:
        """会话启动

        Returns:
            是否注册了保存前钩子
        """
        if server_id != self.settings.server_id:
            return False

        session.is_activated = True
        session.server_id = server_id

        if not self.settings.autofix_on_save:
            return False

        if session.fix_on_save_registered:
            return True

        self.host.add_before_save_hook(session, self.before_save)
        session.fix_on_save_registered = True
        logger.debug(f"已注册保存前自动修复: {session.file_name}")
        return True

    def on_session_shutdown(self, session: Session, server_id: str) -> None:
        """会话结束"""
        if server_id != (session.server_id or self.settings.server_id):
            return

        if session.fix_on_save_registered:
            self.host.remove_before_save_hook(session, self.before_save)
            session.fix_on_save_registered = False
            logger.debug(f"已移除保存前自动修复: {session.file_name}")

        session.is_activated = False
        session.server_id = None

    def before_save(self, session: Session) -> None:
        """保存前回调"""
        self.fix_all(session, interactive=False)

    def fix_all(self, session: Session, interactive: bool = True) -> bool:
        """执行修复全部

        自动触发时吞掉所有宿主错误，用户主动调用时只把"没有可用修复"转为提示。

        Returns:
            是否执行了修复
        """
        try:
            self.host.execute_code_action(session, FIX_ALL_KIND)
            return True
        except NoActionsAvailable:
            if interactive:
                self.host.show_message("oxlint: 没有可自动修复的问题")
            return False
        except HostError as e:
            if interactive:
                raise
            logger.warning(f"保存前自动修复失败: {e}")
            return False
