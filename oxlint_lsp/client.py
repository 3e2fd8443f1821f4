"""oxlint 语言服务器集成

把激活判断、启动命令、会话钩子和检查报告组装成宿主可注册的客户端。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .activation import (
    Activated,
    Decision,
    Session,
    decide,
    initialization_options,
    launch_command,
)
from .config import OxlintSettings
from .hooks import SessionHookManager
from .host import ClientRegistration, Host
from .matcher import language_id_for
from .report import Report, verify

logger = logging.getLogger(__name__)

REPORT_TITLE = "*oxlint verify*"


class OxlintIntegration:
    """oxlint 客户端集成"""

    def __init__(self, host: Host, settings: Optional[OxlintSettings] = None):
        self.host = host
        self.settings = settings or OxlintSettings()
        self.hooks = SessionHookManager(host, self.settings)

    def update_settings(self, settings: OxlintSettings) -> None:
        """替换设置快照，之后的判断使用新设置"""
        self.settings = settings
        self.hooks.settings = settings

    def registration(self) -> ClientRegistration:
        """构建客户端注册信息"""
        return ClientRegistration(
            server_id=self.settings.server_id,
            command_fn=self.command,
            activation_fn=self.activate,
            language_id_fn=language_id_for,
            initialization_options_fn=self.initialization_options,
            priority=self.settings.priority,
            add_on=self.settings.add_on,
        )

    def register(self) -> ClientRegistration:
        """向宿主注册客户端"""
        registration = self.registration()
        self.host.register_client(registration)
        logger.info(f"已注册语言服务器客户端: {registration.server_id}")
        return registration

    def activate(self, filename: str, session: Session) -> Decision:
        """宿主考虑挂载客户端时调用"""
        session.file_name = filename
        decision = decide(filename, self.settings, session)
        if isinstance(decision, Activated):
            logger.debug(f"已激活 {filename}: {decision.binary_path}")
        else:
            logger.debug(f"未激活 {filename}: {decision.reason.value}")
        return decision

    def command(self, session: Session) -> List[str]:
        """语言服务器启动命令"""
        return launch_command(session)

    def initialization_options(self, session: Session) -> Dict[str, Any]:
        """初始化选项，configPath 取自当前文件解析到的配置"""
        decision = None
        if session.file_name:
            decision = decide(session.file_name, self.settings)
        if not isinstance(decision, Activated):
            decision = None
        return initialization_options(self.settings, decision)

    def on_session_started(self, session: Session, server_id: str) -> bool:
        return self.hooks.on_session_started(session, server_id)

    def on_session_shutdown(self, session: Session, server_id: str) -> None:
        self.hooks.on_session_shutdown(session, server_id)

    def fix_current_buffer(self, session: Session) -> bool:
        """修复当前缓冲区的全部可自动修复问题"""
        return self.hooks.fix_all(session, interactive=True)

    def verify_setup(self, filename: Optional[str] = None) -> Report:
        """检查安装情况并在只读视图中显示"""
        report = verify(filename, self.settings)
        self.host.show_report(REPORT_TITLE, report.render())
        return report
