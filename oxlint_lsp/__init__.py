"""
oxlint-lsp - oxlint 语言服务器的编辑器集成

为 LSP 客户端宿主提供 oxlint (`oxlint --lsp`) 的激活判断、二进制查找、
保存前自动修复和安装检查。支持 JavaScript / TypeScript / Markdown 文件。
"""

__version__ = "0.1.0"

from .activation import (
    ActivationFailure,
    Activated,
    Decision,
    NotActivated,
    Session,
    decide,
    initialization_options,
    launch_command,
)
from .client import OxlintIntegration
from .config import OxlintSettings, load_settings, settings_from_dict
from .discovery import find_ancestor_containing, find_binary, find_config_file
from .errors import ActivationError, ConfigError, OxlintLSPError
from .hooks import FIX_ALL_KIND, SessionHookManager
from .host import ClientRegistration, Host, HostError, NoActionsAvailable
from .matcher import language_id_for, matches
from .report import CheckResult, CheckStatus, Report, verify

__all__ = [
    # Activation
    "Activated",
    "ActivationFailure",
    "Decision",
    "NotActivated",
    "Session",
    "decide",
    "initialization_options",
    "launch_command",
    # Integration
    "OxlintIntegration",
    # Config
    "OxlintSettings",
    "load_settings",
    "settings_from_dict",
    # Discovery
    "find_ancestor_containing",
    "find_binary",
    "find_config_file",
    # Errors
    "OxlintLSPError",
    "ConfigError",
    "ActivationError",
    # Hooks
    "FIX_ALL_KIND",
    "SessionHookManager",
    # Host
    "Host",
    "HostError",
    "NoActionsAvailable",
    "ClientRegistration",
    # Matcher
    "matches",
    "language_id_for",
    # Report
    "Report",
    "CheckResult",
    "CheckStatus",
    "verify",
]
