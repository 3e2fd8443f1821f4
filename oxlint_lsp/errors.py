"""异常定义"""


class OxlintLSPError(Exception):
    """oxlint 集成异常基类"""

    pass


class ConfigError(OxlintLSPError, ValueError):
    """设置无效"""

    pass


class ActivationError(OxlintLSPError):
    """会话尚未激活"""

    pass
