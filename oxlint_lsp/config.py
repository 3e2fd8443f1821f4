"""配置管理

进程级设置，默认值 + 可选 YAML 文件 + 环境变量覆盖。
每次激活判断都读取一个不可变快照，修改设置即替换快照。
"""

from __future__ import annotations

import dataclasses
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigError

# 支持的文件扩展名
DEFAULT_EXTENSIONS: Tuple[str, ...] = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".mjs",
    ".cjs",
    ".mts",
    ".cts",
    ".md",
    ".mdx",
)

DEFAULT_FILE_PATTERNS: Tuple[str, ...] = tuple(
    re.escape(ext) + r"\Z" for ext in DEFAULT_EXTENSIONS
)

RUN_MODES = ("onType", "onSave")
UNUSED_DIRECTIVE_LEVELS = ("allow", "warn", "deny")
FIX_KINDS = (
    "safe_fix",
    "safe_fix_or_suggestion",
    "dangerous_fix",
    "dangerous_fix_or_suggestion",
    "none",
    "all",
)

AUTOFIX_ENV_VAR = "OXLINT_LSP_AUTOFIX_ON_SAVE"
_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class OxlintSettings:
    """oxlint 集成设置（不可变快照）"""

    active_file_patterns: Tuple[str, ...] = DEFAULT_FILE_PATTERNS
    autofix_on_save: bool = False
    config_file_name: str = ".oxlintrc.json"
    binary_name: str = "oxlint"
    server_id: str = "oxlint"
    priority: int = -1
    add_on: bool = True

    # 转发给语言服务器的初始化选项
    run: str = "onType"
    unused_disable_directives: str = "allow"
    type_aware: bool = False
    fix_kind: str = "safe_fix"

    _compiled: Tuple[re.Pattern, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self):
        try:
            compiled = tuple(re.compile(p) for p in self.active_file_patterns)
        except re.error as e:
            raise ConfigError(f"无效的文件匹配模式: {e}") from e
        object.__setattr__(self, "_compiled", compiled)

    def compiled_patterns(self) -> Tuple[re.Pattern, ...]:
        """获取编译后的文件匹配模式"""
        return self._compiled

    def with_changes(self, **changes: Any) -> "OxlintSettings":
        """返回修改后的新快照"""
        if "active_file_patterns" in changes:
            changes["active_file_patterns"] = tuple(changes["active_file_patterns"])
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.init
        }


# 字段名 -> 期望类型
_FIELD_TYPES: Dict[str, type] = {
    "active_file_patterns": list,
    "autofix_on_save": bool,
    "config_file_name": str,
    "binary_name": str,
    "server_id": str,
    "priority": int,
    "add_on": bool,
    "run": str,
    "unused_disable_directives": str,
    "type_aware": bool,
    "fix_kind": str,
}

_FIELD_CHOICES: Dict[str, Tuple[str, ...]] = {
    "run": RUN_MODES,
    "unused_disable_directives": UNUSED_DIRECTIVE_LEVELS,
    "fix_kind": FIX_KINDS,
}


def settings_from_dict(
    data: Optional[Dict[str, Any]],
    base: Optional[OxlintSettings] = None,
) -> OxlintSettings:
    """从字典创建设置，未指定的字段沿用 base"""
    base = base or OxlintSettings()
    if not data:
        return base

    if not isinstance(data, dict):
        raise ConfigError("配置文件顶层必须是映射")

    changes: Dict[str, Any] = {}
    for key, value in data.items():
        expected = _FIELD_TYPES.get(key)
        if expected is None:
            raise ConfigError(f"未知配置项: {key}")

        # bool 是 int 的子类，需单独排除
        if expected is int and isinstance(value, bool):
            raise ConfigError(f"配置项 {key} 应为 int")
        if not isinstance(value, expected):
            raise ConfigError(f"配置项 {key} 应为 {expected.__name__}")

        if key == "active_file_patterns":
            if not all(isinstance(p, str) for p in value):
                raise ConfigError("active_file_patterns 只能包含字符串")
            value = tuple(value)

        choices = _FIELD_CHOICES.get(key)
        if choices and value not in choices:
            raise ConfigError(
                f"配置项 {key} 的值 {value!r} 无效，可选: {', '.join(choices)}"
            )

        changes[key] = value

    return base.with_changes(**changes)


def find_settings_file() -> Optional[Path]:
    """查找设置文件"""
    # 优先级: 当前目录 > 当前目录 config/ > 用户目录
    search_paths = [
        Path.cwd() / ".oxlint-lsp.yaml",
        Path.cwd() / "config" / "oxlint-lsp.yaml",
        Path.home() / ".oxlint-lsp" / "config.yaml",
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None


def load_settings(config_path: str | Path | None = None) -> OxlintSettings:
    """加载设置

    未指定路径且找不到设置文件时返回默认设置。
    显式指定的路径不存在时抛出 ConfigError。
    """
    if config_path is None:
        config_path = find_settings_file()
    elif not Path(config_path).exists():
        raise ConfigError(f"设置文件不存在: {config_path}")

    settings = OxlintSettings()
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"设置文件解析失败: {e}") from e
        except OSError as e:
            raise ConfigError(f"设置文件读取失败: {e}") from e
        settings = settings_from_dict(data, settings)

    # 环境变量覆盖
    env_value = os.environ.get(AUTOFIX_ENV_VAR)
    if env_value is not None:
        settings = settings.with_changes(
            autofix_on_save=env_value.strip().lower() in _TRUTHY
        )

    return settings
