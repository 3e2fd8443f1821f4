"""pytest 配置"""

import os
import sys
from pathlib import Path

import pytest

# 添加项目根目录到 Python 路径
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from oxlint_lsp.host import Host, HostError, NoActionsAvailable  # noqa: E402


class FakeHost(Host):
    """记录所有调用的宿主"""

    def __init__(self):
        self.registrations = []
        self.hooks = {}
        self.actions = []
        self.messages = []
        self.reports = []
        self.action_error = None

    def register_client(self, registration):
        self.registrations.append(registration)

    def add_before_save_hook(self, session, hook):
        # 不做去重，重复注册由调用方负责避免
        self.hooks.setdefault(id(session), []).append(hook)

    def remove_before_save_hook(self, session, hook):
        hooks = self.hooks.get(id(session), [])
        if hook in hooks:
            hooks.remove(hook)

    def hooks_for(self, session):
        return list(self.hooks.get(id(session), []))

    def save(self, session):
        """模拟保存：依次运行保存前回调"""
        for hook in self.hooks_for(session):
            hook(session)

    def execute_code_action(self, session, kind):
        self.actions.append(kind)
        if self.action_error is not None:
            raise self.action_error

    def show_message(self, text):
        self.messages.append(text)

    def show_report(self, title, text):
        self.reports.append((title, text))


@pytest.fixture
def host():
    """创建模拟宿主"""
    return FakeHost()


@pytest.fixture
def no_actions_error():
    return NoActionsAvailable("No code actions")


@pytest.fixture
def host_error():
    return HostError("server crashed")


def make_binary(root: Path, name: str = "oxlint", executable: bool = True) -> Path:
    """在 node_modules/.bin 下创建二进制文件"""
    bin_dir = root / "node_modules" / ".bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    binary = bin_dir / name
    binary.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(binary, 0o755 if executable else 0o644)
    return binary


@pytest.fixture
def repo(tmp_path):
    """创建示例项目

    repo/
      .oxlintrc.json
      node_modules/.bin/oxlint
      pkg/src/app.ts
      README.txt
    """
    root = tmp_path / "repo"
    src = root / "pkg" / "src"
    src.mkdir(parents=True)

    (root / ".oxlintrc.json").write_text('{"rules": {}}\n')
    make_binary(root)
    (src / "app.ts").write_text("export const x: number = 1;\n")
    (root / "README.txt").write_text("hello\n")
    return root


@pytest.fixture
def app_file(repo):
    return str(repo / "pkg" / "src" / "app.ts")


@pytest.fixture(name="make_binary")
def make_binary_fixture():
    return make_binary
