"""安装检查报告测试"""

import os

import pytest

from oxlint_lsp.activation import Activated, ActivationFailure, NotActivated, Session, decide
from oxlint_lsp.config import OxlintSettings
from oxlint_lsp.report import (
    CHECK_BINARY,
    CHECK_CONFIG,
    CHECK_EXECUTABLE,
    CHECK_FILE_TYPE,
    CheckStatus,
    verify,
)


@pytest.fixture
def settings():
    return OxlintSettings()


class TestVerify:
    """verify 测试"""

    def test_all_pass(self, repo, app_file, settings):
        """测试全部通过"""
        report = verify(app_file, settings)
        assert report.ok
        assert [c.status for c in report.checks] == [CheckStatus.PASS] * 4
        assert report.get(CHECK_CONFIG).detail == str(repo / ".oxlintrc.json")
        assert report.get(CHECK_BINARY).detail == str(repo / "node_modules" / ".bin" / "oxlint")

    def test_missing_binary(self, repo, app_file, settings):
        """测试缺少二进制时给出安装建议"""
        (repo / "node_modules" / ".bin" / "oxlint").unlink()
        report = verify(app_file, settings)

        assert not report.ok
        binary = report.get(CHECK_BINARY)
        assert binary.status == CheckStatus.FAIL
        assert "npm install --save-dev oxlint" in binary.hint
        assert report.get(CHECK_EXECUTABLE).status == CheckStatus.SKIP
        assert report.get(CHECK_CONFIG).status == CheckStatus.PASS

    def test_missing_config(self, repo, app_file, settings):
        """测试缺少配置文件时给出创建建议"""
        (repo / ".oxlintrc.json").unlink()
        check = verify(app_file, settings).get(CHECK_CONFIG)
        assert check.status == CheckStatus.FAIL
        assert ".oxlintrc.json" in check.hint

    def test_unsupported_file(self, repo, settings):
        """测试不支持的文件类型"""
        report = verify(str(repo / "README.txt"), settings)
        check = report.get(CHECK_FILE_TYPE)
        assert check.status == CheckStatus.FAIL
        assert ".ts" in check.hint
        # 其余检查仍然独立进行
        assert report.get(CHECK_CONFIG).status == CheckStatus.PASS
        assert report.get(CHECK_BINARY).status == CheckStatus.PASS

    def test_not_executable(self, repo, app_file, settings):
        """测试二进制没有执行权限"""
        binary = repo / "node_modules" / ".bin" / "oxlint"
        os.chmod(binary, 0o644)
        check = verify(app_file, settings).get(CHECK_EXECUTABLE)
        assert check.status == CheckStatus.FAIL
        assert "chmod +x" in check.hint

    def test_no_file(self, repo, settings, monkeypatch):
        """测试没有打开文件时从当前目录查找"""
        monkeypatch.chdir(repo / "pkg")
        report = verify(None, settings)
        assert report.file_name is None
        assert report.search_dir == str(repo / "pkg")
        assert report.get(CHECK_FILE_TYPE).status == CheckStatus.FAIL
        assert report.get(CHECK_CONFIG).status == CheckStatus.PASS

    def test_does_not_touch_session(self, repo, app_file, settings):
        """测试检查不修改会话状态"""
        session = Session(file_name=app_file)
        verify(app_file, settings)
        assert session == Session(file_name=app_file)

    def test_no_directory(self, repo, settings, monkeypatch):
        """测试文件名没有目录部分时与激活判断一致"""
        monkeypatch.chdir(repo / "pkg" / "src")
        report = verify("app.ts", settings)
        check = report.get(CHECK_FILE_TYPE)
        assert check.status == CheckStatus.FAIL
        assert "保存" in check.hint
        assert not report.ok
        assert decide("app.ts", settings) == NotActivated(ActivationFailure.NO_DIRECTORY)

    @pytest.mark.parametrize(
        "name",
        ["app.ts", "pkg/src/app.ts", "README.txt", "pkg/src/missing.tsx"],
    )
    def test_agrees_with_decide(self, repo, settings, monkeypatch, name):
        """测试报告结论与激活判断一致"""
        monkeypatch.chdir(repo)
        report = verify(name, settings)
        # 可执行检查只在报告中进行
        relevant = [c for c in report.checks if c.name != CHECK_EXECUTABLE]
        passed = all(c.status == CheckStatus.PASS for c in relevant)
        assert passed == isinstance(decide(name, settings), Activated)

    def test_hint_uses_custom_patterns(self, repo, settings):
        """测试自定义文件模式时提示列出配置的模式"""
        custom = settings.with_changes(active_file_patterns=[r"\.vue\Z"])
        hint = verify(str(repo / "README.txt"), custom).get(CHECK_FILE_TYPE).hint
        assert r"\.vue\Z" in hint
        assert ".tsx" not in hint

    def test_hint_lists_default_extensions(self, repo, settings):
        hint = verify(str(repo / "README.txt"), settings).get(CHECK_FILE_TYPE).hint
        assert ".mdx" in hint


class TestRender:
    """文本渲染测试"""

    def test_render_pass(self, app_file, settings):
        text = verify(app_file, settings).render()
        assert "✅ file type" in text
        assert "全部通过" in text

    def test_render_fail_with_hint(self, repo, app_file, settings):
        (repo / "node_modules" / ".bin" / "oxlint").unlink()
        text = verify(app_file, settings).render()
        assert "❌ binary" in text
        assert "→ 安装 oxlint" in text
        assert "➖ binary executable" in text

    def test_json_dump(self, app_file, settings):
        data = verify(app_file, settings).model_dump(mode="json")
        assert data["checks"][0]["status"] == "pass"
