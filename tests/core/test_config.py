# tests/core/test_config.py
"""
core/config.py 단위 테스트
"""

from pathlib import Path

import pytest

from core.config import (
    build_vault_url,
    get_default_lang,
    get_env_bool,
    get_inventory_path,
    get_version,
    is_debug,
    settings,
)
from core.exceptions import ConfigError


class TestSettings:
    """Settings 테스트"""

    def test_defaults(self):
        assert settings.DEFAULT_DELIMITER == "/"
        assert settings.DEFAULT_LANG == "ko"
        assert settings.SUPPORTED_LANGS == ("ko", "en")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            settings.DEFAULT_DELIMITER = "|"

    def test_version_format(self):
        parts = get_version().split(".")
        assert len(parts) >= 2
        assert all(part.isdigit() for part in parts)


class TestEnvHelpers:
    """환경변수 헬퍼 테스트"""

    @pytest.mark.parametrize("value", ["true", "1", "YES", "on"])
    def test_env_bool_true(self, monkeypatch, value):
        monkeypatch.setenv("AZCT_TEST_FLAG", value)
        assert get_env_bool("AZCT_TEST_FLAG") is True

    def test_env_bool_default(self, monkeypatch):
        monkeypatch.delenv("AZCT_TEST_FLAG", raising=False)
        assert get_env_bool("AZCT_TEST_FLAG", default=True) is True

    def test_inventory_path(self, monkeypatch):
        assert get_inventory_path() is None
        monkeypatch.setenv("AZCT_INVENTORY", "/tmp/inv.yaml")
        assert get_inventory_path() == Path("/tmp/inv.yaml")

    def test_default_lang(self, monkeypatch):
        assert get_default_lang() == "ko"
        monkeypatch.setenv("AZCT_LANG", "EN")
        assert get_default_lang() == "en"
        monkeypatch.setenv("AZCT_LANG", "  ")
        assert get_default_lang() == "ko"

    def test_unsupported_lang(self, monkeypatch):
        monkeypatch.setenv("AZCT_LANG", "fr")
        with pytest.raises(ConfigError) as exc_info:
            get_default_lang()
        assert exc_info.value.config_key == "AZCT_LANG"

    def test_debug(self, monkeypatch):
        assert not is_debug()
        monkeypatch.setenv("AZCT_DEBUG", "1")
        assert is_debug()


def test_build_vault_url():
    assert build_vault_url("kv-prod") == "https://kv-prod.vault.azure.net/"
