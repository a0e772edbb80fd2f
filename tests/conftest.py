"""
tests/conftest.py - pytest 공통 픽스처

샘플 인벤토리와 장애 주입이 가능한 Provider를 제공합니다.

Usage:
    def test_something(navigator, provider):
        # navigator: 구독 목록이 열린 Navigator
        # provider: FlakyProvider (provider.fail_on.add("list_containers"))
        pass
"""

import copy
import sys
from pathlib import Path
from typing import Any

import pytest
import yaml

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.inventory import StaticProvider  # noqa: E402

STORAGE_TYPE = "Microsoft.Storage/storageAccounts"
VAULT_TYPE = "Microsoft.KeyVault/vaults"
WEB_TYPE = "Microsoft.Web/sites"
VM_TYPE = "Microsoft.Compute/virtualMachines"

SAMPLE_INVENTORY: dict[str, Any] = {
    "user": {"name": "Jane Doe", "email": "jane@example.com", "tenant_id": "tenant-1"},
    "subscriptions": [
        {
            "id": "sub-1",
            "name": "Production",
            "display_name": "Production",
            "state": "Enabled",
            "tenant_id": "tenant-1",
            "resource_groups": [
                {
                    "name": "rg-prod",
                    "location": "koreacentral",
                    "tags": {"env": "prod"},
                    "resources": [
                        {
                            "name": "stprod",
                            "type": STORAGE_TYPE,
                            "location": "koreacentral",
                            "properties": {
                                "sku": {"name": "Standard_LRS", "tier": "Standard"},
                                "supportsHttpsTrafficOnly": True,
                            },
                            "containers": [
                                {
                                    "name": "logs",
                                    "last_modified": "2024-01-01T00:00:00",
                                    "blobs": [
                                        {"name": "a.txt", "size": 10, "content_type": "text/plain"},
                                        {"name": "b.txt", "size": 2048, "content_type": "text/plain"},
                                        {"name": "folder1/c.txt", "size": 100},
                                        {"name": "folder1/sub/d.txt", "size": 200},
                                        {"name": "folder2/e.txt", "size": 300},
                                        {"name": "folder3/", "size": 0},
                                    ],
                                },
                                {"name": "images", "public_access": "blob"},
                            ],
                        },
                        {
                            "name": "kv-prod",
                            "type": VAULT_TYPE,
                            "location": "koreacentral",
                            "properties": {"vaultUri": "https://kv-prod.vault.azure.net/"},
                            "secrets": [
                                {
                                    "name": "db-password",
                                    "value": "s3cr3t",
                                    "content_type": "text/plain",
                                    "updated": "2024-03-01T10:00:00",
                                },
                                {"name": "api-key", "value": "k3y", "enabled": False},
                            ],
                            "keys": [{"name": "signing-key", "key_type": "RSA", "version": "v1"}],
                            "certificates": [
                                {"name": "old-cert", "expires": "2020-01-01T00:00:00", "subject": "CN=old"},
                                {"name": "web-cert", "expires": "2099-01-01T00:00:00", "subject": "CN=web"},
                            ],
                        },
                        {"name": "web-app", "type": WEB_TYPE, "location": "koreacentral"},
                    ],
                },
                {
                    "name": "rg-shared",
                    "location": "eastus",
                    "resources": [
                        {"name": "vm-1", "type": VM_TYPE, "location": "eastus"},
                        {"name": "stshared", "type": STORAGE_TYPE, "location": "eastus"},
                    ],
                },
            ],
        },
        {
            "id": "sub-2",
            "name": "Dev",
            "tenant_id": "tenant-1",
            "resource_groups": [{"name": "rg-dev", "location": "westus"}],
        },
    ],
}


class FlakyProvider(StaticProvider):
    """호출 기록 + 지정한 작업을 실패시키는 StaticProvider

    Attributes:
        fail_on: 실패시킬 메서드 이름 집합
        calls: 호출된 메서드 이름 목록
    """

    def __init__(self, data: dict[str, Any] | None = None, fail_on: tuple[str, ...] = ()):
        super().__init__(data)
        self.fail_on = set(fail_on)
        self.calls: list[str] = []

    def _call(self, name: str, *args, **kwargs):
        self.calls.append(name)
        if name in self.fail_on:
            raise ConnectionError(f"{name} unavailable")
        return getattr(super(), name)(*args, **kwargs)

    def list_subscriptions(self):
        return self._call("list_subscriptions")

    def list_resource_groups(self, subscription_id):
        return self._call("list_resource_groups", subscription_id)

    def list_resources(self, subscription_id, resource_group=None, resource_type=None):
        return self._call("list_resources", subscription_id, resource_group, resource_type)

    def get_resource_type_counts(self, subscription_id, resource_group):
        return self._call("get_resource_type_counts", subscription_id, resource_group)

    def list_containers(self, subscription_id, resource_group, account):
        return self._call("list_containers", subscription_id, resource_group, account)

    def list_keys(self, subscription_id, resource_group, account, container, prefix=""):
        return self._call("list_keys", subscription_id, resource_group, account, container, prefix)

    def get_blob_detail(self, subscription_id, resource_group, account, container, name):
        return self._call("get_blob_detail", subscription_id, resource_group, account, container, name)

    def list_secrets(self, vault_url):
        return self._call("list_secrets", vault_url)

    def list_vault_keys(self, vault_url):
        return self._call("list_vault_keys", vault_url)

    def list_certificates(self, vault_url):
        return self._call("list_certificates", vault_url)

    def get_secret_value(self, vault_url, name):
        return self._call("get_secret_value", vault_url, name)

    def get_vault_key_detail(self, vault_url, name):
        return self._call("get_vault_key_detail", vault_url, name)

    def get_certificate_detail(self, vault_url, name):
        return self._call("get_certificate_detail", vault_url, name)

    def get_user_info(self):
        return self._call("get_user_info")


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """환경변수 격리 + 언어 초기화"""
    from cli.i18n import set_lang

    for name in ("AZCT_INVENTORY", "AZCT_LANG", "AZCT_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    set_lang("ko")

    yield

    set_lang("ko")


# =============================================================================
# 인벤토리 / Provider 픽스처
# =============================================================================


@pytest.fixture
def inventory_data():
    """샘플 인벤토리 딕셔너리 (테스트마다 새 복사본)"""
    return copy.deepcopy(SAMPLE_INVENTORY)


@pytest.fixture
def inventory_file(tmp_path, inventory_data):
    """샘플 인벤토리 YAML 파일"""
    path = tmp_path / "inventory.yaml"
    path.write_text(yaml.safe_dump(inventory_data, allow_unicode=True, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def provider(inventory_data):
    """장애 주입 가능한 Provider"""
    return FlakyProvider(inventory_data)


@pytest.fixture
def registry():
    """기본 핸들러가 등록된 레지스트리"""
    from core.resource import create_default_registry

    return create_default_registry()


@pytest.fixture
def navigator(provider, registry):
    """구독 목록이 열린 Navigator"""
    from core.navigation import Navigator

    nav = Navigator(provider, registry)
    nav.open_subscriptions()
    return nav


def row_of(nav, column: int, text: str) -> int:
    """현재 목록에서 column 값이 text인 행 번호"""
    for row, cells in enumerate(nav.listing.rows()):
        if cells[column] == text:
            return row
    raise AssertionError(f"행을 찾을 수 없습니다: {text}")


@pytest.fixture
def find_row():
    """row_of 헬퍼"""
    return row_of
