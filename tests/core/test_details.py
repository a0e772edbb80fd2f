# tests/core/test_details.py
"""
core/resource/details.py 단위 테스트
"""

from datetime import datetime

import pytest

from core.inventory.types import BlobDetail, Certificate, Secret, Subscription
from core.resource.details import (
    DetailBuilder,
    format_datetime,
    format_property,
    format_scalar,
    format_size,
    render_blob_detail,
    render_certificate_detail,
    render_secret_detail,
    render_subscription_detail,
)


class TestFormatSize:
    """format_size 함수 테스트"""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 B"),
            (None, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024, "1.0 MB"),
            (5 * 1024**3, "5.0 GB"),
        ],
    )
    def test_sizes(self, size, expected):
        assert format_size(size) == expected


class TestFormatValues:
    """format_datetime / format_scalar 테스트"""

    def test_datetime(self):
        assert format_datetime(datetime(2024, 3, 1, 10, 0, 0)) == "2024-03-01 10:00:00"
        assert format_datetime(None) == ""

    def test_scalar(self):
        assert format_scalar(None) == "null"
        assert format_scalar(True) == "true"
        assert format_scalar(False) == "false"
        assert format_scalar(3) == "3"


class TestFormatProperty:
    """format_property 테스트 (임의 중첩)"""

    def test_empty_containers(self):
        assert format_property({}) == ["  {}"]
        assert format_property([]) == ["  []"]

    def test_deep_nesting(self):
        value = {"a": {"b": {"c": [1, {"d": None}]}}}
        lines = format_property(value)

        assert lines[0] == "  [bold cyan]a:[/bold cyan]"
        assert lines[-1] == "          [bold cyan]d:[/bold cyan] null"

    def test_empty_nested_inline(self):
        lines = format_property({"tags": {}, "zones": []})
        assert lines == ["  [bold cyan]tags:[/bold cyan] {}", "  [bold cyan]zones:[/bold cyan] []"]


class TestDetailBuilder:
    """DetailBuilder 테스트"""

    def test_optional_field_skipped(self):
        text = DetailBuilder("T").optional_field("Version", "").field("Name", None).build()
        assert "Version" not in text
        assert "[bold cyan]Name:[/bold cyan] \n" in text

    def test_mapping_none(self):
        text = DetailBuilder("T").mapping("Metadata", {}).build()
        assert "[bold cyan]Metadata:[/bold cyan] None" in text


class TestRenderers:
    """레코드별 상세 보기 테스트"""

    def test_subscription(self):
        sub = Subscription(id="sub-1", name="Production", display_name="Prod", state="Enabled", tenant_id="t1")
        text = render_subscription_detail(sub)

        assert "Subscription Details" in text
        assert "[bold cyan]Display Name:[/bold cyan] Prod" in text
        assert "[bold cyan]Tenant ID:[/bold cyan] t1" in text

    def test_blob(self):
        blob = BlobDetail(name="folder1/c.txt", size=2048, content_type="text/plain")
        text = render_blob_detail(blob, "stprod", "logs")

        assert "[bold cyan]Size:[/bold cyan] 2.0 KB" in text
        assert "[bold cyan]Container:[/bold cyan] logs" in text

    def test_secret_value_never_rendered(self):
        """시크릿 상세에는 값 필드가 없음"""
        text = render_secret_detail(Secret(name="db-password", content_type="text/plain"), "kv-prod")

        assert "Secret Details" in text
        assert "Value" not in text

    def test_expired_certificate(self):
        cert = Certificate(name="old", expires=datetime(2020, 1, 1))
        text = render_certificate_detail(cert, "kv-prod", now=datetime(2024, 1, 1))
        assert "2020-01-01 00:00:00 EXPIRED" in text

    def test_valid_certificate(self):
        cert = Certificate(name="web", expires=datetime(2099, 1, 1))
        text = render_certificate_detail(cert, "kv-prod", now=datetime(2024, 1, 1))
        assert "EXPIRED" not in text
