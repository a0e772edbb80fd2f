# tests/core/test_filterable.py
"""
core/listing/filterable.py 단위 테스트

대소문자 무시 부분 문자열 필터 투영 테스트.
"""

from dataclasses import dataclass

from core.listing import Align, ColumnConfig, FilterableList, contains_ignore_case


@dataclass
class Row:
    name: str
    group: str


COLUMNS = (ColumnConfig("Name"), ColumnConfig("Group"))


def _cell(row: Row, index: int) -> str:
    return [row.name, row.group][index] if index < 2 else ""


def _listing():
    listing = FilterableList(COLUMNS, _cell)
    listing.load(
        [
            Row("web", "rg1"),
            Row("db", "rg2"),
            Row("rg1-cache", "rg3"),
            Row("queue", "rg4"),
            Row("api", "rg5"),
        ]
    )
    return listing


class TestContainsIgnoreCase:
    """contains_ignore_case 함수 테스트"""

    def test_case_insensitive(self):
        assert contains_ignore_case("MyResourceGroup", "resource")
        assert contains_ignore_case("rg1", "RG1")

    def test_empty_text_matches(self):
        assert contains_ignore_case("", "")
        assert contains_ignore_case("anything", "")

    def test_no_match(self):
        assert not contains_ignore_case("web", "db")


class TestFilterableList:
    """FilterableList 테스트"""

    def test_initial_identity(self):
        """로드 직후 전체 표시"""
        listing = _listing()
        assert listing.total_count() == 5
        assert listing.filtered_count() == 5
        assert listing.filtered_indices == (0, 1, 2, 3, 4)

    def test_filter_any_column_case_mismatch(self):
        """어느 컬럼이든 포함하면 매칭 (대소문자 무시)"""
        listing = _listing()
        listing.set_filter("RG1")

        assert listing.filtered_count() == 2
        assert listing.filtered_indices == (0, 2)

    def test_same_filter_is_deterministic(self):
        """같은 필터를 두 번 적용하면 같은 인덱스 순서"""
        listing = _listing()
        listing.set_filter("rg1")
        first = listing.filtered_indices
        listing.set_filter("rg1")

        assert listing.filtered_indices == first == (0, 2)

        listing.configure(COLUMNS, _cell)
        assert listing.filtered_indices == first
        listing.set_filter("rg1")
        assert listing.filtered_indices == first
        assert [r.name for r in listing.filtered_records()] == ["web", "rg1-cache"]

    def test_clear_restores_identity(self):
        """빈 필터는 전체 복원"""
        listing = _listing()
        listing.set_filter("RG1")
        listing.set_filter("")

        assert listing.filtered_count() == listing.total_count() == 5
        assert listing.filtered_indices == (0, 1, 2, 3, 4)
        assert not listing.has_filter

    def test_clear_filter(self):
        listing = _listing()
        listing.set_filter("db")
        listing.clear_filter()
        assert listing.filtered_count() == 5

    def test_no_match_empty(self):
        listing = _listing()
        listing.set_filter("zzz")
        assert listing.filtered_count() == 0
        assert listing.rows() == []
        assert listing.record_at(0) is None

    def test_order_preserved(self):
        """필터 결과는 원래 순서 유지"""
        listing = _listing()
        listing.set_filter("rg")
        assert listing.filtered_indices == (0, 1, 2, 3, 4)

    def test_filter_replaces_previous(self):
        """필터는 누적되지 않고 교체"""
        listing = _listing()
        listing.set_filter("db")
        listing.set_filter("web")
        assert [r.name for r in listing.filtered_records()] == ["web"]

    def test_row_mapping(self):
        """표시 행 -> 원본 위치"""
        listing = _listing()
        listing.set_filter("rg1")

        assert listing.index_at(1) == 2
        assert listing.record_at(1).name == "rg1-cache"
        assert listing.index_at(2) == -1
        assert listing.index_at(-1) == -1

    def test_records_not_mutated(self):
        """필터는 원본 레코드를 바꾸지 않음"""
        listing = _listing()
        before = listing.records
        listing.set_filter("rg1")
        assert listing.records == before

    def test_rows_cells(self):
        listing = _listing()
        listing.set_filter("queue")
        assert listing.rows() == [["queue", "rg4"]]

    def test_load_resets_filter(self):
        """새 데이터 로드 시 필터 초기화"""
        listing = _listing()
        listing.set_filter("rg1")
        listing.load([Row("x", "y")])

        assert listing.filter_text == ""
        assert listing.filtered_count() == 1

    def test_configure_reapplies_filter(self):
        """스키마 교체 시 현재 필터를 새 컬럼으로 다시 적용"""
        listing = _listing()
        listing.set_filter("rg1")
        listing.configure((ColumnConfig("Name"),), _cell)

        assert listing.filter_text == "rg1"
        assert listing.filtered_indices == (2,)

    def test_filtered_never_exceeds_total(self):
        listing = _listing()
        for text in ("", "r", "rg", "web", "nothing"):
            listing.set_filter(text)
            assert listing.filtered_count() <= listing.total_count()
            assert all(0 <= i < listing.total_count() for i in listing.filtered_indices)


class TestColumnConfig:
    """ColumnConfig 테스트"""

    def test_defaults(self):
        column = ColumnConfig("Name")
        assert column.align is Align.LEFT
        assert column.is_auto_width

    def test_fixed_width(self):
        column = ColumnConfig("Count", Align.RIGHT, width=6)
        assert not column.is_auto_width
        assert column.align.value == "right"
