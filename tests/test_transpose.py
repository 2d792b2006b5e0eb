"""
Tests for the transpose step (SourceMatrix → TargetMatrix).

The law under test:
    target.rows[i][j] == source.rows[j + 1][i]

Row 0 of the source is a header and never reaches the target.
"""

import pytest
from costgen.model import SourceMatrix, TargetMatrix
from costgen.table_parser import load_upgrade_cost_table
from costgen.table_data import SENTINEL
from costgen.transpose import transpose_matrix


class TestTransposeSmallTables:
    """Test the transpose on hand-written tables."""

    def test_header_row_is_skipped(self):
        source = SourceMatrix(rows=[
            ["h0", "h1"],
            ["a", "b"],
            ["c", "d"],
        ])
        target = transpose_matrix(source)
        assert isinstance(target, TargetMatrix)
        assert target.rows == [["a", "c"], ["b", "d"]]

    def test_header_rows_zero_keeps_every_row(self):
        source = SourceMatrix(rows=[["a", "b"], ["c", "d"]])
        target = transpose_matrix(source, header_rows=0)
        assert target.rows == [["a", "c"], ["b", "d"]]

    def test_header_only_gives_empty_rows(self):
        source = SourceMatrix(rows=[["h0", "h1", "h2"]])
        target = transpose_matrix(source)
        assert target.rows == [[], [], []]

    def test_empty_source(self):
        target = transpose_matrix(SourceMatrix())
        assert target.rows == []

    def test_source_is_not_modified(self):
        source = SourceMatrix(rows=[["h"], ["1"], ["2"]])
        transpose_matrix(source)
        assert source.rows == [["h"], ["1"], ["2"]]

    def test_ragged_row_truncates_and_warns(self):
        """A short source row leaves a short target row rather than failing."""
        source = SourceMatrix(rows=[
            ["h0", "h1", "h2"],
            ["1", "2", "3"],
            ["4", "5"],
        ])
        with pytest.warns(UserWarning, match="Source row 2 has no column 2"):
            target = transpose_matrix(source)
        assert target.rows == [["1", "4"], ["2", "5"], ["3"]]
        assert not target.is_rectangular()


class TestTransposeShippedTable:
    """Test the transpose on the embedded upgrade-cost table."""

    @pytest.fixture
    def source(self):
        return load_upgrade_cost_table()

    @pytest.fixture
    def target(self, source):
        return transpose_matrix(source)

    def test_shape_is_11_by_20(self, target):
        assert target.row_count == 11
        assert all(len(row) == 20 for row in target.rows)
        assert target.width == 20
        assert target.value_count() == 220

    def test_transpose_law(self, source, target):
        for i in range(11):
            for j in range(20):
                assert target.rows[i][j] == source.rows[j + 1][i]

    def test_first_upgrade_costs(self, target):
        assert target.rows[0] == [
            "0", "30", "62", "129", "266", "551", "1140", "2360", "4886", "10113",
        ] + [SENTINEL] * 10

    def test_fourth_upgrade_costs(self, target):
        assert target.rows[3] == ["1080", "1728", "2765", "4424", "7078"] + [SENTINEL] * 15

    def test_last_upgrade_costs(self, target):
        assert target.rows[10] == ["10000000"] + [SENTINEL] * 19

    def test_sentinel_positions_preserved(self, source, target):
        expected = {
            (i, j)
            for j, row in enumerate(source.rows[1:])
            for i, cell in enumerate(row)
            if cell == SENTINEL
        }
        actual = {
            (i, j)
            for i, row in enumerate(target.rows)
            for j, cell in enumerate(row)
            if cell == SENTINEL
        }
        assert actual == expected
        assert len(actual) == 152

    def test_placeholder_row_never_reaches_target(self, target):
        """No tier costs exactly 1, so any "1" would have come from row 0."""
        assert all(cell != "1" for row in target.rows for cell in row)
