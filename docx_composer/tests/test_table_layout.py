"""Tests covering table widths, shading and alignment."""
import unittest

from docx_composer.builder.styles_loader import load_default_registry
from docx_composer.builder.table_layout import (
    DATA_CELL_MARGINS,
    HEADER_CELL_MARGINS,
    SHADE_EVEN,
    SHADE_ODD,
    compute_column_widths,
    compute_table_grid,
    layout_table,
)
from docx_composer.config import DEFAULT_TABLE_WIDTH_TWIPS
from docx_composer.errors import MalformedTableError
from docx_composer.model.elements import ALIGN_CENTER, ALIGN_LEFT


class ColumnWidthTest(unittest.TestCase):
    """Floor division without redistributing the remainder."""

    def test_even_split(self) -> None:
        self.assertEqual(compute_column_widths(9360, 4), (2340, 2340, 2340, 2340))

    def test_remainder_is_dropped(self) -> None:
        widths = compute_column_widths(9360, 7)

        self.assertEqual(set(widths), {1337})
        self.assertEqual(sum(widths), 9360 - 9360 % 7)

    def test_sum_matches_floor_for_many_counts(self) -> None:
        for total in (100, 9360, 10080):
            for count in range(1, 12):
                with self.subTest(total=total, count=count):
                    widths = compute_column_widths(total, count)
                    self.assertEqual(len(widths), count)
                    self.assertEqual(sum(widths), total - total % count)
                    self.assertEqual(widths, compute_column_widths(total, count))

    def test_zero_columns_rejected(self) -> None:
        with self.assertRaises(MalformedTableError):
            compute_column_widths(9360, 0)


class TableGridTest(unittest.TestCase):
    """Pure geometry: validation, alignment and parity."""

    def test_alignment_first_column_left(self) -> None:
        grid = compute_table_grid(["A", "B", "C"], [])
        self.assertEqual(grid.alignments, (ALIGN_LEFT, ALIGN_CENTER, ALIGN_CENTER))
        self.assertEqual(grid.total_width, DEFAULT_TABLE_WIDTH_TWIPS)

    def test_row_shades_follow_index_parity(self) -> None:
        rows = [["same"], ["same"], ["same"], ["other"], ["same"]]
        grid = compute_table_grid(["A"], rows)
        self.assertEqual(grid.row_shades, (SHADE_EVEN, SHADE_ODD, SHADE_EVEN, SHADE_ODD, SHADE_EVEN))

    def test_short_row_rejected(self) -> None:
        with self.assertRaises(MalformedTableError):
            compute_table_grid(["A", "B"], [["1", "2"], ["3"]])

    def test_long_row_rejected(self) -> None:
        with self.assertRaises(MalformedTableError):
            compute_table_grid(["A", "B"], [["1", "2", "3"]])

    def test_duplicate_headers_rejected(self) -> None:
        with self.assertRaises(MalformedTableError):
            compute_table_grid(["A", "A"], [["1", "2"]])

    def test_empty_headers_rejected(self) -> None:
        with self.assertRaises(MalformedTableError):
            compute_table_grid([], [])

    def test_string_row_rejected(self) -> None:
        # "12" has two characters but is one value, not two cells.
        with self.assertRaises(MalformedTableError):
            compute_table_grid(["A", "B"], ["12"])

    def test_string_headers_rejected(self) -> None:
        with self.assertRaises(MalformedTableError):
            compute_table_grid("AB", [["1", "2"]])


class LayoutTableTest(unittest.TestCase):
    """Styled render tree emitted by ``layout_table``."""

    def setUp(self) -> None:
        self.registry = load_default_registry()

    def test_two_by_two_table(self) -> None:
        layout = layout_table(["A", "B"], [["1", "2"], ["3", "4"]], self.registry)

        self.assertEqual(len(layout.header_row.cells), 2)
        self.assertEqual(sum(len(row.cells) for row in layout.data_rows), 4)
        self.assertEqual(len(layout.cells()), 6)
        self.assertEqual(layout.data_rows[0].shade, SHADE_EVEN)
        self.assertEqual(layout.data_rows[1].shade, SHADE_ODD)
        self.assertTrue(all(cell.fill_hex == "E0F4FF" for cell in layout.data_rows[0].cells))
        self.assertTrue(all(cell.fill_hex == "FFFFFF" for cell in layout.data_rows[1].cells))
        self.assertLessEqual(max(layout.column_widths) - min(layout.column_widths), 1)

    def test_malformed_table_produces_no_layout(self) -> None:
        layout = None
        with self.assertRaises(MalformedTableError):
            layout = layout_table(["A", "B"], [["1"]], self.registry)
        self.assertIsNone(layout)

    def test_string_row_rejected_before_layout(self) -> None:
        with self.assertRaises(MalformedTableError):
            layout_table(["A", "B"], [["1", "2"], "34"], self.registry)

    def test_rows_from_generator(self) -> None:
        rows = (["1", str(index)] for index in range(3))
        layout = layout_table(["A", "B"], rows, self.registry)

        self.assertEqual(len(layout.data_rows), 3)
        self.assertEqual(layout.data_rows[2].cells[1].text, "2")

    def test_header_row_has_reversed_contrast(self) -> None:
        layout = layout_table(["A", "B"], [["1", "2"]], self.registry)

        self.assertTrue(layout.header_row.is_header)
        self.assertIsNone(layout.header_row.shade)
        for cell in layout.header_row.cells:
            self.assertIsNone(cell.row_index)
            self.assertEqual(cell.fill_hex, "0A1628")
            self.assertEqual(cell.run_style.color_hex, "FFFFFF")
            self.assertTrue(cell.run_style.italic)
            self.assertEqual(cell.alignment, ALIGN_CENTER)
            self.assertEqual(cell.margins, HEADER_CELL_MARGINS)

    def test_data_cells_alignment_and_margins(self) -> None:
        layout = layout_table(["A", "B", "C"], [["x", "y", "z"]], self.registry)
        cells = layout.data_rows[0].cells

        self.assertEqual([cell.alignment for cell in cells], [ALIGN_LEFT, ALIGN_CENTER, ALIGN_CENTER])
        self.assertEqual([cell.column_index for cell in cells], [0, 1, 2])
        self.assertTrue(all(cell.margins == DATA_CELL_MARGINS for cell in cells))
        self.assertTrue(all(cell.run_style.color_hex == "0A1628" for cell in cells))

    def test_layout_is_deterministic(self) -> None:
        rows = [["r%d" % i, str(i)] for i in range(7)]
        first = layout_table(["NAME", "VALUE"], rows, self.registry)
        second = layout_table(["NAME", "VALUE"], rows, self.registry)

        self.assertEqual(first, second)
        self.assertEqual([row.shade for row in first.data_rows], [row.shade for row in second.data_rows])

    def test_custom_total_width(self) -> None:
        layout = layout_table(["A", "B", "C"], [], self.registry, total_width=1000)
        self.assertEqual(layout.column_widths, (333, 333, 333))
        self.assertEqual(layout.total_width, 999)

    def test_border_uses_registry_colour(self) -> None:
        layout = layout_table(["A"], [["1"]], self.registry)
        self.assertEqual(layout.border.color_hex, "00A3FF")
        self.assertEqual(layout.border.size, 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
