"""Grid rendering and repr logic for Table."""

from __future__ import annotations
import re
from typing import List, Sequence


# How many rows/columns repr shows before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5

NO_COLUMNS = "No columns"

_NUMERIC = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


def _is_numeric(value: str) -> bool:
	return bool(_NUMERIC.match(value))


def _right_aligned(values: Sequence[str], gap: bool = False) -> bool:
	"""A column is right-aligned when it has values and all of them are numeric text.

	With `gap`, "..." cells are preview gap markers and do not count.
	"""
	if gap:
		values = [v for v in values if v != '...']
	return bool(values) and all(_is_numeric(v) for v in values)


def _align_columns(header: List[str], columns: List[List[str]], gap: bool = False):
	"""Pad header cells and column values to one width per column.

	Numeric columns are right-justified, everything else left-justified.
	"""
	aligned_header = []
	aligned_cols = []
	for name, col in zip(header, columns):
		width = max([len(name)] + [len(v) for v in col])
		if _right_aligned(col, gap):
			aligned_header.append(name.rjust(width))
			aligned_cols.append([v.rjust(width) for v in col])
		else:
			aligned_header.append(name.ljust(width))
			aligned_cols.append([v.ljust(width) for v in col])
	return aligned_header, aligned_cols


def render_grid(attributes: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
	"""Render a header and rows as a bordered text grid.

	Args:
		attributes: Column names.
		rows: Rows of text, each the same length as `attributes`.

	Returns:
		The grid, one line per header/row, framed by `+---+` rules.
	"""
	columns = [[row[c] for row in rows] for c in range(len(attributes))]
	header, columns = _align_columns(list(attributes), columns)

	rule = "+" + "+".join("-" * (len(h) + 2) for h in header) + "+"

	def line(cells):
		return "| " + " | ".join(cells) + " |"

	lines = [rule, line(header), rule]
	for r in range(len(rows)):
		lines.append(line(col[r] for col in columns))
	lines.append(rule)
	return "\n".join(lines)


def _footer(nrows: int, ncols: int) -> str:
	return f"# {nrows}×{ncols} table"


def _preview_indices(length: int, head: int) -> List[int]:
	"""Positions shown in a preview; -1 marks the "..." gap."""
	if length > head * 2:
		return list(range(head)) + [-1] + list(range(length - head, length))
	return list(range(length))


def _repr_table(tbl) -> str:
	"""Compact repr: truncated rows and columns plus a shape footer."""
	attributes = tbl.attributes
	rows = tbl.rows
	if not attributes:
		return "# 0×0 table"

	col_indices = _preview_indices(len(attributes), MAX_HEAD_COLS)
	row_indices = _preview_indices(len(rows), MAX_HEAD_ROWS)

	header = [attributes[c] if c >= 0 else "..." for c in col_indices]
	columns = []
	for c in col_indices:
		if c < 0:
			columns.append(["..."] * len(row_indices))
		else:
			columns.append([rows[r][c] if r >= 0 else "..." for r in row_indices])

	header, columns = _align_columns(header, columns, gap=True)

	lines = ["  ".join(header).rstrip()]
	for r in range(len(row_indices)):
		lines.append("  ".join(col[r] for col in columns).rstrip())
	lines.append("")
	lines.append(_footer(len(rows), len(attributes)))
	return "\n".join(lines)


def _printr(tbl) -> str:
	"""Entry point used by Table.__str__."""
	if not tbl.attributes:
		return NO_COLUMNS
	return render_grid(tbl.attributes, tbl.rows)
