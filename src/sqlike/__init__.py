"""
sqlike: an embeddable, in-memory table with SQL-like operators

Every cell is a str. Tables are immutable; each operator (select_columns,
select_rows, join, union, intersect, except_, distinct, sort_by, add_row,
rename_attributes, update) returns a new Table, so queries read as chains:

	Table("Name", "Country").add_row("Leicester", "UK").sort_by("Name")

Zero external dependencies - pure Python stdlib only.
"""

from .table import Table, RowLookup
from .display import render_grid
from .errors import (
	SQLikeError,
	SQLikeKeyError,
	SQLikeTypeError,
	SQLikeValueError,
	UnknownAttribute,
	ShapeMismatch,
	ColumnCountMismatch,
)

__version__ = "0.1.0"
__all__ = [
	"Table",
	"RowLookup",
	"render_grid",
	"SQLikeError",
	"SQLikeKeyError",
	"SQLikeTypeError",
	"SQLikeValueError",
	"UnknownAttribute",
	"ShapeMismatch",
	"ColumnCountMismatch",
]
