import pytest
from sqlike import (
	Table,
	SQLikeError,
	SQLikeKeyError,
	SQLikeValueError,
	SQLikeTypeError,
	UnknownAttribute,
	ShapeMismatch,
	ColumnCountMismatch,
)


def test_hierarchy():
	assert issubclass(UnknownAttribute, SQLikeKeyError)
	assert issubclass(UnknownAttribute, KeyError)
	assert issubclass(ShapeMismatch, SQLikeValueError)
	assert issubclass(ColumnCountMismatch, ValueError)
	assert issubclass(SQLikeTypeError, TypeError)
	for exc in (UnknownAttribute, ShapeMismatch, ColumnCountMismatch, SQLikeTypeError):
		assert issubclass(exc, SQLikeError)


def test_missing_attribute_raises_sqlike_keyerror():
	t = Table("a", "b").add_row("1", "2")
	with pytest.raises(SQLikeKeyError):
		t.select_rows(lambda r: r("missing") == "1")


def test_union_mismatched_widths_raises_sqlike_valueerror():
	left = Table("id", "date").add_row("1", "a")
	right = Table("id").add_row("2")
	with pytest.raises(SQLikeValueError):
		left.union(right)


def test_silent_paths_do_not_raise():
	t = Table("a").add_row("1")
	assert t.select_columns("missing").column_count == 0
	assert t.sort_by("missing") is t
	assert t.update("missing", str.upper, lambda r: True) is t
	assert t.rename_attributes(("missing", "b")) == t
