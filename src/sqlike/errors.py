class SQLikeError(Exception):
	"""Base exception for the sqlike library."""
	pass


class SQLikeKeyError(SQLikeError, KeyError):
	"""Raised when an attribute name cannot be resolved."""
	pass


class SQLikeTypeError(SQLikeError, TypeError):
	"""Raised for non-text names/values or invalid operand types."""
	pass


class SQLikeValueError(SQLikeError, ValueError):
	"""Raised for mismatched row shapes or column counts."""
	pass


class UnknownAttribute(SQLikeKeyError):
	"""A row lookup or join key named an attribute the table does not have."""
	pass


class ShapeMismatch(SQLikeValueError):
	"""A row's value count differs from the table's column count."""
	pass


class ColumnCountMismatch(SQLikeValueError):
	"""Two tables combined by a set operator have different widths."""
	pass
