import warnings
from collections import Counter
from collections.abc import Mapping
from functools import cmp_to_key
from operator import itemgetter

from .display import _printr, _repr_table
from .errors import ColumnCountMismatch, ShapeMismatch, SQLikeTypeError, UnknownAttribute
from .naming import LEFT_PREFIX, RIGHT_PREFIX, _identifier_map, _prefixed


# Joins comparing more row pairs than this emit a performance warning
JOIN_WARN_PAIRS = 1_000_000


def _missing_attribute_error(name, context="Table"):
	return UnknownAttribute(f"Attribute '{name}' not found in {context}")


def _as_text(values, what):
	"""Return `values` as a tuple, rejecting anything that is not a str."""
	values = tuple(values)
	for v in values:
		if not isinstance(v, str):
			raise SQLikeTypeError(f"{what} must be str, got {type(v).__name__}: {v!r}")
	return values


class RowLookup:
	"""Maps attribute names to the values of one row.

	Passed to the predicates of `select_rows` and `update`, so conditions are
	written against names rather than column positions:

		lambda r: r("Country") == "UK"                 # call
		lambda r: int(r["Population"]) > 5000000       # subscript, name or position
		lambda r: r.country == "UK"                    # sanitized identifier

	The same instance is re-pointed at each row in turn, so it is only valid
	for the duration of the predicate call.
	"""
	__slots__ = ('_table', '_row')

	def __init__(self, table, row=()):
		self._table = table
		self._row = row

	def set_row(self, row):
		"""Reuse this lookup for a different row (avoids allocation while scanning)."""
		self._row = row
		return self

	def __call__(self, name):
		idx = self._table._column_map.get(name)
		if idx is None:
			raise _missing_attribute_error(name, context="row")
		return self._row[idx]

	def __getitem__(self, key):
		if isinstance(key, int):
			return self._row[key]
		return self(key)

	def __getattr__(self, attr):
		idx = self._table._identifiers.get(attr.lower())
		if idx is None:
			raise AttributeError(f"Row has no attribute '{attr}'")
		return self._row[idx]

	def __iter__(self):
		return iter(self._row)

	def __len__(self):
		return len(self._row)

	def __repr__(self):
		pairs = ", ".join(f"{name}={value!r}" for name, value in zip(self._table._attributes, self._row))
		return f"Row({pairs})"


# Public RowLookup members; column aliases with these names get a trailing _
_ROW_RESERVED = frozenset(name for name in dir(RowLookup) if not name.startswith("_"))


class Table:
	"""An immutable 2D collection of text values under a named header.

	Every operator returns a new Table; the receiver is never changed, and
	row tuples are shared between a table and the tables derived from it.

	Consistency conditions, maintained by every constructor and operator:
	1. Every row has exactly `column_count` values.
	2. The width of a table never changes; header and rows change in lockstep.
	"""
	__slots__ = ('_attributes', '_rows', '_column_map', '_identifiers')

	def __init__(self, *attributes):
		self._assign(_as_text(attributes, "Attribute names"), ())

	@classmethod
	def _make(cls, attributes, rows):
		"""Build a table from already-validated tuples."""
		table = object.__new__(cls)
		table._assign(attributes, rows)
		return table

	@classmethod
	def from_rows(cls, attributes, rows):
		"""
		Build a table from a header and an iterable of rows in one step.

		Args:
			attributes: Sequence of attribute names.
			rows: Iterable of value sequences, each as long as `attributes`.

		Returns:
			A new Table holding the rows in the given order.

		Raises:
			ShapeMismatch: If a row has the wrong number of values.
			SQLikeTypeError: If a name or value is not a str.
		"""
		attributes = _as_text(attributes, "Attribute names")
		checked = []
		for i, row in enumerate(rows):
			row = _as_text(row, "Row values")
			if len(row) != len(attributes):
				raise ShapeMismatch(
					f"from_rows: row {i} has {len(row)} values, expected {len(attributes)}"
				)
			checked.append(row)
		return cls._make(attributes, tuple(checked))

	def _assign(self, attributes, rows):
		column_map = {}
		for idx, name in enumerate(attributes):
			# First match wins for duplicated names
			column_map.setdefault(name, idx)
		object.__setattr__(self, '_attributes', attributes)
		object.__setattr__(self, '_rows', rows)
		object.__setattr__(self, '_column_map', column_map)
		object.__setattr__(self, '_identifiers', _identifier_map(attributes, _ROW_RESERVED))

	def __setattr__(self, name, value):
		raise AttributeError(f"{self.__class__.__name__} is immutable")

	def __delattr__(self, name):
		raise AttributeError(f"{self.__class__.__name__} is immutable")

	def __reduce__(self):
		return (Table._make, (self._attributes, self._rows))

	def __copy__(self):
		return self

	def __deepcopy__(self, memo):
		return self

	# ------------------------------------------------------------------
	# Shape and column resolution
	# ------------------------------------------------------------------

	@property
	def attributes(self):
		return self._attributes

	@property
	def rows(self):
		return self._rows

	@property
	def column_count(self):
		"""The number of columns is equal to the number of attributes."""
		return len(self._attributes)

	def valid_column_index(self, idx):
		return 0 <= idx < len(self._attributes)

	def column_index(self, name):
		"""Position of the first attribute called `name`, or -1 if there is none."""
		return self._column_map.get(name, -1)

	def __len__(self):
		return len(self._rows)

	def __iter__(self):
		return iter(self._rows)

	def __eq__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		return self._attributes == other._attributes and self._rows == other._rows

	def __hash__(self):
		return hash((self._attributes, self._rows))

	def __str__(self):
		return _printr(self)

	def __repr__(self):
		return _repr_table(self)

	# ------------------------------------------------------------------
	# Row-level operators
	# ------------------------------------------------------------------

	def add_row(self, *values):
		"""
		Append one row. Adding a duplicate row is not prevented.

		Raises:
			ShapeMismatch: If the number of values differs from `column_count`.
		"""
		row = _as_text(values, "Row values")
		if len(row) != self.column_count:
			raise ShapeMismatch(f"add_row: expected {self.column_count} values, but got {len(row)}")
		return Table._make(self._attributes, self._rows + (row,))

	def select_columns(self, *names):
		"""
		Project onto the named columns, in the order requested.

		Repeated names are kept once (first occurrence) and names that do not
		resolve are dropped without error.
		"""
		selected = []
		for name in names:
			idx = self.column_index(name)
			if self.valid_column_index(idx) and idx not in selected:
				selected.append(idx)

		attributes = tuple(self._attributes[idx] for idx in selected)
		rows = tuple(tuple(row[idx] for idx in selected) for row in self._rows)
		return Table._make(attributes, rows)

	def select_rows(self, predicate):
		"""
		Keep the rows for which `predicate` returns true.

		Every value is a str, so any conversion must be explicit in the
		predicate, e.g. `lambda r: int(r("Population")) < 1000000`.

		Args:
			predicate: Called with a RowLookup for each row.

		Returns:
			A new table with the same header and the matching rows in input order.

		Raises:
			UnknownAttribute: If the predicate looks up a name the table lacks.
		"""
		lookup = RowLookup(self)
		rows = tuple(row for row in self._rows if predicate(lookup.set_row(row)))
		return Table._make(self._attributes, rows)

	def distinct(self):
		"""Remove rows that repeat an earlier row, keeping first-occurrence order."""
		return Table._make(self._attributes, tuple(dict.fromkeys(self._rows)))

	def sort_by(self, attribute, order=None):
		"""
		Sort the rows on one column. The sort is stable, so ordering on several
		columns is done by sorting on the least significant column first.

		Args:
			attribute: The column to order by. If it does not resolve, this
			           table is returned unchanged.
			order: Relation `order(a, b)` that is true when value `a` belongs at
			       or before value `b`. Both `<` and `<=` style relations work.
			       Defaults to ascending text order.

		Returns:
			A new table ordered on the given column.
		"""
		idx = self.column_index(attribute)
		if not self.valid_column_index(idx):
			return self

		if order is None:
			return Table._make(self._attributes, tuple(sorted(self._rows, key=itemgetter(idx))))

		def compare(r1, r2):
			before = order(r1[idx], r2[idx])
			after = order(r2[idx], r1[idx])
			if before and not after:
				return -1
			if after and not before:
				return 1
			return 0

		return Table._make(self._attributes, tuple(sorted(self._rows, key=cmp_to_key(compare))))

	# ------------------------------------------------------------------
	# Join
	# ------------------------------------------------------------------

	def join(self, other, key_left, key_right):
		"""
		Inner equi-join. In the result the attribute names of this table are
		prefixed by "L." and those of `other` by "R.".

		Rows are matched by nested loops on exact text equality, in left-major
		order; no index is built.

		Args:
			other: Table to join with
			key_left: Column of this table to match on
			key_right: Column of `other` to match on

		Returns:
			Table of left row + right row for every pair whose keys are equal

		Raises:
			UnknownAttribute: If either key does not resolve
		"""
		if not isinstance(other, Table):
			raise SQLikeTypeError(f"join: expected a Table, got {type(other).__name__}")

		left_idx = self.column_index(key_left)
		if not self.valid_column_index(left_idx):
			raise _missing_attribute_error(key_left, context="left table")
		right_idx = other.column_index(key_right)
		if not other.valid_column_index(right_idx):
			raise _missing_attribute_error(key_right, context="right table")

		pairs = len(self._rows) * len(other._rows)
		if pairs > JOIN_WARN_PAIRS:
			warnings.warn(
				f"join compares {pairs} row pairs; filter the inputs first to keep nested-loop joins cheap"
			)

		attributes = _prefixed(self._attributes, LEFT_PREFIX) + _prefixed(other._attributes, RIGHT_PREFIX)
		rows = tuple(
			left + right
			for left in self._rows
			for right in other._rows
			if left[left_idx] == right[right_idx]
		)
		return Table._make(attributes, rows)

	# ------------------------------------------------------------------
	# Set algebra (bag semantics)
	# ------------------------------------------------------------------

	def _check_compatible(self, other, op_name):
		if not isinstance(other, Table):
			raise SQLikeTypeError(f"{op_name}: expected a Table, got {type(other).__name__}")
		if self.column_count != other.column_count:
			raise ColumnCountMismatch(
				f"{op_name}: different number of columns ({self.column_count} vs {other.column_count})"
			)

	def union(self, other):
		"""
		Rows of this table followed by the rows of `other`. Duplicates are kept.
		The result keeps this table's attribute names.
		"""
		self._check_compatible(other, "union")
		return Table._make(self._attributes, self._rows + other._rows)

	def intersect(self, other):
		"""
		Rows of this table that also occur in `other`, in this table's order.

		Multiplicity is respected rather than collapsed as in SQL INTERSECT: a
		row appears min(count here, count in other) times.
		"""
		self._check_compatible(other, "intersect")
		remaining = Counter(other._rows)
		kept = []
		for row in self._rows:
			if remaining[row] > 0:
				remaining[row] -= 1
				kept.append(row)
		return Table._make(self._attributes, tuple(kept))

	def except_(self, other):
		"""
		Rows of this table with matching rows of `other` removed one-for-one.

		A row appears max(0, count here - count in other) times; the earliest
		occurrences are the ones removed. Unlike SQL EXCEPT nothing is deduplicated.
		"""
		self._check_compatible(other, "except")
		remaining = Counter(other._rows)
		kept = []
		for row in self._rows:
			if remaining[row] > 0:
				remaining[row] -= 1
				continue
			kept.append(row)
		return Table._make(self._attributes, tuple(kept))

	difference = except_

	def __or__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		return self.union(other)

	def __and__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		return self.intersect(other)

	def __sub__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		return self.except_(other)

	# ------------------------------------------------------------------
	# Header and column rewriting
	# ------------------------------------------------------------------

	def rename_attributes(self, *changes, strict=False):
		"""
		Rename attributes, e.g.

			tab.rename_attributes(("Area Code", "Region"), ("Qty", "No in stock"))
			tab.rename_attributes({"Area Code": "Region"})

		Old names are resolved against this table's header, so all renames
		happen at once and `("a", "b"), ("b", "a")` swaps two columns. Rows,
		column order and width are untouched.

		Args:
			changes: (old, new) pairs and/or mappings of old -> new.
			strict: Raise UnknownAttribute for an old name that does not
			        resolve instead of ignoring it.
		"""
		pairs = []
		for change in changes:
			if isinstance(change, Mapping):
				pairs.extend(change.items())
				continue
			if not isinstance(change, (tuple, list)) or len(change) != 2:
				raise SQLikeTypeError(f"rename_attributes: expected an (old, new) pair, got {change!r}")
			pairs.append(tuple(change))

		attributes = list(self._attributes)
		for old, new in pairs:
			_as_text((new,), "Attribute names")
			idx = self.column_index(old)
			if self.valid_column_index(idx):
				attributes[idx] = new
			elif strict:
				raise _missing_attribute_error(old)
		return Table._make(tuple(attributes), self._rows)

	def update(self, attribute, transform, condition=None, strict=False):
		"""
		Transform the values of one column on the rows satisfying a condition.

		Args:
			attribute: The column whose values are transformed.
			transform: Called with the old value, returns the new str value.
			condition: Predicate over a RowLookup, as for `select_rows`. None
			           updates every row.
			strict: Raise UnknownAttribute when `attribute` does not resolve.
			        Otherwise this table is returned unchanged.

		Returns:
			A new table with the same header and row order.
		"""
		idx = self.column_index(attribute)
		if not self.valid_column_index(idx):
			if strict:
				raise _missing_attribute_error(attribute)
			return self

		lookup = RowLookup(self)
		rows = []
		for row in self._rows:
			if condition is None or condition(lookup.set_row(row)):
				value = transform(row[idx])
				if not isinstance(value, str):
					raise SQLikeTypeError(
						f"update: transform must return str, got {type(value).__name__} for '{attribute}'"
					)
				row = row[:idx] + (value,) + row[idx + 1:]
			rows.append(row)
		return Table._make(self._attributes, tuple(rows))
