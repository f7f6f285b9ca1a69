"""Attribute name helpers: join prefixes and identifier-style aliases."""

from __future__ import annotations
import re

LEFT_PREFIX = "L."
RIGHT_PREFIX = "R."


def _prefixed(attributes, prefix: str) -> tuple:
	"""Return the attribute names with `prefix` prepended to each."""
	return tuple(prefix + name for name in attributes)


def _sanitize_attribute(name: str) -> str | None:
	"""Turn an attribute name into a Python identifier for row attribute access.

	Rules:
	- Lowercase
	- Runs of characters outside [a-z0-9_] collapse to a single _
	- Leading/trailing underscores stripped
	- Prefixed with 'a' if it starts with a digit
	- None if nothing is left
	"""
	sanitized = re.sub(r'[^a-z0-9_]+', '_', name.lower()).strip('_')
	if not sanitized:
		return None
	if sanitized[0].isdigit():
		sanitized = "a" + sanitized
	return sanitized


def _uniquify(base: str, seen: set[str]) -> str:
	"""Make a unique name by adding __2, __3, etc if needed."""
	if base not in seen:
		return base
	i = 2
	while f"{base}__{i}" in seen:
		i += 1
	return f"{base}__{i}"


def _identifier_map(attributes, reserved=frozenset()) -> dict[str, int]:
	"""Map identifier aliases to column positions.

	"L.Name" becomes `l_name`, "Population" becomes `population`. Aliases
	that would be shadowed by a name in `reserved` get a trailing _
	("Set Row" becomes `set_row_`). Colliding aliases get __2, __3 suffixes
	in column order; names that sanitize to nothing fall back to `col{idx}_`.
	"""
	aliases = {}
	seen = set()
	for idx, name in enumerate(attributes):
		base = _sanitize_attribute(name)
		if base is None:
			alias = f"col{idx}_"
		else:
			if base in reserved:
				base += "_"
			alias = _uniquify(base, seen)
			seen.add(alias)
		aliases[alias] = idx
	return aliases
