import pytest
from sqlike import Table, UnknownAttribute, SQLikeTypeError


class TestRenameAttributes:

	def test_rename_in_place(self, cities):
		result = cities.rename_attributes(("Name", "City"))
		assert result.attributes == ("City", "Country", "Population")
		assert result.rows == cities.rows

	def test_several_pairs(self, cities):
		result = cities.rename_attributes(("Country", "Nation"), ("Population", "Pop"))
		assert result.attributes == ("Name", "Nation", "Pop")

	def test_mapping_form(self, cities):
		assert cities.rename_attributes({"Name": "City"}) == cities.rename_attributes(("Name", "City"))

	def test_unknown_names_ignored(self, cities):
		assert cities.rename_attributes(("Mayor", "Boss")) == cities

	def test_strict_unknown_raises(self, cities):
		with pytest.raises(UnknownAttribute, match="Mayor"):
			cities.rename_attributes(("Name", "City"), ("Mayor", "Boss"), strict=True)

	def test_swap_resolves_against_original_header(self):
		t = Table("a", "b").add_row("1", "2")
		assert t.rename_attributes(("a", "b"), ("b", "a")).attributes == ("b", "a")

	def test_receiver_unchanged(self, cities):
		cities.rename_attributes(("Name", "City"))
		assert cities.attributes[0] == "Name"

	def test_renamed_column_resolves(self, cities):
		result = cities.rename_attributes(("Name", "City")).select_columns("City")
		assert result.rows[0] == ("Leicester",)

	def test_malformed_change(self, cities):
		with pytest.raises(SQLikeTypeError):
			cities.rename_attributes("Name")

	def test_new_name_must_be_text(self, cities):
		with pytest.raises(SQLikeTypeError):
			cities.rename_attributes(("Name", 3))


class TestUpdate:

	def test_updates_rows_meeting_condition(self, cities):
		result = cities.update("Population", lambda v: str(int(v) * 2), lambda r: r("Country") == "UK")
		assert [row[2] for row in result] == ["1000000", "10500000", "18000000", "770000", "1100000"]
		assert result.attributes == cities.attributes

	def test_other_rows_pass_through(self, cities):
		result = cities.update("Name", str.upper, lambda r: r("Country") == "India")
		assert result.rows[1] == ("CHENNAI", "India", "10500000")
		assert result.rows[0] is cities.rows[0]

	def test_no_condition_updates_every_row(self, cities):
		result = cities.update("Country", str.lower)
		assert [row[1] for row in result] == ["uk", "india", "uk", "poland", "uk"]

	def test_condition_can_use_updated_column(self, cities):
		result = cities.update("Name", lambda v: v + "!", lambda r: r("Name").startswith("L"))
		assert [row[0] for row in result] == ["Leicester!", "Chennai", "London!", "Krakow", "Manchester"]

	def test_unknown_attribute_returns_same_table(self, cities):
		assert cities.update("Mayor", str.upper, lambda r: True) is cities

	def test_strict_unknown_attribute_raises(self, cities):
		with pytest.raises(UnknownAttribute):
			cities.update("Mayor", str.upper, strict=True)

	def test_unknown_attribute_in_condition_raises(self, cities):
		with pytest.raises(UnknownAttribute):
			cities.update("Name", str.upper, lambda r: r("Mayor") == "x")

	def test_transform_must_return_text(self, cities):
		with pytest.raises(SQLikeTypeError, match="transform must return str"):
			cities.update("Population", int)

	def test_receiver_unchanged(self, cities):
		cities.update("Name", str.upper)
		assert cities.rows[0][0] == "Leicester"
