import pytest
from sqlike import Table


@pytest.fixture
def cities():
	return Table.from_rows(("Name", "Country", "Population"), [
		("Leicester", "UK", "500000"),
		("Chennai", "India", "10500000"),
		("London", "UK", "9000000"),
		("Krakow", "Poland", "770000"),
		("Manchester", "UK", "550000"),
	])


@pytest.fixture
def countries():
	return Table.from_rows(("Name", "Continent", "Capital"), [
		("UK", "Europe", "London"),
		("India", "Asia", "New Delhi"),
		("Poland", "Europe", "Warsaw"),
		("Norway", "Europe", "Oslo"),
	])
