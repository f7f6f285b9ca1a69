"""Sample city/country tables and a handful of example queries."""

from .table import Table


city = Table.from_rows(("Name", "Country", "Population"), [
	("Leicester", "UK", "500000"),
	("Chennai", "India", "10500000"),
	("Krakow", "Poland", "770000"),
	("Cairo", "Egypt", "20000000"),
	("Beijing", "China", "22000000"),
	("New York", "USA", "9000000"),
	("Moscow", "Russia", "13000000"),
	("Lagos", "Nigeria", "8000000"),
	("Paris", "France", "2000000"),
	("London", "UK", "9000000"),
	("Madrid", "Spain", "3000000"),
	("Osaka", "Japan", "2800000"),
	("Xi'an", "China", "9000000"),
	("Hyderabad", "India", "7000000"),
	("Abuja", "Nigeria", "6000000"),
	("Warsaw", "Poland", "1800000"),
	("Lima", "Peru", "9000000"),
	("Rio de Janeiro", "Brazil", "6500000"),
	("Istanbul", "Turkiye", "15500000"),
	("Nairobi", "Kenya", "4400000"),
	("Riyadh", "Saudi Arabia", "7700000"),
	("Karachi", "Pakistan", "15000000"),
	("Berlin", "Germany", "3800000"),
	("Tokyo", "Japan", "13500000"),
	("Jeddah", "Saudi Arabia", "4700000"),
	("Los Angeles", "USA", "4000000"),
	("Lahore", "Pakistan", "11000000"),
	("Jakarta", "Indonesia", "10000000"),
	("Manchester", "UK", "550000"),
])

country = Table.from_rows(("Name", "Continent", "Capital"), [
	("Japan", "Asia", "Tokyo"),
	("UK", "Europe", "London"),
	("Egypt", "Africa", "Cairo"),
	("China", "Asia", "Beijing"),
	("Turkiye", "Eurasia", "Ankara"),
	("Poland", "Europe", "Warsaw"),
	("Saudi Arabia", "Asia", "Riyadh"),
	("Brazil", "South America", "Rio de Janeiro"),
	("Kenya", "Africa", "Nairobi"),
	("Norway", "Europe", "Oslo"),
	("Nigeria", "Africa", "Abuja"),
	("India", "Asia", "New Delhi"),
	("France", "Europe", "Paris"),
	("Spain", "Europe", "Madrid"),
	("Pakistan", "Asia", "Islamabad"),
	("USA", "North America", "Washington DC"),
	("Canada", "North America", "Ottowa"),
	("Germany", "Europe", "Berlin"),
	("Indonesia", "Asia", "Jakarta"),
	("Peru", "South America", "Lima"),
	("Russia", "Eurasia", "Moscow"),
])


def countries_by_continent():
	return country.sort_by("Continent")


def cities_by_population_desc():
	return city.sort_by("Population", lambda v1, v2: int(v1) >= int(v2))


def african_capitals():
	return country.select_rows(lambda r: r("Continent") == "Africa").select_columns("Capital")


def distinct_countries():
	return city.select_columns("Country").distinct().sort_by("Country")


def african_capitals_and_smaller_cities():
	capitals = african_capitals()
	smaller = city.select_rows(lambda r: int(r("Population")) < 10000000).select_columns("Name")
	return capitals.union(smaller).sort_by("Capital")


def asian_capitals_with_population():
	return (
		city.join(country, "Name", "Capital")
		.select_rows(lambda r: r("R.Continent").endswith("sia"))
		.select_columns("L.Name", "L.Population")
		.sort_by("L.Name")
	)


def capitals_over_ten_million():
	return (
		country.join(city, "Capital", "Name")
		.select_rows(lambda r: int(r("R.Population")) > 10000000)
		.select_columns("L.Name", "L.Capital")
		.sort_by("L.Name")
	)


def cities_that_are_not_capitals():
	return city.select_columns("Name").except_(country.select_columns("Capital")).sort_by("Name")


def cities_outside_the_americas():
	return (
		city.join(country, "Country", "Name")
		.select_columns("L.Name", "R.Continent")
		.select_rows(lambda r: r.r_continent in ("Europe", "Eurasia", "Africa"))
		.sort_by("L.Name", lambda v1, v2: v1 >= v2)
	)


def cities_by_country_desc():
	# Secondary key first; the stable sort keeps it within each country
	return (
		city.select_columns("Country", "Name")
		.distinct()
		.sort_by("Name")
		.sort_by("Country", lambda v1, v2: v1 >= v2)
	)


def uk_populations_in_thousands():
	return (
		city.rename_attributes(("Name", "City"), ("Population", "Population (k)"))
		.update("Population (k)", lambda v: str(int(v) // 1000), lambda r: r("Country") == "UK")
		.select_rows(lambda r: r("Country") == "UK")
	)


DEMO_QUERIES = [
	("Countries in ascending order of continent", countries_by_continent),
	("Cities in descending order of population", cities_by_population_desc),
	("Capital cities in Africa", african_capitals),
	("Countries with a listed city, without duplicates", distinct_countries),
	("African capitals union cities under 10 million", african_capitals_and_smaller_cities),
	("Capitals in Asia or Eurasia with their populations", asian_capitals_with_population),
	("Countries whose capital has over 10 million people", capitals_over_ten_million),
	("Cities that are not capitals", cities_that_are_not_capitals),
	("Cities in Europe, Eurasia or Africa, reverse alphabetical", cities_outside_the_americas),
	("Cities by country (descending) then name", cities_by_country_desc),
	("UK cities with population in thousands", uk_populations_in_thousands),
]


def main():
	"""Print the sample tables followed by every demo query."""
	print(city)
	print(country)
	for title, query in DEMO_QUERIES:
		print()
		print(title)
		print(query())
	return 0
