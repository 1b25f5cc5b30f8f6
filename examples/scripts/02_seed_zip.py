"""Seed.zip: element-wise pairing of same-length dimensions.

Demonstrates: Seed.zip, Seed.values, to_csv
Output: 5 paired records (city ↔ country ↔ population)
"""

from lazyproduct import Seed

source = Seed.zip(
    Seed.values("city", ["Paris", "Berlin", "Madrid", "Rome", "London"]),
    Seed.values("country", ["France", "Germany", "Spain", "Italy", "UK"]),
    Seed.values("population_millions", [2.1, 3.6, 3.2, 2.8, 8.9]),
)

count = source.to_csv("examples/outputs/02_seed_zip.csv")
