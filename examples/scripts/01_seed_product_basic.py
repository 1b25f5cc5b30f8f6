"""Basic Seed.product: cartesian product of value dimensions.

Demonstrates: Seed.values, Seed.product, to_jsonl
Output: 3 topics × 2 difficulties × 2 languages = 12 records
"""

from lazyproduct import Seed

source = Seed.product(
    Seed.values("topic", ["Physics", "Math", "History"]),
    Seed.values("difficulty", ["easy", "hard"]),
    Seed.values("language", ["en", "fr"]),
)

count = source.to_jsonl("examples/outputs/01_seed_product.jsonl")
