"""Seed.expand (hierarchical) and Seed.range (numeric) combined via product.

Demonstrates: Seed.expand, Seed.range, Seed.product, to_jsonl
Output: 6 domain/topic pairs × 5 grades = 30 records
"""

from lazyproduct import Seed

source = Seed.product(
    Seed.expand("domain", "topic", {
        "Science": ["Chemistry", "Physics", "Biology"],
        "Math": ["Algebra", "Calculus", "Statistics"],
    }),
    Seed.range("grade", 1, 5),
)

count = source.to_jsonl("examples/outputs/03_seed_expand_range.jsonl")
