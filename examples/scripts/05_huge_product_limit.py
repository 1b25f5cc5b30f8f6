"""A product far too large to materialize, consumed lazily.

Demonstrates: Seed.range, Seed.product, estimate_size saturation, to_jsonl(limit=...)
Output: first 10 of 1000^8 records
"""

from lazyproduct import Seed

source = Seed.product(*(Seed.range(f"param_{i}", 0, 999) for i in range(8)))
print(f"Estimated size (saturated): {source.estimate_size()}")

count = source.to_jsonl("examples/outputs/05_huge_product.jsonl", limit=10)
