"""ProductBuilder: typed, single-pass reads from each combination.

Demonstrates: ProductBuilder.of, and_, and_iterable, build, Combination.next_*
Output: 2 × 2 × 2 × 2 = 16 lines printed
"""

from lazyproduct import ProductBuilder

builder = (
    ProductBuilder.of("a", "b")
    .and_iterable([1, 2])
    .and_(1.1, 2.2)
    .and_iterable(flag for flag in (True, False))
)

print(f"Estimated size: {builder.estimate_size()}")

for combination in builder.build():
    name = combination.next_str()
    count = combination.next_int()
    weight = combination.next_double()
    enabled = combination.next_boolean()
    print(f"{name:>2} {count} {weight:.1f} {enabled}")
