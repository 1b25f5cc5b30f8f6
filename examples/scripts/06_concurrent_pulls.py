"""Several threads draining one generator without duplicates or gaps.

Demonstrates: ProductGenerator.pull from a ThreadPoolExecutor
"""

import itertools
from concurrent.futures import ThreadPoolExecutor

from lazyproduct import product


def drain(generator) -> list[tuple]:
    out = []
    while True:
        combination, _ = generator.pull()
        if combination is None:
            return out
        out.append(tuple(combination.all_remaining()))


generator = product(range(10), ["x", "y", "z"], [True, False])
with ThreadPoolExecutor(max_workers=4) as pool:
    chunks = list(pool.map(lambda _: drain(generator), range(4)))

combined = sorted(itertools.chain.from_iterable(chunks))
print(f"{len(combined)} combinations across {len(chunks)} threads: {[len(c) for c in chunks]}")
