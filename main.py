from time import sleep, perf_counter

from builder import SequenceBuilder
from focus_ring import FocusRing
from jinq import from_
from models import PipelineRequest
from operators import cycle, drop, map_, mconcat, pipe, take
from sequence import Range, Track
from utils import process_lazy_operations, setup_logging


def expensive_square(x):
    # Simulate a costly step so laziness is visible
    print(f"  computing f({x}) ...")
    sleep(0.1)
    return x * x


setup_logging()

print("\n--- Demo: laziness (no work until iterated) ---")
naturals = Track(0, lambda _: True, lambda n: n + 1)   # infinite
squares = pipe(map_(expensive_square), drop(3), take(4))(naturals)
print("Constructed pipeline over an infinite sequence. Nothing computed yet.")
t0 = perf_counter()
print(f"Result: {squares.to_list()}")
print(f"Time: {perf_counter() - t0:.2f}s")
print(f"Second pass gives the same values: {squares.to_list()}\n")

print("--- Demo: flattening ---")
print("mconcat of Range(0), Range(1), Range(2):", mconcat(map_(Range)(Range(2))).to_list())
print("first 7 of cycle(Range(2)):", take(7)(cycle(Range(2))).to_list(), "\n")

print("--- Demo: builder ---")
built = SequenceBuilder().append(Range(2)).append(4).prepend(-1).build()
print("built:", built, "\n")

print("--- Demo: focus ring ---")
ring = FocusRing(Range(4))
print("focus:", ring.focus())
print("right:", ring.right().focus())
print("left (wraps):", ring.left().focus(), "\n")

print("--- Demo: query ---")
pairs = from_(Range(1, 3)).pair_with(["a", "b"]).where(lambda p: p[0] != 2).result()
print("pairs:", pairs.to_list(), "\n")

print("--- Demo: declarative pipeline ---")
request = PipelineRequest(
    source=[1, 2, 3],
    operations=[{"type": "cycle"}, {"type": "cons", "value": 0}],
    limit=8
)
outcome = process_lazy_operations(request)
print(f"Result: {outcome.result} in {outcome.performance.processing_time_ms:.3f}ms")
