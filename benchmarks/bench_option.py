"""Benchmarks for the Option type and the match engine.

Run with: pytest benchmarks/bench_option.py --benchmark-only -v
"""

from klaw_option import Absent, Option, Present


def arms(m):
    m.on_present(lambda x: x + 1)
    m.on_absent(lambda: 0)


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_present_creation(self, benchmark):
        """Benchmark Present creation."""
        benchmark(Present, 42)

    def test_absent_creation(self, benchmark):
        """Benchmark Absent creation (a new instance every time)."""
        benchmark(Absent)

    def test_from_nullable(self, benchmark):
        """Benchmark from_nullable on a non-None value."""
        benchmark(Option.from_nullable, 42)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_present_map(self, benchmark):
        """Benchmark Present.map."""
        option = Present(5)
        benchmark(option.map, lambda x: x * 2)

    def test_absent_map(self, benchmark):
        """Benchmark Absent.map."""
        option = Absent()
        benchmark(option.map, lambda x: x * 2)

    def test_present_and_then(self, benchmark):
        """Benchmark Present.and_then."""
        option = Present(5)
        benchmark(option.and_then, lambda x: Present(x * 2))

    def test_present_unwrap_or(self, benchmark):
        """Benchmark Present.unwrap_or."""
        option = Present(5)
        benchmark(option.unwrap_or, 0)

    def test_absent_unwrap_or(self, benchmark):
        """Benchmark Absent.unwrap_or."""
        option = Absent()
        benchmark(option.unwrap_or, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_present_chain_3(self, benchmark):
        """Benchmark 3-step chain on Present."""

        def chain():
            return Present(5).map(lambda x: x + 1).filter(lambda x: x > 0).and_then(lambda x: Present(x * 2))

        benchmark(chain)

    def test_absent_chain_3(self, benchmark):
        """Benchmark 3-step chain on Absent (short-circuits)."""

        def chain():
            return Absent().map(lambda x: x + 1).filter(lambda x: x > 0).and_then(lambda x: Present(x * 2))

        benchmark(chain)


# =============================================================================
# Match benchmarks
# =============================================================================


class TestMatch:
    """Benchmark the match engine against a plain conditional."""

    def test_match_present(self, benchmark):
        """Benchmark an exhaustive match on Present."""
        option = Present(5)
        benchmark(option.match, arms)

    def test_lmatch_absent(self, benchmark):
        """Benchmark a loose match on Absent with no handler."""
        option = Absent()
        benchmark(option.lmatch, lambda m: m.on_present(str))

    def test_conditional_baseline(self, benchmark):
        """Baseline: the same dispatch written as map_or_else."""
        option = Present(5)
        benchmark(option.map_or_else, lambda: 0, lambda x: x + 1)
