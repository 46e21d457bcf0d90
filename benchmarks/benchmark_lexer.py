"""Benchmark scanning throughput.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

import pytest

from monkeylex import Lexer, TokenType, tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_small_program(benchmark, small_program):
    """Benchmark tokenize() on a short program."""
    tokens = benchmark(tokenize, small_program)
    assert tokens[-1].type is TokenType.EOF


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_large_program(benchmark, large_program):
    """Benchmark tokenize() on ~100KB of source."""
    tokens = benchmark(tokenize, large_program)
    assert tokens[-1].type is TokenType.EOF


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_noisy_program(benchmark, noisy_program):
    """Benchmark input that is mostly whitespace and ILLEGAL tokens."""
    tokens = benchmark(tokenize, noisy_program)
    assert tokens[-1].type is TokenType.EOF


@pytest.mark.benchmark(group="next-token")
def test_benchmark_pull_loop(benchmark, large_program):
    """Benchmark the raw next_token() loop without list building."""

    def pull() -> int:
        lexer = Lexer(large_program)
        count = 0
        while lexer.next_token().type is not TokenType.EOF:
            count += 1
        return count

    assert benchmark(pull) > 0
