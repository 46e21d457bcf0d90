"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

PROGRAM = """let five = 5;
let ten = 10;

let add = fn(x, y) {
  x + y;
};

let result = add(five, ten);
!-/*5;
5 < 10 > 5;
"""


@pytest.fixture
def small_program() -> str:
    """A short program touching every token class."""
    return PROGRAM


@pytest.fixture
def large_program() -> str:
    """Generate a large program (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(f"""
let value_{"abcdefghij"[i % 10]} = fn(left, right) {{
  left * {i} + right / {i + 1} - {i * 7};
}};
let result = value_{"abcdefghij"[i % 10]}({i}, {i + 2});
""")
    return "\n".join(sections)


@pytest.fixture
def noisy_program() -> str:
    """Input dominated by illegal characters and whitespace."""
    return ("@#$%  \t\r\n  ?.[]" * 2000) + PROGRAM
