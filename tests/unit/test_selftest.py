"""
Tests for the self-test sweeps.
"""

import random

import pytest

from legitid.config import ALPHABET
from legitid.selftest import (
    EDGE_CASES,
    SweepResult,
    mutate_identifier,
    run_all,
    run_edge_cases,
    run_roundtrip,
    run_tamper,
)


def test_mutate_identifier_changes_characters():
    rng = random.Random(1234)
    original = "abcdefghij"
    mutated = mutate_identifier(original, 1, rng)

    assert len(mutated) == len(original)
    assert sum(a != b for a, b in zip(original, mutated)) == 1
    assert set(mutated) <= set(ALPHABET)


def test_sweep_result_rate():
    result = SweepResult(name="x", total=4, passed=3)
    assert result.rate == 75.0
    assert not result.ok
    assert SweepResult(name="empty").ok


@pytest.mark.asyncio
async def test_roundtrip_sweep_passes():
    result = await run_roundtrip(10, 25)
    assert result.total == 25
    assert result.ok, result.failures


@pytest.mark.asyncio
async def test_length_one_sweep_fails():
    result = await run_roundtrip(1, 5)
    assert result.passed == 0
    assert len(result.failures) == 5


@pytest.mark.asyncio
async def test_tamper_sweep_rejects_everything():
    result = await run_tamper(50, length=20, rng=random.Random(7))
    assert result.total == 50
    assert result.ok, result.failures


@pytest.mark.asyncio
async def test_edge_cases_are_rejected():
    result = await run_edge_cases()
    assert result.total == len(EDGE_CASES)
    assert result.ok


@pytest.mark.asyncio
async def test_run_all_groups_results():
    results = await run_all(5, 7, 5, salt="group:", rng=random.Random(3))
    assert [r.name for r in results["roundtrip"]] == ["length 5", "length 6", "length 7"]
    assert len(results["tamper"]) == 1
    assert len(results["edge"]) == 1
