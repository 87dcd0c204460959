"""
Self-test sweeps for the identifier scheme.

Three checks, run against the asynchronous API:
- round trip: freshly created identifiers must verify
- tampering: identifiers with 1-3 characters replaced must be rejected
- edge cases: empty, very short and out-of-alphabet input must be rejected
"""

import asyncio
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .config import ALPHABET, DEFAULT_SALT
from .ids import create_id, verify_id

EDGE_CASES = {
    "empty string": "",
    "very short id": "a",
    "invalid characters": "invalid@#$",
}


@dataclass
class SweepResult:
    """Outcome of one sweep."""

    name: str
    total: int = 0
    passed: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.passed == self.total

    @property
    def rate(self) -> float:
        return 100.0 * self.passed / self.total if self.total else 100.0


def mutate_identifier(
    identifier: str, modifications: int, rng: Optional[random.Random] = None
) -> str:
    """Replace ``modifications`` random positions with a different symbol."""
    rng = rng or random.Random()
    chars = list(identifier)
    for _ in range(modifications):
        pos = rng.randrange(len(chars))
        replacement = rng.choice(ALPHABET)
        while replacement == chars[pos]:
            replacement = rng.choice(ALPHABET)
        chars[pos] = replacement
    return "".join(chars)


async def run_roundtrip(
    length: int, iterations: int, salt: Union[str, bytes] = DEFAULT_SALT
) -> SweepResult:
    """Create ``iterations`` identifiers of ``length`` and verify each one."""
    result = SweepResult(name=f"length {length}")
    ids = await asyncio.gather(
        *(create_id(length, salt) for _ in range(iterations))
    )
    for identifier in ids:
        result.total += 1
        if await verify_id(identifier, salt):
            result.passed += 1
        else:
            result.failures.append(identifier)
    return result


async def run_tamper(
    iterations: int,
    length: int = 10,
    salt: Union[str, bytes] = DEFAULT_SALT,
    rng: Optional[random.Random] = None,
) -> SweepResult:
    """Mutate valid identifiers and count how many are correctly rejected."""
    rng = rng or random.Random()
    result = SweepResult(name="tampered ids")
    for _ in range(iterations):
        valid_id = await create_id(length, salt)
        wrong_id = mutate_identifier(valid_id, rng.randint(1, 3), rng)
        result.total += 1
        if wrong_id == valid_id or not await verify_id(wrong_id, salt):
            result.passed += 1
        else:
            result.failures.append(wrong_id)
    return result


async def run_edge_cases(salt: Union[str, bytes] = DEFAULT_SALT) -> SweepResult:
    """Malformed input must be rejected without raising."""
    result = SweepResult(name="edge cases")
    for label, identifier in EDGE_CASES.items():
        result.total += 1
        if not await verify_id(identifier, salt):
            result.passed += 1
        else:
            result.failures.append(label)
    return result


async def run_all(
    min_length: int,
    max_length: int,
    iterations: int,
    salt: Union[str, bytes] = DEFAULT_SALT,
    rng: Optional[random.Random] = None,
) -> Dict[str, List[SweepResult]]:
    """Run every sweep and group the results by check."""
    roundtrip = [
        await run_roundtrip(length, iterations, salt)
        for length in range(min_length, max_length + 1)
    ]
    return {
        "roundtrip": roundtrip,
        "tamper": [await run_tamper(iterations, salt=salt, rng=rng)],
        "edge": [await run_edge_cases(salt)],
    }
