"""Poseidon2 permutation and sponge hashing over the BabyBear field (width 16, S-box degree 7)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cache
from typing import Protocol

from zkvm_primitives.babybear import ORDER
from zkvm_primitives.round_constants import round_constants

WIDTH: int = 16
"""Number of field elements in the permutation state."""

RATE: int = 8
"""Number of state elements overwritten by input per absorption."""

OUT: int = 8
"""Number of field elements in a digest."""

SBOX_DEGREE: int = 7
"""Exponent of the S-box."""

ROUNDS_F: int = 8
"""Number of full (external) rounds."""

ROUNDS_P: int = 13
"""Number of partial (internal) rounds."""

# Multiplying by 2**-32 mirrors the Montgomery reduction in the internal layer.
_MONTY_INVERSE = pow(1 << 32, -1, ORDER)
_INTERNAL_DIAG: tuple[int, ...] = (ORDER - 2, *(1 << shift for shift in (*range(14), 15)))


class _Permutation(Protocol):
    def permute(self, state: Sequence[int]) -> list[int]: ...


def _reduce_all(values: Iterable[int]) -> list[int]:
    result = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer field element, got {value!r}")
        result.append(value % ORDER)
    return result


def _apply_mat4(a: int, b: int, c: int, d: int) -> tuple[int, int, int, int]:
    t01 = a + b
    t23 = c + d
    t0123 = t01 + t23
    t01123 = t0123 + b
    t01233 = t0123 + d
    return (
        (t01123 + t01) % ORDER,
        (t01123 + 2 * c) % ORDER,
        (t01233 + t23) % ORDER,
        (t01233 + 2 * a) % ORDER,
    )


def _external_layer(state: list[int]) -> list[int]:
    blocks = [_apply_mat4(*state[start:start + 4]) for start in range(0, WIDTH, 4)]
    sums = [sum(column) for column in zip(*blocks)]
    return [(value + sums[k]) % ORDER for block in blocks for k, value in enumerate(block)]


def _internal_layer(state: list[int]) -> list[int]:
    total = sum(state)
    return [
        (value * diag + total) * _MONTY_INVERSE % ORDER
        for value, diag in zip(state, _INTERNAL_DIAG)
    ]


def _sbox(value: int) -> int:
    return pow(value, SBOX_DEGREE, ORDER)


class Poseidon2:
    """The Poseidon2 permutation on 16 BabyBear elements."""

    def __init__(
        self,
        rounds_f: int,
        external_constants: Iterable[Sequence[int]],
        rounds_p: int,
        internal_constants: Iterable[int],
    ) -> None:
        if rounds_f < 0 or rounds_p < 0:
            raise ValueError("round counts must not be negative")
        external = tuple(tuple(_reduce_all(row)) for row in external_constants)
        internal = tuple(_reduce_all(internal_constants))
        if any(len(row) != WIDTH for row in external):
            raise ValueError(f"every external round constant row must hold {WIDTH} elements")
        if len(external) < rounds_f:
            raise ValueError(f"need {rounds_f} external constant rows, got {len(external)}")
        if len(internal) < rounds_p:
            raise ValueError(f"need {rounds_p} internal constants, got {len(internal)}")
        self._rounds_f = rounds_f
        self._rounds_p = rounds_p
        self._external = external
        self._internal = internal

    @property
    def rounds_f(self) -> int:
        return self._rounds_f

    @property
    def rounds_p(self) -> int:
        return self._rounds_p

    @property
    def external_constants(self) -> tuple[tuple[int, ...], ...]:
        return self._external

    @property
    def internal_constants(self) -> tuple[int, ...]:
        return self._internal

    def _full_round(self, state: list[int], constants: Sequence[int]) -> list[int]:
        state = [_sbox((value + rc) % ORDER) for value, rc in zip(state, constants)]
        return _external_layer(state)

    def permute(self, state: Sequence[int]) -> list[int]:
        """Return the permutation of a 16-element state."""
        current = _reduce_all(state)
        if len(current) != WIDTH:
            raise ValueError(f"state must hold {WIDTH} elements, got {len(current)}")

        current = _external_layer(current)
        half = self._rounds_f // 2
        for constants in self._external[:half]:
            current = self._full_round(current, constants)
        for constant in self._internal[:self._rounds_p]:
            current[0] = _sbox((current[0] + constant) % ORDER)
            current = _internal_layer(current)
        for constants in self._external[half:self._rounds_f]:
            current = self._full_round(current, constants)
        return current


class PaddingFreeSponge:
    """Overwrite-mode sponge of width 16, rate 8 and output 8, without padding."""

    def __init__(self, permutation: _Permutation) -> None:
        self._permutation = permutation

    def hash_iter(self, values: Iterable[int]) -> list[int]:
        """Absorb ``values`` and return an 8-element digest."""
        state = [0] * WIDTH
        filled = 0
        for value in _reduce_all(values):
            state[filled] = value
            filled += 1
            if filled == RATE:
                state = list(self._permutation.permute(state))
                filled = 0
        if filled:
            state = list(self._permutation.permute(state))
        return state[:OUT]


def poseidon2_init() -> Poseidon2:
    """The permutation configured with the standard round constants."""
    rows = list(round_constants())
    internal_start = ROUNDS_F // 2
    internal_end = internal_start + ROUNDS_P
    internal = [row[0] for row in rows[internal_start:internal_end]]
    external = rows[:internal_start] + rows[internal_end:]
    return Poseidon2(ROUNDS_F, external, ROUNDS_P, internal)


def poseidon2_hasher() -> PaddingFreeSponge:
    """A new sponge hasher over the standard permutation."""
    return PaddingFreeSponge(poseidon2_init())


@cache
def _shared_hasher() -> PaddingFreeSponge:
    return poseidon2_hasher()


def poseidon2_hash(values: Iterable[int]) -> list[int]:
    """Hash field elements to an 8-element digest."""
    return _shared_hasher().hash_iter(values)


def hash_deferred_proof(
    prev_digest: Sequence[int],
    vk_digest: Sequence[int],
    pv_digest: Sequence[int],
) -> list[int]:
    """Append one deferred proof to a hash chain of deferred proofs."""
    for name, digest, size in (
        ("prev_digest", prev_digest, 8),
        ("vk_digest", vk_digest, 8),
        ("pv_digest", pv_digest, 32),
    ):
        if len(digest) != size:
            raise ValueError(f"{name} must hold {size} elements, got {len(digest)}")
    return poseidon2_hash([*prev_digest, *vk_digest, *pv_digest])