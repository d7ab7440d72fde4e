"""Primitives for a zkVM: BabyBear arithmetic, Poseidon2 hashing, bincode buffers and public values."""

__version__ = "3.0.0"