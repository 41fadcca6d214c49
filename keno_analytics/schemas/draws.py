"""Pydantic schemas for normalized draw data."""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field, field_validator

from keno_analytics.engine.combinatorics import POOL_SIZE


class Draw(BaseModel):
    """One keno draw: a stable sequence id plus its distinct numbers (sorted)."""

    model_config = {"frozen": True}

    sequence_id: int = Field(ge=1)
    numbers: tuple[int, ...]

    @field_validator("numbers")
    @classmethod
    def _distinct_in_pool(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if any(n < 1 or n > POOL_SIZE for n in v):
            raise ValueError(f"draw numbers must be between 1 and {POOL_SIZE}")
        if len(set(v)) != len(v):
            raise ValueError("draw numbers must be distinct")
        return tuple(sorted(v))


class DrawHistory(BaseModel):
    """Draws of one venue, most recent first.

    Analyzers only read from it; slicing helpers return new histories.
    """

    model_config = {"frozen": True}

    draws: tuple[Draw, ...] = ()
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.draws)

    @property
    def is_empty(self) -> bool:
        return not self.draws

    @property
    def number_lists(self) -> list[tuple[int, ...]]:
        return [d.numbers for d in self.draws]

    def head(self, n: int) -> "DrawHistory":
        """The ``n`` most recent draws."""
        return DrawHistory(draws=self.draws[:n])

    def tail(self, start: int) -> "DrawHistory":
        """Everything older than the first ``start`` draws."""
        return DrawHistory(draws=self.draws[start:])

    @classmethod
    def from_number_lists(cls, lists: Iterable[Sequence[int]]) -> "DrawHistory":
        """Build a history from already-parsed number lists (most recent first)."""
        return cls(draws=tuple(
            Draw(sequence_id=i, numbers=tuple(nums))
            for i, nums in enumerate(lists, start=1)
        ))
