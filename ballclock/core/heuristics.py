"""
Hit-target heuristics for the permutation builder.

The builder stops brute-forcing once a fraction of the balls are back in
their reference positions. Half the balls is a good default, but for some
clock sizes that fraction is reached after only a few half-days, leaving a
tiny unit time and an accelerator that has to count to hundreds of billions
in steps of 1.5 days. Those sizes brute-force longer.

The overrides below were found empirically. Rules are checked in order and
the first match wins.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple, Union


DEFAULT_HIT_PERCENTAGE = 0.5


def _balls(*items: Union[int, Tuple[int, int]]) -> FrozenSet[int]:
    """Expand ints and inclusive (lo, hi) ranges into a set of ball counts."""
    out = set()
    for item in items:
        if isinstance(item, tuple):
            lo, hi = item
            out.update(range(lo, hi + 1))
        else:
            out.add(item)
    return frozenset(out)


@dataclass(frozen=True)
class HitRule:
    """Use `percentage` for every ball count in `balls`."""
    balls: FrozenSet[int]
    percentage: float

    def matches(self, n: int) -> bool:
        return n in self.balls


HIT_RULES: Tuple[HitRule, ...] = (
    HitRule(_balls(649, 720, (725, 726), 729, 730, (732, 750)), 0.7),
    HitRule(_balls(253, 477, 480, 724, 727, 728), 0.75),
    HitRule(_balls(731), 0.8),
    HitRule(_balls(733), 0.83),  # shadowed by 732-750 above
    HitRule(_balls(722, 842, 869, 972, 973, 974), 0.6),
    HitRule(_balls(1000), 0.63),
    HitRule(_balls(757, 831), 0.54),
)


def hit_percentage(n: int, rules: Iterable[HitRule] = HIT_RULES) -> float:
    """Fraction of balls that must be in place before accelerating."""
    for rule in rules:
        if rule.matches(n):
            return rule.percentage
    return DEFAULT_HIT_PERCENTAGE


def hit_target(n: int, percentage: float) -> int:
    """Number of balls that must be in place (truncated)."""
    if not 0 < percentage <= 1:
        raise ValueError(f"Hit percentage must be in (0, 1], got {percentage}")
    return int(n * percentage)
