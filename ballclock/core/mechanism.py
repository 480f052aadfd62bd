"""
Physical model of the ball clock.

The clock is a pool (queue) of numbered balls feeding three tracks:

    pool -> Minute1 (4) -> Minute5 (11) -> Hour (11)

Every minute the front ball of the pool (the trigger ball) drops onto the
Minute1 track. When a track is already full the trigger ball passes on to the
next track and the full track tips its balls back into the pool in reverse
order. When all three tracks are full the clock resets, and the timing cam
decides the order in which the trigger ball, the Hour track and the Minute5
track return to the pool.

This module is the tick-level reference implementation. The fast path used by
the builder lives in kernels.py and must agree with it block for block.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from collections import deque
from enum import IntEnum
from typing import Deque, Iterable, List, Optional, Sequence

import numpy as np


MIN1_CAPACITY = 4
MIN5_CAPACITY = 11
HOUR_CAPACITY = 11

# One tick is one minute; a block of 720 ticks is 12 hours and empties
# every track.
BRUTEFORCECYCLES = (MIN1_CAPACITY + 1) * (MIN5_CAPACITY + 1) * (HOUR_CAPACITY + 1)

# With every track full one more ball must be left in the pool to trigger.
MIN_BALLS = MIN1_CAPACITY + MIN5_CAPACITY + HOUR_CAPACITY + 1


class ReturnOrder(IntEnum):
    """
    Order in which a full reset returns balls to the pool.

    Encoded as integers so the numba kernels can take it directly.
    """
    CAM = 0     # trigger -> Hour reversed -> Minute5 reversed
    NO_CAM = 1  # Minute5 reversed -> trigger -> Hour reversed

    def __str__(self) -> str:
        return "cam" if self == ReturnOrder.CAM else "no cam"


def validate_ball_count(n: int) -> int:
    """Check that n balls can run the clock; return n."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"Ball count must be an integer, got {type(n).__name__}")
    if n < MIN_BALLS:
        raise ValueError(
            f"A clock needs at least {MIN_BALLS} balls, got {n}"
        )
    return int(n)


def reference_arrangement(n: int) -> np.ndarray:
    """The solved ordering [0, 1, ..., n-1], read-only."""
    ref = np.arange(n, dtype=np.int64)
    ref.flags.writeable = False
    return ref


@dataclass
class Track:
    """A rail holding at most `capacity` balls."""
    name: str
    capacity: int
    balls: List[int] = field(default_factory=list)

    @property
    def full(self) -> bool:
        return len(self.balls) == self.capacity

    def push(self, ball: int) -> None:
        if self.full:
            raise RuntimeError(f"{self.name} track is full")
        self.balls.append(ball)

    def dump(self) -> List[int]:
        """Empty the track, returning its balls in reverse order."""
        released = self.balls[::-1]
        self.balls.clear()
        return released

    def __len__(self) -> int:
        return len(self.balls)


class ClockMechanism:
    """
    Tick-by-tick ball clock.

    Example:
        clock = ClockMechanism(30, ReturnOrder.CAM)
        clock.run_block()
        clock.pool_order()   # arrangement after 12 hours
    """

    def __init__(
        self,
        n_balls: int,
        order: ReturnOrder = ReturnOrder.CAM,
        pool: Optional[Sequence[int]] = None,
    ):
        self.n_balls = validate_ball_count(n_balls)
        self.order = ReturnOrder(order)

        if pool is None:
            pool = range(self.n_balls)
        self.pool: Deque[int] = deque(int(b) for b in pool)
        if len(self.pool) != self.n_balls:
            raise ValueError("Pool must hold every ball")

        self.min1 = Track("Minute1", MIN1_CAPACITY)
        self.min5 = Track("Minute5", MIN5_CAPACITY)
        self.hour = Track("Hour", HOUR_CAPACITY)
        self.ticks = 0

    @property
    def tracks(self) -> List[Track]:
        return [self.min1, self.min5, self.hour]

    def _release(self, balls: Iterable[int]) -> None:
        self.pool.extend(balls)

    def tick(self) -> int:
        """Advance one minute; return the trigger ball."""
        trigger = self.pool.popleft()
        self.ticks += 1

        if not self.min1.full:
            self.min1.push(trigger)
            return trigger

        self._release(self.min1.dump())

        if not self.min5.full:
            self.min5.push(trigger)
        elif not self.hour.full:
            self.hour.push(trigger)
            self._release(self.min5.dump())
        elif self.order == ReturnOrder.CAM:
            self._release([trigger])
            self._release(self.hour.dump())
            self._release(self.min5.dump())
        else:
            self._release(self.min5.dump())
            self._release([trigger])
            self._release(self.hour.dump())

        return trigger

    def run_block(self) -> np.ndarray:
        """Advance 12 hours; return the pool order (all tracks are empty)."""
        for _ in range(BRUTEFORCECYCLES):
            self.tick()
        return self.pool_order()

    def pool_order(self) -> np.ndarray:
        return np.fromiter(self.pool, dtype=np.int64, count=len(self.pool))

    def is_reset(self) -> bool:
        """True when every ball is back in its starting position."""
        if any(len(t) for t in self.tracks):
            return False
        return all(ball == i for i, ball in enumerate(self.pool))

    def check_invariants(self) -> None:
        """Raise RuntimeError if capacity or conservation is violated."""
        for track in self.tracks:
            if len(track) > track.capacity:
                raise RuntimeError(f"{track.name} track over capacity")

        balls = list(self.pool)
        for track in self.tracks:
            balls.extend(track.balls)
        if len(balls) != self.n_balls:
            raise RuntimeError(f"Clock holds {len(balls)} balls, expected {self.n_balls}")
        if sorted(balls) != list(range(self.n_balls)):
            raise RuntimeError("Ball ids duplicated or lost")
