"""
Numba kernels for the two hot loops.

- _cycle_block: one 12-hour block of the mechanism on a ring-buffer pool
- _count_applications: ping-pong application of a permutation until it
  returns to the identity

Both release the GIL so the cam and no-cam computations can overlap on
two threads.
"""

from __future__ import annotations
import numpy as np
from numba import jit


@jit(nopython=True, cache=True, nogil=True)
def _cycle_block(
    pool: np.ndarray,
    order: int,
    min1_cap: int,
    min5_cap: int,
    hour_cap: int,
    ticks: int,
) -> np.ndarray:
    """Run `ticks` minutes starting from `pool` with empty tracks."""
    n = pool.shape[0]
    ring = pool.copy()
    head = 0
    count = n

    min1 = np.empty(min1_cap, dtype=np.int64)
    min5 = np.empty(min5_cap, dtype=np.int64)
    hour = np.empty(hour_cap, dtype=np.int64)
    c1 = 0
    c5 = 0
    ch = 0

    for _ in range(ticks):
        trigger = ring[head]
        head = (head + 1) % n
        count -= 1

        if c1 < min1_cap:
            min1[c1] = trigger
            c1 += 1
            continue

        for j in range(c1 - 1, -1, -1):
            ring[(head + count) % n] = min1[j]
            count += 1
        c1 = 0

        if c5 < min5_cap:
            min5[c5] = trigger
            c5 += 1
        elif ch < hour_cap:
            hour[ch] = trigger
            ch += 1
            for j in range(c5 - 1, -1, -1):
                ring[(head + count) % n] = min5[j]
                count += 1
            c5 = 0
        elif order == 0:
            # cam: trigger, Hour, Minute5
            ring[(head + count) % n] = trigger
            count += 1
            for j in range(ch - 1, -1, -1):
                ring[(head + count) % n] = hour[j]
                count += 1
            for j in range(c5 - 1, -1, -1):
                ring[(head + count) % n] = min5[j]
                count += 1
            ch = 0
            c5 = 0
        else:
            # no cam: Minute5, trigger, Hour
            for j in range(c5 - 1, -1, -1):
                ring[(head + count) % n] = min5[j]
                count += 1
            ring[(head + count) % n] = trigger
            count += 1
            for j in range(ch - 1, -1, -1):
                ring[(head + count) % n] = hour[j]
                count += 1
            ch = 0
            c5 = 0

    out = np.empty(count, dtype=np.int64)
    for i in range(count):
        out[i] = ring[(head + i) % n]
    return out


@jit(nopython=True, cache=True, nogil=True)
def _count_applications(perm: np.ndarray) -> int:
    """Number of applications of perm needed to return to [0, n)."""
    n = perm.shape[0]
    tick = np.arange(n, dtype=np.int64)
    tock = np.empty(n, dtype=np.int64)
    steps = 0
    back = False

    while not back:
        for i in range(n):
            tock[i] = tick[perm[i]]
        steps += 1
        tick, tock = tock, tick

        back = True
        for i in range(n):
            if tick[i] != i:
                back = False
                break

    return steps
