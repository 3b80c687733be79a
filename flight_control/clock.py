"""Suspension clocks pacing the orchestrated sequences.

Every timed transition goes through ``await clock.wait(ms)``. Production
uses ``RealClock``; tests swap in ``ImmediateClock`` (no delay) or
``VirtualClock`` (time only moves when the test advances it).
"""

import asyncio
import heapq
import itertools
import logging
from typing import List, Tuple
from pydantic import BaseModel
from .config import (
    Config,
    POSITIONING_MS,
    TAKEOFF_ANIMATION_MS,
    AIRBORNE_DWELL_MS,
    TAKEOFF_SPACING_MS,
    LANDING_DESCENT_MS,
    LANDING_SPACING_MS,
    CLEANUP_DELAY_MS,
)

logger = logging.getLogger(__name__)


class Timings(BaseModel):
    """Protocol durations in milliseconds."""
    
    positioning: int = POSITIONING_MS
    takeoff_animation: int = TAKEOFF_ANIMATION_MS
    airborne_dwell: int = AIRBORNE_DWELL_MS
    takeoff_spacing: int = TAKEOFF_SPACING_MS
    landing_descent: int = LANDING_DESCENT_MS
    landing_spacing: int = LANDING_SPACING_MS
    cleanup_delay: int = CLEANUP_DELAY_MS
    
    @classmethod
    def from_config(cls, config: Config) -> "Timings":
        return cls(
            positioning=config.POSITIONING_MS,
            takeoff_animation=config.TAKEOFF_ANIMATION_MS,
            airborne_dwell=config.AIRBORNE_DWELL_MS,
            takeoff_spacing=config.TAKEOFF_SPACING_MS,
            landing_descent=config.LANDING_DESCENT_MS,
            landing_spacing=config.LANDING_SPACING_MS,
            cleanup_delay=config.CLEANUP_DELAY_MS,
        )


class SuspensionClock:
    """Base clock interface."""
    
    async def wait(self, duration_ms: int) -> None:
        raise NotImplementedError


class RealClock(SuspensionClock):
    """Wall-clock waits via asyncio.sleep, optionally scaled."""
    
    def __init__(self, time_scale: float = 1.0):
        """
        Initialize real clock.
        
        Args:
            time_scale: Multiplier applied to every duration
        """
        if time_scale < 0:
            raise ValueError("time_scale must be >= 0")
        self.time_scale = time_scale
    
    async def wait(self, duration_ms: int) -> None:
        await asyncio.sleep(duration_ms / 1000.0 * self.time_scale)


class ImmediateClock(SuspensionClock):
    """Zero-delay clock that records every requested duration."""
    
    def __init__(self):
        self.waits: List[int] = []
    
    async def wait(self, duration_ms: int) -> None:
        self.waits.append(duration_ms)
        # Still a suspension point, so other tasks get to run.
        await asyncio.sleep(0)


class VirtualClock(SuspensionClock):
    """Virtual-time clock driven explicitly by the caller.
    
    Waiters are parked on futures ordered by deadline; ``advance`` releases
    them one deadline at a time and lets each woken task run until its next
    suspension point before moving on.
    """
    
    SETTLE_ROUNDS = 10
    
    def __init__(self):
        self.now = 0
        self._waiters: List[Tuple[int, int, asyncio.Future]] = []
        self._counter = itertools.count()
    
    async def wait(self, duration_ms: int) -> None:
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(self._waiters, (self.now + duration_ms, next(self._counter), future))
        await future
    
    @property
    def pending(self) -> int:
        """Number of waits not yet released (cancelled ones excluded)."""
        return sum(1 for _, _, fut in self._waiters if not fut.done())
    
    async def _settle(self) -> None:
        for _ in range(self.SETTLE_ROUNDS):
            await asyncio.sleep(0)
    
    async def advance(self, duration_ms: int) -> None:
        """
        Move virtual time forward, releasing every wait that falls due.
        
        Args:
            duration_ms: Amount of virtual time to advance
        """
        target = self.now + duration_ms
        await self._settle()
        while self._waiters and self._waiters[0][0] <= target:
            deadline, _, future = heapq.heappop(self._waiters)
            if future.done():
                continue
            self.now = deadline
            future.set_result(None)
            await self._settle()
        self.now = target
    
    async def run_until_idle(self, limit_ms: int = 10 ** 9) -> None:
        """Advance through every pending wait until none remain."""
        await self._settle()
        while self.pending and self.now < limit_ms:
            next_deadline = min(d for d, _, fut in self._waiters if not fut.done())
            await self.advance(next_deadline - self.now)
