"""Registry of cancellable deferred cleanup tasks."""

import asyncio
import logging
from typing import Callable, Dict
from .clock import SuspensionClock

logger = logging.getLogger(__name__)


class DeferredCleanupRegistry:
    """Tracks fire-and-forget cleanups so a reset can cancel them."""
    
    def __init__(self, clock: SuspensionClock):
        self.clock = clock
        self._tasks: Dict[str, asyncio.Task] = {}
    
    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> asyncio.Task:
        """
        Run ``callback`` after ``delay_ms`` unless cancelled first.
        
        Scheduling the same key again replaces the earlier entry.
        
        Args:
            key: Identifier of the cleanup (flight id)
            delay_ms: Delay before the callback fires
            callback: Synchronous cleanup action
            
        Returns:
            The task running the cleanup
        """
        previous = self._tasks.pop(key, None)
        if previous is not None and not previous.done():
            previous.cancel()
        
        async def _fire() -> None:
            await self.clock.wait(delay_ms)
            # Unregister before the callback so a late reset has nothing to cancel.
            if self._tasks.get(key) is task:
                del self._tasks[key]
            callback()
        
        task = asyncio.get_running_loop().create_task(_fire())
        self._tasks[key] = task
        return task
    
    @property
    def pending(self) -> int:
        return len(self._tasks)
    
    def __contains__(self, key: str) -> bool:
        return key in self._tasks
    
    def cancel_all(self) -> int:
        """
        Cancel every outstanding cleanup.
        
        Returns:
            Number of cleanups cancelled
        """
        count = 0
        for key, task in list(self._tasks.items()):
            if not task.done():
                task.cancel()
                count += 1
        self._tasks.clear()
        if count:
            logger.info(f"Cancelled {count} pending cleanup(s)")
        return count
