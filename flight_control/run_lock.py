"""Exclusive run token shared by the takeoff and emergency-landing sequences."""

import asyncio
import itertools
import logging
from typing import Optional
from .models.system_state import SystemState

logger = logging.getLogger(__name__)


class ExclusiveRunLock:
    """Busy flag with ownership.
    
    Acquisition is synchronous so that two start requests issued back to back
    can never both succeed. Each acquisition gets a fresh token; ``release``
    only takes effect for the current token, so a run cancelled by a reset
    cannot release the lock of a run started afterwards.
    """
    
    def __init__(self, state: SystemState):
        self.state = state
        self._tokens = itertools.count(1)
        self._token: Optional[int] = None
        self._task: Optional[asyncio.Task] = None
    
    @property
    def busy(self) -> bool:
        return self.state.busy
    
    @property
    def task(self) -> Optional[asyncio.Task]:
        """Task running the sequence that holds the lock."""
        return self._task
    
    def acquire(self, sequence: str) -> Optional[int]:
        """
        Try to take the lock for an orchestrated sequence.
        
        Args:
            sequence: Name of the sequence (takeoff / emergency_landing)
            
        Returns:
            Token to release with, or None when the lock is already held
        """
        if self.state.busy:
            return None
        self._token = next(self._tokens)
        self.state.busy = True
        self.state.active_sequence = sequence
        logger.debug(f"Run lock acquired by {sequence} (token {self._token})")
        return self._token
    
    def attach(self, token: int, task: asyncio.Task) -> None:
        if token == self._token:
            self._task = task
    
    def release(self, token: int) -> bool:
        """
        Release the lock if the token is still current.
        
        Returns:
            True when the lock was released by this call
        """
        if token != self._token:
            return False
        self._token = None
        self._task = None
        self.state.busy = False
        self.state.active_sequence = None
        logger.debug(f"Run lock released (token {token})")
        return True
    
    def revoke(self) -> Optional[asyncio.Task]:
        """
        Drop the current holder without waiting for it and cancel its task.
        
        Returns:
            The cancelled task, if any
        """
        task = self._task
        self._token = None
        self._task = None
        self.state.busy = False
        self.state.active_sequence = None
        if task is not None and not task.done():
            task.cancel()
            logger.info("Active run cancelled")
        return task
