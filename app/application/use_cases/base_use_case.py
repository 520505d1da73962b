"""
Base use case classes for the application layer.
Provides common structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic
from datetime import datetime


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Times each execution and logs its outcome; errors propagate to the caller.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    @property
    def execution_time(self) -> Optional[float]:
        """Seconds spent in the last execution."""
        if self.execution_start is None or self.execution_end is None:
            return None
        return (self.execution_end - self.execution_start).total_seconds()

    async def execute(self, request: T) -> R:
        """
        Execute the use case, recording how long it took.
        """
        self.execution_start = datetime.utcnow()
        try:
            return await self._execute_business_logic(request)
        finally:
            self.execution_end = datetime.utcnow()
            logger.debug(f"{type(self).__name__} finished in {self.execution_time:.3f}s")

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass
