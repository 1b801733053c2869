"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import asyncio
import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseUseCase:
    """
    Base class for all use cases.
    Use cases raise domain exceptions; the web layer maps them to responses.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    async def run_blocking(self, func: Callable[..., T], *args: Any) -> T:
        """
        Run CPU-bound work (password hashing) in a worker thread so the event
        loop keeps serving other requests.
        """
        return await asyncio.to_thread(func, *args)
