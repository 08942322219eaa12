"""The unit of work that pipelines are built from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Task(ABC):
    """An asynchronous step that turns one input into one result.

    A failing task raises; the exception ends whatever pipeline runs it.
    """

    @abstractmethod
    async def run(self, input: Any) -> Any:
        """Process ``input`` and return the result."""