"""Pipelines and the sequential and parallel combinators."""

from __future__ import annotations

import asyncio
import copy
from typing import Any, Awaitable, Callable, Sequence

from hiveflow.task import Task

__all__ = ["Pipeline", "sequential", "parallel"]


class Pipeline(Task):
    """A task backed by an asynchronous function."""

    def __init__(self, func: Callable[[Any], Awaitable[Any]]) -> None:
        if not callable(func):
            raise TypeError("a pipeline needs a callable")
        self._func = func

    async def run(self, input: Any) -> Any:
        """Run the pipeline on ``input`` and return its result."""
        return await self._func(input)


def _split_input_type(args: Sequence[Any]) -> tuple[type | None, list[Any]]:
    """Separate an optional leading input type from the steps."""
    if args and isinstance(args[0], type):
        return args[0], list(args[1:])
    return None, list(args)


def _check_steps(kind: str, steps: Sequence[Any]) -> None:
    for position, step in enumerate(steps):
        if isinstance(step, type) or not callable(getattr(step, "run", None)):
            raise TypeError(
                f"{kind} step {position} ({step!r}) is not a task with a run() method"
            )


def _check_input(kind: str, input_type: type | None, value: Any) -> None:
    if input_type is not None and not isinstance(value, input_type):
        raise TypeError(
            f"{kind} pipeline expects input of type {input_type.__name__}, "
            f"got {type(value).__name__}"
        )


def sequential(*args: Any) -> Pipeline:
    """Chain tasks so that each one receives the previous one's result.

    An optional leading type names the input the pipeline accepts.
    """
    input_type, steps = _split_input_type(args)
    _check_steps("sequential", steps)

    async def run(input: Any) -> Any:
        _check_input("sequential", input_type, input)
        value = input
        for step in steps:
            value = await step.run(value)
        return value

    return Pipeline(run)


def parallel(*args: Any) -> Pipeline:
    """Run tasks concurrently on copies of one input and collect their results.

    Results come back in the order the tasks were given. Every task is
    allowed to finish; if any failed, the first failure in that order is
    raised. An optional leading type names the input the pipeline accepts.
    """
    input_type, steps = _split_input_type(args)
    _check_steps("parallel", steps)

    async def run(input: Any) -> list[Any]:
        _check_input("parallel", input_type, input)
        outcomes = await asyncio.gather(
            *(step.run(copy.deepcopy(input)) for step in steps),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return list(outcomes)

    return Pipeline(run)