"""Describe a whole pipeline as a chain of steps and parallel blocks."""

from __future__ import annotations

from typing import Any

from hiveflow.pipeline import Pipeline, parallel, sequential

__all__ = ["flow"]


def flow(*args: Any) -> Pipeline:
    """Build a pipeline from steps run one after another.

    A list among the steps is a parallel block; its members may themselves
    be lists, giving nested parallel blocks. An optional leading type names
    the input the pipeline accepts and is also given to every parallel block.
    """
    if args and isinstance(args[0], type):
        input_type: type | None = args[0]
        steps = args[1:]
    else:
        input_type = None
        steps = args

    def build(step: Any) -> Any:
        if isinstance(step, list):
            inner = [build(member) for member in step]
            if input_type is None:
                return parallel(*inner)
            return parallel(input_type, *inner)
        return step

    built = [build(step) for step in steps]
    if input_type is None:
        return sequential(*built)
    return sequential(input_type, *built)