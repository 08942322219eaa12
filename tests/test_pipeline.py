import asyncio

import pytest

from hiveflow.pipeline import Pipeline, parallel, sequential
from hiveflow.task import Task


class Step(Task):
    """Task that applies a plain function to its input."""

    def __init__(self, func):
        self.func = func

    async def run(self, input):
        return self.func(input)


def add(amount):
    return Step(lambda value: value + amount)


def mul(factor):
    return Step(lambda value: value * factor)


def total():
    return Step(sum)


def _raise_fail(_):
    raise RuntimeError("fail!")


def fail():
    return Step(_raise_fail)


def appender(item):
    def apply(items):
        items.append(item)
        return items

    return Step(apply)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("build", "given", "expected"),
    [
        pytest.param(lambda: sequential(int, add(1), add(2), mul(3)), 0, 9, id="sequential"),
        pytest.param(lambda: parallel(int, add(2), mul(3), add(2)), 3, [5, 9, 5], id="parallel"),
        pytest.param(
            lambda: sequential(int, add(1), add(2), parallel(int, mul(3), mul(4)), total()),
            2,
            35,
            id="seq-par-seq",
        ),
        pytest.param(lambda: sequential(add(1), mul(3)), 1, 6, id="untyped"),
        pytest.param(lambda: sequential(int), 7, 7, id="empty-sequential"),
        pytest.param(lambda: parallel(int), 7, [], id="empty-parallel"),
    ],
)
async def test_pipeline_results(build, given, expected):
    assert await build().run(given) == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("combinator", [sequential, parallel])
async def test_error_propagates(combinator):
    with pytest.raises(RuntimeError, match="fail!"):
        await combinator(int, add(1), fail(), add(1)).run(1)


@pytest.mark.asyncio
async def test_parallel_raises_first_error_in_order_after_all_finish():
    finished = []

    class Slow(Task):
        async def run(self, input):
            await asyncio.sleep(0.01)
            finished.append("slow")
            return input

    def raiser(name):
        def apply(_):
            raise KeyError(name)

        return Step(apply)

    pipeline = parallel(int, raiser("first"), Slow(), raiser("second"))
    with pytest.raises(KeyError, match="first"):
        await pipeline.run(1)
    assert finished == ["slow"]


@pytest.mark.asyncio
async def test_parallel_runs_tasks_concurrently():
    first_started = asyncio.Event()
    second_started = asyncio.Event()

    class Waits(Task):
        def __init__(self, mine, other):
            self.mine = mine
            self.other = other

        async def run(self, input):
            self.mine.set()
            await asyncio.wait_for(self.other.wait(), timeout=1)
            return input

    pipeline = parallel(
        Waits(first_started, second_started),
        Waits(second_started, first_started),
    )
    assert await pipeline.run("x") == ["x", "x"]


@pytest.mark.asyncio
async def test_parallel_gives_each_task_its_own_copy():
    original = [0]
    pipeline = parallel(list, appender(1), appender(2))
    assert await pipeline.run(original) == [[0, 1], [0, 2]]
    assert original == [0]


@pytest.mark.asyncio
@pytest.mark.parametrize("combinator", [sequential, parallel])
async def test_input_type_mismatch_raises(combinator):
    with pytest.raises(TypeError, match="int"):
        await combinator(int, add(1)).run("one")


@pytest.mark.parametrize(
    ("combinator", "bad_step"),
    [
        pytest.param(sequential, 42, id="number"),
        pytest.param(parallel, object(), id="object"),
        pytest.param(sequential, Step, id="task-class"),
    ],
)
def test_step_without_run_is_rejected(combinator, bad_step):
    with pytest.raises(TypeError, match="run"):
        combinator(int, add(1), bad_step)


@pytest.mark.asyncio
async def test_pipeline_wraps_async_function():
    async def negate(value):
        return -value

    assert await Pipeline(negate).run(5) == -5


def test_pipeline_requires_callable():
    with pytest.raises(TypeError):
        Pipeline(5)