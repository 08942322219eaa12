# hiveflow

Small building blocks for chaining asynchronous tasks into pipelines.
A step is any object with an async `run(input)` method. You can run steps
one after another, run several at once on the same input, or write a whole
pipeline as a single flow that mixes both. It uses only the standard
library.

## Installation

```
pip install .
```

To run the tests, install the extra as well:

```
pip install ".[test]"
pytest
```

## Tasks

Subclass `hiveflow.task.Task` and implement `run`:

```python
from hiveflow.task import Task

class Add(Task):
    def __init__(self, amount):
        self.amount = amount

    async def run(self, input):
        return input + self.amount

class Mul(Task):
    def __init__(self, factor):
        self.factor = factor

    async def run(self, input):
        return input * self.factor

class Sum(Task):
    async def run(self, input):
        return sum(input)
```

A task signals failure by raising. The exception propagates out of the
pipeline that runs it.

## Sequential and parallel pipelines

`hiveflow.pipeline.sequential` feeds each step's result into the next one.
`hiveflow.pipeline.parallel` runs every step concurrently, each on its own
deep copy of the input, and returns their results as a list in the order
the steps were given. Every step is allowed to finish; if any raised, the
first failure in that order is raised from the pipeline.

Both return a `hiveflow.pipeline.Pipeline`, which is itself a `Task`, so
they nest:

```python
import asyncio
from hiveflow.pipeline import parallel, sequential

pipeline = sequential(Add(1), Add(2), parallel(Mul(3), Mul(4)), Sum())
print(asyncio.run(pipeline.run(2)))  # 35
```

A type may be given as the first argument, for example
`sequential(int, Add(1), Mul(3))`. Running the pipeline on a value that is
not an instance of that type raises `TypeError`.

Steps are checked when the pipeline is built: anything that is not an
object with a callable `run` method (including a task class passed instead
of an instance) raises `TypeError`.

`Pipeline(func)` wraps any async function of one argument directly; its
`run(input)` awaits `func(input)`.

## Flows

`hiveflow.flow.flow` describes the same kind of pipeline more compactly:
its arguments run in order, and a list stands for a block of steps that run
in parallel. Lists may be nested.

```python
import asyncio
from hiveflow.flow import flow

pipeline = flow(Add(1), Add(2), [Mul(3), Mul(4)], Sum())
print(asyncio.run(pipeline.run(1)))  # 28
```

A leading type, as in `flow(int, Add(1), [Mul(3), Mul(4)])`, is checked
against the pipeline's input and is also given to every parallel block.

## Example

`hiveflow.example` ships `HttpGet`, `SummarizeMany` and `Summarize`:
tasks that fetch pages in parallel, join the bodies one per line and cut
the result down to its first 100 characters (adding `...` when it was
longer). A failed request raises `hiveflow.example.HttpError`. Run it with:

```
hiveflow-example
```

With no arguments it fetches `https://example.com` and
`https://example.org`; pass URLs to fetch others instead:

```
hiveflow-example https://example.com
```

It prints `Final Summary: ...` and exits with status 0, or prints the
error to standard error and exits with status 1.

## What it does not do

Pipelines have no retries, timeouts, cancellation of sibling steps,
named steps or progress reporting; the only command is the example above.