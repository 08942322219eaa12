"""Compose asynchronous tasks into sequential and parallel pipelines."""

__version__ = "0.1.0"

__all__ = ["task", "pipeline", "flow", "example"]