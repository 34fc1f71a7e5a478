"""Pydantic data models for thriftgen runs.

- InvocationResult: outcome of one thrift compiler execution
- RunStatus / RunSummary: overall outcome of a compile run
"""

from .result import InvocationResult, RunStatus, RunSummary

__all__ = [
    "InvocationResult",
    "RunStatus",
    "RunSummary",
]
