"""Flowcheck.

Workflow graph validation: structure, connectivity, cycles and
execution order for workflow editor graphs.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
