"""
Application services layer.

Services orchestrate business operations using the balancing engine and
domain services.
"""

from services.result import Result

__all__ = ["Result"]
