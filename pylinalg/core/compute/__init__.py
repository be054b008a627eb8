"""
Shared compute infrastructure for pylinalg.

Submodules:
    timing: Execution timing utilities
"""

from pylinalg.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
