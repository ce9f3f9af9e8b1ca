"""
Shared decorators for lead-intel
"""

from .timing import timing

__all__ = ["timing"]
