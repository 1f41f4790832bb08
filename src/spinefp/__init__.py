"""
spine-fp - Optional and result containers for spine projects.

    >>> from spinefp import Present, Absent, encase_res
    >>> encase_res(lambda: int("42")).map(lambda n: n + 1)
    Success(43)
"""

__version__ = "0.1.0"

from spinefp.core import *  # noqa
from spinefp.core import __all__ as _core_all

__all__ = ["__version__", *_core_all]
