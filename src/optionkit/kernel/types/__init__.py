"""Kernel option types — public re-export surface.

Modules:
  option.py   — Option, Some, Nothing, NOTHING, nothing
  deferred.py — Deferred, deferred
  nullable.py — from_nullable, to_nullable
"""

from optionkit.kernel.types.deferred import Deferred, deferred
from optionkit.kernel.types.nullable import from_nullable, to_nullable
from optionkit.kernel.types.option import NOTHING, Nothing, Option, Some, nothing

__all__ = [
    "Deferred",
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "deferred",
    "from_nullable",
    "nothing",
    "to_nullable",
]
