"""
optionkit – explicit optional values.

Import path convention::

    from optionkit import Some, NOTHING, Deferred, from_nullable
    from optionkit.kernel.errors import NoValuePresentError
    from optionkit.config import configure
"""

from optionkit.kernel.errors import NoValuePresent, NoValuePresentError
from optionkit.kernel.types import (
    NOTHING,
    Deferred,
    Nothing,
    Option,
    Some,
    deferred,
    from_nullable,
    nothing,
    to_nullable,
)

__version__ = "0.1.0"
__all__ = [
    "Deferred",
    "NOTHING",
    "NoValuePresent",
    "NoValuePresentError",
    "Nothing",
    "Option",
    "Some",
    "__version__",
    "deferred",
    "from_nullable",
    "nothing",
    "to_nullable",
]
