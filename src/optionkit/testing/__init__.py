"""Testing support – fakes and property-based generators.

Import in your tests::

    from optionkit.testing import CountingProducer, option_strategy
"""

from optionkit.testing.fakes import CountingProducer
from optionkit.testing.generators import (
    any_option_strategy,
    deferred_strategy,
    option_strategy,
    some_strategy,
)

__all__ = [
    "CountingProducer",
    "any_option_strategy",
    "deferred_strategy",
    "option_strategy",
    "some_strategy",
]
