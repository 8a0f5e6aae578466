"""Testing generators – Hypothesis strategies for Option values."""
from optionkit.testing.generators.strategies import (
    any_option_strategy,
    deferred_strategy,
    option_strategy,
    some_strategy,
)

__all__ = ["any_option_strategy", "deferred_strategy", "option_strategy", "some_strategy"]
