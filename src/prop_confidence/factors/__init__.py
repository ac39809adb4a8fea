"""Factor analyzers combined by the confidence engine.

Each analyzer is a pure function of its slice of the scoring inputs.
"""

from prop_confidence.factors.registry import (
    factor_weights,
    get_factor,
    list_factors,
    resolve_factor_id,
)

__all__ = ["factor_weights", "get_factor", "list_factors", "resolve_factor_id"]
