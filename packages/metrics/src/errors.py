"""Exceptions raised by the ratio pipeline."""


class RatioEngineError(Exception):
    """Base class for ratio engine failures."""


class ConfigurationError(RatioEngineError, ValueError):
    """Invalid configuration or input detected before computation starts.

    Examples: non-positive ``periods_per_year``, absolute data without a
    positive base capital, an empty observation series.
    """


class NumericDomainError(RatioEngineError, ArithmeticError):
    """An intermediate value is mathematically undefined.

    Raised instead of coercing to NaN or 0, e.g. ``ln(1 + r)`` with
    ``r <= -1`` or a non-finite observation.
    """
