"""Numeric formatting policy for emitted source.

Every floating-point value in the emitted source goes through format_real.
Seventeen significant digits are enough to round-trip any IEEE 754 double,
so the compiled metrics are bit-identical to the exported ones.
"""

REAL_PRECISION = 17


def format_real(value: float) -> str:
    """Format a double with round-trip precision (printf ``%.17g``).

    Args:
        value: Value to format

    Returns:
        ``%g`` rendering with 17 significant digits
    """
    return "%.*g" % (REAL_PRECISION, value)


def format_int(value: int) -> str:
    """Format an integer in decimal."""
    return "%d" % value
