"""Fixed-point decimal handling for fee parameters.

Fee parameters carry exactly 18 fractional digits, so each value has one
canonical form. Equal values must encode to identical bytes.
"""

from decimal import Context, Decimal, InvalidOperation

DEC_PRECISION = 18
DEC_UNIT = Decimal(1).scaleb(-DEC_PRECISION)  # 1E-18, smallest positive value
# 256 integer bits plus the bits needed for 18 fractional digits
MAX_DEC_BIT_LEN = 256 + 60

_CONTEXT = Context(prec=120)


def to_fixed_point(value: Decimal) -> Decimal | None:
    """Quantize value to 18 places, or None if that would change it.

    Also None for non-finite values and values wider than MAX_DEC_BIT_LEN.
    """
    if not value.is_finite():
        return None
    try:
        fixed = value.quantize(DEC_UNIT, context=_CONTEXT)
    except InvalidOperation:
        return None
    if fixed != value:
        return None
    scaled = int(fixed.scaleb(DEC_PRECISION, context=_CONTEXT))
    if scaled.bit_length() > MAX_DEC_BIT_LEN:
        return None
    # -0 and 0 must share one encoding
    return abs(fixed) if fixed.is_zero() else fixed


def format_dec(value: Decimal) -> str:
    """Canonical rendering: plain notation, exactly 18 fractional digits.

    Values that do not fit the fixed-point range fall back to str() so
    invalid input can still be displayed; validation rejects them.
    """
    fixed = to_fixed_point(value)
    if fixed is None:
        return str(value)
    return format(fixed, "f")
