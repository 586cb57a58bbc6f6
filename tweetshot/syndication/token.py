import math

from .contract import TOKEN_MULTIPLIER, TOKEN_RADIX, TOKEN_SCALE, TOKEN_STRIPPED_CHARS

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def get_token(tweet_id: str) -> str:
    """Token the syndication API expects alongside ``id``."""
    value = float(tweet_id) / TOKEN_SCALE * TOKEN_MULTIPLIER
    text = to_radix_string(value, TOKEN_RADIX)
    return text.translate({ord(ch): None for ch in TOKEN_STRIPPED_CHARS})


def _exponent(value: float) -> int:
    # Binary exponent with the significand read as a 53-bit integer.
    return math.frexp(value)[1] - 53


def to_radix_string(value: float, radix: int) -> str:
    """Format a finite float in ``radix`` the way JavaScript's Number#toString does.

    Fraction digits are emitted only while they are still significant for the
    input double, with round-half-even on the last digit.
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot format non-finite value {value!r}")

    negative = value < 0
    if negative:
        value = -value

    integer = math.floor(value)
    fraction = value - integer
    delta = max(0.5 * (math.nextafter(value, math.inf) - value), math.nextafter(0.0, 1.0))

    fraction_digits: list[str] = []
    if fraction >= delta:
        while True:
            fraction *= radix
            delta *= radix
            digit = int(fraction)
            fraction_digits.append(_DIGITS[digit])
            fraction -= digit
            if fraction > 0.5 or (fraction == 0.5 and digit & 1):
                if fraction + delta > 1:
                    # round up, propagating the carry leftwards
                    while True:
                        if not fraction_digits:
                            integer += 1
                            break
                        last = _DIGITS.index(fraction_digits.pop())
                        if last + 1 < radix:
                            fraction_digits.append(_DIGITS[last + 1])
                            break
                    break
            if fraction < delta:
                break

    integer = float(integer)
    integer_digits: list[str] = []
    while _exponent(integer / radix) > 0:
        integer /= radix
        integer_digits.append("0")
    while True:
        remainder = math.fmod(integer, radix)
        integer_digits.append(_DIGITS[int(remainder)])
        integer = (integer - remainder) / radix
        if integer <= 0:
            break

    text = "".join(reversed(integer_digits))
    if fraction_digits:
        text += "." + "".join(fraction_digits)
    return "-" + text if negative else text
