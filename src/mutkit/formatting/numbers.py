"""Number coercion and rendering with the semantics printf templates expect.

Rounding follows the "pick the larger candidate on a tie" rule, so every
renderer works on the exact decimal value of the float and rounds half up.
"""
from decimal import Context, Decimal, ROUND_HALF_UP
import math
import re
from typing import Any, Optional

_NUMERIC = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RADIX = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
# wide enough to hold any double exactly
_CTX = Context(prec=1100)


def to_number(value: Any) -> float:
    """Coerce ``value`` to a float; NaN when it has no numeric reading."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _NUMERIC.match(text):
            return float(text)
        if text in ("Infinity", "+Infinity"):
            return math.inf
        if text == "-Infinity":
            return -math.inf
        m = _RADIX.match(text)
        if m:
            base = {"x": 16, "o": 8, "b": 2}[m.group(1).lower()]
            try:
                return float(int(m.group(2), base))
            except ValueError:
                return math.nan
    return math.nan


def to_uint32(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value % 2**32
    number = to_number(value)
    if not math.isfinite(number):
        return 0
    return int(number) % 2**32


def parse_int(value: Any) -> Optional[int]:
    """Leading base-10 integer of ``value``, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else None


def _digits(x: float, sig: int):
    """Round ``|x|`` to ``sig`` significant digits: (digit string, exponent)."""
    d = Decimal(abs(x))
    if d == 0:
        return "0" * sig, 0
    exp = d.adjusted()
    step = Decimal(1).scaleb(1 - sig)
    q = d.scaleb(-exp, _CTX).quantize(step, ROUND_HALF_UP, _CTX)
    if q >= 10:
        exp += 1
        q = d.scaleb(-exp, _CTX).quantize(step, ROUND_HALF_UP, _CTX)
    return "{:f}".format(q).replace(".", ""), exp


def _exp_suffix(exp: int) -> str:
    return "e%s%d" % ("+" if exp >= 0 else "-", abs(exp))


def _sign(x: float) -> str:
    return "-" if x < 0 else ""


def to_fixed(x: float, digits: int) -> str:
    if not math.isfinite(x) or abs(x) >= 1e21:
        return number_to_string(x)
    q = Decimal(abs(x)).quantize(Decimal(1).scaleb(-digits), ROUND_HALF_UP, _CTX)
    return _sign(x) + "{:f}".format(q)


def to_exponential(x: float, digits: int) -> str:
    if not math.isfinite(x):
        return number_to_string(x)
    mantissa, exp = _digits(x, digits + 1)
    if digits:
        mantissa = mantissa[0] + "." + mantissa[1:]
    return _sign(x) + mantissa + _exp_suffix(exp)


def to_precision(x: float, precision: Optional[int] = None) -> str:
    if precision is None or not math.isfinite(x):
        return number_to_string(x)
    precision = max(precision, 1)
    mantissa, exp = _digits(x, precision)
    if exp < -6 or exp >= precision:
        if precision > 1:
            mantissa = mantissa[0] + "." + mantissa[1:]
        return _sign(x) + mantissa + _exp_suffix(exp)
    if exp >= 0:
        head, tail = mantissa[:exp + 1], mantissa[exp + 1:]
        text = head + ("." + tail if tail else "")
    else:
        text = "0." + "0" * (-exp - 1) + mantissa
    return _sign(x) + text


def number_to_string(x: float) -> str:
    """Shortest round-trip rendering, switching to exponent form outside 1e-7..1e21."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    sign, digits, exp = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(map(str, digits))
    k = len(digits)
    n = k + exp
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        text = digits[0] + ("." + digits[1:] if k > 1 else "") + _exp_suffix(n - 1)
    return _sign(x) + text


def literal(value: Any) -> str:
    """Text form of a value as written, used for counting significant digits."""
    if isinstance(value, float):
        return number_to_string(value)
    return str(value)
