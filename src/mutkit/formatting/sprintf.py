"""printf-style formatting for assertion messages.

Directives look like ``%[argIndex$][flags][width][.precision]type``:

- zero or space padding (default: space)
    sprintf("%4d", 3)  ->  "   3"
    sprintf("%04d", 3) ->  "0003"
- left and right alignment (default: right)
    sprintf("%3s", "a")  -> "  a"
    sprintf("%-3s", "b") -> "b  "
- out of order arguments
    sprintf("Estimate: %2$d units total: %1$.2f total", total, quantity)
- binary, octal and hex prefixes (default: none)
    sprintf("%#b", 13)   -> "0b1101"
    sprintf("%#06x", 13) -> "0x000d"
- positive number prefix
    sprintf("%+d", 3) -> "+3"
    sprintf("% d", 3) -> " 3"
- width with truncation
    sprintf("%5.3s", "catfish")  -> "  cat"
    sprintf("%-5.3s", "catfish") -> "cat  "
- precision
    sprintf("%.3f", 2.1)     -> "2.100"
    sprintf("%.3e", 2.1)     -> "2.100e+0"
    sprintf("%.3g", 2.1)     -> "2.10"
    sprintf("%.3p", 2.1)     -> "2.1"
    sprintf("%.3p", "2.100") -> "2.10"

``%n`` swallows an argument, ``%p``/``%P`` act like ``%g`` without claiming
more significant digits than the input had.
"""
import math
import re
from typing import Any, Optional, Sequence

from ..errors import FormatError
from . import numbers

DIRECTIVE = re.compile(
    r"%%|%(\d+\$)?([-+#0 ]*)(\*\d+\$|\*|\d+)?(\.(\*\d+\$|\*|\d+))?([scboxXuidfFeEgGpPn])"
)

_MISSING = object()
_BASES = {"b": 2, "o": 8, "u": 10, "x": 16, "X": 16}
_BASE_PREFIX = {2: "0b", 8: "0", 16: "0x"}
_FLOAT_RENDER = {"e": numbers.to_exponential, "f": numbers.to_fixed, "g": numbers.to_precision}


def pad(text: str, length: int, char: str = " ", left_justify: bool = False) -> str:
    padding = char * max(length - len(text), 0)
    return text + padding if left_justify else padding + text


def justify(value: str, prefix: str, left_justify: bool, min_width: int, zero_pad: bool) -> str:
    diff = min_width - len(value)
    if diff <= 0:
        return value
    if left_justify or not zero_pad:
        return pad(value, min_width, " ", left_justify)
    # zeros go between the sign/base prefix and the digits
    return value[:len(prefix)] + "0" * diff + value[len(prefix):]


class _Arguments:
    """Argument list with the implicit left-to-right cursor."""

    def __init__(self, args: Sequence[Any]):
        self.args = args
        self.cursor = 0

    def next(self) -> Any:
        value = self.at(self.cursor + 1)
        self.cursor += 1
        return value

    def at(self, index: int) -> Any:
        if 1 <= index <= len(self.args):
            return self.args[index - 1]
        return _MISSING

    def star(self, spec: str) -> Any:
        # spec is "*" or "*N$"
        return self.next() if spec == "*" else self.at(int(spec[1:-1]))


def _star_number(value: Any) -> float:
    return math.nan if value is _MISSING else numbers.to_number(value)


def _finite_int(number: float, what: str) -> int:
    if not math.isfinite(number):
        raise FormatError(f"sprintf {what} must be finite")
    return int(number)


def _render(match: "re.Match[str]", args: _Arguments) -> str:
    if match.group(0) == "%%":
        return "%"
    value_index, flags, min_width, _, precision, type_ = match.groups()

    left_justify = zero_pad = prefix_base = False
    positive_prefix = ""
    for flag in flags:
        if flag in " +":
            positive_prefix = flag
        elif flag == "-":
            left_justify = True
        elif flag == "0":
            zero_pad = True
        elif flag == "#":
            prefix_base = True

    if not min_width:
        width = 0
    elif min_width.startswith("*"):
        width = _finite_int(_star_number(args.star(min_width)), "(minimum-)width")
    else:
        width = int(min_width)
    if width < 0:
        width = -width
        left_justify = True

    prec: Optional[int] = None
    if precision is not None:
        if precision.startswith("*"):
            prec = _finite_int(_star_number(args.star(precision)), "precision")
            if prec < 0:
                prec = None
        else:
            prec = int(precision)
    if prec is None and type_ in "fFeE":
        prec = 6

    value = args.at(int(value_index[:-1])) if value_index else args.next()
    prefix = ""

    if type_ in "cs":
        if type_ == "c":
            value = chr(numbers.to_uint32(value) & 0xFFFF)
        text = "" if value is _MISSING else str(value)
        if prec is not None:
            text = text[:prec]
    elif type_ in _BASES:
        base = _BASES[type_]
        number = numbers.to_uint32(None if value is _MISSING else value)
        if prefix_base and number:
            prefix = _BASE_PREFIX.get(base, "")
        text = prefix + pad(_to_base(number, base), prec or 0, "0")
    elif type_ in "di":
        number = None if value is _MISSING else numbers.parse_int(value)
        if number is None:
            return ""
        prefix = "-" if number < 0 else positive_prefix
        text = prefix + pad(str(abs(number)), prec or 0, "0")
    elif type_ in "eEfFgGpP":
        number = math.nan if value is _MISSING else numbers.to_number(value)
        if math.isnan(number):
            return ""
        prefix = "-" if number < 0 else positive_prefix
        kind = type_.lower()
        if kind == "p":
            # count significant figures, taking care of '0' vs '0.00'
            sf = re.sub(r"[eE].*|[^\d]", "", numbers.literal(value))
            sf2 = len(sf.lstrip("0") if number else sf)
            if prec:
                prec = min(prec, sf2)
            render = numbers.to_precision if not prec or prec <= sf2 else numbers.to_exponential
        else:
            render = _FLOAT_RENDER[kind]
        text = prefix + render(abs(number), prec)
    elif type_ == "n":
        return ""
    else:
        return match.group(0)

    justified = justify(text, prefix, left_justify, width, zero_pad)
    return justified.upper() if type_ in "EFGPX" else justified


def _to_base(number: int, base: int) -> str:
    if base == 10:
        return str(number)
    return format(number, {2: "b", 8: "o", 16: "x"}[base])


def sprintf(template: str, *args: Any) -> str:
    """Substitute ``args`` into ``template``; see the module docstring."""
    arguments = _Arguments(args)
    return DIRECTIVE.sub(lambda m: _render(m, arguments), template)


def vsprintf(template: str, args: Sequence[Any]) -> str:
    return sprintf(template, *args)
