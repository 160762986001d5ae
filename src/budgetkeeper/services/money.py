"""Currency formatting and parsing shared by every screen and endpoint.

Amounts are stored as floats. Rounding always goes through the shortest
decimal representation of the float (``repr``) so that a value typed as
``10.995`` rounds to ``11.00`` even though its binary approximation sits
slightly below the half-way point.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext


# (group separator, decimal separator, symbol separator, symbol position)
_LOCALE_CONVENTIONS: dict[str, tuple[str, str, str, str]] = {
    "fr-FR": ("\u202f", ",", "\u00a0", "suffix"),
    "fr-BE": ("\u202f", ",", "\u00a0", "suffix"),
    "de-DE": (".", ",", "\u00a0", "suffix"),
    "en-US": (",", ".", "", "prefix"),
    "en-GB": (",", ".", "", "prefix"),
}

_CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "JPY": "¥",
}

# Symbols stripped from user input regardless of the configured currency.
_INPUT_SYMBOLS = ("$", "€", "£", "¥")

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DIGITS_RE = re.compile(r"\d*")
# Leading numeric prefix, mirroring a lenient float parse ("12abc" -> 12).
_NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True, slots=True)
class MoneyFormat:
    """Explicit locale/currency convention used to render and read amounts."""

    locale: str
    currency_code: str
    currency_symbol: str
    group_separator: str
    decimal_separator: str
    symbol_separator: str = ""
    symbol_position: str = "suffix"
    min_fraction_digits: int = 2
    max_fraction_digits: int = 2

    @classmethod
    def for_locale(cls, locale: str, currency_code: str) -> MoneyFormat:
        """Build the convention for ``locale`` (``fr-FR`` or ``fr_FR``) and ``currency_code``."""

        key = locale.replace("_", "-")
        try:
            group, decimal_sep, symbol_sep, position = _LOCALE_CONVENTIONS[key]
        except KeyError:
            supported = ", ".join(sorted(_LOCALE_CONVENTIONS))
            raise ValueError(f"Unsupported locale {locale!r}; expected one of {supported}") from None
        code = currency_code.upper()
        symbol = _CURRENCY_SYMBOLS.get(code, code)
        if symbol == code and position == "prefix":
            # Alphabetic codes read better detached from the digits.
            symbol_sep = "\u00a0"
        return cls(
            locale=key,
            currency_code=code,
            currency_symbol=symbol,
            group_separator=group,
            decimal_separator=decimal_sep,
            symbol_separator=symbol_sep,
            symbol_position=position,
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "locale": self.locale,
            "currencyCode": self.currency_code,
            "minFractionDigits": self.min_fraction_digits,
            "maxFractionDigits": self.max_fraction_digits,
        }


DEFAULT_FORMAT = MoneyFormat.for_locale("fr-FR", "EUR")


def _to_decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def _quantize(value: Decimal, places: int) -> Decimal:
    """Round half-up to ``places`` decimals, widening precision for huge values."""

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_money(value: float) -> float:
    """Round ``value`` to cents, half away from zero, never returning ``-0.0``."""

    if not math.isfinite(value):
        return value
    rounded = float(_quantize(_to_decimal(value), 2))
    return rounded + 0.0


def has_at_most_cents(value: float) -> bool:
    """Return True when ``value`` carries no more than two fractional digits."""

    if not math.isfinite(value):
        return False
    exponent = _to_decimal(value).normalize().as_tuple().exponent
    return isinstance(exponent, int) and exponent >= -2


def _group_digits(whole: str, separator: str) -> str:
    groups: list[str] = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    return separator.join(groups)


def _attach_symbol(number: str, negative: bool, fmt: MoneyFormat) -> str:
    sign = "-" if negative else ""
    if fmt.symbol_position == "prefix":
        return f"{sign}{fmt.currency_symbol}{fmt.symbol_separator}{number}"
    return f"{sign}{number}{fmt.symbol_separator}{fmt.currency_symbol}"


def format_currency(amount: float, fmt: MoneyFormat | None = None) -> str:
    """Render ``amount`` as a grouped currency string, e.g. ``1 234,56 €``."""

    fmt = fmt or DEFAULT_FORMAT
    if math.isnan(amount):
        return _attach_symbol("NaN", False, fmt)
    if math.isinf(amount):
        return _attach_symbol("∞", amount < 0, fmt)

    value = _quantize(_to_decimal(amount), fmt.max_fraction_digits)
    negative = value < 0
    digits = f"{value.copy_abs():f}"
    whole, _, fraction = digits.partition(".")
    while len(fraction) > fmt.min_fraction_digits and fraction.endswith("0"):
        fraction = fraction[:-1]

    number = _group_digits(whole, fmt.group_separator)
    if fraction:
        number = f"{number}{fmt.decimal_separator}{fraction}"
    return _attach_symbol(number, negative, fmt)


def _normalise_separators(text: str) -> str:
    """Rewrite grouping/decimal marks so that ``.`` is the only decimal point."""

    comma = text.rfind(",")
    if comma == -1:
        return text
    dot = text.rfind(".")
    if dot == -1:
        tail_digits = _LEADING_DIGITS_RE.match(text, comma + 1).group(0)  # type: ignore[union-attr]
        if text.count(",") == 1 and 1 <= len(tail_digits) <= 2:
            return text.replace(",", ".")
        return text.replace(",", "")
    if comma > dot:
        return text.replace(".", "").replace(",", ".")
    return text.replace(",", "")


def read_currency(text: str, fmt: MoneyFormat | None = None) -> float | None:
    """Read the leading amount from user input without rounding it.

    Currency symbols, whitespace (including no-break spaces) and grouping
    separators are stripped before the leading number is read. Returns
    ``None`` when nothing numeric can be found or the number is not finite.
    """

    fmt = fmt or DEFAULT_FORMAT
    cleaned = _WHITESPACE_RE.sub("", text)
    for symbol in {*_INPUT_SYMBOLS, fmt.currency_symbol}:
        cleaned = cleaned.replace(symbol, "")
    if fmt.group_separator not in {",", "."}:
        cleaned = cleaned.replace(fmt.group_separator, "")
    cleaned = _normalise_separators(cleaned)

    match = _NUMBER_PREFIX_RE.match(cleaned)
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_currency(text: str, fmt: MoneyFormat | None = None) -> float | None:
    """Extract an amount from free-form user input, rounded to cents."""

    value = read_currency(text, fmt)
    return None if value is None else round_money(value)


__all__ = [
    "DEFAULT_FORMAT",
    "MoneyFormat",
    "format_currency",
    "has_at_most_cents",
    "parse_currency",
    "read_currency",
    "round_money",
]
