"""Tax code interpreter.

Turns a PAYE tax code such as ``1257L``, ``S1257L``, ``K475``, ``BR`` or ``NT``
into one of four closed modes:

- ``Standard``: explicit annual allowance (negative for K codes)
- ``FlatRate``: one rate on all income, no allowance (BR, D0, D1)
- ``ZeroAllowance``: no allowance, normal bands (0T)
- ``NoTax``: no income tax at all (NT)

Unrecognized codes are not an error: they parse to no mode and the normalized
string is still returned for display.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple

from takehome.calculators.tax_data import Jurisdiction

_DIGITS_RE = re.compile(r"\d+")

# Leading letter that names the rate table, stripped before matching.
_JURISDICTION_PREFIXES: dict[str, Jurisdiction] = {
    "S": Jurisdiction.SCOTLAND,
    "C": Jurisdiction.RUK,  # Welsh rates follow the rUK bands
}


@dataclass(frozen=True)
class Standard:
    allowance: Decimal


@dataclass(frozen=True)
class FlatRate:
    rate: Decimal


@dataclass(frozen=True)
class ZeroAllowance:
    pass


@dataclass(frozen=True)
class NoTax:
    pass


TaxCodeMode = Standard | FlatRate | ZeroAllowance | NoTax

_FIXED_CODES: dict[str, TaxCodeMode] = {
    "NT": NoTax(),
    "BR": FlatRate(Decimal("0.20")),
    "D0": FlatRate(Decimal("0.40")),
    "D1": FlatRate(Decimal("0.45")),
    "0T": ZeroAllowance(),
}


class ParsedTaxCode(NamedTuple):
    """Outcome of interpreting a tax code string."""

    mode: TaxCodeMode | None = None
    implied_jurisdiction: Jurisdiction | None = None
    code: str | None = None  # normalized, for display


def _allowance_from_digits(digits: str) -> Decimal:
    return Decimal(digits) * 10


def parse_tax_code(raw: str | None) -> ParsedTaxCode:
    """Interpret a tax code.

    Args:
        raw: Free-form tax code, or None.

    Returns:
        ParsedTaxCode. ``mode`` is None when defaults should apply.
    """
    if not raw:
        return ParsedTaxCode()
    code = raw.strip().upper()
    if not code:
        return ParsedTaxCode()

    implied = _JURISDICTION_PREFIXES.get(code[0])
    core = code[1:] if implied is not None else code

    if core in _FIXED_CODES:
        return ParsedTaxCode(_FIXED_CODES[core], implied, code)

    if core.startswith("K"):
        match = _DIGITS_RE.search(core, 1)
        if match is None:
            return ParsedTaxCode(None, implied, code)
        return ParsedTaxCode(Standard(-_allowance_from_digits(match.group())), implied, code)

    # 1257L, 1257T, 1257M and friends: suffix letter does not change the figure
    match = _DIGITS_RE.search(core)
    if match is None:
        return ParsedTaxCode(None, implied, code)
    return ParsedTaxCode(Standard(_allowance_from_digits(match.group())), implied, code)
