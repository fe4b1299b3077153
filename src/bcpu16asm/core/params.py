"""Parameter declarations and their typed value cells.

A :class:`Param` couples the declaration of one command-line parameter
(names, flags, default, kind) with the cell holding its decoded value.
The kind is a closed tag; decoding is selected by a single ``match`` in
:func:`decode_value` so every kind's rules live side by side.

Decoding rules
--------------
* ``STRING``  — any text, stored verbatim.
* ``BOOL``    — ``""`` (flag present) is ``True``; otherwise one of the
  accepted truthy or falsy words, matched case-sensitively.
* ``INTEGER`` — a base-10 signed integer, optionally range-checked.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from bcpu16asm.exceptions import InvalidValueError


class ParamKind(enum.Enum):
    """Value kind of a declared parameter."""

    STRING = "string"
    BOOL = "bool"
    INTEGER = "integer"


TRUE_WORDS: frozenset[str] = frozenset({"1", "y", "yes", "t", "true", "on"})
FALSE_WORDS: frozenset[str] = frozenset({"0", "n", "no", "f", "false", "off"})

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1
"""Bounds of a 32-bit signed integer; wider values are rejected."""

Value = str | bool | int


# ---------------------------------------------------------------------------
# Declaration + value cell
# ---------------------------------------------------------------------------

@dataclass(eq=False, slots=True)
class Param:
    """A declared command-line parameter and its current value.

    Declarations are created by the driver before parsing and mutated
    only by :meth:`store` and :meth:`set_value`.  Identity matters (the parser holds a
    reference while awaiting a value), so equality is by identity.
    """

    short_name: str
    """Single-character name used as ``-x``; may be empty."""

    long_name: str
    """Word used as ``--word``; may be empty when a short name exists."""

    description: str
    """Human-readable help text."""

    kind: ParamKind = ParamKind.STRING
    mandatory: bool = False
    needs_value: bool = True
    default: Value = ""

    min_value: int = 0
    max_value: int = 0
    """Inclusive integer range; ``min_value == max_value`` disables it."""

    value: Value = field(init=False)
    raw: str = field(init=False)
    """String mirror of :attr:`value`, always kept in sync."""
    is_set: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if not self.short_name and not self.long_name:
            raise ValueError("parameter needs a short or a long name")
        if len(self.short_name) > 1:
            raise ValueError(
                f"short name must be a single character, got {self.short_name!r}"
            )
        self.value = self.default
        self.raw = encode_value(self.kind, self.default)

    @property
    def name(self) -> str:
        """Long name when declared, otherwise the short name."""
        return self.long_name or self.short_name

    @property
    def range_active(self) -> bool:
        return self.min_value != self.max_value

    def same_name(self, name: str) -> bool:
        """Return ``True`` if *name* is this parameter's short or long name."""
        return name == self.long_name or name == self.short_name

    def store(self, raw: str) -> None:
        """Decode *raw* into the cell.

        Raises :class:`InvalidValueError` (carrying a hint) and leaves the
        cell untouched when *raw* is not acceptable for this parameter's
        kind.  Repeated calls overwrite.
        """
        decoded = decode_value(self, raw)
        self.value = decoded
        self.raw = encode_value(self.kind, decoded)
        self.is_set = True

    def set_value(self, raw: str) -> bool:
        """Like :meth:`store`, but report failure as ``False``."""
        try:
            self.store(raw)
        except InvalidValueError:
            return False
        return True

    # -- typed readers ------------------------------------------------------

    def get_string(self) -> str:
        if self.kind is ParamKind.STRING:
            return str(self.value)
        return ""

    def get_bool(self) -> bool:
        if self.kind is ParamKind.BOOL:
            return bool(self.value)
        return True

    def get_int(self) -> int:
        if self.kind is ParamKind.INTEGER:
            return int(self.value)
        return 0


# ---------------------------------------------------------------------------
# Per-kind codec
# ---------------------------------------------------------------------------

def decode_value(param: Param, raw: str) -> Value:
    """Decode *raw* according to *param*'s kind.

    Raises
    ------
    InvalidValueError
        When *raw* is not a valid value for the parameter.
    """
    match param.kind:
        case ParamKind.STRING:
            return raw
        case ParamKind.BOOL:
            return _decode_bool(param, raw)
        case ParamKind.INTEGER:
            return _decode_int(param, raw)


def encode_value(kind: ParamKind, value: Value) -> str:
    """Render a typed value as its raw-string mirror."""
    match kind:
        case ParamKind.STRING:
            return str(value)
        case ParamKind.BOOL:
            return "true" if value else "false"
        case ParamKind.INTEGER:
            return str(int(value))


def _invalid(param: Param, raw: str, hint: str) -> InvalidValueError:
    return InvalidValueError(
        f"invalid value {raw} for parameter {param.name}",
        param_name=param.name,
        token=raw,
        hint=hint,
    )


def _decode_bool(param: Param, raw: str) -> bool:
    if not raw or raw in TRUE_WORDS:
        return True
    if raw in FALSE_WORDS:
        return False
    raise _invalid(
        param, raw, "Use one of: " + ", ".join(sorted(TRUE_WORDS | FALSE_WORDS)),
    )


def _decode_int(param: Param, raw: str) -> int:
    if _INTEGER_RE.fullmatch(raw) is None:
        raise _invalid(param, raw, "Expected a decimal integer.")
    try:
        number = int(raw)
    except ValueError as exc:
        # longer than the interpreter's int-from-string digit limit
        raise _invalid(param, raw, f"Expected an integer in {INT_MIN}..{INT_MAX}.") from exc
    if not INT_MIN <= number <= INT_MAX:
        raise _invalid(param, raw, f"Expected an integer in {INT_MIN}..{INT_MAX}.")
    if param.range_active and not param.min_value <= number <= param.max_value:
        raise _invalid(
            param, raw, f"Allowed range is {param.min_value}..{param.max_value}.",
        )
    return number


# ---------------------------------------------------------------------------
# Declaration factories
# ---------------------------------------------------------------------------

def string_param(
    short_name: str,
    long_name: str,
    description: str,
    mandatory: bool = False,
    default: str = "",
) -> Param:
    """Declare a string option that takes a value."""
    return Param(
        short_name,
        long_name,
        description,
        kind=ParamKind.STRING,
        mandatory=mandatory,
        needs_value=True,
        default=default,
    )


def bool_param(
    short_name: str,
    long_name: str,
    description: str,
    default: bool = False,
) -> Param:
    """Declare a presence flag (no value, never mandatory)."""
    return Param(
        short_name,
        long_name,
        description,
        kind=ParamKind.BOOL,
        mandatory=False,
        needs_value=False,
        default=default,
    )


def int_param(
    short_name: str,
    long_name: str,
    description: str,
    mandatory: bool = False,
    default: int = 0,
    min_value: int = 0,
    max_value: int = 0,
) -> Param:
    """Declare an integer option bounded to ``[min_value, max_value]``."""
    return Param(
        short_name,
        long_name,
        description,
        kind=ParamKind.INTEGER,
        mandatory=mandatory,
        needs_value=True,
        default=default,
        min_value=min_value,
        max_value=max_value,
    )
