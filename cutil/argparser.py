"""A small command-line parser with positional and keyword arguments."""

from __future__ import annotations

import dataclasses
import enum
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from cutil.charconv import parse_float, parse_int

_SPACE = " \t\n\v\f\r"
_NUMERIC_START = re.compile(r"[+-]?(?:\d|\.\d|inf|nan)", re.IGNORECASE)
_BOOL_WORDS = {"true": True, "false": False}


class State(enum.Enum):
    """How an argument behaves when it does not appear on the command line."""

    UNINITIALIZED = enum.auto()
    INITIALIZED = enum.auto()
    DEFAULT_VALUE = enum.auto()


@dataclass(frozen=True)
class ArgumentOpts:
    """Per-argument options."""

    state: State = State.UNINITIALIZED
    invert_flag_value: bool = False
    no_error_check: bool = False


class ArgumentError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass(frozen=True)
class ValueType:
    """Conversion between command-line text and a value."""

    parser: Callable[[str], Any]
    formatter: Callable[[Any], str] = str

    def parse(self, text: str) -> Any:
        """Convert ``text`` to a value; raises ValueError when it cannot."""
        return self.parser(text)

    def format(self, value: Any) -> str:
        """Render ``value`` as text."""
        return self.formatter(value)


def _parse_bool(text: str) -> bool:
    try:
        return _BOOL_WORDS[text]
    except KeyError:
        raise ValueError(f"invalid boolean: {text!r}") from None


def _parse_double(text: str) -> float:
    """Read a float the lenient way: text with no number in it reads as 0.0.

    Only a number that overflows is an error.
    """
    body = text.lstrip(_SPACE)
    if body.startswith("+") and body[1:2] not in ("+", "-"):
        body = body[1:]
    try:
        return parse_float(body)
    except ValueError:
        if _NUMERIC_START.match(body):
            raise
        return 0.0


def int_type(bits: int, signed: bool = True) -> ValueType:
    """A decimal integer type limited to ``bits`` bits.

    Unsigned types reject a leading minus sign; values outside the range
    are rejected.
    """
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    low, high = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)

    def parse(text: str) -> int:
        if not signed and text.startswith("-"):
            raise ValueError(f"invalid unsigned integer: {text!r}")
        value = parse_int(text)
        if not low <= value <= high:
            raise ValueError(f"integer out of range: {text!r}")
        return value

    return ValueType(parse, str)


BOOL = ValueType(_parse_bool, lambda value: "true" if value else "false")
INT = int_type(32, True)
FLOAT = ValueType(_parse_double, "{:.6f}".format)
STR = ValueType(str, str)


@dataclass(eq=False)
class _Argument:
    dest: str
    kind: ValueType
    value_desc: str
    arg_desc: str
    initial: Any
    opts: ArgumentOpts
    keys: tuple[str, ...] = field(default=())
    flag: bool = False


class Parser:
    """Collects argument definitions, renders help and parses argument lists."""

    def __init__(self) -> None:
        self._keyword_args: list[_Argument] = []
        self._args: list[_Argument] = []

    def arg(
        self,
        dest: str,
        kind: ValueType,
        value_desc: str,
        arg_desc: str,
        initial: Any = None,
        opts: ArgumentOpts | None = None,
    ) -> None:
        """Add a positional argument stored under ``dest``."""
        self._args.append(
            _Argument(dest, kind, value_desc, arg_desc, initial, opts or ArgumentOpts())
        )

    def kwarg(
        self,
        dest: str,
        keys: Sequence[str],
        kind: ValueType,
        value_desc: str,
        arg_desc: str,
        initial: Any = None,
        opts: ArgumentOpts | None = None,
    ) -> None:
        """Add a keyword argument that takes the following token as its value."""
        self._keyword_args.append(
            _Argument(
                dest,
                kind,
                value_desc,
                arg_desc,
                initial,
                opts or ArgumentOpts(),
                keys=self._check_keys(keys),
            )
        )

    def kwflag(
        self,
        dest: str,
        keys: Sequence[str],
        arg_desc: str,
        opts: ArgumentOpts | None = None,
    ) -> None:
        """Add a boolean flag; its presence sets ``dest`` to True (or False if inverted)."""
        opts = dataclasses.replace(opts or ArgumentOpts(), state=State.INITIALIZED)
        self._keyword_args.append(
            _Argument(
                dest, BOOL, "", arg_desc, False, opts, keys=self._check_keys(keys), flag=True
            )
        )

    @staticmethod
    def _check_keys(keys: Sequence[str]) -> tuple[str, ...]:
        if isinstance(keys, str):
            keys = (keys,)
        result = tuple(keys)
        if not result:
            raise ValueError("a keyword argument needs at least one key")
        return result

    def get_help(self) -> str:
        """Usage text: positional summary, positional table and options table."""
        parts: list[str] = []
        if self._keyword_args:
            parts.append("(options)... ")
        if self._args:
            parts.extend(f"{entry.value_desc} " for entry in self._args)
            parts.append("\n")
            width = max(len(entry.value_desc) for entry in self._args)
            for entry in self._args:
                padding = " " * (width - len(entry.value_desc) + 3)
                parts.append(f"  {entry.value_desc}{padding}{entry.arg_desc}\n")
        if self._keyword_args:
            parts.append("\noptions:\n")
            lines = []
            for entry in self._keyword_args:
                line = "  " + ",".join(entry.keys) + " "
                if not entry.flag:
                    line += f"{entry.value_desc} "
                lines.append(line)
            width = max(len(line) for line in lines)
            for entry, line in zip(self._keyword_args, lines):
                text = line + " " * (width - len(line) + 2)
                if entry.opts.state is State.UNINITIALIZED:
                    text += "required: "
                text += entry.arg_desc
                if entry.opts.state is State.DEFAULT_VALUE:
                    text += f"(default={entry.kind.format(entry.initial)})"
                parts.append(text + "\n")
        return "".join(parts)

    @staticmethod
    def _convert(entry: _Argument, text: str) -> Any:
        try:
            return entry.kind.parse(text)
        except ValueError as exc:
            raise ArgumentError(f"failed to parse argument {text}") from exc

    def parse(self, argv: Sequence[str]) -> dict[str, Any]:
        """Parse ``argv`` (whose first item is the program name).

        Returns a mapping from each destination to its value; arguments not
        given keep their initial value. Raises ArgumentError on failure.
        """
        values = {entry.dest: entry.initial for entry in (*self._keyword_args, *self._args)}
        found: set[_Argument] = set()
        skip_error_check = False
        tokens = iter(argv[1:])

        for token in tokens:
            entry = next(
                (e for e in self._keyword_args if e not in found and token in e.keys), None
            )
            if entry is not None:
                if entry.flag:
                    values[entry.dest] = not entry.opts.invert_flag_value
                else:
                    value_text = next(tokens, None)
                    if value_text is None:
                        raise ArgumentError(f"no following argument to {entry.keys[0]}")
                    values[entry.dest] = self._convert(entry, value_text)
                found.add(entry)
                skip_error_check |= entry.opts.no_error_check
                continue

            entry = next((e for e in self._args if e not in found), None)
            if entry is None:
                raise ArgumentError(f"unhandled argument {token}")
            values[entry.dest] = self._convert(entry, token)
            found.add(entry)

        if skip_error_check:
            return values
        for entry in self._keyword_args:
            if entry not in found and entry.opts.state is State.UNINITIALIZED:
                raise ArgumentError(f"required argument {entry.keys[0]} is missing")
        for entry in self._args:
            if entry not in found and entry.opts.state is State.UNINITIALIZED:
                raise ArgumentError("required positional argument is missing")
        return values