"""Re-prompting input loops for the interactive menu.

Each question runs the same small state machine: collect a raw answer,
hand it to a parser, then either accept the parsed value or report the
rejection reason and ask again. Parsers raise ``ValueError`` or a
``ValidationError``; anything else propagates.

The parsers below only accept values the graph store would accept, so
the store never sees invalid interactive input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from ..domain.errors import DuplicateStationError, UnknownStationError, ValidationError
from ..graph import validation
from ..graph.store import GraphStore

T = TypeVar("T")

Ask = Callable[[str], str]
Say = Callable[[str], None]
Parser = Callable[[str], T]


@dataclass
class Prompt(Generic[T]):
    """One question and how to turn its answer into a value.

    Attributes:
        message: Text shown before reading the answer
        parse: Converts the raw answer or raises with a reason
        retry_message: Shown instead of ``message`` after a rejection
        on_reject: Called with the rejection, e.g. to list valid choices
    """

    message: str
    parse: Parser[T]
    retry_message: Optional[str] = None
    on_reject: Optional[Callable[[Exception], None]] = field(default=None, repr=False)

    def run(self, ask: Ask, say: Say) -> T:
        """Ask until an answer parses.

        Raises:
            EOFError: If input ends before a valid answer is given.
        """
        message = self.message
        while True:
            raw = ask(message)
            try:
                return self.parse(raw.strip())
            except (ValueError, ValidationError) as e:
                say(_reason(e))
                if self.on_reject is not None:
                    self.on_reject(e)
                if self.retry_message is not None:
                    message = self.retry_message


def _reason(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return error.message
    return f"Invalid input: {error}"


def parse_float(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{raw!r} is not a number") from None


def parse_latitude(raw: str) -> float:
    return validation.check_latitude(parse_float(raw))


def parse_longitude(raw: str) -> float:
    return validation.check_longitude(parse_float(raw))


def parse_weight(raw: str) -> float:
    return validation.check_weight(parse_float(raw))


def parse_non_empty(raw: str) -> str:
    if not raw:
        raise ValueError("a value is required")
    return raw


def new_station_id(store: GraphStore) -> Parser[str]:
    """Parser accepting a well-formed id that is not yet in ``store``."""

    def parse(raw: str) -> str:
        validation.check_station_id(raw)
        if store.station_exists(raw):
            raise DuplicateStationError(
                "Station ID already exists!",
                field_name="id",
                value=raw,
            )
        return raw

    return parse


def existing_station_id(store: GraphStore) -> Parser[str]:
    """Parser accepting only ids of stations already in ``store``."""

    def parse(raw: str) -> str:
        if not store.station_exists(raw):
            raise UnknownStationError(
                "Station doesn't exist!",
                field_name="id",
                value=raw,
            )
        return raw

    return parse
