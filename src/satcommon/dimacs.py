"""
DIMACS CNF/WCNF reading.

This module parses unweighted (``p cnf``) and weighted (``p wcnf``) DIMACS
text into formulas built from :class:`satcommon.types.Lit` values. The
input is consumed line by line in a single pass, and reading stops as soon
as the number of clauses declared by the problem line has been collected.
"""

import io
import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from satcommon.config import get_config
from satcommon.exceptions import DimacsParseError
from satcommon.types import Lit

logger = logging.getLogger(__name__)

CNF_HEADER_RE = re.compile(r"^p\s+cnf\s+(\d+)\s+(\d+)")
WCNF_HEADER_RE = re.compile(r"^p\s+wcnf\s+(\d+)\s+(\d+)(?:\s+(\d+))?")
TOKEN_RE = re.compile(r"-?\d+")

U64_MAX = 2**64 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


@dataclass
class Cnf:
    """Unweighted formula."""

    n_vars: int
    clauses: list[list[Lit]] = field(default_factory=list)

    @property
    def num_clauses_read(self) -> int:
        """Clauses actually read, which can be fewer than the problem line declared."""
        return len(self.clauses)


@dataclass
class Wcnf:
    """
    Weighted formula.

    Each clause is stored together with its weight. ``hard_weight`` is the
    weight the problem line declared for mandatory clauses, if any.
    """

    n_vars: int
    clauses: list[tuple[list[Lit], int]] = field(default_factory=list)
    hard_weight: int | None = None

    @property
    def num_clauses_read(self) -> int:
        """Clauses actually read, which can be fewer than the problem line declared."""
        return len(self.clauses)

    def is_hard(self, weight: int) -> bool:
        """Returns True if weight equals the declared hard weight."""
        return self.hard_weight is not None and weight == self.hard_weight


Dimacs = Cnf | Wcnf


def _to_int(
    token: str, low: int, high: int, what: str, line_number: int, line: str
) -> int:
    # int() accepts any Unicode decimal digits; DIMACS numbers are ASCII
    if not token.isascii():
        raise DimacsParseError(
            f"Invalid {what}", line_number=line_number, line=line, token=token
        )

    try:
        value = int(token)
    except ValueError:
        raise DimacsParseError(
            f"Invalid {what}", line_number=line_number, line=line, token=token
        ) from None

    if value < low or value > high:
        raise DimacsParseError(
            f"{what.capitalize()} out of range [{low}, {high}]",
            line_number=line_number,
            line=line,
            token=token,
        )
    return value


def _parse_header(line: str, line_number: int):
    """
    Parse a problem line.

    Returns:
        Tuple of (is_wcnf, n_vars, n_clauses, hard_weight), or None if the
        line matches neither problem line pattern
    """
    match = CNF_HEADER_RE.match(line)
    if match:
        n_vars = _to_int(match[1], 0, U64_MAX, "variable count", line_number, line)
        n_clauses = _to_int(match[2], 0, U64_MAX, "clause count", line_number, line)
        return False, n_vars, n_clauses, None

    match = WCNF_HEADER_RE.match(line)
    if match:
        n_vars = _to_int(match[1], 0, U64_MAX, "variable count", line_number, line)
        n_clauses = _to_int(match[2], 0, U64_MAX, "clause count", line_number, line)
        hard_weight = None
        if match[3] is not None:
            hard_weight = _to_int(
                match[3], 0, U64_MAX, "hard weight", line_number, line
            )
        return True, n_vars, n_clauses, hard_weight

    return None


def _parse_clause_line(
    line: str, line_number: int, is_wcnf: bool
) -> tuple[list[Lit], int]:
    """
    Turn a clause line into its literals and weight.

    In weighted mode the first integer on the line is the weight. Every
    ``0`` is skipped, so everything on the line folds into one clause.
    """
    clause = []
    weight = 0

    for i, token in enumerate(TOKEN_RE.findall(line)):
        if i == 0 and is_wcnf:
            weight = _to_int(token, 0, U64_MAX, "clause weight", line_number, line)
            continue

        value = _to_int(token, I32_MIN, I32_MAX, "literal", line_number, line)
        if value == 0:
            continue
        clause.append(Lit.from_dimacs(value))

    return clause, weight


def parse_dimacs(source: str | Iterable[str]) -> Dimacs:
    """
    Parse a CNF or WCNF formula from DIMACS text.

    Comment lines (starting with ``c``) and blank lines are skipped. A
    problem line that matches neither ``p cnf <vars> <clauses>`` nor
    ``p wcnf <vars> <clauses> [<hard weight>]`` is ignored. Without any
    problem line the result is an empty-header :class:`Cnf`.

    The declared variable count is recorded as given and never checked
    against the literals actually read.

    Args:
        source: DIMACS content as a string, or any iterable of text lines
            such as an open text file

    Returns:
        A :class:`Cnf` or :class:`Wcnf` formula

    Raises:
        DimacsParseError: If a numeric token does not fit its field
        OSError: If a line cannot be read from the source
    """
    lines = io.StringIO(source) if isinstance(source, str) else source

    n_vars = 0
    n_clauses = 0
    is_wcnf = False
    hard_weight = None
    clauses = []
    weights = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith("c"):
            continue

        if line.startswith("p"):
            header = _parse_header(line, line_number)
            if header is None:
                logger.debug(f"Ignoring unrecognized problem line {line_number}: {line}")
                continue
            is_wcnf, n_vars, n_clauses, hard_weight = header
            logger.debug(
                f"Problem line {line_number}: {'wcnf' if is_wcnf else 'cnf'}, "
                f"{n_vars} variables, {n_clauses} clauses"
            )
            continue

        clause, weight = _parse_clause_line(line, line_number, is_wcnf)
        clauses.append(clause)
        weights.append(weight)

        if len(clauses) == n_clauses:
            logger.debug(f"Read all {n_clauses} declared clauses at line {line_number}")
            break

    logger.debug(f"Parsed {len(clauses)} clauses over {n_vars} declared variables")

    if is_wcnf:
        return Wcnf(
            n_vars=n_vars,
            clauses=list(zip(clauses, weights)),
            hard_weight=hard_weight,
        )
    return Cnf(n_vars=n_vars, clauses=clauses)


def load_dimacs_file(
    file_path: str | os.PathLike, encoding: str | None = None
) -> Dimacs:
    """
    Load a CNF or WCNF formula from a DIMACS file.

    Args:
        file_path: Path to the DIMACS file
        encoding: Text encoding, defaults to the configured ``dimacs.encoding``

    Returns:
        A :class:`Cnf` or :class:`Wcnf` formula

    Raises:
        FileNotFoundError: If the file doesn't exist
        DimacsParseError: If a numeric token does not fit its field
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"DIMACS file not found: {file_path}")

    encoding = encoding or get_config().get("dimacs.encoding", "utf-8")
    logger.debug(f"Loading DIMACS file {file_path} ({encoding})")

    with open(file_path, encoding=encoding) as f:
        return parse_dimacs(f)
