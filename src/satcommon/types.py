"""
Core vocabulary shared by SAT/MaxSAT components.

Variables are 0-based integers. A literal packs its variable and polarity
into a single non-negative integer ``2 * var + sign`` so that negation is a
bit flip and the packed value can index arrays directly.
"""

from enum import Enum

import numpy as np

# Largest unsigned 64-bit value, reserved as the "no literal" index.
UNDEF_LIT_INDEX = 2**64 - 1


class Var:
    """A Boolean decision variable identified by a 0-based index."""

    __slots__ = ("_index",)

    def __init__(self, index: int):
        self._index = index

    @property
    def index(self) -> int:
        """Raw 0-based index, usable for parallel arrays."""
        return self._index

    def pos_lit(self) -> "Lit":
        """Positive (unnegated) literal of this variable."""
        return Lit(self, False)

    def neg_lit(self) -> "Lit":
        """Negative literal of this variable."""
        return Lit(self, True)

    def __eq__(self, other):
        if not isinstance(other, Var):
            return NotImplemented
        return self._index == other._index

    def __hash__(self):
        return hash((Var, self._index))

    def __repr__(self):
        return f"Var({self._index})"


class Lit:
    """
    A variable together with a polarity.

    Args:
        var: The variable referenced by the literal
        sign: True for a negated literal, False for a positive one
    """

    __slots__ = ("_index",)

    def __init__(self, var: Var, sign: bool = False):
        self._index = var.index + var.index + int(sign)

    @classmethod
    def from_index(cls, index: int) -> "Lit":
        """Rebuild a literal from its packed index."""
        lit = cls.__new__(cls)
        lit._index = index
        return lit

    @classmethod
    def from_dimacs(cls, value: int) -> "Lit":
        """
        Convert a signed 1-based DIMACS integer into a literal.

        Args:
            value: Nonzero integer, negative for a negated variable

        Returns:
            The literal of ``Var(abs(value) - 1)`` with the matching polarity

        Raises:
            ValueError: If value is 0, which DIMACS reserves as clause terminator
        """
        if value == 0:
            raise ValueError("0 terminates a DIMACS clause and is not a literal")
        var = Var(abs(value) - 1)
        return var.pos_lit() if value > 0 else var.neg_lit()

    def to_dimacs(self) -> int:
        """Signed 1-based DIMACS integer for this literal."""
        value = (self._index >> 1) + 1
        return -value if self._index & 1 else value

    @property
    def sign(self) -> bool:
        """True if the literal is negated."""
        return self._index & 1 == 1

    @property
    def var(self) -> Var:
        return Var(self._index >> 1)

    @property
    def index(self) -> int:
        """Packed value, usable for arrays indexed by literal."""
        return self._index

    def __invert__(self) -> "Lit":
        # ~x for x and x for ~x
        return Lit.from_index(self._index ^ 1)

    def __eq__(self, other):
        if not isinstance(other, Lit):
            return NotImplemented
        return self._index == other._index

    def __hash__(self):
        return hash((Lit, self._index))

    def __repr__(self):
        if self._index == UNDEF_LIT_INDEX:
            return "UNDEF_LIT"
        return f"Lit({self.var!r}, sign={self.sign})"


# Placeholder literal; consumers compare against it explicitly.
UNDEF_LIT = Lit.from_index(UNDEF_LIT_INDEX)


class LBool(Enum):
    """A lifted boolean: True, False, or Undef for unassigned variables."""

    TRUE = "true"
    FALSE = "false"
    UNDEF = "undef"

    def __invert__(self) -> "LBool":
        """Swap TRUE and FALSE. UNDEF stays UNDEF."""
        if self is LBool.TRUE:
            return LBool.FALSE
        if self is LBool.FALSE:
            return LBool.TRUE
        return LBool.UNDEF

    def __bool__(self):
        raise TypeError("LBool has no truth value; compare against LBool.TRUE")

    @classmethod
    def from_bool(cls, value: bool) -> "LBool":
        return cls.TRUE if value else cls.FALSE


class Clause:
    """
    A disjunction of literals.

    Literal order is kept as given. Duplicate and complementary literals
    are stored unchanged.
    """

    def __init__(self, lits: list[Lit] | None = None):
        self.lits = list(lits) if lits is not None else []

    def indices(self) -> np.ndarray:
        """Packed literal indices as an unsigned 64-bit array."""
        return np.fromiter(
            (lit.index for lit in self.lits), dtype=np.uint64, count=len(self.lits)
        )

    def __len__(self):
        return len(self.lits)

    def __iter__(self):
        return iter(self.lits)

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return NotImplemented
        return self.lits == other.lits

    def __repr__(self):
        return f"Clause({self.lits!r})"


class SolutionStatus(Enum):
    """Enum representing the outcome reported by a solver."""

    UNSAT = "unsat"
    BEST = "best"
    SAT = "sat"
    UNKNOWN = "unknown"


_MODEL_STATUSES = (SolutionStatus.BEST, SolutionStatus.SAT)


class Solution:
    """
    Result of solving a formula.

    ``SAT`` carries a model proven to satisfy the formula, ``BEST`` the best
    model found so far without proof, ``UNSAT`` a proof of unsatisfiability
    and ``UNKNOWN`` no information. A model holds one boolean per variable,
    indexed by ``Var.index``.
    """

    def __init__(
        self,
        status: SolutionStatus = SolutionStatus.UNKNOWN,
        model: list[bool] | None = None,
    ):
        if status in _MODEL_STATUSES and model is None:
            raise ValueError(f"{status.name} solution requires a model")
        if status not in _MODEL_STATUSES and model is not None:
            raise ValueError(f"{status.name} solution cannot carry a model")
        self.status = status
        self.model = list(model) if model is not None else None

    @classmethod
    def unsat(cls) -> "Solution":
        return cls(SolutionStatus.UNSAT)

    @classmethod
    def best(cls, model: list[bool]) -> "Solution":
        return cls(SolutionStatus.BEST, model)

    @classmethod
    def sat(cls, model: list[bool]) -> "Solution":
        return cls(SolutionStatus.SAT, model)

    @classmethod
    def unknown(cls) -> "Solution":
        return cls(SolutionStatus.UNKNOWN)

    @property
    def is_sat(self) -> bool:
        """Returns True if the formula was proven satisfiable."""
        return self.status == SolutionStatus.SAT

    @property
    def is_unsat(self) -> bool:
        """Returns True if the formula was proven unsatisfiable."""
        return self.status == SolutionStatus.UNSAT

    def value(self, var: Var) -> LBool:
        """
        Value assigned to a variable by the model.

        Returns:
            LBool.UNDEF when there is no model or the variable lies outside it
        """
        if self.model is None or var.index >= len(self.model):
            return LBool.UNDEF
        return LBool.from_bool(self.model[var.index])

    def lit_value(self, lit: Lit) -> LBool:
        value = self.value(lit.var)
        return ~value if lit.sign else value

    def model_array(self) -> np.ndarray | None:
        """The model as a boolean numpy array, or None without a model."""
        if self.model is None:
            return None
        return np.asarray(self.model, dtype=bool)

    def __eq__(self, other):
        if not isinstance(other, Solution):
            return NotImplemented
        return self.status == other.status and self.model == other.model

    def __repr__(self):
        if self.model is None:
            return f"Solution.{self.status.value}()"
        return f"Solution.{self.status.value}({self.model!r})"

    def __str__(self) -> str:
        status_str = self.status.name
        if self.model is not None:
            assigned = sum(1 for value in self.model if value)
            return f"Solution: {status_str} ({assigned}/{len(self.model)} variables true)"
        return f"Solution: {status_str}"
