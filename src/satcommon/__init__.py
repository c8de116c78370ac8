"""
satcommon: common SAT/MaxSAT types and a DIMACS CNF/WCNF reader.
"""

from satcommon.dimacs import Cnf, Dimacs, Wcnf, load_dimacs_file, parse_dimacs
from satcommon.exceptions import DimacsParseError, SATBaseException
from satcommon.types import (
    UNDEF_LIT,
    Clause,
    LBool,
    Lit,
    Solution,
    SolutionStatus,
    Var,
)

__version__ = "0.1.0"

__all__ = [
    "Var",
    "Lit",
    "UNDEF_LIT",
    "LBool",
    "Clause",
    "Solution",
    "SolutionStatus",
    "Cnf",
    "Wcnf",
    "Dimacs",
    "parse_dimacs",
    "load_dimacs_file",
    "SATBaseException",
    "DimacsParseError",
]
