"""vdmrt: Runtime collections (sets, sequences, maps) for generated VDM code."""

from .errors import (
    AmbiguousSelection,
    DomainMismatch,
    EmptySelection,
    ErrorKind,
    IncompatibleMerge,
    IndexOutOfRange,
    KeyNotFound,
    NotEndofunction,
    NotInjective,
    VdmError,
)
from .hashing import fold_hash, hash_key
from .sets import Set, cartesian_product
from .seqs import Seq
from .maps import Map
from .real import Real
from .tokens import Quote, Token
from .helpers import map_of, mk_token, quote, seq_of, set_of, str_seq
from .config import RuntimeConfig, configure_logging
from .result import Ok, Err, Result

__all__ = [
    # Errors
    "AmbiguousSelection", "DomainMismatch", "EmptySelection", "ErrorKind",
    "IncompatibleMerge", "IndexOutOfRange", "KeyNotFound", "NotEndofunction",
    "NotInjective", "VdmError",
    # Hashing
    "fold_hash", "hash_key",
    # Collections
    "Set", "Seq", "Map", "cartesian_product",
    # Values
    "Real", "Quote", "Token",
    # Helpers
    "map_of", "mk_token", "quote", "seq_of", "set_of", "str_seq",
    # Config
    "RuntimeConfig", "configure_logging",
    # Result
    "Ok", "Err", "Result",
]
