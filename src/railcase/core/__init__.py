"""Sum type kernel: Result and Option, plus conversions between them."""

from .convert import from_option, get_left, get_right, to_option
from .option import NONE, Option, Some, from_nullable, is_none, is_some
from .protocols import Chainable, ErrorMappable, Fallible, Mappable, Matchable, WideChainable
from .result import Err, Ok, Result, collect_results, is_err, is_ok, sequence, traverse, try_catch_sync

__all__ = [
    # Result
    "Result", "Ok", "Err", "is_ok", "is_err", "try_catch_sync",
    "sequence", "traverse", "collect_results",
    # Option
    "Option", "Some", "NONE", "from_nullable", "is_some", "is_none",
    # Conversions
    "get_right", "get_left", "to_option", "from_option",
    # Structural contract
    "Mappable", "Chainable", "WideChainable", "ErrorMappable", "Matchable", "Fallible",
]
