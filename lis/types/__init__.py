from lis.types.atoms import Integer, Real, Bool, TRUE, FALSE
from lis.types.symbol import Symbol
from lis.types.nil import Empty, NilType
from lis.types.cons import Pair, ListCursor, cons, iter_list, from_iterable, to_list
from lis.types.lambda_fn import Lambda, NativeFunction, Param, ParamKind
from lis.types.environment import Environment

__all__ = [
    "Integer", "Real", "Bool", "TRUE", "FALSE",
    "Symbol",
    "Empty", "NilType",
    "Pair", "ListCursor", "cons", "iter_list", "from_iterable", "to_list",
    "Lambda", "NativeFunction", "Param", "ParamKind",
    "Environment",
]
