"""listkit

Pure, eager combinators over ordered sequences and text, modeled on the
list functions of functional-language preludes. Every combinator works on
any sequence type with a registered kind (``list``, ``tuple``, ``str``,
``bytes`` and ``collections.deque`` out of the box), never mutates its
inputs, and returns a freshly built value of the input's type.
"""

from .adapters import kind_of, register_kind, unregister_kind
from .combinators import (
    all_,
    any_,
    at,
    break_when,
    concat,
    conjunction,
    constant,
    delete,
    difference,
    disjunction,
    drop,
    drop_while,
    elem,
    even,
    filter_,
    flip,
    fmap,
    foldl,
    foldl1,
    foldr,
    group,
    head,
    identity,
    init,
    inits,
    intercalate,
    intersect,
    intersperse,
    is_infix_of,
    is_prefix_of,
    is_suffix_of,
    iterate,
    last,
    length,
    lines,
    maximum,
    minimum,
    not_elem,
    nub,
    null,
    odd,
    partition,
    permutations,
    product,
    quot_rem,
    replicate,
    reverse,
    scanl,
    scanl1,
    scanr,
    signum,
    sort,
    span,
    split_at,
    split_on,
    split_one_of,
    split_when,
    subsets,
    sum_,
    tail,
    tails,
    take,
    take_while,
    to_lower,
    to_upper,
    transpose,
    union_of,
    unlines,
    until,
    unwords,
    unzip,
    words,
    zip_,
    zip_with,
)
from .errors import InvalidArgumentError, ListkitError, OutOfRangeError
from .interfaces import SequenceKind
from .maybe import (
    NOTHING,
    Maybe,
    Some,
    cat_maybes,
    from_maybe,
    is_nothing,
    is_some,
    maybe,
)

__all__ = [
    "__version__",
    "InvalidArgumentError",
    "ListkitError",
    "Maybe",
    "NOTHING",
    "OutOfRangeError",
    "SequenceKind",
    "Some",
    "cat_maybes",
    "from_maybe",
    "is_nothing",
    "is_some",
    "kind_of",
    "maybe",
    "register_kind",
    "unregister_kind",
    "all_",
    "any_",
    "at",
    "break_when",
    "concat",
    "conjunction",
    "constant",
    "delete",
    "difference",
    "disjunction",
    "drop",
    "drop_while",
    "elem",
    "even",
    "filter_",
    "flip",
    "fmap",
    "foldl",
    "foldl1",
    "foldr",
    "group",
    "head",
    "identity",
    "init",
    "inits",
    "intercalate",
    "intersect",
    "intersperse",
    "is_infix_of",
    "is_prefix_of",
    "is_suffix_of",
    "iterate",
    "last",
    "length",
    "lines",
    "maximum",
    "minimum",
    "not_elem",
    "nub",
    "null",
    "odd",
    "partition",
    "permutations",
    "product",
    "quot_rem",
    "replicate",
    "reverse",
    "scanl",
    "scanl1",
    "scanr",
    "signum",
    "sort",
    "span",
    "split_at",
    "split_on",
    "split_one_of",
    "split_when",
    "subsets",
    "sum_",
    "tail",
    "tails",
    "take",
    "take_while",
    "to_lower",
    "to_upper",
    "transpose",
    "union_of",
    "unlines",
    "until",
    "unwords",
    "unzip",
    "words",
    "zip_",
    "zip_with",
]
__version__ = "0.1.0"
