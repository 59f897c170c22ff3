"""The combinator layers, lowest first.

``elementary`` → ``positional`` → ``relational`` → ``grouping`` /
``splitting`` → ``generators`` → ``text``. A module only imports from the
layers before it; ``prelude`` holds dependency-free helpers.
"""

from .elementary import (
    all_,
    any_,
    concat,
    conjunction,
    disjunction,
    drop_while,
    filter_,
    fmap,
    foldl,
    foldl1,
    foldr,
    length,
    maximum,
    minimum,
    null,
    product,
    reverse,
    scanl,
    scanl1,
    scanr,
    sort,
    sum_,
    take_while,
)
from .generators import permutations, subsets, transpose, unzip, zip_, zip_with
from .grouping import group, intercalate, intersperse, partition
from .positional import (
    at,
    break_when,
    drop,
    head,
    init,
    inits,
    last,
    span,
    split_at,
    tail,
    tails,
    take,
)
from .prelude import (
    constant,
    even,
    flip,
    identity,
    iterate,
    odd,
    quot_rem,
    replicate,
    signum,
    until,
)
from .relational import (
    delete,
    difference,
    elem,
    intersect,
    is_infix_of,
    is_prefix_of,
    is_suffix_of,
    not_elem,
    nub,
    union_of,
)
from .splitting import split_on, split_one_of, split_when
from .text import lines, to_lower, to_upper, unlines, unwords, words

__all__ = [
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
