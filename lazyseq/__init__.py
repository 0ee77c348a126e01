"""
A python library to build lazy pipelines over sequences.

The lazyseq package contains functions to transform and reduce sequences
(anything that can be iterated: lists, sets, dicts, strings, generators...)
and adapters to view other objects as sequences.

Transformations such as :func:`map`, :func:`filter` or :func:`zip` feature
on-demand evaluation: they return a new sequence without reading their
inputs, values only flow through the pipeline when a consumer such as
:func:`fold` or :func:`collect` iterates over it. Unless an input can only be
read once (generators, iterators), the resulting sequences can be iterated
several times.

Note that several functions deliberately share their name with a Python
built-in, prefer :code:`import lazyseq` over :code:`from lazyseq import *`.
"""

from .combinators import drop, filter, map, take, zip, zipf
from .consumers import (
    all,
    any,
    apply,
    avg,
    collect,
    fold,
    fold_right,
    is_empty,
    join,
    max,
    min,
    nth,
    reverse,
    sum,
)
from .errors import EvaluationError, ValidationError, seterr
from .sources import (
    SourceKind,
    adapt,
    code_units,
    is_sequence,
    project_keys,
    project_values,
    range,
    source_kind,
)
from .utils import EMPTY

__all__ = [
    "EMPTY",
    "EvaluationError",
    "ValidationError",
    "seterr",
    "SourceKind",
    "adapt",
    "source_kind",
    "is_sequence",
    "project_keys",
    "project_values",
    "range",
    "code_units",
    "map",
    "filter",
    "zip",
    "zipf",
    "take",
    "drop",
    "fold",
    "fold_right",
    "reverse",
    "any",
    "all",
    "is_empty",
    "nth",
    "apply",
    "join",
    "collect",
    "min",
    "max",
    "sum",
    "avg",
]
