"""Examples for sorting: sorted, list.sort, key helpers."""

from docspine.catalog.models import Augmentation

TOPIC = "sorting"

ENTRIES = (
    Augmentation(
        "builtins.sorted",
        """

Examples:

    >>> sorted([3, 1, 2])
    [1, 2, 3]
    >>> sorted(["b", "A", "c"], key=str.lower)
    ['A', 'b', 'c']
    >>> sorted({"x": 2, "y": 1}.items(), key=lambda kv: kv[1], reverse=True)
    [('x', 2), ('y', 1)]

Sorting is stable, so multi-key sorts can be done in passes (least
significant key first).

See https://docs.python.org/3/howto/sorting.html""",
        topic=TOPIC,
    ),
    Augmentation(
        "builtins.list.sort",
        """

Examples:

    >>> xs = [3, 1, 2]
    >>> xs.sort()
    >>> xs
    [1, 2, 3]
    >>> xs.sort(reverse=True) is None   # sorts in place, returns None
    True

Use sorted() to get a new list and leave the original untouched.

See https://docs.python.org/3/library/stdtypes.html#list.sort""",
        topic=TOPIC,
    ),
    Augmentation(
        "functools.cmp_to_key",
        """

Examples:

    >>> from functools import cmp_to_key
    >>> def by_length_then_alpha(a, b):
    ...     return (len(a) > len(b)) - (len(a) < len(b)) or (a > b) - (a < b)
    >>> sorted(["bb", "a", "ab"], key=cmp_to_key(by_length_then_alpha))
    ['a', 'ab', 'bb']

See https://docs.python.org/3/library/functools.html#functools.cmp_to_key""",
        topic=TOPIC,
    ),
    Augmentation(
        "operator.itemgetter",
        """

Examples:

    >>> from operator import itemgetter
    >>> rows = [("bob", 30), ("amy", 25)]
    >>> sorted(rows, key=itemgetter(1))
    [('amy', 25), ('bob', 30)]
    >>> itemgetter(0, 2)("abc")
    ('a', 'c')

See https://docs.python.org/3/library/operator.html#operator.itemgetter""",
        topic=TOPIC,
    ),
)
