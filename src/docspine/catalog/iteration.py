"""Examples for iteration helpers: enumerate, zip, range, itertools."""

from docspine.catalog.models import Augmentation

TOPIC = "iteration"

ENTRIES = (
    Augmentation(
        "builtins.enumerate",
        """

Examples:

    >>> list(enumerate(["a", "b", "c"]))
    [(0, 'a'), (1, 'b'), (2, 'c')]
    >>> for lineno, line in enumerate(["first", "second"], start=1):
    ...     print(lineno, line)
    1 first
    2 second

Prefer enumerate() over range(len(seq)) when both index and item are needed.

See https://docs.python.org/3/library/functions.html#enumerate""",
        topic=TOPIC,
    ),
    Augmentation(
        "builtins.zip",
        """

Examples:

    >>> list(zip([1, 2, 3], "abc"))
    [(1, 'a'), (2, 'b'), (3, 'c')]
    >>> dict(zip(["x", "y"], [10, 20]))
    {'x': 10, 'y': 20}
    >>> list(zip(*[(1, 'a'), (2, 'b')]))   # "unzip"
    [(1, 2), ('a', 'b')]

zip() stops at the shortest input; pass strict=True to raise instead, or
use itertools.zip_longest() to pad.

See https://docs.python.org/3/library/functions.html#zip""",
        topic=TOPIC,
    ),
    Augmentation(
        "builtins.range",
        """

Examples:

    >>> list(range(5))
    [0, 1, 2, 3, 4]
    >>> list(range(10, 0, -3))
    [10, 7, 4, 1]
    >>> 7 in range(0, 100, 7)   # constant time, no list is built
    True

See https://docs.python.org/3/library/stdtypes.html#range""",
        topic=TOPIC,
    ),
    Augmentation(
        "itertools.chain",
        """

Examples:

    >>> from itertools import chain
    >>> list(chain([1, 2], (3,), "ab"))
    [1, 2, 3, 'a', 'b']
    >>> list(chain.from_iterable([[1, 2], [3]]))   # flatten one level
    [1, 2, 3]

See https://docs.python.org/3/library/itertools.html#itertools.chain""",
        topic=TOPIC,
    ),
    Augmentation(
        "itertools.groupby",
        """

Examples:

    >>> from itertools import groupby
    >>> [(k, len(list(g))) for k, g in groupby("aaabbc")]
    [('a', 3), ('b', 2), ('c', 1)]
    >>> words = sorted(["apple", "bob", "avocado", "bean"], key=lambda w: w[0])
    >>> {k: list(g) for k, g in groupby(words, key=lambda w: w[0])}
    {'a': ['apple', 'avocado'], 'b': ['bob', 'bean']}

groupby() only groups *consecutive* items: sort by the same key first.

See https://docs.python.org/3/library/itertools.html#itertools.groupby""",
        topic=TOPIC,
    ),
)
