"""Examples for mapping functions: map, filter, functools.reduce."""

from docspine.catalog.models import Augmentation

TOPIC = "mapping"

ENTRIES = (
    Augmentation(
        "builtins.map",
        """

Examples:

    >>> list(map(str.upper, ["a", "b"]))
    ['A', 'B']
    >>> list(map(pow, [2, 3, 4], [3, 2, 1]))   # several iterables in lockstep
    [8, 9, 4]

map() is lazy: wrap it in list() to see the results. A comprehension,
[f(x) for x in xs], is the usual alternative.

See https://docs.python.org/3/library/functions.html#map""",
        topic=TOPIC,
    ),
    Augmentation(
        "builtins.filter",
        """

Examples:

    >>> list(filter(lambda n: n % 2, range(6)))
    [1, 3, 5]
    >>> list(filter(None, [0, "", "x", None, 3]))   # drop falsy items
    ['x', 3]

See also itertools.filterfalse() for the complement.

See https://docs.python.org/3/library/functions.html#filter""",
        topic=TOPIC,
    ),
    Augmentation(
        "functools.reduce",
        """

Examples:

    >>> from functools import reduce
    >>> import operator
    >>> reduce(operator.add, [1, 2, 3, 4])
    10
    >>> reduce(lambda acc, w: acc + len(w), ["ab", "cde"], 0)   # with initial value
    5

For sums and products prefer sum() and math.prod().

See https://docs.python.org/3/library/functools.html#functools.reduce""",
        topic=TOPIC,
    ),
)
