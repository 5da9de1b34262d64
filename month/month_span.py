"""
Functions shared by the month span classes `MonthPeriod` and
`MonthRange`.

A *month span* is an object with `start` and `end` months and a
`months` tuple containing every month from `start` through `end`,
inclusive. Span classes differ only in which endpoints they accept.
"""


from month.month import (
    Comparison, add_months, compare, create_month_from_date)
from month.month_errors import InvalidRangeError
from month.result import Result, unwrap_or_raise


def get_months(from_month, to_month):

    """
    Gets the months from one month through another, inclusive.

    If `from_month` follows `to_month` the two are swapped, so the
    returned list is always in increasing order.
    """

    comparison = compare(from_month, to_month)

    if comparison is Comparison.EQUAL:
        return [from_month]

    if comparison is Comparison.GREATER:
        from_month, to_month = to_month, from_month

    months = [from_month]
    month = from_month

    while month != to_month:

        # Every month from `from_month` through `to_month` is valid,
        # so this cannot fail.
        month = unwrap_or_raise(add_months(month, 1))

        months.append(month)

    return months


def get_range_months(from_month, to_month):

    """
    Gets the months from one month through a later one, inclusive.

    Returns a failed result holding an `InvalidRangeError` unless
    `from_month` precedes `to_month`.
    """

    if compare(from_month, to_month) is not Comparison.LESS:
        return Result.failure(InvalidRangeError(
            f'{from_month} does not precede {to_month}'))

    return Result.success(get_months(from_month, to_month))


def is_within(inner, outer):

    """
    Tests whether a date, month, or span is within a span.

    When `inner` has a `months` attribute (i.e. it is a span) this
    function returns whether every month of `inner` is a month of
    `outer`. Otherwise `inner` must have `year` and `month` attributes
    (for example a `date`, `datetime`, or `Month`) and this function
    returns whether its month is a month of `outer`. `inner` and
    `outer` do not have to be spans of the same class.
    """

    inner_months = getattr(inner, 'months', None)

    if inner_months is not None:
        return frozenset(inner_months) <= frozenset(outer.months)

    else:
        year = inner.year
        month = inner.month
        return any(
            m.year == year and m.month == month for m in outer.months)


def shift(span, num_months):

    """
    Shifts a span forward or backward by a number of months.

    The returned span is of the same class as `span`.

    :Raises InvalidDateError:
        if a shifted endpoint is outside of the supported year range.
    """

    start = span.start + num_months
    end = span.end + num_months
    return span.__class__(start, end)


class MonthSpanMixin:

    """
    Mixin providing the parts of the month span classes that do not
    depend on how they check their endpoints.

    Subclass initializers check their endpoints and then call `_init`.
    """


    @classmethod
    def _create(cls, start, end, months):
        # Creates a span from already checked endpoints and months,
        # bypassing the subclass initializer.
        span = cls.__new__(cls)
        span._init(start, end, months)
        return span


    @property
    def start(self):
        return self._start


    @property
    def end(self):
        return self._end


    @property
    def months(self):
        return self._months


    def shift(self, num_months):
        return shift(self, num_months)


    def __setattr__(self, name, value):
        raise AttributeError(
            f'{self.__class__.__name__} objects are immutable.')


    def _init(self, start, end, months):
        object.__setattr__(self, '_start', start)
        object.__setattr__(self, '_end', end)
        object.__setattr__(self, '_months', tuple(months))


    def __reduce__(self):
        return (self.__class__, (self._start, self._end))


    def __len__(self):
        return len(self._months)


    def __iter__(self):
        return iter(self._months)


    def __contains__(self, item):
        try:
            return is_within(item, self)
        except AttributeError:
            return False


    def __eq__(self, other):
        if not isinstance(other, MonthSpanMixin):
            return NotImplemented
        else:
            return other.__class__ is self.__class__ and \
                other._start == self._start and other._end == self._end


    def __hash__(self):
        return hash((self.__class__.__name__, self._start, self._end))


    def __repr__(self):
        return (
            f'{self.__class__.__name__}({self._start!r}, {self._end!r})')


    def __str__(self):
        return f'{self._start} - {self._end}'


def get_endpoints(first, last):

    """
    Converts span endpoints to months.

    Returns a result holding a `(first, last)` pair of `Month` objects.
    """

    first = create_month_from_date(first)
    if not first.ok:
        return first

    last = create_month_from_date(last)
    if not last.ok:
        return last

    return Result.success((first.value, last.value))
