"""
Module containing class `Month` and month arithmetic functions.

The functions of this module whose names begin with `create_`, `add_`,
`subtract_`, and `get_` return `Result` objects rather than raising
exceptions when they fail. The `Month` initializer, operators, and
methods are the raising counterparts of those functions.
"""


from datetime import (
    date as Date,
    datetime as DateTime,
    tzinfo as TzInfo)
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import calendar
import functools
import logging

from month.month_errors import InvalidArgumentError, InvalidDateError
from month.result import Result, unwrap_or_raise
import month.month_settings as month_settings


_logger = logging.getLogger(__name__)


class Comparison(Enum):

    """Result of comparing two months chronologically."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@functools.total_ordering
class Month:

    """
    A calendar month, with a year and a month.

    A `Month` has integer `year` and `month` attributes, and `date`
    attributes `first_day` and `last_day` for the first and last days
    of the month. Years are those supported by `datetime.date`, i.e.
    from `datetime.MINYEAR` through `datetime.MAXYEAR`.

    `Month` objects are immutable, hashable, and totally ordered.

    You can add and subtract integer numbers of months to and from a
    `Month`. Subtracting one `Month` from another yields an integer
    number of months.

    :Raises TypeError:
        if the year or month is not an integer.

    :Raises InvalidDateError:
        if the year and month do not name a calendar month.
    """


    @staticmethod
    def from_date(date):
        return to_month(date)


    @staticmethod
    def now(time_zone=None):
        return unwrap_or_raise(get_current_month(time_zone))


    @staticmethod
    def utc_now():
        return unwrap_or_raise(get_utc_current_month())


    @staticmethod
    def _from_first_day(first_day):
        month = Month.__new__(Month)
        month._init(first_day)
        return month


    def __init__(self, year, month):
        first_day = unwrap_or_raise(_get_first_day(year, month))
        self._init(first_day)


    def _init(self, first_day):
        year = first_day.year
        month = first_day.month
        _, num_days = calendar.monthrange(year, month)
        set_ = functools.partial(object.__setattr__, self)
        set_('_n', year * 12 + (month - 1))
        set_('_first_day', first_day)
        set_('_last_day', Date(year, month, num_days))


    def __setattr__(self, name, value):
        raise AttributeError('Month objects are immutable.')


    def __reduce__(self):
        return (Month, (self.year, self.month))


    @property
    def year(self):
        return self._first_day.year


    @property
    def month(self):
        return self._first_day.month


    @property
    def first_day(self):
        return self._first_day


    @property
    def last_day(self):
        return self._last_day


    @property
    def num_days(self):
        return self._last_day.day


    @property
    def dates(self):
        """List of the dates of this month, in order."""
        year = self.year
        month = self.month
        return [Date(year, month, d) for d in range(1, self.num_days + 1)]


    def compare(self, other):
        return compare(self, other)


    def add(self, num_months):
        return unwrap_or_raise(add_months(self, num_months))


    def subtract(self, num_months):
        return unwrap_or_raise(subtract_months(self, num_months))


    def __repr__(self):
        return f'Month({self.year}, {self.month})'


    def __str__(self):
        return f'{self.year:04d}-{self.month:02d}'


    def __hash__(self):
        return hash(self._n)


    def __eq__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        else:
            return self._n == other._n


    def __lt__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        else:
            return self._n < other._n


    def __add__(self, i):
        if not isinstance(i, int):
            return NotImplemented
        else:
            return self.add(i)


    def __radd__(self, i):
        return self.__add__(i)


    def __sub__(self, other):
        if isinstance(other, Month):
            return self._n - other._n
        elif isinstance(other, int):
            return self.add(-other)
        else:
            return NotImplemented


def _is_integer(x):
    # `bool` is a subclass of `int`, but `True` is not a month.
    return isinstance(x, int) and not isinstance(x, bool)


def _get_first_day(year, month):

    if not _is_integer(year) or not _is_integer(month):
        raise TypeError('Year and month must both be integers.')

    try:
        return Result.success(Date(year, month, 1))

    except (ValueError, OverflowError) as e:
        return Result.failure(
            InvalidDateError(f'year {year}, month {month} ({e})'))


def create_month(year, month):

    """
    Creates a `Month` from a year and a month.

    Returns a successful `Result` holding the `Month`, or a failed
    `Result` holding an `InvalidDateError` if the year and month do
    not name a calendar month.

    :Raises TypeError:
        if the year or month is not an integer.
    """

    result = _get_first_day(year, month)

    if not result.ok:
        return result

    else:
        return Result.success(Month._from_first_day(result.value))


def create_month_from_date(value):

    """
    Creates the `Month` that contains a value with `year` and `month`
    attributes, for example a `date` or a `datetime`.

    A `Month` argument yields a successful result holding that month.

    :Raises TypeError:
        if the value does not have `year` and `month` attributes.
    """

    if isinstance(value, Month):
        return Result.success(value)

    year = getattr(value, 'year', None)
    month = getattr(value, 'month', None)

    if year is None or month is None:
        raise TypeError(
            f'Value {value!r} does not have year and month attributes.')

    return create_month(year, month)


def to_month(value):
    """Converts a `Month`, `date`, `datetime`, or similar to a `Month`."""
    return unwrap_or_raise(create_month_from_date(value))


def compare(a, b):

    if not isinstance(a, Month) or not isinstance(b, Month):
        raise TypeError('Both arguments must be `Month` objects.')

    if a.first_day < b.first_day:
        return Comparison.LESS
    elif a.first_day > b.first_day:
        return Comparison.GREATER
    else:
        return Comparison.EQUAL


def add_months(month, num_months):

    """
    Adds a number of months to a month.

    The number of months can be positive, negative, or zero. Returns a
    failed result holding an `InvalidDateError` only when the resulting
    year is outside of the supported range.
    """

    if not isinstance(month, Month):
        raise TypeError(f'Value {month!r} is not a `Month`.')

    if not isinstance(num_months, int):
        raise TypeError('Number of months must be an integer.')

    if num_months == 0:
        return Result.success(month)

    year, month_offset = divmod(month._n + num_months, 12)
    return create_month(year, month_offset + 1)


def subtract_months(month, num_months):

    """
    Subtracts a positive number of months from a month.

    Returns a failed result holding an `InvalidArgumentError` if the
    number of months is not a positive integer.
    """

    if not isinstance(month, Month):
        raise TypeError(f'Value {month!r} is not a `Month`.')

    if not isinstance(num_months, int) or num_months <= 0:
        return Result.failure(InvalidArgumentError(
            f'number of months to subtract must be a positive integer, '
            f'not {num_months!r}'))

    return add_months(month, -num_months)


def get_current_month(time_zone=None):

    """
    Gets the current month in the specified time zone.

    The time zone can be a string acceptable to the `zoneinfo.ZoneInfo`
    initializer, for example "UTC" or "America/New_York", or a
    `datetime.tzinfo` object. When it is `None` the time zone is the
    `time_zone` setting of the `month.month_settings` module.

    Returns a failed result holding an `InvalidDateError` if the time
    zone is not recognized.
    """

    if time_zone is None:
        time_zone = month_settings.get_settings().time_zone

    if isinstance(time_zone, TzInfo):
        zone = time_zone

    else:

        try:
            zone = ZoneInfo(time_zone)

        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            _logger.warning(
                f'Could not get info for time zone "{time_zone}": {e}')
            return Result.failure(
                InvalidDateError(f'unknown time zone "{time_zone}"'))

    now = DateTime.now(zone)

    _logger.debug(f'Current time in time zone "{time_zone}" is {now}.')

    return create_month_from_date(now)


def get_utc_current_month():
    return get_current_month('UTC')
