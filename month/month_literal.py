"""
Functions that parse and format months as "YYYY-MM" strings.

For example, March 2019 is "2019-03". The month of a parsed string may
have one or two digits, so "2019-3" is also March 2019.
"""


import re

from month.month import Month, to_month


_MONTH_RE = re.compile(r'^\s*(?P<year>\d{1,4})-(?P<month>\d{1,2})\s*$')


def parse_month(s):

    """
    Parses a "YYYY-MM" string into a `Month`.

    :Raises ValueError:
        if the string is not of the form "YYYY-MM".

    :Raises InvalidDateError:
        if the string is of the right form but does not name a
        calendar month, for example "2019-13".
    """

    if not isinstance(s, str):
        raise TypeError(f'Month string must be a str, not {s!r}.')

    m = _MONTH_RE.match(s)

    if m is None:
        raise ValueError(f'Bad month string "{s}".')

    return Month(int(m.group('year')), int(m.group('month')))


def format_month(value):
    """Formats a month, date, or similar as a "YYYY-MM" string."""
    return str(to_month(value))
