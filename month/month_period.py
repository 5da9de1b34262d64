"""Module containing class `MonthPeriod`."""


from month.month import Comparison, compare
from month.month_span import MonthSpanMixin, get_endpoints, get_months
from month.result import Result, unwrap_or_raise


class MonthPeriod(MonthSpanMixin):

    """
    A period of one or more consecutive months.

    A period is created from two months, or from two dates or other
    objects with `year` and `month` attributes, which are converted to
    the months that contain them. The endpoints can be given in either
    order: the earlier one becomes the period's `start` and the later
    one its `end`. The `months` attribute is a tuple of all of the
    months of the period, from `start` through `end` inclusive.

    If you want a guarantee that a span covers at least two months,
    use `MonthRange` instead.
    """


    def __init__(self, first, last):
        period = unwrap_or_raise(create_period(first, last))
        self._init(period.start, period.end, period.months)


def create_period(first, last):

    """
    Creates a `MonthPeriod` from two months or dates, in either order.

    Returns a successful result for any two valid months. It can fail
    only if an endpoint is a date-like object whose year and month do
    not name a valid month.
    """

    result = get_endpoints(first, last)

    if not result.ok:
        return result

    start, end = result.value

    if compare(start, end) is Comparison.GREATER:
        start, end = end, start

    months = get_months(start, end)

    return Result.success(MonthPeriod._create(start, end, months))
