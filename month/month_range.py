"""Module containing class `MonthRange`."""


from month.month_span import MonthSpanMixin, get_endpoints, get_range_months
from month.result import Result, unwrap_or_raise


class MonthRange(MonthSpanMixin):

    """
    A range of two or more consecutive months.

    A range is created from two months, or from two dates or other
    objects with `year` and `month` attributes, which are converted to
    the months that contain them. The first month must precede the
    second. The `months` attribute is a tuple of all of the months of
    the range, from `start` through `end` inclusive.

    :Raises InvalidRangeError:
        if the first month does not precede the second.
    """


    def __init__(self, first, last):
        range_ = unwrap_or_raise(create_range(first, last))
        self._init(range_.start, range_.end, range_.months)


def create_range(first, last):

    """
    Creates a `MonthRange` from two months or dates.

    Returns a failed result holding an `InvalidRangeError` if the
    first month does not precede the second.
    """

    result = get_endpoints(first, last)

    if not result.ok:
        return result

    start, end = result.value

    result = get_range_months(start, end)

    if not result.ok:
        return result

    return Result.success(MonthRange._create(start, end, result.value))
