"""
Exception classes of the `month` package.

Each error message begins with a short code (for example
`invalid_date`) that identifies the kind of error, followed by a
description of the offending input.
"""


class MonthError(ValueError):

    code = None


    def __init__(self, detail=None):
        if detail is None:
            message = self.code
        else:
            message = f'{self.code}: {detail}'
        super().__init__(message)
        self.detail = detail


    def __reduce__(self):
        # The default reduction would pass the formatted message back
        # to the initializer as the detail.
        return (self.__class__, (self.detail,))


class InvalidDateError(MonthError):
    code = 'invalid_date'


class InvalidArgumentError(MonthError):
    code = 'invalid_argument'


class InvalidRangeError(MonthError):
    code = 'invalid_range'
