"""Module containing class `Result` and function `unwrap_or_raise`."""


class Result:

    """
    The outcome of an operation that can fail.

    A `Result` holds either a `value` (on success) or an `error` (on
    failure), never both. The error is an exception instance that
    describes the failure, but it is not raised: callers decide whether
    to inspect it or to raise it with `unwrap_or_raise`.

    A `Result` is truthy if and only if it is successful. `Result`
    objects are immutable and compare equal when they have the same
    status and equal values or errors of the same class and message.
    """


    __slots__ = ('_value', '_error')


    @staticmethod
    def success(value):
        return Result(value, None)


    @staticmethod
    def failure(error):
        if error is None:
            raise TypeError('Result error must be an exception instance.')
        return Result(None, error)


    def __init__(self, value, error):
        if error is not None:
            if not isinstance(error, Exception):
                raise TypeError(
                    'Result error must be an exception instance.')
            if value is not None:
                raise ValueError(
                    'Result cannot hold both a value and an error.')
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_error', error)


    def __setattr__(self, name, value):
        raise AttributeError('Result objects are immutable.')


    def __reduce__(self):
        return (Result, (self._value, self._error))


    @property
    def ok(self):
        return self._error is None


    @property
    def value(self):
        return self._value


    @property
    def error(self):
        return self._error


    def __bool__(self):
        return self.ok


    def __eq__(self, other):

        if not isinstance(other, Result):
            return False

        elif self.ok or other.ok:
            return self.ok and other.ok and self._value == other._value

        else:
            return type(self._error) is type(other._error) and \
                str(self._error) == str(other._error)


    def __hash__(self):
        if self.ok:
            return hash(('ok', self._value))
        else:
            return hash(('error', type(self._error), str(self._error)))


    def __repr__(self):
        if self.ok:
            return f'Result.success({self._value!r})'
        else:
            return f'Result.failure({self._error!r})'


def unwrap_or_raise(result):

    """
    Returns the value of a successful result, or raises the error of
    a failed one.
    """

    if result.ok:
        return result.value
    else:
        raise result.error
