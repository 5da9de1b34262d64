"""
Unit test test case mixin class.

This mixin class is intended for use with a subclass of
`unittest.TestCase`. It includes several convenience `assert_...`
methods, including some for checking `Result` objects.
"""


SHOW_EXCEPTION_MESSAGES = False


class TestCaseMixin:
    
    
    def assert_raises(self, exception_class, function, *args, **kwargs):
        
        try:
            function(*args, **kwargs)

        except exception_class as e:
            if SHOW_EXCEPTION_MESSAGES:
                print(str(e))
                
        else:
            raise AssertionError(
                f'{exception_class.__name__} not raised by '
                f'{function.__name__}')
        
        
    def assert_success(self, result, expected):
        if not result.ok:
            raise AssertionError(
                f'Result failed unexpectedly with error: {result.error}')
        self.assertEqual(result.value, expected)
        
        
    def assert_failure(self, result, error_class):
        
        if result.ok:
            raise AssertionError(
                f'Result succeeded unexpectedly with value '
                f'{result.value!r}.')
            
        if not isinstance(result.error, error_class):
            raise AssertionError(
                f'Result error {result.error!r} is not a '
                f'{error_class.__name__}.')
            
        if SHOW_EXCEPTION_MESSAGES:
            print(str(result.error))
