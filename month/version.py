"""
Module containing the `month` package version.

This module is the authority regarding the package version. `setup.py`
loads this module to obtain the version.
"""


import re


__version__ = '1.0.1'

# Check that the version is of the form "<major>.<minor>.<patch>",
# optionally followed by a suffix like "a0".
if re.match(r'^\d+\.\d+\.\d+\S*$', __version__) is None:
    raise ValueError(f'Invalid version string "{__version__}".')

full_version = __version__
