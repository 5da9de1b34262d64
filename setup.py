"""
setup.py for the `month` pip package.


Creating a Development Environment
----------------------------------

To create a Conda environment for `month` development:

    1. `cd` to the directory containing this file.

    2. Create and activate a new environment, and install the package
       in editable mode with its test dependencies:

           conda create -n month-dev python=3.11
           conda activate month-dev
           pip install -e ".[test]"


Running Unit Tests
------------------

To run the unit tests:

    cd <directory containing this file>
    conda activate month-dev
    pytest


Building and Uploading the Package
----------------------------------

The package build and upload commands below should be issued from within
the directory containing this file.

To build the package:

    conda activate month-dev
    python -m build

The build process will write package `.tar.gz` and `.whl` files to the
`dist` subdirectory of the directory containing this file.

To upload a built package to the real Python package index:

    conda activate month-dev
    python -m twine upload dist/*
"""


from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from setuptools import find_namespace_packages, setup


def load_version_module(package_name):
    module_name = f'{package_name}.version'
    file_path = Path(__file__).parent / package_name / 'version.py'
    spec = spec_from_file_location(module_name, file_path)
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


version = load_version_module('month')


setup(

    name='month',
    version=version.full_version,
    description=(
        'Library for working with calendar months and month ranges, '
        'rather than full dates or dates with times.'),
    license='MIT',
    python_requires='>=3.9',

    # The `month` Python package is a native namespace package, i.e.
    # its directories do not contain `__init__.py` files, so we must
    # use `find_namespace_packages` rather than `find_packages` to
    # find its packages.
    packages=find_namespace_packages(
        include=['month', 'month.*'],
        exclude=['month.tests', 'month.*.tests']
    ),

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],

    install_requires=[
        'environs',
        'ruamel.yaml',
        'tzdata',                  # time zone database for `zoneinfo`
    ],

    extras_require={
        'test': [
            'pytest',
        ],
    },

    zip_safe=False

)
