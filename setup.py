#!/usr/bin/python3

"""Installation script for numal

"""

import os.path
import re

from setuptools import setup


with open('README.txt') as readme_file:
    LONG_DESCRIPTION = readme_file.read()
    del readme_file


def get_version():
    """Get project version

    """
    version_file_path = os.path.join(
        os.path.dirname(__file__),
        'src',
        'numal',
        'VERSION.txt')
    with open(version_file_path) as version_file:
        version_string = version_file.read().strip()
    version_string_re = re.compile('[0-9.]+')
    match = version_string_re.match(version_string)
    if match is None:
        raise ValueError(
            'version string "{}" does not match regexp "{}"'
            .format(version_string, version_string_re.pattern))
    return match.group(0)


setup(name='numal',
      version=get_version(),
      description='Tolerance comparisons and errors for numerical analysis',
      author='Alex Cobb',
      author_email='alex.cobb@smart.mit.edu',
      long_description=LONG_DESCRIPTION,
      package_dir={'': 'src'},
      packages=['numal',
                'numal.test'],
      package_data={'numal': ['VERSION.txt']},
      python_requires='>=3.8',
      install_requires=['numpy', 'PyYAML'],
      extras_require={'test': ['pytest']})
