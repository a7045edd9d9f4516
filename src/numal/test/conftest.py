# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Fixtures for numal tests"""

import pytest


# pylint: disable=redefined-outer-name
@pytest.fixture(scope='function')
def write_parameter_file(tmp_path):
    """Factory for parameter files opened for reading

    Files are written with the given text and closed at teardown.

    """
    open_files = []

    def write(text, suffix='yml'):
        path = tmp_path / f'tolerance.{suffix}'
        path.write_text(text, encoding='utf-8')
        parameter_file = open(path, 'rt', encoding='utf-8')
        open_files.append(parameter_file)
        return parameter_file

    yield write
    for parameter_file in open_files:
        parameter_file.close()
