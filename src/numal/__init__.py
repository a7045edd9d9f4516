# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Numal - tolerance comparisons and errors for numerical analysis"""

import importlib.resources


__version__ = (
    importlib.resources.files(__name__).joinpath('VERSION.txt').read_text().strip()
)
