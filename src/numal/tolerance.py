# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Absolute and relative tolerances for comparing floating-point values

A value a is close to a reference value b under a tolerance when

  |a - b| <= eps_abs + eps_rel * |b|

The relative term scales with the reference value only, so the comparison is
not symmetric in a and b.  A failed comparison raises ConvergenceError rather
than returning False, so that it can be propagated directly from iterative
code.

"""

import json
import logging

from dataclasses import dataclass

import numpy as np
import yaml

from numal.exceptions import ConvergenceError, InvalidInputError


LOG = logging.getLogger('numal.tolerance')

CUSTOM = 'custom'

# eps_abs, eps_rel
PRESET_THRESHOLDS = {
    'strict': (1e-12, 1e-10),
    'default': (1e-8, 1e-6),
    'loose': (1e-6, 1e-4),
}


@dataclass(frozen=True)
class Tolerance:
    """Absolute and relative error budget

    Use one of the presets STRICT, DEFAULT and LOOSE, or Tolerance.custom for
    caller-supplied thresholds.

    """

    eps_abs: float
    eps_rel: float
    name: str = CUSTOM

    def __post_init__(self):
        if self.name == CUSTOM:
            return
        if self.name not in PRESET_THRESHOLDS:
            raise InvalidInputError(
                'Unrecognized tolerance "{}"; choose from: {}'.format(
                    self.name, [CUSTOM] + list(sorted(PRESET_THRESHOLDS.keys()))
                )
            )
        if (self.eps_abs, self.eps_rel) != PRESET_THRESHOLDS[self.name]:
            raise InvalidInputError(
                f'Thresholds {self.eps_abs}, {self.eps_rel} do not match '
                f'preset "{self.name}"'
            )

    @classmethod
    def custom(cls, eps_abs, eps_rel):
        """Tolerance with the given thresholds

        The thresholds are used as given: negative or NaN values are not
        rejected.

        """
        return cls(eps_abs=eps_abs, eps_rel=eps_rel, name=CUSTOM)

    @classmethod
    def from_file(cls, json_or_yaml_file):
        """Instantiate tolerance from a JSON or YAML file"""
        try:
            parameters = json_or_yaml(json_or_yaml_file)
        except yaml.YAMLError as error:
            raise InvalidInputError(
                f'Cannot parse tolerance parameters: {error}'
            ) from None
        if parameters is None:
            parameters = {}
        if not isinstance(parameters, dict):
            raise InvalidInputError(
                f'Tolerance parameters must be a mapping, not {parameters!r}'
            )
        try:
            return cls.from_parameters(**parameters)
        except TypeError as error:
            raise InvalidInputError(
                f'Bad tolerance parameters {parameters}: {error}'
            ) from None

    @classmethod
    def from_parameters(cls, preset=None, eps_abs=None, eps_rel=None):
        """Instantiate tolerance from parameters

        Either a preset name (strict, default or loose) or both eps_abs and
        eps_rel may be given.  With no parameters, the default tolerance is
        returned.

        """
        thresholds = (eps_abs, eps_rel)
        if preset is not None:
            if thresholds != (None, None):
                raise InvalidInputError(
                    'Give either a preset or thresholds, not both'
                )
            key = str(preset).lower()
            if key not in PRESETS:
                raise InvalidInputError(
                    'Unrecognized tolerance preset "{}"; choose from: {}'.format(
                        preset, list(sorted(PRESETS.keys()))
                    )
                )
            tolerance = PRESETS[key]
        elif thresholds == (None, None):
            tolerance = DEFAULT
        elif None in thresholds:
            raise InvalidInputError('Both eps_abs and eps_rel are required')
        elif isinstance(eps_abs, bool) or isinstance(eps_rel, bool):
            raise InvalidInputError(
                f'Thresholds must be numbers, not booleans: {eps_abs}, {eps_rel}'
            )
        else:
            try:
                tolerance = cls.custom(float(eps_abs), float(eps_rel))
            except (TypeError, ValueError):
                raise InvalidInputError(
                    f'Thresholds not coercible to float: {eps_abs}, {eps_rel}'
                ) from None
        LOG.debug('Using tolerance %s', tolerance)
        return tolerance


PRESETS = {
    name: Tolerance(eps_abs=eps_abs, eps_rel=eps_rel, name=name)
    for name, (eps_abs, eps_rel) in PRESET_THRESHOLDS.items()
}
STRICT = PRESETS['strict']
DEFAULT = PRESETS['default']
LOOSE = PRESETS['loose']


def eps_abs(tolerance):
    """Absolute error threshold of tolerance"""
    return tolerance.eps_abs


def eps_rel(tolerance):
    """Relative error threshold of tolerance"""
    return tolerance.eps_rel


def is_close(a, b, tolerance=DEFAULT):
    """Check that a is close to the reference value b

    Returns True if |a - b| <= eps_abs + eps_rel * |b|, and raises
    ConvergenceError otherwise.  Any NaN argument fails the check.

    """
    difference = abs(a - b)
    budget = tolerance.eps_abs + tolerance.eps_rel * abs(b)
    if difference <= budget:
        return True
    LOG.debug(
        '%s not close to %s: difference %s exceeds %s (%s)',
        a,
        b,
        difference,
        budget,
        tolerance.name,
    )
    raise ConvergenceError()


def all_close(a, b, tolerance=DEFAULT):
    """Check that all elements of a are close to reference values in b

    a and b are broadcast against each other, and each element is compared as
    in is_close.  Returns True if every element is within tolerance, and raises
    ConvergenceError otherwise.  Empty arrays are close.

    """
    try:
        a = np.asarray(a, dtype=np.float64)
        b = np.asarray(b, dtype=np.float64)
    except (TypeError, ValueError):
        raise InvalidInputError(
            'Arguments not coercible to float arrays: {}, {}'.format(a, b)
        ) from None
    try:
        a, b = np.broadcast_arrays(a, b)
    except ValueError:
        raise InvalidInputError(
            f'Shapes {a.shape} and {b.shape} do not broadcast'
        ) from None
    # NaN differences (from NaN or infinite operands) compare false
    with np.errstate(invalid='ignore'):
        difference = np.abs(a - b)
        budget = tolerance.eps_abs + tolerance.eps_rel * np.abs(b)
        within = difference <= budget
    if np.all(within):
        return True
    LOG.debug(
        '%s of %s elements not within tolerance (%s)',
        np.count_nonzero(~within),
        within.size,
        tolerance.name,
    )
    raise ConvergenceError()


def json_or_yaml(infile):
    """Load JSON from file, or failing that, YAML"""
    try:
        return json.load(infile)
    except json.decoder.JSONDecodeError:
        infile.seek(0)
        return yaml.safe_load(infile)
