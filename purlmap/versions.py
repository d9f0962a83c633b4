# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Version constraint helpers."""

import logging
import re

from packaging.specifiers import InvalidSpecifier
from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion
from packaging.version import Version
from univers.version_range import NpmVersionRange
from univers.version_range import RANGE_CLASS_BY_SCHEMES

from . import ecosystems

_LOWER_BOUND_COMPARATORS = ('=', '>=', '>')
_PEP440_LOWER_BOUND_OPERATORS = ('==', '~=', '>=', '>')

# Cargo requirements share npm's caret and tilde semantics but separate
# comparators with commas.
_RANGE_CLASS_OVERRIDES = {
    'cargo': NpmVersionRange,
}
_CARGO_SEPARATOR = re.compile(r'\s*,\s*')


def _pypi_lower_bound(version: str) -> str:
  """Lowest bound of a PEP 440 specifier set, or '' if there is none."""
  try:
    specifiers = SpecifierSet(version)
  except InvalidSpecifier:
    try:
      Version(version)
    except InvalidVersion:
      logging.debug('Could not parse pypi constraint %r', version)
      return ''
    return version

  bounds = []
  for specifier in specifiers:
    if (specifier.operator not in _PEP440_LOWER_BOUND_OPERATORS or
        specifier.version.endswith('*')):
      continue
    try:
      bounds.append((Version(specifier.version), specifier.version))
    except InvalidVersion:
      continue

  if not bounds:
    return ''
  return min(bounds)[1]


def _range_lower_bound(version: str, purl_type: str) -> str:
  """Lowest bound of a univers native version range, or '' if there is
  none."""
  range_class = _RANGE_CLASS_OVERRIDES.get(purl_type)
  if range_class is None:
    range_class = RANGE_CLASS_BY_SCHEMES.get(purl_type)
  if range_class is None:
    return ''

  if purl_type == 'cargo':
    version = _CARGO_SEPARATOR.sub(' ', version.strip())

  try:
    version_range = range_class.from_native(version)
  except Exception as e:  # pylint: disable=broad-exception-caught
    logging.debug('Could not parse %s constraint %r: %s', purl_type, version,
                  e)
    return ''

  lower_bounds = [
      constraint for constraint in version_range.constraints
      if constraint.comparator in _LOWER_BOUND_COMPARATORS
  ]
  if not lower_bounds:
    return ''
  return min(lower_bounds, key=lambda c: c.version).version.string


def clean_version(version: str, scheme: str) -> str:
  """Extract a concrete version from a version constraint.

  Returns the lowest bound of the constraint in the native syntax of `scheme`,
  e.g. '^1.0.0' (npm) -> '1.0.0', '~> 1.0' (gem) -> '1.0' or '~=1.4.2' (pypi)
  -> '1.4.2'. The input is returned unchanged if it cannot be parsed or has no
  lower bound.
  """
  if not version:
    return ''

  purl_type = ecosystems.to_package_type(scheme)
  if purl_type == 'pypi':
    lower_bound = _pypi_lower_bound(version)
  else:
    lower_bound = _range_lower_bound(version, purl_type)

  return lower_bound or version
