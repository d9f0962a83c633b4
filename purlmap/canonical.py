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
"""Canonical PURL string serialization.

Two entry points share the same escaping rules: format_purl() renders a
structured package reference, and build_canonical_string() renders a PURL
straight from its parts without building a reference first. Both produce
identical strings for the same input.
"""

from typing import Any, Optional, Tuple
from urllib.parse import quote

# Unreserved characters plus the sub-delimiters and ':' stay as-is in
# namespace segments, names, versions and subpath segments.
_COMPONENT_SAFE = "-._~!$&'()*,;=:"
# Qualifier values may embed URLs, so '/', '&', '=' etc. are escaped.
_QUALIFIER_VALUE_SAFE = '-._~:'


def escape_component(value: str) -> str:
  """Percent-encode a namespace segment, name, version or subpath segment."""
  return quote(value, safe=_COMPONENT_SAFE)


def escape_qualifier_value(value: str) -> str:
  """Percent-encode a qualifier value."""
  return quote(value, safe=_QUALIFIER_VALUE_SAFE)


def _path_segments(path: Optional[str]) -> str:
  """Escape each non-empty `/` separated segment, each with a leading `/`."""
  if not path:
    return ''
  return ''.join(
      '/' + escape_component(segment) for segment in path.split('/') if segment)


def _qualifier(key: str, value: str) -> str:
  return key.lower() + '=' + escape_qualifier_value(value)


def build_canonical_string(purl_type: str,
                           namespace: Optional[str],
                           name: str,
                           version: Optional[str] = None,
                           qualifier: Optional[Tuple[str, str]] = None) -> str:
  """Build a canonical PURL string from its parts.

  Args:
    purl_type: the PURL type, e.g. 'npm'.
    namespace: `/` separated namespace, or empty.
    name: the package name. Must not be empty.
    version: the version, or empty.
    qualifier: an optional (key, value) pair. Dropped when the value is empty.

  Returns:
    The PURL string, e.g. 'pkg:npm/%40babel/core@7.24.0'.
  """
  if not name:
    raise ValueError('A PURL name must not be empty.')

  result = 'pkg:' + purl_type.lower() + _path_segments(namespace)
  result += '/' + escape_component(name)
  if version:
    result += '@' + escape_component(version)
  if qualifier and qualifier[1]:
    result += '?' + _qualifier(*qualifier)
  return result


def format_purl(ref: Any) -> str:
  """Render a package reference as a canonical PURL string.

  `ref` needs type, namespace, name, version, qualifiers and subpath
  attributes. Qualifiers are sorted by key and empty values are dropped.
  """
  if not ref.name:
    raise ValueError('A PURL name must not be empty.')

  result = 'pkg:' + ref.type.lower() + _path_segments(ref.namespace)
  result += '/' + escape_component(ref.name)
  if ref.version:
    result += '@' + escape_component(ref.version)

  qualifiers = [
      _qualifier(key, value)
      for key, value in sorted((ref.qualifiers or {}).items())
      if value
  ]
  if qualifiers:
    result += '?' + '&'.join(qualifiers)

  subpath = _path_segments(ref.subpath)
  if subpath:
    result += '#' + subpath[1:]
  return result
