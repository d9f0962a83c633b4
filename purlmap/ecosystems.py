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
"""Ecosystem name helpers."""

from typing import List, Optional, Tuple

from . import types

# Alternate spellings of ecosystem names.
ECOSYSTEM_ALIASES = {
    'go': 'golang',
    'gem': 'rubygems',
    'composer': 'packagist',
}

# Ecosystems whose PURL type differs from the ecosystem name. Must stay
# one-to-one so that from_package_type() can reverse it.
ECOSYSTEM_PURL_TYPES = {
    'alpine': 'apk',
    'arch': 'alpm',
    'rubygems': 'gem',
    'packagist': 'composer',
    'github-actions': 'githubactions',
}

# OSV ecosystem names, keyed by PURL type.
# https://ossf.github.io/osv-schema/#affectedpackage-field
OSV_ECOSYSTEM_NAMES = {
    'cargo': 'crates.io',
    'cocoapods': 'CocoaPods',
    'composer': 'Packagist',
    'gem': 'RubyGems',
    'githubactions': 'GitHub Actions',
    'golang': 'Go',
    'hex': 'Hex',
    'maven': 'Maven',
    'npm': 'npm',
    'nuget': 'NuGet',
    'pub': 'Pub',
    'pypi': 'PyPI',
}

# Ecosystems whose packages always live under a fixed namespace.
DEFAULT_NAMESPACES = {
    'alpine': 'alpine',
    'arch': 'arch',
}


def normalize(ecosystem: str) -> str:
  """Get the canonical ecosystem name, e.g. 'Go' -> 'golang'."""
  lower = ecosystem.lower()
  return ECOSYSTEM_ALIASES.get(lower, lower)


def to_package_type(ecosystem: str) -> str:
  """Get the PURL type for an ecosystem, e.g. 'alpine' -> 'apk'."""
  normalized = normalize(ecosystem)
  return ECOSYSTEM_PURL_TYPES.get(normalized, normalized)


def from_package_type(purl_type: str) -> str:
  """Get the ecosystem name for a PURL type. Inverse of to_package_type."""
  for ecosystem, mapped_type in ECOSYSTEM_PURL_TYPES.items():
    if mapped_type == purl_type:
      return ecosystem
  return purl_type


def to_osv_name(ecosystem: str) -> str:
  """Get the name OSV uses for an ecosystem, e.g. 'cargo' -> 'crates.io'."""
  return OSV_ECOSYSTEM_NAMES.get(to_package_type(ecosystem), ecosystem)


def default_namespace(ecosystem: str) -> str:
  return DEFAULT_NAMESPACES.get(normalize(ecosystem), '')


def split_name(ecosystem: str, name: str) -> Tuple[str, str]:
  """Split an ecosystem-native package name into (namespace, name).

  - npm: @scope/pkg -> ('@scope', 'pkg')
  - maven: group:artifact -> ('group', 'artifact')
  - golang: github.com/foo/bar -> ('github.com/foo', 'bar')
  - packagist: vendor/package -> ('vendor', 'package')
  - alpine, arch: pkg -> ('alpine', 'pkg'), ('arch', 'pkg')
  """
  normalized = normalize(ecosystem)

  if normalized == 'npm' and name.startswith('@'):
    scope, sep, package = name.partition('/')
    if sep:
      # The '@' stays part of the namespace.
      return scope, package

  elif normalized == 'golang':
    idx = name.rfind('/')
    if idx > 0:
      return name[:idx], name[idx + 1:]

  elif normalized == 'maven' and ':' in name:
    group, _, artifact = name.partition(':')
    return group, artifact

  elif normalized == 'packagist' and '/' in name:
    vendor, _, package = name.partition('/')
    return vendor, package

  return default_namespace(ecosystem), name


def supported_ecosystems(store: Optional[types.TypeStore] = None) -> List[str]:
  """All recognised ecosystem names: known PURL types, then aliases, then
  ecosystems with a differing PURL type."""
  result = []
  seen = set()
  for name in (types.known_types(store) + list(ECOSYSTEM_ALIASES) +
               list(ECOSYSTEM_PURL_TYPES)):
    if name not in seen:
      seen.add(name)
      result.append(name)

  return result


def is_valid_ecosystem(ecosystem: str,
                       store: Optional[types.TypeStore] = None) -> bool:
  return types.is_known_type(to_package_type(ecosystem), store)
