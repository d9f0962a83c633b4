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
"""Package references and PURL construction."""

from typing import Dict, Optional

import attr
from packageurl import PackageURL

from . import canonical
from . import defaults
from . import ecosystems
from . import types

REPOSITORY_URL = 'repository_url'


def _or_empty(value: Optional[str]) -> str:
  return value or ''


def _check_name(instance, attribute, value):  # pylint: disable=unused-argument
  if not value:
    raise ValueError('A PURL name must not be empty.')


@attr.s(frozen=True)
class PackageReference:
  """A structured package identity.

  Whether a namespace is required or prohibited is a property of the type and
  is not enforced here.
  """
  type: str = attr.ib(converter=str.lower)
  namespace: str = attr.ib(converter=_or_empty)
  name: str = attr.ib(validator=_check_name)
  version: str = attr.ib(default='', converter=_or_empty)
  # Compared for equality but not hashed.
  qualifiers: Dict[str, str] = attr.ib(
      factory=dict, converter=dict, hash=False)
  subpath: str = attr.ib(default='', converter=_or_empty)

  @classmethod
  def parse(cls, purl_str: str) -> 'PackageReference':
    """Parse a PURL string.

    Raises:
      ValueError: `purl_str` is not a valid PURL.
    """
    purl = PackageURL.from_string(purl_str)
    return cls(purl.type, purl.namespace, purl.name, purl.version,
               purl.qualifiers or {}, purl.subpath)

  def __str__(self) -> str:
    return canonical.format_purl(self)

  @property
  def full_name(self) -> str:
    """The ecosystem-native name: namespace and name joined by '/', or by ':'
    for maven."""
    if not self.namespace:
      return self.name
    if self.type == 'maven':
      return f'{self.namespace}:{self.name}'
    return f'{self.namespace}/{self.name}'

  def qualifier(self, key: str) -> str:
    return self.qualifiers.get(key, '')

  @property
  def repository_url(self) -> str:
    return self.qualifier(REPOSITORY_URL)

  def is_private_registry(self, store: Optional[types.TypeStore] = None) -> bool:
    """Whether the repository_url qualifier names a non-default registry."""
    return defaults.is_non_default_registry(self.type, self.repository_url,
                                            store)

  def with_version(self, version: str) -> 'PackageReference':
    return attr.evolve(self, version=version)

  def without_version(self) -> 'PackageReference':
    return self.with_version('')

  def with_qualifier(self, key: str, value: str) -> 'PackageReference':
    """Copy of this reference with the qualifier set, replacing any existing
    value."""
    qualifiers = dict(self.qualifiers)
    qualifiers[key] = value
    return attr.evolve(self, qualifiers=qualifiers)


def new(purl_type: str,
        namespace: str,
        name: str,
        version: str = '',
        qualifiers: Optional[Dict[str, str]] = None) -> PackageReference:
  return PackageReference(purl_type, namespace, name, version, qualifiers or {})


def make_purl(ecosystem: str,
              name: str,
              version: str = '',
              registry_url: str = '',
              store: Optional[types.TypeStore] = None) -> PackageReference:
  """Build a package reference from ecosystem-native identifiers.

  Args:
    ecosystem: ecosystem name or alias, e.g. 'npm', 'go', 'alpine'.
    name: ecosystem-native package name, e.g. '@babel/core' or
      'org.apache.commons:commons-lang3'.
    version: package version, or empty.
    registry_url: registry the package came from. Recorded as the
      repository_url qualifier only when it is not the type's default.
    store: the type store to use. Defaults to the process-wide store.
  """
  purl_type = ecosystems.to_package_type(ecosystem)
  namespace, package_name = ecosystems.split_name(ecosystem, name)
  qualifiers = {}
  if defaults.is_non_default_registry(purl_type, registry_url, store):
    qualifiers[REPOSITORY_URL] = registry_url

  return PackageReference(purl_type, namespace, package_name, version,
                          qualifiers)


def make_purl_string(ecosystem: str,
                     name: str,
                     version: str = '',
                     registry_url: str = '',
                     store: Optional[types.TypeStore] = None) -> str:
  """Same as str(make_purl(...)), without building a PackageReference."""
  purl_type = ecosystems.to_package_type(ecosystem)
  namespace, package_name = ecosystems.split_name(ecosystem, name)
  qualifier = None
  if defaults.is_non_default_registry(purl_type, registry_url, store):
    qualifier = (REPOSITORY_URL, registry_url)

  return canonical.build_canonical_string(purl_type, namespace, package_name,
                                          version, qualifier)
