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
"""Registry URL generation and parsing.

Registry URLs are the human-facing package pages of a registry, e.g.
https://www.npmjs.com/package/lodash for pkg:npm/lodash. Each PURL type with
a registry_config provides URI templates to build them and a reverse regex to
parse them back.
"""

import logging
import re
from typing import Dict, Optional, Pattern

from . import purl
from . import types

_NAMESPACE = '{namespace}'
_NAME = '{name}'
_VERSION = '{version}'

# Compiled reverse regexes, keyed by pattern. Concurrent first uses of a
# pattern may both compile it; either result is equivalent.
_regex_cache: Dict[str, Pattern[str]] = {}


class RegistryError(Exception):
  """Registry URL error."""


class NoRegistryConfigError(RegistryError):
  """The PURL type has no registry configuration."""


class NoMatchError(RegistryError):
  """The URL does not match a known registry pattern."""


def _get_or_compile(pattern: str) -> Pattern[str]:
  compiled = _regex_cache.get(pattern)
  if compiled is None:
    logging.debug('Compiling registry pattern %s', pattern)
    compiled = re.compile(pattern)
    _regex_cache[pattern] = compiled
  return compiled


def _registry_config(purl_type: str,
                     store: Optional[types.TypeStore]) -> types.RegistryConfig:
  type_config = types.type_info(purl_type, store)
  if type_config is None or type_config.registry_config is None:
    raise NoRegistryConfigError(
        f'No registry configuration for type {purl_type!r}')
  return type_config.registry_config


def _select_template(registry: types.RegistryConfig, has_namespace: bool,
                     version: str) -> str:
  """Pick the URI template for the given components."""
  template = ''
  if version and registry.components.version_in_url:
    if has_namespace:
      template = registry.uri_template_with_version
    else:
      template = registry.uri_template_with_version_no_namespace
    if not template:
      template = registry.uri_template_with_version

  if not template:
    if not has_namespace and registry.uri_template_no_namespace:
      template = registry.uri_template_no_namespace
    else:
      template = registry.uri_template

  return template


def expand_template(registry: types.RegistryConfig, namespace: str, name: str,
                    version: str) -> str:
  """Expand the registry's URI template with the given components.

  Raises:
    NoRegistryConfigError: no template applies.
  """
  template = _select_template(registry, bool(namespace), version)
  if not template:
    raise NoRegistryConfigError('No URI template for these components')

  display_namespace = namespace
  prefix = registry.components.namespace_prefix
  if prefix and namespace and not namespace.startswith(prefix):
    display_namespace = prefix + namespace

  return template.replace(_NAMESPACE, display_namespace).replace(
      _NAME, name).replace(_VERSION, version)


def build_registry_url(ref: purl.PackageReference,
                       include_version: bool = False,
                       store: Optional[types.TypeStore] = None) -> str:
  """Build the registry URL for a package reference.

  Args:
    ref: the package reference.
    include_version: whether to link to the reference's version. Ignored if
      the reference has no version or the registry has no version URLs.
    store: the type store to use. Defaults to the process-wide store.

  Returns:
    The registry URL.

  Raises:
    NoRegistryConfigError: the type has no registry configuration.
  """
  registry = _registry_config(ref.type, store)
  version = ref.version if include_version else ''
  return expand_template(registry, ref.namespace, ref.name, version)


def registry_url(ref: purl.PackageReference,
                 store: Optional[types.TypeStore] = None) -> str:
  """Registry URL for the package, e.g. https://crates.io/crates/serde."""
  return build_registry_url(ref, False, store)


def registry_url_with_version(ref: purl.PackageReference,
                              store: Optional[types.TypeStore] = None) -> str:
  """Registry URL for the package version, falling back to the package URL
  when the registry has no version pages."""
  return build_registry_url(ref, True, store)


def match_registry_url(
    url: str,
    purl_type: str,
    store: Optional[types.TypeStore] = None) -> purl.PackageReference:
  """Parse a registry URL of a given PURL type into a package reference.

  Raises:
    NoRegistryConfigError: the type has no reverse regex.
    NoMatchError: the URL does not match the type's reverse regex.
  """
  registry = _registry_config(purl_type, store)
  if not registry.reverse_regex:
    raise NoRegistryConfigError(f'No reverse regex for type {purl_type!r}')

  match = _get_or_compile(registry.reverse_regex).search(url)
  if not match:
    raise NoMatchError(f'{url} is not a {purl_type} registry URL')

  fields = dict(zip(registry.components.group_fields(), match.groups()))
  name = fields.get('name') or ''
  if not name:
    raise NoMatchError(f'{url} has no package name')

  return purl.PackageReference(
      purl_type,
      fields.get('namespace') or '',
      name,
      version=fields.get('version') or '')


def match_registry_url_any(
    url: str,
    store: Optional[types.TypeStore] = None) -> purl.PackageReference:
  """Parse a registry URL, trying each known type in sorted order.

  Raises:
    NoMatchError: no type's reverse regex matches the URL.
  """
  for purl_type in types.known_types(store):
    try:
      ref = match_registry_url(url, purl_type, store)
    except RegistryError:
      continue

    logging.debug('Matched %s as type %s', url, purl_type)
    return ref

  raise NoMatchError(f'{url} does not match any known registry pattern')
