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
"""Package URL type configuration.

Type information comes from a versioned document (purl-types.json by default)
mapping each PURL type to its default registry, namespace requirement and
registry URL templates. The document is read once per TypeStore and never
modified afterwards.
"""

import functools
import json
import logging
import os
import re
import threading
from typing import Any, Dict, List, Optional, Tuple

import attr
import jsonschema
import yaml

from . import config

DEFAULT_TYPES_PATH = os.path.join(os.path.dirname(__file__), 'purl-types.json')
_SCHEMA_PATH = os.path.join(
    os.path.dirname(__file__), 'purl-types.schema.json')

YAML_EXTENSIONS = ('.yaml', '.yml')

NAMESPACE_REQUIRED = 'required'
NAMESPACE_PROHIBITED = 'prohibited'
NAMESPACE_OPTIONAL = 'optional'


class TypesLoadError(Exception):
  """Non-retryable error loading the type definitions."""


@attr.s(frozen=True)
class RegistryComponents:
  """Describes which PURL components appear in registry URLs."""
  namespace: bool = attr.ib(default=False)
  namespace_required: bool = attr.ib(default=False)
  namespace_prefix: str = attr.ib(default='')
  version_in_url: bool = attr.ib(default=False)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'RegistryComponents':
    return cls(
        namespace=bool(data.get('namespace', False)),
        namespace_required=bool(data.get('namespace_required', False)),
        namespace_prefix=data.get('namespace_prefix') or '',
        version_in_url=bool(data.get('version_in_url', False)))

  def group_fields(self) -> Tuple[str, ...]:
    """The reference field captured by each reverse regex group, in order."""
    fields: Tuple[str, ...] = ('name',)
    if self.namespace:
      fields = ('namespace', 'name')
    if self.version_in_url:
      fields += ('version',)
    return fields


@attr.s(frozen=True)
class RegistryConfig:
  """URL templates and the reverse pattern for a type's registry."""
  base_url: str = attr.ib(default='')
  reverse_regex: str = attr.ib(default='')
  uri_template: str = attr.ib(default='')
  uri_template_no_namespace: str = attr.ib(default='')
  uri_template_with_version: str = attr.ib(default='')
  uri_template_with_version_no_namespace: str = attr.ib(default='')
  components: RegistryComponents = attr.ib(factory=RegistryComponents)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'RegistryConfig':
    return cls(
        base_url=data.get('base_url', ''),
        reverse_regex=data.get('reverse_regex', ''),
        uri_template=data.get('uri_template', ''),
        uri_template_no_namespace=data.get('uri_template_no_namespace', ''),
        uri_template_with_version=data.get('uri_template_with_version', ''),
        uri_template_with_version_no_namespace=data.get(
            'uri_template_with_version_no_namespace', ''),
        components=RegistryComponents.from_dict(data.get('components') or {}))


@attr.s(frozen=True)
class TypeConfig:
  """Configuration for a single PURL type."""
  description: str = attr.ib()
  default_registry: Optional[str] = attr.ib(default=None)
  namespace_requirement: str = attr.ib(default=NAMESPACE_OPTIONAL)
  examples: Tuple[str, ...] = attr.ib(default=(), converter=tuple)
  registry_config: Optional[RegistryConfig] = attr.ib(default=None)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'TypeConfig':
    registry_config = None
    if data.get('registry_config'):
      registry_config = RegistryConfig.from_dict(data['registry_config'])

    return cls(
        description=data['description'],
        default_registry=data.get('default_registry'),
        namespace_requirement=data['namespace_requirement'],
        examples=data.get('examples') or (),
        registry_config=registry_config)

  @property
  def namespace_required(self) -> bool:
    return self.namespace_requirement == NAMESPACE_REQUIRED

  @property
  def namespace_prohibited(self) -> bool:
    return self.namespace_requirement == NAMESPACE_PROHIBITED


@functools.lru_cache(maxsize=None)
def load_schema() -> Dict[str, Any]:
  """Load the JSON schema for type definition documents."""
  with open(_SCHEMA_PATH) as f:
    return json.load(f)


def _read_document(path: str) -> Any:
  """Read a type definitions document from a JSON or YAML file."""
  ext = os.path.splitext(path)[1]
  try:
    with open(path) as f:
      if ext in YAML_EXTENSIONS:
        return yaml.safe_load(f)
      return json.load(f)
  except (OSError, ValueError, yaml.YAMLError) as e:
    raise TypesLoadError(f'Failed to read type definitions from {path}: {e}') \
        from e


def _check_reverse_regex(purl_type: str, registry: RegistryConfig) -> None:
  """Check that a reverse regex compiles and agrees with its components."""
  if not registry.reverse_regex:
    return

  try:
    pattern = re.compile(registry.reverse_regex)
  except re.error as e:
    raise TypesLoadError(
        f'Invalid reverse_regex for type {purl_type}: {e}') from e

  expected = len(registry.components.group_fields())
  if pattern.groups != expected:
    raise TypesLoadError(
        f'reverse_regex for type {purl_type} has {pattern.groups} groups, '
        f'but its components describe {expected}')


def parse_document(document: Any) -> Dict[str, TypeConfig]:
  """Validate a type definitions document and build its TypeConfigs."""
  try:
    jsonschema.validate(document, load_schema())
  except jsonschema.exceptions.ValidationError as e:
    raise TypesLoadError(f'Invalid type definitions: {e.message}') from e

  result = {}
  for purl_type, data in document['types'].items():
    type_config = TypeConfig.from_dict(data)
    if type_config.registry_config:
      _check_reverse_regex(purl_type, type_config.registry_config)
    result[purl_type] = type_config

  return result


class TypeStore:
  """Read-only table of PURL type configurations.

  The definitions are loaded on first use. Concurrent first callers wait for
  the single load to finish. A failed load is remembered and the same
  TypesLoadError is raised to every later caller.

  Args:
    path: JSON or YAML file to load. Defaults to the bundled purl-types.json.
    document: An already parsed document to use instead of reading a file.
  """

  def __init__(self,
               path: Optional[str] = None,
               document: Optional[Dict[str, Any]] = None) -> None:
    self.path = path or DEFAULT_TYPES_PATH
    self._document = document
    self._lock = threading.Lock()
    self._loaded = False
    self._types: Dict[str, TypeConfig] = {}
    self._sorted_types: Tuple[str, ...] = ()
    self._version = ''
    self._error: Optional[TypesLoadError] = None

  def _source(self) -> str:
    if self._document is not None:
      return '<document>'
    return self.path

  def _load_once(self) -> None:
    try:
      document = self._document
      if document is None:
        document = _read_document(self.path)
      self._types = parse_document(document)
    except TypesLoadError as e:
      logging.error('Failed to load PURL types from %s: %s', self._source(), e)
      self._error = e
      return

    self._sorted_types = tuple(sorted(self._types))
    self._version = document.get('version', '')
    logging.info('Loaded %d PURL types (version %s) from %s',
                 len(self._types), self._version, self._source())

  def load(self) -> None:
    """Load the definitions if not already loaded."""
    if not self._loaded:
      with self._lock:
        if not self._loaded:
          self._load_once()
          self._loaded = True

    if self._error:
      raise self._error

  def lookup(self, purl_type: str) -> Optional[TypeConfig]:
    """Get the configuration for a type, or None if unknown."""
    self.load()
    return self._types.get(purl_type)

  def known_types(self) -> List[str]:
    """Get a sorted list of all known types."""
    self.load()
    return list(self._sorted_types)

  def is_known(self, purl_type: str) -> bool:
    self.load()
    return purl_type in self._types

  def default_registry(self, purl_type: str) -> str:
    """Get the default registry URL for a type, or '' if it has none."""
    type_config = self.lookup(purl_type)
    if not type_config or not type_config.default_registry:
      return ''
    return type_config.default_registry

  @property
  def version(self) -> str:
    """Version of the loaded type definitions."""
    self.load()
    return self._version


_store_lock = threading.Lock()


def get_store() -> TypeStore:
  """Get the process-wide type store, creating it on first use."""
  if config.shared_store is None:
    with _store_lock:
      if config.shared_store is None:
        path = config.types_file or os.getenv(config.TYPES_FILE_ENV)
        config.shared_store = TypeStore(path)

  return config.shared_store


def _resolve(store: Optional[TypeStore]) -> TypeStore:
  if store is None:
    return get_store()
  return store


def type_info(purl_type: str,
              store: Optional[TypeStore] = None) -> Optional[TypeConfig]:
  """Get the configuration for a type, or None if unknown."""
  return _resolve(store).lookup(purl_type)


def known_types(store: Optional[TypeStore] = None) -> List[str]:
  return _resolve(store).known_types()


def is_known_type(purl_type: str, store: Optional[TypeStore] = None) -> bool:
  return _resolve(store).is_known(purl_type)


def default_registry(purl_type: str, store: Optional[TypeStore] = None) -> str:
  return _resolve(store).default_registry(purl_type)


def types_version(store: Optional[TypeStore] = None) -> str:
  return _resolve(store).version
