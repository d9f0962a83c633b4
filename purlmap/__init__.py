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
"""Translate between Package URLs, ecosystem-native names and registry URLs.

  >>> ref = PackageReference.parse('pkg:npm/%40babel/core@7.24.0')
  >>> ref.full_name
  '@babel/core'
  >>> registry_url_with_version(ref)
  'https://www.npmjs.com/package/@babel/core/v/7.24.0'
  >>> str(match_registry_url_any('https://crates.io/crates/serde'))
  'pkg:cargo/serde'
"""

from .canonical import build_canonical_string
from .canonical import escape_component
from .canonical import escape_qualifier_value
from .canonical import format_purl
from .defaults import is_default_registry
from .defaults import is_non_default_registry
from .ecosystems import from_package_type
from .ecosystems import is_valid_ecosystem
from .ecosystems import normalize
from .ecosystems import supported_ecosystems
from .ecosystems import to_osv_name
from .ecosystems import to_package_type
from .purl import PackageReference
from .purl import make_purl
from .purl import make_purl_string
from .purl import new
from .registry import NoMatchError
from .registry import NoRegistryConfigError
from .registry import RegistryError
from .registry import build_registry_url
from .registry import match_registry_url
from .registry import match_registry_url_any
from .registry import registry_url
from .registry import registry_url_with_version
from .types import RegistryComponents
from .types import RegistryConfig
from .types import TypeConfig
from .types import TypeStore
from .types import TypesLoadError
from .types import default_registry
from .types import get_store
from .types import is_known_type
from .types import known_types
from .types import type_info
from .types import types_version
from .versions import clean_version
