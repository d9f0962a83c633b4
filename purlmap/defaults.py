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
"""Default registry detection."""

from typing import Optional
from urllib.parse import urlsplit

from . import types


def _extract_host(raw_url: str) -> str:
  """Return the lower-cased host of a URL, including any port, or '' if there
  is none."""
  try:
    netloc = urlsplit(raw_url).netloc
  except ValueError:
    return ''
  # Userinfo is not part of the host.
  return netloc.rpartition('@')[2].lower()


def is_default_registry(purl_type: str,
                        registry_url: str,
                        store: Optional[types.TypeStore] = None) -> bool:
  """Return whether `registry_url` is the default registry for a type.

  An empty URL always counts as the default registry. Otherwise the URL's host
  must equal, or be a subdomain of, the host of the type's configured default
  registry.
  """
  if not registry_url:
    return True

  default_url = types.default_registry(purl_type, store)
  if not default_url:
    return False

  default_host = _extract_host(default_url)
  given_host = _extract_host(registry_url)
  if not default_host or not given_host:
    return False

  return given_host == default_host or given_host.endswith('.' + default_host)


def is_non_default_registry(purl_type: str,
                            registry_url: str,
                            store: Optional[types.TypeStore] = None) -> bool:
  """Return whether `registry_url` is set and not the type's default."""
  if not registry_url:
    return False
  return not is_default_registry(purl_type, registry_url, store)
