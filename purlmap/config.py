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
"""purlmap configuration."""
import typing

# Environment variable naming an alternate type definitions file.
TYPES_FILE_ENV = 'PURLMAP_TYPES_FILE'

# Explicit type definitions file. Takes precedence over TYPES_FILE_ENV.
types_file: typing.Optional[str] = None

shared_store: typing.Optional[typing.Any] = None


def set_store(store: typing.Optional[typing.Any]):
  """Replaces the process-wide type store. Passing None resets it so that
  the next lookup builds a fresh store from the configured file."""
  global shared_store
  shared_store = store
