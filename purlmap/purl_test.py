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
"""Package reference tests."""

import unittest

from . import purl


class PackageReferenceTest(unittest.TestCase):
  """PackageReference tests."""

  def test_parse(self):
    """Test parsing PURL strings."""
    cases = [
        ('pkg:cargo/serde@1.0.152', ('cargo', '', 'serde', '1.0.152')),
        ('pkg:npm/lodash@4.17.21', ('npm', '', 'lodash', '4.17.21')),
        ('pkg:npm/%40babel/core@7.24.0', ('npm', '@babel', 'core', '7.24.0')),
        ('pkg:maven/org.apache.commons/commons-lang3@3.12.0',
         ('maven', 'org.apache.commons', 'commons-lang3', '3.12.0')),
        ('pkg:golang/github.com/gorilla/mux@v1.8.0',
         ('golang', 'github.com/gorilla', 'mux', 'v1.8.0')),
        ('pkg:hex/phoenix@1.7.0', ('hex', '', 'phoenix', '1.7.0')),
        ('pkg:composer/symfony/console',
         ('composer', 'symfony', 'console', '')),
    ]
    for purl_str, expected in cases:
      with self.subTest(purl=purl_str):
        ref = purl.PackageReference.parse(purl_str)
        self.assertEqual(expected,
                         (ref.type, ref.namespace, ref.name, ref.version))
        self.assertEqual(purl_str, str(ref))

  def test_parse_qualifiers_and_subpath(self):
    """Test parsing qualifiers and subpaths."""
    ref = purl.PackageReference.parse(
        'pkg:npm/lodash@4.17.21?repository_url=https://npm.example.com')
    self.assertEqual('https://npm.example.com', ref.repository_url)
    self.assertEqual(
        'pkg:npm/lodash@4.17.21?repository_url=https:%2F%2Fnpm.example.com',
        str(ref))

    ref = purl.PackageReference.parse(
        'pkg:golang/github.com/jackc/pgx@v5.0.0#v5/pgxpool')
    self.assertEqual('v5/pgxpool', ref.subpath)
    self.assertEqual('pkg:golang/github.com/jackc/pgx@v5.0.0#v5/pgxpool',
                     str(ref))

  def test_parse_invalid(self):
    """Test that invalid PURL strings are rejected."""
    for purl_str in ('cargo/serde', 'invalid'):
      with self.subTest(purl=purl_str):
        with self.assertRaises(ValueError):
          purl.PackageReference.parse(purl_str)

  def test_new(self):
    """Test constructing references."""
    ref = purl.new('NPM', None, 'lodash', '4.17.21')
    self.assertEqual('npm', ref.type)
    self.assertEqual('', ref.namespace)
    self.assertEqual({}, ref.qualifiers)
    self.assertEqual('pkg:npm/lodash@4.17.21', str(ref))

    ref = purl.new('npm', '@babel', 'core', '',
                   {'repository_url': 'https://npm.example.com'})
    self.assertEqual(
        'pkg:npm/%40babel/core?repository_url=https:%2F%2Fnpm.example.com',
        str(ref))

  def test_empty_name(self):
    """Test that a reference needs a name."""
    with self.assertRaises(ValueError):
      purl.new('npm', '', '')
    with self.assertRaises(ValueError):
      purl.PackageReference('npm', 'scope', None)

  def test_full_name(self):
    """Test ecosystem-native names."""
    cases = [
        (purl.new('npm', '', 'lodash'), 'lodash'),
        (purl.new('npm', '@babel', 'core'), '@babel/core'),
        (purl.new('maven', 'org.apache.commons', 'commons-lang3'),
         'org.apache.commons:commons-lang3'),
        (purl.new('golang', 'github.com/gorilla', 'mux'),
         'github.com/gorilla/mux'),
        (purl.new('composer', 'symfony', 'console'), 'symfony/console'),
    ]
    for ref, expected in cases:
      with self.subTest(ref=str(ref)):
        self.assertEqual(expected, ref.full_name)

  def test_qualifier(self):
    """Test qualifier lookups."""
    ref = purl.new('maven', 'org.apache', 'commons', '1.0', {'type': 'jar'})
    self.assertEqual('jar', ref.qualifier('type'))
    self.assertEqual('', ref.qualifier('classifier'))
    self.assertEqual('', ref.repository_url)

  def test_derive(self):
    """Test deriving references."""
    ref = purl.new('npm', '', 'lodash', '4.17.21')

    newer = ref.with_version('4.17.22')
    self.assertEqual('pkg:npm/lodash@4.17.22', str(newer))
    self.assertEqual('pkg:npm/lodash', str(ref.without_version()))

    private = ref.with_qualifier('repository_url', 'https://npm.example.com')
    self.assertEqual('https://npm.example.com', private.repository_url)
    replaced = private.with_qualifier('repository_url', 'https://other.example')
    self.assertEqual('https://other.example', replaced.repository_url)

    # The original is unchanged.
    self.assertEqual('pkg:npm/lodash@4.17.21', str(ref))
    self.assertEqual({}, ref.qualifiers)
    self.assertEqual('https://npm.example.com', private.repository_url)

  def test_hashable(self):
    """Test that references work as set members and dict keys."""
    lodash = purl.new('npm', '', 'lodash', '4.17.21')
    private = purl.new('npm', '', 'lodash', '4.17.21',
                       {'repository_url': 'https://npm.example.com'})
    private_copy = purl.PackageReference.parse(
        'pkg:npm/lodash@4.17.21?repository_url=https://npm.example.com')

    self.assertEqual(hash(lodash), hash(purl.new('npm', '', 'lodash',
                                                 '4.17.21')))
    self.assertEqual(hash(private), hash(private_copy))
    self.assertEqual(2, len({lodash, private, private_copy}))
    self.assertEqual('private', {private: 'private'}[private_copy])

  def test_is_private_registry(self):
    """Test private registry detection."""
    cases = [
        ({}, False),
        ({'repository_url': 'https://registry.npmjs.org'}, False),
        ({'repository_url': 'https://mirror.registry.npmjs.org/npm'}, False),
        ({'repository_url': 'https://npm.example.com'}, True),
    ]
    for qualifiers, expected in cases:
      with self.subTest(qualifiers=qualifiers):
        ref = purl.new('npm', '', 'lodash', '4.17.21', qualifiers)
        self.assertEqual(expected, ref.is_private_registry())

    # Types without a default registry treat any registry as private.
    ref = purl.new('deb', 'debian', 'curl', '',
                   {'repository_url': 'https://deb.debian.org'})
    self.assertTrue(ref.is_private_registry())


class MakePurlTest(unittest.TestCase):
  """make_purl tests."""

  CASES = [
      ('npm', '@babel/core', '7.24.0', '', 'pkg:npm/%40babel/core@7.24.0'),
      ('npm', 'lodash', '4.17.21', '', 'pkg:npm/lodash@4.17.21'),
      ('maven', 'org.apache:commons', '1.0', '', 'pkg:maven/org.apache/commons@1.0'),
      ('go', 'github.com/gorilla/mux', 'v1.8.0', '',
       'pkg:golang/github.com/gorilla/mux@v1.8.0'),
      ('Go', 'stdlib', '', '', 'pkg:golang/stdlib'),
      ('composer', 'symfony/console', '6.0.0', '',
       'pkg:composer/symfony/console@6.0.0'),
      ('alpine', 'curl', '8.0.0-r0', '', 'pkg:apk/alpine/curl@8.0.0-r0'),
      ('arch', 'pacman', '', '', 'pkg:alpm/arch/pacman'),
      ('PyPI', 'requests', '2.28.1', '', 'pkg:pypi/requests@2.28.1'),
      ('gem', 'rails', '7.0.4', '', 'pkg:gem/rails@7.0.4'),
      ('cargo', 'serde', '1.0.152', '', 'pkg:cargo/serde@1.0.152'),
      ('npm', 'lodash', '4.17.21', 'https://npm.example.com',
       'pkg:npm/lodash@4.17.21?repository_url=https:%2F%2Fnpm.example.com'),
      ('npm', 'lodash', '4.17.21', 'https://registry.npmjs.org',
       'pkg:npm/lodash@4.17.21'),
      ('npm', 'lodash', '4.17.21', 'https://registry.npmjs.org:8443',
       'pkg:npm/lodash@4.17.21'
       '?repository_url=https:%2F%2Fregistry.npmjs.org:8443'),
      ('maven', 'org.apache:commons', '1.0', 'https://repo1.maven.org/maven2',
       'pkg:maven/org.apache/commons@1.0'
       '?repository_url=https:%2F%2Frepo1.maven.org%2Fmaven2'),
      ('deb', 'curl', '', 'https://deb.debian.org',
       'pkg:deb/curl?repository_url=https:%2F%2Fdeb.debian.org'),
  ]

  def test_make_purl(self):
    """Test building references from ecosystem-native identifiers."""
    for ecosystem, name, version, registry_url, expected in self.CASES:
      with self.subTest(ecosystem=ecosystem, name=name):
        self.assertEqual(
            expected,
            str(purl.make_purl(ecosystem, name, version, registry_url)))

  def test_make_purl_string(self):
    """Test that the string fast path matches the structured path."""
    for ecosystem, name, version, registry_url, expected in self.CASES:
      with self.subTest(ecosystem=ecosystem, name=name):
        self.assertEqual(
            expected,
            purl.make_purl_string(ecosystem, name, version, registry_url))

  def test_make_purl_structure(self):
    """Test the components of built references."""
    ref = purl.make_purl('npm', '@babel/core', '7.24.0',
                         'https://npm.example.com')
    self.assertEqual(('npm', '@babel', 'core', '7.24.0'),
                     (ref.type, ref.namespace, ref.name, ref.version))
    self.assertTrue(ref.is_private_registry())

  def test_empty_name(self):
    """Test that a name is required."""
    with self.assertRaises(ValueError):
      purl.make_purl('npm', '')
    with self.assertRaises(ValueError):
      purl.make_purl_string('npm', '')


if __name__ == '__main__':
  unittest.main()
