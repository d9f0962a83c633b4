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
"""setup.py for purlmap."""
import setuptools

with open('README.md', 'r') as fh:
  long_description = fh.read()

setuptools.setup(
    name='purlmap',
    version='0.1.0',
    author='purlmap authors',
    description=('Translate between Package URLs, ecosystem package names and '
                 'registry URLs'),
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['purlmap', 'purlmap.*']),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
    ],
    install_requires=[
        'attrs',
        'jsonschema',
        'packaging',
        'packageurl-python',
        'PyYAML',
        'univers',
    ],
    package_data={
        'purlmap': ['*.json', 'testdata/*'],
    },
    python_requires='>=3.8',
    zip_safe=False,
)
