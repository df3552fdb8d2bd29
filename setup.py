# Copyright (C) 2026 The ncrpc Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

from setuptools import find_packages
from setuptools import setup

from ncrpc import version


def parse_requirements(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'tools', filename)
    with open(path) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


requires = parse_requirements('pip-requires')
test_requires = parse_requirements('test-requires')

long_description = open('README.rst').read() + '\n\n'

classifiers = [
    'Development Status :: 4 - Beta',
    'License :: OSI Approved :: Apache Software License',
    'Topic :: System :: Networking',
    'Natural Language :: English',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Operating System :: Unix',
]

setup(name='ncrpc',
      version=version,
      description=("NETCONF RPC client core"),
      long_description=long_description,
      classifiers=classifiers,
      keywords='netconf rpc network management',
      install_requires=requires,
      extras_require={'test': test_requires},
      python_requires='>=3.7',
      license='Apache License 2.0',
      packages=find_packages(exclude=['ncrpc.tests', 'ncrpc.tests.*']),
      )
