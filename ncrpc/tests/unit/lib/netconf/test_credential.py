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

import io
import os
import shutil
import tempfile
import unittest

import paramiko

from ncrpc import exception
from ncrpc.lib.netconf import credential


class Test_credential(unittest.TestCase):
    """ Test case for ncrpc.lib.netconf.credential
    """

    @classmethod
    def setUpClass(cls):
        cls.key = paramiko.RSAKey.generate(2048)
        f = io.StringIO()
        cls.key.write_private_key(f)
        cls.key_text = f.getvalue()
        f = io.StringIO()
        cls.key.write_private_key(f, password='s3cret')
        cls.encrypted_key_text = f.getvalue()

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_plain_password(self):
        config = credential.PlainPassword('admin', 'secret').config()
        self.assertEqual('admin', config.username)
        self.assertEqual({'username': 'admin',
                          'password': 'secret',
                          'allow_agent': False,
                          'look_for_keys': False},
                         config.connect_kwargs())

    def test_public_key(self):
        config = credential.PublicKey('admin', self.key_text).config()
        self.assertEqual(self.key.get_base64(), config.pkey.get_base64())
        kwargs = config.connect_kwargs()
        self.assertIs(config.pkey, kwargs['pkey'])
        self.assertNotIn('password', kwargs)

    def test_public_key_passphrase(self):
        config = credential.PublicKey('admin', self.encrypted_key_text,
                                      passphrase='s3cret').config()
        self.assertEqual(self.key.get_base64(), config.pkey.get_base64())

    def test_public_key_missing_passphrase(self):
        c = credential.PublicKey('admin', self.encrypted_key_text)
        self.assertRaises(exception.CredentialError, c.config)

    def test_public_key_wrong_passphrase(self):
        c = credential.PublicKey('admin', self.encrypted_key_text,
                                 passphrase='wrong')
        self.assertRaises(exception.CredentialError, c.config)

    def test_malformed_key(self):
        c = credential.PublicKey('admin', 'not a key')
        with self.assertRaises(exception.CredentialError) as cm:
            c.config()
        self.assertIn('admin', str(cm.exception))

    def test_public_key_file(self):
        filename = os.path.join(self.tmpdir, 'id_rsa')
        with open(filename, 'w') as f:
            f.write(self.key_text)
        config = credential.PublicKeyFile('admin', filename).config()
        self.assertEqual(self.key.get_base64(), config.pkey.get_base64())

    def test_public_key_file_missing(self):
        c = credential.PublicKeyFile('admin',
                                     os.path.join(self.tmpdir, 'nokey'))
        self.assertRaises(exception.CredentialError, c.config)

    def test_abstract(self):
        self.assertRaises(TypeError, credential.Credential)
