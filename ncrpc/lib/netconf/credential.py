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

"""
Credentials for NETCONF over SSH

A credential turns what the caller knows (a password, a private key) into
an SSHClientConfig that an SSH transport hands to paramiko::

    config = credential.PlainPassword('admin', 'secret').config()
    client.connect(host, port=830, **config.connect_kwargs())
"""

import abc
import io
import logging

import paramiko

from ncrpc import exception

LOG = logging.getLogger(__name__)

# paramiko key types tried in order when loading a private key
KEY_CLASSES = (paramiko.RSAKey, paramiko.ECDSAKey, paramiko.Ed25519Key)


class SSHClientConfig(object):
    """Authentication settings for one SSH login.

    Exactly one of *password* and *pkey* (a paramiko.PKey) is normally set.
    """

    def __init__(self, username, password=None, pkey=None):
        self.username = username
        self.password = password
        self.pkey = pkey

    def connect_kwargs(self):
        """Keyword arguments for paramiko.SSHClient.connect().

        Agent and ~/.ssh key lookup are disabled so that only this
        credential is offered.
        """
        kwargs = {
            'username': self.username,
            'allow_agent': False,
            'look_for_keys': False,
        }
        if self.password is not None:
            kwargs['password'] = self.password
        if self.pkey is not None:
            kwargs['pkey'] = self.pkey
        return kwargs

    def __repr__(self):
        return '%s(username=%r, auth=%s)' % (
            self.__class__.__name__, self.username,
            'pkey' if self.pkey is not None else 'password')


class Credential(object, metaclass=abc.ABCMeta):
    """Something a NETCONF client can log in with."""

    @abc.abstractmethod
    def config(self):
        """Build an SSHClientConfig.

        Raises CredentialError if the credential cannot be used.
        """


class PlainPassword(Credential):

    def __init__(self, user, password):
        self.user = user
        self.password = password

    def config(self):
        return SSHClientConfig(self.user, password=self.password)


def load_private_key(user, fileobj, passphrase=None):
    data = fileobj.read()
    for key_cls in KEY_CLASSES:
        try:
            return key_cls.from_private_key(io.StringIO(data),
                                            password=passphrase)
        except paramiko.PasswordRequiredException:
            raise exception.CredentialError(
                user=user, reason='private key is encrypted and no '
                'passphrase was given')
        except (paramiko.SSHException, ValueError) as e:
            LOG.debug('not a %s key: %s', key_cls.__name__, e)
    raise exception.CredentialError(
        user=user, reason='malformed private key or wrong passphrase')


class PublicKey(Credential):
    """Public key login with the private *key* given as text."""

    def __init__(self, user, key, passphrase=None):
        self.user = user
        self.key = key
        self.passphrase = passphrase

    def config(self):
        pkey = load_private_key(self.user, io.StringIO(self.key),
                                self.passphrase)
        return SSHClientConfig(self.user, pkey=pkey)


class PublicKeyFile(Credential):
    """Public key login with the private key read from *filename*."""

    def __init__(self, user, filename, passphrase=None):
        self.user = user
        self.filename = filename
        self.passphrase = passphrase

    def config(self):
        try:
            with open(self.filename) as f:
                pkey = load_private_key(self.user, f, self.passphrase)
        except (IOError, UnicodeDecodeError) as e:
            raise exception.CredentialError(user=self.user, reason=e)
        return SSHClientConfig(self.user, pkey=pkey)
