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


class NcrpcException(Exception):
    message = 'An unknown exception'

    def __init__(self, msg=None, **kwargs):
        self.kwargs = kwargs
        if msg is None:
            msg = self.message

        try:
            msg = msg % kwargs
        except Exception:
            msg = self.message

        super(NcrpcException, self).__init__(msg)


class RandomSourceError(NcrpcException):
    message = 'random source unusable: %(reason)s'


class RPCEncodeError(NcrpcException):
    message = 'cannot encode rpc envelope: %(reason)s'


class TransportError(NcrpcException):
    message = 'netconf transport %(operation)s failed: %(reason)s'


class TransportTimeoutError(TransportError):
    message = 'netconf transport %(operation)s timed out after %(timeout)s'


class ReplyError(NcrpcException):
    message = 'malformed rpc-reply'


class XMLParseError(ReplyError):
    message = 'cannot parse rpc-reply: %(reason)s'


class NoReplyRootError(ReplyError):
    message = 'no reply root in %(tag)s'


class CredentialError(NcrpcException):
    message = 'cannot build ssh configuration for %(user)s: %(reason)s'
