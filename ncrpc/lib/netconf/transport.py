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
Transport port used by the rpc layer

The rpc layer only needs a channel that delivers one whole NETCONF message
per send() and per receive(). Connection setup, authentication, framing
and the hello exchange belong to the concrete transport.
"""

import abc
import collections
import logging
import re

from ncrpc import exception

LOG = logging.getLogger(__name__)


class Transport(object, metaclass=abc.ABCMeta):
    """Base class for transports carrying NETCONF messages.

    A transport is a single ordered request/reply stream; it must not be
    shared by concurrent callers without outside serialization (see
    Session).
    """

    @abc.abstractmethod
    def send(self, data):
        """Send one complete message given as bytes.

        Raises TransportError on failure.
        """

    @abc.abstractmethod
    def receive(self):
        """Block until one complete message arrives and return its bytes.

        Raises TransportError on failure, TransportTimeoutError when the
        transport gives up waiting.
        """

    def close(self):
        pass


_MESSAGE_ID_RE = re.compile(rb'message-id=(["\'])(.*?)\1')


class LoopbackTransport(Transport):
    """Answers requests from a queue of canned replies.

    Each queued reply is bytes, str or an exception instance; exceptions
    are raised from receive(). '{msgid}' in a str reply is replaced with
    the message-id of the last request sent. Sent requests are kept in
    'sent'.
    """

    def __init__(self, replies=()):
        self.sent = []
        self.closed = False
        self.send_error = None
        self._replies = collections.deque(replies)

    def push(self, reply):
        self._replies.append(reply)

    @property
    def last_message_id(self):
        if not self.sent:
            return None
        m = _MESSAGE_ID_RE.search(self.sent[-1])
        return m.group(2).decode('utf-8') if m else None

    def send(self, data):
        if self.closed:
            raise exception.TransportError(operation='send',
                                           reason='transport closed')
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(bytes(data))

    def receive(self):
        if self.closed:
            raise exception.TransportError(operation='receive',
                                           reason='transport closed')
        if not self._replies:
            raise exception.TransportError(operation='receive',
                                           reason='no reply queued')
        reply = self._replies.popleft()
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, str):
            reply = reply.replace('{msgid}', self.last_message_id or '')
            reply = reply.encode('utf-8')
        LOG.debug('loopback reply of %d bytes', len(reply))
        return reply

    def close(self):
        self.closed = True
