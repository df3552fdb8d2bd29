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
message-id generation

Every request carries a random version-4 UUID as its message-id so that a
reply can be matched to the request it answers without a shared counter.
"""

import os
import uuid

from ncrpc import exception

MSGID_BYTES = 16


class MessageIDGenerator(object):
    """Produces message-id tokens such as
    '1b4e28ba-2fa1-41d2-883f-0016d3cca427'.

    *random_source* is a callable taking a byte count and returning that
    many random bytes. It defaults to os.urandom; tests substitute a
    deterministic one.
    """

    def __init__(self, random_source=os.urandom):
        self._random_source = random_source

    def next(self):
        try:
            b = self._random_source(MSGID_BYTES)
        except OSError as e:
            raise exception.RandomSourceError(reason=e)
        if b is None or len(b) < MSGID_BYTES:
            raise exception.RandomSourceError(
                reason='returned %d of %d bytes' % (len(b or b''),
                                                    MSGID_BYTES))
        # uuid.UUID sets the version 4 and RFC 4122 variant bits
        return str(uuid.UUID(bytes=bytes(b[:MSGID_BYTES]), version=4))

    __call__ = next


default_generator = MessageIDGenerator()
