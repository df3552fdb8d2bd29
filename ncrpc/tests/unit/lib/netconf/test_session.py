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

import re
import threading
import time
import unittest
from unittest import mock

from ncrpc import cfg
from ncrpc import exception
from ncrpc.lib.netconf import methods
from ncrpc.lib.netconf import msgid
from ncrpc.lib.netconf import rpc
from ncrpc.lib.netconf import session
from ncrpc.lib.netconf import transport

OK_REPLY = '<rpc-reply message-id="{msgid}"><ok/></rpc-reply>'
WARNING_REPLY = ('<rpc-reply message-id="{msgid}"><rpc-error>'
                 '<error-severity>warning</error-severity>'
                 '<error-message>uncommitted changes</error-message>'
                 '</rpc-error></rpc-reply>')
LOCKED_REPLY = ('<rpc-reply message-id="{msgid}"><rpc-error>'
                '<error-severity>error</error-severity>'
                '<error-message>locked</error-message>'
                '</rpc-error></rpc-reply>')


class EchoTransport(transport.Transport):
    """Replies <ok/> to each request and records the send/receive order."""

    def __init__(self):
        self.events = []
        self._pending = []
        self._lock = threading.Lock()

    def send(self, data):
        m = re.search(rb'message-id="([^"]*)"', data)
        with self._lock:
            self.events.append('send')
            self._pending.append(m.group(1))
        time.sleep(0.001)

    def receive(self):
        with self._lock:
            self.events.append('receive')
            msg_id = self._pending.pop(0)
        return (b'<rpc-reply message-id="' + msg_id +
                b'"><ok/></rpc-reply>')


class Test_Session(unittest.TestCase):
    """ Test case for ncrpc.lib.netconf.session
    """

    def setUp(self):
        self.transport = transport.LoopbackTransport()
        self.session = session.Session(self.transport, err_on_warning=False)

    def tearDown(self):
        cfg.CONF.clear_override('err_on_warning', group='netconf')

    def _sent(self):
        return [s.decode('utf-8') for s in self.transport.sent]

    def test_execute(self):
        self.transport.push(OK_REPLY)
        reply = self.session.lock('running')
        self.assertTrue(reply.ok)
        self.assertIn('<lock><target><running/></target></lock>',
                      self._sent()[0])
        self.assertEqual(self.transport.last_message_id, reply.message_id)

    def test_execute_many(self):
        self.transport.push(OK_REPLY)
        gen = msgid.MessageIDGenerator(lambda n: b'\x00' * n)
        s = session.Session(self.transport, generator=gen)
        s.execute(methods.lock(), methods.validate())
        sent = self._sent()[0]
        self.assertIn('message-id="00000000-0000-4000-8000-000000000000"',
                      sent)
        self.assertLess(sent.index('<lock>'), sent.index('<validate>'))

    def test_operations(self):
        ops = [
            (lambda: self.session.unlock(), '<unlock>'),
            (lambda: self.session.get('subtree', '<x/>'),
             '<get><filter type="subtree"><x/></filter></get>'),
            (lambda: self.session.get_config(), '<get-config>'),
            (lambda: self.session.edit_config('candidate', '<a/>'),
             '<config><a/></config>'),
            (lambda: self.session.validate(), '<validate>'),
            (lambda: self.session.set_config('set a'),
             '<configuration-set>set a</configuration-set>'),
            (lambda: self.session.discard_changes(), '<discard-changes/>'),
            (lambda: self.session.compare(), 'compare="rollback"'),
            (lambda: self.session.commit('c1'), '<log>c1</log>'),
        ]
        for call, fragment in ops:
            self.transport.push(OK_REPLY)
            call()
            self.assertIn(fragment, self._sent()[-1])

    def test_err_on_warning(self):
        self.transport.push(WARNING_REPLY)
        reply = self.session.commit()
        self.assertEqual('warning', reply.errors[0].severity)

        strict = session.Session(self.transport, err_on_warning=True)
        self.transport.push(WARNING_REPLY)
        self.assertRaises(rpc.RPCError, strict.commit)

    def test_err_on_warning_from_conf(self):
        self.assertFalse(session.Session(self.transport).err_on_warning)
        cfg.CONF.set_override('err_on_warning', True, group='netconf')
        self.assertTrue(session.Session(self.transport).err_on_warning)

    def test_locked(self):
        self.transport.push(OK_REPLY)
        self.transport.push(OK_REPLY)
        self.transport.push(OK_REPLY)
        with self.session.locked('candidate'):
            self.session.edit_config('candidate', '<a/>')
        sent = self._sent()
        self.assertEqual(3, len(sent))
        self.assertIn('<lock>', sent[0])
        self.assertIn('<edit-config>', sent[1])
        self.assertIn('<unlock>', sent[2])

    def test_locked_unlocks_on_error(self):
        self.transport.push(OK_REPLY)
        self.transport.push(LOCKED_REPLY)
        self.transport.push(LOCKED_REPLY)
        with self.assertRaises(rpc.RPCError) as cm:
            with self.session.locked('candidate'):
                self.session.edit_config('candidate', '<a/>')
        self.assertEqual("netconf rpc [error] 'locked'", str(cm.exception))
        self.assertIn('<edit-config>', self._sent()[1])
        self.assertIn('<unlock>', self._sent()[2])

    def test_lock_denied(self):
        self.transport.push(LOCKED_REPLY)
        with self.assertRaises(rpc.RPCError):
            with self.session.locked():
                self.fail('entered without the lock')
        self.assertEqual(1, len(self.transport.sent))

    def test_close(self):
        t = mock.MagicMock(spec=transport.Transport)
        with session.Session(t) as s:
            pass
        t.close.assert_called_once_with()
        self.assertIsNone(s.transport)
        s.close()
        t.close.assert_called_once_with()

    def test_closed_transport(self):
        self.transport.close()
        self.assertRaises(exception.TransportError, self.session.lock)

    def test_serialized(self):
        t = EchoTransport()
        s = session.Session(t)
        replies = []

        def worker():
            for _ in range(5):
                replies.append(s.discard_changes())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        self.assertEqual(40, len(replies))
        self.assertEqual(['send', 'receive'] * 40, t.events)
        self.assertTrue(all(r.ok for r in replies))
