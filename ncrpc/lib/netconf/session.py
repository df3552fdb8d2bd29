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
NETCONF session

A Session runs rpcs over one transport, one at a time::

    with session.Session(transport) as s:
        with s.locked('candidate'):
            s.edit_config('candidate', '<system><host-name>r1</host-name>'
                                       '</system>')
            s.commit('set host-name')
"""

import logging
import threading

from ncrpc import cfg
from ncrpc.lib.netconf import constants as nc_consts
from ncrpc.lib.netconf import methods
from ncrpc.lib.netconf import msgid
from ncrpc.lib.netconf import rpc

LOG = logging.getLogger(__name__)

CONF = cfg.CONF

CONF.register_cli_opts([
    cfg.BoolOpt('err-on-warning', default=False,
                help='treat rpc-error entries of severity warning as '
                'failures'),
], group='netconf')


class Session(object):
    """Runs rpcs over *transport*.

    *err_on_warning* defaults to the netconf.err_on_warning option.
    *generator* supplies message-ids (msgid.default_generator if None).

    A NETCONF session is a single ordered request/reply stream, so
    execute() holds a lock for the whole send/receive exchange; threads
    sharing a Session are served one rpc at a time.
    """

    def __init__(self, transport, err_on_warning=None, generator=None):
        if err_on_warning is None:
            err_on_warning = CONF.netconf.err_on_warning
        self.transport = transport
        self.err_on_warning = err_on_warning
        self._generator = generator or msgid.default_generator
        self._lock = threading.Lock()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False

    def close(self):
        if self.transport is not None:
            self.transport.close()
            self.transport = None

    def execute(self, *methods_):
        """Send *methods_* in one <rpc> and return the RPCReply."""
        msg = rpc.RPCMessage(methods_, generator=self._generator)
        with self._lock:
            return msg.execute(self.transport, self.err_on_warning)

    def lock(self, target=nc_consts.CANDIDATE):
        return self.execute(methods.lock(target))

    def unlock(self, target=nc_consts.CANDIDATE):
        return self.execute(methods.unlock(target))

    def get(self, filter_type, data_xml):
        return self.execute(methods.get(filter_type, data_xml))

    def get_config(self, source=nc_consts.RUNNING):
        return self.execute(methods.get_config(source))

    def edit_config(self, target, config, **kwargs):
        return self.execute(methods.edit_config(target, config, **kwargs))

    def validate(self, source=nc_consts.CANDIDATE):
        return self.execute(methods.validate(source))

    def set_config(self, config):
        return self.execute(methods.set_config(config))

    def discard_changes(self):
        return self.execute(methods.discard_changes())

    def compare(self, rollback=0):
        return self.execute(methods.compare(rollback))

    def commit(self, log=''):
        return self.execute(methods.commit(log))

    def locked(self, target=nc_consts.CANDIDATE):
        """Context manager holding a lock on the *target* datastore::

            with s.locked('candidate'):
                # do your stuff
        """
        return LockContext(self, target)


class LockContext(object):
    """Locks a datastore on enter and unlocks it on exit.

    The unlock is attempted even when the body raised; an unlock failure
    then only gets logged so the original exception propagates.
    """

    def __init__(self, session, target):
        self.session = session
        self.target = target

    def __enter__(self):
        self.session.lock(self.target)
        return self

    def __exit__(self, exc_type, exc_value, tb):
        if exc_type is None:
            self.session.unlock(self.target)
            return False
        try:
            self.session.unlock(self.target)
        except Exception:
            LOG.exception('unlock of %s failed', self.target)
        return False
