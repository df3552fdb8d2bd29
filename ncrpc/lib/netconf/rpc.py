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
NETCONF rpc request and rpc-reply handling

An RPCMessage wraps operation fragments (see methods.py) into a single
<rpc> document. Executing it sends the document over a transport, reads
exactly one reply and decodes it into an RPCReply.

rpc-error entries never abort decoding. When the reply carries an error
that fails the call, that RPCError is raised with the decoded reply
attached as its 'reply' attribute, so partial results stay available::

    try:
        reply = msg.execute(transport)
    except rpc.RPCError as e:
        LOG.warning('%s', e)
        reply = e.reply
"""

import enum
import logging
from xml.sax.saxutils import quoteattr

from ncrpc import exception
from ncrpc import log
from ncrpc.lib.netconf import constants as nc_consts
from ncrpc.lib.netconf import msgid
from ncrpc.lib.netconf import xml_

LOG = logging.getLogger(__name__)


class Severity(enum.Enum):
    ERROR = nc_consts.ERROR
    WARNING = nc_consts.WARNING
    UNKNOWN = None

    @classmethod
    def from_str(cls, value):
        """Map an error-severity value to a member.

        Anything but the exact literals 'error' and 'warning' is UNKNOWN.
        """
        for member in (cls.ERROR, cls.WARNING):
            if value == member.value:
                return member
        return cls.UNKNOWN


class RPCError(exception.NcrpcException):
    """One rpc-error entry of a reply.

    It is an exception so that the entry failing a call can be raised as
    is. Missing sub-elements read as empty strings.
    """

    message = "netconf rpc [%(severity)s] '%(message)s'"

    def __init__(self, type='', tag='', severity='', path='',
                 message='', app_tag='', info=''):
        self.type = type
        self.tag = tag
        self.severity = severity
        self.path = path
        self.message = message
        self.app_tag = app_tag
        self.info = info
        # set on the error that fails an execute()
        self.reply = None
        super(RPCError, self).__init__(
            RPCError.message, severity=severity, message=message.strip())

    @classmethod
    def from_ele(cls, ele):
        def _text(name):
            return xml_.text(xml_.find_child(ele, name))

        info = xml_.find_child(ele, nc_consts.ERROR_INFO)
        return cls(type=_text(nc_consts.ERROR_TYPE),
                   tag=_text(nc_consts.ERROR_TAG),
                   severity=_text(nc_consts.ERROR_SEVERITY),
                   path=_text(nc_consts.ERROR_PATH),
                   message=_text(nc_consts.ERROR_MESSAGE),
                   app_tag=_text(nc_consts.ERROR_APP_TAG),
                   info=xml_.to_xml(info) if info is not None else '')

    @property
    def severity_level(self):
        return Severity.from_str(self.severity)

    def to_dict(self):
        return {
            'type': self.type,
            'tag': self.tag,
            'severity': self.severity,
            'path': self.path,
            'message': self.message,
            'app_tag': self.app_tag,
            'info': self.info,
        }

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.to_dict())


def classify(errors, err_on_warning=False):
    """Return the error that fails the call, or None.

    That is the first entry, in document order, whose severity is 'error'
    or unrecognized. With *err_on_warning* the first entry of any severity
    qualifies.
    """
    for err in errors:
        if err_on_warning or err.severity_level != Severity.WARNING:
            return err
    return None


class RPCReply(object):
    """Decoded rpc-reply.

    ok
        True if an <ok/> element appears anywhere in the reply.
    message_id
        message-id of the request this reply answers.
    errors
        RPCError for each rpc-error, in document order.
    data
        lxml ElementTree rooted at the first element inside <rpc-reply>,
        e.g. <data> or <ok>.
    xml
        reply as received.
    """

    def __init__(self, raw, message_id=None):
        self.xml = raw
        self.message_id = message_id
        self.ok = False
        self.errors = []
        self.data = None

    @classmethod
    def parse(cls, raw, err_on_warning=False, message_id=None):
        reply = cls(raw, message_id)
        root = xml_.to_ele(raw)

        if next(xml_.iter_descendants(root, nc_consts.OK), None) is not None:
            reply.ok = True

        if xml_.local_name(root) != nc_consts.RPC_REPLY:
            raise exception.NoReplyRootError(tag=xml_.local_name(root))
        body = xml_.children(root)
        if not body:
            raise exception.NoReplyRootError(tag=nc_consts.RPC_REPLY)

        # collect errors before re-rooting; they may be siblings of the
        # payload
        for ele in xml_.iter_descendants(root, nc_consts.RPC_ERROR):
            reply.errors.append(RPCError.from_ele(ele))

        reply.data = xml_.new_root(body[0])

        err = classify(reply.errors, err_on_warning)
        if err is not None:
            LOG.debug('message-id=%s failed: %s', message_id, err)
            err.reply = reply
            raise err
        return reply

    @property
    def error(self):
        "First RPCError or None."
        return self.errors[0] if self.errors else None

    @property
    def data_ele(self):
        "Root element of data."
        return self.data.getroot() if self.data is not None else None

    @property
    def data_xml(self):
        return xml_.to_xml(self.data_ele) if self.data is not None else None

    def __repr__(self):
        return '<%s message-id=%s ok=%s errors=%d>' % (
            self.__class__.__name__, self.message_id, self.ok,
            len(self.errors))


class RPCMessage(object):
    """An <rpc> request carrying one or more operations.

    *methods* is a sequence of RPCMethod, rendered in order.
    """

    def __init__(self, methods, message_id=None, generator=None):
        if message_id is None:
            message_id = (generator or msgid.default_generator).next()
        self.message_id = message_id
        self.methods = list(methods)

    def marshal(self):
        "The complete request document as UTF-8 bytes."
        if not isinstance(self.message_id, str):
            raise exception.RPCEncodeError(
                reason='message-id must be str, not %s'
                % type(self.message_id).__name__)
        body = []
        for method in self.methods:
            render = getattr(method, 'marshal_method', None)
            if render is None:
                raise exception.RPCEncodeError(
                    reason='%r is not an rpc method' % (method,))
            fragment = render()
            if not isinstance(fragment, str):
                raise exception.RPCEncodeError(
                    reason='%r rendered %s' % (method,
                                               type(fragment).__name__))
            body.append(fragment)

        request = '%s<%s %s=%s xmlns="%s">%s</%s>' % (
            nc_consts.XML_HEADER, nc_consts.RPC, nc_consts.MESSAGE_ID,
            quoteattr(self.message_id), nc_consts.BASE_NS_1_0,
            ''.join(body), nc_consts.RPC)
        return request.encode('utf-8')

    def execute(self, transport, err_on_warning=False):
        """Send this request over *transport* and decode the one reply.

        Raises TransportError if sending or receiving fails; the request is
        never retried. Raises ReplyError if the reply cannot be decoded and
        RPCError if the device reported an error failing the call.
        """
        request = self.marshal()
        LOG.debug('sending message-id=%s (%d operations)',
                  self.message_id, len(self.methods))
        log.dump_rpc(LOG, 'TX', self.message_id, request)

        try:
            transport.send(request)
        except exception.TransportError:
            LOG.error('send failed for message-id=%s', self.message_id)
            raise
        except (OSError, EOFError) as e:
            LOG.error('send failed for message-id=%s: %s',
                      self.message_id, e)
            raise exception.TransportError(operation='send', reason=e)

        try:
            raw = transport.receive()
        except exception.TransportError:
            LOG.error('receive failed for message-id=%s', self.message_id)
            raise
        except (OSError, EOFError) as e:
            LOG.error('receive failed for message-id=%s: %s',
                      self.message_id, e)
            raise exception.TransportError(operation='receive', reason=e)

        log.dump_rpc(LOG, 'RX', self.message_id, raw)
        return RPCReply.parse(raw, err_on_warning, self.message_id)
