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
NETCONF operations rendered as request fragments

A fragment is the markup of one operation, e.g. '<lock>...</lock>', ready
to be placed inside an <rpc> envelope. Arguments are interpolated
verbatim: callers must escape any text that is not meant as markup.
"""

import abc

from ncrpc.lib.netconf import constants as nc_consts


EDIT_CONFIG_XML = ('<edit-config>'
                   '<target><%s/></target>'
                   '<default-operation>%s</default-operation>'
                   '<error-option>%s</error-option>'
                   '<config>%s</config>'
                   '</edit-config>')


class RPCMethod(object, metaclass=abc.ABCMeta):
    """Something that can be sent as the body of an rpc."""

    @abc.abstractmethod
    def marshal_method(self):
        """Return the markup of this operation as str."""


class RawMethod(str, RPCMethod):
    """An operation given as ready-made markup."""

    def marshal_method(self):
        return str(self)


def lock(target=nc_consts.CANDIDATE):
    return RawMethod('<lock><target><%s/></target></lock>' % target)


def unlock(target=nc_consts.CANDIDATE):
    return RawMethod('<unlock><target><%s/></target></unlock>' % target)


def get_config(source=nc_consts.RUNNING):
    return RawMethod(
        '<get-config><source><%s/></source></get-config>' % source)


def get(filter_type, data_xml):
    """<get> restricted by a filter.

    *filter_type* is 'subtree' or 'xpath'; *data_xml* becomes the filter
    body.
    """
    return RawMethod('<get><filter type="%s">%s</filter></get>'
                     % (filter_type, data_xml))


def edit_config(target, config,
                default_operation=nc_consts.MERGE,
                error_option=nc_consts.ROLLBACK_ON_ERROR):
    """<edit-config> loading *config* into the *target* datastore.

    *config* is the content of the <config> element, not including the
    element itself.
    """
    return RawMethod(EDIT_CONFIG_XML % (target, default_operation,
                                        error_option, config))


def validate(source=nc_consts.CANDIDATE):
    return RawMethod('<validate><source><%s/></source></validate>' % source)


def set_config(config):
    """Junos load-configuration of 'set' style text commands."""
    return RawMethod('<load-configuration action="set" format="text">'
                     '<configuration-set>%s</configuration-set>'
                     '</load-configuration>' % config)


def discard_changes():
    return RawMethod('<discard-changes/>')


def compare(rollback=0):
    """Junos diff of the candidate against rollback *rollback*."""
    return RawMethod('<get-configuration compare="rollback" '
                     'rollback="%d" format="text"/>' % rollback)


def commit(log=''):
    """Junos commit-configuration, recording *log* as the commit comment."""
    return RawMethod('<commit-configuration><log>%s</log>'
                     '</commit-configuration>' % log)
