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

"Helpers for parsing and walking NETCONF documents with lxml."

import copy

from lxml import etree

from ncrpc import exception
from ncrpc.lib.netconf import constants as nc_consts


def qualify(tag, ns=nc_consts.BASE_NS_1_0):
    """Qualify a *tag* name with a *namespace* in ElementTree fashion,
    i.e. *{namespace}tagname*."""
    return tag if ns is None else '{%s}%s' % (ns, tag)


def local_name(ele):
    "Tag name of *ele* with any namespace stripped."
    return etree.QName(ele).localname


def to_ele(raw):
    """Parse a reply document into its root element.

    *raw* may be bytes or str; str is encoded as UTF-8 since lxml refuses
    unicode input that carries an encoding declaration.
    """
    if etree.iselement(raw):
        return raw
    if isinstance(raw, str):
        raw = raw.encode('utf-8')
    # device replies never need entity expansion or network access
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(raw, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise exception.XMLParseError(reason=e)


def to_xml(ele):
    "Serialize *ele* back to a str without an XML declaration."
    return etree.tostring(ele, encoding='unicode')


def children(ele):
    "Child elements of *ele*, skipping comments and processing instructions."
    return list(ele.iterchildren(tag=etree.Element))


def find_child(ele, name):
    "First child element of *ele* whose local name is *name*, or None."
    for child in ele.iterchildren(tag=etree.Element):
        if local_name(child) == name:
            return child
    return None


def iter_descendants(ele, name):
    """Yield *ele* and every element below it whose local name is *name*,
    in document order."""
    for e in ele.iter(tag=etree.Element):
        if local_name(e) == name:
            yield e


def text(ele):
    "Text content of *ele*; an empty string when *ele* is None or empty."
    if ele is None or ele.text is None:
        return ''
    return ele.text


def new_root(ele):
    """Detach *ele* from its parent and return an ElementTree rooted at it.

    The element is copied into a document of its own; its tail text, which
    belongs to the old parent, is dropped.
    """
    parent = ele.getparent()
    if parent is not None:
        parent.remove(ele)
    ele.tail = None
    return etree.ElementTree(copy.deepcopy(ele))
