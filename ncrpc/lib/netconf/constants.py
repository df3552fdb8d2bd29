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

# based on RFC 6241 netconf.xsd

BASE_NS_1_0 = 'urn:ietf:params:xml:ns:netconf:base:1.0'
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'

# rpc
RPC = 'rpc'
MESSAGE_ID = 'message-id'      # message-id attribute

# rpc-reply
OK = 'ok'
RPC_REPLY = 'rpc-reply'
RPC_ERROR = 'rpc-error'

# rpc-error
ERROR_TYPE = 'error-type'
ERROR_TAG = 'error-tag'
ERROR_SEVERITY = 'error-severity'
ERROR_APP_TAG = 'error-app-tag'
ERROR_PATH = 'error-path'
ERROR_MESSAGE = 'error-message'
ERROR_INFO = 'error-info'

# error-severity
ERROR = 'error'
WARNING = 'warning'

# config-name
STARTUP = 'startup'
CANDIDATE = 'candidate'
RUNNING = 'running'

# default-operation
MERGE = 'merge'
REPLACE = 'replace'
NONE = 'none'

# error-option
STOP_ON_ERROR = 'stop-on-error'
CONTINUE_ON_ERROR = 'continue-on-error'
ROLLBACK_ON_ERROR = 'rollback-on-error'

# filter
SUBTREE = 'subtree'
XPATH = 'xpath'
