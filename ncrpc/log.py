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

import configparser
import inspect
import logging
import logging.config
import logging.handlers
import os
import sys

from ncrpc import cfg


CONF = cfg.CONF

CONF.register_cli_opts([
    cfg.IntOpt('default-log-level', default=None,
               help='numeric level of the root logger'),
    cfg.BoolOpt('verbose', default=False, help='show debug output'),
    cfg.BoolOpt('use-stderr', default=True, help='log to standard error'),
    cfg.BoolOpt('use-syslog', default=False, help='output to syslog'),
    cfg.StrOpt('log-dir', default=None,
               help='directory for <program>.log when no log-file is set'),
    cfg.StrOpt('log-file', default=None, help='log file name'),
    cfg.StrOpt('log-file-mode', default='0644',
               help='default log file permission'),
    cfg.StrOpt('log-config-file', default=None,
               help='Path to a logging config file to use'),
    cfg.BoolOpt('log-rpc-xml', default=False,
                help='dump every rpc request and reply at debug level'),
])

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
SYSLOG_ADDRESS = '/dev/log'

_EARLY_LOG_HANDLER = None


def early_init_log(level=None):
    """Log to stderr until init_log() has read the configuration."""
    global _EARLY_LOG_HANDLER
    _EARLY_LOG_HANDLER = logging.StreamHandler(sys.stderr)

    log = logging.getLogger()
    log.addHandler(_EARLY_LOG_HANDLER)
    if level is not None:
        log.setLevel(level)


def _get_log_file():
    if CONF.log_file:
        return CONF.log_file
    if CONF.log_dir:
        # named after the script that started the process
        program = os.path.basename(inspect.stack()[-1][1])
        return os.path.join(CONF.log_dir, program) + '.log'
    return None


def _add_handler(log, handler):
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)


def init_log():
    """Configure the root logger from CONF.

    Applications that configure logging themselves need not call this;
    ncrpc modules only ever log through their module loggers.
    """
    global _EARLY_LOG_HANDLER

    log = logging.getLogger()

    if CONF.log_config_file:
        try:
            logging.config.fileConfig(CONF.log_config_file,
                                      disable_existing_loggers=False)
        # newer Pythons wrap parse failures in RuntimeError
        except (configparser.Error, RuntimeError) as e:
            print('Failed to parse %s: %s' % (CONF.log_config_file, e),
                  file=sys.stderr)
            sys.exit(2)
        return

    if CONF.use_stderr:
        _add_handler(log, logging.StreamHandler(sys.stderr))
    if _EARLY_LOG_HANDLER is not None:
        log.removeHandler(_EARLY_LOG_HANDLER)
        _EARLY_LOG_HANDLER = None

    if CONF.use_syslog:
        _add_handler(log, logging.handlers.SysLogHandler(
            address=SYSLOG_ADDRESS))

    log_file = _get_log_file()
    if log_file is not None:
        _add_handler(log, logging.handlers.WatchedFileHandler(log_file))
        os.chmod(log_file, int(CONF.log_file_mode, 8))

    if CONF.default_log_level is not None:
        log.setLevel(CONF.default_log_level)
    elif CONF.verbose:
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(logging.INFO)


def dump_rpc(logger, direction, message_id, data):
    """Log a raw request or reply when --log-rpc-xml is set.

    *direction* is 'TX' for a request, 'RX' for a reply.
    """
    if not CONF.log_rpc_xml or not logger.isEnabledFor(logging.DEBUG):
        return
    if isinstance(data, bytes):
        data = data.decode('utf-8', 'replace')
    logger.debug('%s message-id=%s: %s', direction, message_id, data)
