# The tagsmith project
#   Copyright (c) 2017 Ben Nuttall <https://github.com/bennuttall>
#   Copyright (c) 2017 Dave Jones <dave@waveform.org.uk>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Console support shared by the tagsmith scripts: a :mod:`configargparse`
parser pre-loaded with the configuration and logging options, the matching
logging setup, and :data:`error_handler`, which turns markup errors escaping
a script into a one-line message and an exit code.
"""

import sys
import logging
import traceback
from collections import OrderedDict, namedtuple

import configargparse

from . import __version__, const
from .patterns import ValidationError
from .template import UnsupportedNodeError


# Messages logged before configure_logging is called go straight to stderr
_CONSOLE = logging.StreamHandler(sys.stderr)
_CONSOLE.setFormatter(logging.Formatter('%(message)s'))
_CONSOLE.setLevel(logging.DEBUG)
logging.getLogger().addHandler(_CONSOLE)


class ArgParser(configargparse.ArgParser):
    """
    A :class:`configargparse.ArgParser` which raises
    :exc:`configargparse.ArgumentError` on usage errors instead of exiting, so
    that they pass through :data:`error_handler` like any other error.
    """
    # pylint: disable=method-hidden
    def error(self, message):
        raise configargparse.ArgumentError(None, message)


class WidthFormatter(logging.Formatter):
    """
    A :class:`logging.Formatter` which cuts formatted messages down to
    *maxwidth* characters, ending them with *ellipsis*.
    """
    def __init__(self, fmt=None, datefmt=None, style='%', maxwidth=120,
                 ellipsis='...'):
        super().__init__(fmt, datefmt, style)
        self.maxwidth = maxwidth
        self.ellipsis = ellipsis

    def formatMessage(self, record):
        s = super().formatMessage(record)
        if len(s) <= self.maxwidth:
            return s
        return s[:self.maxwidth - len(self.ellipsis)] + self.ellipsis


def configure_parser(description, log_params=True):
    """
    Return an :class:`ArgParser` with *description* which reads defaults from
    the tagsmith configuration files (:data:`~tagsmith.const.CONFIG_FILES`) or
    the file given with ``--configuration``. Keys in configuration files which
    the script doesn't define are ignored, so one file can serve every script.

    When *log_params* is true, the ``--quiet``, ``--verbose`` and
    ``--log-file`` options are added; their values are intended for
    :func:`configure_logging`.
    """
    parser = ArgParser(
        description=description,
        add_config_file_help=False,
        add_env_var_help=False,
        default_config_files=const.CONFIG_FILES,
        ignore_unknown_config_file_keys=True
    )
    parser.add_argument(
        '--version', action='version', version=__version__)
    parser.add_argument(
        '-c', '--configuration', metavar='FILE', default=None,
        is_config_file=True, help='Specify a configuration file to load')
    if log_params:
        parser.add_argument(
            '-q', '--quiet', dest='log_level', action='store_const',
            const=logging.ERROR, help='Only report errors on the console')
        parser.add_argument(
            '-v', '--verbose', dest='log_level', action='store_const',
            const=logging.INFO, help='Report requests and progress on the '
            'console')
        parser.add_argument(
            '-l', '--log-file', metavar='FILE',
            help='Also log messages, with timestamps, to the specified file')
        parser.set_defaults(log_level=logging.WARNING)
    return parser


def configure_logging(log_level, log_filename=None):
    """
    Set the console handler to *log_level* and, if *log_filename* is given,
    add a timestamped file handler. The file always receives at least INFO
    messages, whatever the console level.
    """
    root = logging.getLogger()
    _CONSOLE.setLevel(log_level)
    _CONSOLE.setFormatter(WidthFormatter('%(message)s'))
    root.addHandler(_CONSOLE)
    file_level = min(logging.INFO, log_level)
    if log_filename is not None:
        log_file = logging.FileHandler(log_filename)
        log_file.setFormatter(WidthFormatter(
            '%(asctime)s %(name)s %(levelname)s: %(message)s'))
        log_file.setLevel(file_level)
        root.addHandler(log_file)
    root.setLevel(file_level)


class ErrorAction(namedtuple('ErrorAction', ('message', 'exitcode'))):
    """
    What :class:`ErrorHandler` does with an exception of the class it is
    registered against. *message* is an iterable of lines to log as critical
    messages (or ``None`` to log nothing) and *exitcode* is the exit code to
    return. Either may be a function accepting the exception info (type,
    value, traceback) and returning the lines or the exit code.
    """
    __slots__ = ()


def message_only(exc_type, exc_value, exc_tb):
    return [exc_value]


def usage_hint(exc_type, exc_value, exc_tb):
    return [exc_value, 'Try the --help option for more information.']


def exit_status(exc_type, exc_value, exc_tb):
    return exc_value


class ErrorHandler(OrderedDict):
    """
    Exception handler suitable for :data:`sys.excepthook`, which returns the
    exit code for the script.

    Errors caused by the markup a script builds (:exc:`ValidationError` for a
    bad tag or attribute, :exc:`UnsupportedNodeError` for bad content) and by
    its command line or environment are reported with their message alone.
    Anything else is logged with its full traceback.

    The handler is an ordered mapping of exception classes to
    :class:`ErrorAction` tuples (plain 2-tuples are converted on assignment).
    Classes are tried in registration order, so register specific classes
    before their bases.
    """
    def __init__(self):
        super().__init__()
        self[SystemExit] = (None, exit_status)
        self[KeyboardInterrupt] = (None, 2)
        self[ValidationError] = (message_only, 1)
        self[UnsupportedNodeError] = (message_only, 1)
        self[configargparse.ArgumentError] = (usage_hint, 2)
        self[OSError] = (message_only, 1)

    def __setitem__(self, key, value):
        super().__setitem__(key, ErrorAction(*value))

    def _find(self, exc_type):
        for exc_class, action in self.items():
            if issubclass(exc_type, exc_class):
                return action
        return None

    def __call__(self, exc_type, exc_value, exc_tb):
        action = self._find(exc_type)
        if action is None:
            for line in traceback.format_exception(exc_type, exc_value, exc_tb):
                for msg in line.rstrip().split('\n'):
                    logging.critical(msg.replace('%', '%%'))
            return 1
        message, exitcode = action
        if callable(message):
            message = message(exc_type, exc_value, exc_tb)
        if callable(exitcode):
            exitcode = exitcode(exc_type, exc_value, exc_tb)
        if message is not None:
            for line in message:
                logging.critical(line)
        return exitcode

error_handler = ErrorHandler()
