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
Contains the functions that implement the :program:`tagsmith-hello` script.

.. autofunction:: main

.. autofunction:: page_template

.. autofunction:: render_page
"""

import sys
import logging
from socketserver import ThreadingMixIn
from http.server import HTTPServer, BaseHTTPRequestHandler

from .. import __version__, terminal, const
from ..escape import html as escape
from ..template import Placeholder
from ..tags import (
    doctype, html, head, title, script, link, body, main as main_, section,
    h1, ul, li, footer,
)


logger = logging.getLogger('tagsmith.hello')


WORLDS = {
    'en': 'Hello, World!',
    'eo': 'Saluton, Mondo!',
    'de': 'Hallo, Welt!',
    'es': '¡Hola, Mundo!',
    'fr': 'Bonjour, le Monde !',
    'it': 'Ciao, Mondo!',
    'nl': 'Hallo, Wereld!',
    'pt': 'Olá, Mundo!',
    'fi': 'Hei, maailma!',
    'sv': 'Hej, världen!',
    'cy': 'Helo, Byd!',
    'el': 'Γειά σου, Κόσμε!',
    'ru': 'Привет, мир!',
    'ja': 'こんにちは、世界!',
}

SAY_HELLO = """\
function sayHello() {
    alert('Hello, World!');
}"""


TITLE = Placeholder('title')
STYLE_SHEET = Placeholder('style_sheet')
SCRIPT = Placeholder('script')
INLINE_SCRIPT = Placeholder('inline_script')
MAIN_CONTENT = Placeholder('main_content')


def page_template():
    """
    Return the :class:`~tagsmith.template.Template` of the greeting page, with
    placeholders for the title, style-sheet, scripts, and main content.
    """
    return doctype()(
        html(lang='en')(
            head()(
                TITLE,
                STYLE_SHEET,
                SCRIPT,
                INLINE_SCRIPT,
            ),
            body()(
                main_(id='main-content')(
                    MAIN_CONTENT
                ),
                footer(id='footer')(),
            )
        )
    )


def render_page(template, worlds=None):
    """
    Render the page *template* (see :func:`page_template`) with a greeting for
    each of the *worlds* (a mapping of language codes to greetings, which
    defaults to :data:`WORLDS`).
    """
    if worlds is None:
        worlds = WORLDS
    greetings = ul(id='content')(
        li({'id': 'greeting-%d' % index, 'class': 'greetings', 'lang': lang})(
            escape(greeting)
        )
        for index, (lang, greeting) in enumerate(worlds.items())
    )
    return template.render({
        TITLE: title(id='title')('The Title'),
        # The builder of a void element is a deferred constructor; only its
        # start tag is substituted
        STYLE_SHEET: link(rel='stylesheet', href='styles.css'),
        SCRIPT: script(src='./script.js')(),
        INLINE_SCRIPT: script()(SAY_HELLO),
        MAIN_CONTENT: section(onclick='sayHello();')(
            h1()('Greetings from Around the World!'),
            greetings,
        ),
    })


class HelloHandler(BaseHTTPRequestHandler):
    """
    Serves the rendered greeting page at ``/``; every other path is not found.
    """
    server_version = 'tagsmith/%s' % __version__

    def do_GET(self):
        if self.path == '/':
            body = render_page(self.server.template).encode('utf-8')
            self.send_response(200)
            self.send_header('Content-Type', 'text/html; charset=utf-8')
            self.send_header('Content-Length', str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        else:
            self.send_response(404)
            self.send_header('Content-Length', '0')
            self.end_headers()

    def log_message(self, format, *args):
        # pylint: disable=redefined-builtin
        logger.info('%s - %s', self.address_string(), format % args)


class HelloServer(ThreadingMixIn, HTTPServer):
    """
    A threaded HTTP server holding the page :attr:`template` shared by all
    requests; rendering never modifies it so no locking is required.
    """
    daemon_threads = True

    def __init__(self, server_address, template=None):
        super().__init__(server_address, HelloHandler)
        if template is None:
            template = page_template()
        self.template = template


def main(args=None):
    """
    This is the main function for the :program:`tagsmith-hello` script. It
    serves a greeting page rendered from a template with
    :class:`HelloServer`, or prints the page once with ``--print``.
    """
    sys.excepthook = terminal.error_handler
    logging.getLogger().name = 'hello'
    parser = terminal.configure_parser("""\
The tagsmith-hello script serves a page of greetings from around the world,
rendered from a tagsmith template on every request.
""")
    parser.add_argument(
        '-b', '--bind', metavar='ADDR', default=const.HELLO_BIND,
        help="The address to listen on (default: %(default)s)")
    parser.add_argument(
        '-p', '--port', metavar='NUM', type=int, default=const.HELLO_PORT,
        help="The port to listen on (default: %(default)s)")
    parser.add_argument(
        '--print', dest='print_page', action='store_true',
        help="Print the rendered page to stdout and exit instead of serving it")
    config = parser.parse_args(args)
    terminal.configure_logging(config.log_level, config.log_file)

    logging.info("Tagsmith Hello version %s", __version__)
    if config.print_page:
        sys.stdout.write(render_page(page_template()))
        sys.stdout.write('\n')
        return 0

    server = HelloServer((config.bind, config.port))
    try:
        host, port = server.server_address[:2]
        logging.warning('Listening on: http://%s:%d/', host, port)
        server.serve_forever()
    except KeyboardInterrupt:
        logging.warning('Keyboard interrupt received; shutting down server')
    finally:
        server.server_close()
    return 0
