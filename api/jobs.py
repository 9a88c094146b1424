"""Jobs endpoint: list and create job listings through SheetDB."""

import asyncio
import logging
import os
import sys
from http.server import BaseHTTPRequestHandler

from dotenv import load_dotenv

# Add the src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from jobs_proxy.handler import handle
from jobs_proxy.models import ProxyRequest, ProxyResponse

load_dotenv()

logger = logging.getLogger("api.jobs")
logger.setLevel(logging.INFO)


class handler(BaseHTTPRequestHandler):
    """HTTP request handler for Vercel."""

    def do_GET(self):
        self._proxy()

    def do_POST(self):
        self._proxy()

    def do_PUT(self):
        self._proxy()

    def do_PATCH(self):
        self._proxy()

    def do_DELETE(self):
        self._proxy()

    def do_OPTIONS(self):
        self._proxy()

    def do_HEAD(self):
        self._proxy(send_body=False)

    def _read_body(self):
        content_length = int(self.headers.get('Content-Length', 0))
        return self.rfile.read(content_length) if content_length > 0 else None

    def _proxy(self, send_body=True):
        """Run the proxy handler and write its response."""
        try:
            request = ProxyRequest(method=self.command, body=self._read_body())
            result = asyncio.run(handle(request))
        except Exception as e:
            logger.exception("Error in /api/jobs: %s", e)
            result = ProxyResponse.error(500, "Internal Server Error")

        body = result.render()
        self.send_response(result.status_code)
        for name, value in result.headers.items():
            self.send_header(name, value)
        self.send_header('Content-Type', result.content_type)
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        if send_body:
            self.wfile.write(body)
