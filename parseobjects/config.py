# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
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

Where a `ParseClient` sends its requests, and with which keys.

A client talks either to the versioned hosted API (``https://api.parse.com/1/``)
or to a self-hosted server mounted at some path (``http://localhost:1337/parse/``).
`ClientConfig` holds that choice; request variants read it to build their
URLs and never change it.

"""

import os
from urllib.parse import urlsplit

from parseobjects.errors import InvalidArgument


DEFAULT_HOST = 'api.parse.com'
DEFAULT_VERSION = '1'
DEFAULT_MOUNT_POINT = '/parse'


class ClientConfig(object):

    """The application keys and server location of a `ParseClient`.

    When `hosted` is true, request paths are rooted at `mount_point`;
    otherwise they are rooted at the API `version` segment.

    """

    def __init__(self, application_id, rest_api_key, master_key=None,
                 scheme='https', host=DEFAULT_HOST, version=DEFAULT_VERSION,
                 hosted=False, mount_point=DEFAULT_MOUNT_POINT):
        self.application_id = application_id
        self.rest_api_key = rest_api_key
        self.master_key = master_key
        self.scheme = scheme
        self.host = host
        self.version = version
        self.hosted = hosted
        self.mount_point = mount_point

    def __repr__(self):
        # Keys stay out of reprs, which end up in logs.
        return '<ClientConfig %s://%s/%s>' % (self.scheme, self.host,
                                             self.path_prefix().strip('/'))

    def is_hosted(self):
        return self.hosted

    def path_prefix(self):
        if self.is_hosted():
            return self.mount_point
        return self.version

    def validate(self):
        """Raises `InvalidArgument` if the configuration can't be used to
        make requests."""
        if not self.application_id:
            raise InvalidArgument('application_id is required')
        if not self.rest_api_key:
            raise InvalidArgument('rest_api_key is required')
        if self.scheme not in ('http', 'https'):
            raise InvalidArgument('scheme must be http or https, not %r' % (self.scheme,))
        if not self.host:
            raise InvalidArgument('host is required')
        return self

    @classmethod
    def from_server_url(cls, url, application_id, rest_api_key, master_key=None):
        """Returns a hosted configuration for the server at `url`, such as
        ``http://localhost:1337/parse``."""
        parts = urlsplit(url)
        mount_point = parts.path.rstrip('/') or '/'
        return cls(application_id, rest_api_key, master_key=master_key,
                   scheme=parts.scheme, host=parts.netloc, hosted=True,
                   mount_point=mount_point)

    @classmethod
    def from_environ(cls, environ=None):
        """Builds a configuration from environment variables.

        ``PARSE_APPLICATION_ID`` and ``PARSE_REST_API_KEY`` are required;
        ``PARSE_MASTER_KEY`` is optional. If ``PARSE_SERVER_URL`` is set the
        configuration is hosted at that URL, otherwise ``PARSE_SCHEME``,
        ``PARSE_HOST`` and ``PARSE_API_VERSION`` select the versioned API.

        """
        if environ is None:
            environ = os.environ

        application_id = environ.get('PARSE_APPLICATION_ID', '').strip()
        rest_api_key = environ.get('PARSE_REST_API_KEY', '').strip()
        master_key = environ.get('PARSE_MASTER_KEY', '').strip() or None

        server_url = environ.get('PARSE_SERVER_URL', '').strip()
        if server_url:
            config = cls.from_server_url(server_url, application_id,
                                         rest_api_key, master_key=master_key)
        else:
            config = cls(application_id, rest_api_key, master_key=master_key,
                         scheme=environ.get('PARSE_SCHEME', 'https').strip(),
                         host=environ.get('PARSE_HOST', DEFAULT_HOST).strip(),
                         version=environ.get('PARSE_API_VERSION', DEFAULT_VERSION).strip())
        return config.validate()
