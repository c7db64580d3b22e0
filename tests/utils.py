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

import logging

import httplib2
import mock

from parseobjects import ClientConfig, ParseClient


APP_ID = 'app-id'
REST_KEY = 'rest-key'
MASTER_KEY = 'master-key'


def make_config(hosted=False, master_key=None):
    if hosted:
        return ClientConfig.from_server_url('http://localhost:1337/parse',
            APP_ID, REST_KEY, master_key=master_key)
    return ClientConfig(APP_ID, REST_KEY, master_key=master_key)


def make_client(http=None, hosted=False, master_key=None):
    return ParseClient(make_config(hosted=hosted, master_key=master_key), http=http)


def headers(content_type='application/x-www-form-urlencoded', **extra):
    """Returns the headers a client sends, plus `extra` ones given with
    underscores for dashes."""
    headers = {
        'accept':                 'application/json',
        'content-type':           content_type,
        'x-parse-application-id': APP_ID,
        'x-parse-rest-api-key':   REST_KEY,
    }
    for key, value in extra.items():
        headers[key.replace('_', '-')] = value
    return headers


def make_response(response):
    default_response = {
        'status':       200,
        'content-type': 'application/json; charset=utf-8',
    }

    if isinstance(response, dict):
        response = dict(response)
        content = response.pop('content', '')
        status = response.get('status', 200)
        if 200 <= status < 300:
            response_info = dict(default_response)
            response_info.update(response)
        else:
            # Use specified headers only.
            response_info = dict(response)
    else:
        response_info = dict(default_response)
        content = response

    return httplib2.Response(response_info), content


def mock_http(*responses):
    """Returns a mock `httplib2.Http` answering its requests with the given
    responses in order.

    Each response is either the content of a 200 JSON response, or a
    dictionary of response headers (with ``status``) and ``content``.

    """
    http = mock.NonCallableMock(spec_set=httplib2.Http)
    http.request.side_effect = [make_response(r) for r in responses]
    return http


def log():
    import sys
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(asctime)s %(levelname)s %(message)s")
