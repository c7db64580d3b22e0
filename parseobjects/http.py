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

`ParseClient`, which executes requests against a Parse server through
`httplib2`.

Every call the library makes, from a login to a query, is described by a
`parseobjects.request.Request` and executed by `ParseClient.do_request()`:
the one place where headers are attached, the exchange happens, and
unsuccessful responses become exceptions.

"""

import http.client
import logging
from urllib.parse import urlsplit

import httplib2
import simplejson as json

import parseobjects.function
import parseobjects.session
from parseobjects.dataobject import get_class_name
from parseobjects.errors import (BadResponse, Forbidden, InvalidArgument,
    NotFound, RequestError, ServerError, Unauthorized)
from parseobjects.objects import ParseObject
from parseobjects.query import Query
from parseobjects.request import CreateRequest, DeleteRequest
from parseobjects.update import Update

userAgent = httplib2.Http()

log = logging.getLogger('parseobjects.http')


def loggable_url(url):
    """Returns `url` without its query string, which may hold credentials."""
    return urlsplit(url)._replace(query='').geturl()


class ParseClient(object):

    """A client of one Parse application.

    Parameter `config` is the `ClientConfig` naming the server and the
    application's keys. Optional parameter `http` is the user agent object to
    make requests with; it should be compatible with `httplib2.Http`
    instances. By default a module-wide `httplib2.Http` is used.

    """

    response_has_content = {
        http.client.OK:      True,
        http.client.CREATED: True,
    }

    content_types = ('application/json',)

    def __init__(self, config, http=None):
        self.config = config
        self.http = http

    def __repr__(self):
        return '<ParseClient %r>' % (self.config,)

    def get_request(self, request):
        """Returns the parameters for executing `request` as a dictionary of
        keyword arguments suitable for passing to `httplib2.Http.request()`.

        The application's keys are always sent. The master key is added when
        the request requires it, and the session token when the request is
        bound to a session.

        """
        config = self.config
        headers = {
            'accept': ', '.join(self.content_types),
            'content-type': request.content_type(),
            'x-parse-application-id': config.application_id,
            'x-parse-rest-api-key': config.rest_api_key,
        }

        if request.use_master_key():
            if not config.master_key:
                raise InvalidArgument('%r requires a master key, but none is configured'
                    % (request,))
            headers['x-parse-master-key'] = config.master_key

        bound = request.bound_session()
        if bound is not None:
            headers['x-parse-session-token'] = bound.session_token

        # Use 'uri' because httplib2.request does.
        kwargs = dict(uri=request.endpoint(config), method=request.method(),
                      headers=headers)
        body = request.body()
        if body:
            kwargs['body'] = body
        return kwargs

    def do_request(self, request):
        """Executes `request` and returns the body of the server's response.

        Unsuccessful responses raise the matching `ProtocolError` (see
        `raise_for_response()`). Errors from the user agent itself, such as a
        refused connection, are raised unchanged.

        """
        kwargs = self.get_request(request)
        url = kwargs['uri']

        http = self.http
        if http is None:
            http = userAgent

        log.debug('Requesting %s %s', kwargs['method'], loggable_url(url))
        response, content = http.request(**kwargs)
        log.debug('Got %d %s for %s %s', response.status, response.reason,
                  kwargs['method'], loggable_url(url))

        self.raise_for_response(url, response, content)
        return content

    @classmethod
    def raise_for_response(cls, url, response, content):
        """Raises exceptions corresponding to unsuccessful HTTP responses.

        Parse reports errors as a JSON body such as ``{"code": 101, "error":
        "invalid login parameters"}``; when the body has that shape, its code
        and message are set on the raised exception.

        """
        url = loggable_url(url)
        if response.status >= 400:
            code, error = cls.parse_error_body(content)

            if response.status == http.client.BAD_REQUEST:
                err_cls = RequestError
            elif response.status == http.client.UNAUTHORIZED:
                err_cls = Unauthorized
            elif response.status == http.client.FORBIDDEN:
                err_cls = Forbidden
            elif response.status == http.client.NOT_FOUND:
                err_cls = NotFound
            elif response.status >= 500:
                err_cls = ServerError
            else:
                err_cls = BadResponse

            message = '%d %s requesting %s' % (response.status, response.reason, url)
            if error is not None:
                message = '%s: %s' % (message, error)
            raise err_cls(message, code=code, response_error=error)

        if not cls.response_has_content.get(response.status):
            # we only expect the statuses that we know have content
            raise BadResponse('Unexpected response requesting %s: %d %s'
                % (url, response.status, response.reason))

        # check that the response body was json
        content_type = response.get('content-type', '').split(';', 1)[0].strip()
        if content_type not in cls.content_types:
            raise BadResponse(
                'Bad response requesting %s: content-type %s is not an expected type'
                % (url, response.get('content-type')))

    @classmethod
    def parse_error_body(cls, content):
        """Returns the code and message of a Parse error body, or a pair of
        `None` if `content` isn't one."""
        try:
            data = cls.decode_response(content)
        except BadResponse:
            return None, None
        if not isinstance(data, dict):
            return None, None
        return data.get('code'), data.get('error')

    @staticmethod
    def decode_response(content):
        """Decodes a JSON response body.

        Bytes that aren't valid UTF-8 are replaced with the Unicode
        Replacement Character rather than failing the whole response.

        """
        if isinstance(content, bytes):
            content = content.decode('utf-8', 'replace')
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise BadResponse('Response is not valid JSON: %s' % (exc,))

    def call_function(self, name, params, dst):
        """Calls the cloud function `name` anonymously. See
        `parseobjects.function.call_function()`."""
        return parseobjects.function.call_function(self, name, params, dst)

    def login(self, username, password, user=None):
        """Logs in with a username and password, returning a `Session`.

        Optional parameter `user` is the `User` (or subclass) instance to
        populate with the user's attributes; a new `User` is used if it is not
        given. It is available afterward as the session's `user`.

        """
        return parseobjects.session.login(self, username, password, user)

    def login_auth_data(self, auth_data, user=None):
        """Logs in (signing up if needed) with third-party credentials,
        returning a `Session`."""
        return parseobjects.session.login_auth_data(self, auth_data, user)

    def login_facebook(self, facebook_auth_data, user=None):
        return parseobjects.session.login_facebook(self, facebook_auth_data, user)

    def become(self, session_token, user=None):
        """Returns the `Session` for an existing session token, after loading
        its user."""
        return parseobjects.session.become(self, session_token, user)

    def new_query(self, cls, use_master_key=False):
        return Query(cls, self, use_master_key=use_master_key)

    def new_update(self, obj, use_master_key=False):
        return Update(obj, self, use_master_key=use_master_key)

    def get(self, cls, object_id, use_master_key=False, session=None):
        """Fetches the `cls` object with the given object ID."""
        query = Query(cls, self, session=session, use_master_key=use_master_key)
        return query.get(object_id)

    def create(self, obj, use_master_key=False, session=None):
        """Saves `obj`, a new `ParseObject`, to its class.

        The ``objectId`` and ``createdAt`` the server assigns are added to
        `obj`, which is then returned.

        """
        if not isinstance(obj, ParseObject):
            raise InvalidArgument('Cannot create %r: not a ParseObject instance' % (obj,))

        request = CreateRequest(obj, use_master_key=use_master_key, session=session)
        data = self.decode_response(self.do_request(request))
        if not isinstance(data, dict):
            raise BadResponse('Response creating %r is not an object: %r' % (obj, data))

        merged = obj.to_dict()
        merged.update(data)
        obj.update_from_dict(merged)
        log.debug('Created %s %s', get_class_name(obj), obj.object_id)
        return obj

    def delete(self, obj, use_master_key=False, session=None):
        """Deletes `obj`, a saved `ParseObject`, from its class."""
        if not isinstance(obj, ParseObject):
            raise InvalidArgument('Cannot delete %r: not a ParseObject instance' % (obj,))

        request = DeleteRequest(obj, use_master_key=use_master_key, session=session)
        self.do_request(request)
        log.debug('Deleted %s %s', get_class_name(obj), obj.object_id)
