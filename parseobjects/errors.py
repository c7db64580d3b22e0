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

Exceptions raised by `parseobjects`.

Errors the library detects itself derive from `ParseError`. Failures of the
underlying transport (`httplib2.HttpLib2Error`, `socket.error` and friends)
are not wrapped: they reach the caller exactly as `httplib2` raised them.

"""

import http.client


class ParseError(Exception):
    """Base class for the errors raised by `parseobjects`."""
    pass


class InvalidArgument(ParseError, ValueError):
    """An exception raised when a caller-supplied argument can't be used.

    This is always raised before any request is sent: a destination that is
    `None` or a class rather than an instance, a user type that isn't a
    ``_User``, parameters that can't be encoded as JSON, and so on.

    """
    pass


class ProtocolError(ParseError, http.client.HTTPException):
    """An exception raised when the server answered, but not with something
    the request can be completed from.

    If the server sent a Parse error body (``{"code": 101, "error": "..."}``),
    its code and message are available as the `code` and `response_error`
    attributes. Otherwise both are `None`.

    """

    def __init__(self, message, code=None, response_error=None):
        super(ProtocolError, self).__init__(message)
        self.code = code
        self.response_error = response_error


class RequestError(ProtocolError):
    """A `ProtocolError` raised when the server reports an error in the
    client's request.

    This exception corresponds to the HTTP status code 400. The Parse API
    reports most of its semantic errors (bad login, duplicate username) with
    this status; check `code` for the specific reason.

    """
    pass


class Unauthorized(ProtocolError):
    """A `ProtocolError` raised when the server refuses the request's
    application keys or session token.

    This exception corresponds to the HTTP status code 401.

    """
    pass


class Forbidden(ProtocolError):
    """A `ProtocolError` raised when the request is authenticated but not
    allowed, such as writing an object whose ACL excludes the session's user.

    This exception corresponds to the HTTP status code 403.

    """
    pass


class NotFound(ProtocolError):
    """A `ProtocolError` raised when the server reports that the requested
    resource was not found."""
    pass


class ServerError(ProtocolError):
    """A `ProtocolError` raised when the server reports an unexpected error.

    This exception corresponds to the HTTP status codes 500 and up.

    """
    pass


class BadResponse(ProtocolError):
    """A `ProtocolError` raised for any other unusable response: an
    unexpected status, a body that isn't JSON, or JSON missing what the
    request needs (such as a login response without a ``sessionToken``)."""
    pass
