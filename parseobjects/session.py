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

Sessions: acting as a logged-in user.

A `Session` is what a successful login returns. It holds the logged-in user
and the session token the server issued, and every operation started from it
(queries, updates, creates, deletes and function calls) sends that token, so
the server applies the user's permissions:

>>> session = client.login('alice', 'secret')
>>> session.user.username
'alice'
>>> mine = session.new_query(Note).equal_to('owner', session.user).find()

Without a session, the same operations started from the `ParseClient` run
anonymously.

A session never changes once made. Logging in again makes a new, separate
`Session`.

"""

import logging

from parseobjects.dataobject import DataObject, get_class_name, populate_value
from parseobjects.errors import BadResponse, InvalidArgument
from parseobjects.function import call_function
from parseobjects.objects import AuthData, User
from parseobjects.query import Query
from parseobjects.request import (AuthDataLoginRequest, BecomeRequest,
    PasswordLoginRequest)
from parseobjects.update import Update


USER_CLASS_NAME = '_User'

log = logging.getLogger('parseobjects.session')


class Session(object):

    """An authenticated user of a Parse application and their session token.

    Operations started from a `Session` are bound to it, and never fall back
    to running anonymously or as another session.

    """

    def __init__(self, client, user, session_token):
        self._client = client
        self._user = user
        self._session_token = session_token

    def __repr__(self):
        return '<Session %s>' % (getattr(self._user, 'username', None),)

    @property
    def client(self):
        return self._client

    @property
    def user(self):
        """The logged-in user, populated with the attributes the server
        returned."""
        return self._user

    @property
    def session_token(self):
        return self._session_token

    def new_query(self, cls):
        """Returns a `Query` for `cls` objects that runs as this session."""
        return Query(cls, self._client, session=self)

    def new_update(self, obj):
        """Returns an `Update` of `obj` that runs as this session."""
        return Update(obj, self._client, session=self)

    def create(self, obj):
        return self._client.create(obj, use_master_key=False, session=self)

    def delete(self, obj):
        return self._client.delete(obj, use_master_key=False, session=self)

    def call_function(self, name, params, dst, client=None):
        """Calls the cloud function `name` as this session's user. See
        `parseobjects.function.call_function()`.

        Optional parameter `client` is the `ParseClient` to call through,
        by default the client the session was made with.

        """
        if client is None:
            client = self._client
        return call_function(client, name, params, dst, session=self)


def validate_user(user):
    """Returns the destination for a login's user.

    With no `user`, a new `User` is returned. Otherwise `user` must be a
    `DataObject` instance whose class name is ``_User``, as it is for `User`
    and its subclasses, or `InvalidArgument` is raised.

    """
    if user is None:
        return User()
    if not isinstance(user, DataObject):
        raise InvalidArgument('user must be a DataObject instance, not %r' % (user,))
    if get_class_name(user) != USER_CLASS_NAME:
        raise InvalidArgument('user must be a parseobjects.User or have a class_name of %r, not %r'
            % (USER_CLASS_NAME, get_class_name(user)))
    return user


def handle_login_response(client, content, dst):
    """Returns the session token from a login response, after populating
    `dst` with the whole response.

    The response must be a JSON object with a string ``sessionToken``, or
    `BadResponse` is raised and `dst` is left alone.

    """
    data = client.decode_response(content)
    if not isinstance(data, dict):
        raise BadResponse('Login response is not an object: %r' % (data,))

    try:
        session_token = data['sessionToken']
    except KeyError:
        raise BadResponse('response did not contain sessionToken')
    if not isinstance(session_token, str):
        raise BadResponse('response sessionToken is not a string: %r' % (session_token,))

    populate_value(dst, data)
    return session_token


def _login(client, request, user):
    session_token = handle_login_response(client, client.do_request(request), user)
    log.debug('Logged in as %s', get_class_name(user))
    return Session(client, user, session_token)


def login(client, username, password, user=None):
    """Logs in with `username` and `password` and returns the new `Session`.

    Optional parameter `user` is the ``_User`` instance to populate with the
    user's attributes; by default a new `User` is made.

    """
    user = validate_user(user)
    return _login(client, PasswordLoginRequest(username, password), user)


def login_auth_data(client, auth_data, user=None):
    """Logs in with third-party credentials and returns the new `Session`.

    Parameter `auth_data` is an `AuthData` instance, or the equivalent
    dictionary keyed by provider. If no user has those credentials yet, the
    server signs one up.

    """
    user = validate_user(user)
    return _login(client, AuthDataLoginRequest(auth_data), user)


def login_facebook(client, facebook_auth_data, user=None):
    """Logs in with a `FacebookAuthData` (or equivalent dictionary) and
    returns the new `Session`."""
    if isinstance(facebook_auth_data, DataObject):
        auth_data = AuthData(facebook=facebook_auth_data)
    else:
        auth_data = {'facebook': facebook_auth_data}
    return login_auth_data(client, auth_data, user)


def become(client, session_token, user=None):
    """Returns a `Session` for the existing `session_token`.

    The user is fetched with the token and populated into `user` (by default
    a new `User`). The session keeps the token it was given.

    """
    user = validate_user(user)

    session = Session(client, user, session_token)
    content = client.do_request(BecomeRequest(session))
    populate_value(user, client.decode_response(content))
    log.debug('Resumed session as %s', get_class_name(user))
    return session
