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

Request variants: the shape of each HTTP call `parseobjects` can make.

A `ParseClient` executes every call the same way, by asking a `Request` for
its method, URL, body, content type, whether it needs the master key, and
which `Session` (if any) it runs as. Everything particular to one kind of
call lives in its `Request` subclass.

The variants are:

* `FunctionCallRequest`: ``POST functions/<name>`` with JSON parameters.
* `PasswordLoginRequest`: ``GET login`` with the credentials in the query.
* `AuthDataLoginRequest`: ``POST users`` with third-party ``authData``.
* `BecomeRequest`: ``GET users/me`` as an existing session.
* `CreateRequest`, `GetRequest`, `QueryRequest`, `UpdateRequest` and
  `DeleteRequest`: the object operations on a class's collection.

Requests are built for one call and not changed afterwards. Bodies are
encoded when the request is built, so a caller's later changes to the
parameters they passed have no effect on it.

"""

from urllib.parse import quote, urlencode, urlunsplit

import simplejson as json

from parseobjects.dataobject import DataObject, get_class_name
from parseobjects.errors import InvalidArgument


JSON_CONTENT_TYPE = 'application/json'
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

# Built-in classes live outside the classes/ collection.
special_collections = {
    '_User':         ('users',),
    '_Role':         ('roles',),
    '_Installation': ('installations',),
}


def build_url(config, segments, query=None):
    """Returns the absolute URL for the path `segments` under the
    configuration's path prefix (its mount point when hosted, its API
    version otherwise), with optional `query` parameters."""
    parts = [config.path_prefix()] + list(segments)
    parts = [quote(p.strip('/'), safe='/') for p in parts if p.strip('/')]
    path = '/' + '/'.join(parts)
    querystring = urlencode(query) if query else ''
    return urlunsplit((config.scheme, config.host, path, querystring, ''))


def collection_for(class_name):
    """Returns the path segments of the collection holding `class_name`
    objects."""
    try:
        return special_collections[class_name]
    except KeyError:
        return ('classes', class_name)


def encode_json(data):
    try:
        return json.dumps(data)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument('Cannot encode %r as JSON: %s' % (data, exc))


class Request(object):

    """The description of one HTTP call to a Parse server.

    Subclasses implement `method()` and `endpoint()`, and override the other
    methods where the call needs to.

    """

    def __init__(self, session=None):
        self._session = session

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self.method())

    def method(self):
        """Returns the HTTP method: one of ``GET``, ``POST``, ``PUT`` or
        ``DELETE``."""
        raise NotImplementedError

    def endpoint(self, config):
        """Returns the absolute URL of the call for the `ClientConfig`
        `config`."""
        raise NotImplementedError

    def body(self):
        """Returns the request body as text, or an empty string for calls
        without a body."""
        return ''

    def content_type(self):
        return FORM_CONTENT_TYPE

    def use_master_key(self):
        return False

    def bound_session(self):
        """Returns the `Session` the call runs as, or `None` for an anonymous
        call."""
        return self._session


class FunctionCallRequest(Request):

    """A call of the cloud function `name` with the parameters `params`."""

    def __init__(self, name, params, session=None):
        super(FunctionCallRequest, self).__init__(session=session)
        if params is None:
            params = {}
        self._name = name
        self._body = encode_json(params)

    def method(self):
        return 'POST'

    def endpoint(self, config):
        return build_url(config, ('functions', self._name))

    def body(self):
        return self._body

    def content_type(self):
        return JSON_CONTENT_TYPE


class PasswordLoginRequest(Request):

    """A login with a username and password.

    The credentials are sent as query parameters of a ``GET`` request, and
    only when both are non-empty.

    """

    def __init__(self, username, password):
        super(PasswordLoginRequest, self).__init__()
        self._username = username
        self._password = password

    def method(self):
        return 'GET'

    def endpoint(self, config):
        query = None
        if self._username and self._password:
            query = [('password', self._password), ('username', self._username)]
        return build_url(config, ('login',), query)


class AuthDataLoginRequest(Request):

    """A login (or sign up) with third-party credentials.

    Parameter `auth_data` is an `AuthData` instance or the equivalent
    dictionary, keyed by provider.

    """

    def __init__(self, auth_data):
        super(AuthDataLoginRequest, self).__init__()
        if isinstance(auth_data, DataObject):
            auth_data = auth_data.to_dict()
        self._body = encode_json({'authData': auth_data})

    def method(self):
        return 'POST'

    def endpoint(self, config):
        return build_url(config, ('users',))

    def body(self):
        return self._body


class BecomeRequest(Request):

    """A request for the user of an existing session, identified by the
    session's token."""

    def __init__(self, session):
        super(BecomeRequest, self).__init__(session=session)

    def method(self):
        return 'GET'

    def endpoint(self, config):
        return build_url(config, ('users', 'me'))


class ObjectRequest(Request):

    """Base of the requests for a class's collection of objects."""

    def __init__(self, class_name, use_master_key=False, session=None):
        super(ObjectRequest, self).__init__(session=session)
        self._class_name = class_name
        self._use_master_key = use_master_key

    def content_type(self):
        return JSON_CONTENT_TYPE

    def use_master_key(self):
        return self._use_master_key

    def collection(self):
        return collection_for(self._class_name)


def required_object_id(obj):
    object_id = getattr(obj, 'object_id', None)
    if not object_id:
        raise InvalidArgument('%r has no objectId' % (obj,))
    return object_id


class CreateRequest(ObjectRequest):

    """A request saving a new object to its class's collection."""

    def __init__(self, obj, use_master_key=False, session=None):
        super(CreateRequest, self).__init__(get_class_name(obj),
            use_master_key=use_master_key, session=session)
        self._body = encode_json(obj.writable_dict())

    def method(self):
        return 'POST'

    def endpoint(self, config):
        return build_url(config, self.collection())

    def body(self):
        return self._body


class GetRequest(ObjectRequest):

    """A request for the single object `object_id` of a class."""

    def __init__(self, class_name, object_id, use_master_key=False, session=None):
        super(GetRequest, self).__init__(class_name,
            use_master_key=use_master_key, session=session)
        self._object_id = object_id

    def method(self):
        return 'GET'

    def endpoint(self, config):
        return build_url(config, self.collection() + (self._object_id,))


class QueryRequest(ObjectRequest):

    """A request for the objects of a class matching a query.

    Parameter `params` is a dictionary of the query's ``where``, ``order``,
    ``limit``, ``skip``, ``keys``, ``include`` and ``count`` parameters, as
    the `parseobjects.query.Query` builder produces them.

    """

    def __init__(self, class_name, params, use_master_key=False, session=None):
        super(QueryRequest, self).__init__(class_name,
            use_master_key=use_master_key, session=session)
        query = []
        for key in sorted(params):
            value = params[key]
            if key == 'where':
                value = encode_json(value)
            query.append((key, value))
        self._query = query

    def method(self):
        return 'GET'

    def endpoint(self, config):
        return build_url(config, self.collection(), self._query)


class UpdateRequest(ObjectRequest):

    """A request applying the update operations `ops` to an object."""

    def __init__(self, obj, ops, use_master_key=False, session=None):
        super(UpdateRequest, self).__init__(get_class_name(obj),
            use_master_key=use_master_key, session=session)
        self._object_id = required_object_id(obj)
        self._body = encode_json(ops)

    def method(self):
        return 'PUT'

    def endpoint(self, config):
        return build_url(config, self.collection() + (self._object_id,))

    def body(self):
        return self._body


class DeleteRequest(ObjectRequest):

    """A request deleting an object from its class's collection."""

    def __init__(self, obj, use_master_key=False, session=None):
        super(DeleteRequest, self).__init__(get_class_name(obj),
            use_master_key=use_master_key, session=session)
        self._object_id = required_object_id(obj)

    def method(self):
        return 'DELETE'

    def endpoint(self, config):
        return build_url(config, self.collection() + (self._object_id,))
