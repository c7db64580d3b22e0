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

parseobjects is a Python client for the Parse REST API, in which the objects
of your application are real subclassable Python objects.

parseobjects provides:

* typed objects, decoded from and encoded to the API's JSON through declared
  fields

* logins by password, by third-party credentials, or by resuming a session
  token, returning a `Session` whose operations all run as the logged-in user

* cloud function calls, queries, updates, creates and deletes, anonymously
  or as a session

* full HTTP support through the `httplib2` library


Example
=======

    >>> from parseobjects import ClientConfig, ParseClient, ParseObject, Value, fields
    >>> class Note(ParseObject):
    ...     text = fields.Field()
    ...
    >>> client = ParseClient(ClientConfig.from_server_url(
    ...     'http://localhost:1337/parse', 'myAppId', 'myRestKey'))
    >>> session = client.login('alice', 'secret')
    >>> session.create(Note(text='hi'))
    >>> greeting = Value()
    >>> session.call_function('hello', {}, greeting)

"""

__version__ = '1.0'

import parseobjects.dataobject
import parseobjects.fields as fields
from parseobjects.config import ClientConfig
from parseobjects.dataobject import (DataObject, Value, get_class_name,
    populate_value)
from parseobjects.errors import (BadResponse, Forbidden, InvalidArgument,
    NotFound, ParseError, ProtocolError, RequestError, ServerError,
    Unauthorized)
from parseobjects.function import Params, call_function
from parseobjects.http import ParseClient
from parseobjects.objects import (AnonymousAuthData, AuthData,
    FacebookAuthData, ParseObject, TwitterAuthData, User)
from parseobjects.query import Query
from parseobjects.session import Session
from parseobjects.update import Update

__all__ = ('ParseClient', 'ClientConfig', 'Session', 'DataObject',
           'ParseObject', 'User', 'AuthData', 'FacebookAuthData',
           'TwitterAuthData', 'AnonymousAuthData', 'Query', 'Update',
           'Params', 'Value', 'call_function', 'populate_value',
           'get_class_name', 'fields', 'ParseError', 'InvalidArgument',
           'ProtocolError', 'RequestError', 'Unauthorized', 'Forbidden',
           'NotFound', 'ServerError', 'BadResponse')
