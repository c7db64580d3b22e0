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

Querying a class's objects.

A `Query` is built from constraints, each of which returns a new `Query`
equivalent to the old one but further constrained, so a query can be refined
in several directions without the branches affecting one another:

>>> recent = client.new_query(GameScore).greater_than('score', 1000)
>>> mine = recent.equal_to('player_name', 'Sean')
>>> best = recent.order_by('-score').limit(10).find()

Constraint keys may be attribute names of the queried class's fields; they
are translated to the fields' API names.

"""

from copy import deepcopy
from datetime import datetime

from parseobjects import fields
from parseobjects.dataobject import DataObject, get_class_name
from parseobjects.errors import BadResponse, InvalidArgument
from parseobjects.objects import ParseObject
from parseobjects.request import GetRequest, QueryRequest


date_field = fields.Date()


def encode_value(value):
    """Encodes a Python value for a query constraint or update operation.

    Saved `ParseObject` instances become pointers, `datetime` instances Parse
    dates, and lists are encoded element by element. Other values are
    returned unchanged.

    """
    if isinstance(value, ParseObject):
        return {
            '__type': 'Pointer',
            'className': get_class_name(value),
            'objectId': value.object_id,
        }
    if isinstance(value, datetime):
        return date_field.encode(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    return value


def is_operators(value):
    return isinstance(value, dict) and value and all(k.startswith('$') for k in value)


class Query(object):

    """A query for the objects of the `DataObject` class `cls`.

    Parameter `client` is the `ParseClient` to execute the query with. If
    `session` is given, the query runs as that session's user.

    """

    def __init__(self, cls, client, session=None, use_master_key=False):
        if not (isinstance(cls, type) and issubclass(cls, DataObject)):
            raise InvalidArgument('Cannot query %r: not a DataObject class' % (cls,))
        self.cls = cls
        self.client = client
        self.session = session
        self.use_master_key = use_master_key

        self._where = {}
        self._order = ()
        self._limit = None
        self._skip = None
        self._keys = ()
        self._include = ()

    def __repr__(self):
        return '<Query %s %r>' % (get_class_name(self.cls), self.params())

    def _replace(self, **changes):
        query = Query(self.cls, self.client, session=self.session,
                      use_master_key=self.use_master_key)
        query._where = deepcopy(self._where)
        query._order = self._order
        query._limit = self._limit
        query._skip = self._skip
        query._keys = self._keys
        query._include = self._include
        for name, value in changes.items():
            setattr(query, '_' + name, value)
        return query

    def api_name(self, key):
        try:
            return self.cls.fields[key].api_name
        except KeyError:
            return key

    def _constrain(self, key, operator, value):
        key = self.api_name(key)
        where = deepcopy(self._where)
        existing = where.get(key)
        if is_operators(existing):
            existing[operator] = value
        else:
            where[key] = {operator: value}
        return self._replace(where=where)

    def equal_to(self, key, value):
        where = deepcopy(self._where)
        where[self.api_name(key)] = encode_value(value)
        return self._replace(where=where)

    def not_equal_to(self, key, value):
        return self._constrain(key, '$ne', encode_value(value))

    def less_than(self, key, value):
        return self._constrain(key, '$lt', encode_value(value))

    def less_than_or_equal_to(self, key, value):
        return self._constrain(key, '$lte', encode_value(value))

    def greater_than(self, key, value):
        return self._constrain(key, '$gt', encode_value(value))

    def greater_than_or_equal_to(self, key, value):
        return self._constrain(key, '$gte', encode_value(value))

    def contained_in(self, key, values):
        return self._constrain(key, '$in', encode_value(list(values)))

    def not_contained_in(self, key, values):
        return self._constrain(key, '$nin', encode_value(list(values)))

    def exists(self, key):
        return self._constrain(key, '$exists', True)

    def does_not_exist(self, key):
        return self._constrain(key, '$exists', False)

    def order_by(self, *keys):
        """Orders results by `keys`, ascending unless a key is prefixed with
        ``-``. Replaces any previous ordering."""
        order = []
        for key in keys:
            if key.startswith('-'):
                order.append('-' + self.api_name(key[1:]))
            else:
                order.append(self.api_name(key))
        return self._replace(order=tuple(order))

    def limit(self, limit):
        return self._replace(limit=limit)

    def skip(self, skip):
        return self._replace(skip=skip)

    def keys(self, *keys):
        """Restricts the results to the given keys."""
        return self._replace(keys=tuple(self.api_name(k) for k in keys))

    def include(self, *keys):
        """Includes the objects the given pointer keys refer to."""
        return self._replace(include=tuple(self.api_name(k) for k in keys))

    def params(self):
        """Returns the query's parameters as a dictionary."""
        params = {}
        if self._where:
            params['where'] = self._where
        if self._order:
            params['order'] = ','.join(self._order)
        if self._limit is not None:
            params['limit'] = self._limit
        if self._skip is not None:
            params['skip'] = self._skip
        if self._keys:
            params['keys'] = ','.join(self._keys)
        if self._include:
            params['include'] = ','.join(self._include)
        return params

    def _execute(self, params):
        request = QueryRequest(get_class_name(self.cls), params,
            use_master_key=self.use_master_key, session=self.session)
        data = self.client.decode_response(self.client.do_request(request))
        if not isinstance(data, dict):
            raise BadResponse('Query response is not an object: %r' % (data,))
        return data

    def find(self):
        """Returns the matching objects as a list of `cls` instances."""
        data = self._execute(self.params())
        try:
            results = data['results']
        except KeyError:
            raise BadResponse('Query response has no results: %r' % (data,))
        return [self.cls.from_dict(result) for result in results]

    def first(self):
        """Returns the first matching object, or `None` if nothing matches."""
        params = self.params()
        params['limit'] = 1
        data = self._execute(params)
        results = data.get('results') or []
        if not results:
            return None
        return self.cls.from_dict(results[0])

    def count(self):
        """Returns how many objects match, without fetching them."""
        params = self.params()
        params['count'] = 1
        params['limit'] = 0
        data = self._execute(params)
        try:
            return int(data['count'])
        except (KeyError, TypeError, ValueError):
            raise BadResponse('Count response has no count: %r' % (data,))

    def get(self, object_id):
        """Returns the `cls` object with the given object ID. Other
        constraints of the query are not applied."""
        request = GetRequest(get_class_name(self.cls), object_id,
            use_master_key=self.use_master_key, session=self.session)
        data = self.client.decode_response(self.client.do_request(request))
        if not isinstance(data, dict):
            raise BadResponse('Response for %s %s is not an object: %r'
                % (get_class_name(self.cls), object_id, data))
        return self.cls.from_dict(data)
