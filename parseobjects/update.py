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

Updating saved objects.

An `Update` collects operations on one saved `ParseObject` and sends them
in a single request. Like a `Query`, each operation returns a new `Update`:

>>> update = client.new_update(score).increment('score', 10).set('cheat_mode', False)
>>> update.execute()

"""

from copy import deepcopy

from parseobjects.dataobject import get_class_name
from parseobjects.errors import BadResponse, InvalidArgument
from parseobjects.objects import ParseObject
from parseobjects.query import encode_value
from parseobjects.request import UpdateRequest, required_object_id


class Update(object):

    """A set of operations to apply to the saved `ParseObject` `obj`.

    Parameter `client` is the `ParseClient` to execute the update with. If
    `session` is given, the update runs as that session's user.

    """

    def __init__(self, obj, client, session=None, use_master_key=False):
        if not isinstance(obj, ParseObject):
            raise InvalidArgument('Cannot update %r: not a ParseObject instance' % (obj,))
        required_object_id(obj)
        self.obj = obj
        self.client = client
        self.session = session
        self.use_master_key = use_master_key
        self._ops = {}

    def __repr__(self):
        return '<Update %s %s %r>' % (get_class_name(self.obj),
                                     self.obj.object_id, self._ops)

    def api_name(self, key):
        try:
            return self.obj.fields[key].api_name
        except KeyError:
            return key

    def _with(self, key, op):
        update = Update(self.obj, self.client, session=self.session,
                        use_master_key=self.use_master_key)
        update._ops = deepcopy(self._ops)
        update._ops[self.api_name(key)] = op
        return update

    def set(self, key, value):
        return self._with(key, encode_value(value))

    def unset(self, key):
        return self._with(key, {'__op': 'Delete'})

    def increment(self, key, amount=1):
        return self._with(key, {'__op': 'Increment', 'amount': amount})

    def add(self, key, *values):
        return self._with(key, {'__op': 'Add', 'objects': encode_value(list(values))})

    def add_unique(self, key, *values):
        return self._with(key, {'__op': 'AddUnique', 'objects': encode_value(list(values))})

    def remove(self, key, *values):
        return self._with(key, {'__op': 'Remove', 'objects': encode_value(list(values))})

    def ops(self):
        return deepcopy(self._ops)

    def execute(self):
        """Sends the operations and updates `obj` with their outcome.

        Values set or unset are applied to `obj` directly; the results of the
        other operations (and the new ``updatedAt``) come from the server's
        response.

        """
        if not self._ops:
            raise InvalidArgument('No operations to update %r with' % (self.obj,))

        request = UpdateRequest(self.obj, self._ops,
            use_master_key=self.use_master_key, session=self.session)
        data = self.client.decode_response(self.client.do_request(request))
        if not isinstance(data, dict):
            raise BadResponse('Response updating %r is not an object: %r'
                % (self.obj, data))

        merged = self.obj.to_dict()
        for key, op in self._ops.items():
            if isinstance(op, dict) and '__op' in op:
                if op['__op'] == 'Delete':
                    merged.pop(key, None)
            else:
                merged[key] = op
        merged.update(data)
        self.obj.update_from_dict(merged)
        return self.obj
