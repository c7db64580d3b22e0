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

Calling cloud functions.

A cloud function takes a JSON object of parameters and answers with
``{"result": ...}``. `call_function()` unwraps the result into the
destination the caller supplies:

>>> scores = []
>>> call_function(client, 'topScores', {'limit': 3}, scores)

"""

from parseobjects import fields
from parseobjects.dataobject import DataObject, check_destination, populate_value
from parseobjects.errors import BadResponse
from parseobjects.request import FunctionCallRequest


class Params(dict):
    """The parameters of a cloud function call, a mapping of names to JSON
    values."""
    pass


class FunctionResponse(DataObject):
    result = fields.Field()


def call_function(client, name, params, dst, session=None):
    """Calls the cloud function `name` with `params` and puts its result in
    `dst`, which is then returned.

    `dst` must be a `DataObject`, ``dict`` or ``list`` instance matching the
    shape of the function's result, or a `Value` to receive a result of any
    type; anything else raises `InvalidArgument` before any request is made.
    If `params` is `None`, the function is called with no parameters.

    When `session` is given, the call runs as that session's user.

    """
    check_destination(dst)

    request = FunctionCallRequest(name, params, session=session)
    content = client.do_request(request)

    data = client.decode_response(content)
    if not isinstance(data, dict):
        raise BadResponse('Response from function %s is not an object: %r'
            % (name, data))
    envelope = FunctionResponse.from_dict(data)
    return populate_value(dst, envelope.result)
