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

The objects a Parse application stores and the payloads it logs in with.

Subclass `ParseObject` for each class of your application. The remote class
name is the Python class name unless the class sets `class_name`:

>>> class GameScore(ParseObject):
...     score       = fields.Field()
...     player_name = fields.Field(api_name='playerName')
...

To log users in as your own type, subclass `User`; subclasses keep the
reserved ``_User`` class name the login calls require.

"""

from parseobjects import fields
from parseobjects.dataobject import DataObject


class ParseObject(DataObject):

    """A `DataObject` stored in a Parse class.

    Every Parse object has an ``objectId`` and its ``createdAt`` and
    ``updatedAt`` timestamps, which the server sets and a client never writes.

    """

    class_name = None

    read_only_keys = ('objectId', 'createdAt', 'updatedAt')

    object_id  = fields.Field(api_name='objectId')
    created_at = fields.Datetime(api_name='createdAt')
    updated_at = fields.Datetime(api_name='updatedAt')
    acl        = fields.Field(api_name='ACL')

    def writable_dict(self):
        """Encodes the object as the body of a create or update request,
        without the keys only the server may set."""
        data = self.to_dict()
        for key in self.read_only_keys:
            data.pop(key, None)
        return data


class User(ParseObject):

    """A user of a Parse application.

    Login responses are decoded into `User` instances unless the caller asks
    for another destination, which must also be a ``_User``.

    """

    class_name = '_User'

    username       = fields.Field()
    email          = fields.Field()
    email_verified = fields.Field(api_name='emailVerified')
    session_token  = fields.Field(api_name='sessionToken')
    auth_data      = fields.Field(api_name='authData')


class FacebookAuthData(DataObject):
    id              = fields.Field()
    access_token    = fields.Field()
    expiration_date = fields.Datetime()


class TwitterAuthData(DataObject):
    id                = fields.Field()
    screen_name       = fields.Field()
    consumer_key      = fields.Field()
    consumer_secret   = fields.Field()
    auth_token        = fields.Field()
    auth_token_secret = fields.Field()


class AnonymousAuthData(DataObject):
    id = fields.Field()


class AuthData(DataObject):

    """Third-party credentials to log in or sign up with, keyed by provider
    as the ``authData`` of a ``_User``."""

    facebook  = fields.Object(FacebookAuthData)
    twitter   = fields.Object(TwitterAuthData)
    anonymous = fields.Object(AnonymousAuthData)
