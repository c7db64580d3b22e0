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

import unittest
from urllib.parse import parse_qs, urlsplit

import simplejson as json

from parseobjects import fields, request
from parseobjects.config import ClientConfig
from parseobjects.errors import InvalidArgument
from parseobjects.objects import AuthData, FacebookAuthData, ParseObject, User
from parseobjects.session import Session
from tests import utils


class GameScore(ParseObject):
    score = fields.Field()


class TestRequestVariants(unittest.TestCase):

    def setUp(self):
        self.versioned = utils.make_config()
        self.hosted = utils.make_config(hosted=True)
        self.session = Session(None, User(), 'r:tok123')

    def test_function_call(self):
        params = {'movie': 'The Matrix', 'ratings': [4, 5], 'extra': {'a': None}}
        r = request.FunctionCallRequest('averageStars', params)

        self.assertEqual(r.method(), 'POST')
        self.assertEqual(r.content_type(), 'application/json')
        self.assertEqual(json.loads(r.body()), params)
        self.assertFalse(r.use_master_key())
        self.assertTrue(r.bound_session() is None)
        self.assertEqual(r.endpoint(self.versioned),
            'https://api.parse.com/1/functions/averageStars')
        self.assertEqual(r.endpoint(self.hosted),
            'http://localhost:1337/parse/functions/averageStars')

    def test_function_call_params(self):
        r = request.FunctionCallRequest('hello', None, session=self.session)
        self.assertEqual(r.body(), '{}')
        self.assertTrue(r.bound_session() is self.session)

        params = {'name': 'alice'}
        r = request.FunctionCallRequest('hello', params)
        params['name'] = 'mallory'
        self.assertEqual(json.loads(r.body()), {'name': 'alice'},
            'params are copied when the request is built')

        self.assertRaises(InvalidArgument, request.FunctionCallRequest,
            'hello', {'when': object()})

    def test_password_login(self):
        r = request.PasswordLoginRequest('alice', 'secret')

        self.assertEqual(r.method(), 'GET')
        self.assertEqual(r.body(), '')
        self.assertEqual(r.content_type(), 'application/x-www-form-urlencoded')
        self.assertFalse(r.use_master_key())
        self.assertTrue(r.bound_session() is None)

        for config, prefix in ((self.versioned, '/1/login'), (self.hosted, '/parse/login')):
            url = urlsplit(r.endpoint(config))
            self.assertEqual(url.path, prefix)
            self.assertEqual(parse_qs(url.query),
                {'username': ['alice'], 'password': ['secret']})

    def test_password_login_escaping(self):
        r = request.PasswordLoginRequest('alice smith', 'p&ss=word')
        url = urlsplit(r.endpoint(self.versioned))
        self.assertEqual(parse_qs(url.query),
            {'username': ['alice smith'], 'password': ['p&ss=word']})

    def test_password_login_without_credentials(self):
        for username, password in (('', 'secret'), ('alice', ''), ('', '')):
            r = request.PasswordLoginRequest(username, password)
            self.assertEqual(r.endpoint(self.versioned), 'https://api.parse.com/1/login')

    def test_auth_data_login(self):
        facebook = FacebookAuthData(id='123456789', access_token='SaMpLeAAiZBLR995wxBa')
        r = request.AuthDataLoginRequest(AuthData(facebook=facebook))

        self.assertEqual(r.method(), 'POST')
        self.assertEqual(r.content_type(), 'application/x-www-form-urlencoded')
        self.assertFalse(r.use_master_key())
        self.assertEqual(json.loads(r.body()), {
            'authData': {
                'facebook': {'id': '123456789', 'access_token': 'SaMpLeAAiZBLR995wxBa'},
            },
        })
        self.assertEqual(r.endpoint(self.versioned), 'https://api.parse.com/1/users')
        self.assertEqual(r.endpoint(self.hosted), 'http://localhost:1337/parse/users')

        r = request.AuthDataLoginRequest({'anonymous': {'id': 'f0e1d2'}})
        self.assertEqual(json.loads(r.body()), {'authData': {'anonymous': {'id': 'f0e1d2'}}})

    def test_become(self):
        r = request.BecomeRequest(self.session)

        self.assertEqual(r.method(), 'GET')
        self.assertEqual(r.body(), '')
        self.assertEqual(r.content_type(), 'application/x-www-form-urlencoded')
        self.assertFalse(r.use_master_key())
        self.assertTrue(r.bound_session() is self.session)
        self.assertEqual(r.endpoint(self.versioned), 'https://api.parse.com/1/users/me')
        self.assertEqual(r.endpoint(self.hosted), 'http://localhost:1337/parse/users/me')

    def test_custom_mount_point(self):
        config = ClientConfig('app', 'key', scheme='http', host='example.com:8080',
                              hosted=True, mount_point='/api/v2/')
        r = request.FunctionCallRequest('hello', {})
        self.assertEqual(r.endpoint(config), 'http://example.com:8080/api/v2/functions/hello')

        config = ClientConfig('app', 'key', version='2')
        self.assertEqual(r.endpoint(config), 'https://api.parse.com/2/functions/hello')


class TestObjectRequests(unittest.TestCase):

    def setUp(self):
        self.config = utils.make_config()

    def test_create(self):
        score = GameScore.from_dict({'score': 1337, 'createdAt': '2011-08-20T02:06:57.931Z'})
        r = request.CreateRequest(score, use_master_key=True)

        self.assertEqual(r.method(), 'POST')
        self.assertEqual(r.content_type(), 'application/json')
        self.assertTrue(r.use_master_key())
        self.assertEqual(json.loads(r.body()), {'score': 1337})
        self.assertEqual(r.endpoint(self.config), 'https://api.parse.com/1/classes/GameScore')

    def test_user_collection(self):
        r = request.CreateRequest(User(username='bob'))
        self.assertEqual(r.endpoint(self.config), 'https://api.parse.com/1/users')

        r = request.GetRequest('_Role', 'abc')
        self.assertEqual(r.endpoint(self.config), 'https://api.parse.com/1/roles/abc')

    def test_delete(self):
        self.assertRaises(InvalidArgument, request.DeleteRequest, GameScore())

        r = request.DeleteRequest(GameScore(object_id='Ed1nuqPvcm'))
        self.assertEqual(r.method(), 'DELETE')
        self.assertEqual(r.body(), '')
        self.assertFalse(r.use_master_key())
        self.assertEqual(r.endpoint(self.config),
            'https://api.parse.com/1/classes/GameScore/Ed1nuqPvcm')

    def test_query(self):
        params = {'where': {'score': {'$gt': 1000}}, 'limit': 10, 'order': '-score'}
        r = request.QueryRequest('GameScore', params)

        self.assertEqual(r.method(), 'GET')
        url = urlsplit(r.endpoint(self.config))
        self.assertEqual(url.path, '/1/classes/GameScore')
        query = parse_qs(url.query)
        self.assertEqual(json.loads(query['where'][0]), {'score': {'$gt': 1000}})
        self.assertEqual(query['limit'], ['10'])
        self.assertEqual(query['order'], ['-score'])

    def test_update(self):
        ops = {'score': {'__op': 'Increment', 'amount': 1}}
        r = request.UpdateRequest(GameScore(object_id='Ed1nuqPvcm'), ops)

        self.assertEqual(r.method(), 'PUT')
        self.assertEqual(json.loads(r.body()), ops)
        self.assertEqual(r.endpoint(self.config),
            'https://api.parse.com/1/classes/GameScore/Ed1nuqPvcm')


if __name__ == '__main__':
    utils.log()
    unittest.main()
