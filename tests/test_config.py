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

from parseobjects.config import ClientConfig
from parseobjects.errors import InvalidArgument
from tests import utils


class TestClientConfig(unittest.TestCase):

    def test_defaults(self):
        config = ClientConfig('app', 'key')
        self.assertEqual(config.scheme, 'https')
        self.assertEqual(config.host, 'api.parse.com')
        self.assertFalse(config.is_hosted())
        self.assertEqual(config.path_prefix(), '1')
        self.assertTrue(config.master_key is None)
        self.assertTrue(config.validate() is config)

    def test_from_server_url(self):
        config = ClientConfig.from_server_url('http://localhost:1337/parse/', 'app', 'key',
                                              master_key='master')
        self.assertTrue(config.is_hosted())
        self.assertEqual(config.scheme, 'http')
        self.assertEqual(config.host, 'localhost:1337')
        self.assertEqual(config.path_prefix(), '/parse')
        self.assertEqual(config.master_key, 'master')

        config = ClientConfig.from_server_url('https://parse.example.com', 'app', 'key')
        self.assertEqual(config.path_prefix(), '/')

    def test_repr_hides_keys(self):
        config = ClientConfig('app-id', 'rest-key', master_key='master-key')
        self.assertEqual(repr(config), '<ClientConfig https://api.parse.com/1>')
        self.assertTrue('master-key' not in repr(utils.make_client(master_key='master-key')))

    def test_validate(self):
        for args, kwargs in ((('', 'key'), {}), (('app', None), {}),
                             (('app', 'key'), {'scheme': 'ftp'}),
                             (('app', 'key'), {'host': ''})):
            self.assertRaises(InvalidArgument, ClientConfig(*args, **kwargs).validate)

    def test_from_environ(self):
        config = ClientConfig.from_environ({
            'PARSE_APPLICATION_ID': 'app',
            'PARSE_REST_API_KEY':   'key',
        })
        self.assertEqual(config.application_id, 'app')
        self.assertEqual(config.rest_api_key, 'key')
        self.assertTrue(config.master_key is None)
        self.assertFalse(config.is_hosted())
        self.assertEqual(config.host, 'api.parse.com')

        config = ClientConfig.from_environ({
            'PARSE_APPLICATION_ID': 'app',
            'PARSE_REST_API_KEY':   'key',
            'PARSE_MASTER_KEY':     'master',
            'PARSE_SERVER_URL':     'http://localhost:1337/parse',
        })
        self.assertTrue(config.is_hosted())
        self.assertEqual(config.master_key, 'master')
        self.assertEqual(config.host, 'localhost:1337')

        config = ClientConfig.from_environ({
            'PARSE_APPLICATION_ID': 'app',
            'PARSE_REST_API_KEY':   'key',
            'PARSE_HOST':           'parse.example.com',
            'PARSE_API_VERSION':    '2',
        })
        self.assertEqual(repr(config), '<ClientConfig https://parse.example.com/2>')

    def test_from_environ_missing(self):
        self.assertRaises(InvalidArgument, ClientConfig.from_environ, {})
        self.assertRaises(InvalidArgument, ClientConfig.from_environ,
            {'PARSE_APPLICATION_ID': 'app', 'PARSE_REST_API_KEY': '  '})


if __name__ == '__main__':
    utils.log()
    unittest.main()
