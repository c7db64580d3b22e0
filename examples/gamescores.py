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

A game score board for a Parse application, implemented using parseobjects.

Set ``PARSE_APPLICATION_ID`` and ``PARSE_REST_API_KEY`` (and
``PARSE_SERVER_URL`` for a self-hosted server) in the environment, then run:

    $ python gamescores.py --top
    $ python gamescores.py -u alice --mine
    $ python gamescores.py -u alice --post 1337

"""

__version__ = '1.0'


from getpass import getpass
import http.client
from optparse import OptionParser
import sys

from parseobjects import ClientConfig, ParseClient, ParseObject, fields


class GameScore(ParseObject):

    """A score posted by a player.

    Scores live in the ``GameScore`` class of the application, and each one
    points at the ``_User`` who posted it.

    """

    score       = fields.Field()
    player_name = fields.Field(api_name='playerName')
    owner       = fields.Field()

    def __str__(self):
        return "%6d  %s" % (self.score or 0, self.player_name)


def show_top(client, session, opts):
    print("## Top scores ##")
    query = client.new_query(GameScore) if session is None else session.new_query(GameScore)
    for score in query.order_by('-score').limit(opts.limit).find():
        print(str(score))


def show_mine(client, session, opts):
    print("## My scores ##")
    query = session.new_query(GameScore).equal_to('owner', session.user)
    for score in query.order_by('-score').limit(opts.limit).find():
        print(str(score))


def post_score(client, session, opts):
    score = GameScore(score=opts.score, player_name=session.user.username)
    session.create(score)
    session.new_update(score).set('owner', session.user).execute()

    rank = {}
    session.call_function('rankScore', {'score': opts.score}, rank)
    print("Posted %d as %s: rank %s" % (opts.score, score.object_id, rank.get('rank')))


def main(argv=None):
    if argv is None:
        argv = sys.argv

    parser = OptionParser()
    parser.add_option("-u", "--username", dest="username",
        help="name of user to log in as")
    parser.add_option("-n", "--limit", dest="limit", type="int", default=10,
        help="number of scores to show")
    parser.add_option("--top", action="store_const", const=show_top,
        dest="action", default=show_top,
        help="Show the best scores of all players")
    parser.add_option("--mine", action="store_const", const=show_mine,
        dest="action", help="Show your best scores (requires -u)")
    parser.add_option("--post", dest="score", type="int",
        help="Post a new score (requires -u)")
    opts, args = parser.parse_args(argv[1:])

    if opts.score is not None:
        opts.action = post_score
    if opts.action is not show_top and opts.username is None:
        parser.error("that action requires --username")

    client = ParseClient(ClientConfig.from_environ())

    session = None
    try:
        if opts.username is not None:
            password = getpass("Password: ")
            session = client.login(opts.username, password)

        print()
        opts.action(client, session, opts)
        print()
    except http.client.HTTPException as exc:
        # The server could be down, or the login could be wrong, so show the
        # error to the end user.
        print("Error making request: %s: %s" % (type(exc).__name__, str(exc)),
              file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
