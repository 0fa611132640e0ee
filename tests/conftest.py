"""Fake game objects and fixtures shared by the tests."""

import pytest
from twisted.internet import defer
from twisted.python.failure import Failure
from twisted.web.client import ResponseDone
from zope.interface import implementer

from codealert.constants import PERM_USE, CONFIG_FILENAME, CONFIG_SECTION, PLUGIN_VERSION
from codealert.host import PluginHost
from codealert.interfaces import IPlayer, ICodeLock, ITeam, IWorld
from codealert.plugins.failedcodealert import FailedCodeAlertPlugin


@implementer(IPlayer)
class FakePlayer(object):

    def __init__(self, user_id, name, connected=True):
        self.userID = user_id
        self.UserIDString = str(user_id)
        self.displayName = name
        self.connected = connected
        self.messages = []

    def isConnected(self):
        return self.connected

    def sendMessage(self, message):
        self.messages.append(message)


@implementer(ICodeLock)
class FakeCodeLock(object):

    def __init__(self, owner_id, code="1234", position=(0.0, 0.0, 0.0)):
        self.ownerID = owner_id
        self.code = code
        self.position = position


@implementer(ITeam)
class FakeTeam(object):

    def __init__(self, members):
        self.members = list(members)


@implementer(IWorld)
class FakeWorld(object):

    def __init__(self, size=None):
        self.size = size
        self.players = {}
        self.teams = {}

    def addPlayer(self, player):
        self.players[player.userID] = player
        return player

    def addTeam(self, members):
        team = FakeTeam(members)
        for member_id in members:
            self.teams[member_id] = team
        return team

    def findPlayer(self, player_id):
        return self.players.get(player_id)

    def findPlayersTeam(self, player_id):
        return self.teams.get(player_id)


class FakeResponse(object):

    phrase = b"OK"

    def __init__(self, code, body=b""):
        self.code = code
        self.body = body

    def deliverBody(self, protocol):
        protocol.dataReceived(self.body)
        protocol.connectionLost(Failure(ResponseDone()))


class FakeAgent(object):

    "Answers every request immediately with a canned response (or failure)."

    def __init__(self, response=None, error=None, raises=None):
        self.response = response if response is not None else FakeResponse(204)
        self.error = error
        # Raised straight out of request(), the way Agent rejects bad URIs.
        self.raises = raises
        self.requests = []

    def request(self, method, uri, headers=None, bodyProducer=None):
        self.requests.append((method, uri, headers, bodyProducer))
        if self.raises is not None:
            raise self.raises
        if self.error is not None:
            return defer.fail(self.error)
        return defer.succeed(self.response)


def write_config(directory, webhook_url="", version=PLUGIN_VERSION):
    path = directory / CONFIG_FILENAME
    path.write_text("[%s]\nversion = %s\nwebhook_url = %s\n" % (CONFIG_SECTION, version, webhook_url))
    return path


@pytest.fixture
def world():
    return FakeWorld(size=2048)


@pytest.fixture
def agent():
    return FakeAgent()


@pytest.fixture
def host(tmp_path, world, agent):
    return PluginHost(world, data_dir=str(tmp_path), config_dir=str(tmp_path), agent=agent)


@pytest.fixture
def plugin(host):
    return host.loadPlugin(FailedCodeAlertPlugin)


@pytest.fixture
def webhook_plugin(tmp_path, host):
    write_config(tmp_path, webhook_url="https://hooks.example.com/alert")
    return host.loadPlugin(FailedCodeAlertPlugin)


@pytest.fixture
def owner(world, host):
    player = world.addPlayer(FakePlayer(76561198000000001, "Owner"))
    host.permissions.grantPermission(player.UserIDString, PERM_USE)
    return player


@pytest.fixture
def intruder(world):
    return world.addPlayer(FakePlayer(76561198000000666, "Raider"))
