"""
Interfaces for the things the game host hands to plugins.

The host owns the world: players, code locks and teams all come from it,
and plugins only ever read them. Services (permissions, localization,
chat) are likewise provided by the host.
"""

from zope.interface import Interface, Attribute


class IPlayer(Interface):

    userID = Attribute("Numeric player ID.")
    UserIDString = Attribute("The player ID as a string, as used by permissions.")
    displayName = Attribute("Name shown to other players.")

    def isConnected():
        "Returns True if the player is currently online."

    def sendMessage(message):
        "Shows a chat message to this player."


class ICodeLock(Interface):

    ownerID = Attribute("Numeric player ID of the lock's owner.")
    code = Attribute("The real code, as a string.")
    position = Attribute("World position of the lock, an (x, y, z) tuple.")


class ITeam(Interface):

    members = Attribute("Iterable of the numeric player IDs in the team.")


class IWorld(Interface):

    size = Attribute("Edge length of the (square) map, or None if unknown.")

    def findPlayer(player_id):
        "Returns the player with the given ID, online or not, or None."

    def findPlayersTeam(player_id):
        "Returns the team the given player is in, or None."


class IPermissions(Interface):

    def registerPermission(name, owner):
        "Declares a permission, owned by the given plugin."

    def userHasPermission(user_id, name):
        "Says if the user (by ID string) holds the permission."


class ILocalizer(Interface):

    def registerMessages(messages, owner, language="en"):
        "Registers a dict of message key -> template for the plugin."

    def getMessage(key, owner, user_id=None):
        "Returns the template for key in the user's language (or the default)."


class IMessenger(Interface):

    def sendReply(player, message):
        "Sends a chat message to one player."
