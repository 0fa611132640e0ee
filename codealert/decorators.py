"""
Decorators for plugin command methods.

Command methods are called as method(player, parts), where parts is the
command line split on whitespace (parts[0] is the command name).
"""

import functools

from codealert.constants import MSG_NOPERMISSION


def player_only(func):
    "Decorator for commands that do nothing without a player to answer."
    @functools.wraps(func)
    def inner(self, player, parts):
        if player is None:
            return
        return func(self, player, parts)
    return inner


def permission_required(permission):
    "Decorator for commands gated on a host permission."
    def outer(func):
        @functools.wraps(func)
        def inner(self, player, parts):
            if not self.hasPermission(player, permission):
                self.messagePlayer(player, MSG_NOPERMISSION)
                return
            return func(self, player, parts)
        inner.permission = permission
        return inner
    return outer


def no_arguments(func):
    "Decorator for commands that take no arguments; extras are dropped."
    @functools.wraps(func)
    def inner(self, player, parts):
        return func(self, player, parts[:1])
    return inner
