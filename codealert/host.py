"""
The glue between the game server and its plugins.

PluginHost loads plugins, hands them the world and the host's services,
and dispatches hooks and chat commands to them. Exceptions from plugin
code are logged and never allowed back into the server loop.
"""

import os
import logging
import traceback

from zope.interface import implementer

from codealert.constants import *
from codealert.interfaces import IPermissions, ILocalizer, IMessenger
from codealert.plugins import load_plugin, unload_plugin, plugins_by_module_name


def describe(func):
    "Names a bound handler as Plugin.method for log lines."
    owner = getattr(func, "__self__", None)
    if owner is None:
        return getattr(func, "__name__", repr(func))
    return "%s.%s" % (owner.__class__.__name__, func.__name__)


@implementer(IPermissions)
class Permissions(object):

    "In-memory permission table: registered permissions and per-user grants."

    def __init__(self):
        self.registered = {}
        self.grants = {}

    def registerPermission(self, name, owner):
        name = name.lower()
        if name in self.registered:
            logging.log(logging.WARN, "Permission '%s' is already registered. Overriding." % name)
        self.registered[name] = owner

    def isRegistered(self, name):
        return name.lower() in self.registered

    def grantPermission(self, user_id, name):
        self.grants.setdefault(str(user_id), set()).add(name.lower())

    def revokePermission(self, user_id, name):
        self.grants.get(str(user_id), set()).discard(name.lower())

    def userHasPermission(self, user_id, name):
        return name.lower() in self.grants.get(str(user_id), set())


@implementer(ILocalizer)
class Localizer(object):

    """
    Message templates per plugin and language. Players get their own
    language if we have it, else the default; unknown keys come back as
    the key itself.
    """

    def __init__(self, default_language=DEFAULT_LANGUAGE):
        self.default_language = default_language
        self.messages = {}
        self.languages = {}

    def registerMessages(self, messages, owner, language=DEFAULT_LANGUAGE):
        table = self.messages.setdefault((owner.name, language), {})
        for key, value in messages.items():
            table.setdefault(key, value)

    def setLanguage(self, user_id, language):
        self.languages[str(user_id)] = language

    def getMessage(self, key, owner, user_id=None):
        language = self.default_language
        if user_id is not None:
            language = self.languages.get(str(user_id), self.default_language)
        for lang in (language, self.default_language):
            table = self.messages.get((owner.name, lang), {})
            if key in table:
                return table[key]
        return key


@implementer(IMessenger)
class PluginHost(object):

    """
    Holds everything plugins may touch. The world (players, locks, teams)
    belongs to the game; we only ever pass it through.
    """

    def __init__(self, world, data_dir=".", config_dir=".", permissions=None, localizer=None, agent=None):
        self.world = world
        self.data_dir = data_dir
        self.config_dir = config_dir
        self.permissions = permissions if permissions is not None else Permissions()
        self.localizer = localizer if localizer is not None else Localizer()
        # HTTP agent for plugins that talk to the outside; None means "make your own".
        self.agent = agent
        self.commands = {}
        self.hooks = {}
        self.plugins = []

    def dataPath(self, name):
        return os.path.join(self.data_dir, "%s.data" % name)

    def configPath(self, filename):
        return os.path.join(self.config_dir, filename)

    def log(self, message, level=logging.INFO):
        "Logs a line tagged as coming from the host."
        logging.log(level, "[host] %s" % message)

    def registerCommand(self, command, func):
        "Makes func answer /command. A later plugin claiming the name wins."
        command = command.lower()
        previous = self.commands.get(command)
        if previous is not None:
            self.log("/%s moves from %s to %s." % (command, describe(previous), describe(func)), logging.WARN)
        self.commands[command] = func

    def unregisterCommand(self, command, func):
        "Drops /command, unless someone else has taken it over since."
        command = command.lower()
        if self.commands.get(command) == func:
            del self.commands[command]
        elif command not in self.commands:
            self.log("/%s was never registered to %s." % (command, describe(func)), logging.WARN)

    def registerHook(self, hook, func):
        "Adds func to the handlers run, in order, for hook."
        self.hooks.setdefault(hook, []).append(func)

    def unregisterHook(self, hook, func):
        handlers = self.hooks.get(hook, [])
        if func in handlers:
            handlers.remove(func)
        else:
            self.log("Hook '%s' has no handler %s." % (hook, describe(func)), logging.WARN)

    def loadPlugin(self, plugin_class):
        plugin = plugin_class(self)
        self.plugins.append(plugin)
        self.log("Plugin '%s' v%s loaded." % (plugin.title or plugin.name, plugin.version))
        return plugin

    def unloadPlugin(self, plugin_class):
        "Unloads every instance of the given plugin class."
        for plugin in list(self.plugins):
            if isinstance(plugin, plugin_class):
                self.plugins.remove(plugin)
                plugin.unregister()

    def loadPluginModule(self, module_name):
        "Imports a plugin module and starts every plugin it defines."
        return [self.loadPlugin(plugin_class) for plugin_class in load_plugin(module_name)]

    def unloadPluginModule(self, module_name):
        for plugin_class in plugins_by_module_name(module_name):
            self.unloadPlugin(plugin_class)
        unload_plugin(module_name)

    def runHook(self, hook, *args, **kwds):
        """
        Runs the hook 'hook'. The first handler to return something other
        than None wins, and its result is returned.
        """
        for func in list(self.hooks.get(hook, [])):
            try:
                result = func(*args, **kwds)
            except Exception:
                self.log("Error in hook '%s':\n%s" % (hook, traceback.format_exc()), logging.ERROR)
                continue
            if result is not None:
                return result
        return None

    def runCommand(self, player, line):
        "Handles a chat command line (with or without the leading /)."
        parts = line.strip().lstrip("/").split()
        if not parts:
            return
        command = parts[0].lower()
        try:
            func = self.commands[command]
        except KeyError:
            if player is not None:
                self.sendReply(player, "Unknown command '%s'" % command)
            return
        try:
            func(player, parts)
        except Exception:
            self.log("Error in command '%s':\n%s" % (command, traceback.format_exc()), logging.ERROR)

    def sendReply(self, player, message):
        player.sendMessage(message)
