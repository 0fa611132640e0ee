"""
Plugin base class and the registry of loaded plugin classes.

Plugins are modules under codealert.plugins. Each defines one or more
HostPlugin subclasses; defining the class is enough to register it.
"""

import sys
import logging
import importlib

__all__ = ["HostPlugin", "load_plugin", "unload_plugin", "plugins_by_module_name"]

# module name -> list of plugin classes defined in it
plugins_by_module = {}


class PluginMetaclass(type):

    "Records every HostPlugin subclass against the module that defined it."

    def __new__(cls, name, bases, dct):
        new_cls = type.__new__(cls, name, bases, dct)
        if bases != (object,):
            module_name = dct["__module__"].split(".")[-1]
            plugins_by_module.setdefault(module_name, []).append(new_cls)
        return new_cls


class HostPlugin(object, metaclass=PluginMetaclass):

    """
    Base for plugins. Subclasses map chat command names and hook names to
    method names; those get registered with the host on construction.
    """

    name = None
    title = None
    version = "0.0.0"
    description = ""

    commands = {}
    hooks = {}

    def __init__(self, host):
        self.host = host
        for name, fname in self.commands.items():
            self.host.registerCommand(name, getattr(self, fname))
        for name, fname in self.hooks.items():
            self.host.registerHook(name, getattr(self, fname))
        self.gotHost()

    def gotHost(self):
        "Called once the plugin is attached to its host."
        pass

    def unloaded(self):
        "Called after the plugin's commands and hooks are gone."
        pass

    def unregister(self):
        for name, fname in self.commands.items():
            self.host.unregisterCommand(name, getattr(self, fname))
        for name, fname in self.hooks.items():
            self.host.unregisterHook(name, getattr(self, fname))
        self.unloaded()

    def log(self, message, level=logging.INFO):
        "Logs with the plugin's name in front."
        logging.log(level, "[%s] %s" % (self.name or self.__class__.__name__, message))


def plugins_by_module_name(module_name):
    return list(plugins_by_module.get(module_name, []))


def load_plugin(module_name):
    "Imports (or re-imports) the named plugin module, registering its plugins."
    full_name = "codealert.plugins.%s" % module_name
    if full_name in sys.modules:
        unload_plugin(module_name)
    importlib.import_module(full_name)
    logging.log(logging.INFO, "Loaded plugin module '%s'" % module_name)
    return plugins_by_module_name(module_name)


def unload_plugin(module_name):
    "Forgets the named module's plugin classes so it can be loaded again."
    plugins_by_module.pop(module_name, None)
    sys.modules.pop("codealert.plugins.%s" % module_name, None)
