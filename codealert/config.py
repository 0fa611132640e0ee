"""
Plugin configuration: which version wrote the file, and where to send
webhook alerts (blank to disable).
"""

import os
import logging

from configparser import Error as ConfigError, RawConfigParser as ConfigParser

from codealert.constants import *


def version_tuple(version):
    "Turns '1.2.0' into (1, 2, 0) for comparing. Junk parts count as 0."
    parts = []
    for part in (version or "").split("."):
        try:
            parts.append(int(part))
        except ValueError:
            parts.append(0)
    return tuple(parts)


class Configuration(object):

    def __init__(self, path, version=PLUGIN_VERSION):
        self.path = path
        self.plugin_version = version
        self.version = version
        self.webhook_url = ""

    @classmethod
    def load(cls, path, version=PLUGIN_VERSION):
        """
        Loads the config at path, creating it with defaults if it isn't there,
        and upgrading it if an older plugin version wrote it. Always writes
        the result back out.
        """
        config = cls(path, version)
        if os.path.isfile(path):
            config.read()
            if version_tuple(config.version) < version_tuple(version):
                config.upgrade()
        else:
            logging.log(logging.INFO, "No config at %s; creating a default one." % path)
        config.save()
        return config

    def read(self):
        parser = ConfigParser()
        try:
            parser.read(self.path)
        except ConfigError as e:
            logging.log(logging.WARN, "Can't parse config %s (%s); using defaults." % (self.path, e))
            self.version = ""
            return
        if not parser.has_section(CONFIG_SECTION):
            logging.log(logging.WARN, "Config %s has no [%s] section; using defaults." % (self.path, CONFIG_SECTION))
            self.version = ""
            return
        if parser.has_option(CONFIG_SECTION, "version"):
            self.version = parser.get(CONFIG_SECTION, "version").strip()
        else:
            self.version = ""
        if parser.has_option(CONFIG_SECTION, "webhook_url"):
            self.webhook_url = parser.get(CONFIG_SECTION, "webhook_url").strip()

    def upgrade(self):
        "Brings a config written by an older version up to date."
        logging.log(logging.WARN, "Config changes detected! Updating...")
        old_version = self.version
        if version_tuple(old_version) < version_tuple(MINIMUM_CONFIG_VERSION):
            self.webhook_url = ""
        logging.log(logging.WARN, "Config update complete! Updated from version %s to %s" % (old_version, self.plugin_version))
        self.version = self.plugin_version

    def save(self):
        parser = ConfigParser()
        parser.add_section(CONFIG_SECTION)
        parser.set(CONFIG_SECTION, "version", self.version)
        parser.set(CONFIG_SECTION, "webhook_url", self.webhook_url)
        fp = open(self.path, "w")
        parser.write(fp)
        fp.close()

    @property
    def webhook_enabled(self):
        return bool(self.webhook_url)
