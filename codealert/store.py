"""
Per-player alert preferences, kept in a small key-value file.
"""

import os
import logging

from configparser import Error as ConfigError, RawConfigParser as ConfigParser

from codealert.constants import DATA_SECTION


class PreferenceStore(object):

    """
    Maps player IDs to whether they want intrusion alerts. Players we've
    never heard from get alerts. Every change is written straight to disk.
    """

    def __init__(self, path):
        self.path = path
        self.alerts = {}

    @classmethod
    def loadOrCreate(cls, path):
        store = cls(path)
        if os.path.isfile(path):
            store.load()
        return store

    def load(self):
        config = ConfigParser()
        self.alerts = {}
        try:
            config.read(self.path)
        except ConfigError as e:
            logging.log(logging.WARN, "Can't parse alert preferences %s (%s); starting empty." % (self.path, e))
            return
        if not config.has_section(DATA_SECTION):
            return
        for key in config.options(DATA_SECTION):
            try:
                self.alerts[int(key)] = config.getboolean(DATA_SECTION, key)
            except ValueError:
                logging.log(logging.WARN, "Skipping bad alert preference '%s' in %s" % (key, self.path))

    def save(self):
        config = ConfigParser()
        config.add_section(DATA_SECTION)
        for player_id, enabled in sorted(self.alerts.items()):
            config.set(DATA_SECTION, str(player_id), "true" if enabled else "false")
        fp = open(self.path, "w")
        config.write(fp)
        fp.close()

    def isEnabled(self, player_id):
        return self.alerts.get(player_id, True)

    def toggle(self, player_id):
        "Flips the player's preference, saves, and returns the new state."
        enabled = not self.isEnabled(player_id)
        self.alerts[player_id] = enabled
        self.save()
        return enabled

    def __contains__(self, player_id):
        return player_id in self.alerts

    def __len__(self):
        return len(self.alerts)
