
from codealert.plugins import HostPlugin
from codealert.decorators import *
from codealert.constants import *
from codealert.config import Configuration
from codealert.store import PreferenceStore
from codealert.webhook import WebhookDispatcher
from codealert.grid import position_to_string


class FailedCodeAlertPlugin(HostPlugin):

    """
    Warns players when someone tries their code lock with the wrong code.
    The owner and their online teammates are told in chat; a webhook can
    be told too.
    """

    name = PLUGIN_NAME
    title = PLUGIN_TITLE
    version = PLUGIN_VERSION
    description = "Warns players when someone tries to access their code lock with the wrong code."

    commands = {
        "codealert": "commandCodealert",
    }

    hooks = {
        HOOK_CODEENTERED: "codeEntered",
    }

    def gotHost(self):
        self.config = Configuration.load(self.host.configPath(CONFIG_FILENAME), self.version)
        for permission in (PERM_USE, PERM_IGNORE):
            self.host.permissions.registerPermission(permission, self)
        self.host.localizer.registerMessages(DEFAULT_MESSAGES, self, DEFAULT_LANGUAGE)
        self.store = PreferenceStore.loadOrCreate(self.host.dataPath(self.name))
        if self.config.webhook_enabled:
            self.webhook = WebhookDispatcher(self.config.webhook_url, agent=self.host.agent)
        else:
            self.webhook = None

    def unloaded(self):
        self.webhook = None

    def codeEntered(self, code_lock, player, entered_code):
        "Someone typed a code into a lock; alert if it was the wrong one."
        if code_lock is None or player is None:
            return
        if self.hasPermission(player, PERM_IGNORE):
            return
        if code_lock.code == entered_code:
            return
        # The webhook doesn't care whether the owner muted in-game alerts.
        if self.webhook is not None:
            self.sendWebhookAlert(code_lock, player)
        if not self.store.isEnabled(code_lock.ownerID):
            return
        self.notifyLockOwners(code_lock, player)

    def notifyLockOwners(self, code_lock, intruder):
        "Tells the owner and each online teammate, once each."
        owner_id = code_lock.ownerID
        location = self.locationOf(code_lock)
        notified = set()
        for player_id in self.teamOf(owner_id):
            if player_id in notified:
                continue
            player = self.host.world.findPlayer(player_id)
            if player is not None and player.isConnected():
                self.messagePlayer(player, MSG_FAILEDATTEMPT, intruder.displayName, location)
                notified.add(player_id)
        return notified

    def teamOf(self, owner_id):
        "The owner first, then their team, as player IDs."
        yield owner_id
        team = self.host.world.findPlayersTeam(owner_id)
        if team is not None:
            for member_id in team.members:
                yield member_id

    def sendWebhookAlert(self, code_lock, intruder):
        owner_id = code_lock.ownerID
        owner = self.host.world.findPlayer(owner_id)
        if owner is not None:
            owner_name, owner_id_string = owner.displayName, owner.UserIDString
        else:
            owner_name = owner_id_string = str(owner_id)
        template = self.host.localizer.getMessage(MSG_WEBHOOKALERT, self)
        message = template.format(
            intruder.displayName,
            intruder.UserIDString,
            owner_name,
            owner_id_string,
            self.locationOf(code_lock),
        )
        return self.webhook.send(message)

    @player_only
    @permission_required(PERM_USE)
    @no_arguments
    def commandCodealert(self, player, parts):
        "/codealert - Turns code lock intrusion alerts on or off for you."
        if self.store.toggle(player.userID):
            self.messagePlayer(player, MSG_ALERTSENABLED)
        else:
            self.messagePlayer(player, MSG_ALERTSDISABLED)

    def locationOf(self, code_lock):
        return position_to_string(code_lock.position, self.host.world.size)

    def hasPermission(self, player, permission):
        return self.host.permissions.userHasPermission(player.UserIDString, permission)

    def getMessage(self, player, key, *args):
        message = self.host.localizer.getMessage(key, self, player.UserIDString)
        if args:
            message = message.format(*args)
        return message

    def messagePlayer(self, player, key, *args):
        self.host.sendReply(player, self.getMessage(player, key, *args))
