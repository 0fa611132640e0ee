"""
Constants shared by the host and the code alert plugin.
"""

PLUGIN_NAME = "FailedCodeAlert"
PLUGIN_TITLE = "Failed Code Alert"
PLUGIN_VERSION = "1.2.0"

# Oldest config version we know how to upgrade in place.
MINIMUM_CONFIG_VERSION = "1.0.0"

CONFIG_FILENAME = "codealert.conf"
CONFIG_SECTION = "codealert"
DATA_SECTION = "alerts"

# Permissions
PERM_IGNORE = "failedcodealert.ignore"
PERM_USE = "failedcodealert.use"

# Hook names
HOOK_CODEENTERED = "codeentered"

# Message keys
MSG_NOPERMISSION = "NoPermission"
MSG_FAILEDATTEMPT = "FailedAttempt"
MSG_ALERTSENABLED = "AlertsEnabled"
MSG_ALERTSDISABLED = "AlertsDisabled"
MSG_WEBHOOKALERT = "DiscordAlertMessage"

DEFAULT_LANGUAGE = "en"

DEFAULT_MESSAGES = {
    MSG_NOPERMISSION: "You do not have permission to use this command.",
    MSG_FAILEDATTEMPT: "Someone is trying to access your code lock at {1} but they failed! Intruder: {0}",
    MSG_ALERTSENABLED: "Code lock intrusion alerts enabled!",
    MSG_ALERTSDISABLED: "Code lock intrusion alerts disabled!",
    MSG_WEBHOOKALERT: "Intrusion alert: {0} ({1}) attempted to access code lock owned by {2} ({3}) at {4}",
}

# Map grid
GRID_CELL_SIZE = 146.3

WEBHOOK_HEADERS = {
    "Content-Type": "application/json",
}
