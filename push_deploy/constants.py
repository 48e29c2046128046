"""Global constants for push-deploy"""

APP_NAME = "push-deploy"
LOG_FORMAT = "%(message)s"

# Deployment base layout
REPO_DIR_NAME = "repo.git"
VERSIONS_DIR_NAME = "versions"
WORK_DIR_NAME = "work"
CURRENT_LINK_NAME = "current"
DEPLOYMENT_LOCK_FILE = ".deploy.lock"
PROJECT_CONFIG_FILE = "push-deploy.yaml"
POST_RECEIVE_HOOK = "hooks/post-receive"

# Push trigger
DEFAULT_PRIMARY_REF = "refs/heads/master"

# Service discovery
DEFAULT_SYSTEMD_DIRS = [
    "/etc/systemd/system",
    "/lib/systemd/system",
    "/usr/lib/systemd/system",
    "/etc/init.d",
]
DEFAULT_APACHE2_DIRS = [
    "/etc/apache2/",
    "/var/www",
]
DEFAULT_WEB_SERVER_SERVICE = "apache2"
PATH_LIST_SEPARATOR = ":"

# Initialisation commands, checked in order against the work tree
INIT_COMMANDS = [
    ("package.json", "npm install"),
    ("Makefile", "make install"),
    ("setup.py", "python3 setup.py build"),
]


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "PD001"
    BASE_NOT_FOUND = "PD002"
    VERSION_ALREADY_DEPLOYED = "PD003"
    CHECKOUT_FAILED = "PD004"
    HOOK_FAILED = "PD005"
    SERVICE_MANAGER_FAILED = "PD006"
    LOCK_UNAVAILABLE = "PD007"
    PRECONDITION_FAILED = "PD008"


# Environment variables
ENV_CONFIG_PATH = "PUSH_DEPLOY_CONFIG"
ENV_LOG_LEVEL = "PUSH_DEPLOY_LOG_LEVEL"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_ARROW = "→"
EMOJI_ROCKET = "🚀"
EMOJI_LINK = "🔗"

# Messages templates
MSG_DEPLOY_SUCCESS = f"{EMOJI_SUCCESS} Deployed: {{commit}}"
MSG_LINK_UPDATED = f"{EMOJI_LINK} Link updated: {{link}} {EMOJI_ARROW} {{target}}"
MSG_NOTHING_TO_DEPLOY = "No update to {ref} in push; nothing to deploy"
