"""Global constants for component-publisher"""

import re

# Application
APP_NAME = "component-publisher"
LOG_FORMAT = "%(message)s"
USER_AGENT_TEMPLATE = "component-publisher-{version}"

# Configuration
CONFIG_VERSION = "1.0"
DEFAULT_CONFIG_FILE = ".component-publisher.yaml"
DEFAULT_TIMEOUT = 60.0  # seconds

# Component layout
COMPONENT_MANIFEST_FILE = "package.json"
PACKAGE_DIR_NAME = "_package"
ARCHIVE_FILE_NAME = "package.tar.gz"
ARCHIVE_FORM_FIELD = "package"
ARCHIVE_CONTENT_TYPE = "application/gzip"

# Never copied into the package directory
PACKAGE_EXCLUDE_PATTERNS = [
    PACKAGE_DIR_NAME,
    ARCHIVE_FILE_NAME,
    "node_modules",
    ".git",
    "__pycache__",
    ".DS_Store",
]

# Credential retry
MAX_CREDENTIAL_RETRIES = 1

# Registry rejection codes
CODE_CLI_VERSION_NOT_VALID = "cli_version_not_valid"
CODE_NODE_VERSION_NOT_VALID = "node_version_not_valid"

# Environment variables
ENV_CONFIG_PATH = "COMPONENT_PUBLISHER_CONFIG"

# Validation patterns
COMPONENT_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._-]*$", re.IGNORECASE)
REGISTRY_URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)
VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"$"
)


# Error codes
class ErrorCode:
    REGISTRY_RESOLUTION_FAILED = "CP001"
    PACKAGING_FAILED = "CP002"
    INVALID_CREDENTIALS = "CP003"
    CLI_VERSION_MISMATCH = "CP004"
    RUNTIME_VERSION_MISMATCH = "CP005"
    NETWORK_OR_REGISTRY_ERROR = "CP006"
    CLEANUP_FAILED = "CP007"
    CONFIG_ERROR = "CP008"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"

# Command hints
UPGRADE_COMMAND = "pip install --upgrade component-publisher=={version}"

# Progress messages
MSG_USING_CREDENTIALS = "Using specified credentials"
MSG_ENTER_USERNAME = "Enter username:"
MSG_ENTER_PASSWORD = "Enter password:"
MSG_CREDENTIALS_REQUIRED = "Registry requires credentials."
MSG_PACKAGING = "Packaging -> {path}"
MSG_COMPRESSING = "Compressing -> {path}"
MSG_PUBLISHING = "Publishing -> {route}"
MSG_PUBLISHED = "Published -> {route}"
MSG_CLEANUP_FAILED = "Failed to remove {path}: {error}"

# Error messages
ERR_PUBLISHING_FAIL = "An error happened when publishing the component: {details}"
ERR_PACKAGE_CREATION_FAIL = "An error happened when creating the package: {details}"
ERR_INVALID_CREDENTIALS = "Invalid credentials ({route})"
ERR_CLI_VERSION_NEEDS_UPGRADE = (
    "the version of the used CLI is invalid. Try to upgrade the CLI running {command}"
)
ERR_RUNTIME_VERSION_NEEDS_UPGRADE = (
    "the version of the used runtime is invalid. "
    "Try to upgrade the runtime to version matching '{version}'"
)
ERR_NO_REGISTRIES_CONFIGURED = (
    "No registry configuration found at {path}.\n"
    "Add a registry first: component-publisher registry add <url>"
)
