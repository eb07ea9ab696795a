# Config pipeline: file access, parsing, validation, write-back

from .filesystem import DataPaths, DefaultFileSystem, FileSystem, resolve_config_path
from .identifiers import normalize_identifier
from .loader import ConfigLoader, load_config
from .parser import ConfigParser
from .ssh import RemoteAuthorityError, RemoteAuthorityIssue, extract_target, parse_remote_authority, shell_escape
from .writer import STARTER_CONFIG_TEMPLATE, ConfigWriteBack, render_config, update_auto_start_at_login

__all__ = [
    "DataPaths",
    "DefaultFileSystem",
    "FileSystem",
    "resolve_config_path",
    "normalize_identifier",
    "ConfigLoader",
    "load_config",
    "ConfigParser",
    "RemoteAuthorityError",
    "RemoteAuthorityIssue",
    "extract_target",
    "parse_remote_authority",
    "shell_escape",
    "STARTER_CONFIG_TEMPLATE",
    "ConfigWriteBack",
    "render_config",
    "update_auto_start_at_login",
]
