"""proxyadmin 工具包"""

from proxyadmin.utils.logger import get_log, setup_logging
from proxyadmin.utils.config import AdminConfig, admin_config
from proxyadmin.utils.config import admin_config as config
from proxyadmin.utils.error import (
    ProxyAdminError,
    ConfigError,
    DuplicateSubcommandError,
)

__all__ = [
    "get_log", "setup_logging",
    "AdminConfig", "admin_config", "config",
    "ProxyAdminError", "ConfigError",
    "DuplicateSubcommandError",
]
