"""
管理命令配置

配置从 YAML 文件加载（默认 config.yaml，可由 PROXYADMIN_CONFIG 指定），
并允许 PROXYADMIN_<FIELD> 环境变量覆盖单个字段。
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .error import ConfigError
from .logger import get_log

LOG = get_log("Config")

CONFIG_PATH_ENV = "PROXYADMIN_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"
ENV_PREFIX = "PROXYADMIN_"

_ROOT_COMMAND_RE = re.compile(r"^[a-z][a-z0-9_-]*$")
_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class AdminConfig(BaseModel):
    """管理命令的全部可配置项"""

    root_command: str = "proxy"
    product_name: str = "Proxy"
    canonical_name: str = "Proxy"
    homepage_url: str = "https://proxy.example.org"
    homepage_label: str = "proxy.example.org"
    source_url: str = "https://github.com/example/proxy"
    source_label: str = "GitHub"
    brand_color: str = "#09add3"
    dump_dir: Optional[str] = None
    locale: str = "en"
    debug: bool = False
    log_level: str = "INFO"

    model_config = {"validate_assignment": True}

    @field_validator("root_command", mode="before")
    def _lower_root(cls, v):
        return str(v).strip().lower()

    @field_validator("root_command")
    def _check_root(cls, v):
        if not _ROOT_COMMAND_RE.match(v):
            raise ValueError(f"根命令名 {v!r} 非法")
        return v

    @field_validator("brand_color")
    def _check_color(cls, v):
        if not _HEX_COLOR_RE.match(v):
            raise ValueError(f"颜色 {v!r} 不是 #rrggbb 格式")
        return v

    @field_validator("log_level", mode="before")
    def _upper_level(cls, v):
        return str(v).upper()

    # ------------------------------------------------------------------
    # 派生值
    # ------------------------------------------------------------------

    def permission_node(self, name: str) -> str:
        """子命令对应的权限节点，如 proxy.command.reload"""
        return f"{self.root_command}.command.{name}"

    def resolve_dump_dir(self) -> Path:
        """dump 文件目录，未配置时取调用时的工作目录"""
        if self.dump_dir:
            return Path(self.dump_dir).expanduser().resolve()
        return Path.cwd()

    # ------------------------------------------------------------------
    # 读写
    # ------------------------------------------------------------------

    def update_value(self, key: str, value: Any) -> None:
        """更新单个配置项（带校验）"""
        if key not in type(self).model_fields:
            raise ConfigError(f"未知配置项: {key}")
        try:
            setattr(self, key, value)
        except ValidationError as e:
            raise ConfigError(f"配置项 {key} 校验失败: {e}") from e

    def validate_config(self) -> None:
        """整体校验，用于启动前检查"""
        if self.dump_dir is not None:
            path = Path(self.dump_dir).expanduser()
            if path.exists() and not path.is_dir():
                raise ConfigError(f"dump_dir {self.dump_dir} 不是目录")
        LOG.debug("配置校验通过: root_command=%s", self.root_command)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AdminConfig":
        """从 YAML 文件和环境变量加载配置"""
        config_path = Path(path or os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))
        data: Dict[str, Any] = {}
        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f.read()) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"解析配置文件 {config_path} 失败: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"配置文件 {config_path} 顶层必须是映射")
            LOG.debug("从 %s 加载配置", config_path)

        for name in cls.model_fields:
            env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if env_value is not None:
                data[name] = env_value

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"配置校验失败: {e}") from e


admin_config = AdminConfig.load()
