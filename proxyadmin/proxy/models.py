"""代理侧只读数据模型"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ProxyVersion(BaseModel):
    name: str
    version: str
    vendor: str


class PluginDescriptor(BaseModel):
    """插件元数据，id 必填且唯一，其余字段可选"""

    id: str
    name: Optional[str] = None
    version: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    description: Optional[str] = None

    @field_validator("id")
    def _id_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("插件 id 不能为空")
        return v

    @field_validator("authors", mode="before")
    def _authors_list(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return list(v)

    @field_validator("name", "version", "url", "description", mode="before")
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def display_name(self) -> str:
        return self.name or self.id


class ServerInfo(BaseModel):
    """后端服务器注册信息"""

    name: str
    host: str
    port: int = Field(default=25565, ge=0, le=65535)
