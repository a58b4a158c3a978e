from pathlib import Path
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    database_url: str = Field("sqlite:///./location_service.db")
    pool_size: int = Field(20)
    max_overflow: int = Field(30)  # Allow overflow connections
    pool_timeout: int = Field(60)  # Connection timeout in seconds
    pool_recycle: int = Field(3600)  # Recycle connections every hour
    pool_pre_ping: bool = Field(True)  # Validate connections before use


class AppSettings(BaseSettings):
    debug: bool = Field(False)
    log_level: str = Field("INFO")
    allowed_hosts: str = Field("http://localhost:3000,http://localhost:8000")
    # "global": a street code is unique across every district
    # "district": a street code is unique among one district's streets
    street_code_scope: Literal["global", "district"] = Field("global")
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @classmethod
    def _split_allowed_hosts(cls, v: str) -> List[str]:
        if not v or not v.strip():
            return []
        hosts = []
        for host in v.split(","):
            host = host.strip()
            if host and (host.startswith("http://") or host.startswith("https://")):
                hosts.append(host.rstrip("/"))
        return hosts

    @property
    def allowed_hosts_list(self) -> List[str]:
        """Convert allowed_hosts string to list."""
        if not self.allowed_hosts:
            return ["http://localhost:3000", "http://localhost:8000"]
        return self._split_allowed_hosts(self.allowed_hosts)

    class Config:
        env_prefix = "APP_"
        case_sensitive = False
        env_nested_delimiter = "__"
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


settings: AppSettings = AppSettings()
