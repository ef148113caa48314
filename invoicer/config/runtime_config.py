"""
运行期配置 - 读取 documents/runtime.yaml

职责：
- 加载文档标识/存储目录/时区等运行参数
- 提供环境变量覆盖机制
- 类型安全的配置访问
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class DocumentsConfig(BaseModel):
    """文档标识配置（原脚本属性 work_detail_id / invoice_id）"""

    work_detail_id: str = ""
    invoice_id: str = ""
    extension: str = ".xlsx"


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    # 基础路径
    storage_dir: Path = Path("storage")
    layout_path: Path = Path("documents/invoice_layout.yaml")

    # 请求日/请求番号按此时区计算
    timezone: str = "Asia/Tokyo"

    # 各子配置
    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "INVOICER_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})
        top_level = cls._extract(runtime_opts, "paths")
        if "timezone" in runtime_opts:
            top_level["timezone"] = runtime_opts["timezone"]

        # 子配置以dict传入，与 INVOICER_DOCUMENTS__* 等环境变量逐项合并（YAML优先）
        config = cls(
            documents=cls._extract(runtime_opts, "documents"),
            logging=cls._extract(runtime_opts, "logging"),
            **top_level,
        )

        config._resolve_paths(base_dir=path.parent, keys=set(top_level))
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key, {}) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path, keys: set[str]) -> None:
        """解析YAML中给出的相对路径为绝对路径（基于配置文件所在目录）"""
        if "storage_dir" in keys and not self.storage_dir.is_absolute():
            self.storage_dir = (base_dir / self.storage_dir).resolve()
        if "layout_path" in keys and not self.layout_path.is_absolute():
            self.layout_path = (base_dir / self.layout_path).resolve()

    def get_document_path(self, doc_id: str) -> Path:
        """获取文档文件路径"""
        return self.storage_dir / f"{doc_id}{self.documents.extension}"


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml("documents/runtime.yaml")
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or "documents/runtime.yaml"
    _config = RuntimeConfig.from_yaml(path)
    return _config


def setup_logging(config: RuntimeConfig | None = None) -> None:
    """按配置初始化根日志"""
    cfg = config or get_config()
    logging.basicConfig(
        level=getattr(logging, cfg.logging.log_level.upper(), logging.INFO),
        format=cfg.logging.log_format,
    )
