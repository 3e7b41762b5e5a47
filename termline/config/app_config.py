#!filepath: termline/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .render_config import RenderConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    termline/config/app_config.py → termline/config → termline → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    render: RenderConfig = RenderConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 termline/config/base.yml（随包安装）
        - 不依赖当前工作目录
        - 环境变量覆盖：TERMLINE_LOG_LEVEL / TERMLINE_WIDTH
        """
        # 1) 先加载 .env（在项目根目录下，不存在则忽略）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        level = os.getenv("TERMLINE_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        width = os.getenv("TERMLINE_WIDTH")
        if width:
            raw.setdefault("render", {})["width"] = width

        return cls(**raw)
