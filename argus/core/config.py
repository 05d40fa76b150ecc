from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


def _as_int(v, default: int) -> int:
    if v is None:
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _as_float(v, default: float) -> float:
    if v is None:
        return default
    try:
        return float(v)
    except (TypeError, ValueError):
        return default


def _as_bool(v, default: bool) -> bool:
    if v is None:
        return default
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "y", "on"):
            return True
        if s in ("0", "false", "no", "n", "off"):
            return False
    return bool(v)


def _as_str(v, default: str) -> str:
    if v is None:
        return default
    return str(v)


def _as_names(v, default: List[str]) -> List[str]:
    if v is None:
        return list(default)
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"handlers must be a list or comma-separated string, got {v!r}")
    return [str(s).strip() for s in v if str(s).strip()]


def _get(data: Dict[str, Any], key: str, default=None):
    try:
        return data.get(key, default)
    except AttributeError:
        return default


@dataclass
class MailConfig:
    from_addr: str = ""
    to_addr: str = ""
    server_host: str = ""
    server_port: int = 587
    server_user: str = ""
    server_password: str = ""


@dataclass
class ArgusConfig:
    fps: int = 10
    device_id: str = "0"
    # seconds
    min_interval: float = 5.0
    min_area: float = 10000.0
    show_video: bool = True
    handlers: List[str] = field(default_factory=lambda: ["console", "archive"])
    data_dir: str = "data"
    mail: MailConfig = field(default_factory=MailConfig)

    @property
    def tick_seconds(self) -> float:
        return 1.0 / float(self.fps)


def default_config() -> ArgusConfig:
    return ArgusConfig()


def load_config(path: str | Path) -> ArgusConfig:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config must be a mapping, got {type(data).__name__}: {p}")

    d = ArgusConfig()
    mail = _get(data, "mail", {}) or {}
    dm = d.mail

    cfg = ArgusConfig(
        fps=_as_int(_get(data, "fps"), d.fps),
        device_id=_as_str(_get(data, "device_id"), d.device_id),
        min_interval=_as_float(_get(data, "min_interval"), d.min_interval),
        min_area=_as_float(_get(data, "min_area"), d.min_area),
        show_video=_as_bool(_get(data, "show_video"), d.show_video),
        handlers=_as_names(_get(data, "handlers"), d.handlers),
        data_dir=_as_str(_get(data, "data_dir"), d.data_dir),
        mail=MailConfig(
            from_addr=_as_str(_get(mail, "from"), dm.from_addr),
            to_addr=_as_str(_get(mail, "to"), dm.to_addr),
            server_host=_as_str(_get(mail, "server_host"), dm.server_host),
            server_port=_as_int(_get(mail, "server_port"), dm.server_port),
            server_user=_as_str(_get(mail, "server_user"), dm.server_user),
            server_password=_as_str(_get(mail, "server_password"), dm.server_password),
        ),
    )

    if cfg.fps <= 0:
        raise ValueError(f"fps must be positive, got {cfg.fps}")
    return cfg
