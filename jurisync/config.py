"""Engine configuration and environment setup."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TypeAlias

import yaml

from jurisync.domains.notifications.models import NotificationPolicy
from jurisync.utils.io import load_toml_config

ConfigDict: TypeAlias = dict[str, str | int | float | bool | list[str]]

PROJECT_ROOT = Path(__file__).parent.parent


@dataclass(frozen=True)
class StorageConfig:
    store_path: Path
    output_dir: Path


@dataclass(frozen=True)
class NotificationConfig:
    base_url: str
    send_delay_seconds: float
    failure_rate: float
    seed: int | None = None

    def policy(self) -> NotificationPolicy:
        return NotificationPolicy(base_url=self.base_url)


@dataclass(frozen=True)
class EngineConfig:
    env: str
    storage: StorageConfig
    notifications: NotificationConfig


def load_engine_config(env: str = "production", overrides: ConfigDict | None = None) -> EngineConfig:
    match env:
        case "production":
            storage = StorageConfig(
                store_path=Path("/var/lib/jurisync/contracts.json"),
                output_dir=Path("/var/lib/jurisync/exports"),
            )
            notifications = NotificationConfig(
                base_url="https://app.jurisync.com.br",
                send_delay_seconds=1.0,
                failure_rate=0.05,
            )
        case "staging":
            storage = StorageConfig(
                store_path=Path("/var/lib/jurisync-staging/contracts.json"),
                output_dir=Path("/var/lib/jurisync-staging/exports"),
            )
            notifications = NotificationConfig(
                base_url="https://staging.jurisync.com.br",
                send_delay_seconds=1.0,
                failure_rate=0.05,
            )
        case "development":
            storage = StorageConfig(
                store_path=Path("data/contracts.json"),
                output_dir=Path("output"),
            )
            notifications = NotificationConfig(
                base_url="http://localhost:8080",
                send_delay_seconds=0.0,
                failure_rate=0.0,
                seed=42,
            )
        case other:
            raise ValueError(f"Unknown environment: {other}")

    if overrides is None:
        overrides = get_env_config()
    if "base_url" in overrides:
        notifications = replace(notifications, base_url=str(overrides["base_url"]))
    if "store_path" in overrides:
        storage = replace(storage, store_path=Path(str(overrides["store_path"])))
    if "output_dir" in overrides:
        storage = replace(storage, output_dir=Path(str(overrides["output_dir"])))

    return EngineConfig(env=env, storage=storage, notifications=notifications)


def get_env_config(root: Path = PROJECT_ROOT) -> ConfigDict:
    """Read engine overrides from ``jurisync.yaml``, else ``[tool.jurisync]`` in pyproject.toml."""
    config_path = root / "jurisync.yaml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    data = load_toml_config(pyproject)
    return data.get("tool", {}).get("jurisync", {})
