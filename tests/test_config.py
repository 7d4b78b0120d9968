"""Tests for engine configuration and the command-line runner."""

import json
from pathlib import Path

import pytest

from jurisync.config import get_env_config, load_engine_config
from jurisync.domains.contracts import save_contracts
from jurisync.run import main
from jurisync.utils.io import JsonFileStore
from tests.conftest import REFERENCE_NOW


class TestLoadEngineConfig:

    @pytest.mark.parametrize("env", ["production", "staging", "development"])
    def test_known_environments(self, env):
        cfg = load_engine_config(env, overrides={})
        assert cfg.env == env
        assert 0.0 <= cfg.notifications.failure_rate <= 1.0
        assert cfg.notifications.base_url.startswith("http")

    def test_development_is_deterministic(self):
        cfg = load_engine_config("development", overrides={})
        assert cfg.notifications.send_delay_seconds == 0.0
        assert cfg.notifications.failure_rate == 0.0
        assert cfg.notifications.seed == 42

    def test_unknown_environment(self):
        with pytest.raises(ValueError, match="Unknown environment"):
            load_engine_config("qa", overrides={})

    def test_overrides(self, tmp_path):
        cfg = load_engine_config("production", overrides={
            "base_url": "https://contracts.internal",
            "store_path": str(tmp_path / "store.json"),
            "output_dir": str(tmp_path / "exports"),
        })
        assert cfg.notifications.policy().base_url == "https://contracts.internal"
        assert cfg.storage.store_path == tmp_path / "store.json"
        assert cfg.storage.output_dir == tmp_path / "exports"


class TestGetEnvConfig:

    def test_yaml_takes_precedence(self, tmp_path):
        (tmp_path / "jurisync.yaml").write_text("default_env: staging\nbase_url: https://x.test\n")
        (tmp_path / "pyproject.toml").write_text('[tool.jurisync]\ndefault_env = "development"\n')
        assert get_env_config(tmp_path) == {"default_env": "staging", "base_url": "https://x.test"}

    def test_pyproject_section(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.jurisync]\ndefault_env = "development"\n')
        assert get_env_config(tmp_path) == {"default_env": "development"}

    def test_empty_yaml(self, tmp_path):
        (tmp_path / "jurisync.yaml").write_text("")
        assert get_env_config(tmp_path) == {}

    def test_nothing_configured(self, tmp_path):
        assert get_env_config(tmp_path) == {}


class TestMain:

    def _args(self, tmp_path: Path, *extra: str) -> list[str]:
        return [
            "--env", "development",
            "--store", str(tmp_path / "contracts.json"),
            "--output", str(tmp_path / "out"),
            *extra,
        ]

    def test_stats_with_seed_fallback(self, tmp_path):
        assert main(self._args(tmp_path), now=REFERENCE_NOW) == 0

    def test_validate_good_store(self, tmp_path, portfolio):
        save_contracts(JsonFileStore(tmp_path / "contracts.json"), portfolio)
        assert main(self._args(tmp_path, "--validate"), now=REFERENCE_NOW) == 0

    def test_validate_broken_store(self, tmp_path):
        (tmp_path / "contracts.json").write_text(json.dumps({"jurisync_contracts": [{"id": "1"}]}))
        assert main(self._args(tmp_path, "--validate"), now=REFERENCE_NOW) == 1

    def test_export_csv_with_filters(self, tmp_path, portfolio):
        save_contracts(JsonFileStore(tmp_path / "contracts.json"), portfolio)
        code = main(self._args(tmp_path, "--export", "csv", "--status", "expiring_soon"), now=REFERENCE_NOW)

        assert code == 0
        lines = (tmp_path / "out" / "contratos-jurisync.csv").read_text(encoding="utf-8").split("\n")
        assert len(lines) == 4

    def test_monthly_report(self, tmp_path, portfolio):
        save_contracts(JsonFileStore(tmp_path / "contracts.json"), portfolio)
        code = main(self._args(tmp_path, "--export", "pdf", "--preset", "monthly"), now=REFERENCE_NOW)

        assert code == 0
        assert (tmp_path / "out" / "relatorio-jurisync.html").exists()

    def test_preset_format_applies_without_export_flag(self, tmp_path, portfolio):
        save_contracts(JsonFileStore(tmp_path / "contracts.json"), portfolio)
        code = main(self._args(tmp_path, "--preset", "monthly"), now=REFERENCE_NOW)

        assert code == 0
        assert (tmp_path / "out" / "relatorio-jurisync.html").exists()
        assert not (tmp_path / "out" / "contratos-jurisync.csv").exists()

    def test_export_flag_overrides_preset_format(self, tmp_path, portfolio):
        save_contracts(JsonFileStore(tmp_path / "contracts.json"), portfolio)
        code = main(self._args(tmp_path, "--preset", "monthly", "--export", "json"), now=REFERENCE_NOW)

        assert code == 0
        payload = json.loads((tmp_path / "out" / "contratos-jurisync.json").read_text(encoding="utf-8"))
        assert payload["metadata"]["options"]["format"] == "json"
        assert payload["metadata"]["totalRecords"] == 3
        assert not (tmp_path / "out" / "relatorio-jurisync.html").exists()

    def test_notify(self, tmp_path, portfolio):
        save_contracts(JsonFileStore(tmp_path / "contracts.json"), portfolio)
        assert main(self._args(tmp_path, "--notify"), now=REFERENCE_NOW) == 0

    def test_unknown_environment(self, tmp_path):
        assert main(["--env", "qa", "--store", str(tmp_path / "c.json")], now=REFERENCE_NOW) == 1
