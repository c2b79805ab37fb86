"""
Tests for the signal evaluation CLI.
"""
import json
import logging

import pytest
import numpy as np
import pandas as pd

from cli.signals import main, collect_price_map
from core.signals.config import BASELINE_CONFIG, SignalConfig


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _write_prices(path, n=80, seed=0):
    rng = np.random.default_rng(seed)
    closes = 100 * np.exp(np.cumsum(rng.normal(0, 0.01, n)))
    df = pd.DataFrame(
        {"Close": closes},
        index=pd.date_range("2024-01-01", periods=n, freq="D", name="Date"),
    )
    df.to_csv(path)
    return closes


class TestSignalsCli:
    def test_table_output(self, tmp_path, capsys):
        path = tmp_path / "btcusdt.csv"
        _write_prices(path)

        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "BTCUSDT" in out
        for indicator in ("ema", "rsi", "macd"):
            assert indicator in out

    def test_json_output(self, tmp_path, capsys):
        path = tmp_path / "ethusdt.csv"
        closes = _write_prices(path)

        assert main([str(path), "--json", "--workers", "1"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload[0]["symbol"] == "ETHUSDT"
        assert len(payload[0]["signals"]) == 3
        assert payload[0]["signals"][0]["price"] == pytest.approx(closes[-1])

    def test_too_short_series_exits_1(self, tmp_path, capsys):
        path = tmp_path / "solusdt.csv"
        _write_prices(path, n=5)

        assert main([str(path)]) == 1
        out = capsys.readouterr().out
        assert "No signals produced" in out
        assert "Insufficient data" in out

    def test_missing_file_exits_1(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.csv")]) == 1
        assert "Data file not found" in capsys.readouterr().err

    def test_requires_input(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_data_dir_uses_config_pairs(self, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv("TRADING_PAIRS", raising=False)
        _write_prices(tmp_path / "AAAUSDT.csv", seed=1)
        config_path = tmp_path / "signals.yaml"
        config_path.write_text("data:\n  trading_pairs: [AAAUSDT, BBBUSDT]\n")

        assert main(["--data-dir", str(tmp_path), "--config", str(config_path), "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert [entry["symbol"] for entry in payload] == ["AAAUSDT"]

    def test_env_trading_pairs(self, tmp_path, monkeypatch, capsys):
        _write_prices(tmp_path / "CCCUSDT.csv", seed=2)
        monkeypatch.setenv("TRADING_PAIRS", "CCCUSDT")

        assert main(["--data-dir", str(tmp_path), "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert [entry["symbol"] for entry in payload] == ["CCCUSDT"]

    def test_log_file(self, tmp_path):
        path = tmp_path / "short.csv"
        _write_prices(path, n=30)
        log_path = tmp_path / "logs" / "signals.log"

        main([str(path), "--log-file", str(log_path)])
        assert "Insufficient data for MACD" in log_path.read_text()


class TestCollectPriceMap:
    def test_explicit_files_and_data_dir(self, tmp_path):
        _write_prices(tmp_path / "one.csv")
        _write_prices(tmp_path / "BTCUSDT.csv")
        config = SignalConfig(trading_pairs=("BTCUSDT", "ETHUSDT"))

        price_map = collect_price_map([str(tmp_path / "one.csv")], str(tmp_path), config, "Close")
        assert list(price_map) == ["ONE", "BTCUSDT"]

    def test_nothing_requested(self):
        assert collect_price_map([], None, BASELINE_CONFIG, "Close") == {}
