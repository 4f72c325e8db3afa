import httpx
from typer.testing import CliRunner

from skyforecast.cli import main as cli_main
from skyforecast.domain.assemble import assemble
from skyforecast.domain.normalize import normalize


class _StaticProvider:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def fetch_forecast(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


def test_forecast_command_prints_tables(monkeypatch):
    result = assemble(normalize({"hourly": {"data": [{"time": 1620000000, "temperature": 50}]}}))
    provider = _StaticProvider(result)
    monkeypatch.setattr(cli_main, "_build_provider", lambda: provider)
    runner = CliRunner()
    out = runner.invoke(
        cli_main.app,
        ["forecast", "--lat", "37.8267", "--lon=-122.423", "--time", "2013-05-06T12:00:00", "--units", "si"],
    )
    assert out.exit_code == 0
    assert "hourly: 1 rows x 2 columns" in out.stdout
    assert provider.calls[0]["timestamp"] == "2013-05-06T12:00:00"
    assert provider.calls[0]["units"] == "si"
    assert provider.calls[0]["longitude"] == "-122.423"


def test_current_command_sends_no_timestamp(monkeypatch):
    provider = _StaticProvider(assemble({}))
    monkeypatch.setattr(cli_main, "_build_provider", lambda: provider)
    runner = CliRunner()
    out = runner.invoke(cli_main.app, ["current", "--lat", "1", "--lon", "2", "--json", "--headers"])
    assert out.exit_code == 0
    assert provider.calls[0]["timestamp"] is None
    assert provider.calls[0]["add_json"] is True
    assert provider.calls[0]["add_headers"] is True


def test_missing_key_exits_with_error(monkeypatch):
    provider = _StaticProvider(error=RuntimeError("DARKSKY_API_KEY is required to query the forecast API"))
    monkeypatch.setattr(cli_main, "_build_provider", lambda: provider)
    runner = CliRunner()
    out = runner.invoke(cli_main.app, ["current", "--lat", "1", "--lon", "2"])
    assert out.exit_code == 1
    assert "DARKSKY_API_KEY" in out.stderr


def test_http_error_exits_with_message(monkeypatch):
    request = httpx.Request("GET", "https://api.darksky.net/forecast/k/999,999")
    response = httpx.Response(400, request=request)
    error = httpx.HTTPStatusError("400 Bad Request", request=request, response=response)
    monkeypatch.setattr(cli_main, "_build_provider", lambda: _StaticProvider(error=error))
    runner = CliRunner()
    out = runner.invoke(cli_main.app, ["forecast", "--lat", "999", "--lon", "999", "--time", "2013-05-06T12:00:00"])
    assert out.exit_code == 1
    assert "Error: 400 Bad Request" in out.stderr


def test_non_object_payload_exits_with_message(monkeypatch):
    error = TypeError("Forecast payload must be a JSON object, got list")
    monkeypatch.setattr(cli_main, "_build_provider", lambda: _StaticProvider(error=error))
    runner = CliRunner()
    out = runner.invoke(cli_main.app, ["current", "--lat", "1", "--lon", "2"])
    assert out.exit_code == 1
    assert "Error:" in out.stderr
