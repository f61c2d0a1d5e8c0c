from engagement_metrics.config import Settings


def test_defaults(monkeypatch):
    for name in ("METRICS_NAMESPACE", "METRICS_TAGS", "DATADOG_SITE", "DD_SITE", "METRICS_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()
    assert settings.METRICS_NAMESPACE == "AmygdalaBeta/Staging"
    assert settings.DATADOG_SITE == "datadoghq.com"
    assert settings.METRICS_TIMEOUT_SECONDS == 30.0
    assert settings.METRICS_TAGS == []


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("METRICS_NAMESPACE", "AmygdalaBeta/Production")
    monkeypatch.setenv("METRICS_TAGS", "env:prod, team:growth,")
    monkeypatch.delenv("DATADOG_API_KEY", raising=False)
    monkeypatch.setenv("DD_API_KEY", "dd-key")
    monkeypatch.setenv("METRICS_TIMEOUT_SECONDS", "5")

    settings = Settings()
    assert settings.METRICS_NAMESPACE == "AmygdalaBeta/Production"
    assert settings.METRICS_TAGS == ["env:prod", "team:growth"]
    assert settings.datadog_api_key == "dd-key"
    assert settings.METRICS_TIMEOUT_SECONDS == 5.0
