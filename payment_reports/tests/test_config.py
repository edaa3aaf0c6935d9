from pathlib import Path

from payment_reports.config import DEFAULT_LOGO_PATH, Settings, load_settings

ENV_VARS = [
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "CODESPACE_NAME",
    "CORS_ORIGINS",
    "REPORT_LOGO_PATH",
    "REPORT_TIMEZONE",
    "REPORT_PDF_INVARIANT",
]


def clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    clear_env(monkeypatch)
    settings = load_settings()

    assert settings.port == 9090
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ("*",)
    assert settings.logo_path == DEFAULT_LOGO_PATH
    assert settings.timezone is None
    assert settings.pdf_invariant is False
    assert settings.server_url is None


def test_packaged_logo_exists():
    assert DEFAULT_LOGO_PATH.is_file()


def test_environment_overrides(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CODESPACE_NAME", "fluffy-robot")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("REPORT_LOGO_PATH", str(tmp_path / "logo.png"))
    monkeypatch.setenv("REPORT_TIMEZONE", "America/Bogota")
    monkeypatch.setenv("REPORT_PDF_INVARIANT", "true")

    settings = load_settings()

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.server_url == "https://fluffy-robot-8080.app.github.dev"
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.logo_path == Path(tmp_path / "logo.png")
    assert settings.timezone == "America/Bogota"
    assert settings.pdf_invariant is True


def test_invalid_port_falls_back(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("PORT", "not-a-port")
    assert load_settings().port == 9090


def test_blank_codespace_name_means_no_server_url():
    assert Settings(codespace_name="").server_url is None
