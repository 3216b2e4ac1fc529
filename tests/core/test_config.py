import pytest
from pydantic import ValidationError

from boxplot_stats.core.config import Settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.outlier_delimiter == "|"
    assert settings.plotly_js_mode == "cdn"
    assert settings.include_plotlyjs == "cdn"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTLIER_DELIMITER", ";")
    monkeypatch.setenv("PLOTLY_JS_MODE", " Inline ")

    settings = Settings(_env_file=None)

    assert settings.outlier_delimiter == ";"
    assert settings.include_plotlyjs is True


def test_settings_reject_unknown_plotly_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLOTLY_JS_MODE", "bundled")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
