import pytest

from snipcopy.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        "SNIPCOPY_SELECTOR_CLASS",
        "SNIPCOPY_PAYLOAD_ATTRIBUTE",
        "SNIPCOPY_MARKER_CLASS",
        "SNIPCOPY_REVERT_DELAY_MS",
        "SNIPCOPY_CLIPBOARD_BACKEND",
    ):
        # set first so teardown removes anything load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.selector_class == "snippet-action-copy"
    assert settings.payload_attribute == "data-snippet"
    assert settings.marker_class == "copied"
    assert settings.revert_delay_ms == 1000
    assert settings.revert_delay == 1.0
    assert settings.clipboard_backend == "auto"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SNIPCOPY_REVERT_DELAY_MS", "1500")
    monkeypatch.setenv("SNIPCOPY_CLIPBOARD_BACKEND", "Memory")

    settings = Settings.from_env()

    assert settings.revert_delay_ms == 1500
    assert settings.clipboard_backend == "memory"


def test_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / "custom.env"
    env_file.write_text("SNIPCOPY_MARKER_CLASS=done\n", encoding="utf-8")

    settings = Settings.from_env(str(env_file))

    assert settings.marker_class == "done"


def test_non_integer_delay_keeps_cause(monkeypatch):
    monkeypatch.setenv("SNIPCOPY_REVERT_DELAY_MS", "soon")
    with pytest.raises(ValueError) as exc:
        Settings.from_env()
    assert isinstance(exc.value.__cause__, ValueError)


@pytest.mark.parametrize("value", ["soon", "-5"])
def test_invalid_delay(monkeypatch, value):
    monkeypatch.setenv("SNIPCOPY_REVERT_DELAY_MS", value)
    with pytest.raises(ValueError, match="SNIPCOPY_REVERT_DELAY_MS"):
        Settings.from_env()


def test_with_overrides_ignores_none():
    settings = Settings().with_overrides(clipboard_backend=None, marker_class="on")
    assert settings.clipboard_backend == "auto"
    assert settings.marker_class == "on"
