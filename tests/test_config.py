import pytest

from app.core.config import load_settings, resolve_config_path
from app.core.exceptions import StartupError
from app.main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("CONFIG_PATH", "ENV", "STORAGE_PATH", "HOST", "PORT"):
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of the way
    monkeypatch.chdir(tmp_path)


def write_config(path, **values):
    path.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
    return str(path)


def test_load_settings_from_config_file(tmp_path):
    path = write_config(tmp_path / "local.env", ENV="local", STORAGE_PATH="storage/storage.db", PORT="9000")
    settings = load_settings(path)
    assert settings.ENV == "local"
    assert settings.STORAGE_PATH == "storage/storage.db"
    assert settings.PORT == 9000
    assert settings.HOST == "localhost"
    assert settings.SHUTDOWN_TIMEOUT == 5


def test_environment_overrides_config_file(tmp_path, monkeypatch):
    path = write_config(tmp_path / "local.env", ENV="local", STORAGE_PATH="a.db")
    monkeypatch.setenv("ENV", "prod")
    assert load_settings(path).ENV == "prod"


def test_missing_config_file_is_fatal(tmp_path):
    with pytest.raises(StartupError, match="does not exist"):
        load_settings(str(tmp_path / "missing.env"))


def test_missing_required_key_is_fatal(tmp_path):
    path = write_config(tmp_path / "local.env", ENV="local")
    with pytest.raises(StartupError, match="STORAGE_PATH"):
        load_settings(path)


def test_invalid_value_is_fatal(tmp_path):
    path = write_config(tmp_path / "local.env", ENV="local", STORAGE_PATH="a.db", PORT="eighty")
    with pytest.raises(StartupError):
        load_settings(path)


def test_settings_from_environment_only(monkeypatch, tmp_path):
    monkeypatch.setenv("ENV", "dev")
    monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "s.db"))
    assert load_settings().ENV == "dev"


def test_config_path_env_wins_over_flag(monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", "from-env.env")
    assert resolve_config_path("from-flag.env") == "from-env.env"


def test_config_flag_used_without_env():
    assert resolve_config_path("from-flag.env") == "from-flag.env"
    assert resolve_config_path() is None


def test_main_exits_nonzero_on_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.env")]) == 1


def test_main_exits_nonzero_without_required_settings():
    assert main([]) == 1
