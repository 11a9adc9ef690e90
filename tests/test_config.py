import pytest
from structlog.testing import capture_logs

from env_cmd.config import Settings
from env_cmd.sources.resolver import resolve_env


def test_settings_defaults():
    settings = Settings.from_environ({})
    assert settings.rc_file_name == ".env-cmdrc"
    assert settings.default_env_file == ".env"
    assert settings.structured_extensions == (".json", ".py")
    assert settings.log_level == "WARNING"


def test_settings_overrides_from_environ():
    settings = Settings.from_environ(
        {"ENV_CMD_LOG_LEVEL": "debug", "ENV_CMD_RC_FILE": "envs.json", "ENV_CMD_DEFAULT_FILE": ".env.local"}
    )
    assert settings.log_level == "DEBUG"
    assert settings.rc_file_name == "envs.json"
    assert settings.default_env_file == ".env.local"


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        Settings.from_environ({"ENV_CMD_LOG_LEVEL": "chatty"})


def test_resolution_logs_keys_but_not_values(tmp_path):
    (tmp_path / ".env").write_text("SECRET=hunter2\n", encoding="utf-8")
    with capture_logs() as logs:
        resolve_env("missing-name", cwd=tmp_path)
    events = [entry["event"] for entry in logs]
    assert events.count("source_unresolved") == 2
    assert "source_resolved" in events
    assert all("hunter2" not in str(entry) for entry in logs)


def test_configure_logging_filters_below_level_and_writes_to_stderr(capsys):
    import structlog

    from env_cmd.utils.logger import configure_logging, get_logger

    configure_logging("WARNING")
    try:
        log = get_logger("test")
        log.info("quiet_event")
        log.warning("loud_event", keys=["A"])
    finally:
        structlog.reset_defaults()
    captured = capsys.readouterr()
    assert "quiet_event" not in captured.err
    assert "loud_event" in captured.err
    assert captured.out == ""
