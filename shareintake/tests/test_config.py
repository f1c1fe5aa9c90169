from shareintake.config import IntakeConfig, load_config


def test_load_config_defaults() -> None:
    assert load_config({}) == IntakeConfig(log_level="WARNING", include_data=False)


def test_load_config_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("SHAREINTAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHAREINTAKE_INCLUDE_DATA", "1")

    cfg = load_config()

    assert cfg.log_level == "DEBUG"
    assert cfg.include_data is True


def test_load_config_falls_back_on_garbage() -> None:
    cfg = load_config({"SHAREINTAKE_LOG_LEVEL": "loud", "SHAREINTAKE_INCLUDE_DATA": "maybe"})
    assert cfg == IntakeConfig()
