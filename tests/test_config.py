from healthdata.config import DashboardConfig


def test_defaults():
    cfg = DashboardConfig()
    assert cfg.data_source == "health_data.json"
    assert cfg.output_path == "index.html"
    assert cfg.fetch_timeout is None
    assert (cfg.workout_limit, cfg.blood_limit, cfg.lab_flag_limit) == (12, 15, 5)


def test_from_env(monkeypatch):
    monkeypatch.setenv("HEALTHDASH_DATA_SOURCE", "https://example.com/data.json")
    monkeypatch.setenv("HEALTHDASH_FETCH_TIMEOUT", "7.5")
    monkeypatch.setenv("HEALTHDASH_WORKOUT_LIMIT", "3")
    cfg = DashboardConfig.from_env()
    assert cfg.data_source == "https://example.com/data.json"
    assert cfg.fetch_timeout == 7.5
    assert cfg.workout_limit == 3
    assert cfg.blood_limit == 15


def test_from_config_file(tmp_path):
    conf = tmp_path / "dashboard.conf"
    conf.write_text(
        "# dashboard settings\n"
        "data_source = data/health_data.json\n"
        "output_path = site/index.html\n"
        "\n"
        "title = My Health\n"
        "lab_flag_limit = 3\n",
        encoding="utf-8",
    )
    cfg = DashboardConfig.from_config_file(str(conf))
    assert cfg.data_source == "data/health_data.json"
    assert cfg.output_path == "site/index.html"
    assert cfg.title == "My Health"
    assert cfg.lab_flag_limit == 3
    assert cfg.fetch_timeout is None


def test_missing_config_file_uses_defaults(tmp_path):
    cfg = DashboardConfig.from_config_file(str(tmp_path / "nope.conf"))
    assert cfg.data_source == "health_data.json"
