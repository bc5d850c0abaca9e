import os

import inventory_dashboard
from inventory_dashboard.core.config import ENV_FILE, Settings


def test_env_file_resolves_to_project_root():
    package_dir = os.path.dirname(os.path.abspath(inventory_dashboard.__file__))
    assert os.path.isabs(ENV_FILE)
    assert ENV_FILE == os.path.join(os.path.dirname(package_dir), ".env")
    assert Settings.model_config["env_file"] == ENV_FILE


def test_settings_read_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TODAY_SALES", "$9,999")
    monkeypatch.setenv("SESSION_MAX_AGE_HOURS", "2")

    loaded = Settings()
    assert loaded.today_sales == "$9,999"
    assert loaded.session_max_age_hours == 2
