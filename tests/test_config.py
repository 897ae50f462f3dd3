import pytest

from feedback_designer.shared.config import AppConfig

ENV_VARS = (
    "FEEDBACK_VOLTAGE_WEIGHT",
    "FEEDBACK_ALTERNATIVES",
    "FEEDBACK_VOLTAGE_TOLERANCE",
    "RESISTOR_CATALOG_PATH",
    "GRADIO_SERVER_NAME",
    "GRADIO_SERVER_PORT",
    "GRADIO_SHARE",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so that values written by load_dotenv are removed on undo
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    config = AppConfig.from_env(str(tmp_path / "missing.env"))
    assert config.solver.voltage_weight == 1e5
    assert config.solver.alternatives == 5
    assert config.solver.voltage_tolerance == 0.01
    assert config.catalog.catalog_path is None
    assert (config.server.host, config.server.port, config.server.share) == ("0.0.0.0", 7860, False)
    assert config.logging.level == "INFO"
    assert config.logging.log_file is None


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("FEEDBACK_VOLTAGE_WEIGHT", "1e6")
    clean_env.setenv("FEEDBACK_ALTERNATIVES", "10")
    clean_env.setenv("RESISTOR_CATALOG_PATH", "/data/e96.json")
    clean_env.setenv("GRADIO_SERVER_PORT", "8080")
    clean_env.setenv("GRADIO_SHARE", "true")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = AppConfig.from_env(str(tmp_path / "missing.env"))
    assert config.solver.voltage_weight == 1e6
    assert config.solver.alternatives == 10
    assert config.catalog.catalog_path == "/data/e96.json"
    assert config.server.port == 8080
    assert config.server.share is True
    assert config.logging.level == "DEBUG"


def test_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("FEEDBACK_ALTERNATIVES=3\nFEEDBACK_VOLTAGE_TOLERANCE=0.05\n", encoding="utf-8")

    config = AppConfig.from_env(str(env_file))
    assert config.solver.alternatives == 3
    assert config.solver.voltage_tolerance == 0.05


def test_default_instance():
    config = AppConfig()
    assert config.solver.voltage_weight == 1e5
    assert config.server.port == 7860
