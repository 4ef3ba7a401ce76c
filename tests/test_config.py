import pytest
import yaml
from tikzpicture.config import ConfigManager, PictureConfig


def test_defaults():
    config = PictureConfig()
    assert config.precision == 2
    assert config.indent == "    "
    assert config.environment == "tikzpicture"
    assert config.scope_environment == "scope"


def test_changed_signal_fires_only_on_change():
    config = PictureConfig()
    calls = []
    config.changed.connect(
        lambda sender, **kwargs: calls.append(kwargs["field"]), weak=False
    )

    config.set_precision(2)
    assert calls == []
    config.set_precision(4)
    config.set_indent("\t")
    assert calls == ["precision", "indent"]


def test_set_precision_clamps():
    config = PictureConfig()
    config.set_precision(-5)
    assert config.precision == 0


def test_empty_environment_rejected():
    config = PictureConfig()
    with pytest.raises(ValueError):
        config.set_environment("")
    with pytest.raises(ValueError):
        config.set_scope_environment("")


def test_dict_round_trip():
    config = PictureConfig()
    config.set_precision(3)
    config.set_environment("pgfpicture")
    restored = PictureConfig.from_dict(config.to_dict())
    assert restored.to_dict() == config.to_dict()


def test_from_dict_uses_defaults_for_missing_keys():
    config = PictureConfig.from_dict({"precision": 5})
    assert config.precision == 5
    assert config.environment == "tikzpicture"


def test_from_dict_invalid_precision():
    with pytest.raises(ValueError):
        PictureConfig.from_dict({"precision": "high"})


class TestConfigManager:
    def test_missing_file_gives_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path / "missing.yaml")
        assert manager.config is not None
        assert manager.config.to_dict() == PictureConfig().to_dict()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        manager = ConfigManager(path)
        assert manager.config is not None
        assert manager.config.precision == 2

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "picture.yaml"
        manager = ConfigManager(path)
        assert manager.config is not None
        manager.config.set_precision(4)
        manager.config.set_indent("  ")
        manager.save()

        data = yaml.safe_load(path.read_text())
        assert data["precision"] == 4

        reloaded = ConfigManager(path).config
        assert reloaded is not None
        assert reloaded.precision == 4
        assert reloaded.indent == "  "
