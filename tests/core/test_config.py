from core.config import AppConfig


def test_config_defaults(tmp_path):
    cfg = AppConfig(path=tmp_path / "config.json")
    assert cfg.midi_device == "MIDI Out"
    assert cfg.channel == 1
    assert cfg.group == 0
    assert cfg.source == 0
    assert cfg.chart_format == "graph"


def test_config_save_and_load(tmp_path):
    path = tmp_path / "config.json"
    cfg = AppConfig(path=path)
    cfg.midi_device = "K5000 Port"
    cfg.channel = 3
    cfg.source = 2
    cfg.save()
    cfg2 = AppConfig(path=path)
    assert cfg2.midi_device == "K5000 Port"
    assert cfg2.channel == 3
    assert cfg2.source == 2


def test_config_does_not_crash_on_missing_file(tmp_path):
    cfg = AppConfig(path=tmp_path / "nonexistent" / "config.json")
    assert cfg.channel == 1


def test_config_ignores_corrupt_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    cfg = AppConfig(path=path)
    assert cfg.midi_device == "MIDI Out"


def test_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"channel": 5, "bogus": 1}')
    cfg = AppConfig(path=path)
    assert cfg.channel == 5
    assert not hasattr(cfg, "bogus")


def test_config_wrong_types_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"channel": 2.5, "group": null, "source": true, "midi_device": 7}')
    cfg = AppConfig(path=path)
    assert cfg.channel == 1
    assert cfg.group == 0
    assert cfg.source == 0
    assert cfg.midi_device == "MIDI Out"


def test_config_non_object_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")
    cfg = AppConfig(path=path)
    assert cfg.channel == 1
