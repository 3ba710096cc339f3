import json
import pytest
import Errors
import GeneratorConfig


def write_config(directory, name, **options):
	values = {"dev": "json", "std": "20", "arch": "arm64"}
	values.update(options)
	(directory / (name + ".json")).write_text(json.dumps(values))


def test_defaults():
	config = GeneratorConfig.GeneratorProperties()
	assert config.dev == "cmake"
	assert config.output_directory == "target"
	assert config.cxx_standard() == "17"


def test_load(tmp_path):
	write_config(tmp_path, "release", workspace="ws")
	config = GeneratorConfig.GeneratorProperties()
	assert config.load(str(tmp_path), "release")
	assert config.name == "release"
	assert config.dev == "json"
	assert config.std == "20"
	assert config.arch == "arm64"
	assert config.workspace == "ws"
	assert config.output_directory == "target"


def test_load_missing_file(tmp_path):
	with pytest.raises(Errors.CGenError, match="does not exist"):
		GeneratorConfig.GeneratorProperties().load(str(tmp_path), "nope")


def test_load_invalid_value(tmp_path):
	write_config(tmp_path, "bad", dev="ninja")
	with pytest.raises(Errors.CGenError, match="Invalid value 'ninja'"):
		GeneratorConfig.GeneratorProperties().load(str(tmp_path), "bad")


def test_load_missing_option(tmp_path):
	(tmp_path / "partial.json").write_text(json.dumps({"dev": "cmake", "std": "17"}))
	with pytest.raises(Errors.CGenError, match="Missing required option 'arch'"):
		GeneratorConfig.GeneratorProperties().load(str(tmp_path), "partial")


def test_load_malformed(tmp_path):
	(tmp_path / "broken.json").write_text("{")
	with pytest.raises(Errors.CGenError, match="Malformed"):
		GeneratorConfig.GeneratorProperties().load(str(tmp_path), "broken")


def test_save_then_load(tmp_path):
	config = GeneratorConfig.GeneratorProperties()
	config.std = "latest"
	path = config.save(str(tmp_path), "mine")
	assert json.loads(open(path).read())["std"] == "latest"

	loaded = GeneratorConfig.GeneratorProperties()
	loaded.load(str(tmp_path), "mine")
	assert loaded.cxx_standard() == "20"


def test_read_keeps_defaults_on_empty_input(monkeypatch):
	answers = iter(["json", "", "bogus", "arm64", "", "out"])
	monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
	config = GeneratorConfig.GeneratorProperties()
	config.read()
	assert config.dev == "json"
	assert config.std == "17"
	assert config.arch == "arm64"
	assert config.output_directory == "out"


def test_get_config_falls_back_to_defaults(tmp_path):
	config = GeneratorConfig.get_config(str(tmp_path), "default")
	assert config.name == "default"
	assert config.dev == "cmake"

	write_config(tmp_path, "default")
	assert GeneratorConfig.get_config(str(tmp_path), "default").dev == "json"


def test_load_rejects_non_object(tmp_path):
	(tmp_path / "list.json").write_text("[]")
	with pytest.raises(Errors.CGenError, match="expected a JSON object"):
		GeneratorConfig.GeneratorProperties().load(str(tmp_path), "list")
