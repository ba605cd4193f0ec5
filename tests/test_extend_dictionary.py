import json

import pytest

import extend_dictionary

expected={"KAT/-Z": "cats", "KATS": "cats", "KATZ": "cats"}


def write(path, data):
	path.write_text(json.dumps(data), encoding="utf-8")
	return str(path)


def test_output_files(tmp_path):
	source=write(tmp_path/"source.json", {"KAT/-S": "cats"})
	outputs=[tmp_path/"a.json", tmp_path/"b.json"]
	extend_dictionary.main(["-i", source, "-o", str(outputs[0]), "-o", str(outputs[1]), "-q"])
	for p in outputs:
		assert json.loads(p.read_text(encoding="utf-8"))==expected
	assert outputs[0].read_text(encoding="utf-8")==outputs[1].read_text(encoding="utf-8")


def test_stdout(tmp_path, capsys):
	source=write(tmp_path/"source.json", {"KAT/-S": "cats"})
	extend_dictionary.main(["-i", source, "-q"])
	captured=capsys.readouterr()
	assert json.loads(captured.out)==expected
	assert captured.err==""


def test_progress_on_stderr(tmp_path, capsys):
	source=write(tmp_path/"source.json", {"KAT/-S": "cats"})
	extend_dictionary.main(["-i", source, "--progress-interval", "1"])
	err=capsys.readouterr().err
	assert "[original entries] 1 / 1" in err
	assert "Added 3 additional entries overall" in err


def test_inputs_are_merged(tmp_path):
	first=write(tmp_path/"first.json", {"KAT/-S": "cats"})
	second=write(tmp_path/"second.json", {"KAT/-S": "kats", "TKOG": "dog"})
	output=tmp_path/"out.json"
	extend_dictionary.main(["-i", first, "-i", second, "-o", str(output), "-q"])
	assert json.loads(output.read_text(encoding="utf-8"))=={"KAT/-Z": "kats", "KATS": "kats", "KATZ": "kats"}


@pytest.mark.parametrize("content", [
	"{not json",
	'["KAT"]',
	'{"KAT": 1}',
])
def test_malformed_input(tmp_path, content):
	source=tmp_path/"source.json"
	source.write_text(content, encoding="utf-8")
	with pytest.raises(SystemExit) as info:
		extend_dictionary.main(["-i", str(source), "-q"])
	assert info.value.code==2


def test_missing_input(tmp_path):
	with pytest.raises(SystemExit):
		extend_dictionary.main(["-i", str(tmp_path/"missing.json"), "-q"])
