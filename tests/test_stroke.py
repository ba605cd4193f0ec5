import pytest

from stroke import (LEFT, VOWELS, RIGHT, Stroke, StrokeParts, is_valid_stroke, is_valid_order,
		separate_stroke_parts, parts_to_stroke, stroke_concatenate)


@pytest.mark.parametrize("stroke", [
	"KAT",
	"-S",
	"-TS",
	"-PBLG",
	"SKWRAEUPL",
	"STKPWHR",
	"KA*T",
	"ZAP",
	"VAEUL",
	"PBLG",
	"A",
	"*",
])
def test_valid(stroke):
	assert is_valid_stroke(stroke)


@pytest.mark.parametrize("stroke", [
	"",
	"-",
	"KATT",    # repeated letter
	"TAK",     # K after the vowel
	"-ST",     # right bank out of order
	"PSOT",    # left bank out of order
	"KAX",
	"KA-",
	"-S-",
	"EUA",
	"KA**T",
])
def test_invalid(stroke):
	assert not is_valid_stroke(stroke)


def test_pure():
	assert [is_valid_stroke("KAT") for _ in range(3)]==[True]*3
	assert [is_valid_stroke("TAK") for _ in range(3)]==[False]*3


def test_separate_stroke_parts():
	assert separate_stroke_parts("SKWRAEUPL")==StrokeParts("SKWR", "AEU", "PL", True)
	assert separate_stroke_parts("PBLG")==StrokeParts("P", "", "BLG", True)
	assert separate_stroke_parts("KAX").valid is False


@pytest.mark.parametrize("stroke", ["KAT", "SKWRAEUPL", "STKPWHRAO*EUFRPBLGTSDZ", "-PBLG", "VOEUT", "ZAOED"])
def test_accepted_strokes_split_into_ordered_banks(stroke):
	assert is_valid_stroke(stroke)
	if stroke.startswith("-"):
		assert is_valid_order(stroke[1:], RIGHT)
		return
	parts=separate_stroke_parts(stroke)
	assert parts.left+parts.vowels+parts.right==stroke
	for part, bank in ((parts.left, LEFT), (parts.vowels, VOWELS), (parts.right, RIGHT)):
		assert is_valid_order(part, bank)
		assert len(set(part))==len(part)


@pytest.mark.parametrize("stroke", ["KAT", "SKWRAEUPL", "KA*T", "TPH*EUBG"])
def test_parts_to_stroke(stroke):
	assert parts_to_stroke(separate_stroke_parts(stroke)).raw_str()==stroke


def test_stroke_concatenate():
	star_t=Stroke(["*", "-T"])
	result=stroke_concatenate(Stroke(["K-", "A-"]), star_t)
	assert result is not None
	assert result.raw_str()=="KA*T"
	assert stroke_concatenate(Stroke(["K-", "A-", "-S"]), star_t) is None
