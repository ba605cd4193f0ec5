from typing import List, Optional
from dataclasses import dataclass
from plover_stroke import BaseStroke  # type: ignore

# letter banks, in steno order.
# the left bank has Z- and V- in addition to the usual English Stenotype keys.
LEFT="ZSTKPWHRV"
VOWELS="AO*EU"
RIGHT="FRPBLGTSDZ"

BOUNDARY="-"  # "-S": right bank only
SEPARATOR="/"


class Stroke(BaseStroke):
	def raw_str(self)->str:
		return super().__repr__()


Stroke.setup(

keys = (
    '#',
    'Z-', 'S-', 'T-', 'K-', 'P-', 'W-', 'H-', 'R-', 'V-',
    'A-', 'O-',
    '*',
    '-E', '-U',
    '-F', '-R', '-P', '-B', '-L', '-G', '-T', '-S', '-D', '-Z',
),

implicit_hyphen_keys = ('A-', 'O-', '-E', '-U', '*'),

number_key = '#',

numbers = {
    'S-': '1-',
    'T-': '2-',
    'P-': '3-',
    'H-': '4-',
    'A-': '5-',
    'O-': '0-',
    '-F': '-6',
    '-P': '-7',
    '-L': '-8',
    '-T': '-9',
}
		)

star=Stroke("*")
not_star=~star  # int bit mask.


@dataclass(frozen=True)
class StrokeParts:
	left: str
	vowels: str
	right: str
	valid: bool


def separate_stroke_parts(stroke: str)->StrokeParts:
	"""
	Split a stroke into its left, vowel and right part.
	Each character goes to the current bank if it fits, otherwise to the first later bank
	that has it; there's no going back.
	"""
	banks=(LEFT, VOWELS, RIGHT)
	parts: List[str]=["", "", ""]
	state=0
	for c in stroke:
		while state<len(banks) and c not in banks[state]:
			state+=1
		if state==len(banks):
			return StrokeParts(*parts, False)
		parts[state]+=c
	return StrokeParts(*parts, True)


def is_valid_order(part: str, order: str)->bool:
	last=-1
	for c in part:
		index=order.find(c)
		if index<=last:  # also rejects -1 (not in this bank)
			return False
		last=index
	return True


def has_repeated_letters(stroke: str)->bool:
	return any(a==b for a, b in zip(stroke, stroke[1:]))


def is_valid_stroke(stroke: str)->bool:
	if not stroke or stroke==BOUNDARY or has_repeated_letters(stroke):
		return False

	if stroke.startswith(BOUNDARY):
		return is_valid_order(stroke[1:], RIGHT)

	parts=separate_stroke_parts(stroke)
	return (parts.valid and
			is_valid_order(parts.left, LEFT) and
			is_valid_order(parts.vowels, VOWELS) and
			is_valid_order(parts.right, RIGHT))


def parts_to_stroke(parts: StrokeParts)->Stroke:
	keys: List[str]=[c+"-" for c in parts.left]
	for c in parts.vowels:
		keys.append(c+"-" if c in "AO" else "-"+c if c in "EU" else c)
	keys+=["-"+c for c in parts.right]
	return Stroke(keys)


def stroke_concatenate(a: Stroke, b: Stroke)->Optional[Stroke]:
	"""
	Tuck b after a. Return None if some (non-star) key of b doesn't come after all keys of a.
	"""
	a_=a&not_star
	b_=b&not_star
	if a_ and b_ and not a_.is_prefix(b_):
		return None
	return a|b
