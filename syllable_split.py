"""
Alternate syllable splits.

Consonants at a stroke boundary can often go to either side: KAT/TKOG could also be
written KATD/OG. Given an outline, move up to all the trailing consonants of a stroke to the
next stroke, or the leading consonants of a stroke to the previous one, rewriting the moved
chord for its new hand (TK- on the left is -D on the right).
"""

import itertools
from lib import *
from entry_store import EntryStore

CONSONANTS="BCDFGHJKLMNPQRSTVWXZ"
LINKER="KWR"

# chords that stand for a single sound and must move as a whole
protected_left: List[str]="""
KWR PW KH TK TP TH TKPW SKWR HR PH TPH KW SR KP STKPW SH THR
""".split()
protected_right: List[str]="""
FT PL BG BGT PBGT LG PB PBLG FRB PBG FP RB FRPB GS BGS PBT PLT LT BL PBS
""".split()

# right hand chord moved to the start of the next stroke -> left hand equivalent
right_to_left: Dict[str, str]={}
for line in [
		"PL     | PH     ", # m
		"PB     | TPH    ", # n
		"F      | TP     ", # f
		"BG     | K      ", # k
		"BGT    | -BGT   ", # kt stays on the right hand
		"PBLG   | SKWR   ", # j
		"FP     | KH     ", # ch
		"RB     | SH     ", # sh
		]:
	a, b=line.split("|")
	right_to_left[a.strip()]=b.strip()

# left hand chord moved to the end of the previous stroke -> right hand equivalent
left_to_right: Dict[str, str]={}
for line in [
		"PW     | B      ",
		"TK     | D      ",
		"TP     | F      ",
		"TKPW   | G      ",
		"SKWR   | PBLG   ", # j
		"K      | BG     ",
		"HR     | L      ",
		"PH     | PL     ", # m
		"TPH    | PB     ", # n
		"SR     | F      ", # v
		"TH     | *T     ", # th: star + T
		"KH     | FP     ", # ch
		"SH     | RB     ", # sh
		"STKPW  | Z      ",
		]:
	a, b=line.split("|")
	left_to_right[a.strip()]=b.strip()


def consonants_at_end(stroke: str)->int:
	count=0
	for c in reversed(stroke):
		if c not in CONSONANTS: break
		count+=1
	return count

def consonants_at_beginning(stroke: str)->int:
	count=0
	for c in stroke:
		if c not in CONSONANTS and c!=BOUNDARY: break
		count+=1
	return count

def is_glide(stroke: str)->bool:
	# KWR + vowel: a silent linker, its consonants are not part of a syllable
	return len(stroke)>=4 and stroke.startswith(LINKER) and stroke[3] in "AEOU"


def move_to_right(right: str, moved: str)->str:
	if right.startswith(BOUNDARY):
		right=right[1:]
	return right_to_left.get(moved, moved)+right

def move_to_left(left: str, moved: str)->Optional[str]:
	replacement=left_to_right.get(moved, moved)
	if not replacement.startswith("*"):
		return left+replacement
	# the star goes in the middle of the stroke
	parts=separate_stroke_parts(left)
	if not parts.valid:
		return None
	t=stroke_concatenate(parts_to_stroke(parts), Stroke(["*"]+["-"+c for c in replacement[1:]]))
	if t is None:
		return None
	return t.raw_str()


def apply_offsets(strokes: Sequence[str], offsets: Sequence[int])->Optional[List[str]]:
	"""
	offsets[i] < 0: move -offsets[i] characters from the end of strokes[i] to strokes[i+1].
	offsets[i] > 0: move offsets[i] characters from the start of strokes[i+1] to strokes[i].
	Applied left to right. Return None if a protected chord would be split.
	"""
	assert len(offsets)==len(strokes)-1, (strokes, offsets)
	current=list(strokes)
	for i, offset in enumerate(offsets):
		if offset==0: continue
		left, right=current[i], current[i+1]
		if is_glide(right):
			return None

		if offset<0:
			if any(-offset<len(chord) and left.endswith(chord) for chord in protected_right):
				return None
			if "*" in left:
				continue  # *T and the like stay where they are
			n=min(-offset, len(left))
			if n==0:
				continue  # emptied by the previous boundary, nothing to move
			current[i+1]=move_to_right(right, left[len(left)-n:])
			current[i]=left[:len(left)-n]

		else:
			if any(offset<len(chord) and right.startswith(chord) for chord in protected_left):
				return None
			if any(offset<len(chord)+1 and right.startswith(BOUNDARY+chord) for chord in protected_right):
				return None
			n=min(offset, len(right))
			moved=right[:n]
			if moved.startswith(BOUNDARY) and len(moved)>1:
				moved=moved[1:]
			left_=move_to_left(left, moved)
			if left_ is None:
				return None
			current[i]=left_
			current[i+1]=right[n:]

	return current


def generate_splits(strokes: Sequence[str], store: EntryStore)->List[Outline]:
	"""
	Return the alternate splits of strokes that are valid and have no word boundary conflict,
	sorted, excluding strokes itself.
	"""
	intervals=[
			range(-consonants_at_end(a), consonants_at_beginning(b)+1)
			for a, b in zip(strokes, strokes[1:])
			]
	seen: Set[Outline]={tuple(strokes)}
	result: List[Outline]=[]
	for offsets in itertools.product(*intervals):
		current=apply_offsets(strokes, offsets)
		if current is None: continue
		outline: Outline=tuple(stroke for stroke in current if stroke)
		if outline in seen: continue
		seen.add(outline)
		if not all(is_valid_stroke(stroke) for stroke in outline): continue
		if not store.valid_word_boundaries(outline): continue
		result.append(outline)
	return sorted(result, key=to_key)
