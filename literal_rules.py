"""
Hand written rewriting rules on outline text.

The generators only propose outlines; whether a proposal is kept is decided by EntryStore.add.
"""

import re
from typing import NamedTuple
from lib import *
from syllable_split import LINKER, protected_right


class ReplacementRule(NamedTuple):
	pattern: str
	replacements: List[str]

def rule_table(rules: Dict[str, List[str]])->List[ReplacementRule]:
	# the order is a tie-break: shorter patterns first, then lexicographically
	return [ReplacementRule(pattern, rules[pattern]) for pattern in sorted_keys(rules)]


suffix_rules_: Dict[str, List[str]]={}
for left in "H HR K KH KR KW P PH PW R S SR SKWR T TH THR TK TKPW TPH TP TR W".split():
	# -y: EU, AOE and AE are all used
	suffix_rules_[f"/{left}EU"]=[f"/{left}AOE", f"/{left}AE"]
for line in [
		"/-B/KWREU   | /PWEU     ",
		"/-BL/KWREU  | /PWHREU   ",
		"/-FL/KWREU  | /TPHREU   ",
		"/-L/KWREU   | /HREU     ",
		"/-P/KWREU   | /PEU      ",
		"/-PL/KWREU  | /PHREU    ",
		"R/KWREU     | /REU      ",
		"PB/KWREU    | /TPHEU    ",
		"PL/KWREU    | /PHEU     ",
		"F/KWREU     | /TPEU     ",
		"BG/KWREU    | /KEU      ",
		"S           | Z         ",
		]:
	pattern, replacements=line.split("|")
	suffix_rules_[pattern.strip()]=replacements.split()
suffix_rules: List[ReplacementRule]=rule_table(suffix_rules_)

substring_rules_: Dict[str, List[str]]={}
for line in [
		"/-B/KWR     | /PW       ",
		"/-BL/KWR    | /PWHR     ",
		"/-FL/KWR    | /TPHR     ",
		"/-L/KWR     | /HR       ",
		"/-P/KWR     | /P        ",
		"/-PL/KWR    | /PHR      ",
		"D/KWR       | /TK       ", # d
		"G/KWR       | /TKPW     ", # g
		"PBLG/KWR    | /SKWR     ", # j
		"BG/KWR      | /K        ", # k
		"L/KWR       | /HR       ", # l
		"PL/KWR      | /PH       ", # m
		"PB/KWR      | /TPH      ", # n
		"P/KWR       | /P        ", # p
		"R/KWR       | /R        ", # r
		"S/KWR       | /S        ", # s
		"T/KWR       | /T        ", # t
		"Z/KWR       | /STKPW    ", # z
		"STKPW       | Z         ", # z
		"SR          | V         ", # v
		]:
	pattern, replacements=line.split("|")
	substring_rules_[pattern.strip()]=replacements.split()
substring_rules: List[ReplacementRule]=rule_table(substring_rules_)


def collapse_separators(key: str)->str:
	return key.replace(SEPARATOR*2, SEPARATOR)

def suffix_replacements(key: str, rules: Sequence[ReplacementRule]=suffix_rules)->List[str]:
	for rule in rules:
		if key.endswith(rule.pattern):
			return [
					collapse_separators(key[:len(key)-len(rule.pattern)]+replacement)
					for replacement in rule.replacements]
	return []

# these letters are also the last key of right hand chords (-PL m, -BG k, -PBLG j...),
# where they don't stand for l or g
chord_final_patterns={"G/KWR", "L/KWR"}

def ends_protected_chord(text: str, head: str)->bool:
	return any(len(chord)>len(head) and text.endswith(chord) for chord in protected_right)

def replace_occurrences(key: str, pattern: str, replacement: str)->str:
	"""
	Like key.replace(pattern, replacement), but occurrences of a chord final pattern
	that complete a protected right hand chord are left alone.
	"""
	if pattern not in chord_final_patterns:
		return key.replace(pattern, replacement)
	head=pattern.split(SEPARATOR)[0]
	pieces: List[str]=[]
	start=0
	while True:
		index=key.find(pattern, start)
		if index<0: break
		end=index+len(pattern)
		if ends_protected_chord(key[:index]+head, head):
			pieces.append(key[start:end])
		else:
			pieces.append(key[start:index]+replacement)
		start=end
	pieces.append(key[start:])
	return "".join(pieces)

def substring_replacements(key: str, rules: Sequence[ReplacementRule]=substring_rules)->List[str]:
	result: List[str]=[]
	for rule in rules:
		if rule.pattern not in key: continue
		for replacement in rule.replacements:
			new_key=replace_occurrences(key, rule.pattern, replacement)
			if new_key!=key:
				result.append(collapse_separators(new_key))
	return result


def subsets(indexes: Sequence[int])->Iterator[List[int]]:
	# bit j of mask selects indexes[j]
	for mask in range(1<<len(indexes)):
		yield [index for j, index in enumerate(indexes) if mask>>j&1]

def linker_removals(strokes: Sequence[str], original: Mapping[str, str])->List[str]:
	"""
	Drop the silent linker KWR- from some non-first strokes (SEU/KWROEF/KWRA -> SEU/OEF/KWRA...).
	Rejected if the strokes before a stripped stroke are an entry on their own.
	"""
	indexes=[i for i, stroke in enumerate(strokes)
			if i>0 and stroke.startswith(LINKER) and stroke!=LINKER]
	key=to_key(strokes)
	result: List[str]=[]
	for chosen in subsets(indexes):
		new_strokes=list(strokes)
		for i in chosen:
			new_strokes[i]=new_strokes[i][len(LINKER):]
		new_key=to_key(new_strokes)
		if new_key==key: continue
		if any(to_key(new_strokes[:i]) in original for i in chosen): continue
		result.append(new_key)
	return sorted(result)

def linker_insertions(strokes: Sequence[str])->List[str]:
	# SEUB/OEF/KWRA -> SEUB/KWROEF/KWRA
	indexes=[i for i, stroke in enumerate(strokes)
			if i>0 and stroke[:1] in ("A", "E", "O", "U")]
	result: List[str]=[]
	for chosen in subsets(indexes):
		if not chosen: continue
		new_strokes=list(strokes)
		for i in chosen:
			new_strokes[i]=LINKER+new_strokes[i]
		result.append(to_key(new_strokes))
	return sorted(result)


vowels_dashes=re.compile(r"[AEOU\-*]")
right_hand_after_s=re.compile(r"[DZ]")  # -S cannot be added to these

def after_vowels(stroke: str)->str:
	matches=[*vowels_dashes.finditer(stroke)]
	if not matches:
		return stroke
	return stroke[matches[-1].end():]

def sz_folds(strokes: Sequence[str])->List[str]:
	"""
	KAT/-S -> KATZ, KATS
	"""
	if len(strokes)<2 or strokes[-1] not in ("-S", "-Z"):
		return []
	previous=after_vowels(strokes[-2])
	stem=to_key(strokes[:-1])
	if strokes[-1]=="-S":
		if previous.endswith("S") or right_hand_after_s.search(previous):
			return []
	elif previous.endswith("Z"):
		return []
	return [stem+"Z", stem+"S"]

def dash_fold(strokes: Sequence[str])->Optional[str]:
	"""
	KAT/-D -> KATD
	"""
	if len(strokes)<2:
		return None
	last=strokes[-1]
	if not last.startswith(BOUNDARY) or len(last)<2:
		return None
	if strokes[-2].endswith(last[1]):
		return None
	return to_key(strokes[:-1])+last[1:]


linker_suffix_pattern=re.compile(r"^.*/KWR([^/]*)$")

def kwreu_variants(key: str, translation: str)->List[str]:
	"""
	A final KWREU (-y) can also be written KWRAOE or KWRAE.
	"""
	match_=linker_suffix_pattern.fullmatch(key)
	if match_ is None:
		return []
	rest=match_[1]
	if not rest:
		print_error("No KWR suffix found in key:", key, "value:", translation)
		return []
	if rest!="EU":
		return []
	# lefty-loosy, hanky-panky: don't mix KWREU and KWRAOE in one outline
	if "/KWREU/" in key and ("y-" in translation or "y " in translation):
		return []
	stem=key[:len(key)-len(rest)]
	return [stem+"AOE", stem+"AE"]
