#!/bin/python
"""
Word boundary conflicts.

An outline A/B conflicts when A is an entry and B is an entry (or the start of one):
written after a word, the strokes of B could mean either the rest of A/B or a new word.
"""

import argparse
import itertools
from lib import *
from prefix_tree import PrefixTree


def split_points(length: int)->Iterator[int]:
	# right to left, then left to right
	return itertools.chain(range(length-1, 0, -1), range(1, length))

def valid_word_boundaries(
		strokes: Sequence[str],
		original: Mapping[str, str],
		additional: Mapping[str, str],
		prefix_tree: PrefixTree,
		)->bool:
	if len(strokes)<2:
		return True

	for i in split_points(len(strokes)):
		prefix=to_key(strokes[:i])
		suffix_strokes=strokes[i:]
		suffix=to_key(suffix_strokes)
		if not (prefix in original or prefix in additional):
			continue
		if not (suffix in original or suffix in additional or prefix_tree.has_prefix(suffix_strokes)):
			continue
		prefix_translation=original.get(prefix, additional.get(prefix, ""))
		suffix_translation=original.get(suffix, additional.get(suffix, ""))
		if prefix_translation.endswith(GLUE_RIGHT) or suffix_translation.startswith(GLUE_LEFT):
			continue  # glued, no space in between, so no ambiguity
		return False
	return True


def main(argv: Optional[Sequence[str]]=None)->int:
	parser=argparse.ArgumentParser(usage="""\
Determine word boundary conflicts.

Print the entries of the generated dictionaries that conflict with the base dictionary
(or with each other).
""")
	parser.add_argument("dictionary", type=Path, help="Path to base JSON dictionary.")
	parser.add_argument("generated", type=Path, nargs="+", help="Path to generated JSON dictionary.")
	args=parser.parse_args(argv)

	try:
		original=load_dictionary(args.dictionary)
		additional: Dict[str, str]={}
		for p in args.generated:
			additional.update(load_dictionary(p))
	except (OSError, ValueError) as e:
		parser.error(str(e))

	prefix_tree=PrefixTree()
	for outline in original:
		prefix_tree.insert(to_strokes(outline))

	count=0
	for outline in sorted_keys(additional):
		if not valid_word_boundaries(to_strokes(outline), original, additional, prefix_tree):
			print(f"Conflict: {outline} -> {additional[outline]!r}")
			count+=1
	print(f"{count} conflicts in {len(additional)} entries", file=sys.stderr)
	return 1 if count else 0


if __name__=="__main__":
	sys.exit(main())
