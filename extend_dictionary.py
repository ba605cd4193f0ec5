#!/bin/python3
from lib import *
from augment import augment, PROPER_NAME_STROKE_LIMIT
import argparse
import contextlib


def parser_()->argparse.ArgumentParser:
	parser=argparse.ArgumentParser(usage="Generate alternate outlines (resplit syllables, folded suffixes...) for a dictionary",
			formatter_class=argparse.ArgumentDefaultsHelpFormatter
			)
	parser.add_argument("-i", "--input", type=Path, action="append", required=True,
			help="Path to JSON dictionary. Can be specified multiple times, later ones override earlier ones.")
	parser.add_argument("-o", "--output", type=Path, action="append",
			help="Output file path. Can be specified multiple times. Defaults to stdout.")
	parser.add_argument("--proper-name-stroke-limit", type=int, default=PROPER_NAME_STROKE_LIMIT,
			help="Capitalized entries with more strokes than this are not processed.")
	parser.add_argument("--progress-interval", type=int, default=10000,
			help="Print progress every this many entries. Zero or negative disables it.")
	parser.add_argument("-q", "--quiet", action="store_true",
			help="Do not print progress.")
	return parser


def main(argv: Optional[Sequence[str]]=None)->None:
	parser=parser_()
	args=parser.parse_args(argv)
	if not args.quiet:
		warn_if_not_optimization()

	source: Dict[str, str]={}
	for p in args.input:
		try:
			source.update(load_dictionary(p))
		except (OSError, ValueError) as e:
			parser.error(f"cannot read dictionary {p}: {e}")
	if not args.quiet:
		print_error("Done reading dictionaries. Combined size:", len(source))

	with timing("generate") if not args.quiet else contextlib.nullcontext():
		generated=augment(source,
				proper_name_stroke_limit=args.proper_name_stroke_limit,
				progress_interval=args.progress_interval,
				verbose=not args.quiet)

	content=json.dumps(generated, indent=2, ensure_ascii=False, sort_keys=True)+"\n"
	if not args.output:
		sys.stdout.write(content)
		return
	for p in args.output:
		p.write_text(content, encoding="utf-8")
		if not args.quiet:
			print_error("Wrote", len(generated), "entries to", p)


if __name__=="__main__":
	main()
