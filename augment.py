"""
Generate additional outlines for the entries of a dictionary.

Several passes: first over the original dictionary, then over what was generated
(so that the rules compose), and a last check for word boundary conflicts between
entries generated in different passes.
"""

from lib import *
from entry_store import EntryStore
from syllable_split import generate_splits
from literal_rules import (suffix_replacements, substring_replacements, linker_removals,
		linker_insertions, sz_folds, dash_fold, kwreu_variants, LINKER)

PROPER_NAME_STROKE_LIMIT=8


def looks_like_proper_name(strokes: Outline, translation: str, limit: int)->bool:
	# long, capitalized: rarely worth resplitting, and slow
	return len(strokes)>limit and translation[:1].isascii() and translation[:1].isupper()


class Augmenter:
	def __init__(self, store: EntryStore, progress_interval: int, verbose: bool)->None:
		self.store=store
		self.progress_interval=progress_interval
		self.verbose=verbose

	def log(self, *args)->None:
		if self.verbose:
			print_error(*args)

	def add_all(self, keys: Iterable[str], translation: str)->None:
		for key in keys:
			self.store.add(key, translation)

	def each(self, keys: Sequence[str], description: str)->Iterator[Tuple[str, Outline]]:
		for count, key in enumerate(keys, 1):
			if self.progress_interval>0 and count%self.progress_interval==0:
				self.log(f"[{description}]", count, "/", len(keys))
			yield key, to_strokes(key)

	def original_pass(self, proper_name_stroke_limit: int)->None:
		original=self.store.original
		for key, strokes in self.each(sorted_keys(original), "original entries"):
			translation=original[key]
			if looks_like_proper_name(strokes, translation, proper_name_stroke_limit):
				self.log("Skipping", key, repr(translation),
						f"(looks like a proper name with > {proper_name_stroke_limit} strokes)")
				continue

			if len(strokes)>=2:
				self.add_all(map(to_key, generate_splits(strokes, self.store)), translation)
				if "/"+LINKER in key:
					self.add_all(linker_removals(strokes, original), translation)

			self.add_all(sz_folds(strokes), translation)
			self.add_all(suffix_replacements(key), translation)
			self.add_all(substring_replacements(key), translation)

			folded=dash_fold(strokes)
			if folded is not None:
				self.store.add(folded, translation)
				self.add_all(sz_folds(to_strokes(folded)), translation)

			self.add_all(kwreu_variants(key, translation), translation)

	def derived_pass(self)->None:
		# rules applied on generated entries
		additional=self.store.additional
		for key, strokes in self.each(self.store.sorted_additional_keys(), "additional entries (rules)"):
			translation=additional[key]
			if len(strokes)>=2 and "/"+LINKER in key:
				self.add_all(linker_removals(strokes, self.store.original), translation)
			self.add_all(suffix_replacements(key), translation)
			self.add_all(substring_replacements(key), translation)

	def split_pass(self)->None:
		additional=self.store.additional
		for key, strokes in self.each(self.store.sorted_additional_keys(), "additional entries (alternate splits)"):
			if len(strokes)>=2:
				self.add_all(map(to_key, generate_splits(strokes, self.store)), additional[key])

	def linker_pass(self)->None:
		# SEU/TPOEF/KWRA -> SEUB/OEF/KWRA was generated, also generate SEUB/KWROEF/KWRA
		additional=self.store.additional
		for key, strokes in self.each(self.store.sorted_additional_keys(), "additional entries (KWR addition)"):
			if len(strokes)>=2:
				self.add_all(linker_insertions(strokes), additional[key])


def augment(
		original: Mapping[str, str],
		proper_name_stroke_limit: int=PROPER_NAME_STROKE_LIMIT,
		progress_interval: int=10000,
		verbose: bool=False,
		)->Dict[str, str]:
	"""
	Return the generated entries (not including the original ones), shortest outlines first.
	"""
	store=EntryStore(original)
	augmenter=Augmenter(store, progress_interval, verbose)

	augmenter.original_pass(proper_name_stroke_limit)
	augmenter.log("Generated", len(store.additional), "entries from", len(original), "original entries")
	augmenter.derived_pass()
	augmenter.split_pass()
	augmenter.linker_pass()
	augmenter.log("Generated", len(store.additional), "entries before checking word boundaries")

	for key in store.prune_conflicts():
		augmenter.log("Removing", key, "due to conflicting word boundaries")
	augmenter.log("Added", len(store.additional), "additional entries overall")

	return {key: store.additional[key] for key in store.sorted_additional_keys()}
