from lib import *
from prefix_tree import PrefixTree
from word_boundary_conflicts import valid_word_boundaries


class EntryStore:
	"""
	The original dictionary (read only) and the entries generated from it.

	Every generated entry goes through add(), so at the moment it's inserted it has valid strokes
	and no word boundary conflict. Entries inserted later can still conflict with it,
	see prune_conflicts().
	"""

	def __init__(self, original: Mapping[str, str])->None:
		self.original=original
		self.additional: Dict[str, str]={}
		# only the original outlines, a stable vocabulary to check segmentation against
		self.prefix_tree=PrefixTree()
		for outline in original:
			self.prefix_tree.insert(to_strokes(outline))

	def __contains__(self, key: str)->bool:
		return key in self.original or key in self.additional

	def valid_word_boundaries(self, strokes: Sequence[str])->bool:
		return valid_word_boundaries(strokes, self.original, self.additional, self.prefix_tree)

	def add(self, key: str, translation: str)->bool:
		if key in self:
			return False
		strokes=to_strokes(key)
		if not all(is_valid_stroke(stroke) for stroke in strokes):
			return False
		if not self.valid_word_boundaries(strokes):
			return False
		self.additional[key]=translation
		return True

	def sorted_additional_keys(self)->List[str]:
		return sorted_keys(self.additional)

	def prune_conflicts(self)->List[str]:
		"""
		Remove the additional entries that conflict with the final state of the dictionaries.
		Return the removed outlines.
		"""
		removed: List[str]=[]
		for key in self.sorted_additional_keys():
			if not self.valid_word_boundaries(to_strokes(key)):
				del self.additional[key]
				removed.append(key)
		return removed
