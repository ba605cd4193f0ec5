from typing import Dict, Optional, Sequence


class PrefixTreeNode:
	__slots__=("children", "is_end")

	def __init__(self)->None:
		self.children: Dict[str, PrefixTreeNode]={}
		self.is_end=False


class PrefixTree:
	"""
	Trie over stroke sequences (one edge per stroke, not per character).
	"""

	def __init__(self)->None:
		self.root=PrefixTreeNode()

	def insert(self, strokes: Sequence[str])->None:
		node=self.root
		for stroke in strokes:
			child=node.children.get(stroke)
			if child is None:
				child=node.children[stroke]=PrefixTreeNode()
			node=child
		node.is_end=True

	def _find(self, strokes: Sequence[str])->Optional[PrefixTreeNode]:
		node=self.root
		for stroke in strokes:
			child=node.children.get(stroke)
			if child is None:
				return None
			node=child
		return node

	def has_prefix(self, strokes: Sequence[str])->bool:
		"""
		Whether some inserted sequence starts with (or is equal to) strokes.
		"""
		return self._find(strokes) is not None
