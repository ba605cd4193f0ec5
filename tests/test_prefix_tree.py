from prefix_tree import PrefixTree


def tree()->PrefixTree:
	t=PrefixTree()
	t.insert(["KAT", "-S"])
	t.insert(["KAT", "TKOG", "HOUS"])
	return t


def test_has_prefix():
	t=tree()
	assert t.has_prefix(["KAT"])
	assert t.has_prefix(["KAT", "TKOG"])
	assert t.has_prefix(["KAT", "TKOG", "HOUS"])
	assert t.has_prefix([])
	assert not t.has_prefix(["TKOG"])
	assert not t.has_prefix(["KAT", "TKOG", "HOUS", "-S"])


def test_strokes_not_characters():
	t=tree()
	assert not t.has_prefix(["KA"])
	assert not t.has_prefix(["KAT/-S"])


def test_end_flag():
	t=tree()
	kat=t.root.children["KAT"]
	assert not kat.is_end
	assert kat.children["-S"].is_end
	assert t.has_prefix(["KAT"])  # a prefix even though no entry ends there
