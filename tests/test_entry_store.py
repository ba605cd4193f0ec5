from entry_store import EntryStore


def test_add():
	store=EntryStore({"KAT": "cat", "OG": "og"})
	assert not store.add("KAT", "cat")       # already an original entry
	assert not store.add("TAK", "tack")      # invalid stroke
	assert not store.add("KAT/OG", "catog")  # word boundary conflict
	assert store.add("KATS", "cats")
	assert not store.add("KATS", "cats")
	assert "KATS" in store
	assert "KAT" in store
	assert store.additional=={"KATS": "cats"}
	assert store.original=={"KAT": "cat", "OG": "og"}


def test_prefix_tree_has_only_original_outlines():
	store=EntryStore({"KAT/TKOG": "catdog"})
	assert store.add("HOUS/PWOET", "houseboat")
	assert store.prefix_tree.has_prefix(["KAT"])
	assert not store.prefix_tree.has_prefix(["HOUS"])


def test_sorted_additional_keys():
	store=EntryStore({})
	for key in ["KAT/OG", "TKOG", "KAT", "A"]:
		assert store.add(key, key.lower())
	assert store.sorted_additional_keys()==["A", "KAT", "TKOG", "KAT/OG"]


def test_prune_conflicts():
	store=EntryStore({"OG": "og"})
	assert store.add("KAT/OG", "catog")
	assert store.add("KAT", "cat")  # now KAT/OG is ambiguous
	assert store.prune_conflicts()==["KAT/OG"]
	assert store.additional=={"KAT": "cat"}
	assert store.prune_conflicts()==[]
