from pathlib import Path
from typing import List, Dict, Mapping, Optional, Sequence, Tuple, Set, Callable, Any, Iterable, Iterator, MutableMapping
from time import time
import sys
import json


from contextlib import contextmanager
@contextmanager
def timing(info: Any):
	"""
	Simple context manager measure time taken by code.
	"""
	start=time()
	try:
		yield
	finally:
		duration=time()-start
		print(f"{duration:8.3f}:", info, file=sys.stderr)

from stroke import*

Outline=Tuple[str, ...]

GLUE_RIGHT="^}"  # "{prefix^}" attaches to the next word
GLUE_LEFT="{^"   # "{^suffix}" attaches to the previous word

def to_strokes(key: str)->Outline:
	return tuple(key.split(SEPARATOR))

def to_key(strokes: Iterable[str])->str:
	return SEPARATOR.join(strokes)

def length_then_lexicographic(key: str)->Tuple[int, str]:
	return (len(key), key)

def sorted_keys(keys: Iterable[str])->List[str]:
	# shorter outlines first: roughly the more common words, without frequency data.
	return sorted(keys, key=length_then_lexicographic)

def load_dictionary(p: Path)->Dict[str, str]:
	"""
	Read a JSON dictionary. Raise ValueError if it's not a flat str -> str mapping.
	"""
	data=json.loads(p.read_text(encoding="utf-8"))
	if not isinstance(data, dict):
		raise ValueError(f"{p}: expected a JSON object, got {type(data).__name__}")
	for outline, translation in data.items():
		if not isinstance(translation, str):
			raise ValueError(f"{p}: translation of {outline!r} is not a string: {translation!r}")
	return data

def print_error(*args, **kwargs)->None:
	print(*args, **kwargs, file=sys.stderr)

def warn_if_not_optimization()->None:
	try:
		assert False
	except AssertionError:
		print("Note: assertions are enabled. May slow down the program.", file=sys.stderr)
