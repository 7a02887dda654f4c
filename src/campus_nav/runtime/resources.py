# campus_nav/runtime/resources.py
import json
import os
import pickle
from functools import lru_cache

from campus_nav.config.models import MapDocumentModel


def load_map_from_path(file: str, fmt: str) -> MapDocumentModel:
    # keyed on mtime so an edited map file is re-read on the next build
    return _load_map(file, fmt, os.stat(file).st_mtime_ns)


@lru_cache(maxsize=8)
def _load_map(file: str, fmt: str, mtime_ns: int) -> MapDocumentModel:
    if fmt == "json":
        with open(file, encoding="utf-8") as f:
            return MapDocumentModel.model_validate(json.load(f))
    if fmt == "pickle":
        with open(file, "rb") as f:
            return MapDocumentModel.model_validate(pickle.load(f))
    raise ValueError(f"Unsupported map fmt {fmt!r}")
