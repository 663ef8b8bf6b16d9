# data_loader.py - read emoji_data_<language>.json files into an index payload

# Layout on disk (one file per language):
#   data/emoji_data_english.json   {"cat": "🐱 🐈", ...}
#   data/emoji_data_russian.json   {"кот": "🐱 🐈", ...}

import json
import os
from typing import Any, Dict, Iterable, List, Optional

from emoji_index.core.errors import MalformedInput
from emoji_index.utils.logger_utils import Log

FILE_PREFIX = "emoji_data_"
FILE_SUFFIX = ".json"


def dataset_path(data_dir: str, language: str) -> str:
    return os.path.join(data_dir, f"{FILE_PREFIX}{language.lower()}{FILE_SUFFIX}")


def available_languages(data_dir: str) -> List[str]:
    """Languages that have a data file in `data_dir`, sorted."""
    if not os.path.isdir(data_dir):
        return []
    out = []
    for fname in os.listdir(data_dir):
        if fname.startswith(FILE_PREFIX) and fname.endswith(FILE_SUFFIX):
            out.append(fname[len(FILE_PREFIX):-len(FILE_SUFFIX)].lower())
    return sorted(out)


def load_language_file(path: str) -> Dict[str, Any]:
    """
    Read one language file.
    Returns:
        dict: the decoded {keyword: "glyphs"} map (shape is checked by the index).
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except ValueError as e:
            raise MalformedInput(f"{path}: not valid JSON ({e})") from e


def load_dataset(data_dir: str, languages: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Build the {language: {keyword: "glyphs"}} payload for EmojiIndex.initialize.
    languages=None loads every emoji_data_*.json file in the folder.
    Missing requested files raise FileNotFoundError.
    """
    langs = list(languages) if languages is not None else available_languages(data_dir)
    dataset: Dict[str, Any] = {}
    with Log.time_block(f"load {len(langs)} language files"):
        for lang in langs:
            path = dataset_path(data_dir, lang)
            if not os.path.exists(path):
                raise FileNotFoundError(f"no emoji data for {lang!r}: {path}")
            dataset[lang.lower()] = load_language_file(path)
    Log.info(f"[data_loader] loaded {', '.join(sorted(dataset)) or 'nothing'} from {data_dir}")
    return dataset
