"""Normalization of user supplied source map file names."""

from enum import Enum

JS_EXTENSION = ".js"
MAP_EXTENSION = ".map"
JS_MAP_EXTENSION = JS_EXTENSION + MAP_EXTENSION


class SourceMapNameKind(Enum):
    """Which part of the ``.js.map`` extension a file name already carries."""

    NO_EXTENSION = "no_extension"
    JS_ONLY = "js_only"
    JS_MAP_ALREADY = "js_map_already"


_MISSING_SUFFIX: dict[SourceMapNameKind, str] = {
    SourceMapNameKind.NO_EXTENSION: JS_MAP_EXTENSION,
    SourceMapNameKind.JS_ONLY: MAP_EXTENSION,
    SourceMapNameKind.JS_MAP_ALREADY: "",
}


def classify_source_map_name(file_name: str) -> SourceMapNameKind:
    """Classify a bare file name by its trailing extension."""
    if file_name.endswith(JS_MAP_EXTENSION):
        return SourceMapNameKind.JS_MAP_ALREADY
    if file_name.endswith(JS_EXTENSION):
        return SourceMapNameKind.JS_ONLY
    return SourceMapNameKind.NO_EXTENSION


def normalize_source_map_name(file_name: str) -> str:
    """Complete ``file_name`` so that it ends with ``.js.map``.

    ``foo``, ``foo.js`` and ``foo.js.map`` all become ``foo.js.map``; any other
    extension is kept and extended (``foo.txt`` -> ``foo.txt.js.map``).
    """
    return file_name + _MISSING_SUFFIX[classify_source_map_name(file_name)]
