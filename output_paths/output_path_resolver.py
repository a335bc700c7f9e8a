"""Resolution of output file locations for transformed code and source maps."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from output_paths.errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidOutputPathError,
)
from output_paths.path_kind import PathKind, classify_path, has_trailing_separator
from output_paths.source_map_name import MAP_EXTENSION, normalize_source_map_name


class OutputPathResolver:
    """Maps every input file of a CLI run to its output locations.

    The raw input path and the configured ``output`` are classified once, when
    the resolver is built. Both queries are pure functions of that
    classification and their arguments, so one instance can be shared by every
    file of the run.

    An output path that does not exist yet takes the kind of the input: a
    directory input writes into it, a file input writes to it. Pass the output
    with a trailing separator to make it a directory for a single file input.
    """

    def __init__(self, raw_input_path: str | Path, config: Mapping[str, Any]) -> None:
        """Classify the raw input path and the configured output path."""
        if not raw_input_path:
            msg = "Input path is empty"
            raise ConfigurationError(msg)

        self._raw_input_path = Path(raw_input_path)
        self._input_kind = classify_path(raw_input_path)
        if self._input_kind is PathKind.ABSENT:
            msg = f"Input path does not exist: {raw_input_path}"
            raise ConfigurationError(msg)

        raw_output_path = config.get("output")
        self._raw_output_path = Path(raw_output_path) if raw_output_path else None
        self._output_kind = self._classify_output(raw_output_path)
        self._derived_file_suffix: str = config.get("derived_file_suffix") or ""

    @property
    def input_kind(self) -> PathKind:
        return self._input_kind

    @property
    def output_kind(self) -> PathKind:
        """Kind of the configured output; ``ABSENT`` when none was given."""
        return self._output_kind

    def _classify_output(self, raw_output_path: str | Path | None) -> PathKind:
        if not raw_output_path:
            return PathKind.ABSENT
        if has_trailing_separator(raw_output_path):
            return PathKind.DIRECTORY
        kind = classify_path(raw_output_path)
        if kind is PathKind.ABSENT:
            # Not created yet: a tree is written into a directory, a file into a file.
            return self._input_kind
        return kind

    def resolve_code_output_path(self, actual_input_file_path: str | Path) -> Path:
        """Return the file the transformed code of one input file is written to."""
        if not actual_input_file_path or not Path(actual_input_file_path).name:
            msg = f"Input file path must name a file: {actual_input_file_path!r}"
            raise InvalidArgumentError(msg)
        input_file = Path(actual_input_file_path)

        if self._input_kind is PathKind.FILE:
            if self._output_kind is PathKind.FILE:
                return self._raw_output_path
            if self._output_kind is PathKind.DIRECTORY:
                return self._raw_output_path / input_file.name
            return input_file.with_name(self._derived_name(input_file))

        if self._output_kind is PathKind.FILE:
            msg = (
                f"Output path {self._raw_output_path} is a file, "
                f"but input path {self._raw_input_path} is a directory"
            )
            raise InvalidOutputPathError(msg)

        relative = self._relative_to_input_root(input_file)
        if self._output_kind is PathKind.DIRECTORY:
            return self._raw_output_path / relative
        target = self._raw_input_path / relative
        return target.with_name(self._derived_name(target))

    def resolve_source_map_output_path(
        self,
        code_output_path: str | Path,
        map_name_or_path: str | Path | None = None,
    ) -> Path:
        """Return the file the source map for ``code_output_path`` goes to.

        Without a map name the map sits beside the code (``a/b.js.map``). A map
        name is completed to ``.js.map`` and placed relative to the directory of
        the code output, keeping any directories it names.
        """
        if (
            not code_output_path
            or has_trailing_separator(code_output_path)
            or not Path(code_output_path).name
        ):
            msg = f"Output code path must name a file: {code_output_path!r}"
            raise InvalidArgumentError(msg)
        code_path = Path(code_output_path)

        if not map_name_or_path:
            return code_path.with_name(code_path.name + MAP_EXTENSION)

        map_path = Path(map_name_or_path)
        if has_trailing_separator(map_name_or_path) or not map_path.name:
            msg = f"Source map path must name a file: {map_name_or_path!r}"
            raise InvalidArgumentError(msg)

        # An absolute map path is still placed under the code output directory.
        sub_dir = map_path.parent
        if map_path.anchor:
            sub_dir = sub_dir.relative_to(map_path.anchor)
        file_name = normalize_source_map_name(map_path.name)
        return code_path.parent / sub_dir / file_name

    def _relative_to_input_root(self, input_file: Path) -> Path:
        root = Path(os.path.abspath(self._raw_input_path))
        try:
            relative = Path(os.path.abspath(input_file)).relative_to(root)
        except ValueError as e:
            msg = f"Input file {input_file} is not inside input directory {root}"
            raise InvalidArgumentError(msg) from e
        if relative == Path():
            msg = f"Input file {input_file} is the input directory itself"
            raise InvalidArgumentError(msg)
        return relative

    def _derived_name(self, input_file: Path) -> str:
        return f"{input_file.stem}{self._derived_file_suffix}{input_file.suffix}"
