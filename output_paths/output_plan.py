"""Data model for the planned outputs of one input file."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputPlan:
    """Where the transformed code and source map of one input file are written."""

    input_path: Path
    code_output_path: Path
    source_map_output_path: Path | None = None  # None: no separate map file

    def output_paths(self) -> list[Path]:
        paths = [self.code_output_path]
        if self.source_map_output_path is not None:
            paths.append(self.source_map_output_path)
        return paths
