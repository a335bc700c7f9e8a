"""Planning of output locations for every input file of a run."""

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from output_paths.errors import InvalidOutputPathError
from output_paths.load_config import validate_config
from output_paths.output_path_resolver import OutputPathResolver
from output_paths.output_plan import OutputPlan

logger = logging.getLogger(__name__)


def writes_separate_source_map(config: Mapping[str, Any]) -> bool:
    """Check if the configuration asks for a source map file next to the code."""
    mode = config.get("source_map_mode", "separate")
    return bool(config.get("source_map")) and mode == "separate"


def plan_output(
    resolver: OutputPathResolver,
    input_file: str | Path,
    config: Mapping[str, Any],
) -> OutputPlan:
    """Resolve the output locations of a single input file."""
    code_output_path = resolver.resolve_code_output_path(input_file)
    source_map_output_path = None
    if writes_separate_source_map(config):
        source_map_output_path = resolver.resolve_source_map_output_path(
            code_output_path, config.get("source_map_file_name")
        )
    logger.debug(
        "Planned %s -> %s (source map: %s)",
        input_file,
        code_output_path,
        source_map_output_path,
    )
    return OutputPlan(Path(input_file), code_output_path, source_map_output_path)


def plan_outputs(
    resolver: OutputPathResolver,
    input_files: Iterable[str | Path],
    config: Mapping[str, Any],
) -> list[OutputPlan]:
    """Resolve the output locations of every input file, in order.

    Two inputs that would write the same file make the whole run invalid, e.g. a
    fixed ``source_map_file_name`` used for a directory of inputs.
    """
    validate_config(config)
    plans: list[OutputPlan] = []
    claimed: dict[str, Path] = {}  # normalized output path -> input that owns it
    for input_file in input_files:
        plan = plan_output(resolver, input_file, config)
        for out in plan.output_paths():
            key = os.path.normcase(os.path.abspath(out))
            if key in claimed:
                msg = (
                    f"Output {out} of {plan.input_path} is already "
                    f"written for {claimed[key]}"
                )
                raise InvalidOutputPathError(msg)
            claimed[key] = plan.input_path
        plans.append(plan)
    logger.debug("Planned outputs for %d input files", len(plans))
    return plans
