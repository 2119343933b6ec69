"""Applies a configured sequence of transform steps to a text."""

import logging
from collections.abc import Callable

from . import transform
from .config import StepConfig, StrKitConfig
from .replace import replace, replace_first

logger = logging.getLogger(__name__)

_LOG_PREVIEW_LENGTH = 200

# Dispatch map for steps that take no arguments
SIMPLE_STEPS: dict[str, Callable[[str], str]] = {
    "upper_case": transform.upper_case,
    "lower_case": transform.lower_case,
    "capitalize": transform.capitalize,
    "trim": transform.trim,
    "triml": transform.triml,
    "trimr": transform.trimr,
    "trim_newline": transform.trim_newline,
    "reverse": transform.reverse,
}


def _handle_replace_step(text: str, step: StepConfig) -> str:
    """Run a 'replace' or 'replace_first' step; regex steps expand ``$N`` tokens."""
    match = step.compiled_match() if step.is_regex else step.match
    logger.debug("[%s] Pattern to match: '%s'", step.op.upper(), step.match)
    logger.debug("[%s] Replacement value: '%s'", step.op.upper(), step.replacement)
    handler = replace_first if step.op == "replace_first" else replace
    return handler(text, match, step.replacement)


def apply_step(text: str, step: StepConfig) -> str:
    """
    Apply a single step to ``text``.

    Args:
        text: The input text.
        step: A validated step configuration.

    Returns:
        The transformed text.

    """
    simple = SIMPLE_STEPS.get(step.op)
    if simple is not None:
        return simple(text)
    if step.op == "escape":
        return transform.escape(text, step.cmap)
    return _handle_replace_step(text, step)


def apply_steps(text: str, steps: list[StepConfig]) -> str:
    """Apply ``steps`` to ``text`` in order and return the result."""
    for index, step in enumerate(steps, start=1):
        modified_text = apply_step(text, step)
        logger.debug("[STEP %d/%d] %s changed text: %s", index, len(steps), step.op, text != modified_text)
        logger.debug("[STEP %d/%d] Output text: '%s'", index, len(steps), modified_text[:_LOG_PREVIEW_LENGTH])
        text = modified_text
    return text


def run_pipeline(config: StrKitConfig, name: str, text: str) -> str:
    """
    Run the pipeline called ``name`` from ``config`` over ``text``.

    Raises:
        KeyError: If ``config`` defines no pipeline called ``name``.

    """
    steps = config.resolve_steps(name)
    logger.debug("Running pipeline '%s' (%d step(s)) on %d character(s).", name, len(steps), len(text))
    return apply_steps(text, steps)
