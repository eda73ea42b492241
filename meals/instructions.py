"""
Instruction text helpers for the recipe detail view.
"""

from typing import List

STEP_SEPARATOR = ". "


def split_instruction_steps(instructions: str) -> List[str]:
    """
    Split a free-text instructions block into ordered steps.

    Steps are separated by a full stop followed by a space. Each fragment is
    stripped of surrounding whitespace (including line breaks) and empty
    fragments are dropped.

    Args:
        instructions: Raw instructions string from the API (may be empty)

    Returns:
        List of step strings in original order

    Examples:
        >>> split_instruction_steps("Preheat oven. Mix flour and sugar. Bake.")
        ['Preheat oven', 'Mix flour and sugar', 'Bake.']
    """
    if not instructions:
        return []
    steps = (fragment.strip() for fragment in instructions.split(STEP_SEPARATOR))
    return [step for step in steps if step]
