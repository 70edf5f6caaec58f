"""Indexed access to the Poseidon round constants."""

from .constants import NUM_ROUND_CONSTANTS, ROUND_CONSTANTS


def round_constant(index: int) -> int:
    """Return the round constant at ``index``, counting from the first round."""
    if not 0 <= index < NUM_ROUND_CONSTANTS:
        raise IndexError(
            f"round constant index {index} outside 0..{NUM_ROUND_CONSTANTS - 1}"
        )
    return ROUND_CONSTANTS[index]