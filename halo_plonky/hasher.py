"""A duplex sponge over Goldilocks elements driven by the BN254 Poseidon permutation."""

from collections.abc import Sequence
from typing import Optional

from .constants import GOLDILOCKS_MODULUS
from .poseidon_hash import SPONGE_RATE, SPONGE_WIDTH, Bn254PoseidonPermutation


def _checked(element: int) -> int:
    if not 0 <= element < GOLDILOCKS_MODULUS:
        raise ValueError(f"{element} is not a canonical Goldilocks element")
    return element


def _checked_count(num_outputs: int) -> int:
    if num_outputs < 1:
        raise ValueError(f"num_outputs must be positive, got {num_outputs}")
    return num_outputs


class HasherChip:
    """Sponge state with buffered absorption and squeezing."""

    def __init__(self, state: Optional[Sequence[int]] = None) -> None:
        if state is None:
            state = [0] * SPONGE_WIDTH
        if len(state) != SPONGE_WIDTH:
            raise ValueError(f"state must hold {SPONGE_WIDTH} elements, got {len(state)}")
        self.state: list[int] = [_checked(value) for value in state]
        self._absorbing: list[int] = []
        self._output_buffer: list[int] = []

    def update(self, element: int) -> None:
        """Queue ``element`` for absorption; no permutation happens yet."""
        self._output_buffer.clear()
        self._absorbing.append(_checked(element))

    def _duplex(self, chunk: Sequence[int]) -> None:
        self.state[: len(chunk)] = chunk
        self.permutation()
        self._output_buffer = self.state[:SPONGE_RATE]

    def _absorb_buffered_inputs(self) -> None:
        if not self._absorbing:
            return
        buffered = self._absorbing
        for start in range(0, len(buffered), SPONGE_RATE):
            self._duplex(buffered[start : start + SPONGE_RATE])
        self._absorbing = []

    def squeeze(self, num_outputs: int) -> list[int]:
        """Absorb queued inputs and return ``num_outputs`` squeezed elements."""
        output = []
        for _ in range(num_outputs):
            self._absorb_buffered_inputs()
            if not self._output_buffer:
                self.permutation()
                self._output_buffer = self.state[:SPONGE_RATE]
            output.append(self._output_buffer.pop())
        return output

    def permutation(self) -> None:
        """Permute the state in place."""
        self.state = list(Bn254PoseidonPermutation.permute(self.state))

    def _read_outputs(self, num_outputs: int) -> list[int]:
        outputs: list[int] = []
        while True:
            for item in self.state[:SPONGE_RATE]:
                outputs.append(item)
                if len(outputs) == num_outputs:
                    return outputs
            self.permutation()

    def hash(self, inputs: Sequence[int], num_outputs: int) -> list[int]:
        """Overwrite-absorb ``inputs`` rate-sized chunk by chunk and read ``num_outputs`` elements."""
        _checked_count(num_outputs)
        values = [_checked(value) for value in inputs]
        self._absorbing.clear()
        for start in range(0, len(values), SPONGE_RATE):
            chunk = values[start : start + SPONGE_RATE]
            self.state[: len(chunk)] = chunk
            self.permutation()
        return self._read_outputs(num_outputs)

    def permute(self, inputs: Sequence[int], num_outputs: int) -> list[int]:
        """Overwrite the state's leading words with ``inputs``, permute, and read outputs."""
        _checked_count(num_outputs)
        values = [_checked(value) for value in inputs][:SPONGE_WIDTH]
        self.state[: len(values)] = values
        self.permutation()
        return self._read_outputs(num_outputs)