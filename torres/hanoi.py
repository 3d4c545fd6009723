"""Towers of Hanoi: the recursive solution and a playable set of towers."""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

MIN_DISKS = 3
MAX_DISKS = 7
RULE = "========================================="
LABELS = " A     B     C"
INVALID_COUNT = "Por favor, ingresa un número válido (del 3 al 7)"


@dataclass(frozen=True)
class Move:
    """One disk moving from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Mover disco {self.disk} de {self.source} a {self.target}"


class HanoiError(Exception):
    """A move that the towers refuse."""


class InvalidTowerError(HanoiError):
    def __init__(self, message: str = "Torre no válida. Intenta de nuevo.") -> None:
        super().__init__(message)


class EmptyTowerError(HanoiError):
    def __init__(self, message: str = "No hay discos en esta torre.") -> None:
        super().__init__(message)


class IllegalMoveError(HanoiError):
    def __init__(
        self,
        message: str = (
            "Movimiento no válido. No puedes colocar un disco más grande "
            "sobre uno más pequeño."
        ),
    ) -> None:
        super().__init__(message)


def moves(
    num_disks: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the shortest sequence of moves that carries the disks to the target."""
    if num_disks < 1:
        raise ValueError("there must be at least one disk")
    if num_disks == 1:
        yield Move(1, source, target)
        return
    yield from moves(num_disks - 1, source, spare, target)
    yield Move(num_disks, source, target)
    yield from moves(num_disks - 1, spare, target, source)


def minimum_moves(num_disks: int) -> int:
    """Return the least number of moves that solves the puzzle."""
    if num_disks < 0:
        raise ValueError("the number of disks must not be negative")
    return 2 ** num_disks - 1


def validate_disk_count(value: Union[int, str]) -> int:
    """Return the disk count if it is a whole number from 3 to 7."""
    try:
        count = int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        raise ValueError(INVALID_COUNT) from None
    if not MIN_DISKS <= count <= MAX_DISKS:
        raise ValueError(INVALID_COUNT)
    return count


def _check_count(num_disks: int) -> None:
    if num_disks < 1:
        raise ValueError("there must be at least one disk")


def render_initial(num_disks: int) -> str:
    """Draw the disks stacked on the first peg."""
    _check_count(num_disks)
    rows = [
        "|" + "o" * i + " " * (num_disks - i) + "|" + " " * num_disks + "|"
        for i in range(1, num_disks + 1)
    ]
    return "\n".join(rows + [RULE, LABELS]) + "\n"


def render_final(num_disks: int) -> str:
    """Draw the disks stacked on the last peg."""
    _check_count(num_disks)
    blank = " " * num_disks
    rows = [
        "|" + blank + "|" + blank + "|" + " " * (num_disks - i) + "o" * i
        for i in range(1, num_disks + 1)
    ]
    return "\n".join(rows + [RULE, LABELS]) + "\n"


class Towers:
    """Three pegs holding disks, numbered 1 to 3 for the player."""

    def __init__(self, num_disks: int) -> None:
        _check_count(num_disks)
        self.num_disks = num_disks
        self._stacks: Tuple[List[int], List[int], List[int]] = (
            list(range(num_disks, 0, -1)),
            [],
            [],
        )

    @property
    def stacks(self) -> Tuple[Tuple[int, ...], ...]:
        """The disks on each peg, from bottom to top."""
        return tuple(tuple(stack) for stack in self._stacks)

    def move(self, origin: int, destination: int) -> int:
        """Move the top disk of one peg onto another and return its size."""
        if not all(1 <= tower <= 3 for tower in (origin, destination)):
            raise InvalidTowerError()
        source = self._stacks[origin - 1]
        target = self._stacks[destination - 1]
        if not source:
            raise EmptyTowerError()
        disk = source[-1]
        if source is not target and target and disk > target[-1]:
            raise IllegalMoveError()
        source.pop()
        target.append(disk)
        return disk

    def is_solved(self) -> bool:
        return len(self._stacks[2]) == self.num_disks

    def render(self) -> str:
        """List the disks of each peg, one peg per line."""
        return "".join(
            f"Torre {number}: " + "".join(f"{disk} " for disk in stack) + "\n"
            for number, stack in enumerate(self._stacks, 1)
        )