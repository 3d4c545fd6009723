"""Console game of the Towers of Hanoi: automatic solution and manual play."""

import argparse
import sys
from collections import deque
from itertools import groupby
from typing import Optional, TextIO, Union

from .console import Color, clear_screen, color
from .hanoi import (
    INVALID_COUNT,
    HanoiError,
    Towers,
    minimum_moves,
    moves,
    render_final,
    render_initial,
    validate_disk_count,
)


class _TokenReader:
    """Reads whitespace-separated tokens from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque = deque()

    def read_token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> Optional[int]:
        """Return the next integer, or None after dropping the rest of the line."""
        token = self.read_token()
        try:
            return int(token)
        except ValueError:
            self.discard_line()
            return None

    def discard_line(self) -> None:
        self._pending.clear()


def _write_picture(picture: str, num_disks: int, out: TextIO) -> None:
    lines = picture.splitlines(keepends=True)
    for size, line in enumerate(lines[:num_disks], 1):
        for is_disk, chunk in groupby(line, key=lambda ch: ch == "o"):
            color(size if is_disk else Color.SILVER, out)
            out.write("".join(chunk))
    color(Color.SILVER, out)
    out.write("".join(lines[num_disks:]))
    color(Color.WHITE, out)


def _write_towers(towers: Towers, out: TextIO) -> None:
    for line in towers.render().splitlines():
        head, _, disks = line.partition(": ")
        color(Color.NAVY, out)
        out.write(head + ": ")
        color(Color.TEAL, out)
        out.write(disks + "\n")
        color(Color.WHITE, out)


def solve(num_disks: int, stream: Optional[TextIO] = None) -> None:
    """Show the starting towers, every move of the solution and the finished towers."""
    out = sys.stdout if stream is None else stream
    _write_picture(render_initial(num_disks), num_disks, out)
    for step in moves(num_disks):
        out.write(f"{step}\n")
    color(Color.GRAY, out)
    out.write(f"Se necesitaron {minimum_moves(num_disks)} movimientos para resolverlo\n")
    color(Color.WHITE, out)
    _write_picture(render_final(num_disks), num_disks, out)


def manual(
    num_disks: int,
    stdin: Union[TextIO, _TokenReader, None] = None,
    stdout: Optional[TextIO] = None,
) -> bool:
    """Let the player move the disks; True once solved, False if input runs out."""
    if isinstance(stdin, _TokenReader):
        reader = stdin
    else:
        reader = _TokenReader(sys.stdin if stdin is None else stdin)
    out = sys.stdout if stdout is None else stdout
    towers = Towers(num_disks)
    clear_screen(out)
    _write_towers(towers, out)
    while not towers.is_solved():
        color(Color.GRAY, out)
        try:
            out.write("Escribe de qué torre quieres mover el disco (1-3): ")
            origin = reader.read_int()
            out.write("Escribe a qué torre quieres mover el disco (1-3): ")
            destination = reader.read_int()
        except EOFError:
            color(Color.WHITE, out)
            out.write("\n")
            return False
        color(Color.WHITE, out)
        try:
            towers.move(origin or 0, destination or 0)
        except HanoiError as error:
            color(Color.RED, out)
            out.write(f"{error}\n")
            color(Color.WHITE, out)
            continue
        _write_towers(towers, out)
    color(Color.GREEN, out)
    out.write("¡FELICIDADES! HAS GANADO\n")
    color(Color.WHITE, out)
    return True


def _play_again(reader: _TokenReader, out: TextIO) -> bool:
    color(Color.LIME, out)
    out.write("¿Quieres volver a intentarlo?\n")
    out.write("SI [1]             NO [2]\n")
    color(Color.WHITE, out)
    option = reader.read_int()
    if option == 1:
        return True
    if option is None:
        out.write("ya mejor nada, ADIOS\n")
    elif option != 2:
        color(Color.MAROON, out)
        out.write("NO SABES LEER O QUE!?\n")
        color(Color.WHITE, out)
    return False


def main(argv=None) -> int:
    """Run the interactive game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="torres", description="Las Torres de Hanoi, automáticas o a mano."
    )
    parser.parse_args(argv)
    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    try:
        while True:
            clear_screen(out)
            color(Color.LIME, out)
            out.write("  BIENVENIDO A MI PROGRAMA\n   LAS TORRES DE HANOI\n")
            out.write("_______|_____|_____|_______\n")
            color(Color.WHITE, out)
            out.write("Ingresa la cantidad de discos (3-7): ")
            try:
                num_disks = validate_disk_count(reader.read_token())
            except ValueError:
                out.write(INVALID_COUNT + "\n")
                reader.discard_line()
                continue
            solve(num_disks, out)
            color(Color.YELLOW, out)
            out.write("¿Quieres hacerlo con otra cantidad?\n")
            color(Color.LIME, out)
            out.write("[1] SI ")
            color(Color.RED, out)
            out.write("  NO [2]")
            color(Color.OLIVE, out)
            out.write("  Hacerlo yo [3]\n")
            color(Color.WHITE, out)
            option = reader.read_int()
            if option == 1:
                continue
            if option == 2:
                return 0
            if option == 3:
                if manual(num_disks, reader, out) and not _play_again(reader, out):
                    return 0
                continue
            if option is None:
                out.write("Pero pon un numero estimado nomam\n")
            else:
                out.write("Pon un numero del 1 al 3 estimado\n")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())