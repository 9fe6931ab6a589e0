"""wrapcalc display — render a value as aligned decimal, radix and binary lines.

The alternate-radix and binary lines share chunk boundaries: one octal digit
per 3 bits, one hex digit per 4 bits. When the width is not a multiple of the
chunk size the most-significant chunk is narrower. Each radix digit sits
right-aligned above its chunk's binary digits, e.g. -100 as i8 in hex:

         -100 ₁₀
       9    c ₁₆
    1001 1100 ₂
"""

from __future__ import annotations

from dataclasses import dataclass

from .kinds import Value

DECIMAL_MARKER = "₁₀"
BINARY_MARKER = "₂"


@dataclass(frozen=True)
class Radix:
    """Alternate radix: digit spelling plus chunk size in bits."""

    name: str
    chunk_bits: int
    spec: str
    marker: str


OCT = Radix("oct", 3, "o", "₈")
HEX = Radix("hex", 4, "x", "₁₆")

RADIXES: dict[str, Radix] = {r.name: r for r in (OCT, HEX)}


def chunk_widths(bits: int, chunk_bits: int) -> list[int]:
    """Bit widths of each chunk, most-significant first."""
    count = -(-bits // chunk_bits)
    top = bits % chunk_bits
    if top == 0:
        top = chunk_bits
    return [top] + [chunk_bits] * (count - 1)


def split_chunks(pattern: int, widths: list[int]) -> list[int]:
    """Split an unsigned bit pattern into chunk values, most-significant first."""
    chunks: list[int] = []
    shift = sum(widths)
    for w in widths:
        shift -= w
        chunks.append((pattern >> shift) & ((1 << w) - 1))
    return chunks


def format_value(value: Value, radix: Radix = HEX) -> str:
    """Render value as three lines: decimal, alternate radix, binary."""
    widths = chunk_widths(value.kind.bits, radix.chunk_bits)
    chunks = split_chunks(value.unsigned, widths)

    radix_fields: list[str] = []
    binary_fields: list[str] = []
    leading = True
    last = len(chunks) - 1
    for i, (w, c) in enumerate(zip(widths, chunks)):
        if leading and c == 0 and i < last:
            radix_fields.append(" " * w)
        else:
            leading = False
            radix_fields.append(format(c, radix.spec).rjust(w))
        binary_fields.append(format(c, "0" + str(w) + "b"))

    binary_line = " ".join(binary_fields)
    width = len(binary_line)
    return "\n".join(
        [
            str(value.value).rjust(width) + " " + DECIMAL_MARKER,
            " ".join(radix_fields) + " " + radix.marker,
            binary_line + " " + BINARY_MARKER,
        ]
    )
