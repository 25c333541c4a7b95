"""
The fixed console transcript the emulator prints.

Each block mimics one ionic step of an interactive VASP run: two RMM-DIIS
electronic iterations, the force table, the energy summary and the prompt
for new positions.
"""

from typing import TextIO

POSITIONS_PROMPT = "POSITIONS: reading from stdin"
SENTINEL_MESSAGE = "found STOPCAR"

PROGRESS_LINES = (
    "RMM: 15 -0.850492174942E+02 -0.22961E-01 -0.85225E-03 773 0.221E-01 0.320E+00",
    "RMM: 16 -0.850454085680E+02 0.38089E-02 -0.27753E-03 735 0.157E-01",
    "FORCES:",
    "     0.2014413     0.2165960    -0.1884948",
    "    -0.1832312     0.2056558     0.2151024",
    "  1 F= -.85045409E+02 E0= -.85044063E+02  d E =-.850454E+02  mag=     2.2094",
    POSITIONS_PROMPT,
)

PROGRESS_BLOCK = "".join(line + "\n" for line in PROGRESS_LINES)


def write_progress_block(stream: TextIO) -> None:
    stream.write(PROGRESS_BLOCK)
    stream.flush()


def write_sentinel_message(stream: TextIO) -> None:
    stream.write(SENTINEL_MESSAGE + "\n")
    stream.flush()
