"""Layout of PRG programs.

Byte offsets, record sizes and the text columns used by the codecs in
``prg_core.records`` and ``prg_core.program``. The binary layout is dictated
by the machine's program slot and must not change.
"""

# Header: [Marker(1) | Reserved(9) | WaitL(2) | WaitR(2) | Reserved(8)] = 22 bytes
HEADER_FMT = "<B9xHH8x"
HEADER_LEN = 22
HEADER_MARKER = 1

# Step: [Quote(2) | Reserved(2) | P1..P8(8) | L(1) | R(1)] = 14 bytes
STEP_FMT = "<H2x8BBB"
STEP_LEN = 14

# Quote value that ends a binary step sequence
END_QUOTE = 0

# The machine stores programs in a fixed 1422 byte slot
PROGRAM_LEN = 1422
MAX_STEPS = (PROGRAM_LEN - HEADER_LEN) // STEP_LEN  # 100

# Text layout
HEADER_CAPTION = "Wait L | Wait R"
STEP_CAPTION = "Quote | 1 2 3 4 5 6 7 8 | L R"
STEP_SEPARATOR = "-" * len(STEP_CAPTION)
FIELD_SEP = "|"

HEADER_LINE = 1
FIRST_STEP_LINE = 5

WAIT_WIDTH = 7
QUOTE_WIDTH = 5

PISTON_COUNT = 8

# File extensions
BINARY_EXT = "prg"
TEXT_EXT = "txt"
MAX_NAME_SUFFIX = 100
