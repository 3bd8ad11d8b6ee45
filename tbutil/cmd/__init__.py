"""
tbutil subcommands
"""

# License: BSD3

from . import (accuracy,
               compare,
               cycle,
               to_text)

# at the time of this writing argparse doesn't support a way to group
# subcommands into sections, so we just list them
SUBCOMMAND_SECTIONS = [
    ('Evaluation', [
        accuracy,
        compare,
    ]),
    ('Checking', [
        cycle,
    ]),
    ('Conversion', [
        to_text,
    ]),
]

SUBCOMMANDS = []
for descr, section in SUBCOMMAND_SECTIONS:
    SUBCOMMANDS.extend(section)
