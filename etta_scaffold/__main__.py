import sys

from etta_scaffold.cli import run

sys.exit(run(prog="python -m etta_scaffold"))
