# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .cli import DictSpellCLI


def main() -> None:
    DictSpellCLI().main()


if __name__ == "__main__":
    main()
