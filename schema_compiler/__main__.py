"""Module entrypoint for `python -m schema_compiler`."""

from schema_compiler.cli import main


if __name__ == "__main__":
    main()
