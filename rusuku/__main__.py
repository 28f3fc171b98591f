# rusuku/__main__.py
# Module entry point: `python -m rusuku`

from .cli.app import app


def main() -> None:
    app(prog_name="rusuku")


if __name__ == "__main__":
    main()
