"""Console script entry point."""

from .cli import app


def main():
    """Run the Pokido CLI."""
    app(prog_name="pokido")


if __name__ == "__main__":
    main()
