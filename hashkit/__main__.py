"""
Entry point for the `hashkit` command-line interface.
"""


def main():
    """Main entry point for the hashkit CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
