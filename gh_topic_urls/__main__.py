"""Module entrypoint for `python -m gh_topic_urls`."""

from __future__ import annotations

from .cli import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
