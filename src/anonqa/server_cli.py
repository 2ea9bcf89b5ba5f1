"""CLI entry point for the Anonymous QA Bot server."""

import argparse


def main(argv: list[str] | None = None) -> None:
    from anonqa.config import settings

    parser = argparse.ArgumentParser(
        prog="anonqa-server",
        description="Anonymous QA Bot: relays /anon-qa slash commands to a Slack channel",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Dev mode: colored console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    if args.dev:
        # Read by anonqa.main when uvicorn imports the app
        settings.dev_mode = True

    import uvicorn

    uvicorn.run("anonqa.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
