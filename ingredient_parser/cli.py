"""CLI commands for the ingredient label parser."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

import uvicorn

from ingredient_parser.api.parse import get_gemini_client
from ingredient_parser.config import settings
from ingredient_parser.services.errors import ParseError
from ingredient_parser.services.image_service import detect_media_type
from ingredient_parser.services.parse_service import ParseService


def serve(host: str, port: int, reload: bool = False) -> None:
    """Run the API with uvicorn."""
    uvicorn.run("ingredient_parser.main:app", host=host, port=port, reload=reload)


def parse_image(image_path: str) -> None:
    """Parse a local label image and print the result as JSON."""
    path = Path(image_path)
    if not path.is_file():
        print(f"Error: File '{image_path}' not found.")
        sys.exit(1)

    data = path.read_bytes()
    service = ParseService(get_gemini_client())

    try:
        media_type = detect_media_type(data, settings.max_upload_bytes)
        result = asyncio.run(service.process_image(data, mime_type=media_type))
    except ParseError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps(result.model_dump(), indent=2))


def main():
    parser = argparse.ArgumentParser(description="Ingredient Label Parser CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes"
    )

    # parse-image command
    parse_parser = subparsers.add_parser(
        "parse-image", help="Parse a local ingredient-label image"
    )
    parse_parser.add_argument("path", help="Path to a .jpg, .png or .webp image")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.host, args.port, args.reload)
    elif args.command == "parse-image":
        parse_image(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
