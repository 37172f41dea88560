"""CLI entrypoints for readmegen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from .logging import configure_logging, get_logger
from .operations import (
    DetectRepoArgs,
    GenerateReadmeArgs,
    GenerateReadmeProArgs,
    ToolResult,
    WriteFileArgs,
    detect_repo,
    generate_readme,
    generate_readme_pro,
    write_file,
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_confirm_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--confirm",
        action="store_true",
        help="Actually write to disk; without it only a preview is printed.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate README files from a project's manifest, layout and sources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser(
        "detect",
        help="Summarise the package.json of a project directory.",
    )
    _add_verbose_option(detect_parser, suppress_default=True)
    detect_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Project directory (defaults to current directory).",
    )

    readme_parser = subparsers.add_parser(
        "readme",
        help="Render a minimal README from a name, description and feature list.",
    )
    _add_verbose_option(readme_parser, suppress_default=True)
    readme_parser.add_argument("--name", required=True, help="Project name used as the title.")
    readme_parser.add_argument("--description", default=None, help="Short project description.")
    readme_parser.add_argument(
        "--feature",
        dest="features",
        action="append",
        default=None,
        help="Feature bullet; repeat for several.",
    )

    pro_parser = subparsers.add_parser(
        "pro",
        help="Scan a project directory and render a complete README.",
    )
    _add_verbose_option(pro_parser, suppress_default=True)
    pro_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Project directory (defaults to current directory).",
    )
    pro_parser.add_argument("--name", default=None, help="Override the detected project name.")
    pro_parser.add_argument("--description", default=None, help="Project description.")
    pro_parser.add_argument(
        "--feature",
        dest="features",
        action="append",
        default=None,
        help="Extra feature bullet appended after detected ones; repeat for several.",
    )
    pro_parser.add_argument(
        "--no-badges",
        dest="add_badges",
        action="store_false",
        default=None,
        help="Omit the badge line.",
    )
    pro_parser.add_argument(
        "--no-toc",
        dest="include_toc",
        action="store_false",
        default=None,
        help="Omit the table of contents.",
    )
    pro_parser.add_argument(
        "--depth",
        dest="max_tree_depth",
        type=int,
        default=None,
        help="Maximum depth of the project structure listing (1-5).",
    )
    pro_parser.add_argument(
        "--language",
        choices=("zh", "en"),
        default=None,
        help="Heading language for the generated README.",
    )
    pro_parser.add_argument(
        "--output",
        default=None,
        help="Write the README to this path (requires --confirm).",
    )
    _add_confirm_option(pro_parser)

    write_parser = subparsers.add_parser(
        "write",
        help="Write text to a file, previewing unless confirmed.",
    )
    _add_verbose_option(write_parser, suppress_default=True)
    write_parser.add_argument("file_path", help="Destination path, relative to the current directory.")
    source = write_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--content", default=None, help="Text to write.")
    source.add_argument("--from-file", default=None, help="Read the text to write from this file.")
    _add_confirm_option(write_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Expose the README tools over HTTP.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))
    logger = get_logger("cli")

    try:
        if args.command == "detect":
            _emit(detect_repo(DetectRepoArgs(dir=args.path)))
        elif args.command == "readme":
            _emit(
                generate_readme(
                    GenerateReadmeArgs(
                        name=args.name,
                        description=args.description,
                        features=args.features,
                    )
                )
            )
        elif args.command == "pro":
            result = generate_readme_pro(
                GenerateReadmeProArgs(
                    dir=args.path,
                    name=args.name,
                    description=args.description,
                    extra_features=args.features,
                    add_badges=args.add_badges,
                    include_toc=args.include_toc,
                    max_tree_depth=args.max_tree_depth,
                    language=args.language,
                )
            )
            if args.output:
                _emit(
                    write_file(
                        WriteFileArgs(
                            file_path=args.output,
                            content=result.text,
                            confirm=args.confirm,
                        )
                    )
                )
            else:
                _emit(result)
        elif args.command == "write":
            content = args.content
            if args.from_file is not None:
                content = Path(args.from_file).read_text(encoding="utf-8")
            _emit(
                write_file(
                    WriteFileArgs(file_path=args.file_path, content=content, confirm=args.confirm)
                )
            )
        elif args.command == "serve":
            from .service import run_service

            try:
                run_service(host=args.host, port=args.port)
            except Exception as exc:  # pragma: no cover - startup failures are environmental
                logger.error("Service failed to start: %s", exc)
                parser.exit(1, f"readmegen serve failed: {exc}\n")
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except ValidationError as exc:
        parser.exit(2, f"Invalid arguments:\n{exc}\n")
    except (OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"readmegen {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _emit(result: ToolResult) -> None:
    print(result.text.rstrip("\n"))


if __name__ == "__main__":
    main(sys.argv[1:])
