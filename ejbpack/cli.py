"""CLI entrypoints for ejbpack commands."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List

from .config import PackagingConfig, load_config, warn_generic_jar_suffix
from .discovery import discover_descriptors
from .errors import PackagingError
from .logging import configure_logging
from .naming import derive_vendor_descriptor_name
from .pipeline import DeploymentPipeline


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


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write a DEBUG-level build log to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ejbpack",
        description="Generate stubs and skeletons and package EJB archives.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Package descriptors into deployable archives.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_log_file_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "descriptors",
        nargs="*",
        help="Descriptor paths relative to the descriptor directory "
        "(defaults to every descriptor found there).",
    )
    build_parser.add_argument(
        "--config",
        default=".",
        help="Path to .ejbpack.yml or the directory containing it.",
    )
    build_parser.add_argument("--descriptor-dir", help="Root directory of the descriptors.")
    build_parser.add_argument("--src-dir", help="Directory holding the compiled classes.")
    build_parser.add_argument("--dest-dir", help="Directory receiving the archives.")
    build_parser.add_argument(
        "-cp",
        "--classpath",
        action="append",
        default=[],
        help="Classpath entries for ejbc; prepended to the configured classpath. "
        "May be repeated or joined with the platform path separator.",
    )
    build_parser.add_argument("--suffix", help="Archive filename suffix (default .jar).")
    build_parser.add_argument(
        "--keep-generated",
        action="store_true",
        default=None,
        help="Retain the Java sources generated by ejbc.",
    )
    build_parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Ask ejbc for debugging output and log it.",
    )
    build_parser.add_argument("--ias-home", help="Home directory of the application server.")
    build_parser.add_argument("--base-jar-name", help="Archive name for bare descriptors.")
    build_parser.add_argument(
        "--name-terminator", help="Separator between the base name and the descriptor name."
    )
    build_parser.add_argument(
        "--continue-on-failure",
        action="store_true",
        default=None,
        help="Keep packaging remaining descriptors after a failure.",
    )
    build_parser.add_argument(
        "--generic-jar-suffix",
        help=argparse.SUPPRESS,
    )

    name_parser = subparsers.add_parser(
        "vendor-name",
        help="Print the vendor descriptor name derived from a standard descriptor.",
    )
    _add_verbose_option(name_parser, suppress_default=True)
    _add_log_file_option(name_parser, suppress_default=True)
    name_parser.add_argument("descriptor", help="Standard descriptor path.")
    name_parser.add_argument(
        "--config",
        default=".",
        help="Path to .ejbpack.yml or the directory containing it.",
    )
    name_parser.add_argument(
        "--name-terminator",
        help="Separator between the base name and the descriptor name.",
    )
    name_parser.add_argument(
        "--vendor-prefix", help="Marker inserted into the vendor descriptor name."
    )
    name_parser.add_argument(
        "--standard-basename", help="Filename of a descriptor without a base name."
    )

    return parser


def _vendor_name(args: argparse.Namespace) -> str:
    # Same naming settings as `build`, so the printed name is the one validated.
    config = load_config(Path(args.config))
    return derive_vendor_descriptor_name(
        args.descriptor,
        args.name_terminator or config.name_terminator,
        args.standard_basename or config.standard_basename,
        args.vendor_prefix or config.vendor_prefix,
    )


def _resolve_config(args: argparse.Namespace) -> PackagingConfig:
    config = load_config(Path(args.config))
    cwd = Path.cwd()

    if args.descriptor_dir:
        config.descriptor_dir = cwd / args.descriptor_dir
    if args.src_dir:
        config.src_dir = cwd / args.src_dir
    if args.dest_dir:
        config.dest_dir = cwd / args.dest_dir
    if args.ias_home:
        config.ias_home = cwd / args.ias_home
    if args.suffix:
        config.suffix = args.suffix
    if args.base_jar_name:
        config.base_jar_name = args.base_jar_name
    if args.name_terminator:
        config.name_terminator = args.name_terminator
    if args.keep_generated is not None:
        config.keep_generated = args.keep_generated
    if args.debug is not None:
        config.debug = args.debug
    if args.continue_on_failure is not None:
        config.continue_on_failure = args.continue_on_failure
    if args.generic_jar_suffix is not None:
        warn_generic_jar_suffix()

    prepended = [cwd / entry for entry in _split_classpath(args.classpath)]
    config.classpath = prepended + list(config.classpath)
    return config


def _split_classpath(values: List[str]) -> List[str]:
    entries: List[str] = []
    for value in values:
        entries.extend(part for part in value.split(os.pathsep) if part)
    return entries


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ejbpack commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), log_file=getattr(args, "log_file", None)
    )

    if args.command == "vendor-name":
        try:
            print(_vendor_name(args))
        except PackagingError as exc:
            parser.exit(1, f"ejbpack vendor-name failed: {exc}\n")
        return

    if args.command == "build":
        try:
            config = _resolve_config(args)
            descriptors = list(args.descriptors) or discover_descriptors(
                config.descriptor_dir, config.standard_basename, config.vendor_prefix
            )
            if not descriptors:
                parser.exit(1, f"No descriptors found in {config.descriptor_dir}\n")
            report = DeploymentPipeline(config).run(descriptors)
        except PackagingError as exc:
            parser.exit(
                1,
                f"ejbpack build failed during {exc.phase}: {exc}\n"
                "Run with --verbose for more details.\n",
            )
        for outcome in report.outcomes:
            rel_path = _relativize(outcome.archive)
            if outcome.built:
                print(f"Archive written to {rel_path}")
            else:
                print(f"{rel_path} already up to date")
        if not report.ok:
            parser.exit(1, f"{len(report.failures)} descriptor(s) failed to package\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
