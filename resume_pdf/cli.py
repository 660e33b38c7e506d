"""resume-pdf CLI.

Commands:
  render   - Render a resume record (YAML/JSON) to a PDF file
  labels   - Print the header link lines and entry durations
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from . import __version__
from .applog import AppLogger
from .errors import ExitCode, UsageError, handle_error
from .io_utils import read_yaml_or_json, write_bytes
from .labels import education_duration, experience_duration, link_line
from .model import LinkType, ProficiencyLevel, ResumeRecord, record_from_dict, record_summary
from .pdf_writer import render_resume_pdf
from .style import theme_from_config


CommandFunc = Callable[[argparse.Namespace], int]


@dataclass
class CommandDef:
    """Definition of a CLI command."""
    name: str
    func: CommandFunc
    help: str = ""
    arguments: List[tuple] = field(default_factory=list)


class CLIApp:
    """Decorator-driven argparse application.

    Example usage:
        app = CLIApp("resume-pdf", "Render resumes")

        @app.command("render", help="Render a PDF")
        @app.argument("--input", required=True)
        def cmd_render(args):
            return 0
    """

    def __init__(self, name: str, description: str = "", *, version: Optional[str] = None):
        self.name = name
        self.description = description
        self.version = version
        self._commands: Dict[str, CommandDef] = {}
        self._pending: List[tuple] = []

    def command(self, name: str, *, help: str = "") -> Callable[[CommandFunc], CommandFunc]:
        def decorator(func: CommandFunc) -> CommandFunc:
            arguments = list(reversed(self._pending))
            self._pending.clear()
            self._commands[name] = CommandDef(name=name, func=func, help=help, arguments=arguments)
            return func
        return decorator

    def argument(self, *flags: str, **kwargs: Any) -> Callable[[CommandFunc], CommandFunc]:
        """Must sit below ``@command`` (decorators apply bottom-up)."""
        def decorator(func: CommandFunc) -> CommandFunc:
            self._pending.append((flags, kwargs))
            return func
        return decorator

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=self.name, description=self.description)
        if self.version:
            parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {self.version}")
        parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
        subparsers = parser.add_subparsers(dest="command", metavar="<command>")
        for cmd in self._commands.values():
            sub = subparsers.add_parser(cmd.name, help=cmd.help, description=cmd.help)
            for flags, kwargs in cmd.arguments:
                sub.add_argument(*flags, **kwargs)
            sub.set_defaults(_cmd_func=cmd.func)
        return parser

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        parser = self.build_parser()
        args = parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        cmd_func = getattr(args, "_cmd_func", None)
        if cmd_func is None:
            parser.print_help()
            return ExitCode.SUCCESS
        try:
            return int(cmd_func(args))
        except (Exception, KeyboardInterrupt) as exc:
            return handle_error(exc)


app = CLIApp(
    "resume-pdf",
    "Render structured resume records to paginated A4 PDF documents.",
    version=__version__,
)


def _choices(enum_cls) -> str:
    return ", ".join(m.value for m in enum_cls)


def _load_record(path: str) -> ResumeRecord:
    data = read_yaml_or_json(path)
    if not isinstance(data, dict):
        raise UsageError(
            "Resume input must be a mapping at the top level",
            hint="expected keys such as firstName, lastName, email, phone, experience",
        )
    try:
        return record_from_dict(data)
    except ValueError as exc:
        raise UsageError(
            "Resume input has an unknown link type or language level",
            hint=f"link types: {_choices(LinkType)}; levels: {_choices(ProficiencyLevel)}",
        ) from exc


# --- render command ---
@app.command("render", help="Render a resume record (YAML/JSON) to a PDF file")
@app.argument("--input", "-i", required=True, help="Resume record (.yaml/.yml/.json)")
@app.argument("--out", "-o", default="resume.pdf", help="Output PDF path (default: resume.pdf)")
@app.argument("--theme", help="Optional theme overrides (fonts/colors) as YAML/JSON")
@app.argument("--log", help="Append JSON-lines session events to this file")
def cmd_render(args: argparse.Namespace) -> int:
    log = AppLogger(args.log)
    with log.session("render") as sid:
        record = _load_record(args.input)
        theme = theme_from_config(read_yaml_or_json(args.theme) if args.theme else None)
        log.info(sid, **record_summary(record))
        data = render_resume_pdf(record, theme)
        out = write_bytes(data, args.out)
        log.info(sid, bytes=len(data))
    print(f"Wrote {out}")
    return ExitCode.SUCCESS


# --- labels command ---
@app.command("labels", help="Print link lines and entry durations without rendering")
@app.argument("--input", "-i", required=True, help="Resume record (.yaml/.yml/.json)")
def cmd_labels(args: argparse.Namespace) -> int:
    record = _load_record(args.input)
    for link in record.links:
        print(link_line(link))
    for exp in record.experience:
        print(f"{exp.company}: {experience_duration(exp)}")
    for edu in record.education:
        print(f"{edu.institution}: {education_duration(edu)}")
    return ExitCode.SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the resume-pdf CLI."""
    return app.run(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
