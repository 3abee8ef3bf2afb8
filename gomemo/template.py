"""Memo templates: loading, parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import jinja2
from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateSyntaxError,
    meta,
    nodes,
)
from loguru import logger

TEMPLATE_FILENAME = "template.md"
DEFAULT_TEMPLATE_NAME = "<built-in>"
FIELDS = frozenset({"Filename", "Date"})


class TemplateError(RuntimeError):
    """Base error for template loading and rendering."""


class TemplateParseError(TemplateError):
    """Raised when a template has malformed syntax or unknown fields."""

    def __init__(self, name: str, line: int | None, message: str) -> None:
        super().__init__(f"template {name}:{line or '?'}: {message}")
        self.name = name
        self.line = line


@dataclass(frozen=True, slots=True)
class Memo:
    """Values substituted into a template when a memo is created."""

    filename: str
    date: str

    def as_mapping(self) -> dict[str, str]:
        return {"Filename": self.filename, "Date": self.date}


@dataclass(frozen=True, slots=True)
class MemoTemplate:
    """A parsed template ready to render."""

    name: str
    source: str
    template: jinja2.Template = field(compare=False, repr=False)

    def render(self, memo: Memo) -> str:
        try:
            return self.template.render(memo.as_mapping())
        except jinja2.TemplateError as exc:
            raise TemplateError(f"Could not render template {self.name}: {exc}") from exc


def _environment(loader: BaseLoader | None = None) -> Environment:
    return Environment(
        loader=loader,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def parse_template(source: str, name: str = DEFAULT_TEMPLATE_NAME) -> MemoTemplate:
    """Compile ``source`` and return a ``MemoTemplate``.

    Templates use Jinja syntax; ``{{ Filename }}`` and ``{{ Date }}`` are the
    only variables available.

    Raises
    ------
    TemplateParseError
        On a syntax error or a reference to an unknown variable.
    """

    env = _environment()
    try:
        ast = env.parse(source, name=name)
    except TemplateSyntaxError as exc:
        raise TemplateParseError(name, exc.lineno, exc.message or str(exc)) from exc

    unknown = meta.find_undeclared_variables(ast) - FIELDS
    if unknown:
        line = next(
            (
                node.lineno
                for node in ast.find_all(nodes.Name)
                if node.name in unknown
            ),
            None,
        )
        raise TemplateParseError(
            name,
            line,
            f"unknown field {sorted(unknown)[0]!r} "
            f"(expected one of {', '.join(sorted(FIELDS))})",
        )

    return MemoTemplate(name=name, source=source, template=env.from_string(ast))


def _load_source(loader: BaseLoader) -> str:
    source, _filename, _uptodate = loader.get_source(_environment(), TEMPLATE_FILENAME)
    return source


def load_default_template() -> MemoTemplate:
    source = _load_source(PackageLoader("gomemo", "resources"))
    return parse_template(source, DEFAULT_TEMPLATE_NAME)


def resolve_template(config_dir: Path) -> MemoTemplate:
    """Return the user's ``template.md`` when it exists, else the built-in one."""

    override = config_dir / TEMPLATE_FILENAME
    if not override.is_file():
        logger.debug("No template at {}, using built-in template", override)
        return load_default_template()

    try:
        source = _load_source(FileSystemLoader(str(config_dir)))
    except (OSError, UnicodeDecodeError, jinja2.TemplateNotFound) as exc:
        raise TemplateError(f"Could not read template {override}: {exc}") from exc

    logger.debug("Using template {}", override)
    return parse_template(source, str(override))
