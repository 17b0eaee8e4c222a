"""
pkg_release.manifest — Read the package handle and version from controller.php.

The controller is scanned, never executed:
  - exactly one `class` declaration must exist (`Foo::class` does not count)
  - the class body is the span between its first `{` and the matching `}`
  - `$pkgHandle` and `$pkgVersion` must be assigned a plain string literal
    directly in the class body (not inside a method)
"""

from __future__ import annotations

from pathlib import Path

from pkg_release.exceptions import ManifestFormatError, ManifestNotFoundError, ManifestReadError
from pkg_release.log import logger
from pkg_release.models import HANDLE_PROPERTY, MANIFEST_FILENAME, VERSION_PROPERTY, PackageInfo
from pkg_release.tokenizer import (
    T_CLASS,
    T_CONSTANT_ENCAPSED_STRING,
    T_DOUBLE_COLON,
    T_VARIABLE,
    T_WHITESPACE,
    Token,
    decode_string_literal,
    tokenize,
)


def read_manifest_source(root_dir: Path) -> str:
    """Return the text of <root_dir>/controller.php."""
    path = root_dir / MANIFEST_FILENAME
    if not path.is_file():
        raise ManifestNotFoundError(f"Unable to find the file {path}")
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(f"Failed to read the file {path}: {exc}") from exc
    if not source.strip():
        raise ManifestReadError(f"The file {path} is empty")
    return source


def find_class_body(tokens: list[Token]) -> tuple[int, int]:
    """Locate the body of the single class declared in ``tokens``.

    Returns (start, end) such that ``tokens[start:end]`` is the span strictly
    between the opening and closing braces.
    """
    class_index = _find_class_keyword(tokens)

    depth = 0
    body_start = -1
    for index in range(class_index + 1, len(tokens)):
        kind = tokens[index].kind
        if kind == "{":
            if depth == 0:
                body_start = index + 1
            depth += 1
        elif kind == "}":
            if depth == 0:
                raise ManifestFormatError("Found a closing brace without a matching opening brace")
            depth -= 1
            if depth == 0:
                return body_start, index
    raise ManifestFormatError("Unable to find the end of the class body")


def _find_class_keyword(tokens: list[Token]) -> int:
    found: list[int] = []
    previous: Token | None = None
    for index, token in enumerate(tokens):
        if token.kind == T_CLASS and (previous is None or previous.kind != T_DOUBLE_COLON):
            found.append(index)
        if not token.is_filtered:
            previous = token
    if not found:
        raise ManifestFormatError("Unable to find the class declaration")
    if len(found) > 1:
        lines = ", ".join(str(tokens[index].line) for index in found)
        raise ManifestFormatError(f"Found more than one class declaration (lines {lines})")
    return found[0]


def extract_string_property(tokens: list[Token], name: str, body_start: int, body_end: int) -> str:
    """Return the literal value assigned to ``$name`` at the top level of the class body."""
    variable = f"${name}"
    depth = 0
    index = body_start
    while index < body_end:
        token = tokens[index]
        if token.kind == "{":
            depth += 1
        elif token.kind == "}":
            depth -= 1
        elif depth == 0 and token.kind == T_VARIABLE and token.text == variable:
            return _read_literal_assignment(tokens, index + 1, body_end, variable)
        index += 1
    raise ManifestFormatError(f"Unable to find the {variable} property")


def _read_literal_assignment(tokens: list[Token], index: int, end: int, variable: str) -> str:
    index = _skip_whitespace(tokens, index, end)
    if index >= end or tokens[index].kind != "=":
        raise ManifestFormatError(f"The {variable} property is not followed by an assignment")
    index = _skip_whitespace(tokens, index + 1, end)
    if index >= end or tokens[index].kind != T_CONSTANT_ENCAPSED_STRING:
        raise ManifestFormatError(f"The {variable} property is not assigned a literal string")
    literal = tokens[index]
    following = index + 1
    while following < end and tokens[following].is_filtered:
        following += 1
    if following >= end or tokens[following].kind not in (";", ","):
        raise ManifestFormatError(f"The {variable} property is not assigned a literal string")
    try:
        return decode_string_literal(literal.text)
    except ValueError as exc:
        raise ManifestFormatError(f"The {variable} property has an invalid value: {exc}") from exc


def _skip_whitespace(tokens: list[Token], index: int, end: int) -> int:
    while index < end and tokens[index].kind == T_WHITESPACE:
        index += 1
    return index


def parse_package_info(source: str) -> PackageInfo:
    """Extract the PackageInfo from controller.php source text."""
    tokens = tokenize(source)
    body_start, body_end = find_class_body(tokens)
    return PackageInfo(
        handle=extract_string_property(tokens, HANDLE_PROPERTY, body_start, body_end),
        version=extract_string_property(tokens, VERSION_PROPERTY, body_start, body_end),
    )


def read_package_info(root_dir: Path) -> PackageInfo:
    """Read the package handle and version from <root_dir>/controller.php."""
    info = parse_package_info(read_manifest_source(root_dir))
    logger.info("Read package metadata", handle=info.handle, version=info.version)
    return info
