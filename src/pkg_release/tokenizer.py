"""
pkg_release.tokenizer — Minimal PHP lexer for static manifest scanning.

Produces a flat list of tokens close enough to PHP's own token_get_all() for
locating a class body and reading literal property values, without running
PHP. Token kinds reuse the PHP tokenizer names (T_VARIABLE, T_CLASS, ...);
single-character symbols use the character itself as their kind.

Not a full lexer: casts, keywords other than `class` and the inner structure
of interpolated strings are not distinguished.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

T_INLINE_HTML = "T_INLINE_HTML"
T_OPEN_TAG = "T_OPEN_TAG"
T_OPEN_TAG_WITH_ECHO = "T_OPEN_TAG_WITH_ECHO"
T_CLOSE_TAG = "T_CLOSE_TAG"
T_WHITESPACE = "T_WHITESPACE"
T_COMMENT = "T_COMMENT"
T_DOC_COMMENT = "T_DOC_COMMENT"
T_VARIABLE = "T_VARIABLE"
T_STRING = "T_STRING"
T_NAME_QUALIFIED = "T_NAME_QUALIFIED"
T_CLASS = "T_CLASS"
T_DOUBLE_COLON = "T_DOUBLE_COLON"
T_CONSTANT_ENCAPSED_STRING = "T_CONSTANT_ENCAPSED_STRING"
T_ENCAPSED_STRING = "T_ENCAPSED_STRING"
T_HEREDOC = "T_HEREDOC"
T_LNUMBER = "T_LNUMBER"
T_DNUMBER = "T_DNUMBER"
T_ATTRIBUTE = "T_ATTRIBUTE"
T_OPERATOR = "T_OPERATOR"

# Kinds skipped when looking at the "previous" token.
FILTERED_KINDS: frozenset[str] = frozenset({T_WHITESPACE, T_COMMENT, T_DOC_COMMENT})

_OPEN_TAG_RE = re.compile(r"<\?php(?:[ \t]|\r?\n|$)|<\?=", re.I)
_WHITESPACE_RE = re.compile(r"[ \t\r\n]+")
_LINE_COMMENT_RE = re.compile(r"(?:#|//).*?(?=\r?\n|\?>|$)", re.S)
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?(?:\*/|$)", re.S)
_DOC_COMMENT_START_RE = re.compile(r"/\*\*[ \t\r\n]")
_LABEL = r"[A-Za-z_\x80-\uffff][A-Za-z0-9_\x80-\uffff]*"
_VARIABLE_RE = re.compile(r"\$" + _LABEL)
_NAME_RE = re.compile(r"\\?" + _LABEL + r"(?:\\" + _LABEL + r")*")
_NUMBER_RE = re.compile(
    r"0[xX][0-9A-Fa-f_]+|0[bB][01_]+|(?:[0-9][0-9_]*)?\.[0-9][0-9_]*(?:[eE][+-]?[0-9]+)?"
    r"|[0-9][0-9_]*(?:\.[0-9_]*)?(?:[eE][+-]?[0-9]+)?"
)
_NUMBER_START_RE = re.compile(r"[0-9]|\.[0-9]")
_HEREDOC_START_RE = re.compile(r"<<<[ \t]*([\"']?)([A-Za-z_][A-Za-z0-9_]*)\1\r?\n")
_INTERPOLATION_RE = re.compile(r"\$[A-Za-z_\x80-\uffff{]|\{\$")
_DOUBLE_ESCAPE_RE = re.compile(
    r"\\(?:([nrtvef\\$\"])|([0-7]{1,3})|x([0-9A-Fa-f]{1,2})|u\{([0-9A-Fa-f]+)\})"
)
_SINGLE_ESCAPE_RE = re.compile(r"\\([\\'])")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "e": "\x1b",
    "f": "\f",
    "\\": "\\",
    "$": "$",
    '"': '"',
}

# Longest first.
_OPERATORS: tuple[str, ...] = (
    "<=>", "**=", "...", "<<=", ">>=", "===", "!==", "??=", "?->",
    "++", "--", "->", "=>", "==", "!=", "<>", "<=", ">=", "&&", "||", "??",
    "+=", "-=", "*=", "/=", ".=", "%=", "&=", "|=", "^=", "<<", ">>", "**",
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    text: str
    line: int = 1

    @property
    def is_filtered(self) -> bool:
        return self.kind in FILTERED_KINDS


class _Lexer:
    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.tokens: list[Token] = []
        self._last_significant: Token | None = None

    def emit(self, kind: str, end: int) -> None:
        text = self.source[self.pos : end]
        token = Token(kind=kind, text=text, line=self.line)
        self.tokens.append(token)
        if not token.is_filtered:
            self._last_significant = token
        self.line += text.count("\n")
        self.pos = end

    def run(self) -> list[Token]:
        while self.pos < len(self.source):
            self._lex_inline_html()
            self._lex_php()
        return self.tokens

    def _lex_inline_html(self) -> None:
        match = _OPEN_TAG_RE.search(self.source, self.pos)
        if match is None:
            self.emit(T_INLINE_HTML, len(self.source))
            return
        if match.start() > self.pos:
            self.emit(T_INLINE_HTML, match.start())
        kind = T_OPEN_TAG_WITH_ECHO if match.group().startswith("<?=") else T_OPEN_TAG
        self.emit(kind, match.end())

    def _lex_php(self) -> None:
        src = self.source
        while self.pos < len(src):
            start = self.pos
            ch = src[start]

            if src.startswith("?>", start):
                end = start + 2
                if src.startswith("\r\n", end):
                    end += 2
                elif src.startswith("\n", end):
                    end += 1
                self.emit(T_CLOSE_TAG, end)
                return

            if ch in " \t\r\n":
                self.emit(T_WHITESPACE, _WHITESPACE_RE.match(src, start).end())
            elif src.startswith("#[", start):
                self.emit(T_ATTRIBUTE, start + 2)
            elif ch == "#" or src.startswith("//", start):
                self.emit(T_COMMENT, _LINE_COMMENT_RE.match(src, start).end())
            elif src.startswith("/*", start):
                end = _BLOCK_COMMENT_RE.match(src, start).end()
                is_doc = _DOC_COMMENT_START_RE.match(src, start) is not None
                self.emit(T_DOC_COMMENT if is_doc else T_COMMENT, end)
            elif ch == "$" and (match := _VARIABLE_RE.match(src, start)):
                self.emit(T_VARIABLE, match.end())
            elif ch in "'\"" or (ch in "bB" and src[start + 1 : start + 2] in ("'", '"')):
                self._lex_quoted(start)
            elif ch == "`":
                self.emit(T_ENCAPSED_STRING, self._find_closing(start + 1, "`") or len(src))
            elif _NUMBER_START_RE.match(src, start):
                text = _NUMBER_RE.match(src, start).group()
                is_float = text[:2].lower() not in ("0x", "0b") and any(c in text for c in ".eE")
                self.emit(T_DNUMBER if is_float else T_LNUMBER, start + len(text))
            elif match := _NAME_RE.match(src, start):
                self._lex_name(match.group())
            elif match := _HEREDOC_START_RE.match(src, start):
                self.emit(T_HEREDOC, self._find_heredoc_end(match.end(), match.group(2)))
            elif src.startswith("::", start):
                self.emit(T_DOUBLE_COLON, start + 2)
            else:
                for op in _OPERATORS:
                    if src.startswith(op, start):
                        self.emit(T_OPERATOR, start + len(op))
                        break
                else:
                    self.emit(ch, start + 1)

    def _lex_name(self, text: str) -> None:
        # After -> and ?-> every name is a property, `class` included.
        after_arrow = self._last_significant is not None and self._last_significant.text in (
            "->",
            "?->",
        )
        if "\\" in text:
            kind = T_NAME_QUALIFIED
        elif text.lower() == "class" and not after_arrow:
            kind = T_CLASS
        else:
            kind = T_STRING
        self.emit(kind, self.pos + len(text))

    def _lex_quoted(self, start: int) -> None:
        quote_at = start + 1 if self.source[start] in "bB" else start
        quote = self.source[quote_at]
        end = self._find_closing(quote_at + 1, quote)
        if end is None:
            self.emit(T_ENCAPSED_STRING, len(self.source))
        elif quote == '"' and _has_interpolation(self.source[quote_at + 1 : end - 1]):
            self.emit(T_ENCAPSED_STRING, end)
        else:
            self.emit(T_CONSTANT_ENCAPSED_STRING, end)

    def _find_closing(self, pos: int, quote: str) -> int | None:
        """Return the index just past the closing quote, None if unterminated."""
        src = self.source
        while pos < len(src):
            ch = src[pos]
            if ch == "\\":
                pos += 2
                continue
            if ch == quote:
                return pos + 1
            pos += 1
        return None

    def _find_heredoc_end(self, pos: int, label: str) -> int:
        closing = re.compile(r"^[ \t]*" + re.escape(label) + r"(?![A-Za-z0-9_\x80-\uffff])", re.M)
        match = closing.search(self.source, pos)
        return match.end() if match else len(self.source)


def _has_interpolation(body: str) -> bool:
    # Escaped dollars and braces never start an interpolation.
    stripped = re.sub(r"\\.", "", body, flags=re.S)
    return _INTERPOLATION_RE.search(stripped) is not None


def tokenize(source: str) -> list[Token]:
    """Split PHP source text into a flat token list.

    Concatenating the text of every token yields the original source.
    """
    return _Lexer(source).run()


def decode_string_literal(text: str) -> str:
    """Resolve the quotes and escape sequences of a PHP string literal token.

    Single-quoted strings only unescape \\\\ and \\'. Double-quoted strings
    support the PHP escape sequences; unknown escapes are kept verbatim. \\x and
    octal escapes are bytes, and the decoded result must be valid UTF-8.
    """
    if text[:1] in ("b", "B"):
        text = text[1:]
    if len(text) < 2 or text[0] != text[-1] or text[0] not in ("'", '"'):
        raise ValueError(f"Not a quoted string literal: {text!r}")

    body = text[1:-1]
    if text[0] == "'":
        return _SINGLE_ESCAPE_RE.sub(lambda m: m.group(1), body)
    return _decode_double_quoted(body)


def _decode_double_quoted(body: str) -> str:
    # \x and octal escapes are raw bytes, so the result is assembled as UTF-8.
    out = bytearray()
    pos = 0
    for match in _DOUBLE_ESCAPE_RE.finditer(body):
        out += body[pos : match.start()].encode("utf-8")
        out += _double_escape_bytes(match)
        pos = match.end()
    out += body[pos:].encode("utf-8")
    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Escape sequences do not form valid UTF-8: {exc.reason}") from exc


def _double_escape_bytes(match: re.Match[str]) -> bytes:
    simple, octal, hexa, codepoint = match.groups()
    if simple is not None:
        return _SIMPLE_ESCAPES[simple].encode("ascii")
    if octal is not None:
        return bytes([int(octal, 8) & 0xFF])
    if hexa is not None:
        return bytes([int(hexa, 16)])
    return chr(int(codepoint, 16)).encode("utf-8")
