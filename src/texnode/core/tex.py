"""TeX node parsing, plain-text rendering, and citekey extraction.

The parser is deliberately shallow: it knows control words, control
symbols, groups, comments, and math shifts — nothing about macro
arities.  Arguments are simply the sibling nodes that follow a macro,
which is enough to resolve accents and strip formatting commands.
"""

from __future__ import annotations

import re
import unicodedata

from texnode.core.models import GroupNode, MacroNode, Node, TextNode
from texnode.exceptions import TeXParseError

_SPECIALS = frozenset("\\{}%$~")

# Accent control sequences → Unicode combining mark.
_ACCENTS: dict[str, str] = {
    "'": "\u0301",
    "`": "\u0300",
    "^": "\u0302",
    '"': "\u0308",
    "~": "\u0303",
    "=": "\u0304",
    ".": "\u0307",
    "u": "\u0306",
    "v": "\u030c",
    "H": "\u030b",
    "c": "\u0327",
    "k": "\u0328",
    "r": "\u030a",
    "d": "\u0323",
    "b": "\u0331",
}

_SYMBOLS: dict[str, str] = {
    "ss": "ß",
    "o": "ø",
    "O": "Ø",
    "ae": "æ",
    "AE": "Æ",
    "oe": "œ",
    "OE": "Œ",
    "aa": "å",
    "AA": "Å",
    "l": "ł",
    "L": "Ł",
    "i": "ı",
    "j": "ȷ",
    "ldots": "…",
    "dots": "…",
    "textendash": "–",
    "textemdash": "—",
    "S": "§",
    "P": "¶",
    "copyright": "©",
    "LaTeX": "LaTeX",
    "TeX": "TeX",
    "textbackslash": "\\",
    "textasciitilde": "~",
    "textunderscore": "_",
    "quad": " ",
    "qquad": " ",
    # control symbols
    "\\": "\n",
    " ": " ",
    ",": " ",
    "&": "&",
    "%": "%",
    "$": "$",
    "#": "#",
    "_": "_",
    "{": "{",
    "}": "}",
}

# Dotless i/j take accents as their dotted forms.
_DOTLESS_BASES: dict[str, str] = {"ı": "i", "ȷ": "j"}

_CITE_RE = re.compile(
    r"\\[A-Za-z]*[Cc]ite[A-Za-z]*\*?"
    r"(?:\s*\[[^\]]*\])*"
    r"\s*\{([^}]*)\}"
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_node(text: str) -> GroupNode:
    """Parse TeX source into a root :class:`GroupNode`.

    Raises
    ------
    TeXParseError
        On an unmatched ``{`` or ``}``, or a trailing lone backslash.
    """
    stack: list[list[Node]] = [[]]
    openers: list[int] = []
    buffer: list[str] = []
    pos = 0
    length = len(text)

    def flush() -> None:
        if buffer:
            stack[-1].append(TextNode("".join(buffer)))
            buffer.clear()

    def line_of(at: int) -> int:
        return text.count("\n", 0, at) + 1

    while pos < length:
        char = text[pos]
        if char not in _SPECIALS:
            buffer.append(char)
            pos += 1
            continue

        flush()
        if char == "\\":
            if pos + 1 >= length:
                raise TeXParseError("trailing backslash", line=line_of(pos))
            nxt = text[pos + 1]
            if nxt.isalpha():
                end = pos + 1
                while end < length and text[end].isalpha():
                    end += 1
                stack[-1].append(MacroNode(text[pos + 1 : end]))
                # Control words swallow the spaces (and one newline) after them.
                while end < length and text[end] in " \t":
                    end += 1
                if end < length and text[end] == "\n":
                    end += 1
                pos = end
            else:
                stack[-1].append(MacroNode(nxt))
                pos += 2
        elif char == "{":
            openers.append(pos)
            stack.append([])
            pos += 1
        elif char == "}":
            if len(stack) == 1:
                raise TeXParseError("unmatched '}'", line=line_of(pos))
            children = stack.pop()
            openers.pop()
            stack[-1].append(GroupNode(tuple(children)))
            pos += 1
        elif char == "%":
            newline = text.find("\n", pos)
            pos = length if newline == -1 else newline + 1
        elif char == "~":
            stack[-1].append(TextNode(" "))
            pos += 1
        else:  # "$" math shift
            pos += 1

    flush()
    if len(stack) > 1:
        raise TeXParseError("unmatched '{'", line=line_of(openers[-1]))
    return GroupNode(tuple(stack[0]))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _apply_accent(mark: str, rendered: str) -> str:
    base = _DOTLESS_BASES.get(rendered[0], rendered[0])
    return unicodedata.normalize("NFC", base + mark) + rendered[1:]


def node_to_text(node: Node) -> str:
    """Render *node* as plain text with markup resolved or stripped."""
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, MacroNode):
        return _SYMBOLS.get(node.name, "")

    parts: list[str] = []
    pending_accent: str | None = None
    for child in node.children:
        if isinstance(child, MacroNode) and child.name in _ACCENTS:
            pending_accent = _ACCENTS[child.name]
            continue
        rendered = node_to_text(child)
        if pending_accent is not None and rendered:
            rendered = _apply_accent(pending_accent, rendered)
            pending_accent = None
        parts.append(rendered)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Citekeys
# ---------------------------------------------------------------------------

def extract_citekeys(text: str) -> list[str]:
    """Return every citekey referenced by a ``\\...cite...{...}`` command.

    This is a lexical scan, not a parse: keys are reported once per
    occurrence, in document order.  ``\\nocite{*}`` contributes nothing.
    """
    citekeys: list[str] = []
    for match in _CITE_RE.finditer(text):
        for key in match.group(1).split(","):
            key = key.strip()
            if key and key != "*":
                citekeys.append(key)
    return citekeys
