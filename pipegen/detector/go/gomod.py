"""go.mod parser.

Line-by-line parser for the module, go and require directives. Blocks may
open with "(" attached to the directive word ("require(") or separated by
whitespace; "()" is an empty block. Strips `//` comments and unquotes
quoted module paths.
"""

import logging
import re

from pipegen.detector.layout import ManifestInfo
from pipegen.detector.types import ManifestParseError

logger = logging.getLogger(__name__)

# The directive word ends at whitespace or at an opening parenthesis.
_DIRECTIVE = re.compile(r"([A-Za-z]+)\s*(.*)")


def parse_gomod(text: str) -> ManifestInfo:
    """Parse go.mod contents into module path, Go version and requires.

    Raises:
        ManifestParseError: If there is no module directive, more than
            one, or the module path is empty or badly quoted.
    """
    module = None
    go_version = ""
    requires: list[str] = []
    block = None

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = _strip_comment(line).strip()
        if not stripped:
            continue

        if block is not None:
            if stripped == ")":
                block = None
            elif block == "require":
                # Inside require block: "github.com/foo/bar v1.0.0"
                requires.append(_unquote(stripped.split()[0], lineno))
            elif block == "module":
                module = _set_module(module, stripped, lineno)
            continue

        match = _DIRECTIVE.fullmatch(stripped)
        if match is None:
            continue
        verb, rest = match.group(1), match.group(2).strip()

        if rest == "(":
            block = verb
        elif rest == "()":
            continue
        elif verb == "module":
            module = _set_module(module, rest, lineno)
        elif verb == "go":
            go_version = rest
        elif verb == "require":
            # Single-line require: "require github.com/foo/bar v1.0.0"
            parts = rest.split()
            if parts:
                requires.append(_unquote(parts[0], lineno))

    if block is not None:
        raise ManifestParseError(f"go.mod: unterminated {block} block")
    if not module:
        raise ManifestParseError("go.mod: no module directive")

    logger.debug("Parsed go.mod: module=%s go=%s requires=%d", module, go_version, len(requires))
    return ManifestInfo(canonical_path=module, language_version=go_version, requires=requires)


def _set_module(current, value: str, lineno: int) -> str:
    if current is not None:
        raise ManifestParseError(f"go.mod:{lineno}: repeated module directive")
    path = _unquote(value, lineno)
    if not path or len(path.split()) != 1:
        raise ManifestParseError(f"go.mod:{lineno}: invalid module path {value!r}")
    return path


def _unquote(value: str, lineno: int) -> str:
    if value[:1] in ('"', "`"):
        quote = value[0]
        if len(value) < 2 or not value.endswith(quote):
            raise ManifestParseError(f"go.mod:{lineno}: unterminated quoted string {value!r}")
        return value[1:-1]
    return value


def _strip_comment(line: str) -> str:
    # Module paths never contain "//", so the first one starts a comment.
    index = line.find("//")
    return line if index < 0 else line[:index]
