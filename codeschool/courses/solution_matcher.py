"""
Solution Matcher
Checks a learner's editor files against the lesson's reference solution.

Both sides are normalised the same way before comparing:
- comments removed using the file's language rules
- every whitespace character removed

Files without a counterpart in the solution always pass.
"""

import io
import re
import tokenize
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from codeschool.courses.models import EditorFile, MatchResult

_WHITESPACE = re.compile(r"\s")
_RUST_RAW_STRING = re.compile(r'b?r(#*)"')


@dataclass(frozen=True)
class CommentSyntax:
    """Comment and string-literal markers for one family of languages

    raw_quotes: quotes whose contents treat backslash as a plain character
    rust_literals: Rust char literals ('"', '\\'') and raw strings (r#"..."#)
    line_after_space: a line marker only counts at line start or after whitespace
    """
    line: Tuple[str, ...] = ()
    block: Tuple[Tuple[str, str], ...] = ()
    quotes: Tuple[str, ...] = ()
    raw_quotes: Tuple[str, ...] = ()
    nested: bool = False
    rust_literals: bool = False
    line_after_space: bool = False


# JS/TS template literals honour backslash escapes, so ` stays escaping here
C_STYLE = CommentSyntax(line=("//",), block=(("/*", "*/"),), quotes=('"', "'", "`"))
GO = CommentSyntax(line=("//",), block=(("/*", "*/"),), quotes=('"', "'", "`"), raw_quotes=("`",))
# ' is also a lifetime marker in Rust, so char literals are matched separately
RUST = CommentSyntax(
    line=("//",), block=(("/*", "*/"),), quotes=('"',), nested=True, rust_literals=True,
)
HASH = CommentSyntax(line=("#",), quotes=('"', "'"))
# $# and ${#var} are expansions, not comments
SHELL = CommentSyntax(line=("#",), quotes=('"', "'"), raw_quotes=("'",), line_after_space=True)
SQL = CommentSyntax(line=("--",), block=(("/*", "*/"),), quotes=("'", '"'))
MARKUP = CommentSyntax(block=(("<!--", "-->"),))

PYTHON_LANGUAGES = {"python", "py"}

LANGUAGE_SYNTAX: Dict[str, CommentSyntax] = {
    "rust": RUST, "rs": RUST,
    "c": C_STYLE, "h": C_STYLE, "cpp": C_STYLE, "cc": C_STYLE, "hpp": C_STYLE,
    "java": C_STYLE, "javascript": C_STYLE, "js": C_STYLE, "jsx": C_STYLE,
    "typescript": C_STYLE, "ts": C_STYLE, "tsx": C_STYLE,
    "go": GO, "solidity": C_STYLE, "sol": C_STYLE,
    "kotlin": C_STYLE, "kt": C_STYLE, "swift": C_STYLE, "scala": C_STYLE,
    "json": C_STYLE,
    "toml": HASH, "yaml": HASH, "yml": HASH,
    "sh": SHELL, "bash": SHELL, "shell": SHELL,
    "ruby": HASH, "rb": HASH, "r": HASH,
    "dockerfile": SHELL, "makefile": HASH, "mk": HASH,
    "sql": SQL,
    "html": MARKUP, "xml": MARKUP, "md": MARKUP, "markdown": MARKUP, "svg": MARKUP,
}

# ==================== COMMENT STRIPPING ====================

def language_from_file_name(file_name: str) -> str:
    """'src/lib.rs' -> 'rs', 'Dockerfile' -> 'dockerfile'"""
    base = file_name.rsplit("/", 1)[-1]
    return base.rsplit(".", 1)[-1].lower()


def resolve_language(*candidates: Optional[str]) -> str:
    """First non-empty language tag, normalised (' .RS ' -> 'rs')"""
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip().lower().lstrip(".")
    return ""


def strip_comments(code: str, language: str = "") -> str:
    """
    Remove comments from source code.

    Unknown or empty language tags fall back to C-style // and /* */ rules.
    Comment markers inside string literals are kept.
    """
    key = resolve_language(language)
    if key in PYTHON_LANGUAGES:
        return _strip_python(code)
    return _strip_with_syntax(code, LANGUAGE_SYNTAX.get(key, C_STYLE))


def _strip_python(code: str) -> str:
    lines = io.StringIO(code).readlines()
    comments = []
    try:
        for tok in tokenize.generate_tokens(io.StringIO(code).readline):
            if tok.type == tokenize.COMMENT:
                comments.append((tok.start, tok.end))
    except (tokenize.TokenError, SyntaxError):
        # Incomplete code while the learner is typing
        return _strip_with_syntax(code, HASH)

    for (row, start_col), (_, end_col) in reversed(comments):
        line = lines[row - 1]
        lines[row - 1] = line[:start_col] + line[end_col:]
    return "".join(lines)


def _strip_with_syntax(code: str, syntax: CommentSyntax) -> str:
    out: List[str] = []
    i = 0
    n = len(code)

    while i < n:
        ch = code[i]

        if syntax.rust_literals:
            end = None
            if ch in "br":
                end = _rust_raw_string_end(code, i)
            elif ch == "'":
                end = _rust_char_end(code, i)
            if end is not None:
                out.append(code[i:end])
                i = end
                continue

        if ch in syntax.quotes:
            end = _skip_string(code, i, raw=ch in syntax.raw_quotes)
            out.append(code[i:end])
            i = end
            continue

        if any(code.startswith(marker, i) for marker in syntax.line) and (
            not syntax.line_after_space or i == 0 or code[i - 1].isspace()
        ):
            newline = code.find("\n", i)
            i = n if newline == -1 else newline
            continue

        block = _block_at(code, i, syntax.block)
        if block is not None:
            i = _skip_block(code, i, block, syntax.nested)
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def _block_at(code: str, i: int, blocks: Tuple[Tuple[str, str], ...]) -> Optional[Tuple[str, str]]:
    for block in blocks:
        if code.startswith(block[0], i):
            return block
    return None


def _skip_string(code: str, start: int, raw: bool = False) -> int:
    """Index just past the closing quote (or end of input)"""
    quote = code[start]
    j = start + 1
    n = len(code)
    while j < n:
        if code[j] == "\\" and not raw:
            j += 2
            continue
        if code[j] == quote:
            return j + 1
        j += 1
    return n


def _rust_raw_string_end(code: str, start: int) -> Optional[int]:
    """End of r"..." / br#"..."# starting at start, or None if there is none"""
    if start > 0 and (code[start - 1].isalnum() or code[start - 1] == "_"):
        return None
    match = _RUST_RAW_STRING.match(code, start)
    if match is None:
        return None
    closer = '"' + match.group(1)
    end = code.find(closer, match.end())
    return len(code) if end == -1 else end + len(closer)


def _rust_char_end(code: str, start: int) -> Optional[int]:
    """End of a char literal starting at start, or None for a lifetime ('a)"""
    n = len(code)
    if start + 1 < n and code[start + 1] == "\\":
        # '\'' '\n' '\u{1F600}'
        end = code.find("'", start + 3)
        if end == -1 or "\n" in code[start:end]:
            return None
        return end + 1
    if start + 2 < n and code[start + 2] == "'" and code[start + 1] != "\n":
        return start + 3
    return None


def _skip_block(code: str, start: int, block: Tuple[str, str], nested: bool) -> int:
    """Index just past the block comment (or end of input if unterminated)"""
    opener, closer = block
    depth = 1
    j = start + len(opener)
    n = len(code)
    while j < n:
        if nested and code.startswith(opener, j):
            depth += 1
            j += len(opener)
            continue
        if code.startswith(closer, j):
            depth -= 1
            j += len(closer)
            if depth == 0:
                return j
            continue
        j += 1
    return n

# ==================== MATCHING ====================

def normalize_code(code: str, language: str = "") -> str:
    """Strip comments, then every whitespace character"""
    return _WHITESPACE.sub("", strip_comments(code, language))


def files_match(file: EditorFile, solution_file: EditorFile) -> bool:
    # One shared rule for both sides
    language = resolve_language(
        file.language,
        solution_file.language,
        language_from_file_name(file.file_name),
    )
    return normalize_code(file.code, language) == normalize_code(solution_file.code, language)


def match_files(editor_content: List[EditorFile], solution: List[EditorFile]) -> MatchResult:
    """
    Compare editor files against solution files by file name.

    Every file is compared on every call, so incorrect_files is always the
    full current failing set (never an accumulation of earlier calls).
    """
    solutions_by_name: Dict[str, EditorFile] = {}
    for solution_file in solution:
        solutions_by_name.setdefault(solution_file.file_name, solution_file)

    incorrect: Dict[str, EditorFile] = {}
    for file in editor_content:
        solution_file = solutions_by_name.get(file.file_name)
        if solution_file is None:
            continue
        if not files_match(file, solution_file):
            incorrect.setdefault(file.file_name, file)

    return MatchResult(all_match=not incorrect, incorrect_files=list(incorrect.values()))
