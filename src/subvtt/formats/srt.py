"""SRT to WebVTT rewriting.

This is a set of ordered regex substitutions, not an SRT grammar. Cue
numbers, arrows and blank lines pass through unchanged, which keeps
malformed but common SRT variants loadable.
"""

import re

VTT_HEADER_CRLF = "WEBVTT \r\n\r\n"
VTT_TRAILER_CRLF = "\r\n\r\n"

_DIRECTIVE_PATTERN = re.compile(r"{[\s\S]*?}")

# Order matters: each rule is applied over the whole document in turn.
_SRT_REWRITES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\{\\([ibu])\}"), r"</\1>"),
    (re.compile(r"\{\\([ibu])1\}"), r"<\1>"),
    (re.compile(r"\{([ibu])\}"), r"<\1>"),
    (re.compile(r"\{/([ibu])\}"), r"</\1>"),
    (re.compile(r"(\d\d:\d\d:\d\d),(\d\d\d)"), r"\1.\2"),
    (_DIRECTIVE_PATTERN, ""),
]


def srt_to_vtt(content: str) -> str:
    """Convert SRT text to WebVTT text.

    Args:
        content: SRT format string content

    Returns:
        WebVTT text framed with a CRLF header and trailer; the body keeps
        its original line endings
    """
    for pattern, replacement in _SRT_REWRITES:
        content = pattern.sub(replacement, content)
    return VTT_HEADER_CRLF + content + VTT_TRAILER_CRLF


def strip_directives(content: str) -> str:
    """Remove every brace-delimited ``{...}`` block, including multi-line ones."""
    return _DIRECTIVE_PATTERN.sub("", content)
