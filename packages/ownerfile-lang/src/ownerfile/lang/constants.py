COMMENT_MARKER = "#"
LINE_SEPARATOR = "\n"


def is_comment_or_blank(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_MARKER)
