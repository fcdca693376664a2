"""Line splitting with "\\n" as the only terminator"""


def split_lines(content: str) -> list[str]:
    """Split content into lines, keeping each "\\n". A trailing unterminated line is kept as is."""
    lines = content.split("\n")
    tail = lines.pop()
    result = [line + "\n" for line in lines]
    if tail:
        result.append(tail)
    return result
