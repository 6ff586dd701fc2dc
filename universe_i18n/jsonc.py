"""Strip ``//`` and ``/* */`` comments from JSON text, leaving string literals intact."""

from __future__ import annotations


def _blank(segment: str) -> str:
    return "".join(ch if ch in "\r\n" else " " for ch in segment)


def strip_json_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        if text.startswith("//", i):
            end = text.find("\n", i)
            end = length if end == -1 else end
            out.append(_blank(text[i:end]))
            i = end
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = length if end == -1 else end + 2
            out.append(_blank(text[i:end]))
            i = end
            continue

        out.append(ch)
        i += 1

    return "".join(out)
