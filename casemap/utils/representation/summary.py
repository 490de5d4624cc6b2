from __future__ import annotations

from collections.abc import Iterable

SummaryRow = tuple[str, str | Iterable["SummaryRow"]]


def _truncate(line: str, max_width: int) -> str:
    if len(line) <= max_width:
        return line
    if max_width <= 3:
        return "." * max_width
    return line[: max_width - 3] + "..."


def _is_leaf(value) -> bool:
    return isinstance(value, str) or not hasattr(value, "__iter__")


def _flatten_rows(
    rows: Iterable[SummaryRow],
    *,
    max_width: int,
    indent: int = 0,
    indent_str: str = "  ",
) -> list[str]:
    """
    Flatten nested summary rows into indented text lines.

    Rules:
    - (k, "")        → `k`
    - (k, "v")       → `k : v`, keys of sibling leaves padded to equal width
    - (k, [rows...]) → `k :` followed by the nested rows, one level deeper
    """
    rows = list(rows)
    for row in rows:
        if not isinstance(row, tuple) or len(row) != 2:
            msg = f"Invalid SummaryRow: {row!r}"
            raise ValueError(msg)

    prefix = indent_str * indent
    key_width = max((len(str(k)) for k, v in rows if _is_leaf(v) and v != ""), default=0)

    out: list[str] = []
    for key, value in rows:
        if _is_leaf(value):
            line = f"{key}" if value == "" else f"{str(key).ljust(key_width)} : {value}"
            out.append(_truncate(prefix + line, max_width))
            continue

        out.append(_truncate(prefix + f"{key} :", max_width))
        out.extend(
            _flatten_rows(
                value,
                max_width=max_width,
                indent=indent + 1,
                indent_str=indent_str,
            ),
        )
    return out


def format_summary_box(
    *,
    title: str,
    rows: Iterable[SummaryRow],
    max_width: int = 88,
) -> str:
    """Format nested summary rows into a bordered, width-limited summary box."""
    flat = _flatten_rows(rows, max_width=max_width)

    if not flat:
        flat = ["(empty)"]

    content_width = min(
        max(max(len(r) for r in flat), len(title) + 1),
        max_width,
    )

    def fmt_line(line: str) -> str:
        line = _truncate(line, content_width)
        return f"│ {line.ljust(content_width)} │"

    top = f"┌─ {title} " + "─" * max(0, content_width - len(title) - 1) + "┐"
    body = "\n".join(fmt_line(r) for r in flat)
    bottom = "└" + "─" * (content_width + 2) + "┘"

    return f"{top}\n{body}\n{bottom}"


class Summarizable:
    def _summary_rows(self) -> list[SummaryRow]: ...

    def summary(self, max_width: int = 88) -> str:
        return format_summary_box(
            title=self.__class__.__name__,
            rows=self._summary_rows(),
            max_width=max_width,
        )
