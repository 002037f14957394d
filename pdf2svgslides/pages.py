import re
from typing import Optional, Sequence, Tuple

from .errors import PageSelectionError

# "1,3,5" 와 예전 방식 "1 3 5" 둘 다 허용
_SEP = re.compile(r"[,\s]+")


def parse_pages(text: str) -> Tuple[int, ...]:
    pages = set()
    for tok in _SEP.split(text.strip()):
        if not tok:
            continue
        try:
            n = int(tok)
        except ValueError:
            raise PageSelectionError(f"invalid page number: {tok!r}") from None
        if n < 1:
            raise PageSelectionError(f"invalid page number: {tok!r} (pages start at 1)")
        pages.add(n)
    return tuple(sorted(pages))


def select_pages(selection: Optional[Sequence[int]], page_count: int) -> list[int]:
    """처리할 페이지 번호(1-based, 오름차순). selection=None 이면 전체."""
    if selection is None:
        return list(range(1, page_count + 1))

    for n in sorted(set(selection)):
        if n < 1 or n > page_count:
            raise PageSelectionError(
                f"page {n} is out of range (document has {page_count} page(s))"
            )
    return sorted(set(selection))
