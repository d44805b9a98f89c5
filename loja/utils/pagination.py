"""
Paginação: PageRequest, Page e headers HTTP de paginação.

Os headers seguem o formato usado pelos clientes da loja:
- X-Total-Count: total de elementos
- Link: relações RFC 5988 next/prev/last/first, páginas começando em 0
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

ASC = 'asc'
DESC = 'desc'


@dataclass(frozen=True)
class PageRequest:
    """Página solicitada (número começando em 0, tamanho e ordenação)"""
    page: int = 0
    size: int = 20
    sort: Tuple[Tuple[str, str], ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page:
    """Uma página de resultados"""
    content: List[Any]
    total_elements: int
    page_request: PageRequest = field(default_factory=PageRequest)

    @property
    def number(self) -> int:
        return self.page_request.page

    @property
    def size(self) -> int:
        return self.page_request.size

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def has_previous(self) -> bool:
        return self.number > 0


def _generate_uri(base_url: str, page: int, size: int, extra: Optional[Dict[str, str]] = None) -> str:
    params = dict(extra or {})
    params['page'] = page
    params['size'] = size
    return f"{base_url}?{urlencode(params)}"


def _build_link_header(page: Page, base_url: str, extra: Optional[Dict[str, str]] = None) -> str:
    links = []
    if page.has_next():
        links.append(f'<{_generate_uri(base_url, page.number + 1, page.size, extra)}>; rel="next"')
    if page.has_previous():
        links.append(f'<{_generate_uri(base_url, page.number - 1, page.size, extra)}>; rel="prev"')

    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(f'<{_generate_uri(base_url, last_page, page.size, extra)}>; rel="last"')
    links.append(f'<{_generate_uri(base_url, 0, page.size, extra)}>; rel="first"')
    return ','.join(links)


def generate_pagination_http_headers(page: Page, base_url: str) -> Dict[str, str]:
    """
    Gera os headers de paginação para uma listagem.

    Args:
        page: Página retornada pelo repositório
        base_url: Caminho base usado nos links (ex: /api/tamanhos)

    Returns:
        Dict com X-Total-Count e Link
    """
    return {
        'X-Total-Count': str(page.total_elements),
        'Link': _build_link_header(page, base_url),
    }


def generate_search_pagination_http_headers(query: str, page: Page, base_url: str) -> Dict[str, str]:
    """
    Igual a generate_pagination_http_headers, mas os links carregam a query
    original para o cliente continuar a busca.
    """
    return {
        'X-Total-Count': str(page.total_elements),
        'Link': _build_link_header(page, base_url, {'query': query}),
    }
