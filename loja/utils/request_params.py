"""
Extração de parâmetros de query string.

Funções puras: recebem o mapeamento de argumentos (request.args ou dict)
e não dependem do contexto da requisição.
"""

from typing import Iterable, List, Mapping, Optional

from .pagination import ASC, DESC, PageRequest

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 2000

# page e size são inteiros de 32 bits no contrato da API
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class MissingParameterError(ValueError):
    def __init__(self, name):
        super().__init__(f"Required parameter '{name}' is not present")
        self.name = name


def _to_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if not INT_MIN <= number <= INT_MAX:
        return default
    return number


def _get_list(args: Mapping, key: str) -> List[str]:
    # werkzeug MultiDict tem getlist; dict comum pode ter lista ou string
    if hasattr(args, 'getlist'):
        return args.getlist(key)
    value = args.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def parse_sort(values: Iterable[str], allowed: Optional[Iterable[str]] = None):
    """
    Converte valores 'propriedade[,asc|desc]' em tuplas (propriedade, direção).

    'sort=name,desc&sort=id' -> (('name', 'desc'), ('id', 'asc')).
    Propriedades fora de `allowed` são ignoradas.
    """
    allowed = set(allowed) if allowed is not None else None
    orders = []
    for value in values:
        parts = [p.strip() for p in value.split(',') if p.strip()]
        if not parts:
            continue

        direction = ASC
        if parts[-1].lower() in (ASC, DESC):
            direction = parts.pop().lower()

        for prop in parts:
            if allowed is not None and prop not in allowed:
                continue
            orders.append((prop, direction))
    return tuple(orders)


def parse_page_request(args: Mapping, allowed_sort=None,
                       default_size=DEFAULT_PAGE_SIZE, max_size=MAX_PAGE_SIZE) -> PageRequest:
    """
    Monta um PageRequest a partir de page, size e sort.

    Valores inválidos ou fora do intervalo de 32 bits usam o default;
    page negativo vira 0; size menor que 1 usa default_size e é limitado a max_size.
    """
    page = max(_to_int(args.get('page'), 0), 0)
    size = _to_int(args.get('size'), default_size)
    if size < 1:
        size = default_size
    size = min(size, max_size)
    sort = parse_sort(_get_list(args, 'sort'), allowed_sort)
    return PageRequest(page=page, size=size, sort=sort)


def parse_search_query(args: Mapping) -> str:
    """Retorna o parâmetro obrigatório 'query'"""
    query = args.get('query')
    if query is None:
        raise MissingParameterError('query')
    return query
