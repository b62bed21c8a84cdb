# utils.py
import math
from domain.exceptions import ValidationError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# maior valor de uma coluna INTEGER (32 bits); ids e páginas acima disso nunca existem
MAX_ID = 2**31 - 1

def check_id(value: int) -> None:
    if value <= 0:
        raise ValidationError("ID deve ser maior que zero")
    if value > MAX_ID:
        raise ValidationError("ID fora do intervalo permitido")

def normalize_paging(page_number: int, page_size: int) -> tuple[int, int]:
    """Corrige parâmetros de paginação fora da faixa em vez de rejeitá-los."""
    if page_number < 1:
        page_number = 1
    elif page_number > MAX_ID:
        page_number = MAX_ID
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    elif page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE
    return page_number, page_size

def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if page_size else 0
