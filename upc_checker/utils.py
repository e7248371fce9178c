# upc_checker/utils.py

from typing import Sequence


def is_single_digit(value: int) -> bool:
    """Verifica se o valor é um único dígito decimal (0-9)."""
    return 0 <= value <= 9


def calculate_weighted_sum(digits: Sequence[int]) -> int:
    """
    Soma ponderada do algoritmo módulo 10 do UPC-A.
    Dígitos nas posições ímpares (1ª, 3ª, ...) têm peso 3, nas pares peso 1.
    """
    odd_sum = sum(digits[0::2])
    even_sum = sum(digits[1::2])
    return odd_sum * 3 + even_sum


def calculate_check_digit(digits: Sequence[int]) -> int:
    """
    Calcula o dígito verificador esperado para o corpo do código.
    Função mantida aqui para evitar dependências circulares entre models e services.
    """
    weighted_sum = calculate_weighted_sum(digits)
    return (10 - (weighted_sum % 10)) % 10
