# upc_checker/services/validation_service.py
import logging
from typing import Sequence

from upc_checker.models import UPCCode, UPCCodeStandard, ValidationResult
from upc_checker.core.exceptions import UPCCodeError
from upc_checker.core.logging_config import log_structured_event

logger = logging.getLogger(__name__)


def _expected_check_digit(upc_code: UPCCode) -> int:
    """Calcula o dígito esperado, registrando erros de intervalo antes de repassá-los."""
    try:
        expected = upc_code.expected_check_digit()
    except UPCCodeError as e:
        log_structured_event(__name__, "upc_overflow", {
            "standard": upc_code.standard.value,
            **e.to_dict()
        }, level="WARNING")
        raise

    logger.debug(
        f"{upc_code.standard.value}: dígito esperado {expected}, informado {upc_code.check_digit}")
    return expected


def check_upc_code(upc_code: UPCCode) -> bool:
    """Valida um UPCCode já construído."""
    return _expected_check_digit(upc_code) == upc_code.check_digit


def validate_upc(digits: Sequence[int], check_digit: int,
                 standard: UPCCodeStandard = UPCCodeStandard.UPC_A) -> bool:
    """
    Valida a sequência de dígitos contra o dígito verificador informado.

    Retorna True se o dígito confere e False caso contrário.
    Levanta UPCCodeOverflowError se algum dígito da sequência estiver fora
    de 0-9, e CheckDigitOverflowError se o dígito verificador estiver.
    """
    upc_code = UPCCode(standard=standard, digits=tuple(digits), check_digit=check_digit)
    return check_upc_code(upc_code)


def build_validation_result(upc_code: UPCCode) -> ValidationResult:
    """Executa a validação e devolve o erro como valor em vez de exceção."""
    try:
        expected = _expected_check_digit(upc_code)
    except UPCCodeError as e:
        return ValidationResult.error_response(e.message, error_code=e.kind.value)

    return ValidationResult.valid_response(expected == upc_code.check_digit, expected)
