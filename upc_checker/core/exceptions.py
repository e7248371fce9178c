# upc_checker/core/exceptions.py
from enum import Enum
from typing import Any, Dict, Optional


class UPCCodeErrorKind(str, Enum):
    """Tipos de erro reportados na validação de um código UPC."""
    UPC_CODE_OVERFLOW = "upc_code_overflow"  # dígito do código fora de 0-9
    CHECK_DIGIT_OVERFLOW = "check_digit_overflow"  # dígito verificador fora de 0-9


class UPCCodeError(ValueError):
    """Erro base da validação de códigos UPC."""

    kind: UPCCodeErrorKind

    def __init__(self, message: str, value: Optional[int] = None, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.kind.value,
            "message": self.message,
            "value": self.value,
            "position": self.position,
        }


class UPCCodeOverflowError(UPCCodeError):
    """Um dos dígitos do código UPC não é um único dígito (0-9)."""

    kind = UPCCodeErrorKind.UPC_CODE_OVERFLOW

    def __init__(self, value: int, position: int):
        super().__init__(
            f"Dígito {value!r} na posição {position} está fora do intervalo 0-9",
            value=value,
            position=position,
        )


class CheckDigitOverflowError(UPCCodeError):
    """O dígito verificador não é um único dígito (0-9)."""

    kind = UPCCodeErrorKind.CHECK_DIGIT_OVERFLOW

    def __init__(self, value: int):
        super().__init__(
            f"Dígito verificador {value!r} está fora do intervalo 0-9",
            value=value,
        )
