# upc_checker/models.py
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Optional, Tuple
from enum import Enum
import re

from upc_checker.core.exceptions import CheckDigitOverflowError, UPCCodeOverflowError
from upc_checker.utils import calculate_check_digit, is_single_digit


class UPCCodeStandard(str, Enum):
    """Padrões de código UPC suportados."""
    UPC_A = "UPC-A"

    @property
    def payload_length(self) -> int:
        """Quantidade de dígitos do código, sem o dígito verificador."""
        return PAYLOAD_LENGTHS[self]


PAYLOAD_LENGTHS = {
    UPCCodeStandard.UPC_A: 11,
}


class UPCCode(BaseModel):
    """
    Código UPC junto com o seu dígito verificador.
    Imutável: cada instância representa um único par código/dígito.

    Os dígitos só precisam estar entre 0 e 9 no momento da validação;
    valores fora desse intervalo são reportados por check_upc().
    """
    model_config = ConfigDict(frozen=True)

    standard: UPCCodeStandard = Field(
        UPCCodeStandard.UPC_A,
        description="Padrão do código (ex: UPC-A)"
    )
    digits: Tuple[int, ...] = Field(
        ...,
        description="Dígitos do código, sem o dígito verificador",
        examples=[(0, 3, 6, 0, 0, 0, 2, 4, 1, 4, 5)]
    )
    check_digit: int = Field(
        ...,
        description="Dígito verificador informado",
        examples=[7]
    )

    @field_validator('digits')
    @classmethod
    def validate_length(cls, v, info: ValidationInfo):
        """Valida a quantidade de dígitos de acordo com o padrão."""
        standard = info.data.get('standard')
        if standard is None:
            return v

        if len(v) != standard.payload_length:
            raise ValueError(
                f'{standard.value} deve ter {standard.payload_length} dígitos, recebido {len(v)}')

        return v

    @classmethod
    def from_string(cls, code: str, standard: UPCCodeStandard = UPCCodeStandard.UPC_A) -> "UPCCode":
        """
        Cria um UPCCode a partir do código impresso (ex: "036000241457").
        O último dígito é tratado como dígito verificador.
        """
        # Remove qualquer caractere não numérico
        cleaned = re.sub(r'[^0-9]', '', code)

        expected_length = standard.payload_length + 1
        if len(cleaned) != expected_length:
            raise ValueError(
                f'{standard.value} deve ter {expected_length} dígitos, recebido {len(cleaned)}')

        digits = tuple(int(d) for d in cleaned)
        return cls(standard=standard, digits=digits[:-1], check_digit=digits[-1])

    def validate_overflow(self):
        """Garante que todos os dígitos e o dígito verificador estão entre 0 e 9."""
        for position, digit in enumerate(self.digits, start=1):
            if not is_single_digit(digit):
                raise UPCCodeOverflowError(digit, position)

        if not is_single_digit(self.check_digit):
            raise CheckDigitOverflowError(self.check_digit)

    def expected_check_digit(self) -> int:
        self.validate_overflow()
        return calculate_check_digit(self.digits)

    def check_upc(self) -> bool:
        """
        Verifica se o dígito verificador confere com o código.

        Levanta UPCCodeOverflowError ou CheckDigitOverflowError se algum
        valor não for um único dígito.
        """
        return self.expected_check_digit() == self.check_digit


class ValidationResult(BaseModel):
    """Resultado da validação, com o erro como valor em vez de exceção."""
    success: bool = Field(...,
                          description="False quando a validação reportou um erro")
    is_valid: Optional[bool] = Field(
        None, description="Se o dígito verificador confere com o código")
    expected_check_digit: Optional[int] = Field(
        None, description="Dígito verificador calculado", ge=0, le=9)
    error_code: Optional[str] = Field(
        None, description="Código do erro em caso de falha")
    message: Optional[str] = Field(None, description="Mensagem descritiva")

    @classmethod
    def valid_response(cls, is_valid: bool, expected_check_digit: int):
        message = "Código válido" if is_valid else "Dígito verificador não confere"
        return cls(success=True, is_valid=is_valid,
                   expected_check_digit=expected_check_digit, message=message)

    @classmethod
    def error_response(cls, message: str, error_code: str = None):
        return cls(success=False, message=message, error_code=error_code)
