from dataclasses import dataclass, fields

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column


@dataclass
class Endereco:
    logradouro: str | None = None
    numero: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None
    cep: str | None = None


ENDERECO_CAMPOS = tuple(f.name for f in fields(Endereco))


class EnderecoMixin:
    """Endereço embutido (1:1) como colunas endereco_* na própria tabela."""

    endereco_logradouro: Mapped[str | None] = mapped_column(String(200), nullable=True)
    endereco_numero: Mapped[str | None] = mapped_column(String(20), nullable=True)
    endereco_bairro: Mapped[str | None] = mapped_column(String(120), nullable=True)
    endereco_cidade: Mapped[str | None] = mapped_column(String(120), nullable=True)
    endereco_estado: Mapped[str | None] = mapped_column(String(60), nullable=True)
    endereco_cep: Mapped[str | None] = mapped_column(String(9), nullable=True)

    @property
    def endereco(self) -> Endereco:
        return Endereco(**{c: getattr(self, f"endereco_{c}") for c in ENDERECO_CAMPOS})

    @endereco.setter
    def endereco(self, value: Endereco | None) -> None:
        for c in ENDERECO_CAMPOS:
            setattr(self, f"endereco_{c}", getattr(value, c) if value else None)
