from typing import Iterable

from pydantic import BaseModel

from app.core.validators import is_filled
from app.models.endereco import ENDERECO_CAMPOS, Endereco


def aplicar_parcial(alvo, payload: BaseModel, campos: Iterable[str]) -> list[str]:
    """
    Copia para `alvo` apenas os campos preenchidos do payload.

    None e "" deixam o valor atual intacto (não limpam). Retorna os nomes
    dos campos alterados, usado nos logs.
    """
    alterados = []
    for campo in campos:
        valor = getattr(payload, campo, None)
        if is_filled(valor) and getattr(alvo, campo) != valor:
            setattr(alvo, campo, valor)
            alterados.append(campo)
    return alterados


def aplicar_endereco(alvo, endereco_in) -> list[str]:
    if endereco_in is None:
        return []
    alterados = []
    for campo in ENDERECO_CAMPOS:
        valor = getattr(endereco_in, campo)
        coluna = f"endereco_{campo}"
        if is_filled(valor) and getattr(alvo, coluna) != valor:
            setattr(alvo, coluna, valor)
            alterados.append(coluna)
    return alterados


def novo_endereco(endereco_in) -> Endereco | None:
    if endereco_in is None:
        return None
    return Endereco(**endereco_in.model_dump())


def offset(page: int, page_size: int) -> int:
    return (max(page, 1) - 1) * page_size


def nome_normalizado(nome: str | None) -> str:
    """Chave de comparação de nomes de curso/disciplina: sem espaços nas pontas, sem caixa."""
    return (nome or "").strip().lower()


LIKE_ESCAPE = "\\"


def termo_like(busca: str) -> str:
    """Trecho para ilike com % e _ tratados como texto."""
    escapado = (
        busca.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escapado}%"
