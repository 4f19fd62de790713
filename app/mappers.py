"""
Entidades persistidas -> formatos de resposta.

Nada aqui expõe password_hash/password_salt; o UserOut simplesmente não tem
esses campos.
"""
from app.models import Colaborador, Curso, Estudante, Faculdade, Turma, User
from app.models.pessoa import PESSOA_CAMPOS
from app.schemas import (
    ColaboradorOut,
    CursoOut,
    CursoResumoOut,
    DisciplinaOut,
    EnderecoOut,
    EstudanteOut,
    FaculdadeOut,
    TurmaOut,
    UserOut,
    UserResumoOut,
)


def user_out(user: User, token: str | None = None) -> UserOut:
    out = UserOut.model_validate(user)
    out.token = token
    return out


def user_resumo_out(user: User) -> UserResumoOut:
    return UserResumoOut.model_validate(user)


def curso_resumo_out(curso: Curso) -> CursoResumoOut:
    return CursoResumoOut.model_validate(curso)


def faculdade_out(faculdade: Faculdade) -> FaculdadeOut:
    return FaculdadeOut(
        id=faculdade.id,
        nome=faculdade.nome,
        cnpj=faculdade.cnpj,
        telefone=faculdade.telefone,
        email_responsavel=faculdade.email_responsavel,
        endereco=EnderecoOut.model_validate(faculdade.endereco),
        tipo=faculdade.tipo,
        universidade_nome=faculdade.universidade_nome,
        user_cpf=faculdade.user_cpf,
        cursos=[curso_resumo_out(c) for c in faculdade.cursos],
    )


def _pessoa_dict(pessoa) -> dict:
    data = {campo: getattr(pessoa, campo) for campo in PESSOA_CAMPOS}
    data["endereco"] = EnderecoOut.model_validate(pessoa.endereco)
    return data


def estudante_out(estudante: Estudante) -> EstudanteOut:
    return EstudanteOut(
        id=estudante.id,
        numero_matricula=estudante.numero_matricula,
        data_matricula=estudante.data_matricula,
        telefone_pai=estudante.telefone_pai,
        telefone_mae=estudante.telefone_mae,
        turma_id=estudante.turma_id,
        turma_nome=estudante.turma_nome,
        **_pessoa_dict(estudante.pessoa),
    )


def turma_out(turma: Turma) -> TurmaOut:
    return TurmaOut(
        id=turma.id,
        nome=turma.nome,
        periodo=turma.periodo,
        estudantes=[estudante_out(e) for e in turma.estudantes],
    )


def curso_out(curso: Curso) -> CursoOut:
    return CursoOut(
        id=curso.id,
        nome=curso.nome,
        mensalidade=curso.mensalidade,
        faculdade_id=curso.faculdade_id,
        faculdade_nome=curso.faculdade_nome,
        colaborador_nome=curso.colaborador_nome,
        turmas=[turma_out(t) for t in curso.turmas],
        disciplinas=[DisciplinaOut.model_validate(d) for d in curso.disciplinas],
    )


def colaborador_out(colaborador: Colaborador) -> ColaboradorOut:
    # curso_nome só faz sentido para Docente
    curso_nome = None
    if colaborador.is_docente and colaborador.curso is not None:
        curso_nome = colaborador.curso.nome

    return ColaboradorOut(
        id=colaborador.id,
        cargo=colaborador.cargo,
        numero_registro=colaborador.numero_registro,
        data_admissao=colaborador.data_admissao,
        curso_id=colaborador.curso_id,
        curso_nome=curso_nome,
        universidade_nome=colaborador.user.universidade_nome if colaborador.user else None,
        **_pessoa_dict(colaborador.pessoa),
    )
