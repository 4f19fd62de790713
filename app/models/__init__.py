# registra todos os models no metadata do Base
from app.models.user import User
from app.models.faculdade import Faculdade, TipoFaculdade
from app.models.curso import Curso
from app.models.turma import Turma, Periodo
from app.models.disciplina import Disciplina
from app.models.pessoa import Pessoa
from app.models.colaborador import Colaborador
from app.models.estudante import Estudante

__all__ = [
    "User",
    "Faculdade",
    "TipoFaculdade",
    "Curso",
    "Turma",
    "Periodo",
    "Disciplina",
    "Pessoa",
    "Colaborador",
    "Estudante",
]
