from app.services.auth import AuthService
from app.services.colaboradores import ColaboradorService
from app.services.cursos import CursoService
from app.services.estudantes import EstudanteService
from app.services.faculdades import FaculdadeService
from app.services.users import UserService

__all__ = [
    "AuthService",
    "ColaboradorService",
    "CursoService",
    "EstudanteService",
    "FaculdadeService",
    "UserService",
]
