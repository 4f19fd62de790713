from app.schemas.auth import ChangePasswordIn, LoginIn, RegisterIn, ResetPasswordIn
from app.schemas.user import ConquistasOut, MensagemOut, UserOut, UserResumoOut, UserUpdate
from app.schemas.endereco import EnderecoIn, EnderecoOut
from app.schemas.faculdade import (
    AdicionarCursosIn,
    AdicionarCursosOut,
    CursoResumoOut,
    FaculdadeIn,
    FaculdadeOut,
    FaculdadeUpdate,
)
from app.schemas.estudante import EstudanteIn, EstudanteOut, EstudanteUpdate
from app.schemas.curso import (
    CursoIn,
    CursoOut,
    CursoPageOut,
    DisciplinaIn,
    DisciplinaOut,
    TurmaIn,
    TurmaOut,
)
from app.schemas.colaborador import ColaboradorIn, ColaboradorOut, ColaboradorUpdate
