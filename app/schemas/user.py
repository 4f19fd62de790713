from pydantic import BaseModel, Field
from typing import Optional

class UserOut(BaseModel):
    cpf: str
    nome: str
    email: str
    token: Optional[str] = None
    url_imagem: Optional[str] = None
    universidade_nome: Optional[str] = None
    universidade_cnpj: Optional[str] = None
    universidade_contato_info: Optional[str] = None

    class Config:
        from_attributes = True

class UserUpdate(BaseModel):
    nome: Optional[str] = Field(default=None, max_length=120)
    email: Optional[str] = None
    url_imagem: Optional[str] = None
    universidade_nome: Optional[str] = None
    universidade_cnpj: Optional[str] = None
    universidade_contato_info: Optional[str] = None

class UserResumoOut(BaseModel):
    cpf: str
    nome: str
    email: str
    universidade_nome: Optional[str] = None

    class Config:
        from_attributes = True

class ConquistasOut(BaseModel):
    faculdades: int
    cursos: int
    estudantes: int

class MensagemOut(BaseModel):
    message: str
