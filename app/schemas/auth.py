from pydantic import BaseModel, Field

class LoginIn(BaseModel):
    email: str = ""
    password: str = ""

class RegisterIn(BaseModel):
    cpf: str = ""
    nome: str = Field(default="", max_length=120)
    email: str = ""
    password: str = ""
    url_imagem: str | None = None
    universidade_nome: str | None = None
    universidade_cnpj: str | None = None
    universidade_contato_info: str | None = None

class ChangePasswordIn(BaseModel):
    cpf: str = ""
    old_password: str = ""
    new_password: str = ""

class ResetPasswordIn(BaseModel):
    cpf: str = ""
    new_password: str = ""
