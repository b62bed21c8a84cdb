# domain/exceptions.py
"""Tipos de erro da aplicação.

Cada erro carrega o status HTTP que o handler global usa ao montar o
envelope de resposta; a mensagem é sempre segura para o cliente.
"""


class AppError(Exception):
    status_code: int = 400
    default_message: str = "Operação inválida"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Dados inválidos"


class DuplicateError(AppError):
    status_code = 400
    default_message = "Registro já cadastrado"


class InvalidCredentials(AppError):
    status_code = 400
    default_message = "Nome de usuário ou senha inválidos"


class AccountInactive(AppError):
    status_code = 400
    default_message = "Usuário inativo"


class InvalidToken(AppError):
    status_code = 401
    default_message = "Token inválido ou expirado"


class Forbidden(AppError):
    status_code = 403
    default_message = "Permissões insuficientes"


class NotFound(AppError):
    status_code = 404
    default_message = "Recurso não encontrado"
