import re

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)


def only_digits(value: str | None) -> str:
    return "".join(ch for ch in (value or "") if ch.isdigit())


def _cpf_digit(digits: list[int], factor: int) -> int:
    total = 0
    for d in digits:
        total += d * factor
        factor -= 1
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(cpf: str | None) -> bool:
    """
    Valida os dois digitos verificadores do CPF (mod 11).

    Caracteres nao numericos sao descartados antes ("529.982.247-25" e valido).
    """
    numbers = only_digits(cpf)
    if len(numbers) != 11:
        return False

    digits = [int(c) for c in numbers]
    first = _cpf_digit(digits[:9], 10)
    second = _cpf_digit(digits[:10], 11)
    return first == digits[9] and second == digits[10]


def is_valid_email(email: str | None) -> bool:
    if not email:
        return False
    return EMAIL_RE.match(email) is not None


def is_filled(value) -> bool:
    """Regra das atualizacoes parciais: None e string vazia nao sobrescrevem."""
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def normalize_email(email: str | None) -> str:
    """E-mail como é gravado e comparado: sem espaços nas pontas e em minúsculas."""
    return (email or "").strip().lower()
