"""Validators — validação de requisições recebidas.

Estrutura:
- email/: requisições de envio de email
"""

__all__: list[str] = []
