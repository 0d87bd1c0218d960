"""API — camada de borda e adapters do provedor.

Responsabilidades:
- Receber requests HTTP de envio de email
- Validar payloads do chamador
- Construir payloads para o provedor Keplars
- Chamar o provedor e interpretar sua resposta

Subpastas:
- connectors/: adapters HTTP por provedor
- payload_builders/: roteamento e construção de payloads
- validators/: validação de requisições
- routes/: endpoints HTTP (envio, health)

NÃO PODE conter: orquestração de use cases.
"""
